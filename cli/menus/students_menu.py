# cli/menus/students_menu.py

"""
Manage Students menu for the Roster CLI.

This module defines the interface for managing `Student` records, including:
- Adding new students
- Replacing an existing student's details
- Removing students by id or by name, with a selection step when names collide
- Finding students by id or by name, and viewing the whole roster

All operations are routed through the `Roster` API; this module only handles console I/O.
"""

from typing import cast

import cli.menu_helpers as helpers
import cli.model_formatters as model_formatters
import core.formatters as formatters
from cli.menu_helpers import MenuSignal
from core.errors import ValidationError
from core.response import ErrorCode
from models.roster import Roster
from models.student import Student


def run(roster: Roster) -> None:
    """
    Top-level loop with dispatch for the Manage Students menu.

    Args:
        roster (Roster): The active `Roster`.

    Raises:
        RuntimeError: If the menu response is unrecognized.
    """
    title = formatters.format_banner_text("Manage Students")
    options = [
        ("Add Student", add_student),
        ("Edit Student", edit_student),
        ("Remove Student by ID", delete_student_by_id),
        ("Remove Student by Name", delete_student_by_name),
        ("Find Student by ID", find_student_by_id),
        ("Find Students by Name", find_students_by_name),
        ("View All Students", view_all_students),
    ]
    zero_option = "Return to Main Menu"

    while True:
        menu_response = helpers.display_menu(title, options, zero_option)

        if menu_response is MenuSignal.EXIT:
            break

        elif callable(menu_response):
            menu_response(roster)

        else:
            raise RuntimeError(f"Unexpected MenuResponse received: {menu_response}")


# === add and edit student ===


def add_student(roster: Roster) -> None:
    new_student = prompt_new_student()

    if new_student is None:
        helpers.returning_without_changes()
        return

    roster_response = roster.add(new_student)

    if not roster_response.success:
        helpers.display_response_failure(roster_response)
        print(f"\n{new_student.name} was not added.")

    else:
        print(f"\n{roster_response.detail}")


def edit_student(roster: Roster) -> None:
    """
    Replaces the details of an existing student with newly entered ones.

    Notes:
        - The replacement is a new record, so existing scores are discarded unless the user chooses to keep them.
    """
    student = helpers.find_student_by_id(roster)

    if student is MenuSignal.CANCEL:
        return
    student = cast(Student, student)

    print("\nYou are editing the following student:")
    print(model_formatters.format_student_multiline(student))

    new_student = prompt_new_student()

    if new_student is None:
        helpers.returning_without_changes()
        return

    if student.scores and helpers.confirm_action("Keep the existing scores?"):
        for subject, score in student.scores.items():
            new_student.set_score(subject, score)

    roster_response = roster.update(student.id, new_student)

    if not roster_response.success:
        helpers.display_response_failure(roster_response)
        helpers.returning_without_changes()

    else:
        print(f"\n{roster_response.detail}")


def prompt_new_student() -> Student | None:
    """
    Collects and validates the fields of a new `Student`.

    Returns:
        A new `Student` object, or None if the user cancels.
    """
    prompts = [
        ("Enter the student id (10 digits, leave blank to cancel):", Student.validate_id, False),
        ("Enter the name (leave blank to cancel):", Student.validate_name, False),
        ("Enter the gender (男/女, leave blank to cancel):", Student.validate_gender, False),
        ("Enter the class id (leave blank to cancel):", Student.validate_class_id, False),
        ("Enter the phone number (optional):", Student.validate_phone, True),
        ("Enter the email address (optional):", Student.validate_email, True),
    ]

    values = []

    for prompt, validator, optional in prompts:
        value = helpers.prompt_validated_input(prompt, validator, optional)

        if value is MenuSignal.CANCEL:
            return None

        values.append(cast(str, value))

    try:
        return Student(*values)

    except ValidationError as e:
        print(f"\n[ERROR] Could not create student: {e}")
        return None


# === remove student ===


def delete_student_by_id(roster: Roster) -> None:
    student_id = helpers.prompt_user_input_or_cancel(
        "Enter the id of the student to remove (leave blank to cancel):"
    )

    if student_id is MenuSignal.CANCEL:
        helpers.returning_without_changes()
        return
    student_id = cast(str, student_id)

    roster_response = roster.delete_by_id(student_id)

    if not roster_response.success:
        helpers.display_response_failure(roster_response)

    else:
        print(f"\n{roster_response.detail}")


def delete_student_by_name(roster: Roster) -> None:
    """
    Removes a student by exact name.

    Notes:
        - If several students share the name, the candidates are listed and the user picks one; the roster is then asked again with that selection.
    """
    name = helpers.prompt_user_input_or_cancel(
        "Enter the name of the student to remove (leave blank to cancel):"
    )

    if name is MenuSignal.CANCEL:
        helpers.returning_without_changes()
        return
    name = cast(str, name)

    roster_response = roster.delete_by_name(name)

    if roster_response.error is ErrorCode.AMBIGUOUS_MATCH:
        candidates = roster_response.data["candidates"]

        print(f"\nFound {len(candidates)} students with the same name:")
        helpers.display_students_multiline(candidates, show_index=True)

        selection = helpers.prompt_selection_index(len(candidates))

        if selection is None:
            helpers.returning_without_changes()
            return

        roster_response = roster.delete_by_name(name, selection)

    if not roster_response.success:
        helpers.display_response_failure(roster_response)

    else:
        print(f"\n{roster_response.detail}")


# === find and view students ===


def find_student_by_id(roster: Roster) -> None:
    student = helpers.find_student_by_id(roster)

    if student is MenuSignal.CANCEL:
        return
    student = cast(Student, student)

    print(f"\n{model_formatters.format_student_multiline(student)}")


def find_students_by_name(roster: Roster) -> None:
    name = helpers.prompt_user_input("Enter a name or part of a name to search for:")

    matches = roster.find_by_name_substring(name).data["records"]

    if not matches:
        print("\nYour search returned no results.")
        return

    print(f"\nYour search returned {len(matches)} students:")
    helpers.display_students_multiline(matches)


def view_all_students(roster: Roster) -> None:
    if roster.count() == 0:
        print("\nThere are no students in the roster.")
        return

    print(f"\n{formatters.format_banner_text('Student Roster')}")
    print(f"Total: {roster.count()}")
    helpers.display_results(roster.students, True, model_formatters.format_student_summary)

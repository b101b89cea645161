# cli/menus/scores_menu.py

"""
Manage Scores menu for the Roster CLI.

Provides recording a per-subject score for a student and displaying a student's score report.
"""

from typing import cast

import cli.menu_helpers as helpers
import core.formatters as formatters
from cli.menu_helpers import MenuSignal
from core.errors import ValidationError
from models.roster import Roster
from models.student import Student


def run(roster: Roster) -> None:
    title = formatters.format_banner_text("Manage Scores")
    options = [
        ("Record Score", record_score),
        ("View Score Report", view_score_report),
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


def record_score(roster: Roster) -> None:
    student = helpers.find_student_by_id(roster)

    if student is MenuSignal.CANCEL:
        return
    student = cast(Student, student)

    subject = helpers.prompt_user_input_or_cancel(
        "Enter the subject (leave blank to cancel):"
    )

    if subject is MenuSignal.CANCEL:
        helpers.returning_without_changes()
        return
    subject = cast(str, subject)

    if student.has_score(subject):
        current = formatters.format_score(student.get_score(subject))

        if not helpers.confirm_action(
            f"{student.name} already has {current} in {subject}. Overwrite it?"
        ):
            helpers.returning_without_changes()
            return

    score = prompt_score()

    if score is None:
        helpers.returning_without_changes()
        return

    roster_response = roster.set_score(student.id, subject, score)

    if not roster_response.success:
        helpers.display_response_failure(roster_response)

    else:
        print(f"\n{roster_response.detail}")


def prompt_score() -> float | None:
    while True:
        score_input = helpers.prompt_user_input_or_none(
            "Enter the score (0-100, leave blank to cancel):"
        )

        if score_input is None:
            return None

        try:
            return Student.validate_score(score_input)

        except ValidationError as e:
            print(f"\n[ERROR] {e.reason} Please try again.")


def view_score_report(roster: Roster) -> None:
    student_id = helpers.prompt_user_input_or_cancel(
        "Enter the student id (leave blank to cancel):"
    )

    if student_id is MenuSignal.CANCEL:
        return

    print(f"\n{roster.scores_report(cast(str, student_id))}")

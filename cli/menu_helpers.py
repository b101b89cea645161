# cli/menu_helpers.py

"""
Helper functions for CLI menus and user interaction in the Roster application.

This module provides utilities for:
- Displaying interactive menus and result lists
- Prompting for and validating user input
- Handling user selections and confirmation flows
- Displaying standard system messages and error feedback

These functions are shared across all menu modules to maintain consistent behavior and reduce duplication.
"""

from enum import Enum
from typing import Any, Callable, Iterable

import cli.model_formatters as model_formatters
import core.formatters as formatters
from core.response import Response
from models.roster import Roster
from models.student import Student


class MenuSignal(Enum):
    CANCEL = "CANCEL"
    EXIT = "EXIT"


# === display methods ===


def display_menu(
    title: str,
    options: list[tuple[str, Callable[..., Any]]],
    zero_option: str = "Return",
) -> MenuSignal | Callable[..., Any]:
    """
    Displays a numbered CLI menu and returns the selected action.

    Args:
        title (str): The heading displayed above the menu options.
        options (list[tuple[str, Callable[..., Any]]]): A list of (label, action) pairs to present.
        zero_option (str, optional): The label for the "cancel" or "exit" option. Defaults to "Return".

    Returns:
        MenuSignal.EXIT if the user selects the zero option.
        Callable[..., Any]: The function associated with the selected menu item.

    Notes:
        - Menu selection is repeated until a valid choice is made.
        - User input is matched by menu index, not by label.
    """
    while True:
        print(f"\n{title}")

        for i, (label, _) in enumerate(options, 1):
            print(f"{i}. {label}")

        print(f"0. {zero_option}")

        choice = prompt_user_input("Select an option:")

        if choice == "0":
            return MenuSignal.EXIT

        try:
            index = int(choice) - 1

            if index < 0:
                raise IndexError(choice)

            return options[index][1]

        except (ValueError, IndexError):
            print("Invalid selection. Please try again.")


def display_results(
    results: Iterable[Any],
    show_index: bool = False,
    formatter: Callable[[Any], str] = lambda x: str(x),
) -> None:
    for i, result in enumerate(results, 1):
        prefix = f"{i:>2}. " if show_index else ""
        print(f"{prefix}{formatter(result)}")


def display_students_multiline(students: Iterable[Student], show_index: bool = False) -> None:
    divider = formatters.format_divider()

    for i, student in enumerate(students, 1):
        if show_index:
            print(f"[{i}]")

        print(model_formatters.format_student_multiline(student))
        print(divider)


# === prompt user input methods ===


# Prompt Helpers
#
# Conventions:
# - `prompt_user_input()` is the base function, used by all others to standardize the UI format.
# - Empty string responses are overloaded for control signals:
#     - `prompt_user_input_or_cancel()` returns `MenuSignal.CANCEL` on blank input.
#     - `prompt_user_input_or_none()` returns `None`.
# - `confirm_action()` loops until the user enters a valid yes/no response.


def confirm_action(prompt: str) -> bool:
    while True:
        choice = prompt_user_input(f"{prompt} (y/n): ").lower()

        if choice == "y" or choice == "yes":
            return True

        elif choice == "n" or choice == "no":
            return False

        else:
            print("Invalid selection. Please try again.")


def prompt_user_input(prompt: str) -> str:
    return input(f"\n{prompt}\n  >> ").strip()


def prompt_user_input_or_cancel(prompt: str) -> str | MenuSignal:
    response = prompt_user_input(prompt)
    return MenuSignal.CANCEL if response == "" else response


def prompt_user_input_or_none(prompt: str) -> str | None:
    response = prompt_user_input(prompt)
    return None if response == "" else response


def prompt_validated_input(
    prompt: str,
    validator: Callable[[str], Any],
    optional: bool = False,
) -> str | MenuSignal:
    """
    Loops a prompt until the input passes a `Student` field validator.

    Args:
        prompt (str): The prompt text.
        validator (Callable[[str], Any]): A validator that raises `ValueError` on bad input.
        optional (bool): If True, blank input is accepted and returned as "". Otherwise blank input cancels.

    Returns:
        The accepted input, "" for a skipped optional field, or `MenuSignal.CANCEL`.
    """
    while True:
        response = prompt_user_input(prompt)

        if response == "":
            return "" if optional else MenuSignal.CANCEL

        try:
            validator(response)
            return response

        except ValueError as e:
            print(f"\n[ERROR] {e}")
            print("Please try again.")


def prompt_selection_index(count: int) -> int | None:
    """
    Prompts for a 1-based index into a displayed list.

    Args:
        count (int): The number of displayed items.

    Returns:
        The selected 1-based index, or None if the user cancels with "0" or blank input.
    """
    while True:
        choice = prompt_user_input(f"Select a student (1-{count}, 0 to cancel):")

        if choice in ("", "0"):
            return None

        try:
            index = int(choice)

        except ValueError:
            print("\nInvalid selection. Please try again.")
            continue

        if 1 <= index <= count:
            return index

        print("\nInvalid selection. Please try again.")


# === finder methods ===


def find_student_by_id(roster: Roster) -> Student | MenuSignal:
    """
    Prompts the user for a student id and looks it up in the roster.

    Returns:
        - The matching `Student`.
        - `MenuSignal.CANCEL` if the user cancels or no student has the id.
    """
    student_id = prompt_user_input_or_cancel("Enter the student id (leave blank to cancel):")

    if student_id is MenuSignal.CANCEL:
        return MenuSignal.CANCEL

    roster_response = roster.find_by_id(student_id)

    if not roster_response.success:
        display_response_failure(roster_response)
        return MenuSignal.CANCEL

    return roster_response.data["record"]


# === often used messages ===


def returning_without_changes() -> None:
    print("\nReturning without changes.")


def display_response_failure(response: Response) -> None:
    """
    Displays a formatted error message based on a failed `Response`.

    Notes:
        - Does nothing if the response was successful.
        - Enum error codes are printed by name; string errors are printed as-is.
    """
    if response.success:
        return

    error_label = (
        response.error.name if isinstance(response.error, Enum) else str(response.error)
    )

    print(f"\n[ERROR: {error_label}] {response.detail}")

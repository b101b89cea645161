# cli/main.py

"""
Main Menu for the Roster CLI.

Builds the configuration, logging, and `Roster` for the session, and provides the top-level
menu with save and load options for the configured roster file.
"""

import cli.menu_helpers as helpers
import core.formatters as formatters
from cli.menu_helpers import MenuSignal
from cli.menus import scores_menu, students_menu
from core.config import RosterConfig, load_config
from core.logging_config import configure_logging, get_logger
from models.roster import Roster


def run_cli() -> None:
    """
    Top-level loop with dispatch for the Main menu.

    Raises:
        RuntimeError: If the menu response is unrecognized.
    """
    config = load_config()
    configure_logging(config.log_level)
    roster = Roster(logger=get_logger("Roster", config.log_level))

    title = formatters.format_banner_text("STUDENT ROSTER MANAGER")
    options = [
        ("Manage Students", lambda: students_menu.run(roster)),
        ("Manage Scores", lambda: scores_menu.run(roster)),
        (f"Save Roster to {config.data_file}", lambda: save_roster(roster, config)),
        (
            f"Save Roster to {config.data_file} (sorted by id)",
            lambda: save_roster_sorted(roster, config),
        ),
        (f"Load Roster from {config.data_file}", lambda: load_roster(roster, config)),
    ]
    zero_option = "Exit Program"

    while True:
        menu_response = helpers.display_menu(title, options, zero_option)

        if menu_response is MenuSignal.EXIT:
            exit_program()

        elif callable(menu_response):
            menu_response()

        else:
            raise RuntimeError(f"Unexpected MenuResponse received: {menu_response}")


def save_roster(roster: Roster, config: RosterConfig) -> None:
    print("\nSaving roster ...")

    roster_response = roster.save(config.data_file, config.include_header)

    if not roster_response.success:
        helpers.display_response_failure(roster_response)
        return

    print(f"... {roster_response.detail}")


def save_roster_sorted(roster: Roster, config: RosterConfig) -> None:
    """
    Saves the roster to the configured file, sorted by student id.

    Notes:
        - Sorting reorders the live roster, not only the written file.
        - The sorted save always writes a header line, regardless of `config.include_header`.
    """
    print("\nSaving roster ...")

    roster_response = roster.save_sorted(config.data_file)

    if not roster_response.success:
        helpers.display_response_failure(roster_response)
        return

    print(f"... {roster_response.detail}")


def load_roster(roster: Roster, config: RosterConfig) -> None:
    """
    Replaces the roster with the contents of the configured file.

    Notes:
        - If the roster holds students, the user must confirm before they are replaced.
    """
    if roster.count() > 0 and not helpers.confirm_action(
        f"Loading will replace the {roster.count()} students currently in the roster. Continue?"
    ):
        helpers.returning_without_changes()
        return

    print("\nLoading roster ...")

    roster_response = roster.load(config.data_file)

    if not roster_response.success:
        helpers.display_response_failure(roster_response)
        return

    print(f"... {roster_response.detail}")


def exit_program():
    """
    Displays an exit banner and terminates the CLI program.

    Raises:
        SystemExit: Always raised to immediately terminate execution.

    Notes:
        - Unsaved changes are not written automatically; saving is the user's responsibility.
    """
    exit_banner = formatters.format_banner_text("Exiting Program")
    print(f"\n{exit_banner}\n")

    raise SystemExit


if __name__ == "__main__":
    run_cli()

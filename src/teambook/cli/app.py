"""CLI application entry point and command routing for teambook.

This module is the **sole error boundary** for the entire application.
It catches :class:`~teambook.exceptions.TeambookError`, ``KeyboardInterrupt``,
and any unexpected ``Exception``, rendering user-friendly messages via Rich
and returning well-defined exit codes.

Architecture notes
------------------
* No business logic lives here — all work is delegated to the core layer.
* ``print()`` is forbidden outside the CLI layer; Rich console is used
  exclusively.
* This module is the only place that translates between the domain world
  and the OS process exit code.
"""

from __future__ import annotations

import argparse
import sys

from teambook.cli import exit_codes
from teambook.cli.console import configure_logging, console, escape
from teambook.exceptions import TeambookError
from teambook.version import __version__


# ---------------------------------------------------------------------------
# Argument parser
# ---------------------------------------------------------------------------

def _build_parser() -> argparse.ArgumentParser:
    """Construct the top-level argument parser.

    * ``teambook name <NAME>``       — validate a team name
    * ``teambook import file=<PATH>`` — resolve the source of an import
    * ``teambook --version``
    """
    parser = argparse.ArgumentParser(
        prog="teambook",
        description="Tutorial-team management for a tutor's contact book.",
    )
    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Show debug logging.",
    )
    commands = parser.add_subparsers(dest="command")

    name_parser = commands.add_parser("name", help="Check that a team name is valid.")
    name_parser.add_argument("team_name", help="Team name, e.g. F12-3.")

    import_parser = commands.add_parser("import", help="Resolve the file an import reads.")
    import_parser.add_argument(
        "arguments",
        nargs=argparse.REMAINDER,
        help="Import arguments, e.g. file=data/contacts.json.",
    )
    return parser


# ---------------------------------------------------------------------------
# Command dispatch
# ---------------------------------------------------------------------------

def _handle_name(team_name: str) -> int:
    """Construct a team named *team_name*; invalid names raise."""
    from teambook.core.team import Team

    team = Team(team_name)
    if Team.is_none_team_name(team.name):
        console.print("[yellow]The empty name marks a person with no team.[/yellow]")
    else:
        console.print(f"[bold green]{escape(team.name)}[/bold green] is a valid team name.")
    return exit_codes.SUCCESS


def _handle_import(arguments: list[str]) -> int:
    """Extract the import file path and report it."""
    from teambook.core.import_args import extract_import_path

    file_path = extract_import_path(" ".join(arguments))
    console.print(f"[bold]Import source:[/bold] {escape(file_path)}")
    return exit_codes.SUCCESS


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------

def main(argv: list[str] | None = None) -> int:
    """Run the teambook CLI.

    Parameters
    ----------
    argv:
        Explicit argument list.  When ``None`` (default), ``sys.argv[1:]``
        is used.  Accepting *argv* enables deterministic testing without
        monkeypatching.

    Returns
    -------
    int
        OS process exit code.
    """
    parser = _build_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return exit_codes.SUCCESS

    configure_logging(args.verbose)

    if args.command == "name":
        return _handle_name(args.team_name)

    return _handle_import(args.arguments)


# ---------------------------------------------------------------------------
# Script-level error boundary
# ---------------------------------------------------------------------------

def cli() -> None:
    """Top-level error boundary invoked by the console-script entry point.

    This function wraps :func:`main` and guarantees the process never
    exits with a raw stack trace during normal usage.
    """
    try:
        code = main()
        sys.exit(code)
    except TeambookError as exc:
        console.print(f"[bold red]Error:[/bold red] {escape(exc)}")
        if exc.hint:
            console.print(f"[yellow]Hint:[/yellow] {escape(exc.hint)}")
        sys.exit(exit_codes.GENERAL_ERROR)
    except KeyboardInterrupt:
        console.print("\n[yellow]Aborted by user.[/yellow]")
        sys.exit(exit_codes.KEYBOARD_INTERRUPT)
    except Exception as exc:  # noqa: BLE001
        console.print(
            "[bold red]Unexpected error.[/bold red] "
            "Please report this issue.\n"
            f"  {type(exc).__name__}: {escape(exc)}"
        )
        sys.exit(exit_codes.UNEXPECTED_ERROR)

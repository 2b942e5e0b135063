"""Rename a calendar set."""

import logging

import typer
from rich.markup import escape
from typing_extensions import Annotated

from cli.context import get_context
from cli.display import console
from periodic_notes.exceptions import CalendarSetError

logger = logging.getLogger(__name__)


def mv(
    old_name: Annotated[
        str,
        typer.Argument(help="Current calendar set name"),
    ],
    new_name: Annotated[
        str,
        typer.Argument(help="New calendar set name"),
    ],
) -> None:
    """Rename a calendar set.

    If the set is active, the active set follows the rename.

    Example:
        periodic-notes mv Default Work
    """
    ctx = get_context()
    manager = ctx.manager

    if old_name == new_name.strip():
        console.print("Name unchanged.")
        return

    # Renaming an unknown set is a silent no-op in the manager
    try:
        manager.get_calendar_set(old_name)
        manager.rename_calendar_set(old_name, new_name)
    except CalendarSetError as e:
        logger.error(str(e))
        raise typer.Exit(1)

    console.print(
        f"\n[bold green]✓[/bold green] Calendar set renamed: '{escape(old_name)}' → '{escape(new_name)}'"
    )

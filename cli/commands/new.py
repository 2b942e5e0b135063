"""Create a new calendar set."""

import logging

import typer
from rich.markup import escape
from typing_extensions import Annotated

from cli.context import get_context
from cli.display import console
from periodic_notes.exceptions import CalendarSetError

logger = logging.getLogger(__name__)


def new(
    name: Annotated[
        str,
        typer.Argument(help="Calendar set name"),
    ],
    copy_from: Annotated[
        str | None,
        typer.Option(
            "--from", "-f", help="Copy the configuration of an existing calendar set"
        ),
    ] = None,
) -> None:
    """Create a new calendar set and make it active.

    Example:
        periodic-notes new Work --from Default
    """
    ctx = get_context()
    manager = ctx.manager

    try:
        # Seed the default set first so --from Default works on a fresh install
        manager.get_calendar_sets()
        calendar_set = manager.create_calendar_set(name, copy_from=copy_from)
    except CalendarSetError as e:
        logger.error(str(e))
        raise typer.Exit(1)

    console.print(
        f"\n[bold green]✓[/bold green] Calendar set '{escape(calendar_set.id)}' created"
    )
    if copy_from:
        console.print(f"  Copied from: {escape(copy_from)}")
    console.print(f"  Settings: {ctx.config.settings_file}")

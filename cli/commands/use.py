"""Switch the active calendar set."""

import logging

import typer
from rich.markup import escape
from typing_extensions import Annotated

from cli.context import get_context
from cli.display import console
from periodic_notes.exceptions import CalendarSetError, NotFoundError

logger = logging.getLogger(__name__)


def use(
    calendar_set_id: Annotated[
        str,
        typer.Argument(help="Calendar set to make active"),
    ],
    force: Annotated[
        bool,
        typer.Option(
            "--force", "-f", help="Activate even if the calendar set does not exist"
        ),
    ] = False,
) -> None:
    """Switch the active calendar set.

    Example:
        periodic-notes use Work
    """
    ctx = get_context()
    manager = ctx.manager

    try:
        manager.get_calendar_set(calendar_set_id)
    except NotFoundError as e:
        if not force:
            logger.error(str(e))
            raise typer.Exit(1)
        logger.warning(f"{e}; activating anyway")
    except CalendarSetError as e:
        logger.error(str(e))
        raise typer.Exit(1)

    try:
        manager.set_active_set(calendar_set_id)
    except CalendarSetError as e:
        logger.error(str(e))
        raise typer.Exit(1)

    console.print(
        f"\n[bold green]✓[/bold green] Active calendar set: '{escape(calendar_set_id)}'"
    )

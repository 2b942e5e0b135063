"""Show the active calendar set configuration."""

import logging

import typer
from typing_extensions import Annotated

from cli.context import get_context
from cli.display.table_renderer import GranularityInfo, TableRenderer
from periodic_notes.exceptions import CalendarSetError
from periodic_notes.models import GRANULARITIES, Granularity

logger = logging.getLogger(__name__)


def show(
    granularity: Annotated[
        Granularity | None,
        typer.Argument(help="Only show this granularity"),
    ] = None,
) -> None:
    """Show the active calendar set configuration.

    Formats fall back to the built-in default when a granularity has none.

    Example:
        periodic-notes show week
    """
    ctx = get_context()
    manager = ctx.manager
    renderer = TableRenderer()

    granularities = [granularity] if granularity is not None else GRANULARITIES

    try:
        # Seed the default set on first run
        manager.get_calendar_sets()

        rows = []
        for g in granularities:
            config = manager.get_active_config(g)
            rows.append(
                GranularityInfo(
                    granularity=g.value,
                    enabled=config.enabled,
                    folder=config.folder,
                    format=manager.get_format(g),
                    template_path=config.template_path,
                )
            )
    except CalendarSetError as e:
        logger.error(str(e))
        raise typer.Exit(1)

    renderer.render_granularities(rows, manager.get_active_set())

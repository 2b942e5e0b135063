"""List calendar sets."""

import logging

import typer

from cli.context import get_context
from cli.display.table_renderer import CalendarSetInfo, TableRenderer
from periodic_notes.exceptions import CalendarSetError
from periodic_notes.models import GRANULARITIES

logger = logging.getLogger(__name__)


def ls() -> None:
    """List calendar sets.

    The first run creates a default calendar set, migrating legacy
    settings if any are present.
    """
    ctx = get_context()
    manager = ctx.manager
    renderer = TableRenderer()

    try:
        calendar_sets = manager.get_calendar_sets()
    except CalendarSetError as e:
        logger.error(str(e))
        raise typer.Exit(1)

    active_id = manager.get_active_set()
    calendar_set_info = [
        CalendarSetInfo(
            id=calendar_set.id,
            ctime=calendar_set.ctime,
            is_active=calendar_set.id == active_id,
            enabled=[g.value for g in GRANULARITIES if calendar_set.is_enabled(g)],
        )
        for calendar_set in calendar_sets
    ]

    renderer.render_calendar_set_list(calendar_set_info, ctx.config.settings_file)

"""One-time migration from the legacy flat settings format."""

import logging

from periodic_notes.models import CalendarSet, PeriodicConfig, Settings
from periodic_notes.models.settings import PeriodicitySettings
from periodic_notes.utils import now_timestamp

logger = logging.getLogger(__name__)

# Legacy field name -> calendar set field name
LEGACY_FIELDS = {
    "daily": "day",
    "weekly": "week",
    "monthly": "month",
    "quarterly": "quarter",
    "yearly": "year",
}


def is_legacy_settings(settings: Settings) -> bool:
    """Check whether any legacy per-granularity record is present."""
    return any(getattr(settings, field) is not None for field in LEGACY_FIELDS)


def _migrate_config(legacy: PeriodicitySettings | None) -> PeriodicConfig:
    """Convert one legacy record into a PeriodicConfig."""
    if legacy is None:
        return PeriodicConfig()
    return PeriodicConfig(
        enabled=legacy.enabled,
        format=legacy.format or "",
        folder=legacy.folder or "",
        template_path=legacy.template,
    )


def migrate_legacy_settings(settings: Settings, calendar_set_id: str) -> CalendarSet:
    """Build a calendar set from legacy settings.

    Args:
        settings: Settings carrying legacy per-granularity records
        calendar_set_id: Id for the migrated set

    Returns:
        CalendarSet with one config per granularity
    """
    configs = {
        target: _migrate_config(getattr(settings, legacy_field))
        for legacy_field, target in LEGACY_FIELDS.items()
    }
    migrated = [field for field in LEGACY_FIELDS if getattr(settings, field) is not None]
    logger.debug(f"Migrating legacy settings: {', '.join(migrated)}")

    return CalendarSet(id=calendar_set_id, ctime=now_timestamp(), **configs)

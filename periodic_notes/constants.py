"""Shared constants for periodic notes."""

from periodic_notes.models.periodic_config import Granularity, PeriodicConfig

# Identifier used for the migrated or seeded calendar set
DEFAULT_CALENDARSET_ID = "Default"

# Filename formats (moment.js tokens, as stored in the host settings)
DEFAULT_FORMAT: dict[Granularity, str] = {
    Granularity.DAY: "YYYY-MM-DD",
    Granularity.WEEK: "gggg-[W]ww",
    Granularity.MONTH: "YYYY-MM",
    Granularity.QUARTER: "YYYY-[Q]Q",
    Granularity.YEAR: "YYYY",
}

DEFAULT_PERIODIC_CONFIG = PeriodicConfig(
    enabled=False,
    folder="",
    format="",
    template_path=None,
)

# Default settings file
SETTINGS_FILENAME = "settings.json"

"""Calendar set model with Pydantic v2 validation."""

from pydantic import BaseModel

from periodic_notes.models.periodic_config import Granularity, PeriodicConfig


class CalendarSet(BaseModel):
    """Named bundle of per-granularity periodic note configuration.

    The id doubles as the display name and must be unique within the
    settings. Each granularity has its own PeriodicConfig; sets created by
    this package always carry all five, but a hand-edited settings file may
    omit some, so they are optional on load.
    """

    id: str
    ctime: str
    day: PeriodicConfig | None = None
    week: PeriodicConfig | None = None
    month: PeriodicConfig | None = None
    quarter: PeriodicConfig | None = None
    year: PeriodicConfig | None = None

    class Config:
        """Pydantic config."""

        extra = "forbid"

    def get_config(self, granularity: Granularity) -> PeriodicConfig | None:
        """Get the config for a granularity, or None if it is missing."""
        return getattr(self, Granularity(granularity).value)

    def is_enabled(self, granularity: Granularity) -> bool:
        """Check whether notes of this granularity are enabled."""
        config = self.get_config(granularity)
        return bool(config and config.enabled)

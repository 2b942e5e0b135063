"""Host settings model, including legacy pre-calendar-set fields."""

from pydantic import BaseModel

from periodic_notes.models.calendar_set import CalendarSet


class PeriodicitySettings(BaseModel):
    """Legacy flat per-granularity settings record."""

    enabled: bool = False
    folder: str | None = None
    format: str | None = None
    template: str | None = None


class Settings(BaseModel):
    """Settings owned by the host application.

    Only the calendar set fields are managed here. The legacy per-granularity
    records are kept so that old settings files can be detected and migrated
    once. Any other keys the host stores are preserved as extra fields.
    """

    active_calendar_set: str = ""
    calendar_sets: list[CalendarSet] = []

    # Legacy fields (pre-calendar-set format)
    show_getting_started_banner: bool | None = None
    has_migrated_daily_note_settings: bool | None = None
    has_migrated_weekly_note_settings: bool | None = None
    daily: PeriodicitySettings | None = None
    weekly: PeriodicitySettings | None = None
    monthly: PeriodicitySettings | None = None
    quarterly: PeriodicitySettings | None = None
    yearly: PeriodicitySettings | None = None

    class Config:
        """Pydantic config."""

        extra = "allow"

    def find_calendar_set(self, calendar_set_id: str) -> CalendarSet | None:
        """Find a calendar set by id."""
        return next(
            (c for c in self.calendar_sets if c.id == calendar_set_id), None
        )

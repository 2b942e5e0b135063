import pytest

from periodic_notes.calendar_set_manager import CalendarSetManager
from periodic_notes.models import CalendarSet, PeriodicConfig, Settings
from periodic_notes.models.settings import PeriodicitySettings
from periodic_notes.storage import InMemorySettingsStore


def make_calendar_set(calendar_set_id: str, **configs) -> CalendarSet:
    """Build a calendar set with disabled defaults for unspecified granularities."""
    fields = {g: PeriodicConfig() for g in ("day", "week", "month", "quarter", "year")}
    fields.update(configs)
    return CalendarSet(id=calendar_set_id, ctime="2025-01-01T09:00:00+00:00", **fields)


@pytest.fixture
def legacy_settings():
    """Settings in the pre-calendar-set format."""
    return Settings(
        show_getting_started_banner=False,
        has_migrated_daily_note_settings=True,
        has_migrated_weekly_note_settings=False,
        daily=PeriodicitySettings(
            enabled=True, folder="journal", format="YYYY-MM-DD", template="t/daily.md"
        ),
        weekly=PeriodicitySettings(enabled=True, folder=None, format=""),
        monthly=PeriodicitySettings(enabled=False),
        quarterly=PeriodicitySettings(enabled=False),
        yearly=PeriodicitySettings(enabled=True, folder="years", template=None),
    )


@pytest.fixture
def two_set_settings():
    """Settings with two calendar sets, 'Default' active."""
    return Settings(
        active_calendar_set="Default",
        calendar_sets=[
            make_calendar_set(
                "Default",
                day=PeriodicConfig(enabled=True, folder="daily", format="DD-MM-YYYY"),
                week=PeriodicConfig(enabled=True, folder="weekly"),
            ),
            make_calendar_set(
                "Work",
                month=PeriodicConfig(enabled=True, folder="work/months", format="MMM YYYY"),
            ),
        ],
    )


@pytest.fixture
def store(two_set_settings):
    """In-memory store seeded with two calendar sets."""
    return InMemorySettingsStore(two_set_settings)


@pytest.fixture
def manager(store):
    """Calendar set manager over the seeded store."""
    return CalendarSetManager(store)

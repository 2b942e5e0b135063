"""Tests for CalendarSetManager."""

from unittest.mock import MagicMock

import pytest

from periodic_notes.calendar_set_manager import CalendarSetManager
from periodic_notes.constants import DEFAULT_FORMAT, DEFAULT_PERIODIC_CONFIG
from periodic_notes.exceptions import ConflictError, NotFoundError, ValidationError
from periodic_notes.models import (
    GRANULARITIES,
    CalendarSet,
    Granularity,
    PeriodicConfig,
    Settings,
)
from periodic_notes.storage import InMemorySettingsStore
from tests.conftest import make_calendar_set


@pytest.fixture
def spy_store(two_set_settings):
    """Store wrapped in a mock so update() calls can be asserted."""
    return MagicMock(wraps=InMemorySettingsStore(two_set_settings))


@pytest.fixture
def dangling_manager(two_set_settings):
    """Manager whose active calendar set does not exist."""
    settings = two_set_settings.model_copy(update={"active_calendar_set": "Missing"})
    return CalendarSetManager(InMemorySettingsStore(settings))


# get_calendar_sets


def test_get_calendar_sets_migrates_legacy_settings(legacy_settings):
    """Legacy settings become the single, active 'Default' set."""
    store = InMemorySettingsStore(legacy_settings)
    manager = CalendarSetManager(store)

    calendar_sets = manager.get_calendar_sets()

    assert len(calendar_sets) == 1
    calendar_set = calendar_sets[0]
    assert calendar_set.id == "Default"
    assert calendar_set.day == PeriodicConfig(
        enabled=True, folder="journal", format="YYYY-MM-DD", template_path="t/daily.md"
    )
    assert calendar_set.week == PeriodicConfig(enabled=True, folder="", format="")
    assert calendar_set.year == PeriodicConfig(enabled=True, folder="years")
    assert store.get().active_calendar_set == "Default"
    assert manager.get_active_granularities() == [
        Granularity.DAY,
        Granularity.WEEK,
        Granularity.YEAR,
    ]


def test_get_calendar_sets_creates_default():
    """Without legacy data a disabled 'Default' set is created and activated."""
    store = InMemorySettingsStore()
    manager = CalendarSetManager(store)

    calendar_sets = manager.get_calendar_sets()

    assert [c.id for c in calendar_sets] == ["Default"]
    for g in GRANULARITIES:
        config = calendar_sets[0].get_config(g)
        assert config.enabled is False
        assert config.folder == ""
        assert config.format == ""
    assert manager.get_active_set() == "Default"
    assert manager.get_active_granularities() == []


def test_get_calendar_sets_custom_default_id():
    """The seeded set uses the configured default id."""
    manager = CalendarSetManager(InMemorySettingsStore(), default_calendar_set="Personal")
    assert [c.id for c in manager.get_calendar_sets()] == ["Personal"]
    assert manager.get_active_set() == "Personal"


def test_get_calendar_sets_is_idempotent(legacy_settings):
    """A second call neither re-migrates nor writes."""
    store = MagicMock(wraps=InMemorySettingsStore(legacy_settings))
    manager = CalendarSetManager(store)

    first = manager.get_calendar_sets()
    assert store.update.call_count == 1

    second = manager.get_calendar_sets()
    assert store.update.call_count == 1
    assert second == first


def test_get_calendar_sets_existing(manager, two_set_settings):
    """Existing sets are returned unchanged."""
    assert manager.get_calendar_sets() == two_set_settings.calendar_sets


def test_get_calendar_sets_repairs_nothing_else(spy_store):
    """Existing sets with a dangling active pointer are returned as-is."""
    manager = CalendarSetManager(spy_store)
    manager.set_active_set("Missing")
    spy_store.update.reset_mock()

    assert [c.id for c in manager.get_calendar_sets()] == ["Default", "Work"]
    spy_store.update.assert_not_called()
    assert manager.get_active_set() == "Missing"


# Accessors


def test_get_active_set_unchecked():
    """The active id is returned even when no such set exists."""
    manager = CalendarSetManager(
        InMemorySettingsStore(Settings(active_calendar_set="Nowhere"))
    )
    assert manager.get_active_set() == "Nowhere"


def test_get_active_config(manager):
    """The active set's config is returned."""
    config = manager.get_active_config(Granularity.DAY)
    assert config == PeriodicConfig(enabled=True, folder="daily", format="DD-MM-YYYY")


def test_get_active_config_missing_granularity():
    """A set without a granularity config falls back to the default config."""
    settings = Settings(
        active_calendar_set="Partial",
        calendar_sets=[CalendarSet(id="Partial", ctime="", day=PeriodicConfig(enabled=True))],
    )
    manager = CalendarSetManager(InMemorySettingsStore(settings))

    assert manager.get_active_config(Granularity.MONTH) == DEFAULT_PERIODIC_CONFIG
    assert manager.get_format(Granularity.MONTH) == "YYYY-MM"
    assert manager.get_inactive_granularities() == [
        Granularity.WEEK,
        Granularity.MONTH,
        Granularity.QUARTER,
        Granularity.YEAR,
    ]


def test_get_format(manager):
    """Non-empty formats win; empty formats use the built-in default."""
    assert manager.get_format(Granularity.DAY) == "DD-MM-YYYY"
    assert manager.get_format(Granularity.WEEK) == "gggg-[W]ww"
    assert manager.get_format(Granularity.QUARTER) == "YYYY-[Q]Q"


@pytest.mark.parametrize("granularity", GRANULARITIES)
def test_get_format_defaults(granularity):
    """Every granularity has a built-in default format."""
    manager = CalendarSetManager(InMemorySettingsStore())
    manager.get_calendar_sets()
    assert manager.get_format(granularity) == DEFAULT_FORMAT[granularity]


def test_active_and_inactive_granularities(manager):
    """Granularities are partitioned by the enabled flag."""
    active = manager.get_active_granularities()
    inactive = manager.get_inactive_granularities()

    assert active == [Granularity.DAY, Granularity.WEEK]
    assert inactive == [Granularity.MONTH, Granularity.QUARTER, Granularity.YEAR]
    assert set(active) | set(inactive) == set(GRANULARITIES)
    assert not set(active) & set(inactive)


def test_granularities_follow_active_set(manager):
    """Switching the active set switches the partition."""
    manager.set_active_set("Work")
    assert manager.get_active_granularities() == [Granularity.MONTH]
    assert manager.get_format(Granularity.MONTH) == "MMM YYYY"


@pytest.mark.parametrize(
    "call",
    [
        lambda m: m.get_active_config(Granularity.DAY),
        lambda m: m.get_format(Granularity.DAY),
        lambda m: m.get_active_granularities(),
        lambda m: m.get_inactive_granularities(),
    ],
)
def test_accessors_raise_on_dangling_active_set(dangling_manager, call):
    """Accessors fail instead of repairing a dangling active set."""
    with pytest.raises(NotFoundError, match="No active calendar set found"):
        call(dangling_manager)


def test_accessors_do_not_initialize():
    """Accessors on empty settings fail rather than seed a default set."""
    store = InMemorySettingsStore()
    manager = CalendarSetManager(store)

    with pytest.raises(NotFoundError):
        manager.get_active_config(Granularity.DAY)
    assert store.get().calendar_sets == []


def test_get_calendar_set(manager):
    """Sets are looked up by exact id."""
    assert manager.get_calendar_set("Work").id == "Work"
    with pytest.raises(NotFoundError, match="'work' not found"):
        manager.get_calendar_set("work")


# rename_calendar_set


def test_rename_active_set():
    """Renaming the active set moves the active pointer too."""
    store = InMemorySettingsStore(
        Settings(active_calendar_set="Default", calendar_sets=[make_calendar_set("Default")])
    )
    manager = CalendarSetManager(store)

    manager.rename_calendar_set("Default", "Work")

    settings = store.get()
    assert [c.id for c in settings.calendar_sets] == ["Work"]
    assert settings.active_calendar_set == "Work"


def test_rename_inactive_set(manager, store):
    """Renaming another set leaves the active pointer alone."""
    manager.rename_calendar_set("Work", "Office")

    settings = store.get()
    assert [c.id for c in settings.calendar_sets] == ["Default", "Office"]
    assert settings.active_calendar_set == "Default"
    assert settings.calendar_sets[1].month.folder == "work/months"


@pytest.mark.parametrize("proposed_name", ["Default", " Default", "Default  "])
def test_rename_to_same_name_is_noop(spy_store, proposed_name):
    """Renaming to the current name (after trimming) does not touch the store."""
    manager = CalendarSetManager(spy_store)
    manager.rename_calendar_set("Default", proposed_name)
    spy_store.update.assert_not_called()


@pytest.mark.parametrize("proposed_name", ["", "   "])
def test_rename_requires_name(spy_store, proposed_name):
    """Blank names are rejected before the store is touched."""
    manager = CalendarSetManager(spy_store)
    with pytest.raises(ValidationError, match="Name required"):
        manager.rename_calendar_set("Default", proposed_name)
    spy_store.update.assert_not_called()


def test_rename_conflict(store, two_set_settings):
    """Renaming onto another set's id fails and changes nothing."""
    manager = CalendarSetManager(store)

    with pytest.raises(ConflictError, match="'Work' already exists"):
        manager.rename_calendar_set("Default", "Work")
    assert store.get() == two_set_settings


def test_rename_conflict_uses_untrimmed_name(store):
    """The conflict check compares the raw proposed name."""
    manager = CalendarSetManager(store)

    manager.rename_calendar_set("Default", "Work ")

    settings = store.get()
    assert [c.id for c in settings.calendar_sets] == ["Work ", "Work"]
    assert settings.active_calendar_set == "Work "


def test_rename_unknown_set_persists_unchanged(spy_store, two_set_settings):
    """Renaming an unknown set succeeds silently but still writes."""
    manager = CalendarSetManager(spy_store)

    manager.rename_calendar_set("Missing", "Other")

    spy_store.update.assert_called_once()
    assert spy_store.get() == two_set_settings


# set_active_set


def test_set_active_set(manager, store):
    """The active pointer is updated and persisted."""
    manager.set_active_set("Work")
    assert store.get().active_calendar_set == "Work"
    assert manager.get_active_set() == "Work"


def test_set_active_set_unknown_id(manager):
    """Unknown ids are accepted; later lookups fail."""
    manager.set_active_set("Missing")
    assert manager.get_active_set() == "Missing"
    with pytest.raises(NotFoundError):
        manager.get_active_granularities()


# create_calendar_set


def test_create_calendar_set(manager, store):
    """New sets are appended, disabled and active."""
    calendar_set = manager.create_calendar_set("Travel")

    settings = store.get()
    assert [c.id for c in settings.calendar_sets] == ["Default", "Work", "Travel"]
    assert settings.active_calendar_set == "Travel"
    assert settings.calendar_sets[-1] == calendar_set
    assert manager.get_active_granularities() == []


def test_create_calendar_set_copy_from(manager):
    """Configs are copied from an existing set."""
    manager.create_calendar_set("Work 2", copy_from="Work")

    assert manager.get_active_set() == "Work 2"
    assert manager.get_active_granularities() == [Granularity.MONTH]
    assert manager.get_format(Granularity.MONTH) == "MMM YYYY"


def test_create_calendar_set_copy_from_missing(spy_store):
    """Copying from an unknown set fails without writing."""
    manager = CalendarSetManager(spy_store)
    with pytest.raises(NotFoundError):
        manager.create_calendar_set("New", copy_from="Missing")
    spy_store.update.assert_not_called()


def test_create_calendar_set_conflict(store, two_set_settings):
    """Duplicate names are rejected and the store is unchanged."""
    manager = CalendarSetManager(store)
    with pytest.raises(ConflictError):
        manager.create_calendar_set("Work")
    assert store.get() == two_set_settings


def test_create_calendar_set_requires_name(spy_store):
    """Blank names are rejected."""
    manager = CalendarSetManager(spy_store)
    with pytest.raises(ValidationError):
        manager.create_calendar_set("  ")
    spy_store.update.assert_not_called()

"""Pure settings transformations used with SettingsStore.update()."""

from typing import Callable

from periodic_notes.constants import DEFAULT_PERIODIC_CONFIG
from periodic_notes.models import GRANULARITIES, CalendarSet, Settings
from periodic_notes.utils import now_timestamp

SettingsMutator = Callable[[Settings], Settings]


def build_calendar_set(
    calendar_set_id: str, source: CalendarSet | None = None
) -> CalendarSet:
    """Build a calendar set with every granularity populated.

    Args:
        calendar_set_id: Id (and display name) of the new set
        source: Optional set whose per-granularity configs are copied

    Returns:
        New CalendarSet stamped with the current time
    """
    configs = {}
    for granularity in GRANULARITIES:
        config = source.get_config(granularity) if source else None
        configs[granularity.value] = (config or DEFAULT_PERIODIC_CONFIG).model_copy(
            deep=True
        )

    return CalendarSet(id=calendar_set_id, ctime=now_timestamp(), **configs)


def create_new_calendar_set(
    calendar_set_id: str, source: CalendarSet | None = None
) -> SettingsMutator:
    """Return a mutator that appends a new calendar set and activates it.

    If source is given, it is used as-is except for its id, so that migrated
    sets keep their ctime and configs.
    """

    def mutator(settings: Settings) -> Settings:
        if source is not None:
            calendar_set = source.model_copy(update={"id": calendar_set_id}, deep=True)
        else:
            calendar_set = build_calendar_set(calendar_set_id)
        return settings.model_copy(
            update={
                "calendar_sets": [*settings.calendar_sets, calendar_set],
                "active_calendar_set": calendar_set_id,
            },
            deep=True,
        )

    return mutator


def rename_calendar_set(calendar_set_id: str, proposed_name: str) -> SettingsMutator:
    """Return a mutator that renames a set and follows it with the active pointer.

    Unknown ids leave the settings unchanged.
    """

    def mutator(settings: Settings) -> Settings:
        calendar_sets = [
            c.model_copy(update={"id": proposed_name}, deep=True)
            if c.id == calendar_set_id
            else c.model_copy(deep=True)
            for c in settings.calendar_sets
        ]
        active = settings.active_calendar_set
        if active == calendar_set_id and settings.find_calendar_set(calendar_set_id):
            active = proposed_name
        return settings.model_copy(
            update={"calendar_sets": calendar_sets, "active_calendar_set": active},
            deep=True,
        )

    return mutator


def set_active_calendar_set(calendar_set_id: str) -> SettingsMutator:
    """Return a mutator that points active_calendar_set at an id."""

    def mutator(settings: Settings) -> Settings:
        return settings.model_copy(
            update={"active_calendar_set": calendar_set_id}, deep=True
        )

    return mutator

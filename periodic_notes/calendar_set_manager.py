"""Calendar set manager: active configuration lookup, migration and renaming."""

import logging

from periodic_notes.constants import (
    DEFAULT_CALENDARSET_ID,
    DEFAULT_FORMAT,
    DEFAULT_PERIODIC_CONFIG,
)
from periodic_notes.exceptions import ConflictError, NotFoundError, ValidationError
from periodic_notes.migration import is_legacy_settings, migrate_legacy_settings
from periodic_notes.models import (
    GRANULARITIES,
    CalendarSet,
    Granularity,
    PeriodicConfig,
    Settings,
)
from periodic_notes.settings_utils import (
    build_calendar_set,
    create_new_calendar_set,
    rename_calendar_set,
    set_active_calendar_set,
)
from periodic_notes.storage import SettingsStore

logger = logging.getLogger(__name__)


def _ensure_name_available(settings: Settings, proposed_name: str) -> None:
    """Raise ConflictError if a calendar set already uses proposed_name."""
    if settings.find_calendar_set(proposed_name) is not None:
        raise ConflictError(
            f"A calendar set with the name '{proposed_name}' already exists"
        )


class CalendarSetManager:
    """Accessor and mutator layer over the host settings store.

    The store is the single source of truth; the manager keeps no state of
    its own besides the reference to it.
    """

    def __init__(
        self, store: SettingsStore, default_calendar_set: str = DEFAULT_CALENDARSET_ID
    ):
        """
        Initialize manager.

        Args:
            store: Settings store (dependency injection)
            default_calendar_set: Id used when migrating or seeding the first set
        """
        self.store = store
        self.default_calendar_set = default_calendar_set

    def _get_active_calendar_set(self) -> CalendarSet:
        """Resolve the active calendar set.

        Raises:
            NotFoundError: If active_calendar_set matches no calendar set
        """
        settings = self.store.get()
        active_set = settings.find_calendar_set(settings.active_calendar_set)
        if active_set is None:
            raise NotFoundError("No active calendar set found")
        return active_set

    def get_format(self, granularity: Granularity) -> str:
        """Get the filename format for a granularity, falling back to the default."""
        active_set = self._get_active_calendar_set()
        config = active_set.get_config(granularity)
        if config and config.format:
            return config.format
        return DEFAULT_FORMAT[Granularity(granularity)]

    def get_active_set(self) -> str:
        """Get the active calendar set id (not checked for existence)."""
        return self.store.get().active_calendar_set

    def get_active_config(self, granularity: Granularity) -> PeriodicConfig:
        """Get the active set's config for a granularity."""
        active_set = self._get_active_calendar_set()
        config = active_set.get_config(granularity)
        if config is None:
            return DEFAULT_PERIODIC_CONFIG.model_copy(deep=True)
        return config

    def get_calendar_sets(self) -> list[CalendarSet]:
        """Get all calendar sets, creating the first one if there are none.

        On first use, legacy settings are migrated into a calendar set;
        without legacy settings a default, fully disabled set is created.
        Either way the new set becomes active and is persisted.
        """
        settings = self.store.get()
        if not settings.calendar_sets:
            if is_legacy_settings(settings):
                migrated = migrate_legacy_settings(settings, self.default_calendar_set)
                self.store.update(
                    create_new_calendar_set(self.default_calendar_set, migrated)
                )
                logger.info(
                    f"Migrated legacy settings to calendar set '{self.default_calendar_set}'"
                )
            else:
                self.store.update(create_new_calendar_set(self.default_calendar_set))
                logger.info(
                    f"Created default calendar set '{self.default_calendar_set}'"
                )
            settings = self.store.get()

        return settings.calendar_sets

    def get_calendar_set(self, calendar_set_id: str) -> CalendarSet:
        """Get a calendar set by id.

        Raises:
            NotFoundError: If no set has this id
        """
        calendar_set = self.store.get().find_calendar_set(calendar_set_id)
        if calendar_set is None:
            raise NotFoundError(f"Calendar set '{calendar_set_id}' not found")
        return calendar_set

    def get_inactive_granularities(self) -> list[Granularity]:
        """Get granularities disabled in the active set."""
        active_set = self._get_active_calendar_set()
        return [g for g in GRANULARITIES if not active_set.is_enabled(g)]

    def get_active_granularities(self) -> list[Granularity]:
        """Get granularities enabled in the active set."""
        active_set = self._get_active_calendar_set()
        return [g for g in GRANULARITIES if active_set.is_enabled(g)]

    def rename_calendar_set(self, calendar_set_id: str, proposed_name: str) -> None:
        """Rename a calendar set.

        The active set pointer follows the rename. Renaming an unknown set is
        not an error and changes nothing.

        Args:
            calendar_set_id: Current id of the set
            proposed_name: New id; must not be blank or already in use

        Raises:
            ValidationError: If proposed_name is blank
            ConflictError: If another set already has id proposed_name
        """
        if calendar_set_id == proposed_name.strip():
            return

        if proposed_name.strip() == "":
            raise ValidationError("Name required")

        def mutator(settings: Settings) -> Settings:
            # Checked inside the update so the store is never written on conflict
            _ensure_name_available(settings, proposed_name)
            return rename_calendar_set(calendar_set_id, proposed_name)(settings)

        self.store.update(mutator)
        logger.info(f"Renamed calendar set '{calendar_set_id}' to '{proposed_name}'")

    def set_active_set(self, calendar_set_id: str) -> None:
        """Make a calendar set active (not checked for existence)."""
        self.store.update(set_active_calendar_set(calendar_set_id))
        logger.info(f"Active calendar set is now '{calendar_set_id}'")

    def create_calendar_set(self, name: str, copy_from: str | None = None) -> CalendarSet:
        """Create a calendar set and make it active.

        Args:
            name: Id of the new set; must not be blank or already in use
            copy_from: Optional id of a set whose configs are copied

        Returns:
            The new CalendarSet

        Raises:
            ValidationError: If name is blank
            ConflictError: If a set with this name already exists
            NotFoundError: If copy_from does not exist
        """
        if name.strip() == "":
            raise ValidationError("Name required")

        source = self.get_calendar_set(copy_from) if copy_from is not None else None
        calendar_set = build_calendar_set(name, source)

        def mutator(settings: Settings) -> Settings:
            _ensure_name_available(settings, name)
            return create_new_calendar_set(name, calendar_set)(settings)

        self.store.update(mutator)
        logger.info(f"Created calendar set '{name}'")
        return calendar_set

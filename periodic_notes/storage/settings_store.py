"""Settings stores backing the calendar set manager."""

import json
import logging
from pathlib import Path
from typing import Protocol

from pydantic import ValidationError as PydanticValidationError

from periodic_notes.exceptions import SettingsStoreError
from periodic_notes.models import Settings
from periodic_notes.settings_utils import SettingsMutator

logger = logging.getLogger(__name__)


class SettingsStore(Protocol):
    """Protocol for settings stores."""

    def get(self) -> Settings:
        """Return a snapshot of the current settings."""
        ...

    def update(self, mutator: SettingsMutator) -> None:
        """Apply mutator to the current settings and persist the result."""
        ...


class InMemorySettingsStore:
    """Settings store holding a single Settings value in memory."""

    def __init__(self, settings: Settings | None = None):
        """Initialize store with optional initial settings."""
        self._settings = settings.model_copy(deep=True) if settings else Settings()

    def get(self) -> Settings:
        """Return a deep copy of the current settings."""
        return self._settings.model_copy(deep=True)

    def update(self, mutator: SettingsMutator) -> None:
        """Apply mutator; nothing changes if it raises."""
        self._settings = mutator(self.get())


class JsonSettingsStore:
    """Settings store persisted as a JSON file.

    The file is re-read on every get() so that edits made by other tools are
    picked up. A missing file behaves as empty settings.
    """

    def __init__(self, path: Path):
        """
        Initialize store.

        Args:
            path: Path to the settings JSON file
        """
        self.path = path

    def get(self) -> Settings:
        """Load settings from disk."""
        if not self.path.exists():
            logger.debug(f"Settings file {self.path} not found, using empty settings")
            return Settings()

        try:
            data = json.loads(self.path.read_text())
        except (OSError, json.JSONDecodeError) as e:
            raise SettingsStoreError(
                f"Could not read settings file {self.path}: {e}"
            ) from e

        try:
            return Settings.model_validate(data)
        except PydanticValidationError as e:
            raise SettingsStoreError(f"Invalid settings file {self.path}: {e}") from e

    def update(self, mutator: SettingsMutator) -> None:
        """Apply mutator and write the result; the file is untouched if it raises."""
        settings = mutator(self.get())
        self.save(settings)

    def save(self, settings: Settings) -> None:
        """Write settings to disk, excluding None values."""
        self.path.parent.mkdir(parents=True, exist_ok=True)
        data = settings.model_dump(mode="json", exclude_none=True)
        self.path.write_text(json.dumps(data, indent=2))
        logger.debug(f"Saved settings to {self.path}")

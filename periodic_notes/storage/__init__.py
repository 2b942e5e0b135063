"""Settings storage."""

from periodic_notes.storage.settings_store import (
    InMemorySettingsStore,
    JsonSettingsStore,
    SettingsStore,
)

__all__ = ["InMemorySettingsStore", "JsonSettingsStore", "SettingsStore"]

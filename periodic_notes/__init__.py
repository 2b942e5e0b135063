"""Calendar set management for periodic notes."""

from periodic_notes.calendar_set_manager import CalendarSetManager
from periodic_notes.config import NotesConfig
from periodic_notes.exceptions import (
    CalendarSetError,
    ConflictError,
    NotFoundError,
    SettingsStoreError,
    ValidationError,
)
from periodic_notes.storage import InMemorySettingsStore, JsonSettingsStore

__all__ = [
    "CalendarSetError",
    "CalendarSetManager",
    "ConflictError",
    "InMemorySettingsStore",
    "JsonSettingsStore",
    "NotFoundError",
    "NotesConfig",
    "SettingsStoreError",
    "ValidationError",
]

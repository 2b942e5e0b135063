"""Pydantic models for calendar sets and host settings."""

from periodic_notes.models.calendar_set import CalendarSet
from periodic_notes.models.periodic_config import (
    GRANULARITIES,
    Granularity,
    PeriodicConfig,
)
from periodic_notes.models.settings import PeriodicitySettings, Settings

__all__ = [
    "CalendarSet",
    "GRANULARITIES",
    "Granularity",
    "PeriodicConfig",
    "PeriodicitySettings",
    "Settings",
]

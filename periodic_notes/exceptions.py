"""Exception hierarchy for calendar set operations."""


class CalendarSetError(Exception):
    """Base exception for calendar set operations."""

    pass


class NotFoundError(CalendarSetError):
    """Calendar set not found (e.g. dangling active calendar set)."""

    pass


class ValidationError(CalendarSetError):
    """Invalid input, such as a blank calendar set name."""

    pass


class ConflictError(CalendarSetError):
    """A calendar set with the requested name already exists."""

    pass


class SettingsStoreError(CalendarSetError):
    """Settings file could not be read or failed validation."""

    pass

"""Tests for exception classes."""

import pytest

from periodic_notes.exceptions import (
    CalendarSetError,
    ConflictError,
    NotFoundError,
    SettingsStoreError,
    ValidationError,
)


def test_calendar_set_error():
    """Test CalendarSetError base exception."""
    error = CalendarSetError("Test error")
    assert str(error) == "Test error"
    assert isinstance(error, Exception)


@pytest.mark.parametrize(
    "error_class",
    [NotFoundError, ValidationError, ConflictError, SettingsStoreError],
)
def test_subclasses_share_base(error_class):
    """All calendar set errors can be caught as CalendarSetError."""
    error = error_class("failed")
    assert str(error) == "failed"
    assert isinstance(error, CalendarSetError)


def test_validation_error_is_not_pydantic():
    """ValidationError is our own type, not pydantic's."""
    import pydantic

    assert not issubclass(ValidationError, pydantic.ValidationError)

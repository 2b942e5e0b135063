"""Shared helpers."""

from datetime import datetime


def now_timestamp() -> str:
    """Current local time as ISO 8601 with UTC offset, second precision.

    Returns:
        Timestamp string (e.g., "2025-01-01T09:30:00+01:00")
    """
    return datetime.now().astimezone().isoformat(timespec="seconds")

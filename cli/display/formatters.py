"""Pure formatting functions for display output."""

from datetime import datetime, timezone


def format_relative_time(dt: datetime) -> str:
    """Format datetime as relative time.

    Args:
        dt: Datetime to format.

    Returns:
        Formatted time string (e.g., "2h ago", "1w ago", "3mo ago", "1y ago").
    """
    if dt.tzinfo is None:
        # If no timezone, assume UTC
        dt = dt.replace(tzinfo=timezone.utc)

    time_diff = datetime.now(timezone.utc) - dt

    if time_diff.days < 0:
        return "just now"
    if time_diff.days == 0:
        if time_diff.seconds < 60:
            return "just now"
        elif time_diff.seconds < 3600:
            return f"{time_diff.seconds // 60}m ago"
        return f"{time_diff.seconds // 3600}h ago"
    elif time_diff.days < 7:
        return f"{time_diff.days}d ago"
    elif time_diff.days < 30:
        return f"{time_diff.days // 7}w ago"
    elif time_diff.days < 365:
        return f"{time_diff.days // 30}mo ago"
    return f"{time_diff.days // 365}y ago"


def format_ctime(ctime: str) -> str:
    """Format a calendar set creation timestamp with relative time.

    Timestamps that are not ISO 8601 are shown as stored.

    Args:
        ctime: Stored creation timestamp.

    Returns:
        Formatted string (e.g., "2025-01-01 09:30 (2d ago)").
    """
    try:
        dt = datetime.fromisoformat(ctime)
    except ValueError:
        return ctime or "-"
    return f"{dt.strftime('%Y-%m-%d %H:%M')} ({format_relative_time(dt)})"

"""Display module for rendering calendar set output.

This module provides:
- console: Shared Rich console instance
- TableRenderer: Calendar set and granularity tables
- Formatting functions for timestamps
"""

from cli.display.console import console
from cli.display.formatters import format_ctime, format_relative_time
from cli.display.table_renderer import CalendarSetInfo, GranularityInfo, TableRenderer

__all__ = [
    # Console
    "console",
    # Renderers
    "TableRenderer",
    # Data classes
    "CalendarSetInfo",
    "GranularityInfo",
    # Formatters
    "format_ctime",
    "format_relative_time",
]

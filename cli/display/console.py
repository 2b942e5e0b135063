"""Shared Rich console for calendar set output."""

from rich.console import Console

# Used by all commands and renderers; logging goes to stderr separately
console = Console()

"""Table renderer for calendar set listings."""

from dataclasses import dataclass, field
from pathlib import Path

from rich.markup import escape
from rich.table import Table

from cli.display.console import console
from cli.display.formatters import format_ctime


@dataclass
class CalendarSetInfo:
    """Information about a calendar set for display."""

    id: str
    ctime: str
    is_active: bool
    enabled: list[str] = field(default_factory=list)


@dataclass
class GranularityInfo:
    """Resolved configuration of one granularity for display."""

    granularity: str
    enabled: bool
    folder: str
    format: str
    template_path: str | None = None


class TableRenderer:
    """Render tables for calendar sets and their configuration.

    Uses Rich's Table class for consistent, well-formatted output.
    """

    def render_calendar_set_list(
        self, calendar_sets: list[CalendarSetInfo], settings_file: Path
    ) -> None:
        """Render a list of calendar sets as a table.

        Args:
            calendar_sets: List of CalendarSetInfo objects to display.
            settings_file: Settings file the sets were read from.
        """
        if not calendar_sets:
            self.render_empty("No calendar sets found")
            return

        console.print(f"Listing calendar sets in {settings_file.resolve()}:")
        console.print()

        table = Table(show_header=True, header_style="bold", box=None, padding=(0, 2))
        table.add_column("NAME", style="cyan")
        table.add_column("CREATED", style="dim")
        table.add_column("ENABLED")

        for calendar_set in calendar_sets:
            name_display = escape(calendar_set.id)
            if calendar_set.is_active:
                name_display += " [green]← active[/green]"

            enabled_str = ", ".join(calendar_set.enabled) or "[dim]none[/dim]"
            table.add_row(name_display, format_ctime(calendar_set.ctime), enabled_str)

        console.print(table)

    def render_granularities(self, rows: list[GranularityInfo], active_set: str) -> None:
        """Render resolved per-granularity configuration.

        Args:
            rows: One GranularityInfo per granularity to display.
            active_set: Id of the active calendar set (for header).
        """
        console.print(f"Calendar set '{escape(active_set)}':")
        console.print()

        table = Table(show_header=True, header_style="bold", box=None, padding=(0, 2))
        table.add_column("GRANULARITY", style="cyan")
        table.add_column("ENABLED")
        table.add_column("FOLDER")
        table.add_column("FORMAT")
        table.add_column("TEMPLATE", style="dim")

        for row in rows:
            enabled_str = "[green]yes[/green]" if row.enabled else "[dim]no[/dim]"
            table.add_row(
                row.granularity,
                enabled_str,
                escape(row.folder) or "[dim]/[/dim]",
                escape(row.format),
                escape(row.template_path or "-"),
            )

        console.print(table)

    def render_empty(self, message: str) -> None:
        """Render an empty state message.

        Args:
            message: Message to display.
        """
        console.print(f"[dim]{message}[/dim]")

"""Shared CLI context with lazy-initialized dependencies."""

from periodic_notes.calendar_set_manager import CalendarSetManager
from periodic_notes.config import NotesConfig
from periodic_notes.storage import JsonSettingsStore


class CLIContext:
    """Shared context with lazy-initialized dependencies for CLI commands.

    Usage:
        ctx = CLIContext()
        calendar_sets = ctx.manager.get_calendar_sets()
    """

    def __init__(
        self,
        verbose: bool = False,
        quiet: bool = False,
        config: NotesConfig | None = None,
    ):
        """Initialize CLI context.

        Args:
            verbose: If True, enable info logging on the console
            quiet: If True, suppress non-error output
            config: Optional preloaded configuration
        """
        self.verbose = verbose
        self.quiet = quiet

        # Lazy-loaded dependencies
        self._config: NotesConfig | None = config
        self._store: JsonSettingsStore | None = None
        self._manager: CalendarSetManager | None = None

    @property
    def config(self) -> NotesConfig:
        """Get configuration (lazy-loaded)."""
        if self._config is None:
            self._config = NotesConfig.from_env()
        return self._config

    @property
    def store(self) -> JsonSettingsStore:
        """Get settings store (lazy-loaded)."""
        if self._store is None:
            self._store = JsonSettingsStore(self.config.settings_file)
        return self._store

    @property
    def manager(self) -> CalendarSetManager:
        """Get calendar set manager (lazy-loaded)."""
        if self._manager is None:
            self._manager = CalendarSetManager(
                self.store,
                default_calendar_set=self.config.default_calendar_set,
            )
        return self._manager


# Global context instance (set by Typer callback)
_ctx: CLIContext | None = None


def get_context() -> CLIContext:
    """Get the current CLI context.

    Returns:
        The global CLI context instance

    Raises:
        RuntimeError: If context not initialized
    """
    if _ctx is None:
        raise RuntimeError("CLI context not initialized. This should not happen.")
    return _ctx


def set_context(ctx: CLIContext) -> None:
    """Set the global CLI context.

    Args:
        ctx: The CLI context instance to set
    """
    global _ctx
    _ctx = ctx

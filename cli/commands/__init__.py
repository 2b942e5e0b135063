"""CLI commands package."""

from cli.commands.config import config as config_command
from cli.commands.ls import ls as ls_command
from cli.commands.mv import mv as mv_command
from cli.commands.new import new as new_command
from cli.commands.show import show as show_command
from cli.commands.use import use as use_command

__all__ = [
    "config_command",
    "ls_command",
    "mv_command",
    "new_command",
    "show_command",
    "use_command",
]

"""CLI application and command routing."""

import typer
from typing_extensions import Annotated

from cli import setup_logging
from cli.commands import (
    config_command,
    ls_command,
    mv_command,
    new_command,
    show_command,
    use_command,
)
from cli.context import CLIContext, set_context

app = typer.Typer(
    help="Manage periodic note calendar sets.",
    no_args_is_help=True,
)


@app.callback()
def callback(
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Show info messages"),
    ] = False,
    quiet: Annotated[
        bool,
        typer.Option("--quiet", "-q", help="Only show errors"),
    ] = False,
) -> None:
    """Manage periodic note calendar sets."""
    ctx = CLIContext(verbose=verbose, quiet=quiet)
    setup_logging(verbose=verbose, quiet=quiet, config=ctx.config)
    set_context(ctx)


app.command("ls")(ls_command)
app.command("show")(show_command)
app.command("mv")(mv_command)
app.command("use")(use_command)
app.command("new")(new_command)
app.command("config")(config_command)

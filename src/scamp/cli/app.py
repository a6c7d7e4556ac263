from __future__ import annotations

from typing import Annotated

import typer

from scamp.utils.logging import setup_logging

from . import config as config_cmd
from .scan import register as register_scan
from .validate import register as register_validate

app = typer.Typer(help="Scamp - hardware topology scanner", no_args_is_help=True)

app.add_typer(config_cmd.app, name="config", help="Show or create configuration")

register_scan(app)
register_validate(app)


@app.callback(invoke_without_command=True)
def main(
    version: Annotated[
        bool,
        typer.Option("--version", "-v", help="Show version and exit"),
    ] = False,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", help="Log every parsing and mapping decision"),
    ] = False,
) -> None:
    """Scamp CLI."""
    setup_logging(verbose=verbose)

    if version:
        from scamp import __version__

        typer.echo(f"scamp version {__version__}")
        raise typer.Exit()

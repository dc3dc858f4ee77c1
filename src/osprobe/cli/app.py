from __future__ import annotations

from typing import Annotated

import typer

from osprobe.utils.logging import setup_logging

from . import config as config_cmd
from .expand import register as register_expand
from .results import register as register_results
from .scan import register as register_scan

app = typer.Typer(
    help="osprobe - SSH-based OS fingerprinting for IP ranges", no_args_is_help=True
)

app.add_typer(config_cmd.app, name="config")

register_scan(app)
register_expand(app)
register_results(app)


@app.callback(invoke_without_command=True)
def main(
    version: Annotated[
        bool,
        typer.Option("--version", "-v", help="Show version and exit"),
    ] = False,
) -> None:
    """osprobe CLI."""
    setup_logging()

    if version:
        from importlib.metadata import version as get_version

        typer.echo(f"osprobe version {get_version('osprobe')}")
        raise typer.Exit()

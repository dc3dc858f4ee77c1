from __future__ import annotations

from typing import Annotated

import typer
from rich.console import Console

from .common import expand_range_or_exit


def expand(
    ip_range: Annotated[str, typer.Argument(metavar="RANGE", help="Range to expand")],
    count: Annotated[
        bool, typer.Option("--count", help="Only print the number of addresses")
    ] = False,
) -> None:
    """Print the addresses a range expands to, without scanning."""
    addresses = expand_range_or_exit(Console(), ip_range)

    if count:
        typer.echo(len(addresses))
        return
    for address in addresses:
        typer.echo(address)


def register(app: typer.Typer) -> None:
    app.command()(expand)

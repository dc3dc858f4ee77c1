from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from osprobe.storage import read_results
from osprobe.utils.redaction import Redactor

from .common import load_settings_or_exit


def _first_line(record: str) -> str:
    lines = record.splitlines()
    if len(lines) > 1:
        return f"{lines[0]} (+{len(lines) - 1} lines)"
    return lines[0] if lines else ""


def register(app: typer.Typer) -> None:
    @app.command()
    def results(
        path: Annotated[
            Path | None,
            typer.Argument(help="Result file. Uses config output_file if omitted."),
        ] = None,
        redact: Annotated[
            bool, typer.Option("--redact", help="Redact addresses in output")
        ] = False,
    ) -> None:
        """Show a saved result file as a table."""
        console = Console()

        if path is None:
            path = Path(load_settings_or_exit().scanning.output_file)

        try:
            records = read_results(path)
        except (OSError, ValueError) as exc:
            console.print(f"[red]Cannot read {path}:[/red] {escape(str(exc))}")
            raise typer.Exit(1) from exc

        if not records:
            console.print(f"No records in {path}.")
            return

        redactor = Redactor(enabled=redact)
        table = Table()
        table.add_column("Address", style="cyan")
        table.add_column("Record")

        for address, record in records:
            table.add_row(
                redactor.redact_ip(address), redactor.redact_text(_first_line(record))
            )

        console.print(table)
        console.print(f"\n{len(records)} record(s) in {path}")

"""Helpers shared by the osprobe commands: config loading and range parsing."""

from __future__ import annotations

from pathlib import Path

import typer
from rich.console import Console
from rich.markup import escape

from osprobe.config import Settings, get_settings, resolve_config_path
from osprobe.core import AddressRangeError, expand_range


def load_settings_or_exit() -> Settings:
    """Return the SSH and scanning settings, exiting with 1 on a bad config file."""
    try:
        return get_settings()
    except (FileNotFoundError, ValueError) as exc:
        typer.echo(str(exc), err=True)
        raise typer.Exit(1) from exc


def resolve_config_path_or_exit(allow_missing: bool = False) -> tuple[Path, bool]:
    try:
        return resolve_config_path(allow_missing=allow_missing)
    except FileNotFoundError as exc:
        typer.echo(str(exc), err=True)
        raise typer.Exit(1) from exc


def expand_range_or_exit(console: Console, ip_range: str) -> list[str]:
    """Expand ``ip_range``; a malformed range ends the command before any probe."""
    try:
        return expand_range(ip_range)
    except AddressRangeError as exc:
        console.print(f"[red]Error parsing IP range:[/red] {escape(str(exc))}")
        raise typer.Exit(1) from exc

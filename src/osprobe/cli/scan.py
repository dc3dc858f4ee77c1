from __future__ import annotations

import asyncio
import logging
from pathlib import Path
from typing import Annotated

import typer
from pydantic import SecretStr
from rich.console import Console
from rich.markup import escape

from osprobe.config import Settings
from osprobe.core import scan_targets
from osprobe.models import ProbeOutcome
from osprobe.storage import write_results
from osprobe.utils.redaction import Redactor

from .common import expand_range_or_exit, load_settings_or_exit

logger = logging.getLogger(__name__)


def _apply_overrides(
    settings: Settings,
    *,
    output: Path | None,
    concurrency: int | None,
    port: int | None,
    user: str | None,
    password: str | None,
    key: Path | None,
    timeout: float | None,
) -> Settings:
    ssh_updates: dict[str, object] = {}
    if port is not None:
        ssh_updates["port"] = port
    if user is not None:
        ssh_updates["username"] = user
    if password is not None:
        ssh_updates["password"] = SecretStr(password)
    if key is not None:
        ssh_updates["key_filename"] = str(key)
    if timeout is not None:
        ssh_updates["timeout"] = timeout

    scanning_updates: dict[str, object] = {}
    if output is not None:
        scanning_updates["output_file"] = str(output)
    if concurrency is not None:
        scanning_updates["parallel_scans"] = concurrency

    return settings.model_copy(
        update={
            "ssh": settings.ssh.model_copy(update=ssh_updates),
            "scanning": settings.scanning.model_copy(update=scanning_updates),
        }
    )


def scan(
    ip_range: Annotated[
        str | None,
        typer.Argument(
            metavar="RANGE",
            help="Range to scan, e.g. 192.168.33.1-245 or 10.0.1-2.5-10. "
            "Uses config default if omitted.",
        ),
    ] = None,
    output: Annotated[
        Path | None,
        typer.Option("--output", "-o", help="Result file (default: os-results.txt)"),
    ] = None,
    concurrency: Annotated[
        int | None,
        typer.Option("--concurrency", "-c", min=1, help="Maximum open sessions"),
    ] = None,
    port: Annotated[
        int | None, typer.Option("--port", "-p", min=1, max=65535, help="SSH port")
    ] = None,
    user: Annotated[
        str | None, typer.Option("--user", "-u", help="SSH username")
    ] = None,
    password: Annotated[
        str | None,
        typer.Option(
            "--password", envvar="OSPROBE_PASSWORD", help="SSH password", show_default=False
        ),
    ] = None,
    key: Annotated[
        Path | None, typer.Option("--key", "-k", help="Private key file")
    ] = None,
    timeout: Annotated[
        float | None, typer.Option("--timeout", min=0.1, help="SSH timeout in seconds")
    ] = None,
    sort: Annotated[
        bool,
        typer.Option("--sort", help="Write results in address order instead of arrival order"),
    ] = False,
    redact: Annotated[
        bool, typer.Option("--redact", help="Redact addresses in console output")
    ] = False,
) -> None:
    """Fingerprint the OS of every host in an address range over SSH."""
    console = Console()

    settings = _apply_overrides(
        load_settings_or_exit(),
        output=output,
        concurrency=concurrency,
        port=port,
        user=user,
        password=password,
        key=key,
        timeout=timeout,
    )

    if ip_range is None:
        ip_range = settings.scanning.default_range
        console.print(f"Using range from config: {ip_range}")

    targets = expand_range_or_exit(console, ip_range)

    console.print(f"Scanning {len(targets)} IP addresses...")
    logger.info(
        "Scan settings: port=%d, timeout=%.2fs, parallel_scans=%d",
        settings.ssh.port,
        settings.ssh.timeout,
        settings.scanning.parallel_scans,
    )

    redactor = Redactor(enabled=redact)

    def _on_check(address: str) -> None:
        console.print(f"Checking {redactor.redact_ip(address)}...", highlight=False)

    def _on_outcome(outcome: ProbeOutcome) -> None:
        address = redactor.redact_ip(outcome.address)
        if outcome.succeeded:
            console.print(
                f"[green]✓[/green] Successfully retrieved OS info from {address}",
                highlight=False,
            )
        else:
            reason = escape(redactor.redact_text(outcome.failure_reason))
            console.print(
                f"[red]✗[/red] Failed to get OS info from {address}: {reason}",
                highlight=False,
            )

    report = asyncio.run(
        scan_targets(
            targets,
            settings.ssh,
            settings.scanning,
            on_check=_on_check,
            on_outcome=_on_outcome,
        )
    )
    if sort:
        report = report.sorted_by_address()

    output_path = Path(settings.scanning.output_file)
    console.print("\nScan completed!")
    console.print(f"Successful: {report.success_count}")
    console.print(f"Failed: {report.failure_count}")

    try:
        write_results(report, output_path)
    except OSError as exc:
        console.print(f"[red]Error saving results:[/red] {escape(str(exc))}")
        raise typer.Exit(1) from exc

    console.print(f"Results saved to: {output_path}")


def register(app: typer.Typer) -> None:
    app.command()(scan)

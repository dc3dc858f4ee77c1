"""Line-oriented ``{address:record}`` result files."""

from __future__ import annotations

import logging
import re
from pathlib import Path

from osprobe.models import AggregateReport

logger = logging.getLogger(__name__)

RECORD_START = re.compile(r"^\{(\d{1,3}(?:\.\d{1,3}){3}):")


def format_record(address: str, record: str) -> str:
    return f"{{{address}:{record}}}\n"


def write_results(report: AggregateReport, path: Path) -> None:
    """Write one record per outcome in report order, truncating ``path``.

    Not atomic: records written before an ``OSError`` stay on disk.
    """
    with path.open("w", encoding="utf-8", newline="\n") as handle:
        for outcome in report.outcomes:
            handle.write(format_record(outcome.address, outcome.record))
    logger.debug("Wrote %d records to %s", report.total, path)


def _close_record(address: str, lines: list[str]) -> tuple[str, str]:
    text = "".join(lines)
    if text.endswith("\n"):
        text = text[:-1]
    if not text.endswith("}"):
        raise ValueError(f"Unterminated record for {address}")
    return address, text[:-1]


def read_results(path: Path) -> list[tuple[str, str]]:
    """Parse a result file back into ``(address, record)`` pairs.

    Fingerprints are usually multi-line, so a record runs until the next
    line that starts with ``{<address>:``.
    """
    records: list[tuple[str, str]] = []
    address: str | None = None
    lines: list[str] = []

    with path.open("r", encoding="utf-8", newline="") as handle:
        for line in handle:
            match = RECORD_START.match(line)
            if match:
                if address is not None:
                    records.append(_close_record(address, lines))
                address = match.group(1)
                lines = [line[match.end() :]]
            elif address is None:
                if line.strip():
                    raise ValueError(f"Unexpected content before first record: {line!r}")
            else:
                lines.append(line)

    if address is not None:
        records.append(_close_record(address, lines))
    return records

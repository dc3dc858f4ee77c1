"""Tests for the result file writer and reader."""

from __future__ import annotations

import pytest

from osprobe.models import AggregateReport, ProbeOutcome
from osprobe.storage import read_results, write_results

OS_RELEASE = 'PRETTY_NAME="Debian GNU/Linux 12 (bookworm)"\nNAME="Debian GNU/Linux"\nID=debian'


@pytest.fixture
def report() -> AggregateReport:
    return AggregateReport(
        outcomes=[
            ProbeOutcome.failure("10.0.0.3", "host unreachable"),
            ProbeOutcome.success("10.0.0.1", OS_RELEASE),
            ProbeOutcome.failure(
                "10.0.0.2", "failed to dial: Authentication failed."
            ),
        ]
    )


def test_write_format(tmp_path, report):
    path = tmp_path / "os-results.txt"

    write_results(report, path)

    assert path.read_text(encoding="utf-8") == (
        "{10.0.0.3:host unreachable}\n"
        "{10.0.0.1:" + OS_RELEASE + "}\n"
        "{10.0.0.2:failed to dial: Authentication failed.}\n"
    )


def test_read_back_in_report_order(tmp_path, report):
    path = tmp_path / "os-results.txt"
    write_results(report, path)

    assert read_results(path) == [
        (outcome.address, outcome.record) for outcome in report.outcomes
    ]


def test_payload_with_braces_and_colons(tmp_path):
    report = AggregateReport(
        outcomes=[
            ProbeOutcome.success("192.168.33.4", "ID=custom\nHOME_URL={https://x:1}"),
            ProbeOutcome.success("192.168.33.5", ""),
        ]
    )
    path = tmp_path / "out.txt"
    write_results(report, path)

    assert read_results(path) == [
        ("192.168.33.4", "ID=custom\nHOME_URL={https://x:1}"),
        ("192.168.33.5", ""),
    ]


def test_existing_file_is_truncated(tmp_path, report):
    path = tmp_path / "os-results.txt"
    path.write_text("stale content\n" * 50)

    write_results(AggregateReport(outcomes=report.outcomes[:1]), path)

    assert path.read_text(encoding="utf-8") == "{10.0.0.3:host unreachable}\n"


def test_empty_report_writes_empty_file(tmp_path):
    path = tmp_path / "os-results.txt"

    write_results(AggregateReport(), path)

    assert path.read_text() == ""
    assert read_results(path) == []


def test_unwritable_destination_raises(tmp_path, report):
    with pytest.raises(OSError):
        write_results(report, tmp_path / "missing-dir" / "os-results.txt")


def test_garbage_file_is_rejected(tmp_path):
    path = tmp_path / "notes.txt"
    path.write_text("hello\n")

    with pytest.raises(ValueError):
        read_results(path)

from __future__ import annotations

import pytest
from pydantic import ValidationError

from osprobe.models import AggregateReport, ProbeOutcome


def test_record_is_payload_or_reason():
    assert ProbeOutcome.success("10.0.0.1", "ID=arch").record == "ID=arch"
    assert ProbeOutcome.failure("10.0.0.2", "host unreachable").record == (
        "host unreachable"
    )


def test_outcome_is_immutable():
    outcome = ProbeOutcome.success("10.0.0.1", "ID=arch")
    with pytest.raises(ValidationError):
        outcome.payload = "changed"  # type: ignore[misc]


def test_sorted_by_address_is_numeric():
    report = AggregateReport()
    for address in ["10.0.0.10", "10.0.0.9", "9.255.0.1", "10.0.0.100"]:
        report.add(ProbeOutcome.failure(address, "host unreachable"))

    ordered = report.sorted_by_address()

    assert [o.address for o in ordered.outcomes] == [
        "9.255.0.1",
        "10.0.0.9",
        "10.0.0.10",
        "10.0.0.100",
    ]
    assert report.outcomes[0].address == "10.0.0.10"


def test_counts():
    report = AggregateReport(
        outcomes=[
            ProbeOutcome.success("10.0.0.1", "ID=a"),
            ProbeOutcome.failure("10.0.0.2", "x"),
            ProbeOutcome.failure("10.0.0.3", "y"),
        ]
    )
    assert (report.success_count, report.failure_count, report.total) == (1, 2, 3)

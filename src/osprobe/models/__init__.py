"""Data models for osprobe."""

from osprobe.models.outcome import AggregateReport, ProbeOutcome

__all__ = [
    "AggregateReport",
    "ProbeOutcome",
]

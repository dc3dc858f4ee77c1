"""Per-target outcomes and the aggregated scan report."""

from __future__ import annotations

import ipaddress

from pydantic import BaseModel, Field


class ProbeOutcome(BaseModel):
    """Result of probing one target address."""

    model_config = {"frozen": True}

    address: str
    succeeded: bool
    payload: str = ""
    failure_reason: str = ""

    @classmethod
    def success(cls, address: str, payload: str) -> ProbeOutcome:
        return cls(address=address, succeeded=True, payload=payload)

    @classmethod
    def failure(cls, address: str, reason: str) -> ProbeOutcome:
        return cls(address=address, succeeded=False, failure_reason=reason)

    @property
    def record(self) -> str:
        """Text stored in the result file: payload on success, reason otherwise."""
        return self.payload if self.succeeded else self.failure_reason


class AggregateReport(BaseModel):
    """Outcomes in completion order plus derived counts."""

    outcomes: list[ProbeOutcome] = Field(default_factory=list)

    def add(self, outcome: ProbeOutcome) -> None:
        self.outcomes.append(outcome)

    @property
    def total(self) -> int:
        return len(self.outcomes)

    @property
    def success_count(self) -> int:
        return sum(1 for outcome in self.outcomes if outcome.succeeded)

    @property
    def failure_count(self) -> int:
        return self.total - self.success_count

    def sorted_by_address(self) -> AggregateReport:
        ordered = sorted(
            self.outcomes, key=lambda outcome: ipaddress.IPv4Address(outcome.address)
        )
        return AggregateReport(outcomes=ordered)

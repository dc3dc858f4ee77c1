from __future__ import annotations

from .fingerprint import fingerprint_host
from .ranges import (
    AddressRangeError,
    EmptyResultError,
    RangeParseError,
    expand_range,
)
from .reachability import is_host_reachable
from .scanner import HOST_UNREACHABLE, scan_targets
from .session import (
    CommandError,
    DialError,
    SessionError,
    SessionOpenError,
    run_command,
)

__all__ = [
    "HOST_UNREACHABLE",
    "AddressRangeError",
    "CommandError",
    "DialError",
    "EmptyResultError",
    "RangeParseError",
    "SessionError",
    "SessionOpenError",
    "expand_range",
    "fingerprint_host",
    "is_host_reachable",
    "run_command",
    "scan_targets",
]

"""osprobe - fingerprint the operating systems of an IP range over SSH."""

from __future__ import annotations

from importlib.metadata import version

from .config import ScanningConfig, Settings, SSHConfig, get_settings
from .core import expand_range, fingerprint_host, is_host_reachable, scan_targets
from .models import AggregateReport, ProbeOutcome
from .storage import read_results, write_results

__all__ = [
    "AggregateReport",
    "ProbeOutcome",
    "SSHConfig",
    "ScanningConfig",
    "Settings",
    "__version__",
    "expand_range",
    "fingerprint_host",
    "get_settings",
    "is_host_reachable",
    "read_results",
    "scan_targets",
    "write_results",
]

__version__ = version("osprobe")

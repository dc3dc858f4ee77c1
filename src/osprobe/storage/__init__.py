from __future__ import annotations

from .results import format_record, read_results, write_results

__all__ = ["format_record", "read_results", "write_results"]

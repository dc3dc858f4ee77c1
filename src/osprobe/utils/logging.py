"""Console logging for the osprobe CLI."""

from __future__ import annotations

import logging
import os
from typing import Literal

import coloredlogs  # type: ignore[import]

LogLevel = Literal["CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"]

DEFAULT_FORMAT = "%(asctime)s %(name)s %(levelname)s %(message)s"
DEFAULT_DATE_FORMAT = "%H:%M:%S"

# paramiko logs every refused or reset handshake at ERROR; those failures
# already show up as per-host outcomes
QUIET_LOGGERS = {"paramiko": logging.CRITICAL}


def setup_logging(level: LogLevel | None = None) -> None:
    """Install coloredlogs on the root logger.

    The level comes from ``level``, then ``$LOGLEVEL``, then INFO. Use
    ``LOGLEVEL=DEBUG`` to see every reachability check and SSH command.
    """
    resolved = (level or os.environ.get("LOGLEVEL", "INFO")).upper()

    coloredlogs.install(
        level=resolved,
        fmt=DEFAULT_FORMAT,
        datefmt=DEFAULT_DATE_FORMAT,
    )

    for name, quiet_level in QUIET_LOGGERS.items():
        logging.getLogger(name).setLevel(quiet_level)

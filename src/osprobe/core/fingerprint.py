from __future__ import annotations

import logging
from collections.abc import Callable

from osprobe.config import FALLBACK_COMMAND, PRIMARY_COMMAND, SSHConfig
from osprobe.models import ProbeOutcome

from .session import SessionError, run_command

logger = logging.getLogger(__name__)

CommandRunner = Callable[[str, SSHConfig, str], str]


def fingerprint_host(
    address: str,
    credentials: SSHConfig,
    primary: str = PRIMARY_COMMAND,
    fallback: str = FALLBACK_COMMAND,
    runner: CommandRunner = run_command,
) -> ProbeOutcome:
    """Read the OS identity of ``address``, falling back to a second command.

    When both commands fail only the fallback's error is kept in the outcome.
    """
    try:
        output = runner(address, credentials, primary)
    except SessionError as primary_exc:
        logger.debug("%s: '%s' failed: %s", address, primary, primary_exc)
        try:
            output = runner(address, credentials, fallback)
        except SessionError as exc:
            logger.debug("%s: '%s' failed: %s", address, fallback, exc)
            return ProbeOutcome.failure(address, str(exc))

    return ProbeOutcome.success(address, output.strip())

from __future__ import annotations

import asyncio
import logging

logger = logging.getLogger(__name__)

DEFAULT_REACHABILITY_TIMEOUT = 3.0


async def is_host_reachable(
    address: str, port: int, timeout: float = DEFAULT_REACHABILITY_TIMEOUT
) -> bool:
    """Open and close a bare TCP connection; any failure means unreachable."""
    try:
        _reader, writer = await asyncio.wait_for(
            asyncio.open_connection(address, port), timeout=timeout
        )
    except (asyncio.TimeoutError, TimeoutError):
        logger.debug("No response from %s:%d (timeout)", address, port)
        return False
    except OSError as exc:
        logger.debug("Cannot reach %s:%d: %s", address, port, exc)
        return False

    writer.close()
    try:
        await writer.wait_closed()
    except OSError as exc:
        logger.debug("Error closing probe connection to %s:%d: %s", address, port, exc)
    return True

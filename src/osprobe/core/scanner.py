from __future__ import annotations

import asyncio
import functools
import logging
from collections.abc import Awaitable, Callable
from concurrent.futures import ThreadPoolExecutor

from osprobe.config import ScanningConfig, SSHConfig
from osprobe.models import AggregateReport, ProbeOutcome

from .fingerprint import fingerprint_host
from .reachability import is_host_reachable

logger = logging.getLogger(__name__)

HOST_UNREACHABLE = "host unreachable"

ReachabilityCheck = Callable[[str, int, float], Awaitable[bool]]
Probe = Callable[..., ProbeOutcome]


async def scan_targets(
    targets: list[str],
    credentials: SSHConfig,
    config: ScanningConfig,
    *,
    reachable: ReachabilityCheck = is_host_reachable,
    probe: Probe = fingerprint_host,
    on_check: Callable[[str], None] | None = None,
    on_outcome: Callable[[ProbeOutcome], None] | None = None,
) -> AggregateReport:
    """Fingerprint every target with at most ``parallel_scans`` open sessions.

    The report lists outcomes in completion order and holds exactly one
    outcome per target.
    """
    report = AggregateReport()
    if not targets:
        return report

    worker_count = min(config.parallel_scans, len(targets))
    logger.debug("Scanning %d targets with %d workers", len(targets), worker_count)

    loop = asyncio.get_running_loop()
    executor = ThreadPoolExecutor(
        max_workers=worker_count, thread_name_prefix="osprobe-session"
    )
    work: asyncio.Queue[str | None] = asyncio.Queue(maxsize=worker_count * 4)
    results: asyncio.Queue[ProbeOutcome | None] = asyncio.Queue()

    run_probe = functools.partial(
        probe,
        primary=config.primary_command,
        fallback=config.fallback_command,
    )

    async def _check(address: str) -> ProbeOutcome:
        if on_check is not None:
            on_check(address)
        logger.debug("Checking %s", address)
        if not await reachable(address, credentials.port, config.reachability_timeout):
            return ProbeOutcome.failure(address, HOST_UNREACHABLE)
        return await loop.run_in_executor(executor, run_probe, address, credentials)

    async def _producer() -> None:
        for address in targets:
            await work.put(address)
        for _ in range(worker_count):
            await work.put(None)

    async def _worker() -> None:
        while True:
            address = await work.get()
            try:
                if address is None:
                    return
                try:
                    outcome = await _check(address)
                except Exception as exc:
                    # every target must produce an outcome
                    logger.exception("Unexpected error probing %s", address)
                    outcome = ProbeOutcome.failure(address, str(exc) or repr(exc))
                await results.put(outcome)
            finally:
                work.task_done()

    async def _collector() -> None:
        while True:
            outcome = await results.get()
            if outcome is None:
                return
            report.add(outcome)
            if on_outcome is not None:
                on_outcome(outcome)

    collector = asyncio.create_task(_collector())
    workers = [asyncio.create_task(_worker()) for _ in range(worker_count)]
    completed = False
    try:
        await _producer()
        await work.join()
        await asyncio.gather(*workers)
        await results.put(None)
        await collector
        completed = True
    finally:
        if not completed:
            for task in [*workers, collector]:
                if not task.done():
                    task.cancel()
            await asyncio.gather(*workers, collector, return_exceptions=True)
        executor.shutdown(wait=completed, cancel_futures=not completed)

    logger.debug(
        "Scan complete: %d succeeded, %d failed",
        report.success_count,
        report.failure_count,
    )
    return report

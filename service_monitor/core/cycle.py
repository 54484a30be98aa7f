"""One monitoring cycle: probe, classify and collect every endpoint."""

import asyncio
import logging
from collections.abc import Sequence
from datetime import datetime

from service_monitor.core.classifier import classify
from service_monitor.ports.endpoint import (
    CycleEntry,
    CycleResult,
    Endpoint,
    Error,
    Failure,
    ProbeOutcome,
    Status,
)
from service_monitor.ports.probe import ProbeFn

__all__ = ["alert_set", "run_cycle"]

logger = logging.getLogger(__name__)


async def _check(endpoint: Endpoint, probe_fn: ProbeFn) -> CycleEntry:
    """Probe and classify one endpoint; never raises for probe errors."""
    try:
        outcome: ProbeOutcome = await probe_fn(endpoint)
    except Exception as e:  # noqa: BLE001
        logger.error(f"Probe for {endpoint.address} raised unexpectedly: {e}", exc_info=True)
        outcome = Error(reason=f"probe crashed: {e}")

    status = classify(outcome)
    reason = outcome.reason if isinstance(outcome, (Failure, Error)) else ""
    logger.debug(f"{endpoint.address} ({endpoint.label}) -> {status.value} {reason}".rstrip())
    return CycleEntry(
        endpoint=endpoint,
        status=status,
        checked_at=datetime.now().astimezone(),
        reason=reason,
    )


async def run_cycle(
    endpoints: Sequence[Endpoint],
    probe_fn: ProbeFn,
    concurrency: int = 1,
) -> CycleResult:
    """Probe every endpoint once and return the ordered cycle result.

    Args:
        endpoints: Configured endpoints, in display order.
        probe_fn: Async probe returning an outcome for one endpoint.
        concurrency: Maximum probes in flight. 1 probes strictly in order.

    Returns:
        One entry per endpoint, in the same order as ``endpoints``.

    Raises:
        ValueError: If concurrency is lower than 1.
    """
    if concurrency < 1:
        raise ValueError(f"concurrency must be >= 1 (got: {concurrency})")

    if concurrency == 1:
        return tuple([await _check(endpoint, probe_fn) for endpoint in endpoints])

    semaphore = asyncio.Semaphore(concurrency)
    entries: list[CycleEntry | None] = [None] * len(endpoints)

    async def _bounded(index: int, endpoint: Endpoint) -> None:
        async with semaphore:
            entries[index] = await _check(endpoint, probe_fn)

    await asyncio.gather(*(_bounded(i, ep) for i, ep in enumerate(endpoints)))
    return tuple(entry for entry in entries if entry is not None)


def alert_set(result: CycleResult) -> CycleResult:
    """Return the entries that are not Active, preserving order."""
    return tuple(entry for entry in result if entry.status is not Status.ACTIVE)

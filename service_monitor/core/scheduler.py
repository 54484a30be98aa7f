"""Cancellable periodic ticker."""

import asyncio
import logging
from collections.abc import AsyncIterator, Awaitable, Callable

__all__ = ["PeriodicTicker", "WaitFn", "wait_or_stop"]

logger = logging.getLogger(__name__)

WaitFn = Callable[[asyncio.Event, float], Awaitable[bool]]


async def wait_or_stop(stop: asyncio.Event, timeout: float) -> bool:
    """Wait up to timeout seconds for the stop event.

    Returns:
        True if stop was set, False if the timeout elapsed.
    """
    try:
        await asyncio.wait_for(stop.wait(), timeout=timeout)
    except TimeoutError:
        return False
    return True


class PeriodicTicker:
    """Yield tick numbers until the stop event is set.

    The first tick fires immediately. Each following tick fires
    ``interval_sec`` after the consumer asked for it, i.e. after the
    previous tick was fully handled, so ticks never overlap.
    """

    def __init__(
        self,
        interval_sec: float,
        stop: asyncio.Event,
        wait_fn: WaitFn = wait_or_stop,
    ) -> None:
        self.interval_sec = interval_sec
        self.stop = stop
        self.wait_fn = wait_fn

    def __aiter__(self) -> AsyncIterator[int]:
        return self._ticks()

    async def _ticks(self) -> AsyncIterator[int]:
        tick = 0
        while not self.stop.is_set():
            tick += 1
            yield tick
            if self.stop.is_set():
                break
            if await self.wait_fn(self.stop, self.interval_sec):
                logger.debug(f"Ticker stopped after {tick} tick(s)")
                break

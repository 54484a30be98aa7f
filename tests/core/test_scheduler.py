"""Tests for the periodic ticker."""

import asyncio

import pytest

from service_monitor.core.scheduler import PeriodicTicker, wait_or_stop

__all__ = []


class FakeClock:
    """Records requested waits instead of sleeping."""

    def __init__(self, stop_after: int | None = None) -> None:
        self.waits: list[float] = []
        self.stop_after = stop_after

    async def wait(self, stop: asyncio.Event, timeout: float) -> bool:
        self.waits.append(timeout)
        if self.stop_after is not None and len(self.waits) >= self.stop_after:
            stop.set()
        return stop.is_set()


@pytest.mark.asyncio
async def test_ticker_first_tick_is_immediate() -> None:
    """The first tick should fire before any wait."""
    stop = asyncio.Event()
    clock = FakeClock()
    ticker = PeriodicTicker(180, stop, clock.wait)

    async for tick in ticker:
        assert tick == 1
        assert clock.waits == []
        stop.set()

    assert clock.waits == []


@pytest.mark.asyncio
async def test_ticker_waits_interval_between_ticks() -> None:
    """Every following tick should wait exactly one interval."""
    stop = asyncio.Event()
    clock = FakeClock(stop_after=3)
    ticks = [tick async for tick in PeriodicTicker(180, stop, clock.wait)]

    assert ticks == [1, 2, 3]
    assert clock.waits == [180, 180, 180]


@pytest.mark.asyncio
async def test_ticker_waits_only_after_tick_was_handled() -> None:
    """The wait should start after the consumer finished its work."""
    stop = asyncio.Event()
    events: list[str] = []

    async def wait(stop_event: asyncio.Event, timeout: float) -> bool:
        events.append("wait")
        return len(events) > 4

    async for tick in PeriodicTicker(1, stop, wait):
        events.append(f"tick{tick}-start")
        await asyncio.sleep(0)
        events.append(f"tick{tick}-end")

    assert events[:5] == ["tick1-start", "tick1-end", "wait", "tick2-start", "tick2-end"]


@pytest.mark.asyncio
async def test_ticker_does_not_start_when_already_stopped() -> None:
    """No tick should fire when stop is set beforehand."""
    stop = asyncio.Event()
    stop.set()

    ticks = [tick async for tick in PeriodicTicker(1, stop, FakeClock().wait)]

    assert ticks == []


@pytest.mark.asyncio
async def test_wait_or_stop_returns_false_on_timeout() -> None:
    """Timeout elapsing without stop should return False."""
    assert await wait_or_stop(asyncio.Event(), 0.01) is False


@pytest.mark.asyncio
async def test_wait_or_stop_wakes_up_on_stop() -> None:
    """Setting stop should interrupt a long wait."""
    stop = asyncio.Event()
    asyncio.get_running_loop().call_later(0.01, stop.set)

    assert await asyncio.wait_for(wait_or_stop(stop, 60), timeout=1) is True

"""Main monitoring loop: probe, render and alert once per tick."""

import asyncio
import logging

from service_monitor.core.alerts import AlertDispatcher, AlertPolicy
from service_monitor.core.cycle import run_cycle
from service_monitor.core.scheduler import PeriodicTicker, WaitFn, wait_or_stop
from service_monitor.ports.endpoint import CycleResult, Status
from service_monitor.ports.metrics import CycleStatsDto, MetricsPort
from service_monitor.ports.output import NotificationError, PresenterPort
from service_monitor.ports.probe import ProbeFn
from service_monitor.ports.settings import SettingsPort

__all__ = ["start_main_loop", "get_now_time"]

logger = logging.getLogger(__name__)


def get_now_time() -> float:
    """Get current monotonic time in seconds.

    Uses event loop's monotonic clock so cycle durations are not
    affected by wall-clock changes.

    Returns:
        Current time in seconds (monotonic).
    """
    return asyncio.get_running_loop().time()


def _count(result: CycleResult, status: Status) -> int:
    return sum(1 for entry in result if entry.status is status)


async def start_main_loop(
    settings: SettingsPort,
    stop: asyncio.Event,
    probe_fn: ProbeFn,
    presenter: PresenterPort,
    dispatcher: AlertDispatcher,
    policy: AlertPolicy,
    metrics: MetricsPort | None = None,
    wait_fn: WaitFn = wait_or_stop,
) -> None:
    """Run the monitoring loop until stop is set.

    On every tick:
    1. Probe and classify every endpoint (Idle -> Running).
    2. Render the cycle result.
    3. Let the policy pick alerts and hand them to the dispatcher.
    4. Record cycle metrics, then wait for the next tick (Running -> Idle).

    Args:
        settings: Runtime configuration (period, endpoints, concurrency).
        stop: Event that ends the loop once set.
        probe_fn: Async function probing one endpoint.
        presenter: Renders each cycle result.
        dispatcher: Delivers alerts.
        policy: Selects which entries to alert on.
        metrics: Optional cycle metrics collector.
        wait_fn: Waits between ticks; injectable for tests.

    Notes:
        - Probe failures are absorbed into the Unknown status by run_cycle.
        - Rendering and notification failures are logged and the loop goes on.
        - Notifications are delivered from a worker thread; the event loop
          keeps handling the stop signal meanwhile.
    """
    ticker = PeriodicTicker(settings.period_in_sec, stop, wait_fn)

    async for tick in ticker:
        started = get_now_time()
        logger.debug(f"Cycle {tick}: probing {len(settings.endpoints)} endpoint(s)")
        result = await run_cycle(settings.endpoints, probe_fn, settings.concurrency)

        try:
            presenter.render(result)
        except Exception as e:  # noqa: BLE001
            logger.error(f"Could not render cycle {tick}: {e}", exc_info=True)

        notified = False
        notify_failed = False
        try:
            notified = await asyncio.to_thread(dispatcher.dispatch, policy.select(result))
        except NotificationError as e:
            notify_failed = True
            logger.warning(f"Notification delivery failed: {e}")

        if metrics:
            metrics.update(
                CycleStatsDto(
                    started_at_sec=started,
                    finished_at_sec=get_now_time(),
                    active=_count(result, Status.ACTIVE),
                    inactive=_count(result, Status.INACTIVE),
                    unknown=_count(result, Status.UNKNOWN),
                    notified=notified,
                    notify_failed=notify_failed,
                )
            )
            logger.info(f"Cycle metrics: {metrics}")

"""Application entrypoint."""

import logging

from service_monitor.adapters.driven.config.settings import DEFAULT_INTERVAL, load_settings
from service_monitor.adapters.driven.http.client import HttpProbe
from service_monitor.adapters.driven.logging.logging_config import configure_logs
from service_monitor.adapters.driven.metrics.cycle_metrics import CycleMetrics
from service_monitor.adapters.driven.notify.desktop import DesktopNotifier
from service_monitor.adapters.driven.ping.client import PingProbe
from service_monitor.adapters.driven.presentation.table import TablePresenter
from service_monitor.adapters.driven.router.probe_router import ProbeRouter
from service_monitor.adapters.driving.signals import make_stop_on_sigterm
from service_monitor.core.alerts import AlertDispatcher, make_policy
from service_monitor.core.event_loop import start_main_loop
from service_monitor.ports.endpoint import Endpoint
from service_monitor.ports.settings import SettingsPort

__all__ = ["main"]

logger = logging.getLogger(__name__)


async def main(
    servers: list[tuple[str, str]] | None = None,
    interval_in_sec: int = DEFAULT_INTERVAL,
    probe_mode: str = "auto",
    alert_mode: str = "every-cycle",
    concurrency: int = 1,
    verbose: bool = False,
) -> int:
    """Start the Server Monitor.

    Startup sequence:
    1. Configure logging.
    2. Validate configuration.
    3. Open the HTTP session and wire probes, table and notifier.
    4. Run the monitoring loop.
    5. Gracefully shutdown on SIGTERM/SIGINT.

    Returns:
        Process exit code: 0 after graceful shutdown, 1 on configuration
        errors or an unexpected failure of the loop.
    """
    configure_logs(verbose)
    logger.info("Starting Server Monitor...")

    try:
        config = load_settings(
            servers=servers,
            interval_in_sec=interval_in_sec,
            probe_mode=probe_mode,
            alert_mode=alert_mode,
            concurrency=concurrency,
        )
    except ValueError as exc:
        logger.error(
            "Configuration error: %s\n"
            "Hint: check --servers, --interval and --concurrency.",
            exc,
        )
        return 1

    # Wrap config into port so core depends on interface (hexagonal)
    settings_port = SettingsPort(
        period_in_sec=config.interval_in_sec,
        endpoints=[Endpoint(address=address, label=label) for address, label in config.servers],
        concurrency=config.concurrency,
    )

    metrics = CycleMetrics()
    dispatcher = AlertDispatcher(notifier=DesktopNotifier())
    exit_code = 0

    async with HttpProbe() as http:
        router = ProbeRouter(ping=PingProbe(), http=http, mode=config.probe_mode)
        try:
            await start_main_loop(
                settings=settings_port,
                stop=make_stop_on_sigterm(),
                probe_fn=router.probe,
                presenter=TablePresenter(),
                dispatcher=dispatcher,
                policy=make_policy(config.alert_mode),
                metrics=metrics,
            )
        except Exception as e:
            logger.error(f"Unhandled exception in main loop: {e}", exc_info=True)
            exit_code = 1

    logger.info("Server Monitor stopped.")
    return exit_code


if __name__ == "__main__":
    from service_monitor.adapters.driving.cli import app

    app()

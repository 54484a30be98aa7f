"""Signal handling for graceful shutdown."""

import asyncio
import logging
import signal

__all__ = ["make_stop_on_sigterm"]

logger = logging.getLogger(__name__)


def make_stop_on_sigterm() -> asyncio.Event:
    """Create SIGTERM/SIGINT-based stop event for the monitoring loop.

    Registers handlers that set an asyncio.Event. The loop polls it
    between cycles and the ticker wakes up on it while waiting, so a
    signal ends monitoring without waiting out the full interval.

    Returns:
        Event that is set once SIGTERM or SIGINT has been received.
    """
    stop = asyncio.Event()
    loop = asyncio.get_running_loop()

    def handle_signal() -> None:
        """Signal handler that sets the stop event on SIGTERM/SIGINT."""
        logger.info("Termination signal received, initiating graceful shutdown...")
        stop.set()

    try:
        for sig in (signal.SIGTERM, signal.SIGINT):
            loop.add_signal_handler(sig, handle_signal)
    except NotImplementedError:
        # Windows event loops: Ctrl+C surfaces as KeyboardInterrupt instead
        logger.debug("Signal handlers not supported on this platform")

    return stop

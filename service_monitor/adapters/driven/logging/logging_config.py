"""Console logging setup for the monitor."""

import logging
from typing import TextIO

__all__ = ["APP_LOGGER", "configure_logs"]

APP_LOGGER = "service_monitor"
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s:%(lineno)d - %(message)s"
DATE_FORMAT = "%d/%m/%y %H:%M:%S"

# Library loggers that are noisy at INFO
QUIET_LOGGERS = ("aiohttp", "asyncio")

_handler: logging.Handler | None = None


def configure_logs(verbose: bool = False, stream: TextIO | None = None) -> logging.Handler:
    """Attach one console handler to the root logger.

    Calling it again swaps the handler instead of adding a second one,
    so records are never printed twice.

    Args:
        verbose: Log application records at DEBUG instead of INFO.
        stream: Target stream; stderr when omitted.

    Returns:
        The installed handler.
    """
    global _handler

    root = logging.getLogger()
    if _handler is not None:
        root.removeHandler(_handler)

    _handler = logging.StreamHandler(stream)
    _handler.setFormatter(logging.Formatter(LOG_FORMAT, DATE_FORMAT))
    root.addHandler(_handler)
    root.setLevel(logging.INFO)

    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
    logging.getLogger(APP_LOGGER).setLevel(logging.DEBUG if verbose else logging.INFO)
    return _handler

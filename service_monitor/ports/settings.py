"""Settings port definition (DTO)."""

from dataclasses import dataclass

from service_monitor.ports.endpoint import Endpoint

__all__ = ["SettingsPort"]


@dataclass
class SettingsPort:
    """Runtime settings for the core loop.

    Decouples core from concrete configuration sources, enabling
    easy testing and implementation swapping.

    Attributes:
        period_in_sec: Seconds to wait after a cycle before the next one.
        endpoints: Servers to probe, in display order.
        concurrency: Maximum probes in flight per cycle (1 = sequential).
    """

    period_in_sec: float
    endpoints: list[Endpoint]
    concurrency: int = 1

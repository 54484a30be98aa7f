"""In-memory sliding-window metrics for monitoring cycles."""

from __future__ import annotations

import statistics
from collections import deque
from dataclasses import dataclass

from service_monitor.ports.metrics import CycleStatsDto, MetricsPort

__all__ = ["CycleMetrics"]


@dataclass(slots=True, frozen=True)
class _Sample:
    """Internal record for one cycle."""

    duration_ms: float
    up: int
    down: int
    notify_failed: bool


class CycleMetrics(MetricsPort):
    """Fast, lock-free metrics for async context.

    Tracks:
    - Average cycle duration.
    - Up/down counts of the last cycle.
    - Share of non-Active results in the window.
    - Notification delivery failures.
    - Total cycles seen.

    Not thread-safe; create one instance per event loop.
    """

    def __init__(self, *, window_size: int = 100) -> None:
        """Initialize metrics collector.

        Args:
            window_size: Number of recent cycles to keep for statistics.
        """
        self._window: deque[_Sample] = deque(maxlen=window_size)
        self._total_seen: int = 0

    def update(self, stats: CycleStatsDto) -> None:
        """Record a finished cycle.

        Args:
            stats: Cycle timing and status counts.
        """
        self._window.append(
            _Sample(
                duration_ms=(stats.finished_at_sec - stats.started_at_sec) * 1_000.0,
                up=stats.active,
                down=stats.inactive + stats.unknown,
                notify_failed=stats.notify_failed,
            )
        )
        self._total_seen += 1

    def __str__(self) -> str:
        """Return human-readable one-line summary for logging.

        Returns:
            Formatted metrics string.
        """
        if not self._window:
            return "Metrics: waiting for data …"

        n_window = len(self._window)
        avg_duration = statistics.fmean(s.duration_ms for s in self._window)
        probed = sum(s.up + s.down for s in self._window)
        down_pct = (sum(s.down for s in self._window) / probed) * 100 if probed else 0.0
        notify_failures = sum(1 for s in self._window if s.notify_failed)
        last = self._window[-1]

        return (
            f"cycle={avg_duration:7.1f} ms | "
            f"up={last.up} down={last.down} | "
            f"down_rate={down_pct:5.1f}% | "
            f"notify_fail={notify_failures} | "
            f"win={n_window}/{self._window.maxlen} | "
            f"total={self._total_seen}"
        )

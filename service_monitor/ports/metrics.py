"""Metrics port definition (interface and DTO)."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol

__all__ = ["CycleStatsDto", "MetricsPort"]


@dataclass(slots=True, frozen=True)
class CycleStatsDto:
    """Immutable snapshot of a single monitoring cycle.

    Attributes:
        started_at_sec: Monotonic seconds when the cycle started.
        finished_at_sec: Monotonic seconds when the cycle finished.
        active: Number of Active endpoints.
        inactive: Number of Inactive endpoints.
        unknown: Number of Unknown endpoints.
        notified: True if an alert was handed to the notifier.
        notify_failed: True if delivering that alert failed.
    """

    started_at_sec: float
    finished_at_sec: float
    active: int = 0
    inactive: int = 0
    unknown: int = 0
    notified: bool = False
    notify_failed: bool = False


class MetricsPort(Protocol):
    """Interface for recording cycle metrics.

    Core calls update() after each cycle; presentation layers call
    __str__() to render summaries.
    """

    def update(self, stats: CycleStatsDto, /) -> None:
        """Record a finished cycle.

        Args:
            stats: The cycle to record.
        """
        ...

    def __str__(self) -> str:
        """Return concise textual summary for humans.

        Returns:
            Formatted metrics string.
        """
        ...

"""Tests for cycle metrics collection."""

from service_monitor.adapters.driven.metrics.cycle_metrics import CycleMetrics
from service_monitor.ports.metrics import CycleStatsDto

__all__ = []


def test_metrics_initialization() -> None:
    """Metrics should initialize with empty window."""
    metrics = CycleMetrics()
    assert str(metrics) == "Metrics: waiting for data …"


def test_metrics_records_cycle() -> None:
    """Metrics should report counts of the last cycle."""
    metrics = CycleMetrics(window_size=10)
    metrics.update(CycleStatsDto(100.0, 100.5, active=2, inactive=1, unknown=1))

    output = str(metrics)
    assert "waiting for data" not in output
    assert "up=2 down=2" in output


def test_metrics_calculates_duration() -> None:
    """Metrics should average cycle duration in milliseconds."""
    metrics = CycleMetrics(window_size=10)
    metrics.update(CycleStatsDto(100.0, 100.25, active=1))

    assert "cycle=  250.0 ms" in str(metrics)


def test_metrics_tracks_down_rate() -> None:
    """Down rate should be the share of non-Active results in the window."""
    metrics = CycleMetrics(window_size=10)
    metrics.update(CycleStatsDto(0.0, 1.0, active=3, inactive=1))
    metrics.update(CycleStatsDto(1.0, 2.0, active=4, unknown=0))

    assert "down_rate= 12.5%" in str(metrics)


def test_metrics_counts_notification_failures() -> None:
    """Failed notifications should be counted."""
    metrics = CycleMetrics()
    metrics.update(CycleStatsDto(0.0, 1.0, inactive=1, notified=False, notify_failed=True))
    metrics.update(CycleStatsDto(1.0, 2.0, inactive=1, notified=True))

    assert "notify_fail=1" in str(metrics)


def test_metrics_respects_window_size() -> None:
    """Metrics should maintain sliding window of specified size."""
    metrics = CycleMetrics(window_size=5)

    for i in range(10):
        metrics.update(CycleStatsDto(100.0 + i, 100.0 + i, active=1))

    output = str(metrics)
    assert "win=5/5" in output
    assert "total=10" in output


def test_metrics_handles_empty_endpoint_counts() -> None:
    """A cycle without endpoints should not divide by zero."""
    metrics = CycleMetrics()
    metrics.update(CycleStatsDto(0.0, 0.0))

    assert "down_rate=  0.0%" in str(metrics)

"""Alert selection and dispatch."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass
from typing import Protocol

from service_monitor.core.cycle import alert_set
from service_monitor.ports.endpoint import CycleEntry, CycleResult, Endpoint, Status
from service_monitor.ports.output import NotifierPort

__all__ = [
    "ALERT_TITLE",
    "AlertDispatcher",
    "AlertPolicy",
    "EveryCyclePolicy",
    "StateChangePolicy",
    "StatusTransition",
    "format_alert_message",
    "make_policy",
]

logger = logging.getLogger(__name__)

ALERT_TITLE = "Server Monitor Alert"


def format_alert_message(entries: Iterable[CycleEntry]) -> str:
    """Build the notification body: one ``"<address> (<label>)"`` line per entry."""
    return "\n".join(f"{e.endpoint.address} ({e.endpoint.label})" for e in entries)


class AlertDispatcher:
    """Hand non-empty alert sets to the notifier.

    No suppression, coalescing or rate limiting happens here; what gets
    alerted is decided by the AlertPolicy upstream.
    """

    def __init__(self, notifier: NotifierPort, title: str = ALERT_TITLE) -> None:
        self.notifier = notifier
        self.title = title

    def dispatch(self, alerts: CycleResult) -> bool:
        """Notify about the given entries.

        Args:
            alerts: Entries to alert on, in cycle order.

        Returns:
            True if a notification was sent, False if there was nothing to send.

        Raises:
            NotificationError: If the notifier failed to deliver.
        """
        if not alerts:
            return False

        body = format_alert_message(alerts)
        logger.info(f"Alerting on {len(alerts)} endpoint(s)")
        self.notifier.notify(self.title, body)
        return True


class AlertPolicy(Protocol):
    """Decides which entries of a cycle result should be alerted."""

    def select(self, result: CycleResult, /) -> CycleResult: ...


class EveryCyclePolicy:
    """Alert on every non-Active endpoint, every cycle."""

    def select(self, result: CycleResult) -> CycleResult:
        return alert_set(result)


@dataclass(slots=True)
class StatusTransition:
    """Last two statuses observed for one endpoint."""

    previous: Status
    current: Status

    @property
    def changed(self) -> bool:
        return self.previous is not self.current


class StateChangePolicy:
    """Alert only when an endpoint enters a new non-Active status.

    An endpoint seen for the first time is treated as previously Active,
    so it alerts right away if it starts out down.
    """

    def __init__(self) -> None:
        self.transitions: dict[Endpoint, StatusTransition] = {}

    def _observe(self, entry: CycleEntry) -> StatusTransition:
        known = self.transitions.get(entry.endpoint)
        previous = known.current if known else Status.ACTIVE
        transition = StatusTransition(previous=previous, current=entry.status)
        self.transitions[entry.endpoint] = transition
        return transition

    def select(self, result: CycleResult) -> CycleResult:
        selected = []
        for entry in result:
            transition = self._observe(entry)
            if transition.changed and entry.status is not Status.ACTIVE:
                selected.append(entry)
            elif transition.changed:
                logger.info(f"{entry.endpoint.address} recovered (was {transition.previous.value})")
        return tuple(selected)


def make_policy(mode: str) -> AlertPolicy:
    """Build the alert policy for a CLI alert mode.

    Args:
        mode: "every-cycle" or "on-change".

    Raises:
        ValueError: If the mode is unknown.
    """
    if mode == "every-cycle":
        return EveryCyclePolicy()
    if mode == "on-change":
        return StateChangePolicy()
    raise ValueError(f"Unknown alert mode: {mode}")

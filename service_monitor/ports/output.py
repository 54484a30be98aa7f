"""Presentation and notification port definitions (interfaces)."""

from __future__ import annotations

from typing import Protocol

from service_monitor.ports.endpoint import CycleResult

__all__ = ["NotificationError", "NotifierPort", "PresenterPort"]


class NotificationError(RuntimeError):
    """Raised when a notification could not be delivered."""


class PresenterPort(Protocol):
    """Interface for rendering the latest cycle to the user."""

    def render(self, result: CycleResult, /) -> None:
        """Replace the current display with the given cycle result.

        Args:
            result: Ordered classifications of the cycle.

        Raises:
            OSError: If the output stream cannot be written.
        """
        ...


class NotifierPort(Protocol):
    """Interface for delivering an alert to the user."""

    def notify(self, title: str, body: str, /) -> None:
        """Deliver one notification.

        Args:
            title: Short headline.
            body: Multi-line message.

        Raises:
            NotificationError: If delivery failed.
        """
        ...

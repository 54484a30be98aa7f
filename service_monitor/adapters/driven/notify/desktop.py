"""Desktop notification adapter."""

import logging

from plyer import notification

from service_monitor.ports.output import NotificationError

__all__ = ["APP_NAME", "DISPLAY_TIMEOUT", "DesktopNotifier"]

logger = logging.getLogger(__name__)

APP_NAME = "Server Monitor"
DISPLAY_TIMEOUT = 10


class DesktopNotifier:
    """Deliver alerts through the platform's notification centre (via plyer)."""

    def __init__(self, app_name: str = APP_NAME, timeout: int = DISPLAY_TIMEOUT) -> None:
        self.app_name = app_name
        self.timeout = timeout

    def notify(self, title: str, body: str) -> None:
        """Show one desktop notification.

        Args:
            title: Notification headline.
            body: Notification text.

        Raises:
            NotificationError: If no backend is available or delivery failed.
        """
        try:
            notification.notify(
                title=title,
                message=body,
                app_name=self.app_name,
                timeout=self.timeout,
            )
        except Exception as e:  # noqa: BLE001
            raise NotificationError(f"Desktop notification failed: {e}") from e
        logger.debug(f"Notification sent: {title}")

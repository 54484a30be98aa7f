"""Configuration building and validation from command-line values."""

import logging
from typing import Literal

from pydantic import BaseModel, Field, field_validator

__all__ = ["DEFAULT_INTERVAL", "DEFAULT_SERVERS", "Settings", "load_settings"]

logger = logging.getLogger(__name__)

DEFAULT_INTERVAL = 180
DEFAULT_SERVERS: list[tuple[str, str]] = [
    ("chat.com", "Chat Application"),
    ("192.4.5.11", "Example App"),
    ("dns.google", "Google DNS Service"),
]


class Settings(BaseModel):
    """Runtime configuration for the monitor.

    Attributes:
        servers: (address, label) pairs to monitor, in display order.
        interval_in_sec: Seconds to wait after each cycle (must be positive).
        probe_mode: Probe strategy selection: auto, ping or http.
        alert_mode: every-cycle re-alerts each cycle; on-change only on transitions.
        concurrency: Maximum probes in flight per cycle.
    """

    servers: list[tuple[str, str]] = Field(..., min_length=1, description="Servers to monitor.")
    interval_in_sec: int = Field(DEFAULT_INTERVAL, gt=0, description="Seconds between cycles.")
    probe_mode: Literal["auto", "ping", "http"] = Field("auto", description="Probe strategy.")
    alert_mode: Literal["every-cycle", "on-change"] = Field(
        "every-cycle",
        description="Alert on every cycle or only when an endpoint changes status.",
    )
    concurrency: int = Field(1, ge=1, description="Maximum probes in flight per cycle.")

    @field_validator("servers")
    @classmethod
    def validate_servers(cls, v: list[tuple[str, str]]) -> list[tuple[str, str]]:
        """Strip surrounding blanks and reject empty addresses or labels.

        Args:
            v: Server pairs to validate.

        Returns:
            The cleaned pairs.

        Raises:
            ValueError: If an address or label is blank.
        """
        cleaned = []
        for address, label in v:
            address, label = address.strip(), label.strip()
            if not address or not label:
                raise ValueError(f"Server and app must both be non-empty (got: '{address},{label}')")
            cleaned.append((address, label))
        return cleaned


def load_settings(
    servers: list[tuple[str, str]] | None = None,
    interval_in_sec: int = DEFAULT_INTERVAL,
    probe_mode: str = "auto",
    alert_mode: str = "every-cycle",
    concurrency: int = 1,
) -> Settings:
    """Build and validate settings from command-line values.

    Falls back to DEFAULT_SERVERS when no servers are given.

    Returns:
        Validated Settings object.

    Raises:
        ValueError: If configuration is invalid.
    """
    settings = Settings(
        servers=servers or DEFAULT_SERVERS,
        interval_in_sec=interval_in_sec,
        probe_mode=probe_mode,
        alert_mode=alert_mode,
        concurrency=concurrency,
    )

    logger.info(
        f"Monitor configured: servers={len(settings.servers)}, "
        f"interval={settings.interval_in_sec}s, "
        f"probe={settings.probe_mode}, "
        f"alerts={settings.alert_mode}, "
        f"concurrency={settings.concurrency}"
    )

    return settings

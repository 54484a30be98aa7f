"""Endpoint, status and cycle result definitions (DTOs)."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import Enum

__all__ = [
    "CycleEntry",
    "CycleResult",
    "Endpoint",
    "Error",
    "Failure",
    "ProbeOutcome",
    "Status",
    "Success",
]


@dataclass(slots=True, frozen=True)
class Endpoint:
    """A monitored server.

    Attributes:
        address: Bare host/IP or URL.
        label: Human-readable application name.
    """

    address: str
    label: str


class Status(str, Enum):
    """Health classification of an endpoint for one cycle."""

    ACTIVE = "Active"
    INACTIVE = "Inactive"
    UNKNOWN = "Unknown"


@dataclass(slots=True, frozen=True)
class Success:
    """Probe reached the endpoint and it answered healthily."""


@dataclass(slots=True, frozen=True)
class Failure:
    """Probe completed but the endpoint reported failure."""

    reason: str


@dataclass(slots=True, frozen=True)
class Error:
    """Probe could not be completed or its result could not be interpreted."""

    reason: str


ProbeOutcome = Success | Failure | Error


@dataclass(slots=True, frozen=True)
class CycleEntry:
    """Classification of one endpoint in one cycle.

    Attributes:
        endpoint: The probed endpoint.
        status: Classified status.
        checked_at: Local time when the probe finished.
        reason: Failure or error reason; empty for healthy endpoints.
    """

    endpoint: Endpoint
    status: Status
    checked_at: datetime
    reason: str = ""


CycleResult = tuple[CycleEntry, ...]

"""Probe port definition (interface)."""

from __future__ import annotations

from collections.abc import Awaitable, Callable
from typing import Protocol

from service_monitor.ports.endpoint import Endpoint, ProbeOutcome

__all__ = ["ProbeFn", "ProbePort"]

ProbeFn = Callable[[Endpoint], Awaitable[ProbeOutcome]]


class ProbePort(Protocol):
    """Interface for a single reachability check.

    Implementations perform exactly one outbound operation per call, never
    retry, and report every network failure as an outcome instead of raising.
    """

    async def probe(self, endpoint: Endpoint, /) -> ProbeOutcome:
        """Check one endpoint.

        Args:
            endpoint: The endpoint to check.

        Returns:
            Success, Failure or Error.
        """
        ...

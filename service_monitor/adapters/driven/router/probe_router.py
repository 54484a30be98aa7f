"""Per-endpoint selection between the ping and HTTP probes."""

from service_monitor.core.address import has_protocol
from service_monitor.ports.endpoint import Endpoint, ProbeOutcome
from service_monitor.ports.probe import ProbePort

__all__ = ["PROBE_MODES", "ProbeRouter"]

PROBE_MODES = ("auto", "ping", "http")


class ProbeRouter:
    """Dispatch each endpoint to a probe strategy.

    In "auto" mode URLs go to the HTTP probe and bare hosts to ping;
    "ping" and "http" force one strategy for every endpoint.
    """

    def __init__(self, ping: ProbePort, http: ProbePort, mode: str = "auto") -> None:
        if mode not in PROBE_MODES:
            raise ValueError(f"Unknown probe mode: {mode}")
        self.ping = ping
        self.http = http
        self.mode = mode

    def strategy_for(self, endpoint: Endpoint) -> ProbePort:
        if self.mode == "ping":
            return self.ping
        if self.mode == "http":
            return self.http
        return self.http if has_protocol(endpoint.address) else self.ping

    async def probe(self, endpoint: Endpoint) -> ProbeOutcome:
        return await self.strategy_for(endpoint).probe(endpoint)

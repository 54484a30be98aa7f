"""ICMP echo probe adapter backed by the system ping binary."""

import asyncio
import logging
import re
import sys

from service_monitor.core.address import probe_host
from service_monitor.ports.endpoint import Endpoint, Error, Failure, ProbeOutcome, Success

__all__ = ["PingProbe", "build_ping_command", "parse_ping_output"]

logger = logging.getLogger(__name__)

PING_BIN = "ping"
REPLY_TIMEOUT = 2
PROCESS_GRACE = 3

# Unix: "1 packets transmitted, 1 received, 0% packet loss"
# Windows: "Packets: Sent = 1, Received = 1, Lost = 0 (0% loss)"
_LOSS_RE = re.compile(r"(\d+(?:\.\d+)?)%\s*(?:packet\s+)?loss")


def build_ping_command(host: str, reply_timeout: int = REPLY_TIMEOUT, platform: str = sys.platform) -> list[str]:
    """Build a single-echo ping command line for the given platform.

    Args:
        host: Host or IP to ping.
        reply_timeout: Seconds to wait for the echo reply.
        platform: Value of sys.platform to build for.

    Returns:
        argv list suitable for create_subprocess_exec.
    """
    if platform == "win32":
        return [PING_BIN, "-n", "1", "-w", str(reply_timeout * 1000), host]
    if platform == "darwin":
        return [PING_BIN, "-c", "1", "-W", str(reply_timeout * 1000), host]
    return [PING_BIN, "-c", "1", "-W", str(reply_timeout), host]


def parse_ping_output(output: str) -> ProbeOutcome:
    """Turn ping output into an outcome based on its packet loss figure.

    Args:
        output: Combined stdout/stderr of one ping run.

    Returns:
        Success for 0% loss, Failure for any other loss,
        Error when no loss figure can be found.
    """
    match = _LOSS_RE.search(output)
    if match is None:
        return Error(reason="no packet loss figure in ping output")
    loss = float(match.group(1))
    if loss == 0:
        return Success()
    return Failure(reason=f"{loss:g}% packet loss")


class PingProbe:
    """Send one echo request per probe through the system ping."""

    def __init__(self, reply_timeout: int = REPLY_TIMEOUT) -> None:
        self.reply_timeout = reply_timeout

    async def probe(self, endpoint: Endpoint) -> ProbeOutcome:
        """Ping the endpoint's host once.

        Args:
            endpoint: Endpoint whose address is a host, IP or URL.

        Returns:
            Outcome derived from the reported packet loss; Error if ping
            cannot be started, hangs, or prints no loss figure.
        """
        host = probe_host(endpoint.address)
        cmd = build_ping_command(host, self.reply_timeout)
        try:
            proc = await asyncio.create_subprocess_exec(
                *cmd,
                stdout=asyncio.subprocess.PIPE,
                stderr=asyncio.subprocess.STDOUT,
            )
        except OSError as e:
            logger.error(f"Could not start {PING_BIN}: {e}")
            return Error(reason=f"{PING_BIN} could not be started: {e}")

        try:
            stdout, _ = await asyncio.wait_for(
                proc.communicate(), timeout=self.reply_timeout + PROCESS_GRACE
            )
        except asyncio.TimeoutError:
            try:
                proc.kill()
            except ProcessLookupError:
                pass
            await proc.wait()
            logger.warning(f"Ping to {host} did not finish in time")
            return Error(reason="ping timed out")

        outcome = parse_ping_output(stdout.decode(errors="replace"))
        logger.debug(f"Ping to {host} exited with {proc.returncode}: {outcome}")
        return outcome

"""HTTP GET probe adapter."""

import asyncio
import logging
from types import TracebackType

import aiohttp
from aiohttp import ClientResponse, ClientTimeout

from service_monitor.core.address import ensure_protocol
from service_monitor.ports.endpoint import Endpoint, Error, Failure, ProbeOutcome, Success

__all__ = ["HttpProbe"]

logger = logging.getLogger(__name__)

PROBE_TIMEOUT = 5
FIRST_SUCCESS_HTTP_CODE = 200
FIRST_FAILING_HTTP_CODE = 300


class HttpProbe:
    """HTTP reachability probe.

    Features:
    - One GET per probe, no retries.
    - Fixed total timeout.
    - Context manager for proper session cleanup.
    """

    def __init__(self, timeout: float = PROBE_TIMEOUT) -> None:
        """Initialize HTTP probe.

        Args:
            timeout: Total timeout for one GET, in seconds.
        """
        self.timeout = timeout
        self.session: aiohttp.ClientSession | None = None

    async def __aenter__(self) -> "HttpProbe":
        """Enter async context manager (start session).

        Returns:
            Self for use in async with statement.
        """
        self.session = aiohttp.ClientSession()
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        """Exit async context manager (close session).

        Args:
            exc_type: Exception type if raised in context.
            exc: Exception instance if raised in context.
            tb: Traceback if raised in context.
        """
        if self.session:
            await self.session.close()

    async def _get_once(self, url: str) -> ClientResponse:
        """Single HTTP GET request.

        Args:
            url: URL to fetch.

        Returns:
            HTTP response.

        Raises:
            RuntimeError: If session not initialized.
            aiohttp exceptions: Network/timeout errors.
        """
        if self.session is None:
            raise RuntimeError("Session not initialized; use 'async with' context manager")
        client_timeout = ClientTimeout(total=self.timeout)
        return await self.session.get(url, timeout=client_timeout, allow_redirects=True)

    async def probe(self, endpoint: Endpoint) -> ProbeOutcome:
        """Check if an HTTP endpoint answers with a success status.

        Args:
            endpoint: Endpoint whose address is a URL or bare host.

        Returns:
            Success for 2xx, Failure for any other status,
            Error on transport failures (DNS, refused, TLS, timeout).
        """
        url = ensure_protocol(endpoint.address)
        logger.debug(f"Probing endpoint {url}...")
        try:
            resp = await self._get_once(url)
        except asyncio.TimeoutError:
            logger.warning(f"Probe timed out for {url}")
            return Error(reason=f"timed out after {self.timeout}s")
        except aiohttp.ClientError as e:
            logger.warning(f"Probe failed for {url}: {e}")
            return Error(reason=str(e) or type(e).__name__)

        status = resp.status
        resp.release()
        logger.debug(f"Probe for {url} returned status {status}")
        if FIRST_SUCCESS_HTTP_CODE <= status < FIRST_FAILING_HTTP_CODE:
            return Success()
        return Failure(reason=f"HTTP {status}")

"""
Network transport for the MusicBrainz client.

A transport performs exactly one GET per call and reports the raw status and
body. It never interprets status codes; that is the classifier's job.
"""

import asyncio
import logging
import time
from dataclasses import dataclass
from typing import Optional, Protocol

import aiohttp
from yarl import URL

from musicbrainz_cli.exceptions import TransportError

log = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 30.0


@dataclass(frozen=True)
class TransportResponse:
    """Raw outcome of a single GET. `body` is None if reading it failed."""

    status: int
    body: Optional[bytes]


class Transport(Protocol):
    async def get(self, url: str) -> TransportResponse: ...

    async def close(self) -> None: ...


class AiohttpTransport:
    """
    aiohttp-backed transport.

    Every request carries the configured User-Agent, which MusicBrainz
    requires, and is bounded by an overall per-call timeout.
    """

    def __init__(self, user_agent: str, timeout: float = DEFAULT_TIMEOUT):
        """
        Args:
            user_agent: Client identification string sent with every request.
            timeout: Overall per-call timeout in seconds.
        """
        if not user_agent or not user_agent.strip():
            raise ValueError("A non-empty User-Agent is required by MusicBrainz.")
        self.user_agent = user_agent
        self.timeout = timeout
        self._session: Optional[aiohttp.ClientSession] = None

    async def _initialize_session(self) -> None:
        """Ensures an active aiohttp session is available."""
        if self._session is None or self._session.closed:
            connector = aiohttp.TCPConnector(limit=4, ttl_dns_cache=300)
            self._session = aiohttp.ClientSession(
                connector=connector,
                headers={
                    "User-Agent": self.user_agent,
                    "Accept": "application/json",
                },
                timeout=aiohttp.ClientTimeout(total=self.timeout),
            )

    async def close(self) -> None:
        """Gracefully closes the aiohttp session."""
        if self._session and not self._session.closed:
            await self._session.close()

    async def get(self, url: str) -> TransportResponse:
        """
        Performs one GET request.

        The URL is already fully encoded, so it is passed through untouched.

        Raises:
            TransportError: On connection failures, DNS errors or timeouts.
        """
        await self._initialize_session()

        log.debug(f"GET {url}")
        start_time = time.monotonic()
        try:
            async with self._session.get(URL(url, encoded=True)) as r:
                try:
                    body: Optional[bytes] = await r.read()
                except aiohttp.ClientPayloadError as e:
                    log.debug(f"Could not read response body from {url}: {e}")
                    body = None
                duration_ms = (time.monotonic() - start_time) * 1000
                log.debug(f"GET {url} -> {r.status} in {duration_ms:.0f}ms")
                return TransportResponse(status=r.status, body=body)
        except asyncio.TimeoutError as e:
            raise TransportError(
                f"Request to {url} timed out after {self.timeout}s"
            ) from e
        except aiohttp.ClientError as e:
            raise TransportError(f"HTTP request error: {e}") from e

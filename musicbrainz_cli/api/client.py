"""
Async client for the MusicBrainz web service (WS/2, JSON).

Every public call is one logical request: it goes through the shared request
gate and a single retry loop, and either returns a decoded model or raises a
CatalogError subclass.
"""

import asyncio
import logging
from typing import Awaitable, Callable, Optional, Type, TypeVar, Union
from urllib.parse import quote
from uuid import UUID

from pydantic import BaseModel

from musicbrainz_cli.exceptions import InvalidMbidError
from musicbrainz_cli.models.config import ClientConfig
from musicbrainz_cli.models.entities import (
    Artist,
    ArtistSearchResult,
    Recording,
    RecordingSearchResult,
    Release,
    ReleaseSearchResult,
)

from .classifier import classify_response
from .rate_limiter import RequestGate
from .retry import RetryPolicy
from .transport import AiohttpTransport, Transport

log = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)

DEFAULT_LIMIT = 25
MAX_LIMIT = 100


def parse_mbid(mbid: Union[str, UUID]) -> UUID:
    """Accepts a UUID or its string form; raises InvalidMbidError otherwise."""
    if isinstance(mbid, UUID):
        return mbid
    try:
        return UUID(str(mbid).strip())
    except ValueError as e:
        raise InvalidMbidError(f"Invalid MBID format: {mbid}") from e


class MusicBrainzClient:
    """
    Rate-limited async client for the MusicBrainz catalog.

    Features:
    - One request per interval across all tasks sharing this instance
    - Exponential backoff on HTTP 503, nothing else is retried
    - Typed pydantic results and typed errors
    """

    def __init__(
        self,
        config: Optional[ClientConfig] = None,
        transport: Optional[Transport] = None,
        gate: Optional[RequestGate] = None,
        sleep: Optional[Callable[[float], Awaitable[None]]] = None,
    ):
        """
        Initializes the client.

        Args:
            config: Client settings; defaults are used when omitted.
            transport: Network transport. Defaults to an aiohttp transport built
                from the config's User-Agent and timeout.
            gate: Request gate. Each client owns its own gate unless one is
                passed in to be shared between clients.
            sleep: Coroutine used for backoff waits, replaceable in tests.
        """
        self.config = config or ClientConfig()
        self.base_url = self.config.base_url

        self._transport: Transport = transport or AiohttpTransport(
            self.config.user_agent, self.config.timeout
        )
        self._gate = gate or RequestGate(self.config.rate_limit_interval)

        self._retry_policy = RetryPolicy(
            max_retries=self.config.max_retries,
            initial_backoff=self.config.initial_backoff,
            sleep=sleep or asyncio.sleep,
        )

    @property
    def gate(self) -> RequestGate:
        return self._gate

    async def close(self) -> None:
        """Closes the underlying transport."""
        await self._transport.close()

    async def __aenter__(self) -> "MusicBrainzClient":
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()

    async def get(self, url: str, model: Type[ModelT]) -> ModelT:
        """
        Executes a rate-limited GET request with retry on 503.

        Raises:
            TransportError, NotFoundError, ParseError, ApiError,
            RateLimitExceededError
        """
        log.debug(f"Fetching {model.__name__} from {url}")

        async def attempt() -> ModelT:
            response = await self._transport.get(url)
            return classify_response(url, response, model)

        return await self._retry_policy.run(self._gate, attempt)

    def _search_url(
        self, entity: str, query: str, limit: Optional[int], offset: Optional[int]
    ) -> str:
        if (limit is not None and limit < 0) or (offset is not None and offset < 0):
            raise ValueError("limit and offset cannot be negative.")
        limit = min(DEFAULT_LIMIT if limit is None else limit, MAX_LIMIT)
        offset = 0 if offset is None else offset
        return (
            f"{self.base_url}/{entity}?query={quote(query, safe='')}"
            f"&limit={limit}&offset={offset}&fmt=json"
        )

    def _lookup_url(self, entity: str, mbid: Union[str, UUID], inc: str) -> str:
        return f"{self.base_url}/{entity}/{parse_mbid(mbid)}?inc={inc}&fmt=json"

    # Public API Methods
    async def search_recordings(
        self, query: str, limit: Optional[int] = None, offset: Optional[int] = None
    ) -> RecordingSearchResult:
        url = self._search_url("recording", query, limit, offset)
        return await self.get(url, RecordingSearchResult)

    async def search_artists(
        self, query: str, limit: Optional[int] = None, offset: Optional[int] = None
    ) -> ArtistSearchResult:
        url = self._search_url("artist", query, limit, offset)
        return await self.get(url, ArtistSearchResult)

    async def search_releases(
        self, query: str, limit: Optional[int] = None, offset: Optional[int] = None
    ) -> ReleaseSearchResult:
        url = self._search_url("release", query, limit, offset)
        return await self.get(url, ReleaseSearchResult)

    async def lookup_recording(self, mbid: Union[str, UUID]) -> Recording:
        """Looks up a recording with its artists and releases inline."""
        return await self.get(
            self._lookup_url("recording", mbid, "artists+releases"), Recording
        )

    async def lookup_artist(self, mbid: Union[str, UUID]) -> Artist:
        """Looks up an artist with its recordings and releases inline."""
        return await self.get(
            self._lookup_url("artist", mbid, "recordings+releases"), Artist
        )

    async def lookup_release(self, mbid: Union[str, UUID]) -> Release:
        """Looks up a release with its artist credits inline."""
        return await self.get(self._lookup_url("release", mbid, "artists"), Release)

"""
Bounded exponential backoff for requests the server rejects as overloaded.
"""

import asyncio
import logging
from typing import Awaitable, Callable, TypeVar

from musicbrainz_cli.exceptions import RateLimitExceededError, ServerOverloadedError

from .rate_limiter import RequestGate

log = logging.getLogger(__name__)

T = TypeVar("T")

DEFAULT_MAX_RETRIES = 3
DEFAULT_INITIAL_BACKOFF = 1.0


class RetryPolicy:
    """
    Runs a single logical request, retrying only on HTTP 503.

    Every attempt goes through the gate. After the n-th 503 the policy sleeps
    `initial_backoff * 2 ** (n - 1)` seconds. There is no jitter and no ceiling
    beyond `max_retries`. Any other error propagates on the first attempt.
    """

    def __init__(
        self,
        max_retries: int = DEFAULT_MAX_RETRIES,
        initial_backoff: float = DEFAULT_INITIAL_BACKOFF,
        sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
    ):
        if max_retries < 0:
            raise ValueError("max_retries cannot be negative.")
        if initial_backoff < 0:
            raise ValueError("initial_backoff cannot be negative.")
        self.max_retries = max_retries
        self.initial_backoff = initial_backoff
        self._sleep = sleep

    async def run(self, gate: RequestGate, attempt: Callable[[], Awaitable[T]]) -> T:
        """
        Executes `attempt` until it returns, raises a terminal error, or the
        retry budget is spent.

        Raises:
            RateLimitExceededError: If the server still answers 503 after
                `max_retries` retried attempts.
        """
        retries_used = 0
        backoff = self.initial_backoff

        while True:
            await gate.acquire()
            try:
                return await attempt()
            except ServerOverloadedError as e:
                if retries_used >= self.max_retries:
                    log.warning(
                        "[yellow]Max retries exceeded for rate limiting[/yellow]"
                    )
                    raise RateLimitExceededError() from e
                retries_used += 1
                log.warning(
                    f"[yellow]Rate limited (503), retry {retries_used} of "
                    f"{self.max_retries} after {backoff:.1f}s[/yellow]"
                )

            await self._sleep(backoff)
            backoff *= 2

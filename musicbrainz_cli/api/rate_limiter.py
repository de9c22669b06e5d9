"""
Provides the request gate that spaces outbound calls to the MusicBrainz API.

MusicBrainz allows roughly one request per second per client. The gate keeps a
single "last request" cursor rather than a token bucket: waiting idle does not
earn credit for a burst of immediate requests.
"""

import asyncio
import logging
from typing import Optional

log = logging.getLogger(__name__)

DEFAULT_INTERVAL = 1.0


class RequestGate:
    """
    Serializes callers so that request start times are at least `interval`
    seconds apart, however many tasks share the gate.
    """

    def __init__(self, interval: float = DEFAULT_INTERVAL):
        """
        Initializes the gate.

        Args:
            interval: Minimum spacing in seconds between two acquisitions.
        """
        if interval < 0:
            raise ValueError("Gate interval cannot be negative.")
        self._interval = interval
        self._last_request_at: Optional[float] = None
        self._lock = asyncio.Lock()

    @property
    def interval(self) -> float:
        return self._interval

    @property
    def last_request_at(self) -> Optional[float]:
        """Loop time of the last successful acquisition, or None if idle."""
        return self._last_request_at

    async def acquire(self) -> None:
        """
        Waits until the interval since the previous acquisition has elapsed,
        then records the current time and returns.

        The observe/wait/record sequence runs under the lock, so two callers can
        never both act on the same stale timestamp. A cancelled waiter leaves the
        timestamp untouched and releases the lock.
        """
        async with self._lock:
            loop = asyncio.get_event_loop()
            if self._last_request_at is not None:
                # The loop may wake a sleeper up to one clock tick early.
                while (
                    wait := self._interval - (loop.time() - self._last_request_at)
                ) > 0:
                    log.debug(f"Rate limiting: waiting {wait:.3f}s")
                    await asyncio.sleep(wait)

            self._last_request_at = loop.time()

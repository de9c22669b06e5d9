"""
MusicBrainz API Layer.

This package handles all communication with the MusicBrainz web service.
"""

from .client import MusicBrainzClient
from .rate_limiter import RequestGate
from .retry import RetryPolicy
from .transport import AiohttpTransport, TransportResponse

__all__ = [
    "AiohttpTransport",
    "MusicBrainzClient",
    "RequestGate",
    "RetryPolicy",
    "TransportResponse",
]

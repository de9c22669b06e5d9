"""
Defines custom exceptions for the application to allow for more specific error handling.
"""


class MusicBrainzCliError(Exception):
    """Base exception for all application-specific errors."""


class ConfigurationError(MusicBrainzCliError):
    """Raised for issues related to configuration loading or validation."""


class InvalidMbidError(MusicBrainzCliError):
    """Raised when a lookup identifier is not a valid MusicBrainz ID (UUID)."""


class CatalogError(MusicBrainzCliError):
    """Base class for every terminal outcome of a catalog request."""


class TransportError(CatalogError):
    """Raised when the network call itself fails (connection, DNS, timeout)."""


class RateLimitExceededError(CatalogError):
    """Raised when the server keeps answering 503 after all retries are spent."""

    def __init__(self, message: str = "Rate limited by MusicBrainz API"):
        super().__init__(message)


class NotFoundError(CatalogError):
    """Raised when the requested resource does not exist (HTTP 404)."""

    def __init__(self, url: str):
        self.url = url
        super().__init__(f"Resource not found: {url}")


class ParseError(CatalogError):
    """Raised when a successful response body cannot be decoded."""


class ApiError(CatalogError):
    """Raised for any other non-2xx response."""

    def __init__(self, status: int, message: str):
        self.status = status
        self.message = message
        super().__init__(f"API error: {status} - {message}")


class ServerOverloadedError(CatalogError):
    """
    The server answered 503. Only the retry policy handles this signal; it is
    converted into RateLimitExceededError once the retry budget is exhausted.
    """

    def __init__(self, url: str):
        self.url = url
        super().__init__(f"Service unavailable: {url}")

"""
Maps raw transport responses to decoded models or typed errors.
"""

import logging
from typing import Type, TypeVar

from pydantic import BaseModel, ValidationError

from musicbrainz_cli.exceptions import (
    ApiError,
    NotFoundError,
    ParseError,
    ServerOverloadedError,
)

from .transport import TransportResponse

log = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)

UNKNOWN_ERROR_MESSAGE = "Unknown error"


def classify_response(
    url: str, response: TransportResponse, model: Type[ModelT]
) -> ModelT:
    """
    Decodes a successful response into `model`, or raises the matching error.

    - 2xx: decode; a body that does not fit the model raises ParseError.
    - 404: NotFoundError.
    - 503: ServerOverloadedError, the only retryable signal.
    - anything else: ApiError carrying the response body as its message.
    """
    status = response.status

    if 200 <= status < 300:
        if response.body is None:
            raise ParseError("Failed to parse response: body could not be read")
        try:
            return model.model_validate_json(response.body)
        except ValidationError as e:
            raise ParseError(f"Failed to parse response: {e}") from e

    if status == 404:
        raise NotFoundError(url)

    if status == 503:
        raise ServerOverloadedError(url)

    if response.body is None:
        message = UNKNOWN_ERROR_MESSAGE
    else:
        message = response.body.decode("utf-8", errors="replace")
    log.debug(f"API error {status} for {url}: {message}")
    raise ApiError(status=status, message=message)

from contextlib import contextmanager
from typing import Generator

import httpx
from pydantic import ValidationError

from ..models.errors import DecodingError, TransportError


@contextmanager
def handle_transport_errors(method: str, url: str) -> Generator[None, None, None]:
    """Context manager converting httpx request failures into TransportError.

    Wraps the network part of a call. Connection failures, timeouts and
    protocol errors are re-raised as TransportError chained to the cause.

    Raises:
        TransportError: When the request could not be completed.
    """
    try:
        yield
    except httpx.TimeoutException as e:
        raise TransportError(f"{method} {url} timed out: {e}") from e
    except httpx.RequestError as e:
        raise TransportError(f"{method} {url} failed: {e}") from e


@contextmanager
def handle_decoding_errors(target: str) -> Generator[None, None, None]:
    """Context manager converting response validation failures into DecodingError."""
    try:
        yield
    except ValidationError as e:
        raise DecodingError(f"Failed to decode response as {target}: {e}") from e

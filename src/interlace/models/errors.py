from typing import Any, Optional


class InterlaceError(Exception):
    """Base class for every error raised by the SDK."""


class BaseUrlMissingError(InterlaceError):
    def __init__(
        self,
        message="Base URL missing. Pass base_url or set the INTERLACE_BASE_URL environment variable.",
    ):
        self.message = message
        super().__init__(self.message)


class EncodingError(InterlaceError):
    """Raised when a request body cannot be serialized to JSON."""


class TransportError(InterlaceError):
    """Raised when the request never produced an HTTP response.

    Covers connection failures and timeouts. The underlying httpx exception
    is available as ``__cause__``.
    """


class DecodingError(InterlaceError):
    """Raised when a successful response body does not match the expected type."""


class APIError(InterlaceError):
    """The Interlace API rejected the request.

    Raised for every HTTP status >= 400 and for 2xx responses whose
    envelope carries a non-success ``code``. The machine readable ``code``
    is preserved so callers can branch on it.
    """

    def __init__(
        self,
        code: str,
        message: str,
        status_code: Optional[int] = None,
        data: Any = None,
    ):
        self.code = code
        self.message = message
        self.status_code = status_code
        self.data = data
        super().__init__(f"Interlace API Error - Code: {code}, Message: {message}")


class WebhookError(InterlaceError):
    """Raised when an inbound webhook cannot be authenticated or parsed."""

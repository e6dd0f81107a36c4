from ._client_context import ClientContext
from ._config import Config
from ._interlace import Interlace
from ._utils import Endpoint, RequestSpec
from .models import (
    APIError,
    DecodingError,
    EncodingError,
    InterlaceError,
    TransportError,
    WebhookError,
)

__all__ = [
    "Interlace",
    "ClientContext",
    "Config",
    "Endpoint",
    "RequestSpec",
    "APIError",
    "DecodingError",
    "EncodingError",
    "InterlaceError",
    "TransportError",
    "WebhookError",
]

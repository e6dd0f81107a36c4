from .accounts import (
    AccountData,
    AccountListData,
    AccountRegisterRequest,
    AccountStatus,
    AccountType,
)
from .common import ApiResponse, ErrorPayload
from .errors import (
    APIError,
    BaseUrlMissingError,
    DecodingError,
    EncodingError,
    InterlaceError,
    TransportError,
    WebhookError,
)
from .oauth import (
    OAuthAuthorizeData,
    OAuthRefreshTokenData,
    OAuthRefreshTokenRequest,
    OAuthTokenData,
    OAuthTokenRequest,
)
from .webhooks import WebhookEvent, WebhookEventType, WebhookResponse

__all__ = [
    "AccountData",
    "AccountListData",
    "AccountRegisterRequest",
    "AccountStatus",
    "AccountType",
    "ApiResponse",
    "ErrorPayload",
    "APIError",
    "BaseUrlMissingError",
    "DecodingError",
    "EncodingError",
    "InterlaceError",
    "TransportError",
    "WebhookError",
    "OAuthAuthorizeData",
    "OAuthRefreshTokenData",
    "OAuthRefreshTokenRequest",
    "OAuthTokenData",
    "OAuthTokenRequest",
    "WebhookEvent",
    "WebhookEventType",
    "WebhookResponse",
]

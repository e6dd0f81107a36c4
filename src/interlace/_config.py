from os import environ as env
from typing import Optional

from pydantic import BaseModel, ConfigDict, HttpUrl, field_validator

from ._utils.constants import (
    ENV_BASE_URL,
    ENV_CLIENT_ID,
    ENV_TIMEOUT,
    ENV_WEBHOOK_SECRET,
    HEADER_ACCESS_TOKEN,
    PRODUCTION_BASE_URL,
    SANDBOX_BASE_URL,
)
from .models.errors import BaseUrlMissingError

SDK_VERSION = "1.0.0"
DEFAULT_USER_AGENT = f"interlace-python-sdk/{SDK_VERSION}"
DEFAULT_TIMEOUT = 30.0


class Config(BaseModel):
    model_config = ConfigDict(validate_assignment=True)

    base_url: str = SANDBOX_BASE_URL
    client_id: Optional[str] = None
    user_agent: str = DEFAULT_USER_AGENT
    timeout: float = DEFAULT_TIMEOUT
    auth_header: str = HEADER_ACCESS_TOKEN
    webhook_secret: Optional[str] = None

    @field_validator("base_url", mode="before")
    @classmethod
    def validate_url(cls, value: Optional[str]) -> str:
        if not value:
            raise BaseUrlMissingError()
        url_value = HttpUrl(value)
        assert url_value.scheme in ("http", "https"), "Invalid URL"
        assert url_value.host, "Invalid URL"
        return value.rstrip("/")

    @field_validator("timeout")
    @classmethod
    def validate_timeout(cls, value: float) -> float:
        assert value > 0, "Timeout must be positive"
        return value

    @classmethod
    def sandbox(cls, **kwargs) -> "Config":
        return cls(base_url=SANDBOX_BASE_URL, **kwargs)

    @classmethod
    def production(cls, **kwargs) -> "Config":
        return cls(base_url=PRODUCTION_BASE_URL, **kwargs)

    @classmethod
    def from_env(cls, **overrides) -> "Config":
        """Build a config from ``INTERLACE_*`` variables; explicit overrides win."""
        values = {
            "base_url": env.get(ENV_BASE_URL) or SANDBOX_BASE_URL,
            "client_id": env.get(ENV_CLIENT_ID),
            "webhook_secret": env.get(ENV_WEBHOOK_SECRET),
        }
        timeout = env.get(ENV_TIMEOUT)
        if timeout:
            values["timeout"] = timeout
        values.update({k: v for k, v in overrides.items() if v is not None})
        return cls(**values)

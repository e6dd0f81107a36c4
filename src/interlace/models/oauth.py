from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class OAuthAuthorizeData(BaseModel):
    model_config = ConfigDict(validate_by_name=True, validate_by_alias=True)

    timestamp: Optional[int] = Field(default=None, alias="timestamp")
    code: str = Field(alias="code")


class OAuthTokenRequest(BaseModel):
    model_config = ConfigDict(validate_by_name=True, validate_by_alias=True)

    code: str = Field(alias="code")
    client_id: str = Field(alias="clientId")


class OAuthTokenData(BaseModel):
    """Token pair returned by the access-token exchange."""

    model_config = ConfigDict(
        validate_by_name=True, validate_by_alias=True, extra="allow"
    )

    access_token: str = Field(alias="accessToken")
    refresh_token: Optional[str] = Field(default=None, alias="refreshToken")
    expires_in: Optional[int] = Field(default=None, alias="expiresIn")
    timestamp: Optional[int] = Field(default=None, alias="timestamp")

    def __repr__(self) -> str:
        return f"OAuthTokenData(expires_in={self.expires_in!r}, timestamp={self.timestamp!r})"


class OAuthRefreshTokenRequest(BaseModel):
    model_config = ConfigDict(validate_by_name=True, validate_by_alias=True)

    client_id: str = Field(alias="clientId")
    refresh_token: str = Field(alias="refreshToken")


class OAuthRefreshTokenData(BaseModel):
    model_config = ConfigDict(
        validate_by_name=True, validate_by_alias=True, extra="allow"
    )

    access_token: str = Field(alias="accessToken")
    expires_in: Optional[int] = Field(default=None, alias="expiresIn")
    timestamp: Optional[int] = Field(default=None, alias="timestamp")

from typing import Optional

from .._utils import Endpoint, RequestSpec
from ..models import (
    ApiResponse,
    OAuthAuthorizeData,
    OAuthRefreshTokenData,
    OAuthRefreshTokenRequest,
    OAuthTokenData,
    OAuthTokenRequest,
)
from ._base_service import BaseService


class OAuthService(BaseService):
    """Service for the Interlace OAuth flow.

    Obtaining a token is a two step exchange: ``authorize`` returns a short
    lived authorization code for a client id, and ``get_access_token``
    trades that code for an access/refresh token pair. None of these calls
    send the access token header.
    """

    def authorize(self, client_id: str) -> OAuthAuthorizeData:
        """Request an authorization code for ``client_id``.

        Args:
            client_id (str): The client id issued by Interlace.

        Returns:
            OAuthAuthorizeData: The authorization code and its timestamp.

        Examples:
            ```python
            from interlace import Interlace

            client = Interlace()

            code = client.oauth.authorize("my-client-id").code
            ```
        """
        response = self.request(
            self._authorize_spec(client_id), ApiResponse[OAuthAuthorizeData]
        )
        return self._unwrap_required(response)

    async def authorize_async(self, client_id: str) -> OAuthAuthorizeData:
        """Asynchronously request an authorization code for ``client_id``."""
        response = await self.request_async(
            self._authorize_spec(client_id), ApiResponse[OAuthAuthorizeData]
        )
        return self._unwrap_required(response)

    def get_access_token(self, code: str, client_id: str) -> OAuthTokenData:
        """Exchange an authorization code for an access token.

        Args:
            code (str): The code returned by :meth:`authorize`.
            client_id (str): The client id the code was issued for.

        Returns:
            OAuthTokenData: The access token, refresh token and expiry.
        """
        response = self.request(
            self._access_token_spec(code, client_id), ApiResponse[OAuthTokenData]
        )
        return self._unwrap_required(response)

    async def get_access_token_async(
        self, code: str, client_id: str
    ) -> OAuthTokenData:
        """Asynchronously exchange an authorization code for an access token."""
        response = await self.request_async(
            self._access_token_spec(code, client_id), ApiResponse[OAuthTokenData]
        )
        return self._unwrap_required(response)

    def refresh_token(
        self, refresh_token: str, client_id: Optional[str] = None
    ) -> OAuthRefreshTokenData:
        """Obtain a new access token from a refresh token.

        Args:
            refresh_token (str): The refresh token from a previous exchange.
            client_id (Optional[str]): Defaults to the configured client id.

        Returns:
            OAuthRefreshTokenData: The new access token and its expiry.
        """
        spec = self._refresh_token_spec(refresh_token, client_id)
        response = self.request(spec, ApiResponse[OAuthRefreshTokenData])
        return self._unwrap_required(response)

    async def refresh_token_async(
        self, refresh_token: str, client_id: Optional[str] = None
    ) -> OAuthRefreshTokenData:
        spec = self._refresh_token_spec(refresh_token, client_id)
        response = await self.request_async(spec, ApiResponse[OAuthRefreshTokenData])
        return self._unwrap_required(response)

    def authorize_and_get_token(self, client_id: Optional[str] = None) -> OAuthTokenData:
        """Run both steps of the flow and return the token pair.

        The shared access token is not modified; use
        :meth:`interlace.Interlace.authenticate` for that.
        """
        client_id = self._resolve_client_id(client_id)
        authorize_data = self.authorize(client_id)
        return self.get_access_token(authorize_data.code, client_id)

    async def authorize_and_get_token_async(
        self, client_id: Optional[str] = None
    ) -> OAuthTokenData:
        client_id = self._resolve_client_id(client_id)
        authorize_data = await self.authorize_async(client_id)
        return await self.get_access_token_async(authorize_data.code, client_id)

    def _resolve_client_id(self, client_id: Optional[str]) -> str:
        client_id = client_id or self._config.client_id
        if not client_id:
            raise ValueError(
                "client_id is required. Pass it explicitly or set INTERLACE_CLIENT_ID."
            )
        return client_id

    def _authorize_spec(self, client_id: str) -> RequestSpec:
        if not client_id:
            raise ValueError("client_id is required")
        return RequestSpec(
            method="GET",
            endpoint=Endpoint.api("oauth/authorize"),
            params={"clientId": client_id},
            requires_auth=False,
        )

    def _access_token_spec(self, code: str, client_id: str) -> RequestSpec:
        if not code:
            raise ValueError("authorization code is required")
        return RequestSpec(
            method="POST",
            endpoint=Endpoint.api("oauth/access-token"),
            json=OAuthTokenRequest(code=code, client_id=self._resolve_client_id(client_id)),
            requires_auth=False,
        )

    def _refresh_token_spec(
        self, refresh_token: str, client_id: Optional[str]
    ) -> RequestSpec:
        if not refresh_token:
            raise ValueError("refresh_token is required")
        return RequestSpec(
            method="POST",
            endpoint=Endpoint.api("oauth/refresh-token"),
            json=OAuthRefreshTokenRequest(
                client_id=self._resolve_client_id(client_id),
                refresh_token=refresh_token,
            ),
            requires_auth=False,
        )

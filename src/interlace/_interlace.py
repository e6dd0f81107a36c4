from functools import cached_property
from logging import getLogger
from os import environ as env
from typing import Optional

from dotenv import load_dotenv

from ._client_context import ClientContext
from ._config import Config
from ._services import AccountsService, FilesService, OAuthService
from ._utils import setup_logging
from ._utils.constants import ENV_ACCESS_TOKEN
from .models import OAuthTokenData

load_dotenv()


class Interlace:
    """Entry point of the Interlace SDK.

    Every service exposed here shares one ClientContext, so setting the
    access token (directly or through :meth:`authenticate`) applies to all
    of them at once.
    """

    def __init__(
        self,
        *,
        base_url: Optional[str] = None,
        client_id: Optional[str] = None,
        access_token: Optional[str] = None,
        timeout: Optional[float] = None,
        config: Optional[Config] = None,
        debug: bool = False,
    ) -> None:
        """
        Initialize the Interlace client.

        Args:
            base_url (Optional[str]): API base URL. Falls back to
                ``INTERLACE_BASE_URL`` and then to the sandbox URL.
            client_id (Optional[str]): OAuth client id. Falls back to ``INTERLACE_CLIENT_ID``.
            access_token (Optional[str]): An existing access token. Falls back to
                ``INTERLACE_ACCESS_TOKEN``.
            timeout (Optional[float]): Request timeout in seconds.
            config (Optional[Config]): A complete configuration; the keyword
                arguments above are ignored when it is given.
            debug (bool): Enable debug logging.
        """
        if config is None:
            config = Config.from_env(
                base_url=base_url, client_id=client_id, timeout=timeout
            )

        setup_logging(debug)
        log = getLogger("interlace")
        log.debug(f"CONFIG: {config.model_dump(exclude={'webhook_secret'})}")

        self._context = ClientContext(
            config, access_token=access_token or env.get(ENV_ACCESS_TOKEN)
        )

    @property
    def config(self) -> Config:
        return self._context.config

    @property
    def access_token(self) -> str:
        return self._context.access_token

    @access_token.setter
    def access_token(self, value: Optional[str]) -> None:
        self._context.access_token = value

    @property
    def is_authenticated(self) -> bool:
        return self._context.is_authenticated

    def set_base_url(self, base_url: str) -> None:
        """Point every service at a different base URL."""
        self._context.config = self._context.config.model_copy(
            update={"base_url": Config(base_url=base_url).base_url}
        )

    @cached_property
    def oauth(self) -> OAuthService:
        return OAuthService(self._context)

    @cached_property
    def accounts(self) -> AccountsService:
        """
        Accounts are the customers registered under your Interlace client.
        """
        return AccountsService(self._context)

    @cached_property
    def files(self) -> FilesService:
        """
        Upload documents referenced by KYC and other verification requests.
        """
        return FilesService(self._context)

    def authenticate(self, client_id: Optional[str] = None) -> OAuthTokenData:
        """Run the OAuth flow and store the resulting access token.

        Args:
            client_id (Optional[str]): Defaults to the configured client id.

        Returns:
            OAuthTokenData: The token pair, including the refresh token.
        """
        token_data = self.oauth.authorize_and_get_token(client_id)
        self.access_token = token_data.access_token
        return token_data

    async def authenticate_async(
        self, client_id: Optional[str] = None
    ) -> OAuthTokenData:
        token_data = await self.oauth.authorize_and_get_token_async(client_id)
        self.access_token = token_data.access_token
        return token_data

    def close(self) -> None:
        self._context.close()

    async def aclose(self) -> None:
        await self._context.aclose()

    def __enter__(self) -> "Interlace":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    async def __aenter__(self) -> "Interlace":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

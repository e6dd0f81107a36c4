import threading
from typing import Optional

from httpx import AsyncClient, Client

from ._config import Config


class ClientContext:
    """State shared by the top-level client and every service.

    Services keep a reference to the same instance, so a token obtained by
    the OAuth flow or set by the caller is seen by all of them. Reads and
    writes of the token and config go through a lock.

    The context also owns the httpx connection pools, which are created on
    first use.
    """

    def __init__(self, config: Config, access_token: Optional[str] = None) -> None:
        self._lock = threading.Lock()
        self._config = config
        self._access_token = access_token or ""
        self._client: Optional[Client] = None
        self._client_async: Optional[AsyncClient] = None

    @property
    def config(self) -> Config:
        with self._lock:
            return self._config

    @config.setter
    def config(self, config: Config) -> None:
        with self._lock:
            self._config = config

    @property
    def access_token(self) -> str:
        with self._lock:
            return self._access_token

    @access_token.setter
    def access_token(self, value: Optional[str]) -> None:
        with self._lock:
            self._access_token = value or ""

    @property
    def is_authenticated(self) -> bool:
        return self.access_token != ""

    @property
    def client(self) -> Client:
        with self._lock:
            if self._client is None:
                self._client = Client(timeout=self._config.timeout)
            return self._client

    @property
    def client_async(self) -> AsyncClient:
        with self._lock:
            if self._client_async is None:
                self._client_async = AsyncClient(timeout=self._config.timeout)
            return self._client_async

    def close(self) -> None:
        with self._lock:
            client, self._client = self._client, None
        if client is not None:
            client.close()

    async def aclose(self) -> None:
        with self._lock:
            client, self._client_async = self._client_async, None
        if client is not None:
            await client.aclose()

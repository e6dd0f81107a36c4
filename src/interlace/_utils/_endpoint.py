from .constants import API_PREFIX


class Endpoint(str):
    """A path relative to the configured base URL.

    Paths are normalised to start with a single slash so that
    ``base_url + endpoint`` always yields a well-formed URL.
    """

    def __new__(cls, endpoint: str) -> "Endpoint":
        if not endpoint.startswith("/"):
            endpoint = f"/{endpoint}"
        return super().__new__(cls, endpoint)

    @classmethod
    def api(cls, path: str) -> "Endpoint":
        """Build an endpoint under the versioned ``/open-api/v3`` prefix."""
        return cls(f"{API_PREFIX}/{path.lstrip('/')}")

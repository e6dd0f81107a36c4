import sys
from pathlib import Path
from typing import Generator

import pytest
from click.testing import CliRunner

# Ensure local source package (src/interlace) is importable before tests collect
_PROJECT_ROOT: Path = Path(__file__).resolve().parents[1]
_SRC_PATH: Path = _PROJECT_ROOT / "src"
if _SRC_PATH.exists():
    sys.path.insert(0, str(_SRC_PATH))

from interlace._client_context import ClientContext  # noqa: E402
from interlace._config import Config  # noqa: E402


@pytest.fixture
def runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Clean environment variables before each test."""
    for name in (
        "INTERLACE_BASE_URL",
        "INTERLACE_CLIENT_ID",
        "INTERLACE_ACCESS_TOKEN",
        "INTERLACE_WEBHOOK_SECRET",
        "INTERLACE_TIMEOUT",
    ):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def anyio_backend() -> str:
    return "asyncio"


@pytest.fixture
def base_url() -> str:
    return "https://test.interlace.money"


@pytest.fixture
def access_token() -> str:
    return "test-access-token"


@pytest.fixture
def user_agent() -> str:
    return "interlace-python-sdk/test"


@pytest.fixture
def config(base_url: str, user_agent: str) -> Config:
    return Config(base_url=base_url, client_id="test-client-id", user_agent=user_agent)


@pytest.fixture
def context(config: Config, access_token: str) -> Generator[ClientContext, None, None]:
    ctx = ClientContext(config, access_token=access_token)
    yield ctx
    ctx.close()

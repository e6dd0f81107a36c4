import pydantic
import pytest

from interlace._config import DEFAULT_USER_AGENT, Config
from interlace.models.errors import BaseUrlMissingError


class TestSdkConfig:
    def test_defaults_to_sandbox(self):
        config = Config()

        assert config.base_url == "https://api-sandbox.interlace.money"
        assert config.user_agent == DEFAULT_USER_AGENT
        assert config.timeout == 30.0
        assert config.auth_header == "x-access-token"

    def test_production(self):
        assert Config.production().base_url == "https://api.interlace.money"

    def test_trailing_slash_is_stripped(self):
        assert Config(base_url="https://example.com/").base_url == "https://example.com"

    def test_invalid_url(self):
        with pytest.raises(pydantic.ValidationError):
            Config(base_url="not a url")

    def test_empty_base_url(self):
        with pytest.raises(BaseUrlMissingError):
            Config(base_url="")

    def test_timeout_must_be_positive(self):
        with pytest.raises(pydantic.ValidationError):
            Config(timeout=0)

    def test_config_from_env(self, monkeypatch):
        monkeypatch.setenv("INTERLACE_BASE_URL", "https://example.com")
        monkeypatch.setenv("INTERLACE_CLIENT_ID", "client-1")
        monkeypatch.setenv("INTERLACE_WEBHOOK_SECRET", "whsec")
        monkeypatch.setenv("INTERLACE_TIMEOUT", "5")

        config = Config.from_env()

        assert config.base_url == "https://example.com"
        assert config.client_id == "client-1"
        assert config.webhook_secret == "whsec"
        assert config.timeout == 5.0

    def test_overrides_win_over_env(self, monkeypatch):
        monkeypatch.setenv("INTERLACE_BASE_URL", "https://example.com")

        config = Config.from_env(base_url="https://other.example.com", client_id=None)

        assert config.base_url == "https://other.example.com"
        assert config.client_id is None

    def test_malformed_timeout_in_env(self, monkeypatch):
        monkeypatch.setenv("INTERLACE_TIMEOUT", "thirty")

        with pytest.raises(pydantic.ValidationError, match="timeout"):
            Config.from_env()

    def test_timeout_override_wins_over_env(self, monkeypatch):
        monkeypatch.setenv("INTERLACE_TIMEOUT", "5")

        assert Config.from_env(timeout=2.5).timeout == 2.5

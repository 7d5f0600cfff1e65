"""Tests for ScraperConfig."""
import pytest

from config.scraper_config import (
    DEFAULT_BROWSER_ENDPOINT,
    DEFAULT_PROXY_RETRIES,
    DEFAULT_SESSION_TTL,
    ScraperConfig,
)
from src.errors import ConfigurationError


@pytest.fixture
def clean_env(monkeypatch):
    for name in (
        "SCRAPELESS_API_KEY",
        "SCRAPELESS_API_TOKEN",
        "SCRAPELESS_BROWSER_ENDPOINT",
        "SCRAPER_PROXY_RETRIES",
        "SCRAPER_SESSION_TTL",
    ):
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


class TestScraperConfig:
    """Tests for argument > environment > default resolution."""

    async def test_defaults(self, clean_env):
        config = ScraperConfig()

        assert config.api_key is None
        assert config.has_api_key() is False
        assert config.browser_endpoint == DEFAULT_BROWSER_ENDPOINT
        assert config.proxy_retries == list(DEFAULT_PROXY_RETRIES)
        assert config.session_ttl == DEFAULT_SESSION_TTL

    async def test_api_key_from_either_variable(self, clean_env):
        clean_env.setenv("SCRAPELESS_API_TOKEN", "sk_token")

        assert ScraperConfig().require_api_key() == "sk_token"

    async def test_api_key_variable_takes_priority(self, clean_env):
        clean_env.setenv("SCRAPELESS_API_KEY", "sk_key")
        clean_env.setenv("SCRAPELESS_API_TOKEN", "sk_token")

        assert ScraperConfig().api_key == "sk_key"

    async def test_argument_beats_environment(self, clean_env):
        clean_env.setenv("SCRAPELESS_API_KEY", "sk_env")

        assert ScraperConfig(api_key="sk_arg").api_key == "sk_arg"

    async def test_environment_overrides(self, clean_env):
        clean_env.setenv("SCRAPELESS_BROWSER_ENDPOINT", "wss://other.example.com/browser")
        clean_env.setenv("SCRAPER_PROXY_RETRIES", "hk, sg ,")
        clean_env.setenv("SCRAPER_SESSION_TTL", "90")

        config = ScraperConfig()

        assert config.browser_endpoint == "wss://other.example.com/browser"
        assert config.proxy_retries == ["HK", "SG"]
        assert config.session_ttl == 90

    async def test_require_api_key_raises_when_missing(self, clean_env):
        with pytest.raises(ConfigurationError, match="SCRAPELESS_API_TOKEN"):
            ScraperConfig().require_api_key()

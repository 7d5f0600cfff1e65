"""Scraper configuration loaded from arguments and environment variables."""
import os

from src.errors import ConfigurationError


DEFAULT_BROWSER_ENDPOINT = "wss://browser.scrapeless.com/api/v2/browser"
DEFAULT_PROXY_RETRIES = ("CN", "HK", "SG")
DEFAULT_SESSION_TTL = 180

API_KEY_ENV_VARS = ("SCRAPELESS_API_KEY", "SCRAPELESS_API_TOKEN")


class ScraperConfig:
    """
    Scraper settings.

    Priority for every setting: constructor argument > environment variable > default.

    Environment variables:
        SCRAPELESS_API_KEY / SCRAPELESS_API_TOKEN: Remote browser credential
        SCRAPELESS_BROWSER_ENDPOINT: CDP websocket endpoint of the remote browser
        SCRAPER_PROXY_RETRIES: Comma separated proxy country codes (e.g. "CN,HK,SG")
        SCRAPER_SESSION_TTL: Session lifetime in seconds

    Usage:
        load_dotenv()
        config = ScraperConfig()
        api_key = config.require_api_key()  # raises ConfigurationError if unset
    """

    def __init__(
        self,
        api_key: str | None = None,
        browser_endpoint: str | None = None,
        proxy_retries: list[str] | None = None,
        session_ttl: int | None = None,
    ):
        self.api_key: str | None = api_key or _first_env(API_KEY_ENV_VARS)
        self.browser_endpoint: str = browser_endpoint or os.getenv(
            "SCRAPELESS_BROWSER_ENDPOINT", DEFAULT_BROWSER_ENDPOINT
        )
        self.proxy_retries: list[str] = proxy_retries or _parse_proxy_list(
            os.getenv("SCRAPER_PROXY_RETRIES")
        )
        self.session_ttl: int = session_ttl or int(
            os.getenv("SCRAPER_SESSION_TTL", str(DEFAULT_SESSION_TTL))
        )

    def has_api_key(self) -> bool:
        return bool(self.api_key)

    def require_api_key(self) -> str:
        """
        Return the API key.

        Raises:
            ConfigurationError: If neither SCRAPELESS_API_KEY nor
                SCRAPELESS_API_TOKEN is set
        """
        if not self.api_key:
            raise ConfigurationError(
                "Missing API key: set the SCRAPELESS_API_KEY or "
                "SCRAPELESS_API_TOKEN environment variable"
            )
        return self.api_key


def _first_env(names: tuple[str, ...]) -> str | None:
    for name in names:
        value = os.getenv(name, "").strip()
        if value:
            return value
    return None


def _parse_proxy_list(raw: str | None) -> list[str]:
    if not raw:
        return list(DEFAULT_PROXY_RETRIES)
    codes = [code.strip().upper() for code in raw.split(",") if code.strip()]
    return codes or list(DEFAULT_PROXY_RETRIES)

"""Orchestration models for a single scrape call."""
import time

from pydantic import BaseModel, ConfigDict, Field, field_validator

from config.scraper_config import DEFAULT_PROXY_RETRIES, DEFAULT_SESSION_TTL
from src.article_extractor.models import SUPPORTED_FORMATS


def _default_session_name() -> str:
    return f"wechat_{int(time.time() * 1000)}"


class FetchOptions(BaseModel):
    """
    Options for one scrape call.

    Attributes:
        session_name: Base name for remote sessions (attempts derive unique names from it)
        session_ttl: Remote session lifetime in seconds
        proxy_country: Preferred proxy country, tried first when proxy_retries is not given
        proxy_retries: Ordered proxy country candidates
        proxy_url: Custom proxy URL; when set, proxy_retries is ignored and a single attempt is made
        session_recording: Whether the provider records sessions
        formats: Output formats to produce ("markdown", "html")

    Example:
        FetchOptions(formats=["markdown"], proxy_retries=["HK", "SG"])
    """

    session_name: str = Field(default_factory=_default_session_name)
    session_ttl: int = DEFAULT_SESSION_TTL
    proxy_country: str = "CN"
    proxy_retries: list[str] = Field(default_factory=lambda: list(DEFAULT_PROXY_RETRIES))
    proxy_url: str | None = None
    session_recording: bool = True
    formats: list[str] = Field(default_factory=lambda: list(SUPPORTED_FORMATS))

    model_config = ConfigDict(frozen=True)

    @field_validator("session_name")
    @classmethod
    def validate_session_name(cls, v: str) -> str:
        """Validate that session_name is not empty."""
        if not v or not v.strip():
            raise ValueError("Session name cannot be empty")
        return v.strip()

    @field_validator("session_ttl")
    @classmethod
    def validate_session_ttl(cls, v: int) -> int:
        """Validate that session_ttl is positive."""
        if v <= 0:
            raise ValueError("Session TTL must be positive")
        return v

    @field_validator("proxy_country")
    @classmethod
    def validate_proxy_country(cls, v: str) -> str:
        """Validate and normalize proxy_country to an upper-case code."""
        if not v or not v.strip():
            raise ValueError("Proxy country cannot be empty")
        return v.strip().upper()

    @field_validator("proxy_retries")
    @classmethod
    def validate_proxy_retries(cls, v: list[str]) -> list[str]:
        """Normalize proxy codes to upper case and drop blanks."""
        return [code.strip().upper() for code in v if code and code.strip()]

    @field_validator("proxy_url")
    @classmethod
    def validate_proxy_url(cls, v: str | None) -> str | None:
        """Treat a blank proxy_url as unset."""
        if v is None:
            return None
        stripped = v.strip()
        return stripped or None

    @field_validator("formats")
    @classmethod
    def validate_formats(cls, v: list[str]) -> list[str]:
        """Validate that formats is a non-empty subset of the supported formats."""
        normalized = [f.strip().lower() for f in v]
        if not normalized:
            raise ValueError("At least one format must be requested")
        unsupported = [f for f in normalized if f not in SUPPORTED_FORMATS]
        if unsupported:
            raise ValueError(
                f"Unsupported formats: {', '.join(unsupported)}. "
                f"Supported formats: {', '.join(SUPPORTED_FORMATS)}"
            )
        return list(dict.fromkeys(normalized))

    def proxy_candidates(self) -> list[str]:
        """
        Ordered proxy country candidates for failover.

        Explicit proxy_retries win. Otherwise proxy_country goes first,
        followed by the default candidates.
        """
        if "proxy_retries" in self.model_fields_set:
            return list(self.proxy_retries)
        candidates = [self.proxy_country] + list(self.proxy_retries)
        return list(dict.fromkeys(candidates))

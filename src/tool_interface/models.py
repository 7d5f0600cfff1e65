"""Tool boundary models: call arguments and response envelope."""
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

from src.article_extractor.models import SUPPORTED_FORMATS
from src.orchestration.models import FetchOptions


class ToolArguments(BaseModel):
    """
    Arguments of a scrape_wechat_article call.

    Accepts the camelCase keys used on the wire (sessionName, sessionTTL,
    proxyCountry) as well as the snake_case field names.
    """

    url: str
    formats: list[str] = Field(default_factory=lambda: list(SUPPORTED_FORMATS))
    session_name: str | None = Field(default=None, alias="sessionName")
    session_ttl: int | None = Field(default=None, alias="sessionTTL")
    proxy_country: str | None = Field(default=None, alias="proxyCountry")

    model_config = ConfigDict(populate_by_name=True)

    @field_validator("url")
    @classmethod
    def validate_url(cls, v: str) -> str:
        """Validate that url is not empty and has proper URL structure."""
        if not v or not v.strip():
            raise ValueError("URL cannot be empty")

        v = v.strip()
        if not (v.startswith("http://") or v.startswith("https://")):
            raise ValueError("URL must start with http:// or https://")

        return v

    def to_fetch_options(self) -> FetchOptions:
        """Build FetchOptions, leaving unset arguments to FetchOptions defaults."""
        overrides = {
            "session_name": self.session_name,
            "session_ttl": self.session_ttl,
            "proxy_country": self.proxy_country,
        }
        return FetchOptions(
            formats=self.formats,
            session_recording=True,
            **{key: value for key, value in overrides.items() if value is not None},
        )


class TextContent(BaseModel):
    """A text content block of a tool response."""

    type: Literal["text"] = "text"
    text: str


class ToolResponse(BaseModel):
    """
    Transport-neutral tool response envelope.

    Example:
        ToolResponse.error_text("Unknown tool: foo")
        # ToolResponse(content=[TextContent(text="Unknown tool: foo")], is_error=True)
    """

    content: list[TextContent]
    is_error: bool = False

    @classmethod
    def success_text(cls, text: str) -> "ToolResponse":
        return cls(content=[TextContent(text=text)])

    @classmethod
    def error_text(cls, text: str) -> "ToolResponse":
        return cls(content=[TextContent(text=text)], is_error=True)

"""Article record models produced by the extraction layer."""
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, field_validator


SUPPORTED_FORMATS = ("markdown", "html")
SAVED_USING = "wechat-article-scraper"


class ArticleMetadata(BaseModel):
    """
    Metadata resolved from an article page.

    Every field is a string and defaults to "" when no source yields a value,
    so consumers never have to handle None.

    Attributes:
        title: Article title
        author: Author (for WeChat, usually the account nickname)
        published_date: ISO 8601 UTC timestamp, or "" if unknown/unparseable
        saved_using: Constant tag identifying this scraper
        account: Public account name
        image_url: Cover image URL
        summary: Description meta text or the start of the body text
        category: Document category (always "article")
    """

    title: str = ""
    author: str = ""
    published_date: str = ""
    saved_using: str = SAVED_USING
    account: str = ""
    image_url: str = ""
    summary: str = ""
    category: str = "article"

    model_config = ConfigDict(frozen=True)

    @field_validator(
        "title", "author", "published_date", "account", "image_url", "summary",
        mode="before",
    )
    @classmethod
    def validate_text_field(cls, v: Any) -> str:
        """Coerce missing values to empty string and trim whitespace."""
        if v is None:
            return ""
        return str(v).strip()

    @field_validator("published_date")
    @classmethod
    def validate_published_date(cls, v: str) -> str:
        """Validate that published_date is empty or a UTC timestamp."""
        if v and not v.endswith("Z"):
            raise ValueError("Published date must be a UTC timestamp ending in 'Z'")
        return v


class ArticleData(BaseModel):
    """Serialized article body. A key is only set when its format was requested."""

    html: str | None = None
    markdown: str | None = None

    model_config = ConfigDict(frozen=True)


class ArticleRecord(BaseModel):
    """
    Final article record handed to the caller.

    Created once at the end of a successful attempt and never mutated.

    Example:
        ArticleRecord(
            url="https://mp.weixin.qq.com/s/abc",
            timestamp="2025-10-29T08:21:00.000Z",
            metadata=ArticleMetadata(title="Hello"),
            data=ArticleData(markdown="# Hello"),
        )
    """

    status: Literal["completed"] = "completed"
    url: str
    timestamp: str
    metadata: ArticleMetadata
    data: ArticleData

    model_config = ConfigDict(frozen=True)

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

    def to_dict(self) -> dict[str, Any]:
        """Plain dict form with unrequested data formats omitted."""
        result = self.model_dump(exclude={"data"})
        result["data"] = self.data.model_dump(exclude_none=True)
        return result

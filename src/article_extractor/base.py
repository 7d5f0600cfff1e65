"""Base protocols for article extraction strategies."""
from collections.abc import Sequence
from typing import Protocol

from .models import ArticleRecord


class ArticleExtractor(Protocol):
    """
    Protocol for article extraction strategies using structural subtyping.

    Any class with a matching extract() method can be plugged into the
    scraping service, which keeps the page acquisition side independent of
    the markup of a particular site.

    Example:
        class MyExtractor:  # No inheritance needed!
            def extract(self, html: str, url: str, formats: Sequence[str]) -> ArticleRecord | None:
                ...
    """

    def extract(
        self, html: str, url: str, formats: Sequence[str]
    ) -> ArticleRecord | None:
        """
        Extract an article record from a fully rendered page.

        Args:
            html: Full page markup
            url: Article URL (copied into the record)
            formats: Requested output formats ("markdown", "html")

        Returns:
            ArticleRecord, or None if the page has no recognizable article body
        """
        ...


class MarkdownConverter(Protocol):
    """Protocol for HTML fragment to Markdown converters (pure, synchronous)."""

    def convert(self, html: str) -> str:
        """Convert an HTML fragment to Markdown."""
        ...

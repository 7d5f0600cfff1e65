"""Base protocol for article scraping orchestrators."""
from typing import Protocol

from src.article_extractor.models import ArticleRecord

from .models import FetchOptions


class ArticleScraper(Protocol):
    """
    Protocol for article scraping orchestrators using structural subtyping.

    Any class implementing acquire() with this signature can back the tool
    boundary or the command-line script, which keeps them testable with a
    Mock(spec=ArticleScraper).
    """

    async def acquire(
        self, url: str, options: FetchOptions | None = None
    ) -> ArticleRecord | None:
        """
        Scrape an article.

        Args:
            url: Article URL
            options: Fetch options (default: FetchOptions())

        Returns:
            ArticleRecord, or None if no article content was found

        Raises:
            ConfigurationError: If credentials are missing
            AllAttemptsFailedError: If every proxy attempt failed
        """
        ...

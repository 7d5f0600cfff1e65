"""Base protocol for article persistence."""
from pathlib import Path
from typing import Protocol

from src.article_extractor.models import ArticleRecord

from .models import SavedArticleFiles


class ArticlePersistenceService(Protocol):
    """
    Protocol for services that persist scraped article records.

    Example:
        class MyWriter:  # No inheritance needed!
            def save(self, record: ArticleRecord, output_file: Path) -> SavedArticleFiles:
                ...
    """

    def save(self, record: ArticleRecord, output_file: Path) -> SavedArticleFiles:
        """
        Persist an article record.

        Args:
            record: Scraped article record
            output_file: Path of the JSON file to write

        Returns:
            SavedArticleFiles listing every written file

        Raises:
            OSError: If a file cannot be written
        """
        ...

"""
Article persistence service layer.

Writes scraped article records to disk: the full record as JSON plus the
Markdown and HTML bodies as sibling files.
"""
import json
from datetime import datetime, timezone
from pathlib import Path

from src.article_extractor.models import ArticleRecord
from src.log import ScraperLogger, resolve_logger

from .models import SavedArticleFiles


def default_output_filename(now: datetime | None = None) -> str:
    """
    Build the default JSON filename for a scrape run.

    Example:
        >>> default_output_filename(datetime(2025, 10, 29, 8, 21, 5, tzinfo=timezone.utc))
        'wechat_article_2025-10-29T08-21-05.json'
    """
    now = now or datetime.now(timezone.utc)
    return f"wechat_article_{now.strftime('%Y-%m-%dT%H-%M-%S')}.json"


class ArticleFileWriter:
    """
    File system implementation of ArticlePersistenceService Protocol.

    For output_file "out/article.json" it writes:
    - out/article.json: the full record (data formats that were not requested are omitted)
    - out/article.md: the Markdown body, if present
    - out/article.html: the HTML body, if present
    """

    def __init__(self, logger: ScraperLogger | None = None):
        self.logger = resolve_logger(logger)

    def save(self, record: ArticleRecord, output_file: Path) -> SavedArticleFiles:
        """
        Write the record and its bodies next to each other.

        Args:
            record: Scraped article record
            output_file: JSON file path; parent directories are created

        Returns:
            SavedArticleFiles listing every written file

        Raises:
            OSError: If any file cannot be written
        """
        output_file = Path(output_file)
        try:
            output_file.parent.mkdir(parents=True, exist_ok=True)

            output_file.write_text(
                json.dumps(record.to_dict(), ensure_ascii=False, indent=2),
                encoding="utf-8",
            )
            self.logger.info(f"Saved article record to {output_file}")

            markdown_file = None
            if record.data.markdown:
                markdown_file = output_file.with_suffix(".md")
                markdown_file.write_text(record.data.markdown, encoding="utf-8")
                self.logger.info(f"Saved Markdown content to {markdown_file}")

            html_file = None
            if record.data.html:
                html_file = output_file.with_suffix(".html")
                html_file.write_text(record.data.html, encoding="utf-8")
                self.logger.info(f"Saved HTML content to {html_file}")

        except OSError as e:
            self.logger.error(f"Failed to save article files for {record.url}: {e}")
            raise

        return SavedArticleFiles(
            json_file=output_file,
            markdown_file=markdown_file,
            html_file=html_file,
        )

"""Article extractor for WeChat public account pages (mp.weixin.qq.com)."""
from collections.abc import Callable, Sequence
from datetime import datetime, timezone

from bs4 import BeautifulSoup, Tag

from src.article_extractor.base import MarkdownConverter
from src.article_extractor.converters import MarkdownifyConverter
from src.article_extractor.image_repair import repair_lazy_images
from src.article_extractor.metadata import (
    ACCOUNT_SOURCES,
    AUTHOR_SOURCES,
    IMAGE_SOURCES,
    PUBLISH_DATE_SOURCES,
    SUMMARY_SOURCES,
    TITLE_SOURCES,
    content_summary,
    resolve_first,
)
from src.article_extractor.models import ArticleData, ArticleMetadata, ArticleRecord
from src.date_normalization.normalizer import format_iso_utc, normalize_publish_date
from src.log import ScraperLogger, resolve_logger


# Primary container first, then the class used by older page variants
CONTENT_ROOT_SELECTORS = ("#js_content", ".rich_media_content")


class WeChatArticleExtractor:
    """
    Extraction strategy for WeChat articles.

    Implements the ArticleExtractor Protocol.

    HTML Structure:
    - Article body: div#js_content (fallback: div.rich_media_content)
    - Title: h1#activity-name (fallback: .rich_media_title, og:title, <title>)
    - Author: #js_name (fallback: .rich_media_meta_nickname, author metas)
    - Published date: em#publish_time (fallback: .rich_media_meta_text,
      article:published_time meta)
    - Images: <img src="data:image/svg+xml..." data-src="https://mmbiz...">
      until the lazy loader runs
    """

    def __init__(
        self,
        markdown_converter: MarkdownConverter | None = None,
        logger: ScraperLogger | None = None,
        clock: Callable[[], datetime] | None = None,
    ):
        """
        Initialize the extractor.

        Args:
            markdown_converter: HTML→Markdown converter (default: MarkdownifyConverter)
            logger: Optional logger (default: loguru)
            clock: Returns the current time, used for the record timestamp
        """
        self.markdown_converter = markdown_converter or MarkdownifyConverter()
        self.logger = resolve_logger(logger)
        self.clock = clock or (lambda: datetime.now(timezone.utc))

    def extract(
        self, html: str, url: str, formats: Sequence[str]
    ) -> ArticleRecord | None:
        """
        Extract an article record from rendered WeChat page markup.

        Args:
            html: Full page markup
            url: Article URL
            formats: Requested output formats ("markdown", "html")

        Returns:
            ArticleRecord with only the requested data formats, or None if no
            content container was found
        """
        soup = BeautifulSoup(html, "lxml")

        metadata = self.extract_metadata(soup)

        content_root = self._select_content_root(soup)
        if content_root is None:
            self.logger.warning(f"No article content container found: {url}")
            return None

        repair_lazy_images(content_root, logger=self.logger)

        body_html = content_root.decode_contents()
        data = ArticleData(
            html=body_html if "html" in formats else None,
            markdown=(
                self.markdown_converter.convert(body_html)
                if "markdown" in formats
                else None
            ),
        )

        return ArticleRecord(
            url=url,
            timestamp=format_iso_utc(self.clock()),
            metadata=metadata,
            data=data,
        )

    def extract_metadata(self, soup: BeautifulSoup) -> ArticleMetadata:
        """
        Resolve every metadata field through its own fallback chain.

        Args:
            soup: Parsed page

        Returns:
            ArticleMetadata; unresolved fields are ""
        """
        raw_date = resolve_first(PUBLISH_DATE_SOURCES, soup)
        published_date = (
            normalize_publish_date(raw_date, logger=self.logger) if raw_date else ""
        )

        summary = resolve_first(SUMMARY_SOURCES, soup) or content_summary(
            soup.select_one("#js_content")
        )

        metadata = ArticleMetadata(
            title=resolve_first(TITLE_SOURCES, soup),
            author=resolve_first(AUTHOR_SOURCES, soup),
            published_date=published_date,
            account=resolve_first(ACCOUNT_SOURCES, soup),
            image_url=resolve_first(IMAGE_SOURCES, soup),
            summary=summary,
        )

        self.logger.info(
            f"Extracted metadata: title={metadata.title or '(not found)'!r}, "
            f"author={metadata.author or '(not found)'!r}, "
            f"account={metadata.account or '(not found)'!r}, "
            f"published_date={metadata.published_date or '(not found)'!r}"
        )
        return metadata

    def _select_content_root(self, soup: BeautifulSoup) -> Tag | None:
        for selector in CONTENT_ROOT_SELECTORS:
            element = soup.select_one(selector)
            if element is not None:
                self.logger.debug(f"Content root matched selector {selector}")
                return element
        return None

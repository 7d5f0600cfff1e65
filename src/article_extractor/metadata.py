"""Prioritized metadata sources for WeChat article pages."""
from collections.abc import Callable, Sequence
from dataclasses import dataclass

from bs4 import BeautifulSoup, Tag

from src.article_extractor.image_repair import is_lazy_placeholder


@dataclass(frozen=True)
class FieldSource:
    """
    One candidate source for a metadata field.

    Attributes:
        name: Human-readable description (used in logs and tests)
        read: Callable returning the candidate text from the page ("" if absent)
    """

    name: str
    read: Callable[[BeautifulSoup], str]


def element_text(selector: str) -> FieldSource:
    """Source reading the whitespace-collapsed text of the first element matching selector."""

    def read(soup: BeautifulSoup) -> str:
        element = soup.select_one(selector)
        if element is None:
            return ""
        return collapse_whitespace(element.get_text())

    return FieldSource(name=selector, read=read)


def meta_content(attribute: str, value: str) -> FieldSource:
    """Source reading the content attribute of <meta {attribute}="{value}">."""
    selector = f'meta[{attribute}="{value}"]'

    def read(soup: BeautifulSoup) -> str:
        element = soup.select_one(selector)
        if element is None:
            return ""
        content = element.get("content")
        return content.strip() if isinstance(content, str) else ""

    return FieldSource(name=selector, read=read)


def first_image_attribute(container_selector: str, attribute: str) -> FieldSource:
    """
    Source reading an attribute of the first <img> inside a container.

    Lazy-load placeholders (inline SVG data URIs) read as empty, so the
    chain moves on to the next source instead of returning a placeholder.
    """
    selector = f"{container_selector} img"

    def read(soup: BeautifulSoup) -> str:
        element = soup.select_one(selector)
        if element is None:
            return ""
        value = element.get(attribute)
        if not isinstance(value, str) or is_lazy_placeholder(value):
            return ""
        return value.strip()

    return FieldSource(name=f"{selector}[{attribute}]", read=read)


def resolve_first(sources: Sequence[FieldSource], soup: BeautifulSoup) -> str:
    """
    Evaluate sources in order, lazily, and return the first non-empty value.

    Returns:
        First non-empty candidate, or "" if every source is empty
    """
    for source in sources:
        value = source.read(soup)
        if value:
            return value
    return ""


def collapse_whitespace(text: str) -> str:
    return " ".join(text.split())


def content_summary(content_root: Tag | None, max_length: int = 200) -> str:
    """First max_length characters of the article body text, whitespace collapsed."""
    if content_root is None:
        return ""
    return collapse_whitespace(content_root.get_text().strip()[:max_length])


TITLE_SOURCES: tuple[FieldSource, ...] = (
    element_text("#activity-name"),
    element_text(".rich_media_title"),
    meta_content("property", "og:title"),
    element_text("title"),
)

AUTHOR_SOURCES: tuple[FieldSource, ...] = (
    element_text("#js_name"),
    element_text(".rich_media_meta_nickname"),
    meta_content("name", "author"),
    meta_content("property", "og:article:author"),
)

ACCOUNT_SOURCES: tuple[FieldSource, ...] = (
    element_text("#js_name"),
    element_text(".rich_media_meta_nickname"),
)

PUBLISH_DATE_SOURCES: tuple[FieldSource, ...] = (
    element_text("#publish_time"),
    element_text(".rich_media_meta_text"),
    meta_content("property", "article:published_time"),
)

IMAGE_SOURCES: tuple[FieldSource, ...] = (
    meta_content("property", "og:image"),
    first_image_attribute("#js_content", "src"),
    first_image_attribute("#js_content", "data-src"),
)

SUMMARY_SOURCES: tuple[FieldSource, ...] = (
    meta_content("name", "description"),
    meta_content("property", "og:description"),
)

"""Lazy-loaded image repair for WeChat article bodies."""
from bs4 import Tag

from src.log import ScraperLogger, resolve_logger


PLACEHOLDER_PREFIX = "data:image/svg+xml"

# Known lazy-load attributes, highest priority first
LAZY_SRC_ATTRIBUTES = ("data-src", "data-original", "data-lazy-src")


def is_lazy_placeholder(src: str | None) -> bool:
    """Whether an img src is the inline SVG placeholder WeChat renders before lazy load."""
    return bool(src) and src.strip().startswith(PLACEHOLDER_PREFIX)


def find_real_image_url(img: Tag) -> tuple[str, str] | None:
    """
    Find the real image URL hidden in a placeholder img's attributes.

    Priority:
    1. Known lazy-load attributes (data-src, data-original, data-lazy-src)
    2. First other data-* attribute whose value starts with "http"

    Returns:
        (attribute name, URL) or None if no candidate exists
    """
    for attribute in LAZY_SRC_ATTRIBUTES:
        value = img.get(attribute)
        if isinstance(value, str) and value.strip():
            return attribute, value.strip()

    for attribute, value in img.attrs.items():
        if not attribute.startswith("data-") or not isinstance(value, str):
            continue
        if value.startswith("http"):
            return attribute, value

    return None


def repair_lazy_images(content_root: Tag, logger: ScraperLogger | None = None) -> int:
    """
    Replace lazy placeholder srcs with real image URLs, in place.

    Images without a recoverable URL keep their placeholder. Running this
    twice is a no-op the second time, since repaired srcs no longer look
    like placeholders.

    Args:
        content_root: Parsed article body
        logger: Optional logger (default: loguru)

    Returns:
        Number of repaired images
    """
    log = resolve_logger(logger)
    repaired = 0

    for img in content_root.find_all("img"):
        if not is_lazy_placeholder(img.get("src")):
            continue

        candidate = find_real_image_url(img)
        if candidate is None:
            continue

        attribute, url = candidate
        img["src"] = url
        repaired += 1
        log.debug(f"Repaired image from {attribute}: {url[:80]}")

    if repaired:
        log.info(f"Repaired {repaired} lazy-loaded images")
    else:
        log.debug("No lazy-loaded images needed repair")

    return repaired

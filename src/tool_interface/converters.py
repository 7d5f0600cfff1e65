"""Model conversion utilities for the tool boundary."""
from typing import Any

from src.article_extractor.models import ArticleRecord


def record_to_tool_payload(record: ArticleRecord) -> dict[str, Any]:
    """
    Convert an ArticleRecord to the JSON payload returned by the tool.

    Body formats are lifted to the top level and only included when present.

    Example:
        >>> payload = record_to_tool_payload(record)
        >>> payload["status"]
        'success'
    """
    payload: dict[str, Any] = {
        "status": "success",
        "url": record.url,
        "timestamp": record.timestamp,
        "metadata": record.metadata.model_dump(),
    }
    if record.data.markdown:
        payload["markdown"] = record.data.markdown
    if record.data.html:
        payload["html"] = record.data.html
    return payload

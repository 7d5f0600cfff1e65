"""Shared pytest fixtures for the scraper test suite."""
from unittest.mock import AsyncMock, Mock

import pytest

from src.article_extractor.models import ArticleData, ArticleMetadata, ArticleRecord


@pytest.fixture
def mock_sleep() -> AsyncMock:
    """Async sleep replacement so timed waits return immediately."""
    return AsyncMock(return_value=None)


@pytest.fixture
def mock_logger() -> Mock:
    """Logger double satisfying the ScraperLogger protocol."""
    return Mock(spec=["debug", "info", "warning", "error", "success"])


@pytest.fixture
def sample_record() -> ArticleRecord:
    """A completed article record with both formats."""
    return ArticleRecord(
        url="https://mp.weixin.qq.com/s/umG_UtpfpEG5riNzfjvpwA",
        timestamp="2025-10-29T09:00:00.000Z",
        metadata=ArticleMetadata(
            title="OpenCut：开源的视频剪辑工具",
            author="开源前哨",
            published_date="2025-10-29T08:21:00.000Z",
            account="开源前哨",
        ),
        data=ArticleData(
            html="<p>OpenCut 是一款免费的开源视频编辑器。</p>",
            markdown="OpenCut 是一款免费的开源视频编辑器。",
        ),
    )

"""Pytest fixtures for orchestration tests."""
from unittest.mock import AsyncMock, Mock

import pytest

from src.article_extractor.models import ArticleRecord
from src.orchestration.service import ArticleScrapingService


@pytest.fixture
def mock_session() -> Mock:
    """Open browser session double."""
    session = Mock()
    session.close = AsyncMock()
    return session


@pytest.fixture
def mock_provider(mock_session: Mock) -> Mock:
    """Session provider that always connects."""
    provider = Mock()
    provider.connect = AsyncMock(return_value=mock_session)
    return provider


@pytest.fixture
def mock_acquirer() -> Mock:
    """Page acquirer returning fixed markup."""
    acquirer = Mock()
    acquirer.load = AsyncMock(return_value="<html>rendered</html>")
    return acquirer


@pytest.fixture
def mock_extractor(sample_record: ArticleRecord) -> Mock:
    """Extractor returning the sample record."""
    extractor = Mock()
    extractor.extract = Mock(return_value=sample_record)
    return extractor


@pytest.fixture
def scraping_service(
    mock_provider: Mock,
    mock_acquirer: Mock,
    mock_extractor: Mock,
    mock_sleep: AsyncMock,
    mock_logger: Mock,
) -> ArticleScrapingService:
    """Service wired entirely to doubles."""
    return ArticleScrapingService(
        session_provider=mock_provider,
        page_acquirer=mock_acquirer,
        extractor=mock_extractor,
        sleep=mock_sleep,
        logger=mock_logger,
    )

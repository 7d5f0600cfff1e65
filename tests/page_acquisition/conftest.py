"""Shared fixtures for page acquisition tests."""
from unittest.mock import AsyncMock, Mock

import pytest


@pytest.fixture
def mock_page() -> Mock:
    """BrowserPage double returning fixed markup."""
    page = Mock()
    page.set_user_agent = AsyncMock()
    page.set_extra_headers = AsyncMock()
    page.set_viewport = AsyncMock()
    page.add_init_script = AsyncMock()
    page.goto = AsyncMock()
    page.evaluate = AsyncMock()
    page.content = AsyncMock(return_value="<html><body>rendered</body></html>")
    return page


@pytest.fixture
def mock_session(mock_page: Mock) -> Mock:
    """BrowserSession double handing out mock_page."""
    session = Mock()
    session.new_page = AsyncMock(return_value=mock_page)
    session.close = AsyncMock()
    return session

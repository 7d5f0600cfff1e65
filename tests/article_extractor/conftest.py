"""Shared fixtures for article extractor tests."""
import pytest
from pathlib import Path


@pytest.fixture
def fixtures_dir() -> Path:
    """Return path to HTML fixtures directory."""
    return Path(__file__).parent / "fixtures"


@pytest.fixture
def wechat_html(fixtures_dir: Path) -> str:
    """Load a rendered WeChat article page (two lazy placeholder images)."""
    return (fixtures_dir / "wechat_article.html").read_text(encoding="utf-8")

"""Tests for FetchOptions."""
import pytest
from pydantic import ValidationError

from src.orchestration.models import FetchOptions


class TestFetchOptionsDefaults:
    """Tests for default values."""

    async def test_defaults(self):
        options = FetchOptions()

        assert options.session_name.startswith("wechat_")
        assert options.session_ttl == 180
        assert options.proxy_country == "CN"
        assert options.proxy_retries == ["CN", "HK", "SG"]
        assert options.proxy_url is None
        assert options.session_recording is True
        assert options.formats == ["markdown", "html"]

    async def test_default_candidates(self):
        assert FetchOptions().proxy_candidates() == ["CN", "HK", "SG"]


class TestFetchOptionsValidation:
    """Tests for field validation and normalization."""

    async def test_formats_are_deduplicated_and_lowercased(self):
        options = FetchOptions(formats=["Markdown", "markdown", "HTML"])

        assert options.formats == ["markdown", "html"]

    async def test_unsupported_format_rejected(self):
        with pytest.raises(ValidationError, match="Unsupported formats: pdf"):
            FetchOptions(formats=["markdown", "pdf"])

    async def test_empty_formats_rejected(self):
        with pytest.raises(ValidationError, match="At least one format"):
            FetchOptions(formats=[])

    @pytest.mark.parametrize("ttl", [0, -5])
    async def test_non_positive_ttl_rejected(self, ttl):
        with pytest.raises(ValidationError, match="Session TTL"):
            FetchOptions(session_ttl=ttl)

    async def test_blank_session_name_rejected(self):
        with pytest.raises(ValidationError, match="Session name"):
            FetchOptions(session_name="   ")

    async def test_proxy_codes_are_normalized(self):
        options = FetchOptions(proxy_country=" hk ", proxy_retries=["sg", " ", "us "])

        assert options.proxy_country == "HK"
        assert options.proxy_retries == ["SG", "US"]

    async def test_blank_proxy_url_is_unset(self):
        assert FetchOptions(proxy_url="  ").proxy_url is None


class TestProxyCandidates:
    """Tests for failover candidate ordering."""

    async def test_explicit_retries_win(self):
        options = FetchOptions(proxy_country="US", proxy_retries=["HK", "SG"])

        assert options.proxy_candidates() == ["HK", "SG"]

    async def test_preferred_country_is_prepended_once(self):
        options = FetchOptions(proxy_country="SG")

        assert options.proxy_candidates() == ["SG", "CN", "HK"]

    async def test_explicit_empty_retries_give_no_candidates(self):
        assert FetchOptions(proxy_retries=[]).proxy_candidates() == []

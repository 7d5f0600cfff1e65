"""Tests for PageAcquirer."""
from unittest.mock import call

import pytest

from src.errors import NavigationError
from src.page_acquisition.acquirer import (
    DEFAULT_HEADERS,
    DESKTOP_USER_AGENT,
    HIDE_WEBDRIVER_SCRIPT,
    SCROLL_TO_SCRIPT,
    PageAcquirer,
)
from src.retry import RetryPolicy


URL = "https://mp.weixin.qq.com/s/abc"


class TestPageAcquirerLoad:
    """Tests for the happy path."""

    async def test_returns_rendered_markup(self, mock_session, mock_page, mock_sleep, mock_logger):
        # Given: a session whose page loads fine
        acquirer = PageAcquirer(sleep=mock_sleep, logger=mock_logger)

        # When: loading
        html = await acquirer.load(mock_session, URL)

        # Then: the page content is returned
        assert html == "<html><body>rendered</body></html>"
        mock_session.new_page.assert_awaited_once()

    async def test_page_is_prepared_before_navigation(
        self, mock_session, mock_page, mock_sleep, mock_logger
    ):
        acquirer = PageAcquirer(sleep=mock_sleep, logger=mock_logger)

        await acquirer.load(mock_session, URL)

        mock_page.set_user_agent.assert_awaited_once_with(DESKTOP_USER_AGENT)
        mock_page.set_extra_headers.assert_awaited_once_with(DEFAULT_HEADERS)
        mock_page.add_init_script.assert_awaited_once_with(HIDE_WEBDRIVER_SCRIPT)
        mock_page.set_viewport.assert_awaited_once_with(1280, 800)

    async def test_navigation_uses_network_idle_and_timeout(
        self, mock_session, mock_page, mock_sleep, mock_logger
    ):
        acquirer = PageAcquirer(sleep=mock_sleep, logger=mock_logger)

        await acquirer.load(mock_session, URL)

        mock_page.goto.assert_awaited_once_with(
            URL, wait_until="networkidle", timeout_ms=60_000
        )

    async def test_settle_and_scroll_sequence(
        self, mock_session, mock_page, mock_sleep, mock_logger
    ):
        # Given: a successful navigation
        acquirer = PageAcquirer(sleep=mock_sleep, logger=mock_logger)

        # When: loading
        await acquirer.load(mock_session, URL)

        # Then: 3s settle, five 1s scroll pauses, 1s after scrolling back
        assert mock_sleep.await_args_list == [call(3.0)] + [call(1.0)] * 6
        assert mock_page.evaluate.await_args_list == [
            call(SCROLL_TO_SCRIPT, 1000),
            call(SCROLL_TO_SCRIPT, 2000),
            call(SCROLL_TO_SCRIPT, 3000),
            call(SCROLL_TO_SCRIPT, 4000),
            call(SCROLL_TO_SCRIPT, 5000),
            call(SCROLL_TO_SCRIPT, 0),
        ]


class TestPageAcquirerBestEffortSteps:
    """Tests for steps whose failure must not abort the load."""

    async def test_preparation_failures_are_tolerated(
        self, mock_session, mock_page, mock_sleep, mock_logger
    ):
        # Given: every preparation call fails
        mock_page.set_user_agent.side_effect = RuntimeError("cdp unavailable")
        mock_page.set_extra_headers.side_effect = RuntimeError("no headers")
        mock_page.add_init_script.side_effect = RuntimeError("no script")
        mock_page.set_viewport.side_effect = RuntimeError("no viewport")
        acquirer = PageAcquirer(sleep=mock_sleep, logger=mock_logger)

        # When: loading
        html = await acquirer.load(mock_session, URL)

        # Then: markup is still captured and failures are logged
        assert html == "<html><body>rendered</body></html>"
        assert mock_logger.warning.call_count == 4

    async def test_scroll_failures_are_tolerated(
        self, mock_session, mock_page, mock_sleep, mock_logger
    ):
        mock_page.evaluate.side_effect = RuntimeError("execution context destroyed")
        acquirer = PageAcquirer(sleep=mock_sleep, logger=mock_logger)

        html = await acquirer.load(mock_session, URL)

        assert html == "<html><body>rendered</body></html>"
        assert mock_page.evaluate.await_count == 6


class TestPageAcquirerNavigationRetry:
    """Tests for navigation retries."""

    async def test_retries_until_success(self, mock_session, mock_page, mock_sleep, mock_logger):
        # Given: navigation fails twice, then succeeds
        mock_page.goto.side_effect = [TimeoutError("t1"), TimeoutError("t2"), None]
        acquirer = PageAcquirer(sleep=mock_sleep, logger=mock_logger)

        # When: loading
        html = await acquirer.load(mock_session, URL)

        # Then: three attempts, two 5s backoffs before the settle wait
        assert html == "<html><body>rendered</body></html>"
        assert mock_page.goto.await_count == 3
        assert mock_sleep.await_args_list[:3] == [call(5.0), call(5.0), call(3.0)]

    async def test_all_attempts_fail_raises_navigation_error(
        self, mock_session, mock_page, mock_sleep, mock_logger
    ):
        # Given: navigation always fails
        last = TimeoutError("t3")
        mock_page.goto.side_effect = [TimeoutError("t1"), TimeoutError("t2"), last]
        acquirer = PageAcquirer(sleep=mock_sleep, logger=mock_logger)

        # When/Then: NavigationError chained to the last failure
        with pytest.raises(NavigationError) as exc_info:
            await acquirer.load(mock_session, URL)

        assert exc_info.value.url == URL
        assert exc_info.value.attempts == 3
        assert exc_info.value.__cause__ is last

        # Then: no sleep after the final attempt, no scrolling, no capture
        assert mock_sleep.await_args_list == [call(5.0), call(5.0)]
        mock_page.evaluate.assert_not_awaited()
        mock_page.content.assert_not_awaited()

    async def test_custom_policy_is_honored(self, mock_session, mock_page, mock_sleep, mock_logger):
        # Given: a single-attempt policy
        mock_page.goto.side_effect = ConnectionError("refused")
        acquirer = PageAcquirer(
            navigation_policy=RetryPolicy(max_attempts=1, backoff_seconds=5.0),
            sleep=mock_sleep,
            logger=mock_logger,
        )

        # When/Then: fails after one attempt without sleeping
        with pytest.raises(NavigationError):
            await acquirer.load(mock_session, URL)

        assert mock_page.goto.await_count == 1
        mock_sleep.assert_not_awaited()

    async def test_non_retryable_error_stops_immediately(
        self, mock_session, mock_page, mock_sleep, mock_logger
    ):
        # Given: a policy that only retries timeouts
        mock_page.goto.side_effect = ValueError("bad url")
        acquirer = PageAcquirer(
            navigation_policy=RetryPolicy(
                max_attempts=3, backoff_seconds=5.0, retry_on=(TimeoutError,)
            ),
            sleep=mock_sleep,
            logger=mock_logger,
        )

        # When/Then: gives up after the first attempt
        with pytest.raises(NavigationError) as exc_info:
            await acquirer.load(mock_session, URL)

        assert exc_info.value.attempts == 1
        assert mock_page.goto.await_count == 1

"""Page acquisition: navigate, let the page settle, trigger lazy loading, capture markup."""
import asyncio
from collections.abc import Awaitable

from src.errors import NavigationError
from src.log import ScraperLogger, resolve_logger
from src.retry import RetryPolicy, RetryState, Sleeper

from .base import BrowserPage, BrowserSession
from .models import PageLoadSettings


DESKTOP_USER_AGENT = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/124.0.0.0 Safari/537.36"
)

DEFAULT_HEADERS = {
    "Accept": (
        "text/html,application/xhtml+xml,application/xml;q=0.9,"
        "image/avif,image/webp,*/*;q=0.8"
    ),
    "Accept-Language": "zh-CN,zh;q=0.9,en;q=0.8",
}

# Hide the automation flag some sites probe before serving content
HIDE_WEBDRIVER_SCRIPT = """
Object.defineProperty(navigator, 'webdriver', {
    get: () => undefined,
});
"""

SCROLL_TO_SCRIPT = "(y) => window.scrollTo(0, y)"

NAVIGATION_RETRY_POLICY = RetryPolicy(max_attempts=3, backoff_seconds=5.0)


class PageAcquirer:
    """
    Loads one article page in a remote browser session and returns its markup.

    Steps:
    1. Open a page with a fixed desktop user agent, headers and webdriver masking
    2. Set a 1280x800 viewport
    3. Navigate (network idle, 60s timeout), retrying up to 3 times 5s apart
    4. Wait 3s for client-side rendering
    5. Scroll down in 5 steps of 1000px (1s pause each), then back to the top
    6. Return the rendered page markup

    Only navigation failure is fatal; the other steps are best-effort.

    Example:
        acquirer = PageAcquirer()
        html = await acquirer.load(session, "https://mp.weixin.qq.com/s/abc")
    """

    def __init__(
        self,
        settings: PageLoadSettings | None = None,
        navigation_policy: RetryPolicy = NAVIGATION_RETRY_POLICY,
        sleep: Sleeper = asyncio.sleep,
        logger: ScraperLogger | None = None,
    ):
        """
        Initialize the acquirer.

        Args:
            settings: Page loading parameters (default: PageLoadSettings())
            navigation_policy: Retry policy for goto()
            sleep: Async sleep used for every timed wait
            logger: Optional logger (default: loguru)
        """
        self.settings = settings or PageLoadSettings()
        self.navigation_policy = navigation_policy
        self.sleep = sleep
        self.logger = resolve_logger(logger)

    async def load(self, session: BrowserSession, url: str) -> str:
        """
        Load url and return the fully rendered page markup.

        Args:
            session: Open browser session (owned and closed by the caller)
            url: Article URL

        Returns:
            Page markup after lazy loading was triggered

        Raises:
            NavigationError: If navigation fails on every attempt
        """
        page = await session.new_page()
        await self._prepare_page(page)

        await self._navigate(page, url)
        self.logger.info("Page loaded")

        await self.sleep(self.settings.settle_seconds)

        self.logger.info("Scrolling page to load images...")
        await self._trigger_lazy_loading(page)

        html = await page.content()
        self.logger.info(f"Captured page content ({len(html)} chars)")
        return html

    async def _prepare_page(self, page: BrowserPage) -> None:
        await self._best_effort("set user agent", page.set_user_agent(DESKTOP_USER_AGENT))
        await self._best_effort("set headers", page.set_extra_headers(dict(DEFAULT_HEADERS)))
        await self._best_effort("mask webdriver flag", page.add_init_script(HIDE_WEBDRIVER_SCRIPT))
        await self._best_effort(
            "set viewport",
            page.set_viewport(self.settings.viewport_width, self.settings.viewport_height),
        )

    async def _navigate(self, page: BrowserPage, url: str) -> None:
        state = RetryState(self.navigation_policy)

        while state.start_attempt():
            try:
                self.logger.info(
                    f"Navigating to {url} "
                    f"(attempt {state.attempt}/{self.navigation_policy.max_attempts})"
                )
                await page.goto(
                    url,
                    wait_until=self.settings.wait_until,
                    timeout_ms=self.settings.navigation_timeout_ms,
                )
                return
            except Exception as e:
                retryable = state.record_failure(e)
                self.logger.warning(
                    f"Navigation failed "
                    f"(attempt {state.attempt}/{self.navigation_policy.max_attempts}): {e}"
                )
                if not retryable:
                    break
                if state.remaining > 0:
                    self.logger.info(
                        f"Retrying navigation in {self.navigation_policy.backoff_seconds:.1f} seconds..."
                    )
                await state.wait_before_next(self.sleep)

        self.logger.error(f"Navigation to {url} failed after {state.attempt} attempts")
        raise NavigationError(url, state.attempt) from state.last_error

    async def _trigger_lazy_loading(self, page: BrowserPage) -> None:
        for step in range(1, self.settings.scroll_steps + 1):
            await self._best_effort(
                f"scroll step {step}",
                page.evaluate(SCROLL_TO_SCRIPT, self.settings.scroll_increment_px * step),
            )
            await self.sleep(self.settings.scroll_pause_seconds)

        await self._best_effort("scroll to top", page.evaluate(SCROLL_TO_SCRIPT, 0))
        await self.sleep(self.settings.scroll_pause_seconds)

    async def _best_effort(self, description: str, operation: Awaitable[object]) -> None:
        try:
            await operation
        except Exception as e:
            self.logger.warning(f"Could not {description}: {e}")

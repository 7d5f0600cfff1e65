"""Scrapeless remote browser sessions driven through Playwright over CDP."""
from typing import Any
from urllib.parse import urlencode

from playwright.async_api import Browser, CDPSession, Page, Playwright, async_playwright

from config.scraper_config import ScraperConfig
from src.log import ScraperLogger, resolve_logger

from .models import ProxySelector


class PlaywrightBrowserPage:
    """BrowserPage adapter over a Playwright page."""

    def __init__(self, page: Page):
        self.page = page
        self._cdp_session: CDPSession | None = None

    async def set_user_agent(self, user_agent: str) -> None:
        # Same CDP call puppeteer's page.setUserAgent() makes; also changes navigator.userAgent
        if self._cdp_session is None:
            self._cdp_session = await self.page.context.new_cdp_session(self.page)
        await self._cdp_session.send(
            "Network.setUserAgentOverride", {"userAgent": user_agent}
        )

    async def set_extra_headers(self, headers: dict[str, str]) -> None:
        await self.page.set_extra_http_headers(headers)

    async def set_viewport(self, width: int, height: int) -> None:
        await self.page.set_viewport_size({"width": width, "height": height})

    async def add_init_script(self, script: str) -> None:
        await self.page.add_init_script(script)

    async def goto(self, url: str, wait_until: str, timeout_ms: int) -> None:
        await self.page.goto(url, wait_until=wait_until, timeout=timeout_ms)

    async def evaluate(self, expression: str, arg: Any = None) -> Any:
        return await self.page.evaluate(expression, arg)

    async def content(self) -> str:
        return await self.page.content()


class PlaywrightBrowserSession:
    """BrowserSession adapter owning a CDP-connected browser and its Playwright driver."""

    def __init__(self, playwright: Playwright, browser: Browser, name: str):
        self.playwright = playwright
        self.browser = browser
        self.name = name

    async def new_page(self) -> PlaywrightBrowserPage:
        # Remote browsers come with a default context; reuse it so the
        # provider's proxy and fingerprint settings apply
        if self.browser.contexts:
            context = self.browser.contexts[0]
        else:
            context = await self.browser.new_context()
        return PlaywrightBrowserPage(await context.new_page())

    async def close(self) -> None:
        try:
            await self.browser.close()
        finally:
            await self.playwright.stop()


class ScrapelessSessionProvider:
    """
    SessionProvider for the Scrapeless scraping browser.

    Each connect() starts a Playwright driver and attaches to a fresh remote
    browser over the CDP websocket endpoint. Session options travel as query
    parameters of the endpoint URL.

    Example:
        provider = ScrapelessSessionProvider(ScraperConfig())
        session = await provider.connect(
            session_name="wechat_123_CN_1",
            session_ttl=180,
            proxy=ProxySelector(country="CN"),
            recording=True,
        )
        try:
            page = await session.new_page()
        finally:
            await session.close()
    """

    def __init__(
        self,
        config: ScraperConfig | None = None,
        logger: ScraperLogger | None = None,
    ):
        self.config = config or ScraperConfig()
        self.logger = resolve_logger(logger)

    def build_endpoint(
        self,
        session_name: str,
        session_ttl: int,
        proxy: ProxySelector,
        recording: bool,
    ) -> str:
        """
        Build the CDP websocket URL for a session.

        Raises:
            ConfigurationError: If no API key is configured
        """
        params: dict[str, str] = {
            "token": self.config.require_api_key(),
            "sessionName": session_name,
            "sessionTTL": str(session_ttl),
            "sessionRecording": "true" if recording else "false",
        }
        if proxy.url:
            params["proxyURL"] = proxy.url
        else:
            params["proxyCountry"] = proxy.country or ""
        return f"{self.config.browser_endpoint}?{urlencode(params)}"

    async def connect(
        self,
        session_name: str,
        session_ttl: int,
        proxy: ProxySelector,
        recording: bool,
    ) -> PlaywrightBrowserSession:
        endpoint = self.build_endpoint(session_name, session_ttl, proxy, recording)

        self.logger.info(
            f"Connecting to remote browser: session={session_name}, proxy={proxy.label}"
        )
        playwright = await async_playwright().start()
        try:
            browser = await playwright.chromium.connect_over_cdp(endpoint)
        except Exception:
            await playwright.stop()
            raise

        self.logger.info("Remote browser connected")
        return PlaywrightBrowserSession(playwright, browser, session_name)

"""
Orchestration service for scraping a single article.

Coordinates the workflow per attempt: Open session → Load page → Extract → Close session,
failing over across proxy candidates.
"""
import asyncio

from src.article_extractor.base import ArticleExtractor
from src.article_extractor.extractors.wechat_extractor import WeChatArticleExtractor
from src.article_extractor.models import ArticleRecord
from src.errors import AllAttemptsFailedError, ConfigurationError
from src.log import ScraperLogger, resolve_logger
from src.page_acquisition.acquirer import PageAcquirer
from src.page_acquisition.base import BrowserSession, SessionProvider
from src.page_acquisition.models import ProxySelector
from src.page_acquisition.session_provider import ScrapelessSessionProvider
from src.retry import RetryPolicy, RetryState, Sleeper

from .models import FetchOptions


PROXY_BACKOFF_SECONDS = 3.0


class ArticleScrapingService:
    """
    Scrapes one article, failing over across proxy candidates.

    For each candidate (or a single custom proxy) the service:
    1. Opens a remote browser session with a per-attempt session name
    2. Loads the page through PageAcquirer
    3. Extracts the article record through the extractor
    4. Closes the session (always; close failures are only logged)

    Attempts are strictly sequential and the first success wins.

    The service uses dependency injection for testability. All dependencies
    default to production implementations if not provided.

    Example:
        # Default configuration (production)
        service = ArticleScrapingService()
        record = await service.acquire(
            "https://mp.weixin.qq.com/s/abc",
            FetchOptions(formats=["markdown"]),
        )

        # Custom configuration (testing)
        service = ArticleScrapingService(
            session_provider=FakeProvider(),
            page_acquirer=PageAcquirer(sleep=fake_sleep),
            sleep=fake_sleep,
        )
    """

    def __init__(
        self,
        session_provider: SessionProvider | None = None,
        page_acquirer: PageAcquirer | None = None,
        extractor: ArticleExtractor | None = None,
        sleep: Sleeper = asyncio.sleep,
        logger: ScraperLogger | None = None,
        proxy_backoff_seconds: float = PROXY_BACKOFF_SECONDS,
    ):
        """
        Initialize the scraping service with dependencies.

        Args:
            session_provider: Remote browser provider (default: ScrapelessSessionProvider())
            page_acquirer: Page loader (default: PageAcquirer sharing sleep and logger)
            extractor: Article extractor (default: WeChatArticleExtractor)
            sleep: Async sleep used for the backoff between proxy attempts
            logger: Optional logger (default: loguru)
            proxy_backoff_seconds: Pause between failed proxy attempts
        """
        self.logger = resolve_logger(logger)
        self.sleep = sleep
        self.session_provider = session_provider or ScrapelessSessionProvider(
            logger=self.logger
        )
        self.page_acquirer = page_acquirer or PageAcquirer(sleep=sleep, logger=self.logger)
        self.extractor = extractor or WeChatArticleExtractor(logger=self.logger)
        self.proxy_backoff_seconds = proxy_backoff_seconds

    async def acquire(
        self, url: str, options: FetchOptions | None = None
    ) -> ArticleRecord | None:
        """
        Scrape url into an ArticleRecord.

        Args:
            url: Article URL
            options: Fetch options (default: FetchOptions())

        Returns:
            ArticleRecord on success, or None if the page loaded but no article
            content container was found

        Raises:
            ConfigurationError: If the session provider has no credentials
            AllAttemptsFailedError: If every proxy candidate failed
            Exception: With a custom proxy_url, the attempt's own error
        """
        options = options or FetchOptions()
        self.logger.info(f"Scraping article: {url}")
        self.logger.info(f"Requested formats: {', '.join(options.formats)}")

        if options.proxy_url:
            self.logger.info("Using custom proxy (single attempt)")
            return await self._attempt(
                url,
                options,
                session_name=options.session_name,
                proxy=ProxySelector(url=options.proxy_url),
            )

        return await self._acquire_with_failover(url, options)

    async def _acquire_with_failover(
        self, url: str, options: FetchOptions
    ) -> ArticleRecord | None:
        candidates = options.proxy_candidates()
        policy = RetryPolicy(
            max_attempts=max(len(candidates), 1),
            backoff_seconds=self.proxy_backoff_seconds,
        )
        state = RetryState(policy)

        for index, country in enumerate(candidates, 1):
            state.start_attempt()
            session_name = f"{options.session_name}_{country}_{index}"
            self.logger.info(
                f"Attempt {index}/{len(candidates)}: proxy={country}, session={session_name}"
            )
            try:
                return await self._attempt(
                    url,
                    options,
                    session_name=session_name,
                    proxy=ProxySelector(country=country),
                )
            except ConfigurationError:
                # Missing credentials fail every candidate the same way
                raise
            except Exception as e:
                state.record_failure(e)
                self.logger.error(
                    f"Attempt {index}/{len(candidates)} with proxy {country} failed: {e}"
                )
                if state.remaining > 0:
                    self.logger.info(
                        f"Trying next proxy in {policy.backoff_seconds:.1f} seconds..."
                    )
                await state.wait_before_next(self.sleep)

        self.logger.error(f"All proxy attempts failed for {url}")
        raise AllAttemptsFailedError(state.last_error, state.attempt) from state.last_error

    async def _attempt(
        self,
        url: str,
        options: FetchOptions,
        session_name: str,
        proxy: ProxySelector,
    ) -> ArticleRecord | None:
        """Run one open → load → extract cycle; the session is closed on every exit path."""
        session: BrowserSession | None = None
        try:
            session = await self.session_provider.connect(
                session_name=session_name,
                session_ttl=options.session_ttl,
                proxy=proxy,
                recording=options.session_recording,
            )
            html = await self.page_acquirer.load(session, url)
            record = self.extractor.extract(html, url, options.formats)
            if record is None:
                self.logger.warning(f"No article content extracted from {url}")
            else:
                self.logger.info(f"Scraped article: {record.metadata.title[:100]}")
            return record
        finally:
            if session is not None:
                await self._close_session(session, session_name)

    async def _close_session(self, session: BrowserSession, session_name: str) -> None:
        try:
            await session.close()
            self.logger.info(f"Session {session_name} closed")
        except Exception as e:
            self.logger.warning(f"Failed to close session {session_name}: {e}")

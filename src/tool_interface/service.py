"""Tool boundary for exposing article scraping to a remote tool protocol server."""
import json
from typing import Any

from pydantic import ValidationError

from config.scraper_config import ScraperConfig
from src.article_extractor.models import SUPPORTED_FORMATS
from src.log import ScraperLogger, resolve_logger
from src.orchestration.base import ArticleScraper
from src.orchestration.service import ArticleScrapingService
from src.page_acquisition.session_provider import ScrapelessSessionProvider

from .converters import record_to_tool_payload
from .models import ToolArguments, ToolResponse


TOOL_NAME = "scrape_wechat_article"

TOOL_DESCRIPTION = (
    "Scrape a WeChat public account article and export it as Markdown and/or HTML. "
    "Lazy-loaded images are resolved, and title, author and publish date metadata "
    "are extracted."
)

INPUT_SCHEMA: dict[str, Any] = {
    "type": "object",
    "properties": {
        "url": {
            "type": "string",
            "description": "Full URL of the WeChat article",
        },
        "formats": {
            "type": "array",
            "description": "Formats to export: markdown, html",
            "items": {"type": "string", "enum": list(SUPPORTED_FORMATS)},
            "default": list(SUPPORTED_FORMATS),
        },
        "sessionName": {
            "type": "string",
            "description": "Remote browser session name (optional)",
        },
        "sessionTTL": {
            "type": "number",
            "description": "Session lifetime in seconds, default 180",
            "default": 180,
        },
        "proxyCountry": {
            "type": "string",
            "description": "Proxy country code, default CN",
            "default": "CN",
        },
    },
    "required": ["url"],
}


class ScrapeArticleTool:
    """
    Transport-neutral handler for the scrape_wechat_article tool.

    A stdio or HTTP tool server registers `definition()` in its tool list and
    forwards calls to `call()`. Every outcome, failures included, comes back
    as a ToolResponse; nothing is raised to the transport.

    Example:
        tool = ScrapeArticleTool()
        response = await tool.call(TOOL_NAME, {"url": "https://mp.weixin.qq.com/s/abc"})
        if response.is_error:
            print(response.content[0].text)
    """

    name = TOOL_NAME

    def __init__(
        self,
        scraper: ArticleScraper | None = None,
        config: ScraperConfig | None = None,
        logger: ScraperLogger | None = None,
    ):
        """
        Initialize the tool.

        Args:
            scraper: Scraping orchestrator (default: ArticleScrapingService on Scrapeless)
            config: Scraper configuration (default: ScraperConfig() from environment)
            logger: Optional logger (default: loguru)
        """
        self.config = config or ScraperConfig()
        self.logger = resolve_logger(logger)
        self._scraper = scraper

    @property
    def scraper(self) -> ArticleScraper:
        if self._scraper is None:
            self._scraper = ArticleScrapingService(
                session_provider=ScrapelessSessionProvider(self.config, logger=self.logger),
                logger=self.logger,
            )
        return self._scraper

    def definition(self) -> dict[str, Any]:
        """Tool listing entry: name, description and JSON input schema."""
        return {
            "name": TOOL_NAME,
            "description": TOOL_DESCRIPTION,
            "inputSchema": INPUT_SCHEMA,
        }

    async def call(self, name: str, arguments: dict[str, Any] | None) -> ToolResponse:
        """
        Handle a tool call.

        Args:
            name: Requested tool name
            arguments: Raw call arguments

        Returns:
            ToolResponse with the JSON article payload, or an error envelope
        """
        if name != TOOL_NAME:
            return ToolResponse.error_text(f"Unknown tool: {name}")

        # Reported before any network activity
        if not self.config.has_api_key():
            self.logger.error("Tool call rejected: no API key configured")
            return ToolResponse.error_text(
                "Error: set the SCRAPELESS_API_KEY or SCRAPELESS_API_TOKEN environment variable"
            )

        try:
            tool_arguments = ToolArguments.model_validate(arguments or {})
            options = tool_arguments.to_fetch_options()
        except ValidationError as e:
            self.logger.warning(f"Invalid tool arguments: {e}")
            return ToolResponse.error_text(f"Invalid arguments: {e}")

        try:
            record = await self.scraper.acquire(tool_arguments.url, options)
        except Exception as e:
            self.logger.error(f"Scrape failed for {tool_arguments.url}: {e}")
            return ToolResponse.error_text(f"Scrape error: {e}")

        if record is None:
            return ToolResponse.error_text(
                "Scrape failed: no article content could be extracted"
            )

        payload = record_to_tool_payload(record)
        return ToolResponse.success_text(json.dumps(payload, ensure_ascii=False, indent=2))

"""Injectable logger interface used by the scraping pipeline."""
from typing import Any, Protocol

from loguru import logger as _default_logger


class ScraperLogger(Protocol):
    """
    Protocol for the diagnostic logger injected into pipeline components.

    loguru's logger satisfies it, so does a stdlib logging.Logger or a Mock,
    which lets tests assert on log calls without capturing stderr.
    """

    def debug(self, message: str, *args: Any, **kwargs: Any) -> None: ...

    def info(self, message: str, *args: Any, **kwargs: Any) -> None: ...

    def warning(self, message: str, *args: Any, **kwargs: Any) -> None: ...

    def error(self, message: str, *args: Any, **kwargs: Any) -> None: ...


def resolve_logger(logger: ScraperLogger | None) -> ScraperLogger:
    """Return the injected logger, or the global loguru logger."""
    return logger if logger is not None else _default_logger

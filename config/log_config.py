"""Loguru logging configuration for wechat-article-scraper.

Call configure_logging() once at program startup (CLI script or tool server).
Library code never configures handlers; it only logs through loguru or an
injected logger.
"""
import logging
import os
import sys

from loguru import logger


VALID_LEVELS = ("TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL")

CONSOLE_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> | "
    "<level>{message}</level>"
)

# Third-party loggers that are too chatty at INFO
NOISY_LOGGERS = ("asyncio", "urllib3", "playwright")


class InterceptHandler(logging.Handler):
    """
    Redirect standard library logging records to Loguru.

    Playwright, asyncio and urllib3 log through the stdlib; this keeps
    their output in the same sinks and format.
    """

    def emit(self, record: logging.LogRecord) -> None:
        try:
            level = logger.level(record.levelname).name
        except ValueError:
            level = record.levelno

        # Walk back to the frame that issued the logging call
        frame, depth = logging.currentframe(), 2
        while frame and frame.f_code.co_filename == logging.__file__:
            frame = frame.f_back
            depth += 1

        logger.opt(depth=depth, exception=record.exc_info).log(
            level, record.getMessage()
        )


def configure_logging(
    log_level: str | None = None,
    enable_json: bool = False,
    enable_file_logging: bool = False,
    log_file_path: str = "logs/wechat_scraper.log",
) -> None:
    """
    Configure Loguru logging for the application.

    Args:
        log_level: Log level (DEBUG, INFO, WARNING, ...).
                   Defaults to LOG_LEVEL env var or INFO.
        enable_json: Serialize console (and file) records as JSON
        enable_file_logging: Also log to a rotating file
        log_file_path: Path for log file

    Example:
        from config.log_config import configure_logging

        configure_logging()
        configure_logging(log_level="DEBUG", enable_file_logging=True)
    """
    if log_level is None:
        log_level = os.getenv("LOG_LEVEL", "INFO")
    log_level = log_level.upper()
    if log_level not in VALID_LEVELS:
        log_level = "INFO"

    logger.remove()

    # stderr keeps stdout free for a stdio tool transport
    if enable_json:
        logger.add(sys.stderr, level=log_level, serialize=True)
    else:
        logger.add(sys.stderr, format=CONSOLE_FORMAT, level=log_level, colorize=True)

    if enable_file_logging:
        logger.add(
            log_file_path,
            rotation="50 MB",
            retention="14 days",
            compression="zip",
            level=log_level,
            serialize=enable_json,
        )

    logging.basicConfig(handlers=[InterceptHandler()], level=0, force=True)
    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)

    logger.debug(
        f"Logging configured: level={log_level}, json={enable_json}, file={enable_file_logging}"
    )


__all__ = ["logger", "configure_logging", "InterceptHandler"]

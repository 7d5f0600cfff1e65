"""Exception types raised by the article scraping pipeline."""


class ScraperError(Exception):
    """Base class for scraper failures."""


class ConfigurationError(ScraperError):
    """Raised when a required setting (e.g. the browser API key) is missing."""


class NavigationError(ScraperError):
    """
    Raised when page navigation still fails after all navigation retries.

    Attributes:
        url: URL that could not be loaded
        attempts: Number of navigation attempts made
    """

    def __init__(self, url: str, attempts: int, message: str | None = None):
        self.url = url
        self.attempts = attempts
        super().__init__(
            message or f"Navigation to {url} failed after {attempts} attempts"
        )


class AllAttemptsFailedError(ScraperError):
    """
    Raised when every proxy candidate failed.

    Attributes:
        last_error: Error from the final failed attempt (None if no attempt ran)
        attempts: Number of attempts made
    """

    def __init__(self, last_error: BaseException | None, attempts: int):
        self.last_error = last_error
        self.attempts = attempts
        if last_error is None:
            message = "All attempts failed"
        else:
            message = f"All {attempts} attempts failed. Last error: {last_error}"
        super().__init__(message)


class DateParseError(ValueError):
    """Raised internally when publish date text matches no known grammar."""

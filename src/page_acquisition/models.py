"""Page acquisition models."""
from dataclasses import dataclass


@dataclass(frozen=True)
class ProxySelector:
    """
    Proxy routing for one browser session.

    Exactly one of country (provider proxy pool, e.g. "CN") or url (custom
    upstream proxy) is set.
    """

    country: str | None = None
    url: str | None = None

    def __post_init__(self):
        if bool(self.country) == bool(self.url):
            raise ValueError("ProxySelector needs exactly one of country or url")

    @property
    def label(self) -> str:
        """Short label for logs and session names."""
        return self.country if self.country else "custom"


@dataclass(frozen=True)
class PageLoadSettings:
    """
    Fixed page loading parameters.

    Attributes:
        viewport_width: Viewport width in pixels
        viewport_height: Viewport height in pixels
        navigation_timeout_ms: Timeout for a single goto() call
        wait_until: Navigation readiness condition
        settle_seconds: Pause after navigation for client-side rendering
        scroll_steps: Number of scroll steps used to trigger lazy loading
        scroll_increment_px: Scroll target of step i is increment * i
        scroll_pause_seconds: Pause after each scroll step
    """

    viewport_width: int = 1280
    viewport_height: int = 800
    navigation_timeout_ms: int = 60_000
    wait_until: str = "networkidle"
    settle_seconds: float = 3.0
    scroll_steps: int = 5
    scroll_increment_px: int = 1000
    scroll_pause_seconds: float = 1.0

"""Base protocols for remote browser sessions."""
from typing import Any, Protocol

from .models import ProxySelector


class BrowserPage(Protocol):
    """A single tab in a remote browser session."""

    async def set_user_agent(self, user_agent: str) -> None: ...

    async def set_extra_headers(self, headers: dict[str, str]) -> None: ...

    async def set_viewport(self, width: int, height: int) -> None: ...

    async def add_init_script(self, script: str) -> None: ...

    async def goto(self, url: str, wait_until: str, timeout_ms: int) -> None: ...

    async def evaluate(self, expression: str, arg: Any = None) -> Any: ...

    async def content(self) -> str: ...


class BrowserSession(Protocol):
    """
    An exclusively owned remote browser context.

    Scoped to a single attempt; the owner must call close() on every exit path.
    """

    async def new_page(self) -> BrowserPage: ...

    async def close(self) -> None: ...


class SessionProvider(Protocol):
    """
    Protocol for remote browser session providers.

    Credentials are held by the provider, so callers only describe the
    session they want.

    Example:
        class MyProvider:  # No inheritance needed!
            async def connect(self, session_name, session_ttl, proxy, recording):
                ...
    """

    async def connect(
        self,
        session_name: str,
        session_ttl: int,
        proxy: ProxySelector,
        recording: bool,
    ) -> BrowserSession:
        """
        Open a new remote browser session.

        Args:
            session_name: Unique session name (distinct per attempt)
            session_ttl: Session lifetime in seconds
            proxy: Proxy routing for the session
            recording: Whether the provider should record the session

        Returns:
            Connected BrowserSession

        Raises:
            ConfigurationError: If the provider has no credentials
            Exception: Any connection error from the provider
        """
        ...

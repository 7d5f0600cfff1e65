"""Retry policy and per-loop retry state shared by navigation and proxy failover."""
import asyncio
from collections.abc import Awaitable, Callable
from dataclasses import dataclass, field


Sleeper = Callable[[float], Awaitable[None]]


@dataclass(frozen=True)
class RetryPolicy:
    """
    Named retry configuration.

    Attributes:
        max_attempts: Total number of attempts (first try included)
        backoff_seconds: Fixed pause between attempts
        retry_on: Exception types that count as retryable failures
    """

    max_attempts: int
    backoff_seconds: float
    retry_on: tuple[type[BaseException], ...] = (Exception,)

    def __post_init__(self):
        if self.max_attempts < 1:
            raise ValueError("max_attempts must be at least 1")
        if self.backoff_seconds < 0:
            raise ValueError("backoff_seconds must be non-negative")

    def is_retryable(self, error: BaseException) -> bool:
        return isinstance(error, self.retry_on)


@dataclass
class RetryState:
    """
    Mutable state of one retry loop: attempt counter and last captured error.

    Example:
        state = RetryState(policy)
        while state.start_attempt():
            try:
                return await operation()
            except Exception as e:
                if not state.record_failure(e):
                    raise
                await state.wait_before_next(sleep)
    """

    policy: RetryPolicy
    attempt: int = 0
    last_error: BaseException | None = field(default=None)

    @property
    def remaining(self) -> int:
        return self.policy.max_attempts - self.attempt

    def start_attempt(self) -> bool:
        """Advance to the next attempt; False once the policy is exhausted."""
        if self.remaining <= 0:
            return False
        self.attempt += 1
        return True

    def record_failure(self, error: BaseException) -> bool:
        """Store the error; return True if the loop may continue."""
        self.last_error = error
        return self.policy.is_retryable(error)

    async def wait_before_next(self, sleep: Sleeper = asyncio.sleep) -> None:
        """Sleep for the backoff interval, but only if another attempt remains."""
        if self.remaining > 0 and self.policy.backoff_seconds > 0:
            await sleep(self.policy.backoff_seconds)

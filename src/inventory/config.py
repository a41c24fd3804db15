"""Runtime settings for stock keeping, read from the environment."""

import os
import random
from dataclasses import dataclass

_TRUTHY = {"1", "true", "yes", "on"}


@dataclass(frozen=True)
class RetryPolicy:
    """How often a conflicting mutation is retried, and how long to wait between tries."""

    attempts: int = 4  # total tries, including the first one
    base: float = 0.01  # base backoff seconds
    cap: float = 0.1  # max backoff seconds
    jitter: bool = True  # full jitter when True

    def __post_init__(self):
        if self.attempts < 1:
            raise ValueError("RetryPolicy.attempts must be at least 1")
        if self.base < 0 or self.cap < 0:
            raise ValueError("RetryPolicy backoff must not be negative")

    def backoff(self, attempt: int) -> float:
        """Seconds to sleep after the given (1-based) failed attempt."""
        delay = min(self.cap, self.base * (2 ** (attempt - 1)))
        if self.jitter:
            delay = random.uniform(0, delay)  # noqa: S311
        return delay


def load_retry_policy() -> RetryPolicy:
    """Build a RetryPolicy from STOCK_RETRY_* environment variables."""
    defaults = RetryPolicy()
    return RetryPolicy(
        attempts=int(os.getenv("STOCK_RETRY_ATTEMPTS", defaults.attempts)),
        base=float(os.getenv("STOCK_RETRY_BASE_SECONDS", defaults.base)),
        cap=float(os.getenv("STOCK_RETRY_CAP_SECONDS", defaults.cap)),
        jitter=os.getenv("STOCK_RETRY_JITTER", str(defaults.jitter)).lower() in _TRUTHY,
    )


def alert_sink_kind() -> str:
    """Which alert sink to build by default: "recording" or "logging"."""
    return os.getenv("STOCK_ALERT_SINK", "recording").lower()

"""
Retry policy for outbound HTTP calls.

Exponential backoff applied around a single upstream call site: attempt
``n`` (1-based) of ``max_retries`` waits ``base_delay * multiplier ** (n - 1)``
seconds, capped at ``max_delay``. Transport errors, HTTP 429 and every
5xx response are retried; other client errors fail at once.
"""

import asyncio
from dataclasses import dataclass, field
from typing import Awaitable, Callable, Iterator, Optional

import httpx

from src.domain.entities.health import RetrySchedule

TOO_MANY_REQUESTS = 429


@dataclass(frozen=True)
class RetryPolicy:
    """Retry/backoff parameters for the weather gateway."""

    max_retries: int = 5
    base_delay: float = 0.1
    multiplier: float = 2.0
    max_delay: Optional[float] = 10.0
    sleep: Callable[[float], Awaitable[None]] = field(
        default=asyncio.sleep, repr=False, compare=False
    )

    def __post_init__(self) -> None:
        if self.max_retries < 0:
            raise ValueError("max_retries must be non-negative")
        if self.base_delay < 0:
            raise ValueError("base_delay must be non-negative")
        if self.multiplier < 1:
            raise ValueError("multiplier must be at least 1")

    @property
    def max_attempts(self) -> int:
        return self.max_retries + 1

    def delay_for(self, retry_number: int) -> float:
        delay = self.base_delay * self.multiplier ** (retry_number - 1)
        if self.max_delay is not None:
            delay = min(delay, self.max_delay)
        return delay

    def delays(self) -> Iterator[float]:
        for retry_number in range(1, self.max_retries + 1):
            yield self.delay_for(retry_number)

    def schedule(self) -> RetrySchedule:
        return RetrySchedule(
            max_retries=self.max_retries, delays_seconds=tuple(self.delays())
        )

    def is_retryable(self, exc: Exception) -> bool:
        if isinstance(exc, httpx.HTTPStatusError):
            status_code = exc.response.status_code
            return status_code == TOO_MANY_REQUESTS or 500 <= status_code <= 599
        return isinstance(exc, httpx.RequestError)

"""Runtime state of the rainwater savings service, as reported by /health."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Tuple


@dataclass(frozen=True)
class WeatherCacheStats:
    """Live entries left after expired payloads were swept."""

    entries: int
    expired_purged: int
    ttl_seconds: float


@dataclass(frozen=True)
class RetrySchedule:
    """Backoff applied to Open-Meteo failures before an error is returned."""

    max_retries: int
    delays_seconds: Tuple[float, ...]

    @property
    def worst_case_wait_seconds(self) -> float:
        return sum(self.delays_seconds)


@dataclass(frozen=True)
class ServiceHealth:
    version: str
    environment: str
    started_at: datetime
    uptime_seconds: float
    weather_api_url: str
    cache: WeatherCacheStats
    retry: RetrySchedule
    status: str = "ok"

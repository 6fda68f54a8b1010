"""
Infrastructure Cache - In-memory TTL store

Process-local implementation of :class:`IWeatherCache`. Entries are
expired lazily on read; :meth:`purge_expired` sweeps the rest. Nothing
is persisted and there is no capacity bound.
"""

import time
from typing import Any, Callable, Dict, Optional, Tuple

import structlog

from src.domain.ports.weather_cache import IWeatherCache

logger = structlog.get_logger(__name__)

DEFAULT_TTL_SECONDS = 3600.0


class TTLWeatherCache(IWeatherCache):
    """Dictionary-backed cache with a fixed time-to-live per entry."""

    def __init__(
        self,
        ttl_seconds: float = DEFAULT_TTL_SECONDS,
        time_func: Callable[[], float] = time.monotonic,
    ):
        """
        Initialize the cache.

        Args:
            ttl_seconds: Lifetime of every entry, from insertion
            time_func: Clock returning seconds; injectable for tests
        """
        if ttl_seconds <= 0:
            raise ValueError("ttl_seconds must be positive")
        self._ttl_seconds = float(ttl_seconds)
        self._time_func = time_func
        self._storage: Dict[str, Tuple[float, Any]] = {}

    @property
    def ttl_seconds(self) -> float:
        return self._ttl_seconds

    def get(self, key: str) -> Optional[Any]:
        item = self._storage.get(key)
        if item is None:
            return None
        expires_at, value = item
        if expires_at <= self._time_func():
            self._storage.pop(key, None)
            logger.debug("weather.cache.expired", key=key)
            return None
        return value

    def set(self, key: str, value: Any) -> None:
        self._storage[key] = (self._time_func() + self._ttl_seconds, value)

    def purge_expired(self) -> int:
        now = self._time_func()
        expired = [
            key for key, (expires_at, _) in self._storage.items() if expires_at <= now
        ]
        for key in expired:
            del self._storage[key]
        if expired:
            logger.debug("weather.cache.purged", count=len(expired))
        return len(expired)

    def clear(self) -> None:
        self._storage.clear()

    def __len__(self) -> int:
        return len(self._storage)

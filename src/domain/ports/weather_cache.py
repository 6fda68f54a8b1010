"""
Domain Port - Weather Cache

Contract for the time-bounded store that keeps raw provider payloads
between requests.
"""

from abc import ABC, abstractmethod
from typing import Any, Optional


class IWeatherCache(ABC):
    """Interface for a key/value cache whose entries expire after a TTL."""

    @property
    @abstractmethod
    def ttl_seconds(self) -> float:
        """Lifetime of an entry, counted from insertion."""

    @abstractmethod
    def get(self, key: str) -> Optional[Any]:
        """Return the stored value, or ``None`` if absent or expired."""

    @abstractmethod
    def set(self, key: str, value: Any) -> None:
        """Store ``value`` under ``key`` for ``ttl_seconds``."""

    @abstractmethod
    def purge_expired(self) -> int:
        """Drop every expired entry and return how many were removed."""

    @abstractmethod
    def clear(self) -> None:
        """Drop every entry."""

    @abstractmethod
    def __len__(self) -> int:
        """Number of entries currently held, expired or not."""

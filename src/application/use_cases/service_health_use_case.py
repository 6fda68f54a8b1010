"""Use case reporting the runtime state behind ``/health``."""

from datetime import datetime, timezone
from typing import Any, Optional

from src.application.dtos.service_health_dto import ServiceHealthDTO
from src.domain.entities.health import RetrySchedule, ServiceHealth, WeatherCacheStats
from src.domain.ports.weather_cache import IWeatherCache
from src.shared import get_logger

logger = get_logger(__name__)


class GetServiceHealthUseCase:
    """
    Describe the weather cache, the retry schedule and the process uptime.

    Open-Meteo itself is not called, so a health check never spends
    upstream quota. Expired cache entries are swept first so ``entries``
    counts only payloads a request could still be served from.
    """

    def __init__(
        self,
        weather_cache: IWeatherCache,
        retry_schedule: RetrySchedule,
        weather_api_url: str,
        version: str,
        environment: Any,
    ) -> None:
        self._weather_cache = weather_cache
        self._retry_schedule = retry_schedule
        self._weather_api_url = weather_api_url
        self._version = version
        self._environment = getattr(environment, "value", environment)

    async def execute(self, started_at: Optional[datetime]) -> ServiceHealthDTO:
        now = datetime.now(timezone.utc)
        started = started_at or now

        purged = self._weather_cache.purge_expired()
        cache = WeatherCacheStats(
            entries=len(self._weather_cache),
            expired_purged=purged,
            ttl_seconds=self._weather_cache.ttl_seconds,
        )
        health = ServiceHealth(
            version=self._version,
            environment=str(self._environment),
            started_at=started,
            uptime_seconds=max(0.0, (now - started).total_seconds()),
            weather_api_url=self._weather_api_url,
            cache=cache,
            retry=self._retry_schedule,
        )

        logger.debug(
            "health.checked", cache_entries=cache.entries, expired_purged=purged
        )
        return ServiceHealthDTO.from_domain(health)

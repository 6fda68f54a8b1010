"""
Service Health DTOs - Application Layer

Response of ``/health``. Field names follow the camelCase convention of
the ``/water-savings`` payload.
"""

from __future__ import annotations

from datetime import datetime
from typing import List

from pydantic import BaseModel, ConfigDict, Field

from src.domain.entities.health import RetrySchedule, ServiceHealth, WeatherCacheStats


class WeatherCacheStatsDTO(BaseModel):
    entries: int = Field(description="Cached Open-Meteo payloads still fresh")
    expired_purged: int = Field(
        alias="expiredPurged", description="Expired payloads swept by this check"
    )
    ttl_seconds: float = Field(alias="ttlSeconds", description="Payload lifetime")

    model_config = ConfigDict(populate_by_name=True)

    @classmethod
    def from_domain(cls, stats: WeatherCacheStats) -> "WeatherCacheStatsDTO":
        return cls(
            entries=stats.entries,
            expired_purged=stats.expired_purged,
            ttl_seconds=stats.ttl_seconds,
        )


class RetryScheduleDTO(BaseModel):
    max_retries: int = Field(alias="maxRetries")
    delays_seconds: List[float] = Field(
        alias="delaysSeconds", description="Wait before each retry, in order"
    )
    worst_case_wait_seconds: float = Field(
        alias="worstCaseWaitSeconds",
        description="Total backoff before a failing fetch is reported",
    )

    model_config = ConfigDict(populate_by_name=True)

    @classmethod
    def from_domain(cls, schedule: RetrySchedule) -> "RetryScheduleDTO":
        return cls(
            max_retries=schedule.max_retries,
            delays_seconds=list(schedule.delays_seconds),
            worst_case_wait_seconds=round(schedule.worst_case_wait_seconds, 6),
        )


class ServiceHealthDTO(BaseModel):
    """DTO representing the /health response payload."""

    status: str
    version: str
    environment: str
    started_at: datetime = Field(alias="startedAt")
    uptime_seconds: float = Field(alias="uptimeSeconds")
    weather_api_url: str = Field(alias="weatherApiUrl")
    cache: WeatherCacheStatsDTO
    retry: RetryScheduleDTO

    @classmethod
    def from_domain(cls, health: ServiceHealth) -> "ServiceHealthDTO":
        return cls(
            status=health.status,
            version=health.version,
            environment=health.environment,
            started_at=health.started_at,
            uptime_seconds=health.uptime_seconds,
            weather_api_url=health.weather_api_url,
            cache=WeatherCacheStatsDTO.from_domain(health.cache),
            retry=RetryScheduleDTO.from_domain(health.retry),
        )

    model_config = ConfigDict(
        populate_by_name=True,
        json_schema_extra={
            "example": {
                "status": "ok",
                "version": "1.0.0",
                "environment": "production",
                "startedAt": "2024-03-01T09:00:00Z",
                "uptimeSeconds": 5400.0,
                "weatherApiUrl": (
                    "https://historical-forecast-api.open-meteo.com/v1/forecast"
                ),
                "cache": {"entries": 4, "expiredPurged": 1, "ttlSeconds": 3600.0},
                "retry": {
                    "maxRetries": 5,
                    "delaysSeconds": [0.1, 0.2, 0.4, 0.8, 1.6],
                    "worstCaseWaitSeconds": 3.1,
                },
            }
        },
    )

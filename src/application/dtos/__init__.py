"""
DTOs Package - Application Layer

This package contains Data Transfer Objects (DTOs) used for data exchange
between the application layer and the presentation layer.
"""

from .service_health_dto import (
    RetryScheduleDTO,
    ServiceHealthDTO,
    WeatherCacheStatsDTO,
)
from .water_savings_dto import (
    ErrorResponseDTO,
    WaterSavingsQueryDTO,
    WaterSavingsResponseDTO,
)

__all__ = [
    "WaterSavingsQueryDTO",
    "WaterSavingsResponseDTO",
    "ErrorResponseDTO",
    "ServiceHealthDTO",
    "WeatherCacheStatsDTO",
    "RetryScheduleDTO",
]

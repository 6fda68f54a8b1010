"""
Domain Entities Package

Value objects and errors of the rainwater savings domain.
"""

from .errors import (
    ClientInputError,
    DomainError,
    InvalidAreaError,
    InvalidWeatherDataError,
    MissingParametersError,
    UpstreamDataError,
    UpstreamFetchError,
)
from .health import RetrySchedule, ServiceHealth, WeatherCacheStats
from .savings import SavingsReport
from .weather import WeatherSeries

__all__ = [
    "WeatherSeries",
    "SavingsReport",
    "ServiceHealth",
    "WeatherCacheStats",
    "RetrySchedule",
    "DomainError",
    "ClientInputError",
    "MissingParametersError",
    "InvalidAreaError",
    "UpstreamDataError",
    "InvalidWeatherDataError",
    "UpstreamFetchError",
]

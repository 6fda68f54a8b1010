"""
Ports Package - Domain Layer

Abstractions for infrastructure services the domain relies on.
"""

from .weather_cache import IWeatherCache

__all__ = ["IWeatherCache"]

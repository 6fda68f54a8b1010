"""
Cache Package - Infrastructure Layer

In-process implementations of the weather cache port.
"""

from .ttl_cache import TTLWeatherCache

__all__ = ["TTLWeatherCache"]

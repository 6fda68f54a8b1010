"""
Infrastructure Layer Package

This package contains implementations of interfaces defined in the
domain layer, dealing with external concerns such as the weather
provider and the in-process cache.
"""

from src.infrastructure import cache, gateways

__all__ = ["cache", "gateways"]

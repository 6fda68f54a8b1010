"""
Use Cases Package - Application Layer

This package contains use cases that orchestrate the flow of data
between the weather gateway, the domain services and the presentation
layer.
"""

from .service_health_use_case import GetServiceHealthUseCase
from .water_savings_use_case import CalculateWaterSavingsUseCase

__all__ = [
    "CalculateWaterSavingsUseCase",
    "GetServiceHealthUseCase",
]

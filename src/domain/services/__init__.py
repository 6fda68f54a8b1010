"""
Domain Services Package

Stateless business rules of the rainwater savings domain.
"""

from .water_collection_calculator import (
    LITRES_PER_SQFT_MM,
    WATER_COLLECTED_FORMULA,
    WATER_COST_PER_1000_LITRES,
    WaterCollectionCalculator,
)

__all__ = [
    "WaterCollectionCalculator",
    "LITRES_PER_SQFT_MM",
    "WATER_COST_PER_1000_LITRES",
    "WATER_COLLECTED_FORMULA",
]

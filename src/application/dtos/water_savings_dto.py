"""
Water Savings DTOs - Application Layer

Request and response objects for the ``/water-savings`` endpoint. The
response keeps the camelCase field names published by the API.
"""

from __future__ import annotations

from typing import Dict

from pydantic import BaseModel, ConfigDict, Field

from src.domain.entities.savings import SavingsReport


class WaterSavingsQueryDTO(BaseModel):
    """Validated query of a water savings calculation."""

    latitude: str = Field(description="Latitude as supplied by the caller")
    longitude: str = Field(description="Longitude as supplied by the caller")
    start_date: str = Field(description="First day of the range (YYYY-MM-DD)")
    end_date: str = Field(description="Last day of the range (YYYY-MM-DD)")
    area_sqft: float = Field(gt=0, description="Catchment area in square feet")


class WaterSavingsResponseDTO(BaseModel):
    """DTO representing the /water-savings response payload."""

    monthly_water_collected: Dict[str, float] = Field(
        alias="monthlyWaterCollected",
        description="Litres collected per YYYY-MM month",
    )
    total_water_collected: str = Field(
        alias="totalWaterCollected",
        description="Total litres collected, two decimal places",
    )
    money_saved: str = Field(
        alias="moneySaved", description="Money saved in GBP, two decimal places"
    )
    water_cost_per_1000_litre_pounds: float = Field(
        alias="waterCostPer1000LitrePounds",
        description="Water cost used for the savings figure",
    )
    water_collected_formula: str = Field(
        alias="waterCollectedFormula",
        description="Formula applied to each hourly reading",
    )

    @classmethod
    def from_domain(cls, report: SavingsReport) -> "WaterSavingsResponseDTO":
        return cls(
            monthly_water_collected=dict(report.monthly_water_collected),
            total_water_collected=f"{report.total_water_collected:.2f}",
            money_saved=f"{report.money_saved:.2f}",
            water_cost_per_1000_litre_pounds=report.water_cost_per_1000_litres,
            water_collected_formula=report.formula,
        )

    model_config = ConfigDict(
        populate_by_name=True,
        json_schema_extra={
            "example": {
                "monthlyWaterCollected": {"2024-01": 929.0},
                "totalWaterCollected": "929.00",
                "moneySaved": "1.39",
                "waterCostPer1000LitrePounds": 1.5,
                "waterCollectedFormula": (
                    "Water Collected (litres) = Area (sq. ft.) × Rainfall (mm) "
                    "× 0.0929 (1 sq. ft. = 0.0929 m²)"
                ),
            }
        },
    )


class ErrorResponseDTO(BaseModel):
    """Error body returned for every non-200 response."""

    error: str = Field(description="Human readable error message")

    model_config = {"json_schema_extra": {"example": {"error": "Invalid area value"}}}

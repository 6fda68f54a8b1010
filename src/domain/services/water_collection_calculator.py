"""Domain service converting hourly rainfall into harvested water and savings."""

from datetime import datetime
from typing import Dict

from src.domain.entities.errors import InvalidWeatherDataError
from src.domain.entities.savings import SavingsReport
from src.domain.entities.weather import WeatherSeries

# 1 sq. ft. = 0.0929 m2, so 1 mm of rain over 1 sq. ft. is 0.0929 litres
LITRES_PER_SQFT_MM = 0.0929

# UK water cost, GBP per 1000 litres
WATER_COST_PER_1000_LITRES = 1.50

WATER_COLLECTED_FORMULA = (
    "Water Collected (litres) = Area (sq. ft.) × Rainfall (mm) × 0.0929 "
    "(1 sq. ft. = 0.0929 m²)"
)


def month_label(timestamp: str) -> str:
    """Return the ``YYYY-MM`` label of an ISO timestamp, in its own offset."""
    try:
        parsed = datetime.fromisoformat(timestamp.replace("Z", "+00:00"))
    except (AttributeError, TypeError, ValueError) as exc:
        raise InvalidWeatherDataError({"timestamp": timestamp}) from exc
    return parsed.strftime("%Y-%m")


def litres_collected(area_sqft: float, rainfall_mm: float) -> float:
    return area_sqft * rainfall_mm * LITRES_PER_SQFT_MM


class WaterCollectionCalculator:
    """
    Bucket an hourly precipitation series into monthly litres collected.

    The calculator trusts its input: the series is expected to be aligned
    and the area positive. Missing hourly readings count as no rain;
    negative readings are not clamped.
    """

    def __init__(
        self,
        water_cost_per_1000_litres: float = WATER_COST_PER_1000_LITRES,
        formula: str = WATER_COLLECTED_FORMULA,
    ) -> None:
        self.water_cost_per_1000_litres = water_cost_per_1000_litres
        self.formula = formula

    def calculate(self, series: WeatherSeries, area_sqft: float) -> SavingsReport:
        monthly: Dict[str, float] = {}
        total = 0.0

        for timestamp, rainfall_mm in series:
            month = month_label(timestamp)
            collected = litres_collected(area_sqft, rainfall_mm or 0.0)
            monthly[month] = monthly.get(month, 0.0) + collected
            total += collected

        return SavingsReport(
            monthly_water_collected=monthly,
            total_water_collected=total,
            money_saved=self.money_saved(total),
            water_cost_per_1000_litres=self.water_cost_per_1000_litres,
            formula=self.formula,
        )

    def money_saved(self, total_litres: float) -> float:
        return (total_litres / 1000) * self.water_cost_per_1000_litres

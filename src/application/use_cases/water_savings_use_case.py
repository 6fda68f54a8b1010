"""
Water Savings Use Case - Application Layer

Fetches hourly precipitation for a location, checks the payload shape and
turns it into monthly litres collected and money saved.
"""

from typing import Any

from src.application.dtos.water_savings_dto import (
    WaterSavingsQueryDTO,
    WaterSavingsResponseDTO,
)
from src.domain.entities.errors import InvalidWeatherDataError
from src.domain.entities.weather import WeatherSeries
from src.domain.gateways.weather_gateway import IWeatherGateway
from src.domain.services.water_collection_calculator import WaterCollectionCalculator
from src.shared import get_logger

logger = get_logger(__name__)


def parse_weather_series(payload: Any) -> WeatherSeries:
    """
    Build a :class:`WeatherSeries` from a raw provider payload.

    Raises:
        InvalidWeatherDataError: If ``hourly.time`` or ``hourly.precipitation``
            is missing, not a list, the two lists differ in length, or an
            entry is not a timestamp string or a numeric (or null) reading.
    """
    hourly = payload.get("hourly") if isinstance(payload, dict) else None
    if not isinstance(hourly, dict):
        raise InvalidWeatherDataError({"missing": "hourly"})

    times = hourly.get("time")
    precipitation = hourly.get("precipitation")
    if not isinstance(times, list):
        raise InvalidWeatherDataError({"missing": "hourly.time"})
    if not isinstance(precipitation, list):
        raise InvalidWeatherDataError({"missing": "hourly.precipitation"})
    if len(times) != len(precipitation):
        raise InvalidWeatherDataError(
            {"time_count": len(times), "precipitation_count": len(precipitation)}
        )

    for index, (timestamp, rainfall_mm) in enumerate(zip(times, precipitation)):
        if not isinstance(timestamp, str):
            raise InvalidWeatherDataError({"index": index, "time": repr(timestamp)})
        if rainfall_mm is not None and not _is_number(rainfall_mm):
            raise InvalidWeatherDataError(
                {"index": index, "precipitation": repr(rainfall_mm)}
            )

    return WeatherSeries.from_arrays(times, precipitation)


def _is_number(value: Any) -> bool:
    # bool is an int subclass but never a reading
    return isinstance(value, (int, float)) and not isinstance(value, bool)


class CalculateWaterSavingsUseCase:
    """Use case computing rainwater collected and money saved."""

    def __init__(
        self,
        weather_gateway: IWeatherGateway,
        calculator: WaterCollectionCalculator,
    ) -> None:
        self._weather_gateway = weather_gateway
        self._calculator = calculator

    async def execute(self, query: WaterSavingsQueryDTO) -> WaterSavingsResponseDTO:
        """
        Run the calculation for a validated query.

        Raises:
            UpstreamFetchError: When the weather provider keeps failing
            InvalidWeatherDataError: When the provider payload is malformed
        """
        payload = await self._weather_gateway.fetch_hourly_precipitation(
            query.latitude, query.longitude, query.start_date, query.end_date
        )

        try:
            series = parse_weather_series(payload)
        except InvalidWeatherDataError as e:
            logger.error(
                "water_savings.invalid_weather_data",
                latitude=query.latitude,
                longitude=query.longitude,
                details=e.details,
            )
            raise

        report = self._calculator.calculate(series, query.area_sqft)

        logger.info(
            "water_savings.calculated",
            latitude=query.latitude,
            longitude=query.longitude,
            start_date=query.start_date,
            end_date=query.end_date,
            hours=len(series),
            months=report.months,
            total_litres=round(report.total_water_collected, 2),
        )
        return WaterSavingsResponseDTO.from_domain(report)

from __future__ import annotations

import pytest

from src.application.dtos.water_savings_dto import WaterSavingsQueryDTO
from src.application.use_cases.water_savings_use_case import (
    CalculateWaterSavingsUseCase,
    parse_weather_series,
)
from src.domain.entities.errors import InvalidWeatherDataError, UpstreamFetchError
from src.domain.services.water_collection_calculator import WaterCollectionCalculator
from tests.conftest import StubWeatherGateway, make_payload


def _query(area: float = 1000.0) -> WaterSavingsQueryDTO:
    return WaterSavingsQueryDTO(
        latitude="51.5",
        longitude="-0.12",
        start_date="2024-01-01",
        end_date="2024-01-01",
        area_sqft=area,
    )


@pytest.mark.asyncio
async def test_execute_returns_formatted_report(single_hour_payload) -> None:
    gateway = StubWeatherGateway(payload=single_hour_payload)
    use_case = CalculateWaterSavingsUseCase(gateway, WaterCollectionCalculator())

    response = await use_case.execute(_query())

    assert gateway.calls == [("51.5", "-0.12", "2024-01-01", "2024-01-01")]
    assert response.monthly_water_collected == {"2024-01": pytest.approx(929.0)}
    assert response.total_water_collected == "929.00"
    assert response.money_saved == "1.39"
    assert response.water_cost_per_1000_litre_pounds == 1.5


@pytest.mark.asyncio
async def test_execute_spans_months(weather_payload) -> None:
    gateway = StubWeatherGateway(payload=weather_payload)
    use_case = CalculateWaterSavingsUseCase(gateway, WaterCollectionCalculator())

    response = await use_case.execute(_query(area=100.0))

    assert list(response.monthly_water_collected) == ["2024-01", "2024-02"]
    assert response.total_water_collected == "27.87"


@pytest.mark.asyncio
async def test_execute_rejects_payload_without_precipitation() -> None:
    payload = {"hourly": {"time": ["2024-01-01T00:00"]}}
    use_case = CalculateWaterSavingsUseCase(
        StubWeatherGateway(payload=payload), WaterCollectionCalculator()
    )

    with pytest.raises(InvalidWeatherDataError) as exc:
        await use_case.execute(_query())
    assert exc.value.message == "Invalid weather data structure"


@pytest.mark.asyncio
async def test_execute_propagates_upstream_errors() -> None:
    gateway = StubWeatherGateway(error=UpstreamFetchError("upstream down"))
    use_case = CalculateWaterSavingsUseCase(gateway, WaterCollectionCalculator())

    with pytest.raises(UpstreamFetchError, match="upstream down"):
        await use_case.execute(_query())


@pytest.mark.parametrize(
    "payload",
    [
        None,
        [],
        {},
        {"hourly": None},
        {"hourly": {"precipitation": [1.0]}},
        {"hourly": {"time": "2024-01-01T00:00", "precipitation": [1.0]}},
        {"hourly": {"time": ["2024-01-01T00:00"], "precipitation": None}},
        {"hourly": {"time": ["2024-01-01T00:00"], "precipitation": [1.0, 2.0]}},
        make_payload(["2024-01-01T00:00"], ["abc"]),
        make_payload(["2024-01-01T00:00"], [True]),
        make_payload(["2024-01-01T00:00"], [[1.0]]),
        make_payload([1704067200], [1.0]),
    ],
)
def test_parse_weather_series_rejects_malformed_payloads(payload) -> None:
    with pytest.raises(InvalidWeatherDataError):
        parse_weather_series(payload)


def test_parse_weather_series_accepts_empty_arrays() -> None:
    series = parse_weather_series(make_payload([], []))
    assert len(series) == 0


def test_parse_weather_series_accepts_integer_and_null_readings() -> None:
    series = parse_weather_series(
        make_payload(["2024-01-01T00:00", "2024-01-01T01:00"], [3, None])
    )
    assert list(series) == [("2024-01-01T00:00", 3), ("2024-01-01T01:00", None)]

from __future__ import annotations

import sys
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence

import pytest

from src.domain.gateways.weather_gateway import IWeatherGateway

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))


class FakeClock:
    """Manually advanced monotonic clock."""

    def __init__(self, start: float = 1000.0) -> None:
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


class StubWeatherGateway(IWeatherGateway):
    def __init__(
        self,
        payload: Optional[Dict[str, Any]] = None,
        error: Optional[Exception] = None,
    ) -> None:
        self.payload = payload
        self.error = error
        self.calls: List[tuple[str, str, str, str]] = []

    async def fetch_hourly_precipitation(
        self, latitude: str, longitude: str, start_date: str, end_date: str
    ) -> Dict[str, Any]:
        self.calls.append((latitude, longitude, start_date, end_date))
        if self.error is not None:
            raise self.error
        return self.payload or {}


def make_payload(
    times: Sequence[str], precipitation: Sequence[Optional[float]]
) -> Dict[str, Any]:
    return {
        "latitude": 51.5,
        "longitude": -0.12,
        "hourly_units": {"time": "iso8601", "precipitation": "mm"},
        "hourly": {"time": list(times), "precipitation": list(precipitation)},
    }


@pytest.fixture()
def fake_clock() -> FakeClock:
    return FakeClock()


@pytest.fixture()
def weather_payload() -> Dict[str, Any]:
    return make_payload(
        [
            "2024-01-31T22:00",
            "2024-01-31T23:00",
            "2024-02-01T00:00",
            "2024-02-01T01:00",
        ],
        [1.0, 0.0, 2.0, None],
    )


@pytest.fixture()
def single_hour_payload() -> Dict[str, Any]:
    return make_payload(["2024-01-01T00:00"], [10.0])

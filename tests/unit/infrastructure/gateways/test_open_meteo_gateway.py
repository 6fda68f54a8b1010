from __future__ import annotations

from typing import Any, Dict, List

import httpx
import pytest

from src.domain.entities.errors import UpstreamFetchError
from src.infrastructure.cache.ttl_cache import TTLWeatherCache
from src.infrastructure.gateways.open_meteo_gateway import OpenMeteoGateway
from src.infrastructure.gateways.retry_policy import RetryPolicy

QUERY = ("1", "2", "2024-01-01", "2024-01-02")


class _StubResponse:
    def __init__(self, status_code: int, json_data: Any = None, text: str = "error"):
        self.status_code = status_code
        self._json = json_data
        self.text = text

    def json(self) -> Any:
        if isinstance(self._json, Exception):
            raise self._json
        return self._json

    def raise_for_status(self) -> None:
        if self.status_code >= 400:
            request = httpx.Request("GET", "http://open-meteo")
            if self._json is None:
                response = httpx.Response(
                    self.status_code, request=request, text=self.text
                )
            else:
                response = httpx.Response(
                    self.status_code, request=request, json=self._json
                )
            raise httpx.HTTPStatusError("error", request=request, response=response)


class _StubAsyncClient:
    """Replays scripted outcomes; each one is a response or an exception."""

    def __init__(self, outcomes: List[Any]):
        self._outcomes = outcomes
        self.calls: List[Dict[str, Any]] = []

    async def __aenter__(self) -> "_StubAsyncClient":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        return None

    async def get(self, url: str, params: Dict[str, Any] | None = None):
        self.calls.append({"url": url, "params": params})
        outcome = self._outcomes.pop(0)
        if isinstance(outcome, Exception):
            raise outcome
        return outcome


class _RecordingSleep:
    def __init__(self) -> None:
        self.delays: List[float] = []

    async def __call__(self, delay: float) -> None:
        self.delays.append(delay)


@pytest.fixture()
def sleeper() -> _RecordingSleep:
    return _RecordingSleep()


def _gateway(
    cache: TTLWeatherCache, sleeper: _RecordingSleep, **policy
) -> OpenMeteoGateway:
    return OpenMeteoGateway(
        cache=cache,
        base_url="http://open-meteo/v1/forecast/",
        retry_policy=RetryPolicy(sleep=sleeper, **policy),
    )


def _install(monkeypatch, client: _StubAsyncClient) -> None:
    monkeypatch.setattr("httpx.AsyncClient", lambda timeout: client)


@pytest.mark.asyncio
async def test_fetch_requests_hourly_precipitation_and_caches(
    monkeypatch, sleeper, fake_clock, weather_payload
) -> None:
    client = _StubAsyncClient([_StubResponse(200, weather_payload)])
    _install(monkeypatch, client)
    cache = TTLWeatherCache(time_func=fake_clock)
    gateway = _gateway(cache, sleeper)

    result = await gateway.fetch_hourly_precipitation(
        "51.5", "-0.12", "2024-01-01", "2024-02-29"
    )

    assert result == weather_payload
    assert client.calls == [
        {
            "url": "http://open-meteo/v1/forecast",
            "params": {
                "latitude": "51.5",
                "longitude": "-0.12",
                "start_date": "2024-01-01",
                "end_date": "2024-02-29",
                "hourly": "precipitation",
            },
        }
    ]
    assert cache.get("51.5,-0.12,2024-01-01,2024-02-29") == weather_payload


@pytest.mark.asyncio
async def test_cache_hit_skips_network(
    monkeypatch, sleeper, fake_clock, weather_payload
) -> None:
    client = _StubAsyncClient([_StubResponse(200, weather_payload)])
    _install(monkeypatch, client)
    gateway = _gateway(TTLWeatherCache(time_func=fake_clock), sleeper)

    first = await gateway.fetch_hourly_precipitation(*QUERY)
    fake_clock.advance(1800)
    second = await gateway.fetch_hourly_precipitation(*QUERY)

    assert first == second
    assert len(client.calls) == 1


@pytest.mark.asyncio
async def test_expired_cache_entry_triggers_new_fetch(
    monkeypatch, sleeper, fake_clock, weather_payload
) -> None:
    client = _StubAsyncClient(
        [_StubResponse(200, weather_payload), _StubResponse(200, weather_payload)]
    )
    _install(monkeypatch, client)
    gateway = _gateway(TTLWeatherCache(time_func=fake_clock), sleeper)

    await gateway.fetch_hourly_precipitation(*QUERY)
    fake_clock.advance(3601)
    await gateway.fetch_hourly_precipitation(*QUERY)

    assert len(client.calls) == 2


@pytest.mark.asyncio
async def test_different_ranges_use_different_cache_keys(
    monkeypatch, sleeper, weather_payload
) -> None:
    client = _StubAsyncClient(
        [_StubResponse(200, weather_payload), _StubResponse(200, weather_payload)]
    )
    _install(monkeypatch, client)
    gateway = _gateway(TTLWeatherCache(), sleeper)

    await gateway.fetch_hourly_precipitation(*QUERY)
    await gateway.fetch_hourly_precipitation("1", "2", "2024-01-01", "2024-01-03")

    assert len(client.calls) == 2


@pytest.mark.asyncio
async def test_transient_failures_are_retried_with_backoff(
    monkeypatch, sleeper, weather_payload
) -> None:
    client = _StubAsyncClient(
        [
            httpx.ConnectError("connection refused"),
            _StubResponse(503),
            _StubResponse(200, weather_payload),
        ]
    )
    _install(monkeypatch, client)
    gateway = _gateway(TTLWeatherCache(), sleeper, base_delay=0.1, multiplier=2.0)

    result = await gateway.fetch_hourly_precipitation(*QUERY)

    assert result == weather_payload
    assert len(client.calls) == 3
    assert sleeper.delays == pytest.approx([0.1, 0.2])


@pytest.mark.asyncio
async def test_failure_propagates_after_exhausting_retries(
    monkeypatch, sleeper
) -> None:
    client = _StubAsyncClient([_StubResponse(500) for _ in range(6)])
    _install(monkeypatch, client)
    cache = TTLWeatherCache()
    gateway = _gateway(cache, sleeper, max_retries=5)

    with pytest.raises(UpstreamFetchError) as exc:
        await gateway.fetch_hourly_precipitation(*QUERY)

    assert len(client.calls) == 6
    assert len(sleeper.delays) == 5
    assert exc.value.status_code == 500
    assert "status code 500" in exc.value.message
    assert len(cache) == 0


@pytest.mark.asyncio
async def test_client_error_is_not_retried_and_carries_reason(
    monkeypatch, sleeper
) -> None:
    body = {"error": True, "reason": "Parameter 'start_date' is out of allowed range"}
    client = _StubAsyncClient([_StubResponse(400, body)])
    _install(monkeypatch, client)
    gateway = _gateway(TTLWeatherCache(), sleeper)

    with pytest.raises(UpstreamFetchError) as exc:
        await gateway.fetch_hourly_precipitation("1", "2", "1900-01-01", "1900-01-02")

    assert len(client.calls) == 1
    assert sleeper.delays == []
    assert exc.value.message == (
        "Open-Meteo request failed with status code 400: "
        "Parameter 'start_date' is out of allowed range"
    )


@pytest.mark.asyncio
async def test_transport_error_message_is_propagated(monkeypatch, sleeper) -> None:
    client = _StubAsyncClient([httpx.ConnectError("connection refused")])
    _install(monkeypatch, client)
    gateway = _gateway(TTLWeatherCache(), sleeper, max_retries=0)

    with pytest.raises(UpstreamFetchError) as exc:
        await gateway.fetch_hourly_precipitation(*QUERY)

    assert exc.value.message == "Open-Meteo request failed: connection refused"
    assert exc.value.status_code is None


@pytest.mark.asyncio
async def test_invalid_json_is_reported_and_not_cached(monkeypatch, sleeper) -> None:
    client = _StubAsyncClient([_StubResponse(200, ValueError("bad json"))])
    _install(monkeypatch, client)
    cache = TTLWeatherCache()
    gateway = _gateway(cache, sleeper)

    with pytest.raises(UpstreamFetchError):
        await gateway.fetch_hourly_precipitation(*QUERY)

    assert len(cache) == 0


def test_cache_key_joins_query_dimensions() -> None:
    assert (
        OpenMeteoGateway.cache_key("51.5", "-0.12", "2024-01-01", "2024-01-31")
        == "51.5,-0.12,2024-01-01,2024-01-31"
    )


@pytest.mark.asyncio
async def test_any_server_error_status_is_retried(
    monkeypatch, sleeper, weather_payload
) -> None:
    client = _StubAsyncClient([_StubResponse(520), _StubResponse(200, weather_payload)])
    _install(monkeypatch, client)
    gateway = _gateway(TTLWeatherCache(), sleeper)

    result = await gateway.fetch_hourly_precipitation(*QUERY)

    assert result == weather_payload
    assert len(client.calls) == 2
    assert sleeper.delays == pytest.approx([0.1])

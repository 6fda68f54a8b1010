"""
Infrastructure Gateway - Open-Meteo Historical Forecast

This module implements the weather gateway on top of the Open-Meteo
historical forecast API. Payloads are cached per location and date range,
and transient failures are retried according to a :class:`RetryPolicy`.
"""

from typing import Any, Dict, Optional

import httpx
import structlog

from src.domain.entities.errors import UpstreamFetchError
from src.domain.gateways.weather_gateway import IWeatherGateway
from src.domain.ports.weather_cache import IWeatherCache
from src.infrastructure.gateways.retry_policy import RetryPolicy

logger = structlog.get_logger(__name__)

DEFAULT_BASE_URL = "https://historical-forecast-api.open-meteo.com/v1/forecast"


class OpenMeteoGateway(IWeatherGateway):
    """Implementation of the weather gateway using an async HTTP client."""

    def __init__(
        self,
        cache: IWeatherCache,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = 30.0,
        retry_policy: Optional[RetryPolicy] = None,
    ):
        """
        Initialize the Open-Meteo gateway.

        Args:
            cache: Cache holding raw payloads keyed by location and range
            base_url: Historical forecast endpoint
            timeout: Request timeout in seconds
            retry_policy: Backoff applied to transient failures
        """
        self.cache = cache
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.retry_policy = retry_policy or RetryPolicy()

    @staticmethod
    def cache_key(
        latitude: str, longitude: str, start_date: str, end_date: str
    ) -> str:
        return f"{latitude},{longitude},{start_date},{end_date}"

    async def fetch_hourly_precipitation(
        self,
        latitude: str,
        longitude: str,
        start_date: str,
        end_date: str,
    ) -> Dict[str, Any]:
        """Return hourly precipitation, from cache when still fresh."""

        cache_key = self.cache_key(latitude, longitude, start_date, end_date)
        cached = self.cache.get(cache_key)
        if cached is not None:
            logger.info("weather.cache.hit", cache_key=cache_key)
            return cached

        logger.info("weather.cache.miss", cache_key=cache_key)

        params = {
            "latitude": latitude,
            "longitude": longitude,
            "start_date": start_date,
            "end_date": end_date,
            "hourly": "precipitation",
        }
        payload = await self._get_with_retry(params)

        self.cache.set(cache_key, payload)
        return payload

    async def _get_with_retry(self, params: Dict[str, Any]) -> Dict[str, Any]:
        delays = self.retry_policy.delays()
        attempt = 0

        async with httpx.AsyncClient(timeout=self.timeout) as client:
            while True:
                attempt += 1
                logger.debug(
                    "weather.fetch.attempt",
                    url=self.base_url,
                    params=params,
                    attempt=attempt,
                )
                try:
                    response = await client.get(self.base_url, params=params)
                    response.raise_for_status()
                    return self._decode(response)

                except (httpx.HTTPStatusError, httpx.RequestError) as e:
                    delay = next(delays, None)
                    if delay is None or not self.retry_policy.is_retryable(e):
                        error = self._to_fetch_error(e)
                        logger.error(
                            "weather.fetch.failed",
                            url=self.base_url,
                            attempts=attempt,
                            status_code=error.status_code,
                            error=error.message,
                        )
                        raise error from e

                    logger.warning(
                        "weather.fetch.retry_scheduled",
                        url=self.base_url,
                        attempt=attempt,
                        delay_seconds=delay,
                        error=str(e),
                    )
                    await self.retry_policy.sleep(delay)

    def _decode(self, response: Any) -> Dict[str, Any]:
        try:
            data = response.json()
        except ValueError as e:
            logger.error("weather.fetch.invalid_json", url=self.base_url)
            raise UpstreamFetchError(
                "Open-Meteo returned a response that is not valid JSON",
                status_code=response.status_code,
            ) from e

        logger.info("weather.fetch.succeeded", url=self.base_url)
        return data

    def _to_fetch_error(self, exc: Exception) -> UpstreamFetchError:
        if isinstance(exc, httpx.HTTPStatusError):
            status_code = exc.response.status_code
            message = f"Open-Meteo request failed with status code {status_code}"
            reason = _error_reason(exc.response)
            if reason:
                message = f"{message}: {reason}"
            return UpstreamFetchError(message, status_code=status_code)

        detail = str(exc) or exc.__class__.__name__
        return UpstreamFetchError(f"Open-Meteo request failed: {detail}")


def _error_reason(response: httpx.Response) -> Optional[str]:
    # Open-Meteo reports client errors as {"error": true, "reason": "..."}
    try:
        body = response.json()
    except ValueError:
        return None
    if isinstance(body, dict) and body.get("reason"):
        return str(body["reason"])
    return None

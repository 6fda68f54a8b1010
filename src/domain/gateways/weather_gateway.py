"""
Domain Gateway - Historical Weather

This module defines the gateway interface for retrieving hourly
precipitation history for a coordinate pair.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict


class IWeatherGateway(ABC):
    """Interface for historical weather gateways."""

    @abstractmethod
    async def fetch_hourly_precipitation(
        self,
        latitude: str,
        longitude: str,
        start_date: str,
        end_date: str,
    ) -> Dict[str, Any]:
        """
        Fetch hourly precipitation for a location and date range.

        Args:
            latitude: Latitude exactly as supplied by the caller
            longitude: Longitude exactly as supplied by the caller
            start_date: First day of the range (YYYY-MM-DD)
            end_date: Last day of the range (YYYY-MM-DD)

        Returns:
            The raw provider payload, expected to contain
            ``hourly.time`` and ``hourly.precipitation``

        Raises:
            UpstreamFetchError: When the provider fails after all retries
        """
        pass

"""
Domain Errors

This module defines the error taxonomy of the rainwater savings service.
Each family maps onto one HTTP status at the presentation layer.
"""

from typing import Any, Dict, Optional

REQUIRED_PARAMETERS = ("latitude", "longitude", "startDate", "endDate", "areaSqFt")


class DomainError(Exception):
    """Base class for domain errors."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        self.message = message
        self.details = details or {}
        super().__init__(message)


class ClientInputError(DomainError):
    """Raised when the caller supplied missing or invalid query parameters."""


class MissingParametersError(ClientInputError):
    """Raised when one or more required query parameters are absent."""

    def __init__(self, missing: Optional[list] = None):
        message = f"Missing required parameters ({', '.join(REQUIRED_PARAMETERS)})"
        super().__init__(message, {"missing": list(missing or [])})


class InvalidAreaError(ClientInputError):
    """Raised when the catchment area is not a positive number."""

    def __init__(self, raw_value: Optional[str] = None):
        super().__init__("Invalid area value", {"areaSqFt": raw_value})


class UpstreamDataError(DomainError):
    """Raised when the weather provider answered with an unusable payload."""


class InvalidWeatherDataError(UpstreamDataError):
    """Raised when the hourly precipitation arrays are missing or misaligned."""

    def __init__(self, details: Optional[Dict[str, Any]] = None):
        super().__init__("Invalid weather data structure", details)


class UpstreamFetchError(DomainError):
    """Raised when the weather provider could not be reached after retries."""

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        self.status_code = status_code
        super().__init__(message, details)

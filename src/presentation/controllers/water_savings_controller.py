"""
Water Savings Router - Presentation Layer

This module defines the FastAPI router for the ``/water-savings`` endpoint:
query validation, orchestration through the use case and mapping of
domain errors onto ``{"error": ...}`` responses.
"""

import math
import re
from typing import Optional

from dependency_injector.wiring import Provide, inject
from fastapi import APIRouter, Depends, Query, status
from fastapi.responses import JSONResponse

from src.application.dtos.water_savings_dto import (
    ErrorResponseDTO,
    WaterSavingsQueryDTO,
    WaterSavingsResponseDTO,
)
from src.application.use_cases.water_savings_use_case import (
    CalculateWaterSavingsUseCase,
)
from src.domain.entities.errors import (
    REQUIRED_PARAMETERS,
    ClientInputError,
    InvalidAreaError,
    MissingParametersError,
    UpstreamDataError,
    UpstreamFetchError,
)
from src.shared import get_logger

logger = get_logger(__name__)

router = APIRouter(tags=["Water Savings"])

# Plain decimal or exponent notation; no digit separators, inf or nan
AREA_PATTERN = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")


def parse_area(raw_value: str) -> float:
    """
    Parse ``areaSqFt`` into a positive, finite float.

    The whole value must be a decimal number, so trailing text such as
    ``"12abc"`` is rejected rather than truncated to ``12``.
    """
    if not isinstance(raw_value, str):
        raise InvalidAreaError(raw_value)
    if not AREA_PATTERN.fullmatch(raw_value.strip()):
        raise InvalidAreaError(raw_value)
    area = float(raw_value)
    if not math.isfinite(area) or area <= 0:
        raise InvalidAreaError(raw_value)
    return area


def build_water_savings_query(
    latitude: Optional[str],
    longitude: Optional[str],
    start_date: Optional[str],
    end_date: Optional[str],
    area_sqft: Optional[str],
) -> WaterSavingsQueryDTO:
    """
    Validate raw query parameters.

    Absent and empty parameters are both treated as missing.

    Raises:
        MissingParametersError: If any required parameter is missing
        InvalidAreaError: If ``areaSqFt`` is not a positive number
    """
    supplied = (latitude, longitude, start_date, end_date, area_sqft)
    missing = [
        name for name, value in zip(REQUIRED_PARAMETERS, supplied) if not value
    ]
    if missing:
        raise MissingParametersError(missing)

    return WaterSavingsQueryDTO(
        latitude=latitude,
        longitude=longitude,
        start_date=start_date,
        end_date=end_date,
        area_sqft=parse_area(area_sqft),
    )


def _error_response(status_code: int, message: str) -> JSONResponse:
    body = ErrorResponseDTO(error=message)
    return JSONResponse(status_code=status_code, content=body.model_dump())


@router.get(
    "/water-savings",
    response_model=WaterSavingsResponseDTO,
    responses={
        status.HTTP_400_BAD_REQUEST: {"model": ErrorResponseDTO},
        status.HTTP_500_INTERNAL_SERVER_ERROR: {"model": ErrorResponseDTO},
    },
)
@inject
async def get_water_savings(
    latitude: Optional[str] = Query(default=None, description="Latitude"),
    longitude: Optional[str] = Query(default=None, description="Longitude"),
    start_date: Optional[str] = Query(
        default=None, alias="startDate", description="Start date (YYYY-MM-DD)"
    ),
    end_date: Optional[str] = Query(
        default=None, alias="endDate", description="End date (YYYY-MM-DD)"
    ),
    area_sqft: Optional[str] = Query(
        default=None, alias="areaSqFt", description="Catchment area in sq. ft."
    ),
    calculate_water_savings_use_case: CalculateWaterSavingsUseCase = Depends(
        Provide["calculate_water_savings_use_case"]
    ),
):
    """
    Estimate rainwater collected per month and the money it saves.

    Returns:
        WaterSavingsResponseDTO on success, otherwise an error body with
        status 400 (bad query) or 500 (weather provider failure)
    """
    try:
        query = build_water_savings_query(
            latitude, longitude, start_date, end_date, area_sqft
        )
    except ClientInputError as e:
        logger.warning("water_savings.invalid_query", error=e.message, **e.details)
        return _error_response(status.HTTP_400_BAD_REQUEST, e.message)

    logger.info(
        "water_savings.requested",
        latitude=query.latitude,
        longitude=query.longitude,
        start_date=query.start_date,
        end_date=query.end_date,
        area_sqft=query.area_sqft,
    )

    try:
        return await calculate_water_savings_use_case.execute(query)

    except (UpstreamFetchError, UpstreamDataError) as e:
        logger.error("water_savings.upstream_failed", error=e.message)
        return _error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, e.message)

    except Exception as e:
        logger.error("water_savings.unexpected_error", error=str(e), exc_info=e)
        return _error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, str(e))

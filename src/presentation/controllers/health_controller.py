"""Health router: cache, retry and uptime state of the running service."""

from dependency_injector.wiring import Provide, inject
from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import JSONResponse

from src.application.dtos.service_health_dto import ServiceHealthDTO
from src.application.dtos.water_savings_dto import ErrorResponseDTO
from src.application.use_cases.service_health_use_case import GetServiceHealthUseCase
from src.shared import get_logger

logger = get_logger(__name__)

router = APIRouter(tags=["Health"])


@router.get(
    "/health",
    response_model=ServiceHealthDTO,
    responses={503: {"model": ErrorResponseDTO}},
)
@inject
async def get_health(
    request: Request,
    get_service_health_use_case: GetServiceHealthUseCase = Depends(
        Provide["get_service_health_use_case"]
    ),
):
    started_at = getattr(request.app.state, "started_at", None)
    try:
        return await get_service_health_use_case.execute(started_at)
    except Exception as e:
        logger.error("health.check.failed", error=str(e), exc_info=e)
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={"error": f"Health check failed: {e}"},
        )

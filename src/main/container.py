"""
Dependency container injection module - Main Layer

This module implements the dependency injection container
to simplify the management and lifecycle of dependencies
in the application.
"""

from contextlib import asynccontextmanager

from dependency_injector import containers, providers

from src.application.use_cases.service_health_use_case import GetServiceHealthUseCase
from src.application.use_cases.water_savings_use_case import (
    CalculateWaterSavingsUseCase,
)
from src.domain.services.water_collection_calculator import WaterCollectionCalculator
from src.infrastructure.cache.ttl_cache import TTLWeatherCache
from src.infrastructure.gateways.open_meteo_gateway import OpenMeteoGateway
from src.infrastructure.gateways.retry_policy import RetryPolicy
from src.shared import get_logger

from .config import AppSettings

logger = get_logger(__name__)


class AppContainer(containers.DeclarativeContainer):
    """Composition Root using dependency-injector."""

    wiring_config = containers.WiringConfiguration(
        packages=["..presentation", "..application"]
    )

    # Settings
    config = providers.Configuration()

    # Infrastructure
    weather_cache = providers.Singleton(
        TTLWeatherCache,
        ttl_seconds=config.cache.ttl_seconds,
    )

    retry_policy = providers.Singleton(
        RetryPolicy,
        max_retries=config.open_meteo.max_retries,
        base_delay=config.open_meteo.backoff_base_delay,
        multiplier=config.open_meteo.backoff_multiplier,
        max_delay=config.open_meteo.backoff_max_delay,
    )

    # Gateways
    weather_gateway = providers.Singleton(
        OpenMeteoGateway,
        cache=weather_cache,
        base_url=config.open_meteo.base_url,
        timeout=config.open_meteo.timeout,
        retry_policy=retry_policy,
    )

    # Domain services
    water_collection_calculator = providers.Singleton(WaterCollectionCalculator)

    # Application (use cases)
    calculate_water_savings_use_case = providers.Factory(
        CalculateWaterSavingsUseCase,
        weather_gateway=weather_gateway,
        calculator=water_collection_calculator,
    )

    get_service_health_use_case = providers.Factory(
        GetServiceHealthUseCase,
        weather_cache=weather_cache,
        retry_schedule=providers.Callable(RetryPolicy.schedule, retry_policy),
        weather_api_url=config.open_meteo.base_url,
        version=config.service.version,
        environment=config.environment,
    )


# -------------------------
# Global Container Instance
# -------------------------
_app_container: AppContainer | None = None


def init_container(settings: AppSettings) -> AppContainer:
    """Initialize global container with application settings."""

    global _app_container

    container = AppContainer()
    container.config.from_pydantic(settings)
    _app_container = container
    return container


def get_container() -> AppContainer:
    """Get the initialized global container."""

    if _app_container is None:
        raise RuntimeError("Container has not been initialized yet")

    return _app_container


@asynccontextmanager
async def app_lifespan():
    """
    Centralized lifecycle management for in-process resources.

    The weather cache lives only as long as the process; it is emptied
    on shutdown so nothing outlives the application.
    """
    container = get_container()
    weather_cache = container.weather_cache()

    try:
        logger.info(
            "container.resources.initialized",
            cache_ttl_seconds=weather_cache.ttl_seconds,
        )
        yield container

    finally:
        logger.info("container.weather_cache.clear", entries=len(weather_cache))
        weather_cache.clear()
        logger.info("container.resources.shutdown")

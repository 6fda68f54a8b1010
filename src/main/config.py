"""
Application Settings - Main Layer

Use Pydantic Settings for configuration management.
This module handles configuration settings provided using
environment variables, .env files and default values.
"""

from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from src.shared import EnumEnvironment, EnumLogLevel


class ServiceSettings(BaseSettings):
    """HTTP service configuration settings."""

    title: str = Field(default="Rainwater Savings API", description="Service title")
    description: str = Field(
        default="Estimates rainwater harvesting yield and cost savings "
        "from historical hourly rainfall",
        description="Service description",
    )
    version: str = Field(default="1.0.0", description="Service version")
    host: str = Field(default="0.0.0.0", description="Interface to bind the server")
    port: int = Field(default=3000, description="Port to bind the server")
    reload: bool = Field(
        default=False, description="Enable auto-reload for development"
    )

    model_config = SettingsConfigDict(
        env_prefix="SERVICE_", case_sensitive=False, extra="ignore"
    )


class OpenMeteoSettings(BaseSettings):
    """Open-Meteo historical forecast API settings."""

    base_url: str = Field(
        default="https://historical-forecast-api.open-meteo.com/v1/forecast",
        description="Historical forecast endpoint",
    )
    timeout: float = Field(default=30.0, description="Request timeout in seconds")
    max_retries: int = Field(
        default=5, ge=0, description="Retries after the first failed attempt"
    )
    backoff_base_delay: float = Field(
        default=0.1, ge=0, description="Delay before the first retry, in seconds"
    )
    backoff_multiplier: float = Field(
        default=2.0, ge=1, description="Growth factor applied to each retry delay"
    )
    backoff_max_delay: Optional[float] = Field(
        default=10.0, description="Upper bound for a single retry delay"
    )

    model_config = SettingsConfigDict(
        env_prefix="OPEN_METEO_", case_sensitive=False, extra="ignore"
    )


class CacheSettings(BaseSettings):
    """Weather cache settings."""

    ttl_seconds: float = Field(
        default=3600.0, gt=0, description="Lifetime of a cached weather payload"
    )

    model_config = SettingsConfigDict(
        env_prefix="CACHE_", case_sensitive=False, extra="ignore"
    )


class LoggingSettings(BaseSettings):
    """Logging configuration settings."""

    level: EnumLogLevel = Field(default=EnumLogLevel.INFO, description="Logging level")
    file_path: Optional[str] = Field(
        default=None, description="Log file path (if None, logs to console)"
    )

    model_config = SettingsConfigDict(
        env_prefix="LOG_", case_sensitive=False, extra="ignore"
    )


class AppSettings(BaseSettings):
    """Main application settings, aggregating all sub-settings."""

    environment: EnumEnvironment = Field(
        default=EnumEnvironment.DEVELOPMENT, description="Application environment"
    )

    service: ServiceSettings = Field(default_factory=ServiceSettings)
    open_meteo: OpenMeteoSettings = Field(default_factory=OpenMeteoSettings)
    cache: CacheSettings = Field(default_factory=CacheSettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        env_nested_delimiter="__",
        extra="ignore",
    )


def get_settings() -> AppSettings:
    """
    Get application settings instance Factory.

    Used to be mocked in tests, allowing different settings based on enviroment.
    """
    return AppSettings()

"""Enumerations shared by the settings and logging layers."""

from enum import Enum


class EnumEnvironment(str, Enum):
    DEVELOPMENT = "development"
    TESTING = "testing"
    STAGING = "staging"
    PRODUCTION = "production"

    @classmethod
    def parse(cls, value: str) -> "EnumEnvironment":
        """Resolve an environment name, defaulting to development."""
        try:
            return cls(str(value).lower())
        except ValueError:
            return cls.DEVELOPMENT

    @property
    def is_production(self) -> bool:
        return self is EnumEnvironment.PRODUCTION


class EnumLogLevel(str, Enum):
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"

"""
Base configuration settings.

Holds the env-file behaviour shared by every settings class and the
application-level fields read when the API starts: service name, route
prefix, CORS origins and logging.

Dependencies: pydantic, pydantic_settings
System role: Foundation for all configuration classes
"""

import logging

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


def settings_config(env_prefix: str = "") -> SettingsConfigDict:
    """Shared settings config: read ``.env``, ignore case and unknown keys."""
    return SettingsConfigDict(
        env_prefix=env_prefix,
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )


class AppSettings(BaseSettings):
    """Application-level settings, read from ``COURSEHUB_*`` variables."""

    model_config = settings_config("COURSEHUB_")

    service_name: str = Field(
        default="coursehub",
        description="Service name used as the API title and in startup logs",
    )
    environment: str = Field(
        default="development",
        description="Deployment environment (development, staging, production)",
    )
    api_prefix: str = Field(
        default="/api/v1",
        description="Path prefix every router is mounted under",
    )
    cors_origins: list[str] = Field(
        default=["*"],
        description="Origins allowed by the CORS middleware",
    )
    log_level: str = Field(
        default="INFO",
        description="Root log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
    )
    log_format: str | None = Field(
        default=None,
        description="logging format string; None keeps the correlation-aware default",
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        level = value.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level: {value}")
        return level

    @field_validator("api_prefix")
    @classmethod
    def normalize_api_prefix(cls, value: str) -> str:
        value = value.strip().rstrip("/")
        if value and not value.startswith("/"):
            value = "/" + value
        return value

    @property
    def is_production(self) -> bool:
        return self.environment.lower() == "production"

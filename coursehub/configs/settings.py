"""
Unified application settings.

Aggregates all configuration modules into a single Settings class.
Provides dependency injection factory for FastAPI.

Dependencies: All config modules
System role: Central configuration aggregator for the application
"""

from functools import lru_cache

from pydantic import Field

from coursehub.configs.base import AppSettings
from coursehub.configs.database import DatabaseSettings
from coursehub.configs.document_store import DocumentStoreSettings


class Settings(AppSettings):
    """Application settings plus the database and document store sections."""

    database: DatabaseSettings = Field(default_factory=DatabaseSettings)
    document_store: DocumentStoreSettings = Field(default_factory=DocumentStoreSettings)


@lru_cache
def get_settings() -> Settings:
    """
    Get application settings singleton.

    Returns Settings instance, cached for dependency injection.
    Environment variables loaded once at startup.

    Returns:
        Settings: Application settings instance

    Usage:
        from coursehub.configs import get_settings
        settings = get_settings()
    """
    return Settings()

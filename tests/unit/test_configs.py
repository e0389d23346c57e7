"""
Unit tests for pydantic-settings configuration.

Dependencies: pytest, coursehub.configs
System role: Environment mapping validation
"""

import pytest
from pydantic import ValidationError

from coursehub.configs import Settings
from coursehub.configs.base import AppSettings
from coursehub.configs.database import DatabaseSettings
from coursehub.configs.document_store import DocumentStoreSettings


class TestAppSettings:
    """Tests for COURSEHUB_ prefixed application settings."""

    def test_defaults(self) -> None:
        settings = AppSettings()

        assert settings.service_name == "coursehub"
        assert settings.api_prefix == "/api/v1"
        assert settings.log_format is None
        assert settings.is_production is False

    def test_env_override(self, monkeypatch) -> None:
        monkeypatch.setenv("COURSEHUB_SERVICE_NAME", "catalog-sync")
        monkeypatch.setenv("COURSEHUB_ENVIRONMENT", "Production")
        monkeypatch.setenv("COURSEHUB_LOG_LEVEL", "debug")
        monkeypatch.setenv("COURSEHUB_CORS_ORIGINS", '["https://app.example.com"]')

        settings = AppSettings()

        assert settings.service_name == "catalog-sync"
        assert settings.is_production is True
        assert settings.log_level == "DEBUG"
        assert settings.cors_origins == ["https://app.example.com"]

    def test_api_prefix_is_normalized(self, monkeypatch) -> None:
        monkeypatch.setenv("COURSEHUB_API_PREFIX", "api/v2/")

        assert AppSettings().api_prefix == "/api/v2"

    def test_unknown_log_level_rejected(self, monkeypatch) -> None:
        monkeypatch.setenv("COURSEHUB_LOG_LEVEL", "chatty")

        with pytest.raises(ValidationError):
            AppSettings()

    def test_aggregate_reads_each_section(self, monkeypatch) -> None:
        monkeypatch.setenv("POSTGRES_HOST", "db.internal")
        monkeypatch.setenv("DOCUMENT_STORE_BUCKET", "prod-docs")

        settings = Settings()

        assert settings.database.host == "db.internal"
        assert settings.document_store.bucket == "prod-docs"


class TestDatabaseSettings:
    """Tests for POSTGRES_ prefixed settings."""

    def test_async_url_uses_asyncpg(self, monkeypatch) -> None:
        monkeypatch.setenv("POSTGRES_HOST", "db.internal")
        monkeypatch.setenv("POSTGRES_DB", "catalog")

        settings = DatabaseSettings()

        assert settings.async_database_url.startswith("postgresql+asyncpg://")
        assert "@db.internal:5432/catalog" in settings.async_database_url
        assert "ssl" not in settings.async_database_url

    def test_async_url_requires_ssl_when_configured(self, monkeypatch) -> None:
        monkeypatch.setenv("POSTGRES_SSLMODE", "require")

        assert DatabaseSettings().async_database_url.endswith("?ssl=require")

    def test_password_is_escaped(self, monkeypatch) -> None:
        monkeypatch.setenv("POSTGRES_PASSWORD", "p@ss/word")

        url = DatabaseSettings().async_database_url

        assert "p@ss/word" not in url
        assert "p%40ss%2Fword" in url

    def test_full_url_overrides_parts(self, monkeypatch) -> None:
        monkeypatch.setenv("POSTGRES_URL", "postgresql+asyncpg://u:p@rds:6432/prod")
        monkeypatch.setenv("POSTGRES_HOST", "ignored")

        assert DatabaseSettings().async_database_url == "postgresql+asyncpg://u:p@rds:6432/prod"

    def test_engine_options(self, monkeypatch) -> None:
        monkeypatch.setenv("POSTGRES_POOL_SIZE", "3")
        monkeypatch.setenv("POSTGRES_ECHO_SQL", "true")

        options = DatabaseSettings().engine_options()

        assert options["pool_size"] == 3
        assert options["echo"] is True
        assert options["pool_pre_ping"] is True


class TestDocumentStoreSettings:
    """Tests for DOCUMENT_STORE_ prefixed settings."""

    def test_defaults(self, monkeypatch) -> None:
        monkeypatch.delenv("DOCUMENT_STORE_STORE_TYPE", raising=False)

        settings = DocumentStoreSettings()

        assert settings.store_type == "memory"
        assert settings.key_prefix == "platforms/"

    def test_env_override(self, monkeypatch) -> None:
        monkeypatch.setenv("DOCUMENT_STORE_STORE_TYPE", "s3")
        monkeypatch.setenv("DOCUMENT_STORE_BUCKET", "prod-docs")

        settings = DocumentStoreSettings()

        assert settings.store_type == "s3"
        assert settings.bucket == "prod-docs"

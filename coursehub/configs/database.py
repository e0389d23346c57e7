"""
Database configuration settings.

PostgreSQL connection parameters for the relational record store, read
from ``POSTGRES_*`` variables. ``POSTGRES_URL`` overrides the individual
parts when a full DSN is provided by the deployment.

Dependencies: pydantic, pydantic_settings, sqlalchemy
System role: Database connection configuration for ORM
"""

from typing import Any

from pydantic import Field
from pydantic_settings import BaseSettings
from sqlalchemy.engine import URL

from coursehub.configs.base import settings_config


class DatabaseSettings(BaseSettings):
    """PostgreSQL connection and pool configuration."""

    model_config = settings_config("POSTGRES_")

    url: str | None = Field(default=None, description="Full async DSN; overrides the parts below")
    host: str = Field(default="localhost", description="PostgreSQL host")
    port: int = Field(default=5432, description="PostgreSQL port")
    user: str = Field(default="postgres", description="PostgreSQL user")
    password: str = Field(default="postgres", description="PostgreSQL password")
    db: str = Field(default="coursehub", description="PostgreSQL database name")
    sslmode: str = Field(default="disable", description="'require' turns on asyncpg TLS")

    pool_size: int = Field(default=10, description="Connection pool size")
    max_overflow: int = Field(default=20, description="Maximum overflow connections")
    pool_timeout: int = Field(default=30, description="Connection pool timeout in seconds")
    echo_sql: bool = Field(default=False, description="Echo SQL statements to logs")

    @property
    def async_database_url(self) -> str:
        """
        Async SQLAlchemy URL for the asyncpg driver.

        Credentials are escaped by ``URL.create``. asyncpg takes ``ssl``
        rather than libpq's ``sslmode``, so only ``require`` is forwarded.

        Returns:
            str: Rendered URL, password included
        """
        if self.url:
            return self.url
        query = {"ssl": "require"} if self.sslmode == "require" else {}
        return URL.create(
            drivername="postgresql+asyncpg",
            username=self.user,
            password=self.password,
            host=self.host,
            port=self.port,
            database=self.db,
            query=query,
        ).render_as_string(hide_password=False)

    def engine_options(self) -> dict[str, Any]:
        """Keyword arguments for ``create_async_engine``."""
        return {
            "echo": self.echo_sql,
            "pool_size": self.pool_size,
            "max_overflow": self.max_overflow,
            "pool_timeout": self.pool_timeout,
            "pool_pre_ping": True,
        }

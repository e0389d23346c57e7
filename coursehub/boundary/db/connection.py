"""
Database connection management.

Provides async SQLAlchemy engine, session factory, and FastAPI dependency
for database session injection.

Dependencies: sqlalchemy, coursehub.configs
System role: Database connection lifecycle management
"""

from typing import AsyncGenerator

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from coursehub.configs import get_settings

_engine: AsyncEngine | None = None


def get_async_engine() -> AsyncEngine:
    """
    Return the process-wide async SQLAlchemy engine, creating it on first use.

    The engine uses SQLAlchemy's default async queue pool. pool_pre_ping=True
    verifies connections before use to detect stale/broken connections early.

    Returns:
        AsyncEngine: Configured async SQLAlchemy engine

    Raises:
        ArgumentError: If database URL is invalid or engine creation fails

    Usage:
        engine = get_async_engine()
        async with engine.connect() as conn:
            result = await conn.execute(text("SELECT 1"))
    """
    global _engine
    if _engine is None:
        db_config = get_settings().database
        _engine = create_async_engine(db_config.async_database_url, **db_config.engine_options())
    return _engine


def get_async_session_factory() -> async_sessionmaker:
    """
    Create async session factory for database operations.

    expire_on_commit=False keeps loaded rows usable after commit; the sync
    step runs after the commit and reads the same objects.

    Returns:
        async_sessionmaker: Async session factory configured for manual transaction control

    Usage:
        SessionFactory = get_async_session_factory()
        async with SessionFactory() as session:
            session.add(obj)
            await session.commit()
    """
    return async_sessionmaker(
        bind=get_async_engine(),
        autoflush=False,
        expire_on_commit=False,
    )


async def get_async_db() -> AsyncGenerator[AsyncSession, None]:
    """
    FastAPI dependency for async database session injection with automatic cleanup.

    Creates a new async database session for each request and ensures it's closed
    after the route completes, even if exceptions occur.

    Yields:
        AsyncSession: Async SQLAlchemy database session (scoped to request lifetime)

    Usage:
        from fastapi import Depends

        @app.get("/platforms/{id}")
        async def get_platform(id: int, db: AsyncSession = Depends(get_async_db)):
            return await platform_crud.get_by_id(db, id)
    """
    SessionFactory = get_async_session_factory()
    async with SessionFactory() as session:
        yield session

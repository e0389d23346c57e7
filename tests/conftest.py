"""
Shared test fixtures and configuration for entire test suite.

Provides: In-memory SQLite session, document store and sync service
fixtures, record seeding helpers and a SQL statement counter
Dependencies: pytest, pytest-asyncio, sqlalchemy, aiosqlite
System role: Test infrastructure and fixture management
"""

import pytest
from sqlalchemy import event

from coursehub.boundary.docstore.memory_store import InMemoryPlatformDocumentStore
from coursehub.core.sync.platform_sync import PlatformSyncService


@pytest.fixture
async def test_async_db():
    """
    Create in-memory SQLite async database for testing.

    Yields:
        AsyncSession: Test database session with cleanup (lazy imported to avoid settings issues)
    """
    from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
    from sqlalchemy.pool import StaticPool

    from coursehub.boundary.db.base import Base

    # Use SQLite in-memory database for tests
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )

    # Create all tables
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    # Same session options as the application factory
    async_session = async_sessionmaker(
        engine,
        class_=AsyncSession,
        autoflush=False,
        expire_on_commit=False,
    )

    async with async_session() as session:
        yield session
        await session.rollback()

    # Cleanup
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)

    await engine.dispose()


@pytest.fixture
def document_store() -> InMemoryPlatformDocumentStore:
    """Provide an empty in-memory document store."""
    return InMemoryPlatformDocumentStore()


@pytest.fixture
def sync_service(test_async_db, document_store) -> PlatformSyncService:
    """Provide a sync service over the test session and memory store."""
    return PlatformSyncService(db=test_async_db, document_store=document_store)


class RecordSeeder:
    """Inserts platforms, courses and users straight through the session."""

    def __init__(self, session):
        self.session = session

    async def platform(self, name: str):
        from coursehub.boundary.db.models import PlatformModel

        platform = PlatformModel(name=name)
        self.session.add(platform)
        await self.session.flush()
        return platform

    async def course(self, title: str, platform=None):
        from coursehub.boundary.db.models import CourseModel

        course = CourseModel(
            title=title,
            platform_id=platform.id if platform is not None else None,
        )
        self.session.add(course)
        await self.session.flush()
        return course

    async def user(self, name: str, email: str, courses=()):
        from coursehub.boundary.db.models import UserModel

        user = UserModel(name=name, email=email, courses=list(courses))
        self.session.add(user)
        await self.session.flush()
        return user

    async def commit(self) -> None:
        await self.session.commit()


@pytest.fixture
def seed(test_async_db) -> RecordSeeder:
    """Provide a record seeder bound to the test session."""
    return RecordSeeder(test_async_db)


@pytest.fixture
def statement_log(test_async_db):
    """
    Record every SQL statement executed on the test engine.

    Yields:
        list[str]: Statements in execution order; clear it to start a fresh count
    """
    statements: list[str] = []
    sync_engine = test_async_db.bind.sync_engine

    def _record(conn, cursor, statement, parameters, context, executemany):
        statements.append(statement)

    event.listen(sync_engine, "before_cursor_execute", _record)
    yield statements
    event.remove(sync_engine, "before_cursor_execute", _record)

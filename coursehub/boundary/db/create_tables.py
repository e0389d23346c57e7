"""
Create all record store tables from the ORM metadata.

Development helper; production schemas are managed out of band.

Usage:
    python -m coursehub.boundary.db.create_tables
"""

import asyncio
import logging

from coursehub.boundary.db.base import Base
from coursehub.boundary.db.connection import get_async_engine
import coursehub.boundary.db.models  # noqa: F401  registers tables on Base.metadata

logger = logging.getLogger(__name__)


async def create_tables() -> None:
    """Create platforms, courses, users and user_courses if missing."""
    engine = get_async_engine()
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    logger.info("Tables created", extra={"tables": sorted(Base.metadata.tables)})


if __name__ == "__main__":
    from coursehub.observability.logger import configure_logging

    configure_logging()
    asyncio.run(create_tables())

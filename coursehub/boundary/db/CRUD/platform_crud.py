"""
Platform CRUD operations.

Provides Create, Read, Update, Delete operations for PlatformModel
with the aggregate loads used by the projection sync.

Dependencies: sqlalchemy, coursehub.boundary.db.models
System role: Platform persistence operations
"""

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from coursehub.boundary.db.models.course_model import CourseModel
from coursehub.boundary.db.models.platform_model import PlatformModel
from coursehub.boundary.db.models.user_model import user_courses
from coursehub.boundary.db.CRUD.base_crud import BaseCRUD


class PlatformCRUD(BaseCRUD[PlatformModel]):
    """
    CRUD operations for PlatformModel.

    Extends BaseCRUD with name lookups, an aggregate load that always
    reflects the database, and a cascading delete.
    """

    def __init__(self) -> None:
        """Initialize PlatformCRUD with PlatformModel."""
        super().__init__(PlatformModel)

    async def get_with_courses(
        self,
        session: AsyncSession,
        id: int,
        fresh: bool = False,
    ) -> PlatformModel | None:
        """
        Retrieve a platform with its owned courses loaded.

        Args:
            session: Async database session
            id: Platform id
            fresh: Overwrite any copy already held in the identity map,
                including the courses collection

        Returns:
            PlatformModel with courses loaded, None if not found
        """
        stmt = (
            select(PlatformModel)
            .where(PlatformModel.id == id)
            .options(selectinload(PlatformModel.courses))
        )
        if fresh:
            stmt = stmt.execution_options(populate_existing=True)
        result = await session.execute(stmt)
        return result.scalar_one_or_none()

    async def exists_by_name(
        self,
        session: AsyncSession,
        name: str,
        exclude_id: int | None = None,
    ) -> bool:
        """Check platform name uniqueness (optionally ignoring one platform)."""
        return await self.exists_by_field(session, "name", name, exclude_id=exclude_id)

    async def delete_with_courses(self, session: AsyncSession, id: int) -> bool:
        """
        Delete a platform together with its courses and their enrollments.

        Args:
            session: Async database session
            id: Platform id

        Returns:
            True if the platform was deleted, False if not found
        """
        owned_course_ids = select(CourseModel.id).where(CourseModel.platform_id == id)
        await session.execute(
            delete(user_courses).where(user_courses.c.course_id.in_(owned_course_ids))
        )
        await session.execute(delete(CourseModel).where(CourseModel.platform_id == id))
        return await self.delete_by_id(session, id)


platform_crud = PlatformCRUD()

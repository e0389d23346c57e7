"""
Course CRUD operations.

Provides Create, Read, Update, Delete operations for CourseModel
with course-specific query methods.

Dependencies: sqlalchemy, coursehub.boundary.db.models
System role: Course persistence operations
"""

from sqlalchemy import delete
from sqlalchemy.ext.asyncio import AsyncSession

from coursehub.boundary.db.models.course_model import CourseModel
from coursehub.boundary.db.models.user_model import user_courses
from coursehub.boundary.db.CRUD.base_crud import BaseCRUD


class CourseCRUD(BaseCRUD[CourseModel]):
    """
    CRUD operations for CourseModel.

    Extends BaseCRUD with title lookups and an
    enrollment-aware delete.
    """

    def __init__(self) -> None:
        """Initialize CourseCRUD with CourseModel."""
        super().__init__(CourseModel)

    async def exists_by_title(
        self,
        session: AsyncSession,
        title: str,
        exclude_id: int | None = None,
    ) -> bool:
        """Check course title uniqueness (optionally ignoring one course)."""
        return await self.exists_by_field(session, "title", title, exclude_id=exclude_id)

    async def delete_by_id(self, session: AsyncSession, id: int) -> bool:
        """
        Delete a course and every enrollment row that references it.

        Args:
            session: Async database session
            id: Course id

        Returns:
            True if the course was deleted, False if not found
        """
        await session.execute(delete(user_courses).where(user_courses.c.course_id == id))
        return await super().delete_by_id(session, id)


course_crud = CourseCRUD()

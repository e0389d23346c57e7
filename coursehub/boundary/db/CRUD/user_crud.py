"""
User CRUD operations.

Provides Create, Read, Update, Delete operations for UserModel and the
batch enrollment read that feeds the platform projection.

Dependencies: sqlalchemy, coursehub.boundary.db.models
System role: User and enrollment persistence operations
"""

from typing import Collection, Sequence

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from coursehub.boundary.db.models.course_model import CourseModel
from coursehub.boundary.db.models.user_model import UserModel, user_courses
from coursehub.boundary.db.CRUD.base_crud import BaseCRUD


class UserCRUD(BaseCRUD[UserModel]):
    """
    CRUD operations for UserModel.

    Extends BaseCRUD with email lookups and the fan-out query
    ``get_by_course_ids``.
    """

    def __init__(self) -> None:
        """Initialize UserCRUD with UserModel."""
        super().__init__(UserModel)

    async def exists_by_email(
        self,
        session: AsyncSession,
        email: str,
        exclude_id: int | None = None,
    ) -> bool:
        """Check email uniqueness (optionally ignoring one user)."""
        return await self.exists_by_field(session, "email", email, exclude_id=exclude_id)

    async def get_with_courses(
        self,
        session: AsyncSession,
        id: int,
        fresh: bool = False,
    ) -> UserModel | None:
        """
        Retrieve a user with enrolled courses loaded.

        Args:
            session: Async database session
            id: User id
            fresh: Overwrite any copy already held in the identity map

        Returns:
            UserModel with courses loaded, None if not found
        """
        stmt = (
            select(UserModel)
            .where(UserModel.id == id)
            .options(selectinload(UserModel.courses))
        )
        if fresh:
            stmt = stmt.execution_options(populate_existing=True)
        result = await session.execute(stmt)
        return result.scalar_one_or_none()

    async def get_by_course_ids(
        self,
        session: AsyncSession,
        course_ids: Collection[int],
    ) -> Sequence[UserModel]:
        """
        Retrieve every user enrolled in at least one of ``course_ids``.

        One round trip for any number of courses: the user rows are
        filtered with an EXISTS over user_courses and their full course
        sets arrive through a single selectin load. Rows already in the
        identity map are overwritten so enrollments reflect the database.

        Args:
            session: Async database session
            course_ids: Course ids to intersect with each user's enrollments

        Returns:
            Sequence of distinct UserModels (courses loaded) ordered by id
        """
        if not course_ids:
            return []
        stmt = (
            select(UserModel)
            .where(UserModel.courses.any(CourseModel.id.in_(set(course_ids))))
            .options(selectinload(UserModel.courses))
            .order_by(UserModel.id)
            .execution_options(populate_existing=True)
        )
        result = await session.execute(stmt)
        return result.scalars().all()

    async def delete_by_id(self, session: AsyncSession, id: int) -> bool:
        """
        Delete a user and their enrollment rows.

        Args:
            session: Async database session
            id: User id

        Returns:
            True if the user was deleted, False if not found
        """
        await session.execute(delete(user_courses).where(user_courses.c.user_id == id))
        return await super().delete_by_id(session, id)


user_crud = UserCRUD()

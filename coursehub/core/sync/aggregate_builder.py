"""
Platform aggregate builder.

Materializes one platform, its courses and every user enrolled in those
courses as a PlatformDocument. Enrollment is resolved with a single batch
query for the whole platform, then grouped in memory, so the number of
record store round trips does not grow with the number of courses or users.

Dependencies: sqlalchemy, coursehub.boundary.db, coursehub.models
System role: Read side of the projection sync (no writes)
"""

from collections import defaultdict
from typing import Collection, Iterable

from sqlalchemy.ext.asyncio import AsyncSession

from coursehub.boundary.db.CRUD.user_crud import user_crud
from coursehub.boundary.db.models import PlatformModel, UserModel
from coursehub.models.platform_document import CourseEmbed, PlatformDocument, UserEmbed


def to_user_embed(user: UserModel) -> UserEmbed:
    """Copy the embedded user fields."""
    return UserEmbed(id=str(user.id), name=user.name, email=user.email)


def group_users_by_course(
    users: Iterable[UserModel],
    course_ids: Collection[int],
) -> dict[int, list[UserEmbed]]:
    """
    Index users under each of their enrolled courses that is in ``course_ids``.

    Single pass over the users; enrollments in courses outside
    ``course_ids`` are ignored.

    Args:
        users: Users with their ``courses`` loaded
        course_ids: Courses of the platform being built

    Returns:
        dict mapping course id to UserEmbeds, users in ascending id order
    """
    users_by_course: dict[int, list[UserEmbed]] = defaultdict(list)
    for user in sorted(users, key=lambda u: u.id):
        embed = to_user_embed(user)
        for course_id in sorted({course.id for course in user.courses}):
            if course_id in course_ids:
                users_by_course[course_id].append(embed)
    return users_by_course


class PlatformAggregateBuilder:
    """
    Builds the PlatformDocument for a freshly loaded platform.

    The builder is side-effect free; persisting the document is the
    caller's job.
    """

    def __init__(self, db: AsyncSession) -> None:
        """
        Initialize builder.

        Args:
            db: Async session used for the enrollment fan-out query
        """
        self.db = db

    async def build(self, platform: PlatformModel) -> PlatformDocument:
        """
        Build the complete projection of ``platform``.

        Args:
            platform: Platform with its owned courses loaded

        Returns:
            PlatformDocument: courses in ascending id order, each with its
            enrolled users (empty list when nobody is enrolled)
        """
        courses = sorted(platform.courses, key=lambda c: c.id)
        course_ids = {course.id for course in courses}

        users = await user_crud.get_by_course_ids(self.db, course_ids) if course_ids else []
        users_by_course = group_users_by_course(users, course_ids)

        return PlatformDocument(
            id=str(platform.id),
            name=platform.name,
            courses=[
                CourseEmbed(
                    id=str(course.id),
                    title=course.title,
                    enrolled_users=list(users_by_course.get(course.id, [])),
                )
                for course in courses
            ],
        )

"""
Course service orchestrator.

Coordinates course lifecycle operations and re-syncs the owning platform's
document after every committed change.

Dependencies: coursehub.boundary.db.CRUD, coursehub.core.sync
System role: Course use case orchestration
"""

import logging
from typing import Collection

from sqlalchemy.ext.asyncio import AsyncSession

from coursehub.boundary.db.CRUD.course_crud import course_crud
from coursehub.boundary.db.CRUD.platform_crud import platform_crud
from coursehub.boundary.db.models import CourseModel
from coursehub.core.exceptions import NotFoundError, ValidationConflictError
from coursehub.core.sync.platform_sync import PlatformSyncService

logger = logging.getLogger(__name__)


def course_to_dict(course: CourseModel) -> dict:
    """Map a CourseModel to the course response dict."""
    return {
        "id": course.id,
        "title": course.title,
        "platform_id": course.platform_id,
        "created_at": course.created_at,
        "updated_at": course.updated_at,
    }


async def resolve_courses(
    db: AsyncSession,
    course_ids: Collection[int],
) -> list[CourseModel]:
    """
    Load every course in ``course_ids`` or fail listing the missing ids.

    Args:
        db: Async database session
        course_ids: Requested course ids

    Returns:
        list[CourseModel]: Found courses ordered by id

    Raises:
        NotFoundError: If any requested id does not exist
    """
    wanted = set(course_ids)
    if not wanted:
        return []
    found = list(await course_crud.get_many_by_ids(db, wanted))
    missing = wanted - {course.id for course in found}
    if missing:
        logger.warning("Some course IDs not found", extra={"missing_ids": sorted(missing)})
        raise NotFoundError("course", sorted(missing))
    return found


class CourseService:
    """Course service orchestrator."""

    def __init__(self, db: AsyncSession, sync_service: PlatformSyncService) -> None:
        """
        Initialize course service.

        Args:
            db: Async SQLAlchemy session
            sync_service: Projection sync run after each committed mutation
        """
        self.db = db
        self.sync_service = sync_service

    async def _require_course(self, course_id: int) -> CourseModel:
        course = await course_crud.get_by_id(self.db, course_id)
        if course is None:
            raise NotFoundError("course", course_id)
        return course

    async def _require_platform_exists(self, platform_id: int) -> None:
        if not await platform_crud.exists(self.db, platform_id):
            raise NotFoundError("platform", platform_id)

    async def create_course(self, title: str, platform_id: int | None = None) -> dict:
        """
        Create a course, optionally owned by a platform.

        Args:
            title: Unique course title
            platform_id: Owning platform (optional)

        Returns:
            dict: Created course data

        Raises:
            ValidationConflictError: If the title is taken
            NotFoundError: If the platform does not exist
        """
        try:
            if await course_crud.exists_by_title(self.db, title):
                logger.warning("Course title already exists", extra={"title": title})
                raise ValidationConflictError("course", "title", title)
            if platform_id is not None:
                await self._require_platform_exists(platform_id)

            course = await course_crud.create(self.db, title=title, platform_id=platform_id)
            await self.db.commit()
            data = course_to_dict(course)
            logger.info(
                "Course created",
                extra={"course_id": course.id, "platform_id": platform_id},
            )
        except (NotFoundError, ValidationConflictError):
            raise
        except Exception as e:
            logger.error("Failed to create course", extra={"error": str(e), "title": title})
            await self.db.rollback()
            raise

        if platform_id is not None:
            await self.sync_service.sync_by_id(platform_id)
        return data

    async def get_course(self, course_id: int) -> dict:
        """
        Get course by ID.

        Raises:
            NotFoundError: If course not found
        """
        return course_to_dict(await self._require_course(course_id))

    async def get_all_courses(self, limit: int | None = None, offset: int = 0) -> list[dict]:
        """Get all courses with pagination."""
        courses = await course_crud.get_all(self.db, limit=limit, offset=offset)
        return [course_to_dict(c) for c in courses]

    async def update_course(
        self,
        course_id: int,
        title: str | None = None,
        platform_id: int | None = None,
        detach: bool = False,
    ) -> dict:
        """
        Update a course's title and/or owning platform.

        Both the previous and the new owning platform are re-synced.

        Args:
            course_id: Course id
            title: New title (optional)
            platform_id: New owning platform (optional)
            detach: Remove the course from its platform

        Returns:
            dict: Updated course data

        Raises:
            NotFoundError: If the course or the new platform does not exist
            ValidationConflictError: If the new title is taken
        """
        try:
            course = await self._require_course(course_id)
            previous_platform_id = course.platform_id

            if title is not None and title != course.title:
                if await course_crud.exists_by_title(self.db, title, exclude_id=course_id):
                    logger.warning("Course title already exists", extra={"title": title})
                    raise ValidationConflictError("course", "title", title)
                course.title = title

            if detach:
                course.platform_id = None
            elif platform_id is not None and platform_id != course.platform_id:
                await self._require_platform_exists(platform_id)
                course.platform_id = platform_id

            await self.db.flush()
            await self.db.commit()
            data = course_to_dict(course)
            logger.info("Course updated", extra={"course_id": course_id})
        except (NotFoundError, ValidationConflictError):
            raise
        except Exception as e:
            logger.error(
                "Failed to update course",
                extra={"error": str(e), "course_id": course_id},
            )
            await self.db.rollback()
            raise

        affected = {previous_platform_id, data["platform_id"]} - {None}
        if affected:
            await self.sync_service.sync_platform_ids(affected)
        return data

    async def delete_course(self, course_id: int) -> dict:
        """
        Delete a course and its enrollments, then re-sync its former platform.

        Raises:
            NotFoundError: If course not found
        """
        try:
            course = await self._require_course(course_id)
            data = course_to_dict(course)
            await course_crud.delete_by_id(self.db, course_id)
            await self.db.commit()
            logger.info("Course deleted", extra={"course_id": course_id})
        except NotFoundError:
            raise
        except Exception as e:
            logger.error(
                "Failed to delete course",
                extra={"error": str(e), "course_id": course_id},
            )
            await self.db.rollback()
            raise

        if data["platform_id"] is not None:
            await self.sync_service.sync_by_id(data["platform_id"])
        return data

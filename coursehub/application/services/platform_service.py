"""
Platform service orchestrator.

Coordinates platform lifecycle operations, keeps the platform's document in
step with each committed change, and serves the read paths that come
straight from the denormalized projection.

Dependencies: coursehub.boundary, coursehub.core.sync
System role: Platform use case orchestration
"""

import logging
from typing import Collection

from sqlalchemy.ext.asyncio import AsyncSession

from coursehub.application.services.course_service import resolve_courses
from coursehub.boundary.db.CRUD.platform_crud import platform_crud
from coursehub.boundary.db.models import PlatformModel
from coursehub.core.exceptions import NotFoundError, ValidationConflictError
from coursehub.core.sync.models import SyncResult
from coursehub.core.sync.platform_sync import PlatformSyncService, affected_platform_ids
from coursehub.models.platform_document import PlatformDocument

logger = logging.getLogger(__name__)


def platform_to_dict(platform: PlatformModel) -> dict:
    """Map a PlatformModel (courses loaded) to the platform response dict."""
    return {
        "id": platform.id,
        "name": platform.name,
        "course_ids": sorted(course.id for course in platform.courses),
        "created_at": platform.created_at,
        "updated_at": platform.updated_at,
    }


def parse_id(value: str | None) -> int | None:
    """
    Convert an embedded string id back to the record store's integer id.

    Returns:
        int | None: Parsed id, None when the value is missing or not numeric
    """
    if value is None:
        return None
    try:
        return int(value)
    except ValueError:
        logger.error("Failed to parse ID string", extra={"value": value})
        return None


class PlatformService:
    """Platform service orchestrator."""

    def __init__(self, db: AsyncSession, sync_service: PlatformSyncService) -> None:
        """
        Initialize platform service.

        Args:
            db: Async SQLAlchemy session
            sync_service: Projection sync run after each committed mutation;
                its document store also serves the projection reads
        """
        self.db = db
        self.sync_service = sync_service

    async def _require_platform(self, platform_id: int) -> PlatformModel:
        platform = await platform_crud.get_with_courses(self.db, platform_id, fresh=True)
        if platform is None:
            logger.warning("Platform not found", extra={"platform_id": platform_id})
            raise NotFoundError("platform", platform_id)
        return platform

    async def _require_document(self, document_id: str) -> PlatformDocument:
        document = await self.sync_service.document_store.get_by_id(document_id)
        if document is None:
            logger.warning("Platform document not found", extra={"document_id": document_id})
            raise NotFoundError("platform document", document_id)
        return document

    async def create_platform(
        self,
        name: str,
        course_ids: Collection[int] | None = None,
    ) -> dict:
        """
        Create a platform, attaching existing courses to it.

        Courses taken over from another platform also re-sync that platform.

        Args:
            name: Unique platform name
            course_ids: Courses the new platform owns (optional)

        Returns:
            dict: Created platform data

        Raises:
            ValidationConflictError: If the name is taken
            NotFoundError: If any course id does not exist
        """
        try:
            if await platform_crud.exists_by_name(self.db, name):
                logger.warning("Platform name already exists", extra={"platform_name": name})
                raise ValidationConflictError("platform", "name", name)
            courses = await resolve_courses(self.db, course_ids or [])
            previous_owner_ids = affected_platform_ids(courses)

            created = await platform_crud.create(self.db, name=name, courses=courses)
            await self.db.commit()
            platform = await self._require_platform(created.id)
            logger.info(
                "Platform created",
                extra={"platform_id": platform.id, "course_count": len(courses)},
            )
        except (NotFoundError, ValidationConflictError):
            raise
        except Exception as e:
            logger.error(
                "Failed to create platform",
                extra={"error": str(e), "platform_name": name},
            )
            await self.db.rollback()
            raise

        await self.sync_service.sync(platform)
        if previous_owner_ids:
            await self.sync_service.sync_platform_ids(previous_owner_ids)
        return platform_to_dict(platform)

    async def get_platform(self, platform_id: int) -> dict:
        """
        Get platform by ID with its course ids.

        Raises:
            NotFoundError: If platform not found
        """
        return platform_to_dict(await self._require_platform(platform_id))

    async def get_all_platforms(self, limit: int | None = None, offset: int = 0) -> list[dict]:
        """Get all platforms with pagination."""
        platforms = await platform_crud.get_all(self.db, limit=limit, offset=offset)
        return [platform_to_dict(p) for p in platforms]

    async def update_platform(
        self,
        platform_id: int,
        name: str | None = None,
        course_ids: Collection[int] | None = None,
    ) -> dict:
        """
        Rename a platform and/or replace the set of courses it owns.

        Courses dropped from the set are detached (left without a platform);
        courses added are moved from their previous platform, which is
        re-synced as well.

        Args:
            platform_id: Platform id
            name: New name (optional)
            course_ids: Replacement course set (optional)

        Returns:
            dict: Updated platform data

        Raises:
            NotFoundError: If the platform or a course does not exist
            ValidationConflictError: If the new name is taken
        """
        previous_owner_ids: set[int] = set()
        try:
            platform = await self._require_platform(platform_id)

            if name is not None and name != platform.name:
                if await platform_crud.exists_by_name(self.db, name, exclude_id=platform_id):
                    logger.warning("Platform name already exists", extra={"platform_name": name})
                    raise ValidationConflictError("platform", "name", name)
                platform.name = name

            if course_ids is not None:
                courses = await resolve_courses(self.db, course_ids)
                previous_owner_ids = affected_platform_ids(courses) - {platform_id}
                platform.courses = courses

            await self.db.flush()
            await self.db.commit()
            logger.info(
                "Platform updated",
                extra={"platform_id": platform_id, "courses_replaced": course_ids is not None},
            )
        except (NotFoundError, ValidationConflictError):
            raise
        except Exception as e:
            logger.error(
                "Failed to update platform",
                extra={"error": str(e), "platform_id": platform_id},
            )
            await self.db.rollback()
            raise

        await self.sync_service.sync(platform)
        if previous_owner_ids:
            await self.sync_service.sync_platform_ids(previous_owner_ids)
        return platform_to_dict(platform)

    async def delete_platform(self, platform_id: int) -> dict:
        """
        Delete a platform with its courses, then remove its document.

        Returns:
            dict: Data of the deleted platform

        Raises:
            NotFoundError: If platform not found
        """
        try:
            platform = await self._require_platform(platform_id)
            data = platform_to_dict(platform)
            await platform_crud.delete_with_courses(self.db, platform_id)
            await self.db.commit()
            logger.info(
                "Platform deleted",
                extra={"platform_id": platform_id, "course_count": len(data["course_ids"])},
            )
        except NotFoundError:
            raise
        except Exception as e:
            logger.error(
                "Failed to delete platform",
                extra={"error": str(e), "platform_id": platform_id},
            )
            await self.db.rollback()
            raise

        await self.sync_service.delete(platform_id)
        return data

    async def sync_platform(self, platform_id: int) -> SyncResult:
        """
        Force a rebuild of one platform's document.

        Raises:
            NotFoundError: If platform not found
        """
        platform = await self._require_platform(platform_id)
        return await self.sync_service.sync(platform)

    async def get_platform_courses_from_document(self, document_id: str) -> list[dict]:
        """
        List a platform's courses as stored in its document.

        Raises:
            NotFoundError: If no document exists under ``document_id``
        """
        document = await self._require_document(document_id)
        return [
            {"id": parse_id(course.id), "title": course.title}
            for course in document.courses
        ]

    async def get_platform_users_from_document(self, document_id: str) -> list[dict]:
        """
        List the distinct users enrolled anywhere on a platform, from its document.

        Each user carries the ids of the platform's courses they are enrolled in.

        Raises:
            NotFoundError: If no document exists under ``document_id``
        """
        document = await self._require_document(document_id)

        users: dict[str, dict] = {}
        for course in document.courses:
            for embed in course.enrolled_users:
                entry = users.setdefault(
                    embed.id,
                    {
                        "id": parse_id(embed.id),
                        "name": embed.name,
                        "email": embed.email,
                        "course_ids": [],
                    },
                )
                course_id = parse_id(course.id)
                if course_id not in entry["course_ids"]:
                    entry["course_ids"].append(course_id)
        return list(users.values())

"""
Platform sync orchestrator.

Decides which platform documents a business mutation made stale and drives
the aggregate builder and document store for each of them. Runs after the
relational commit, in the same task as the mutation. Every sync reloads the
platform and fully replaces its document, so re-running a sync is always
safe and repairs any earlier drift.

Dependencies: sqlalchemy, coursehub.boundary, coursehub.core.sync
System role: Write side of the projection sync
"""

import logging
from typing import Iterable

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from coursehub.boundary.db.CRUD.platform_crud import platform_crud
from coursehub.boundary.db.models import CourseModel, PlatformModel, UserModel
from coursehub.boundary.docstore.base import PlatformDocumentStore
from coursehub.core.exceptions import CourseHubException
from coursehub.core.sync.aggregate_builder import PlatformAggregateBuilder
from coursehub.core.sync.models import SyncReport, SyncResult, SyncStatus

logger = logging.getLogger(__name__)


def affected_platform_ids(courses: Iterable[CourseModel]) -> set[int]:
    """
    Resolve the distinct owning platforms of ``courses``.

    Courses without a platform are not part of any projection and are skipped.

    Args:
        courses: Any collection of courses (duplicates allowed)

    Returns:
        set[int]: Owning platform ids
    """
    return {course.platform_id for course in courses if course.platform_id is not None}


class PlatformSyncService:
    """Keeps PlatformDocuments consistent with the relational record store."""

    def __init__(
        self,
        db: AsyncSession,
        document_store: PlatformDocumentStore,
        builder: PlatformAggregateBuilder | None = None,
    ) -> None:
        """
        Initialize sync service.

        Args:
            db: Async session the triggering mutation committed on
            document_store: Destination for PlatformDocuments
            builder: Aggregate builder (created on ``db`` if None)
        """
        self.db = db
        self.document_store = document_store
        self.builder = builder or PlatformAggregateBuilder(db)

    async def sync(self, platform: PlatformModel) -> SyncResult:
        """
        Rebuild and upsert one platform's document.

        Args:
            platform: Platform whose projection may be stale

        Returns:
            SyncResult: SYNCED, SKIPPED if the platform no longer exists,
            FAILED if the rebuild or write failed
        """
        return await self.sync_by_id(platform.id)

    def _failed(self, platform_id: int, message: str, error: Exception) -> SyncResult:
        logger.exception(message, extra={"platform_id": platform_id, "error": str(error)})
        return SyncResult(
            platform_id=platform_id,
            document_id=str(platform_id),
            status=SyncStatus.FAILED,
            error=str(error),
        )

    async def sync_by_id(self, platform_id: int) -> SyncResult:
        """
        Reload a platform by id and replace its document.

        The reload and build run inside a SAVEPOINT, so a failed read leaves
        the session's outer transaction usable for the next platform.

        Args:
            platform_id: Platform id

        Returns:
            SyncResult for the platform
        """
        document_id = str(platform_id)

        try:
            async with self.db.begin_nested():
                platform = await platform_crud.get_with_courses(
                    self.db, platform_id, fresh=True
                )
                document = await self.builder.build(platform) if platform else None

            if document is None:
                logger.info(
                    "Platform vanished before sync, nothing to sync",
                    extra={"platform_id": platform_id},
                )
                return SyncResult(
                    platform_id=platform_id,
                    document_id=document_id,
                    status=SyncStatus.SKIPPED,
                )

            await self.document_store.upsert(document)
        except (CourseHubException, SQLAlchemyError) as e:
            return self._failed(platform_id, "Platform document sync failed", e)
        except Exception as e:
            # Relational change is already committed; never surface to the caller
            return self._failed(platform_id, "Unexpected error during platform document sync", e)

        logger.info(
            "Platform document synced",
            extra={"platform_id": platform_id, "course_count": len(document.courses)},
        )
        return SyncResult(
            platform_id=platform_id,
            document_id=document_id,
            status=SyncStatus.SYNCED,
        )

    async def delete(self, platform_id: int) -> SyncResult:
        """
        Remove the document of a deleted platform.

        Args:
            platform_id: Id of the platform that was deleted

        Returns:
            SyncResult: DELETED, SKIPPED if no document existed, FAILED on error
        """
        document_id = str(platform_id)
        try:
            removed = await self.document_store.delete_by_id(document_id)
        except CourseHubException as e:
            return self._failed(platform_id, "Platform document delete failed", e)
        except Exception as e:
            return self._failed(platform_id, "Unexpected error during platform document delete", e)

        logger.info(
            "Platform document delete",
            extra={"platform_id": platform_id, "removed": removed},
        )
        return SyncResult(
            platform_id=platform_id,
            document_id=document_id,
            status=SyncStatus.DELETED if removed else SyncStatus.SKIPPED,
        )

    async def sync_platform_ids(self, platform_ids: Iterable[int]) -> SyncReport:
        """
        Sync each distinct platform id once.

        A failure for one platform is recorded and does not stop the others.

        Args:
            platform_ids: Platform ids, duplicates allowed

        Returns:
            SyncReport with one result per distinct platform
        """
        report = SyncReport()
        for platform_id in sorted(set(platform_ids)):
            report.results.append(await self.sync_by_id(platform_id))

        if report.failed:
            logger.warning(
                "Platform sync finished with failures",
                extra={"synced": report.synced, "failed": report.failed},
            )
        return report

    async def sync_affected_by_user(self, user: UserModel) -> SyncReport:
        """
        Sync every platform owning one of the user's current courses.

        For a user deletion, resolve ``affected_platform_ids(user.courses)``
        before deleting and pass it to ``sync_platform_ids`` after the commit.

        Args:
            user: User with courses loaded

        Returns:
            SyncReport for the affected platforms
        """
        return await self.sync_platform_ids(affected_platform_ids(user.courses))

    async def sync_affected_by_courses(self, courses: Iterable[CourseModel]) -> SyncReport:
        """
        Sync every platform owning at least one of ``courses``.

        For a bulk enrollment replacement pass the union of the old and new
        course sets, so platforms that only lost the user are rebuilt too.

        Args:
            courses: Any collection of courses

        Returns:
            SyncReport for the affected platforms
        """
        return await self.sync_platform_ids(affected_platform_ids(courses))

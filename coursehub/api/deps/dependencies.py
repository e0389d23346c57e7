"""
Dependency injection container.

Factory functions for FastAPI dependencies.

Dependencies: coursehub.application, coursehub.boundary, coursehub.core.sync
System role: DI container for service injection
"""

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from coursehub.application.services import CourseService, PlatformService, UserService
from coursehub.boundary.db import get_async_db
from coursehub.boundary.docstore.base import PlatformDocumentStore
from coursehub.core.sync.platform_sync import PlatformSyncService


class ServiceCache:
    """Container for cached process-wide instances."""

    def __init__(self):
        self._document_store = None

    @property
    def document_store(self) -> PlatformDocumentStore:
        """Get cached document store."""
        if self._document_store is None:
            from coursehub.boundary.docstore.store_factory import get_document_store
            self._document_store = get_document_store()
        return self._document_store

    def clear(self) -> None:
        """Clear all cached instances."""
        self._document_store = None


# Global service cache
_service_cache = ServiceCache()


def get_service_cache() -> ServiceCache:
    """Get service cache singleton."""
    return _service_cache


def get_document_store_dependency() -> PlatformDocumentStore:
    """
    Get the document store selected via DOCUMENT_STORE_STORE_TYPE.

    Returns:
        PlatformDocumentStore: In-memory store (dev) or S3 store (prod)
    """
    return get_service_cache().document_store


def get_platform_sync_service(
    db: AsyncSession = Depends(get_async_db),
    document_store: PlatformDocumentStore = Depends(get_document_store_dependency),
) -> PlatformSyncService:
    """
    Get platform sync service bound to the request's session.

    Args:
        db: Async database session (injected via Depends)
        document_store: Projection destination (injected via Depends)

    Returns:
        PlatformSyncService: Sync service instance
    """
    return PlatformSyncService(db=db, document_store=document_store)


def get_platform_service(
    db: AsyncSession = Depends(get_async_db),
    sync_service: PlatformSyncService = Depends(get_platform_sync_service),
) -> PlatformService:
    """
    Get platform service instance.

    Args:
        db: Async database session (injected via Depends)
        sync_service: Sync service sharing the same session

    Returns:
        PlatformService: Platform service instance
    """
    return PlatformService(db=db, sync_service=sync_service)


def get_course_service(
    db: AsyncSession = Depends(get_async_db),
    sync_service: PlatformSyncService = Depends(get_platform_sync_service),
) -> CourseService:
    """Get course service instance."""
    return CourseService(db=db, sync_service=sync_service)


def get_user_service(
    db: AsyncSession = Depends(get_async_db),
    sync_service: PlatformSyncService = Depends(get_platform_sync_service),
) -> UserService:
    """Get user service instance."""
    return UserService(db=db, sync_service=sync_service)

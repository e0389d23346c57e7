"""FastAPI dependency providers."""

from coursehub.api.deps.dependencies import (
    get_course_service,
    get_document_store_dependency,
    get_platform_service,
    get_platform_sync_service,
    get_service_cache,
    get_user_service,
)

__all__ = [
    "get_course_service",
    "get_document_store_dependency",
    "get_platform_service",
    "get_platform_sync_service",
    "get_service_cache",
    "get_user_service",
]

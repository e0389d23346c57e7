"""
Platform API endpoints.

Routes:
- POST /platforms - Create platform (optionally attaching courses)
- GET /platforms - List platforms
- GET /platforms/{id} - Get single platform
- PUT /platforms/{id} - Rename and/or replace owned courses
- DELETE /platforms/{id} - Delete platform with its courses
- POST /platforms/{id}/sync - Rebuild the platform document
- GET /platforms/{document_id}/courses - Courses read from the document
- GET /platforms/{document_id}/users - Users read from the document

Dependencies: coursehub.application.services, coursehub.models
System role: Platform management HTTP API
"""

import logging

from fastapi import APIRouter, Depends

from coursehub.api.deps.dependencies import get_platform_service
from coursehub.application.services.platform_service import PlatformService
from coursehub.core.sync.models import SyncResult
from coursehub.models.course import CourseSummaryResponse
from coursehub.models.platform import (
    CreatePlatformRequest,
    PlatformResponse,
    PlatformUserResponse,
    UpdatePlatformRequest,
)

from .error_handling import handle_service_errors

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/platforms", tags=["platforms"])


@router.post("", response_model=PlatformResponse, status_code=201)
@handle_service_errors
async def create_platform(
    request: CreatePlatformRequest,
    platform_service: PlatformService = Depends(get_platform_service),
) -> PlatformResponse:
    """
    Create a new platform.

    Raises:
        HTTPException(400): Name already taken
        HTTPException(404): A course id does not exist
    """
    logger.info(
        "Creating new platform",
        extra={"platform_name": request.name, "course_count": len(request.course_ids)},
    )
    platform_data = await platform_service.create_platform(
        name=request.name,
        course_ids=request.course_ids,
    )
    return PlatformResponse(**platform_data)


@router.get("", response_model=list[PlatformResponse])
@handle_service_errors
async def list_platforms(
    limit: int = 100,
    offset: int = 0,
    platform_service: PlatformService = Depends(get_platform_service),
) -> list[PlatformResponse]:
    """List all platforms with pagination."""
    platforms = await platform_service.get_all_platforms(limit=limit, offset=offset)
    logger.info("Platforms retrieved", extra={"count": len(platforms)})
    return [PlatformResponse(**p) for p in platforms]


@router.get("/{platform_id}", response_model=PlatformResponse)
@handle_service_errors
async def get_platform(
    platform_id: int,
    platform_service: PlatformService = Depends(get_platform_service),
) -> PlatformResponse:
    """
    Get single platform by ID.

    Raises:
        HTTPException(404): Platform not found
    """
    return PlatformResponse(**await platform_service.get_platform(platform_id))


@router.put("/{platform_id}", response_model=PlatformResponse)
@handle_service_errors
async def update_platform(
    platform_id: int,
    request: UpdatePlatformRequest,
    platform_service: PlatformService = Depends(get_platform_service),
) -> PlatformResponse:
    """
    Update platform by ID.

    Omitting ``course_ids`` keeps the owned course set; an empty list detaches
    every course.

    Raises:
        HTTPException(404): Platform or course not found
        HTTPException(400): Name already taken
    """
    logger.info(
        "Updating platform",
        extra={
            "platform_id": platform_id,
            "updating_name": request.name is not None,
            "replacing_courses": request.course_ids is not None,
        },
    )
    platform_data = await platform_service.update_platform(
        platform_id=platform_id,
        name=request.name,
        course_ids=request.course_ids,
    )
    return PlatformResponse(**platform_data)


@router.delete("/{platform_id}", status_code=204)
@handle_service_errors
async def delete_platform(
    platform_id: int,
    platform_service: PlatformService = Depends(get_platform_service),
) -> None:
    """
    Delete platform by ID together with its courses and their enrollments.

    Raises:
        HTTPException(404): Platform not found
    """
    logger.info("Deleting platform", extra={"platform_id": platform_id})
    await platform_service.delete_platform(platform_id)


@router.post("/{platform_id}/sync", response_model=SyncResult)
@handle_service_errors
async def sync_platform(
    platform_id: int,
    platform_service: PlatformService = Depends(get_platform_service),
) -> SyncResult:
    """
    Rebuild and store the platform's document from the current records.

    Repairs any drift left by an earlier failed sync.

    Raises:
        HTTPException(404): Platform not found
    """
    result = await platform_service.sync_platform(platform_id)
    logger.info(
        "Manual platform sync finished",
        extra={"platform_id": platform_id, "status": result.status.value},
    )
    return result


@router.get("/{document_id}/courses", response_model=list[CourseSummaryResponse])
@handle_service_errors
async def get_platform_courses(
    document_id: str,
    platform_service: PlatformService = Depends(get_platform_service),
) -> list[CourseSummaryResponse]:
    """
    List the courses of a platform as stored in its document.

    Raises:
        HTTPException(404): Platform document not found
    """
    courses = await platform_service.get_platform_courses_from_document(document_id)
    return [CourseSummaryResponse(**c) for c in courses]


@router.get("/{document_id}/users", response_model=list[PlatformUserResponse])
@handle_service_errors
async def get_platform_users(
    document_id: str,
    platform_service: PlatformService = Depends(get_platform_service),
) -> list[PlatformUserResponse]:
    """
    List the distinct users enrolled on a platform, read from its document.

    Raises:
        HTTPException(404): Platform document not found
    """
    users = await platform_service.get_platform_users_from_document(document_id)
    return [PlatformUserResponse(**u) for u in users]

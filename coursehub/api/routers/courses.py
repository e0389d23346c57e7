"""
Course API endpoints.

Routes:
- POST /courses - Create new course
- GET /courses - List all courses
- GET /courses/{id} - Get single course
- PUT /courses/{id} - Update course (title, owning platform)
- DELETE /courses/{id} - Delete course and its enrollments

Dependencies: coursehub.application.services, coursehub.models
System role: Course management HTTP API
"""

import logging

from fastapi import APIRouter, Depends

from coursehub.api.deps.dependencies import get_course_service
from coursehub.application.services.course_service import CourseService
from coursehub.models.course import CourseResponse, CreateCourseRequest, UpdateCourseRequest

from .error_handling import handle_service_errors

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/courses", tags=["courses"])


@router.post("", response_model=CourseResponse, status_code=201)
@handle_service_errors
async def create_course(
    request: CreateCourseRequest,
    course_service: CourseService = Depends(get_course_service),
) -> CourseResponse:
    """
    Create new course, optionally owned by a platform.

    Raises:
        HTTPException(400): Title already taken
        HTTPException(404): Platform not found
    """
    logger.info(
        "Creating new course",
        extra={"title": request.title, "platform_id": request.platform_id},
    )
    course_data = await course_service.create_course(
        title=request.title,
        platform_id=request.platform_id,
    )
    return CourseResponse(**course_data)


@router.get("", response_model=list[CourseResponse])
@handle_service_errors
async def list_courses(
    limit: int = 100,
    offset: int = 0,
    course_service: CourseService = Depends(get_course_service),
) -> list[CourseResponse]:
    """List all courses with pagination."""
    courses = await course_service.get_all_courses(limit=limit, offset=offset)
    return [CourseResponse(**c) for c in courses]


@router.get("/{course_id}", response_model=CourseResponse)
@handle_service_errors
async def get_course(
    course_id: int,
    course_service: CourseService = Depends(get_course_service),
) -> CourseResponse:
    """
    Get single course by ID.

    Raises:
        HTTPException(404): Course not found
    """
    return CourseResponse(**await course_service.get_course(course_id))


@router.put("/{course_id}", response_model=CourseResponse)
@handle_service_errors
async def update_course(
    course_id: int,
    request: UpdateCourseRequest,
    course_service: CourseService = Depends(get_course_service),
) -> CourseResponse:
    """
    Update course by ID.

    Raises:
        HTTPException(404): Course or platform not found
        HTTPException(400): Title already taken
    """
    logger.info(
        "Updating course",
        extra={
            "course_id": course_id,
            "updating_title": request.title is not None,
            "platform_id": request.platform_id,
            "detach": request.detach,
        },
    )
    course_data = await course_service.update_course(
        course_id=course_id,
        title=request.title,
        platform_id=request.platform_id,
        detach=request.detach,
    )
    return CourseResponse(**course_data)


@router.delete("/{course_id}", status_code=204)
@handle_service_errors
async def delete_course(
    course_id: int,
    course_service: CourseService = Depends(get_course_service),
) -> None:
    """
    Delete course by ID.

    Raises:
        HTTPException(404): Course not found
    """
    logger.info("Deleting course", extra={"course_id": course_id})
    await course_service.delete_course(course_id)

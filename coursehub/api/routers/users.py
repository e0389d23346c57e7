"""
User API endpoints.

Routes:
- POST /users - Create user with optional enrollments
- GET /users - List users
- GET /users/{id} - Get single user
- PUT /users/{id} - Update user
- DELETE /users/{id} - Delete user
- PUT /users/{id}/courses - Replace the user's enrollment set

Dependencies: coursehub.application.services, coursehub.models
System role: User and enrollment HTTP API
"""

import logging

from fastapi import APIRouter, Depends

from coursehub.api.deps.dependencies import get_user_service
from coursehub.application.services.user_service import UserService
from coursehub.models.user import (
    CreateUserRequest,
    EnrollmentRequest,
    UpdateUserRequest,
    UserResponse,
)

from .error_handling import handle_service_errors

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/users", tags=["users"])


@router.post("", response_model=UserResponse, status_code=201)
@handle_service_errors
async def create_user(
    request: CreateUserRequest,
    user_service: UserService = Depends(get_user_service),
) -> UserResponse:
    """
    Create new user.

    Raises:
        HTTPException(400): Email already taken
        HTTPException(404): A course id does not exist
    """
    logger.info("Creating new user", extra={"course_count": len(request.course_ids)})
    user_data = await user_service.create_user(
        name=request.name,
        email=request.email,
        course_ids=request.course_ids,
    )
    return UserResponse(**user_data)


@router.get("", response_model=list[UserResponse])
@handle_service_errors
async def list_users(
    limit: int = 100,
    offset: int = 0,
    user_service: UserService = Depends(get_user_service),
) -> list[UserResponse]:
    """List all users with pagination."""
    users = await user_service.get_all_users(limit=limit, offset=offset)
    return [UserResponse(**u) for u in users]


@router.get("/{user_id}", response_model=UserResponse)
@handle_service_errors
async def get_user(
    user_id: int,
    user_service: UserService = Depends(get_user_service),
) -> UserResponse:
    """
    Get single user by ID.

    Raises:
        HTTPException(404): User not found
    """
    return UserResponse(**await user_service.get_user(user_id))


@router.put("/{user_id}", response_model=UserResponse)
@handle_service_errors
async def update_user(
    user_id: int,
    request: UpdateUserRequest,
    user_service: UserService = Depends(get_user_service),
) -> UserResponse:
    """
    Update user by ID.

    Raises:
        HTTPException(404): User or course not found
        HTTPException(400): Email already taken
    """
    logger.info(
        "Updating user",
        extra={"user_id": user_id, "replacing_courses": request.course_ids is not None},
    )
    user_data = await user_service.update_user(
        user_id=user_id,
        name=request.name,
        email=request.email,
        course_ids=request.course_ids,
    )
    return UserResponse(**user_data)


@router.delete("/{user_id}", status_code=204)
@handle_service_errors
async def delete_user(
    user_id: int,
    user_service: UserService = Depends(get_user_service),
) -> None:
    """
    Delete user by ID.

    Raises:
        HTTPException(404): User not found
    """
    logger.info("Deleting user", extra={"user_id": user_id})
    await user_service.delete_user(user_id)


@router.put("/{user_id}/courses", response_model=UserResponse)
@handle_service_errors
async def replace_user_courses(
    user_id: int,
    request: EnrollmentRequest,
    user_service: UserService = Depends(get_user_service),
) -> UserResponse:
    """
    Replace the user's enrollments with ``course_ids``.

    An empty list removes every enrollment.

    Raises:
        HTTPException(404): User or a course not found
    """
    logger.info(
        "Replacing user enrollments",
        extra={"user_id": user_id, "course_count": len(request.course_ids)},
    )
    user_data = await user_service.enroll_user(user_id, request.course_ids)
    return UserResponse(**user_data)

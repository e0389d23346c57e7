"""
User domain models and schemas.

Request/response schemas for user and enrollment operations.

Dependencies: pydantic
System role: User API contracts
"""

from datetime import datetime

from pydantic import BaseModel, Field


class CreateUserRequest(BaseModel):
    """Request schema for creating a new user."""

    name: str = Field(..., min_length=1, max_length=255, description="Display name")
    email: str = Field(..., min_length=3, max_length=320, description="Unique email")
    course_ids: list[int] = Field(default_factory=list, description="Initial enrollments")


class UpdateUserRequest(BaseModel):
    """Request schema for updating a user."""

    name: str | None = Field(None, min_length=1, max_length=255)
    email: str | None = Field(None, min_length=3, max_length=320)
    course_ids: list[int] | None = Field(
        None,
        description="Replacement enrollment set (omit to keep the current set)",
    )


class EnrollmentRequest(BaseModel):
    """Request schema for replacing a user's enrollments in one call."""

    course_ids: list[int] = Field(
        default_factory=list,
        description="Complete new enrollment set; empty clears every enrollment",
    )


class UserResponse(BaseModel):
    """Response schema for user operations."""

    id: int
    name: str
    email: str
    course_ids: list[int]
    created_at: datetime
    updated_at: datetime

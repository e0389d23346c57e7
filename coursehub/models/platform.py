"""
Platform domain models and schemas.

Request/response schemas for platform operations.

Dependencies: pydantic
System role: Platform API contracts
"""

from datetime import datetime

from pydantic import BaseModel, Field


class CreatePlatformRequest(BaseModel):
    """Request schema for creating a new platform."""

    name: str = Field(..., min_length=1, max_length=255, description="Unique platform name")
    course_ids: list[int] = Field(
        default_factory=list,
        description="Existing courses to attach to the platform",
    )


class UpdatePlatformRequest(BaseModel):
    """Request schema for updating a platform."""

    name: str | None = Field(None, min_length=1, max_length=255, description="Platform name")
    course_ids: list[int] | None = Field(
        None,
        description="Replacement set of owned courses (omit to keep the current set)",
    )


class PlatformResponse(BaseModel):
    """Response schema for platform operations."""

    id: int
    name: str
    course_ids: list[int]
    created_at: datetime
    updated_at: datetime


class PlatformUserResponse(BaseModel):
    """User read from a platform document, with the platform's courses they take."""

    id: int | None
    name: str
    email: str
    course_ids: list[int | None]

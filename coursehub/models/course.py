"""
Course domain models and schemas.

Request/response schemas for course operations.

Dependencies: pydantic
System role: Course API contracts
"""

from datetime import datetime

from pydantic import BaseModel, Field


class CreateCourseRequest(BaseModel):
    """Request schema for creating a new course."""

    title: str = Field(..., min_length=1, max_length=255, description="Unique course title")
    platform_id: int | None = Field(None, description="Owning platform")


class UpdateCourseRequest(BaseModel):
    """Request schema for updating a course."""

    title: str | None = Field(None, min_length=1, max_length=255, description="Course title")
    platform_id: int | None = Field(None, description="New owning platform")
    detach: bool = Field(False, description="Remove the course from its platform")


class CourseResponse(BaseModel):
    """Response schema for course operations."""

    id: int
    title: str
    platform_id: int | None
    created_at: datetime
    updated_at: datetime


class CourseSummaryResponse(BaseModel):
    """Course read from a platform document."""

    id: int | None
    title: str

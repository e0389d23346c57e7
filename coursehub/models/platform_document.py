"""
Platform document projection schemas.

Denormalized, read-optimized copy of one platform with its courses and the
users enrolled in each course. Ids are the decimal string form of the
record store's integer ids.

Dependencies: pydantic
System role: Document store data shape
"""

from pydantic import BaseModel, Field


class UserEmbed(BaseModel):
    """User copy embedded inside a course."""

    id: str
    name: str
    email: str


class CourseEmbed(BaseModel):
    """Course copy embedded inside a platform document."""

    id: str
    title: str
    enrolled_users: list[UserEmbed] = Field(default_factory=list)


class PlatformDocument(BaseModel):
    """Complete projection of one platform, keyed by str(platform.id)."""

    id: str
    name: str
    courses: list[CourseEmbed] = Field(default_factory=list)

    def all_users(self) -> list[UserEmbed]:
        """
        Flatten embedded users across all courses.

        Returns:
            list[UserEmbed]: Users in course order; a user enrolled in several
            of the platform's courses appears once per course
        """
        return [user for course in self.courses for user in course.enrolled_users]

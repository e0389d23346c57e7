"""Service orchestrators."""

from .course_service import CourseService
from .platform_service import PlatformService
from .user_service import UserService

__all__ = [
    "CourseService",
    "PlatformService",
    "UserService",
]

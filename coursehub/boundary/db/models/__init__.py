"""
Database models package.

Exports:
  - PlatformModel: Platform ORM model (aggregate root)
  - CourseModel: Course ORM model
  - UserModel, user_courses: User ORM model and enrollment table

Dependencies: sqlalchemy, coursehub.boundary.db.base
System role: Database model definitions for domain entities
"""

from coursehub.boundary.db.models.platform_model import PlatformModel
from coursehub.boundary.db.models.course_model import CourseModel
from coursehub.boundary.db.models.user_model import UserModel, user_courses

__all__ = [
    "PlatformModel",
    "CourseModel",
    "UserModel",
    "user_courses",
]

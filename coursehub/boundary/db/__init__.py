"""
Database boundary layer: ORM models, CRUD operations, and connection management.

Exports:
  - Base, IntegerIDMixin, TimestampMixin: Model building blocks
  - get_async_engine(), get_async_session_factory(), get_async_db(): Connection management
  - PlatformModel, CourseModel, UserModel, user_courses: Domain tables
  - platform_crud, course_crud, user_crud: CRUD operation singletons

Dependencies: sqlalchemy, coursehub.configs
System role: Relational record store for platforms, courses and users
"""

from coursehub.boundary.db.base import Base, IntegerIDMixin, TimestampMixin
from coursehub.boundary.db.connection import (
    get_async_db,
    get_async_engine,
    get_async_session_factory,
)
from coursehub.boundary.db.models import CourseModel, PlatformModel, UserModel, user_courses
from coursehub.boundary.db.CRUD import (
    BaseCRUD,
    CourseCRUD,
    PlatformCRUD,
    UserCRUD,
    course_crud,
    platform_crud,
    user_crud,
)

__all__ = [
    # Base classes
    "Base",
    "IntegerIDMixin",
    "TimestampMixin",
    # Connection
    "get_async_db",
    "get_async_engine",
    "get_async_session_factory",
    # Models
    "PlatformModel",
    "CourseModel",
    "UserModel",
    "user_courses",
    # CRUD classes
    "BaseCRUD",
    "PlatformCRUD",
    "CourseCRUD",
    "UserCRUD",
    # CRUD singletons
    "platform_crud",
    "course_crud",
    "user_crud",
]

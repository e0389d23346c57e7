"""
CRUD operations for database models.

Exports base CRUD class and model-specific CRUD implementations
with pre-instantiated singletons for direct use.

Usage:
    from coursehub.boundary.db.CRUD import platform_crud, user_crud

    platform = await platform_crud.get_with_courses(db, platform_id)
    users = await user_crud.get_by_course_ids(db, {10, 11})
"""

from coursehub.boundary.db.CRUD.base_crud import BaseCRUD
from coursehub.boundary.db.CRUD.platform_crud import PlatformCRUD, platform_crud
from coursehub.boundary.db.CRUD.course_crud import CourseCRUD, course_crud
from coursehub.boundary.db.CRUD.user_crud import UserCRUD, user_crud

__all__ = [
    "BaseCRUD",
    "PlatformCRUD",
    "platform_crud",
    "CourseCRUD",
    "course_crud",
    "UserCRUD",
    "user_crud",
]

"""
User service orchestrator.

Coordinates user lifecycle and enrollment operations. Every committed change
re-syncs the documents of the platforms owning the affected courses.

Dependencies: coursehub.boundary.db.CRUD, coursehub.core.sync
System role: User and enrollment use case orchestration
"""

import logging
from typing import Collection

from sqlalchemy.ext.asyncio import AsyncSession

from coursehub.application.services.course_service import resolve_courses
from coursehub.boundary.db.CRUD.user_crud import user_crud
from coursehub.boundary.db.models import UserModel
from coursehub.core.exceptions import NotFoundError, ValidationConflictError
from coursehub.core.sync.platform_sync import PlatformSyncService, affected_platform_ids

logger = logging.getLogger(__name__)


def user_to_dict(user: UserModel) -> dict:
    """Map a UserModel (courses loaded) to the user response dict."""
    return {
        "id": user.id,
        "name": user.name,
        "email": user.email,
        "course_ids": sorted(course.id for course in user.courses),
        "created_at": user.created_at,
        "updated_at": user.updated_at,
    }


class UserService:
    """User service orchestrator."""

    def __init__(self, db: AsyncSession, sync_service: PlatformSyncService) -> None:
        """
        Initialize user service.

        Args:
            db: Async SQLAlchemy session
            sync_service: Projection sync run after each committed mutation
        """
        self.db = db
        self.sync_service = sync_service

    async def _require_user(self, user_id: int) -> UserModel:
        user = await user_crud.get_with_courses(self.db, user_id, fresh=True)
        if user is None:
            logger.warning("User not found", extra={"user_id": user_id})
            raise NotFoundError("user", user_id)
        return user

    async def create_user(
        self,
        name: str,
        email: str,
        course_ids: Collection[int] | None = None,
    ) -> dict:
        """
        Create a user with optional initial enrollments.

        Args:
            name: Display name
            email: Unique email
            course_ids: Courses to enroll in (optional)

        Returns:
            dict: Created user data

        Raises:
            ValidationConflictError: If the email is taken
            NotFoundError: If any course id does not exist
        """
        try:
            if await user_crud.exists_by_email(self.db, email):
                logger.warning("User already exists with given email")
                raise ValidationConflictError("user", "email", email)
            courses = await resolve_courses(self.db, course_ids or [])

            created = await user_crud.create(self.db, name=name, email=email, courses=courses)
            await self.db.commit()
            user = await self._require_user(created.id)
            logger.info(
                "User created",
                extra={"user_id": user.id, "course_count": len(courses)},
            )
        except (NotFoundError, ValidationConflictError):
            raise
        except Exception as e:
            logger.error("Failed to create user", extra={"error": str(e)})
            await self.db.rollback()
            raise

        await self.sync_service.sync_affected_by_user(user)
        return user_to_dict(user)

    async def get_user(self, user_id: int) -> dict:
        """
        Get user by ID with enrolled course ids.

        Raises:
            NotFoundError: If user not found
        """
        return user_to_dict(await self._require_user(user_id))

    async def get_all_users(self, limit: int | None = None, offset: int = 0) -> list[dict]:
        """Get all users with pagination."""
        users = await user_crud.get_all(self.db, limit=limit, offset=offset)
        return [user_to_dict(u) for u in users]

    async def update_user(
        self,
        user_id: int,
        name: str | None = None,
        email: str | None = None,
        course_ids: Collection[int] | None = None,
    ) -> dict:
        """
        Update a user's fields and optionally replace their enrollments.

        Args:
            user_id: User id
            name: New name (optional)
            email: New email (optional)
            course_ids: Replacement enrollment set (optional)

        Returns:
            dict: Updated user data

        Raises:
            NotFoundError: If the user or a course does not exist
            ValidationConflictError: If the new email is taken
        """
        try:
            user = await self._require_user(user_id)
            previous_courses = list(user.courses)

            if email is not None and email != user.email:
                if await user_crud.exists_by_email(self.db, email, exclude_id=user_id):
                    logger.warning("Email already in use by another user")
                    raise ValidationConflictError("user", "email", email)
                user.email = email
            if name is not None:
                user.name = name
            if course_ids is not None:
                user.courses = await resolve_courses(self.db, course_ids)

            await self.db.flush()
            await self.db.commit()
            logger.info("User updated", extra={"user_id": user_id})
        except (NotFoundError, ValidationConflictError):
            raise
        except Exception as e:
            logger.error("Failed to update user", extra={"error": str(e), "user_id": user_id})
            await self.db.rollback()
            raise

        # Old courses are included so platforms the user left are rebuilt too
        await self.sync_service.sync_affected_by_courses(previous_courses + list(user.courses))
        return user_to_dict(user)

    async def delete_user(self, user_id: int) -> dict:
        """
        Delete a user and their enrollments.

        Affected platforms are resolved before the delete and re-synced
        after the commit, so their documents drop the user.

        Returns:
            dict: Data of the deleted user

        Raises:
            NotFoundError: If user not found
        """
        try:
            user = await self._require_user(user_id)
            data = user_to_dict(user)
            platform_ids = affected_platform_ids(user.courses)

            await user_crud.delete_by_id(self.db, user_id)
            await self.db.commit()
            logger.info("User deleted", extra={"user_id": user_id})
        except NotFoundError:
            raise
        except Exception as e:
            logger.error("Failed to delete user", extra={"error": str(e), "user_id": user_id})
            await self.db.rollback()
            raise

        await self.sync_service.sync_platform_ids(platform_ids)
        return data

    async def enroll_user(self, user_id: int, course_ids: Collection[int]) -> dict:
        """
        Replace a user's enrollment set in one call.

        An empty ``course_ids`` clears every enrollment. Platforms owning
        either an old or a new course are re-synced.

        Returns:
            dict: Updated user data

        Raises:
            NotFoundError: If the user or any course does not exist
        """
        try:
            user = await self._require_user(user_id)
            original_courses = list(user.courses)

            user.courses = await resolve_courses(self.db, course_ids)
            await self.db.flush()
            await self.db.commit()
            logger.info(
                "Course enrollments updated for user",
                extra={"user_id": user_id, "course_count": len(user.courses)},
            )
        except NotFoundError:
            raise
        except Exception as e:
            logger.error("Failed to enroll user", extra={"error": str(e), "user_id": user_id})
            await self.db.rollback()
            raise

        await self.sync_service.sync_affected_by_courses(original_courses + list(user.courses))
        return user_to_dict(user)

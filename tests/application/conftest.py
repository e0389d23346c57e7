"""Service fixtures wired to the in-memory database and document store."""

import pytest

from coursehub.application.services import CourseService, PlatformService, UserService


@pytest.fixture
def platform_service(test_async_db, sync_service) -> PlatformService:
    return PlatformService(db=test_async_db, sync_service=sync_service)


@pytest.fixture
def course_service(test_async_db, sync_service) -> CourseService:
    return CourseService(db=test_async_db, sync_service=sync_service)


@pytest.fixture
def user_service(test_async_db, sync_service) -> UserService:
    return UserService(db=test_async_db, sync_service=sync_service)

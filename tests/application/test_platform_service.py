"""
Test suite for PlatformService.

Tests platform lifecycle operations and the document kept for each
platform, plus the read paths served from those documents.

System role: Verification of platform use cases end to end
"""

from unittest.mock import AsyncMock

import pytest

from coursehub.application.services.platform_service import PlatformService, parse_id
from coursehub.boundary.db.CRUD.course_crud import course_crud
from coursehub.core.exceptions import NotFoundError, ValidationConflictError
from coursehub.core.sync.models import SyncStatus


class TestPlatformServiceCreate:
    """Test suite for create_platform."""

    @pytest.mark.asyncio
    async def test_create_writes_document(self, platform_service, document_store) -> None:
        data = await platform_service.create_platform(name="Alpha")

        assert data["course_ids"] == []
        document = await document_store.get_by_id(str(data["id"]))
        assert document.name == "Alpha"
        assert document.courses == []

    @pytest.mark.asyncio
    async def test_create_with_taken_name_conflicts(self, platform_service, seed) -> None:
        await seed.platform("Alpha")
        await seed.commit()

        with pytest.raises(ValidationConflictError):
            await platform_service.create_platform(name="Alpha")

    @pytest.mark.asyncio
    async def test_create_with_unknown_course_lists_missing_ids(
        self, platform_service, seed
    ) -> None:
        course = await seed.course("Known")
        await seed.commit()

        with pytest.raises(NotFoundError) as exc_info:
            await platform_service.create_platform(
                name="Alpha", course_ids=[course.id, 998, 999]
            )

        assert exc_info.value.entity_id == [998, 999]

    @pytest.mark.asyncio
    async def test_create_taking_courses_resyncs_previous_owner(
        self, platform_service, seed, sync_service, document_store
    ) -> None:
        """A course moved to the new platform disappears from the old document."""
        old = await seed.platform("Old")
        course = await seed.course("Moving", old)
        await seed.user("Ann", "ann@example.com", [course])
        await seed.commit()
        await sync_service.sync(old)

        data = await platform_service.create_platform(name="New", course_ids=[course.id])

        new_doc = await document_store.get_by_id(str(data["id"]))
        old_doc = await document_store.get_by_id(str(old.id))
        assert [c.title for c in new_doc.courses] == ["Moving"]
        assert new_doc.courses[0].enrolled_users[0].name == "Ann"
        assert old_doc.courses == []


class TestPlatformServiceUpdate:
    """Test suite for update_platform."""

    @pytest.mark.asyncio
    async def test_rename_updates_document(
        self, platform_service, seed, document_store
    ) -> None:
        platform = await seed.platform("Alpha")
        await seed.commit()

        data = await platform_service.update_platform(platform.id, name="Beta")

        assert data["name"] == "Beta"
        assert (await document_store.get_by_id(str(platform.id))).name == "Beta"

    @pytest.mark.asyncio
    async def test_rename_to_taken_name_conflicts(self, platform_service, seed) -> None:
        platform = await seed.platform("Alpha")
        await seed.platform("Beta")
        await seed.commit()

        with pytest.raises(ValidationConflictError):
            await platform_service.update_platform(platform.id, name="Beta")

    @pytest.mark.asyncio
    async def test_replacing_courses_detaches_removed_ones(
        self, platform_service, seed, test_async_db, document_store
    ) -> None:
        platform = await seed.platform("Alpha")
        dropped = await seed.course("Dropped", platform)
        added = await seed.course("Added")
        await seed.commit()

        data = await platform_service.update_platform(platform.id, course_ids=[added.id])

        assert data["course_ids"] == [added.id]
        dropped_row = await course_crud.get_by_id(test_async_db, dropped.id)
        assert dropped_row is not None
        assert dropped_row.platform_id is None
        document = await document_store.get_by_id(str(platform.id))
        assert [c.title for c in document.courses] == ["Added"]

    @pytest.mark.asyncio
    async def test_update_missing_platform(self, platform_service) -> None:
        with pytest.raises(NotFoundError):
            await platform_service.update_platform(404, name="x")


class TestPlatformServiceDelete:
    """Test suite for delete_platform."""

    @pytest.mark.asyncio
    async def test_delete_removes_courses_and_document(
        self, platform_service, seed, test_async_db, document_store
    ) -> None:
        platform = await seed.platform("Alpha")
        course = await seed.course("Owned", platform)
        await seed.user("Ann", "ann@example.com", [course])
        await seed.commit()
        await platform_service.sync_platform(platform.id)

        data = await platform_service.delete_platform(platform.id)

        assert data["course_ids"] == [course.id]
        assert await document_store.get_by_id(str(platform.id)) is None
        assert not await course_crud.exists(test_async_db, course.id)

    @pytest.mark.asyncio
    async def test_delete_missing_platform(self, platform_service) -> None:
        with pytest.raises(NotFoundError):
            await platform_service.delete_platform(404)


class TestPlatformServiceDocumentReads:
    """Test suite for reads served from the platform document."""

    @pytest.mark.asyncio
    async def test_courses_from_document(self, platform_service, seed) -> None:
        platform = await seed.platform("Alpha")
        c1 = await seed.course("One", platform)
        c2 = await seed.course("Two", platform)
        await seed.commit()
        await platform_service.sync_platform(platform.id)

        courses = await platform_service.get_platform_courses_from_document(str(platform.id))

        assert courses == [{"id": c1.id, "title": "One"}, {"id": c2.id, "title": "Two"}]

    @pytest.mark.asyncio
    async def test_users_from_document_are_distinct(self, platform_service, seed) -> None:
        platform = await seed.platform("Alpha")
        c1 = await seed.course("One", platform)
        c2 = await seed.course("Two", platform)
        ann = await seed.user("Ann", "ann@example.com", [c1, c2])
        bob = await seed.user("Bob", "bob@example.com", [c2])
        await seed.commit()
        await platform_service.sync_platform(platform.id)

        users = await platform_service.get_platform_users_from_document(str(platform.id))

        assert users == [
            {"id": ann.id, "name": "Ann", "email": "ann@example.com", "course_ids": [c1.id, c2.id]},
            {"id": bob.id, "name": "Bob", "email": "bob@example.com", "course_ids": [c2.id]},
        ]

    @pytest.mark.asyncio
    async def test_missing_document_raises(self, platform_service) -> None:
        with pytest.raises(NotFoundError):
            await platform_service.get_platform_courses_from_document("404")

    def test_parse_id_tolerates_garbage(self) -> None:
        assert parse_id("12") == 12
        assert parse_id("abc") is None
        assert parse_id(None) is None


class TestPlatformServiceSync:
    """Test suite for manual resync."""

    @pytest.mark.asyncio
    async def test_sync_platform_returns_result(self, platform_service, seed) -> None:
        platform = await seed.platform("Alpha")
        await seed.commit()

        result = await platform_service.sync_platform(platform.id)

        assert result.status == SyncStatus.SYNCED

    @pytest.mark.asyncio
    async def test_sync_missing_platform(self, platform_service) -> None:
        with pytest.raises(NotFoundError):
            await platform_service.sync_platform(404)

    @pytest.mark.asyncio
    async def test_create_without_courses_syncs_only_new_platform(self, test_async_db) -> None:
        """No other platform is touched when no course changes owner."""
        sync_service = AsyncMock()
        service = PlatformService(db=test_async_db, sync_service=sync_service)

        data = await service.create_platform(name="Alpha")

        assert data["name"] == "Alpha"
        sync_service.sync.assert_awaited_once()
        sync_service.sync_platform_ids.assert_not_awaited()

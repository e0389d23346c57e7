"""
Test suite for PlatformAggregateBuilder.

Tests document shape, completeness, ordering and the constant number of
record store round trips per build.

System role: Verification of the projection read side
"""

from types import SimpleNamespace
from unittest.mock import AsyncMock, patch

import pytest

from coursehub.boundary.db.CRUD.platform_crud import platform_crud
from coursehub.boundary.db.CRUD.user_crud import user_crud
from coursehub.boundary.db.models import CourseModel, PlatformModel, UserModel
from coursehub.core.sync.aggregate_builder import (
    PlatformAggregateBuilder,
    group_users_by_course,
)


async def load_platform(session, platform_id: int) -> PlatformModel:
    return await platform_crud.get_with_courses(session, platform_id, fresh=True)


class TestPlatformAggregateBuilderShape:
    """Test suite for the built document contents."""

    @pytest.mark.asyncio
    async def test_build_concrete_platform_document(self, test_async_db) -> None:
        """Platform 1 with course 10 and users 100, 101 maps to the expected document."""
        # Arrange
        test_async_db.add(PlatformModel(id=1, name="X"))
        await test_async_db.flush()
        intro = CourseModel(id=10, title="Intro", platform_id=1)
        test_async_db.add(intro)
        test_async_db.add_all([
            UserModel(id=100, name="Ada", email="ada@example.com", courses=[intro]),
            UserModel(id=101, name="Bob", email="bob@example.com", courses=[intro]),
        ])
        await test_async_db.commit()

        # Act
        platform = await load_platform(test_async_db, 1)
        document = await PlatformAggregateBuilder(test_async_db).build(platform)

        # Assert
        assert document.model_dump() == {
            "id": "1",
            "name": "X",
            "courses": [
                {
                    "id": "10",
                    "title": "Intro",
                    "enrolled_users": [
                        {"id": "100", "name": "Ada", "email": "ada@example.com"},
                        {"id": "101", "name": "Bob", "email": "bob@example.com"},
                    ],
                }
            ],
        }

    @pytest.mark.asyncio
    async def test_build_platform_without_courses(self, test_async_db, seed) -> None:
        """A platform with no courses builds an empty course list."""
        platform = await seed.platform("Empty")
        await seed.commit()

        document = await PlatformAggregateBuilder(test_async_db).build(
            await load_platform(test_async_db, platform.id)
        )

        assert document.id == str(platform.id)
        assert document.courses == []

    @pytest.mark.asyncio
    async def test_build_course_without_enrollments(self, test_async_db, seed) -> None:
        """A course nobody takes is embedded with an empty user list."""
        platform = await seed.platform("Quiet")
        await seed.course("Nobody Here", platform)
        await seed.commit()

        document = await PlatformAggregateBuilder(test_async_db).build(
            await load_platform(test_async_db, platform.id)
        )

        assert len(document.courses) == 1
        assert document.courses[0].enrolled_users == []

    @pytest.mark.asyncio
    async def test_build_is_complete_and_without_duplicates(self, test_async_db, seed) -> None:
        """Each user appears once in every embed of a course they take on the platform."""
        # Arrange
        platform = await seed.platform("Main")
        other = await seed.platform("Other")
        c1 = await seed.course("C1", platform)
        c2 = await seed.course("C2", platform)
        c3 = await seed.course("C3", platform)
        foreign = await seed.course("Foreign", other)
        both = await seed.user("Both", "both@example.com", [c1, c2, foreign])
        one = await seed.user("One", "one@example.com", [c3])
        await seed.user("Outsider", "out@example.com", [foreign])
        await seed.commit()

        # Act
        document = await PlatformAggregateBuilder(test_async_db).build(
            await load_platform(test_async_db, platform.id)
        )

        # Assert
        assert [c.id for c in document.courses] == [str(c1.id), str(c2.id), str(c3.id)]
        embeds = {c.id: [u.id for u in c.enrolled_users] for c in document.courses}
        assert embeds[str(c1.id)] == [str(both.id)]
        assert embeds[str(c2.id)] == [str(both.id)]
        assert embeds[str(c3.id)] == [str(one.id)]
        assert {u.id for u in document.all_users()} == {str(both.id), str(one.id)}
        assert sum(1 for u in document.all_users() if u.id == str(both.id)) == 2

    @pytest.mark.asyncio
    async def test_build_twice_yields_equal_documents(self, test_async_db, seed) -> None:
        """Building without intervening changes is deterministic."""
        platform = await seed.platform("Stable")
        course = await seed.course("Algebra", platform)
        await seed.user("Zed", "zed@example.com", [course])
        await seed.user("Amy", "amy@example.com", [course])
        await seed.commit()
        builder = PlatformAggregateBuilder(test_async_db)

        first = await builder.build(await load_platform(test_async_db, platform.id))
        second = await builder.build(await load_platform(test_async_db, platform.id))

        assert first == second
        assert [u.name for u in first.courses[0].enrolled_users] == ["Zed", "Amy"]


class TestPlatformAggregateBuilderQueries:
    """Test suite for the fan-out query bound."""

    async def _seed_platform(self, seed, size: int) -> int:
        platform = await seed.platform(f"Platform {size}")
        courses = [await seed.course(f"Course {size}-{i}", platform) for i in range(size)]
        for i in range(size):
            await seed.user(f"User {i}", f"user{size}-{i}@example.com", courses)
        await seed.commit()
        return platform.id

    @pytest.mark.asyncio
    @pytest.mark.parametrize("size", [1, 100])
    async def test_build_issues_single_user_query(self, test_async_db, seed, size: int) -> None:
        """One get_by_course_ids call whatever the number of courses and users."""
        platform_id = await self._seed_platform(seed, size)
        platform = await load_platform(test_async_db, platform_id)

        with patch.object(
            user_crud,
            "get_by_course_ids",
            AsyncMock(wraps=user_crud.get_by_course_ids),
        ) as spy:
            document = await PlatformAggregateBuilder(test_async_db).build(platform)

        spy.assert_awaited_once()
        assert len(document.courses) == size
        assert all(len(c.enrolled_users) == size for c in document.courses)

    @pytest.mark.asyncio
    async def test_build_statement_count_independent_of_size(
        self, test_async_db, seed, statement_log
    ) -> None:
        """N=1 and N=100 emit the same number of SQL statements."""
        counts = []
        for size in (1, 100):
            platform_id = await self._seed_platform(seed, size)
            platform = await load_platform(test_async_db, platform_id)
            statement_log.clear()
            await PlatformAggregateBuilder(test_async_db).build(platform)
            counts.append(len(statement_log))

        assert counts[0] == counts[1]

    @pytest.mark.asyncio
    async def test_build_skips_query_for_platform_without_courses(
        self, test_async_db, seed
    ) -> None:
        """No user query when the platform owns nothing."""
        platform = await seed.platform("Bare")
        await seed.commit()
        loaded = await load_platform(test_async_db, platform.id)

        with patch.object(user_crud, "get_by_course_ids", AsyncMock()) as spy:
            await PlatformAggregateBuilder(test_async_db).build(loaded)

        spy.assert_not_awaited()


class TestGroupUsersByCourse:
    """Test suite for the in-memory enrollment index."""

    def test_group_ignores_courses_outside_target_set(self) -> None:
        """Enrollments in other platforms' courses are dropped."""
        users = [
            SimpleNamespace(
                id=2, name="B", email="b@x.io",
                courses=[SimpleNamespace(id=10), SimpleNamespace(id=99)],
            ),
            SimpleNamespace(id=1, name="A", email="a@x.io", courses=[SimpleNamespace(id=10)]),
        ]

        grouped = group_users_by_course(users, {10, 11})

        assert [u.id for u in grouped[10]] == ["1", "2"]
        assert 99 not in grouped
        assert grouped.get(11, []) == []

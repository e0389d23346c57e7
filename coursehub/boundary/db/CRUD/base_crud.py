"""
Base CRUD operations for SQLAlchemy models.

Provides generic Create, Read, Update, Delete operations that can be
inherited and extended by model-specific CRUD classes.

Dependencies: sqlalchemy
System role: Foundation for all database CRUD operations
"""

from typing import Any, Collection, Generic, Sequence, TypeVar

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from coursehub.boundary.db.base import Base

ModelT = TypeVar("ModelT", bound=Base)


class BaseCRUD(Generic[ModelT]):
    """
    Generic base class for CRUD operations.

    Provides standard database operations that work with any SQLAlchemy model
    keyed by an integer ``id``. Subclasses specify the model class and can
    override or extend these methods for model-specific behavior.

    Type Parameters:
        ModelT: SQLAlchemy model class inheriting from Base

    Attributes:
        model: The SQLAlchemy model class to operate on
    """

    def __init__(self, model: type[ModelT]) -> None:
        """
        Initialize CRUD with target model.

        Args:
            model: SQLAlchemy model class for database operations
        """
        self.model = model

    async def create(self, session: AsyncSession, **kwargs) -> ModelT:
        """
        Create a new record in the database.

        Args:
            session: Async database session
            **kwargs: Model field values

        Returns:
            Created model instance with generated ID and timestamps
        """
        instance = self.model(**kwargs)
        session.add(instance)
        await session.flush()
        await session.refresh(instance)
        return instance

    async def get_by_id(self, session: AsyncSession, id: int) -> ModelT | None:
        """
        Retrieve a single record by primary key.

        Args:
            session: Async database session
            id: Integer primary key

        Returns:
            Model instance if found, None otherwise
        """
        stmt = select(self.model).where(self.model.id == id)
        result = await session.execute(stmt)
        return result.scalar_one_or_none()

    async def get_many_by_ids(
        self,
        session: AsyncSession,
        ids: Collection[int],
    ) -> Sequence[ModelT]:
        """
        Retrieve every record whose primary key is in ``ids`` with one query.

        Args:
            session: Async database session
            ids: Primary keys to load

        Returns:
            Sequence of found model instances ordered by id (missing ids are skipped)
        """
        if not ids:
            return []
        stmt = (
            select(self.model)
            .where(self.model.id.in_(set(ids)))
            .order_by(self.model.id)
        )
        result = await session.execute(stmt)
        return result.scalars().all()

    async def get_all(
        self,
        session: AsyncSession,
        limit: int | None = None,
        offset: int = 0,
    ) -> Sequence[ModelT]:
        """
        Retrieve all records with optional pagination.

        Args:
            session: Async database session
            limit: Maximum number of records to return (None for all)
            offset: Number of records to skip

        Returns:
            Sequence of model instances ordered by id
        """
        stmt = select(self.model).order_by(self.model.id).offset(offset)
        if limit is not None:
            stmt = stmt.limit(limit)
        result = await session.execute(stmt)
        return result.scalars().all()

    async def delete_by_id(self, session: AsyncSession, id: int) -> bool:
        """
        Delete a record by primary key.

        Args:
            session: Async database session
            id: Integer primary key

        Returns:
            True if record was deleted, False if not found
        """
        stmt = delete(self.model).where(self.model.id == id)
        result = await session.execute(stmt)
        return result.rowcount > 0

    async def exists(self, session: AsyncSession, id: int) -> bool:
        """
        Check if a record exists by primary key.

        Args:
            session: Async database session
            id: Integer primary key

        Returns:
            True if record exists, False otherwise
        """
        stmt = select(self.model.id).where(self.model.id == id)
        result = await session.execute(stmt)
        return result.scalar_one_or_none() is not None

    async def exists_by_field(
        self,
        session: AsyncSession,
        field: str,
        value: Any,
        exclude_id: int | None = None,
    ) -> bool:
        """
        Check whether another record already holds ``value`` in a unique column.

        Args:
            session: Async database session
            field: Column attribute name (name, title, email)
            value: Value to look for
            exclude_id: Record id to ignore, used when updating that record

        Returns:
            True if a different record holds the value, False otherwise
        """
        column = getattr(self.model, field)
        stmt = select(self.model.id).where(column == value)
        if exclude_id is not None:
            stmt = stmt.where(self.model.id != exclude_id)
        result = await session.execute(stmt.limit(1))
        return result.scalar_one_or_none() is not None

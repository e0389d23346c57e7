"""
Platform ORM model.

A platform is the aggregate root of the projection: it owns a set of
courses and is materialized as one PlatformDocument.

Dependencies: sqlalchemy, coursehub.boundary.db.base
System role: Platform persistence
"""

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from coursehub.boundary.db.base import Base, IntegerIDMixin, TimestampMixin


class PlatformModel(Base, IntegerIDMixin, TimestampMixin):
    """
    Platform ORM model owning a set of courses.

    Ownership is one-directional: CourseModel.platform_id points at the
    platform, and the platform reads its courses through that key.
    Deleting a platform deletes its courses (see PlatformCRUD.delete_with_courses).

    Attributes:
        id: Integer primary key
        name: Unique platform name (255 char limit)
        courses: Owned CourseModel rows, ordered by id
        created_at: Platform creation timestamp (UTC)
        updated_at: Last modification timestamp (UTC)
    """

    __tablename__ = "platforms"

    name: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        unique=True,
        doc="Platform name",
    )

    # selectin keeps the collection loadable under AsyncSession
    courses = relationship(
        "CourseModel",
        order_by="CourseModel.id",
        lazy="selectin",
    )

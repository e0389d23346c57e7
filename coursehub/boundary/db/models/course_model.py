"""
Course ORM model.

Dependencies: sqlalchemy, coursehub.boundary.db.base
System role: Course persistence
"""

from sqlalchemy import ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from coursehub.boundary.db.base import Base, IntegerIDMixin, TimestampMixin


class CourseModel(Base, IntegerIDMixin, TimestampMixin):
    """
    Course ORM model.

    A course optionally belongs to one platform. Courses without a
    platform never appear in a PlatformDocument. Enrollment lives on the
    user side (UserModel.courses over the user_courses table); a course
    has no back reference to its users.

    Attributes:
        id: Integer primary key
        title: Unique course title (255 char limit)
        platform_id: Owning platform, NULL when unassigned
    """

    __tablename__ = "courses"

    title: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        unique=True,
        doc="Course title",
    )

    platform_id: Mapped[int | None] = mapped_column(
        Integer,
        ForeignKey("platforms.id", ondelete="CASCADE"),
        nullable=True,
        index=True,
        doc="Owning platform id",
    )

"""
User ORM model and the user_courses enrollment table.

Dependencies: sqlalchemy, coursehub.boundary.db.base
System role: User and enrollment persistence
"""

from sqlalchemy import Column, ForeignKey, Integer, String, Table
from sqlalchemy.orm import Mapped, mapped_column, relationship

from coursehub.boundary.db.base import Base, IntegerIDMixin, TimestampMixin


user_courses = Table(
    "user_courses",
    Base.metadata,
    Column(
        "user_id",
        Integer,
        ForeignKey("users.id", ondelete="CASCADE"),
        primary_key=True,
    ),
    Column(
        "course_id",
        Integer,
        ForeignKey("courses.id", ondelete="CASCADE"),
        primary_key=True,
        index=True,
    ),
)


class UserModel(Base, IntegerIDMixin, TimestampMixin):
    """
    User ORM model with many-to-many course enrollment.

    Attributes:
        id: Integer primary key
        name: Display name
        email: Unique email address
        courses: Enrolled CourseModel rows, ordered by id
    """

    __tablename__ = "users"

    name: Mapped[str] = mapped_column(String(255), nullable=False)

    email: Mapped[str] = mapped_column(
        String(320),
        nullable=False,
        unique=True,
    )

    courses = relationship(
        "CourseModel",
        secondary=user_courses,
        order_by="CourseModel.id",
        lazy="selectin",
    )

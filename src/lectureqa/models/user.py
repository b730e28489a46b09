"""User profile model."""

from __future__ import annotations

from enum import StrEnum

from sqlalchemy import Enum, ForeignKey, String
from sqlalchemy.orm import Mapped, mapped_column

from lectureqa.models.base import Base


class UserRole(StrEnum):
    """Role of an application user."""

    STUDENT = "student"
    TEACHER = "teacher"


class User(Base):
    """Profile row for an authenticated user."""

    __tablename__ = "users"

    # Identifier issued by the upstream auth provider.
    id: Mapped[str] = mapped_column(String(64), primary_key=True)
    display_name: Mapped[str | None] = mapped_column(String(255))
    faculty_id: Mapped[int | None] = mapped_column(
        ForeignKey("faculties.id", ondelete="SET NULL")
    )
    role: Mapped[UserRole] = mapped_column(
        Enum(UserRole), default=UserRole.STUDENT, nullable=False
    )

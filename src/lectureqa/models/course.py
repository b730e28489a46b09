"""Course model."""

from __future__ import annotations

from typing import TYPE_CHECKING

from sqlalchemy import ForeignKey, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from lectureqa.models.base import Base

if TYPE_CHECKING:
    from lectureqa.models.faculty import Faculty
    from lectureqa.models.lecture import Lecture


class Course(Base):
    """A course taught within a faculty, optionally owned by a teacher."""

    __tablename__ = "courses"

    id: Mapped[int] = mapped_column(primary_key=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    faculty_id: Mapped[int] = mapped_column(
        ForeignKey("faculties.id", ondelete="CASCADE"), nullable=False
    )
    teacher_id: Mapped[str | None] = mapped_column(
        ForeignKey("users.id", ondelete="SET NULL")
    )

    # Relationships
    faculty: Mapped[Faculty] = relationship("Faculty", back_populates="courses")
    lectures: Mapped[list[Lecture]] = relationship(
        "Lecture", back_populates="course", cascade="all, delete-orphan"
    )

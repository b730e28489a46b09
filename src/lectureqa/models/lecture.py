"""Lecture model."""

from __future__ import annotations

import datetime
from typing import TYPE_CHECKING

from sqlalchemy import Date, ForeignKey
from sqlalchemy.orm import Mapped, mapped_column, relationship

from lectureqa.models.base import Base

if TYPE_CHECKING:
    from lectureqa.models.course import Course
    from lectureqa.models.question import Question


class Lecture(Base):
    """A single lecture session of a course, identified by its date."""

    __tablename__ = "lectures"

    id: Mapped[int] = mapped_column(primary_key=True)
    course_id: Mapped[int] = mapped_column(
        ForeignKey("courses.id", ondelete="CASCADE"), nullable=False
    )
    date: Mapped[datetime.date] = mapped_column(Date, nullable=False)
    number: Mapped[int] = mapped_column(default=1, nullable=False)

    # Relationships
    course: Mapped[Course] = relationship("Course", back_populates="lectures")
    questions: Mapped[list[Question]] = relationship(
        "Question", back_populates="lecture", cascade="all, delete-orphan"
    )

"""Faculty model."""

from __future__ import annotations

from typing import TYPE_CHECKING

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from lectureqa.models.base import Base

if TYPE_CHECKING:
    from lectureqa.models.course import Course


class Faculty(Base):
    """A university faculty grouping courses."""

    __tablename__ = "faculties"

    id: Mapped[int] = mapped_column(primary_key=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)

    courses: Mapped[list[Course]] = relationship("Course", back_populates="faculty")

"""Question model for storing asked questions and their AI answers."""

from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING

from sqlalchemy import DateTime, ForeignKey, Text, func
from sqlalchemy.orm import Mapped, mapped_column, relationship

from lectureqa.models.base import Base

if TYPE_CHECKING:
    from lectureqa.models.comment import Comment, TeachComment
    from lectureqa.models.lecture import Lecture


class Question(Base):
    """Represents a student question tied to a lecture."""

    __tablename__ = "questions"

    id: Mapped[int] = mapped_column(primary_key=True)
    user_id: Mapped[str] = mapped_column(
        ForeignKey("users.id", ondelete="CASCADE"), nullable=False
    )
    lecture_id: Mapped[int] = mapped_column(
        ForeignKey("lectures.id", ondelete="CASCADE"), nullable=False
    )
    question_text: Mapped[str] = mapped_column(Text, nullable=False)
    answer_text: Mapped[str | None] = mapped_column(Text)
    solved: Mapped[bool] = mapped_column(default=False, nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=False
    )

    # Relationships
    lecture: Mapped[Lecture] = relationship("Lecture", back_populates="questions")
    comments: Mapped[list[Comment]] = relationship(
        "Comment", back_populates="question", cascade="all, delete-orphan"
    )
    teach_comments: Mapped[list[TeachComment]] = relationship(
        "TeachComment", back_populates="question", cascade="all, delete-orphan"
    )

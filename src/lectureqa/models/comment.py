"""Comment models for question threads."""

from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING

from sqlalchemy import DateTime, ForeignKey, Text, func
from sqlalchemy.orm import Mapped, mapped_column, relationship

from lectureqa.models.base import Base

if TYPE_CHECKING:
    from lectureqa.models.question import Question


class _CommentColumns:
    """Columns shared by student and teacher comments."""

    id: Mapped[int] = mapped_column(primary_key=True)
    question_id: Mapped[int] = mapped_column(
        ForeignKey("questions.id", ondelete="CASCADE"), nullable=False
    )
    user_id: Mapped[str] = mapped_column(
        ForeignKey("users.id", ondelete="CASCADE"), nullable=False
    )
    comment_text: Mapped[str] = mapped_column(Text, nullable=False)
    read: Mapped[bool] = mapped_column(default=False, nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=False
    )


class Comment(_CommentColumns, Base):
    """A comment written by a student."""

    __tablename__ = "comments"

    question: Mapped[Question] = relationship("Question", back_populates="comments")


class TeachComment(_CommentColumns, Base):
    """A comment written by the course teacher."""

    __tablename__ = "teach_comments"

    question: Mapped[Question] = relationship(
        "Question", back_populates="teach_comments"
    )

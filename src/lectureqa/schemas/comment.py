"""Pydantic schemas for comment endpoints."""

import datetime

from pydantic import BaseModel, Field

from lectureqa.models.user import UserRole


class CommentCreateRequest(BaseModel):
    """Request model for posting a comment."""

    comment_text: str = Field(..., min_length=1, description="Comment body")


class CommentResponse(BaseModel):
    """A single entry of a question's comment thread."""

    id: int
    question_id: int
    user_id: str
    comment_text: str
    read: bool
    created_at: datetime.datetime
    author_role: UserRole


class MarkReadResponse(BaseModel):
    """Number of comments marked as read."""

    marked: int

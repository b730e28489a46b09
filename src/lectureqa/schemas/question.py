"""Pydantic schemas for question endpoints."""

import datetime

from pydantic import BaseModel, Field


class QuestionCreateRequest(BaseModel):
    """Request model for recording an answered question."""

    question_text: str = Field(..., min_length=1, description="Question text")
    answer_text: str | None = Field(None, description="Answer returned by /api/ask")
    solved: bool = Field(..., description="Whether the answer solved the question")
    course_id: int = Field(..., description="Course the question belongs to")
    lecture_date: datetime.date = Field(..., description="Date of the lecture")


class SolvedUpdateRequest(BaseModel):
    """Request model for changing the solved state."""

    solved: bool


class QuestionSummary(BaseModel):
    """Short form of a question used in lists."""

    id: int
    question_text: str
    solved: bool

    model_config = {"from_attributes": True}


class QuestionResponse(BaseModel):
    """Full question with its answer."""

    id: int
    user_id: str
    lecture_id: int
    question_text: str
    answer_text: str | None = None
    solved: bool
    created_at: datetime.datetime

    model_config = {"from_attributes": True}


class CourseQuestions(BaseModel):
    """Unsolved questions grouped under one course."""

    course_id: int
    course_name: str
    questions: list[QuestionSummary] = Field(default_factory=list)

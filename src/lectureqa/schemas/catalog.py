"""Pydantic schemas for faculty, course and lecture endpoints."""

import datetime

from pydantic import BaseModel, Field


class FacultyCreateRequest(BaseModel):
    """Request model for creating a faculty."""

    name: str = Field(..., min_length=1, max_length=255)


class FacultyResponse(BaseModel):
    """Response model for a faculty."""

    id: int
    name: str

    model_config = {"from_attributes": True}


class CourseCreateRequest(BaseModel):
    """Request model for creating a course."""

    name: str = Field(..., min_length=1, max_length=255)
    faculty_id: int


class CourseResponse(BaseModel):
    """Response model for a course."""

    id: int
    name: str
    faculty_id: int
    teacher_id: str | None = None

    model_config = {"from_attributes": True}


class LectureResponse(BaseModel):
    """Response model for a lecture."""

    id: int
    course_id: int
    date: datetime.date
    number: int

    model_config = {"from_attributes": True}

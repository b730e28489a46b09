"""Pydantic schemas for the LectureQA API."""

from lectureqa.schemas.ask import AskRequest, AskResponse
from lectureqa.schemas.common import ErrorResponse, HealthResponse

__all__ = [
    "AskRequest",
    "AskResponse",
    "ErrorResponse",
    "HealthResponse",
]

"""Database models package."""

from lectureqa.models.base import Base
from lectureqa.models.comment import Comment, TeachComment
from lectureqa.models.course import Course
from lectureqa.models.faculty import Faculty
from lectureqa.models.lecture import Lecture
from lectureqa.models.question import Question
from lectureqa.models.user import User, UserRole

__all__ = [
    "Base",
    "Comment",
    "Course",
    "Faculty",
    "Lecture",
    "Question",
    "TeachComment",
    "User",
    "UserRole",
]

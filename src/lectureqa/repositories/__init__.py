"""Repository layer for database operations."""

from lectureqa.repositories.comment import CommentRepository
from lectureqa.repositories.faculty import CourseRepository, FacultyRepository
from lectureqa.repositories.lecture import LectureRepository
from lectureqa.repositories.question import QuestionRepository
from lectureqa.repositories.user import UserRepository

__all__ = [
    "CommentRepository",
    "CourseRepository",
    "FacultyRepository",
    "LectureRepository",
    "QuestionRepository",
    "UserRepository",
]

"""Service layer for business logic."""

from lectureqa.services.answer import AnswerService
from lectureqa.services.comment import CommentService
from lectureqa.services.question import QuestionService
from lectureqa.services.teacher import TeacherService

__all__ = [
    "AnswerService",
    "CommentService",
    "QuestionService",
    "TeacherService",
]

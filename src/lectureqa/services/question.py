"""Question recording and ownership checks."""

import datetime

from loguru import logger
from sqlalchemy.ext.asyncio import AsyncSession

from lectureqa.exceptions import ForbiddenError, NotFoundError
from lectureqa.models.question import Question
from lectureqa.repositories.faculty import CourseRepository
from lectureqa.repositories.lecture import LectureRepository
from lectureqa.repositories.question import QuestionRepository


class QuestionService:
    """Persist answered questions and manage their solved state."""

    @staticmethod
    async def record_question(
        session: AsyncSession,
        user_id: str,
        course_id: int,
        lecture_date: datetime.date,
        question_text: str,
        answer_text: str | None,
        solved: bool,
    ) -> Question:
        """Store a question under the lecture of ``course_id`` on ``lecture_date``."""
        course = await CourseRepository.get_by_id(session, course_id)
        if course is None:
            raise NotFoundError(resource="Course", resource_id=course_id)

        lecture = await LectureRepository.get_or_create(
            session, course_id, lecture_date
        )
        question = await QuestionRepository.create(
            session=session,
            user_id=user_id,
            lecture_id=lecture.id,
            question_text=question_text,
            answer_text=answer_text,
            solved=solved,
        )

        logger.info(
            "Question recorded",
            question_id=question.id,
            lecture_id=lecture.id,
            solved=solved,
        )
        return question

    @staticmethod
    async def get_question(session: AsyncSession, question_id: int) -> Question:
        """Return a question or raise NotFoundError."""
        question = await QuestionRepository.get_by_id(session, question_id)
        if question is None:
            raise NotFoundError(resource="Question", resource_id=question_id)
        return question

    @staticmethod
    async def set_solved(
        session: AsyncSession,
        user_id: str,
        question_id: int,
        solved: bool,
    ) -> Question:
        """Change the solved flag of the caller's own question."""
        question = await QuestionService.get_question(session, question_id)
        if question.user_id != user_id:
            raise ForbiddenError("自分の質問のみ更新できます")

        await QuestionRepository.update_solved(session, question_id, solved)
        await session.refresh(question)
        return question

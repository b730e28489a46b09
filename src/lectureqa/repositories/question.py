"""Repository for question database operations."""

import datetime

from sqlalchemy import select, update
from sqlalchemy.ext.asyncio import AsyncSession

from lectureqa.models.course import Course
from lectureqa.models.lecture import Lecture
from lectureqa.models.question import Question


class QuestionRepository:
    """Handle question persistence operations."""

    @staticmethod
    async def create(
        session: AsyncSession,
        user_id: str,
        lecture_id: int,
        question_text: str,
        answer_text: str | None,
        solved: bool,
    ) -> Question:
        """Create a new question record."""
        question = Question(
            user_id=user_id,
            lecture_id=lecture_id,
            question_text=question_text,
            answer_text=answer_text,
            solved=solved,
        )
        session.add(question)
        await session.flush()
        await session.refresh(question)
        return question

    @staticmethod
    async def get_by_id(session: AsyncSession, question_id: int) -> Question | None:
        """Retrieve a question by its ID."""
        result = await session.execute(
            select(Question).where(Question.id == question_id)
        )
        return result.scalar_one_or_none()

    @staticmethod
    async def search(
        session: AsyncSession,
        faculty_id: int | None = None,
        course_id: int | None = None,
        lecture_date: datetime.date | None = None,
        unsolved_only: bool = False,
    ) -> list[Question]:
        """Search questions by faculty, course, lecture date and solved state."""
        query = (
            select(Question)
            .join(Lecture, Question.lecture_id == Lecture.id)
            .join(Course, Lecture.course_id == Course.id)
            .order_by(Question.created_at.desc(), Question.id.desc())
        )
        if faculty_id is not None:
            query = query.where(Course.faculty_id == faculty_id)
        if course_id is not None:
            query = query.where(Course.id == course_id)
        if lecture_date is not None:
            query = query.where(Lecture.date == lecture_date)
        if unsolved_only:
            query = query.where(Question.solved.is_(False))
        result = await session.execute(query)
        return list(result.scalars().all())

    @staticmethod
    async def get_unsolved_by_user_id(
        session: AsyncSession,
        user_id: str,
    ) -> list[Question]:
        """Retrieve a user's questions that are not solved yet."""
        result = await session.execute(
            select(Question)
            .where(Question.user_id == user_id, Question.solved.is_(False))
            .order_by(Question.created_at.desc(), Question.id.desc())
        )
        return list(result.scalars().all())

    @staticmethod
    async def get_unsolved_by_course_id(
        session: AsyncSession,
        course_id: int,
    ) -> list[Question]:
        """Retrieve unsolved questions asked in any lecture of a course."""
        result = await session.execute(
            select(Question)
            .join(Lecture, Question.lecture_id == Lecture.id)
            .where(Lecture.course_id == course_id, Question.solved.is_(False))
            .order_by(Question.created_at.asc(), Question.id.asc())
        )
        return list(result.scalars().all())

    @staticmethod
    async def update_solved(
        session: AsyncSession,
        question_id: int,
        solved: bool,
    ) -> None:
        """Set the solved flag of a question."""
        await session.execute(
            update(Question).where(Question.id == question_id).values(solved=solved)
        )
        await session.flush()

"""Repository for lecture database operations."""

import datetime

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from lectureqa.models.lecture import Lecture


class LectureRepository:
    """Handle lecture persistence operations."""

    @staticmethod
    async def get_by_course_and_date(
        session: AsyncSession,
        course_id: int,
        lecture_date: datetime.date,
    ) -> Lecture | None:
        """Retrieve the lecture of a course held on a given date."""
        result = await session.execute(
            select(Lecture)
            .where(Lecture.course_id == course_id, Lecture.date == lecture_date)
            .order_by(Lecture.id.asc())
            .limit(1)
        )
        return result.scalar_one_or_none()

    @staticmethod
    async def get_or_create(
        session: AsyncSession,
        course_id: int,
        lecture_date: datetime.date,
    ) -> Lecture:
        """Return the lecture for (course, date), inserting it when absent.

        The check and the insert are not atomic; two concurrent callers can
        both insert. Reads pick the lowest id so duplicates stay harmless.
        """
        lecture = await LectureRepository.get_by_course_and_date(
            session, course_id, lecture_date
        )
        if lecture is not None:
            return lecture

        lecture = Lecture(course_id=course_id, date=lecture_date, number=1)
        session.add(lecture)
        await session.flush()
        await session.refresh(lecture)
        return lecture

    @staticmethod
    async def get_by_course_id(
        session: AsyncSession,
        course_id: int,
    ) -> list[Lecture]:
        """Retrieve all lectures of a course, most recent first."""
        result = await session.execute(
            select(Lecture)
            .where(Lecture.course_id == course_id)
            .order_by(Lecture.date.desc())
        )
        return list(result.scalars().all())

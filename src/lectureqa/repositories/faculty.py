"""Repository for faculty and course database operations."""

from sqlalchemy import select, update
from sqlalchemy.ext.asyncio import AsyncSession

from lectureqa.models.course import Course
from lectureqa.models.faculty import Faculty


class FacultyRepository:
    """Handle faculty persistence operations."""

    @staticmethod
    async def create(session: AsyncSession, name: str) -> Faculty:
        """Create a new faculty."""
        faculty = Faculty(name=name)
        session.add(faculty)
        await session.flush()
        await session.refresh(faculty)
        return faculty

    @staticmethod
    async def get_by_id(session: AsyncSession, faculty_id: int) -> Faculty | None:
        """Retrieve a faculty by its ID."""
        result = await session.execute(select(Faculty).where(Faculty.id == faculty_id))
        return result.scalar_one_or_none()

    @staticmethod
    async def get_all(session: AsyncSession) -> list[Faculty]:
        """Retrieve all faculties ordered by name."""
        result = await session.execute(select(Faculty).order_by(Faculty.name.asc()))
        return list(result.scalars().all())


class CourseRepository:
    """Handle course persistence operations."""

    @staticmethod
    async def create(session: AsyncSession, name: str, faculty_id: int) -> Course:
        """Create a new course under a faculty."""
        course = Course(name=name, faculty_id=faculty_id)
        session.add(course)
        await session.flush()
        await session.refresh(course)
        return course

    @staticmethod
    async def get_by_id(session: AsyncSession, course_id: int) -> Course | None:
        """Retrieve a course by its ID."""
        result = await session.execute(select(Course).where(Course.id == course_id))
        return result.scalar_one_or_none()

    @staticmethod
    async def get_all(
        session: AsyncSession,
        faculty_id: int | None = None,
    ) -> list[Course]:
        """Retrieve courses, optionally restricted to one faculty."""
        query = select(Course).order_by(Course.name.asc())
        if faculty_id is not None:
            query = query.where(Course.faculty_id == faculty_id)
        result = await session.execute(query)
        return list(result.scalars().all())

    @staticmethod
    async def get_by_teacher_id(
        session: AsyncSession,
        teacher_id: str,
    ) -> list[Course]:
        """Retrieve the courses owned by a teacher."""
        result = await session.execute(
            select(Course)
            .where(Course.teacher_id == teacher_id)
            .order_by(Course.name.asc())
        )
        return list(result.scalars().all())

    @staticmethod
    async def set_teacher(
        session: AsyncSession,
        course_id: int,
        teacher_id: str,
    ) -> None:
        """Assign a teacher to a course."""
        await session.execute(
            update(Course).where(Course.id == course_id).values(teacher_id=teacher_id)
        )
        await session.flush()

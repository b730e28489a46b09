"""Teacher triage of unresolved questions."""

from loguru import logger
from sqlalchemy.ext.asyncio import AsyncSession

from lectureqa.exceptions import NotFoundError
from lectureqa.models.course import Course
from lectureqa.repositories.faculty import CourseRepository
from lectureqa.repositories.question import QuestionRepository
from lectureqa.schemas.question import CourseQuestions, QuestionSummary


class TeacherService:
    """Course ownership and unresolved-question views for teachers."""

    @staticmethod
    async def unresolved_by_course(
        session: AsyncSession,
        teacher_id: str,
    ) -> list[CourseQuestions]:
        """Group the unsolved questions of every course the teacher owns."""
        courses = await CourseRepository.get_by_teacher_id(session, teacher_id)
        grouped = []
        for course in courses:
            questions = await QuestionRepository.get_unsolved_by_course_id(
                session, course.id
            )
            grouped.append(
                CourseQuestions(
                    course_id=course.id,
                    course_name=course.name,
                    questions=[QuestionSummary.model_validate(q) for q in questions],
                )
            )
        return grouped

    @staticmethod
    async def claim_course(
        session: AsyncSession,
        teacher_id: str,
        course_id: int,
    ) -> Course:
        """Register the teacher as the owner of a course."""
        course = await CourseRepository.get_by_id(session, course_id)
        if course is None:
            raise NotFoundError(resource="Course", resource_id=course_id)

        await CourseRepository.set_teacher(session, course_id, teacher_id)
        await session.refresh(course)

        logger.info("Course claimed", course_id=course_id, teacher_id=teacher_id)
        return course

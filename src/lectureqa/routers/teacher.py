"""Teacher triage endpoints."""

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from lectureqa.db import get_db
from lectureqa.deps import require_teacher
from lectureqa.models.user import User
from lectureqa.repositories.faculty import CourseRepository
from lectureqa.schemas.catalog import CourseResponse
from lectureqa.schemas.question import CourseQuestions
from lectureqa.services.teacher import TeacherService

router = APIRouter(prefix="/teacher", tags=["Teacher"])


@router.get("/courses", response_model=list[CourseResponse], summary="List my courses")
async def list_own_courses(
    teacher: User = Depends(require_teacher),
    session: AsyncSession = Depends(get_db),
) -> list[CourseResponse]:
    """Return the courses the teacher owns."""
    courses = await CourseRepository.get_by_teacher_id(session, teacher.id)
    return [CourseResponse.model_validate(c) for c in courses]


@router.get(
    "/unresolved-questions",
    response_model=list[CourseQuestions],
    summary="Unsolved questions per owned course",
)
async def list_unresolved_questions(
    teacher: User = Depends(require_teacher),
    session: AsyncSession = Depends(get_db),
) -> list[CourseQuestions]:
    """Return unsolved questions grouped by the teacher's courses."""
    return await TeacherService.unresolved_by_course(session, teacher.id)


@router.post(
    "/courses/{course_id}/claim",
    response_model=CourseResponse,
    summary="Register as a course's teacher",
)
async def claim_course(
    course_id: int,
    teacher: User = Depends(require_teacher),
    session: AsyncSession = Depends(get_db),
) -> CourseResponse:
    """Make the caller the teacher of a course."""
    course = await TeacherService.claim_course(session, teacher.id, course_id)
    return CourseResponse.model_validate(course)

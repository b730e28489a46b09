"""Faculty, course and lecture endpoints."""

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from lectureqa.db import get_db
from lectureqa.exceptions import NotFoundError
from lectureqa.repositories.faculty import CourseRepository, FacultyRepository
from lectureqa.repositories.lecture import LectureRepository
from lectureqa.schemas.catalog import (
    CourseCreateRequest,
    CourseResponse,
    FacultyCreateRequest,
    FacultyResponse,
    LectureResponse,
)

router = APIRouter(tags=["Catalog"])


@router.get(
    "/faculties",
    response_model=list[FacultyResponse],
    summary="List faculties",
)
async def list_faculties(
    session: AsyncSession = Depends(get_db),
) -> list[FacultyResponse]:
    """List all faculties."""
    faculties = await FacultyRepository.get_all(session)
    return [FacultyResponse.model_validate(f) for f in faculties]


@router.post(
    "/faculties",
    response_model=FacultyResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create a faculty",
)
async def create_faculty(
    request: FacultyCreateRequest,
    session: AsyncSession = Depends(get_db),
) -> FacultyResponse:
    """Create a faculty."""
    faculty = await FacultyRepository.create(session, request.name)
    return FacultyResponse.model_validate(faculty)


@router.get("/courses", response_model=list[CourseResponse], summary="List courses")
async def list_courses(
    faculty_id: int | None = None,
    session: AsyncSession = Depends(get_db),
) -> list[CourseResponse]:
    """List courses, optionally filtered by faculty."""
    courses = await CourseRepository.get_all(session, faculty_id=faculty_id)
    return [CourseResponse.model_validate(c) for c in courses]


@router.post(
    "/courses",
    response_model=CourseResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create a course",
)
async def create_course(
    request: CourseCreateRequest,
    session: AsyncSession = Depends(get_db),
) -> CourseResponse:
    """Create a course under an existing faculty."""
    faculty = await FacultyRepository.get_by_id(session, request.faculty_id)
    if faculty is None:
        raise NotFoundError(resource="Faculty", resource_id=request.faculty_id)

    course = await CourseRepository.create(session, request.name, request.faculty_id)
    return CourseResponse.model_validate(course)


@router.get("/lectures", response_model=list[LectureResponse], summary="List lectures")
async def list_lectures(
    course_id: int,
    session: AsyncSession = Depends(get_db),
) -> list[LectureResponse]:
    """List the lectures of a course."""
    lectures = await LectureRepository.get_by_course_id(session, course_id)
    return [LectureResponse.model_validate(lecture) for lecture in lectures]

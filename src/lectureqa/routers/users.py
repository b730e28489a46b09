"""User profile and personal page endpoints."""

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from lectureqa.db import get_db
from lectureqa.deps import get_current_user, get_current_user_id
from lectureqa.exceptions import NotFoundError
from lectureqa.models.user import User
from lectureqa.repositories.faculty import FacultyRepository
from lectureqa.repositories.question import QuestionRepository
from lectureqa.repositories.user import UserRepository
from lectureqa.schemas.question import QuestionSummary
from lectureqa.schemas.user import ProfileUpdateRequest, UserResponse
from lectureqa.services.comment import CommentService

router = APIRouter(prefix="/users/me", tags=["Users"])


@router.get("", response_model=UserResponse, summary="Get my profile")
async def get_profile(user: User = Depends(get_current_user)) -> UserResponse:
    """Return the caller's profile."""
    return UserResponse.model_validate(user)


@router.put("", response_model=UserResponse, summary="Create or update my profile")
async def update_profile(
    request: ProfileUpdateRequest,
    user_id: str = Depends(get_current_user_id),
    session: AsyncSession = Depends(get_db),
) -> UserResponse:
    """Upsert the caller's profile."""
    if request.faculty_id is not None:
        faculty = await FacultyRepository.get_by_id(session, request.faculty_id)
        if faculty is None:
            raise NotFoundError(resource="Faculty", resource_id=request.faculty_id)

    user = await UserRepository.upsert(
        session,
        user_id=user_id,
        faculty_id=request.faculty_id,
        display_name=request.display_name,
    )
    return UserResponse.model_validate(user)


@router.get(
    "/unsolved-questions",
    response_model=list[QuestionSummary],
    summary="List my unsolved questions",
)
async def list_unsolved_questions(
    user_id: str = Depends(get_current_user_id),
    session: AsyncSession = Depends(get_db),
) -> list[QuestionSummary]:
    """Return the caller's questions that are still unsolved."""
    questions = await QuestionRepository.get_unsolved_by_user_id(session, user_id)
    return [QuestionSummary.model_validate(q) for q in questions]


@router.get(
    "/notifications",
    response_model=list[QuestionSummary],
    summary="List my questions with unread comments",
)
async def list_notifications(
    user_id: str = Depends(get_current_user_id),
    session: AsyncSession = Depends(get_db),
) -> list[QuestionSummary]:
    """Return unsolved questions of the caller that have new comments."""
    questions = await CommentService.notifications(session, user_id)
    return [QuestionSummary.model_validate(q) for q in questions]

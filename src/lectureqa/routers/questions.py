"""Question and comment endpoints."""

import datetime

from fastapi import APIRouter, Depends, status
from loguru import logger
from sqlalchemy.ext.asyncio import AsyncSession

from lectureqa.db import get_db
from lectureqa.deps import get_current_user
from lectureqa.models.user import User
from lectureqa.repositories.question import QuestionRepository
from lectureqa.schemas.comment import (
    CommentCreateRequest,
    CommentResponse,
    MarkReadResponse,
)
from lectureqa.schemas.question import (
    QuestionCreateRequest,
    QuestionResponse,
    SolvedUpdateRequest,
)
from lectureqa.services.comment import CommentService
from lectureqa.services.question import QuestionService

router = APIRouter(prefix="/questions", tags=["Questions"])


@router.post(
    "",
    response_model=QuestionResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Record an answered question",
    description=(
        "Store a question with the answer obtained from /api/ask and the "
        "asker's solved decision. The lecture is created on first use."
    ),
)
async def create_question(
    request: QuestionCreateRequest,
    user: User = Depends(get_current_user),
    session: AsyncSession = Depends(get_db),
) -> QuestionResponse:
    """Record a question for the current user."""
    question = await QuestionService.record_question(
        session=session,
        user_id=user.id,
        course_id=request.course_id,
        lecture_date=request.lecture_date,
        question_text=request.question_text,
        answer_text=request.answer_text,
        solved=request.solved,
    )
    return QuestionResponse.model_validate(question)


@router.get("", response_model=list[QuestionResponse], summary="Search questions")
async def search_questions(
    faculty_id: int | None = None,
    course_id: int | None = None,
    lecture_date: datetime.date | None = None,
    unsolved_only: bool = False,
    session: AsyncSession = Depends(get_db),
) -> list[QuestionResponse]:
    """Search questions by faculty, course, lecture date and solved state."""
    questions = await QuestionRepository.search(
        session,
        faculty_id=faculty_id,
        course_id=course_id,
        lecture_date=lecture_date,
        unsolved_only=unsolved_only,
    )
    logger.info(
        "Question search completed",
        faculty_id=faculty_id,
        course_id=course_id,
        results_count=len(questions),
    )
    return [QuestionResponse.model_validate(q) for q in questions]


@router.get(
    "/{question_id}",
    response_model=QuestionResponse,
    summary="Get a question with its answer",
)
async def get_question(
    question_id: int,
    session: AsyncSession = Depends(get_db),
) -> QuestionResponse:
    """Return one question."""
    question = await QuestionService.get_question(session, question_id)
    return QuestionResponse.model_validate(question)


@router.patch(
    "/{question_id}/solved",
    response_model=QuestionResponse,
    summary="Mark a question solved or unsolved",
)
async def update_solved(
    question_id: int,
    request: SolvedUpdateRequest,
    user: User = Depends(get_current_user),
    session: AsyncSession = Depends(get_db),
) -> QuestionResponse:
    """Change the solved state of the caller's question."""
    question = await QuestionService.set_solved(
        session, user.id, question_id, request.solved
    )
    return QuestionResponse.model_validate(question)


@router.get(
    "/{question_id}/comments",
    response_model=list[CommentResponse],
    summary="List the comment thread",
)
async def list_comments(
    question_id: int,
    session: AsyncSession = Depends(get_db),
) -> list[CommentResponse]:
    """Return student and teacher comments, oldest first."""
    return await CommentService.list_thread(session, question_id)


@router.post(
    "/{question_id}/comments",
    response_model=CommentResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Post a comment",
)
async def post_comment(
    question_id: int,
    request: CommentCreateRequest,
    user: User = Depends(get_current_user),
    session: AsyncSession = Depends(get_db),
) -> CommentResponse:
    """Post a comment as the current user."""
    return await CommentService.post_comment(
        session, user, question_id, request.comment_text
    )


@router.post(
    "/{question_id}/comments/read",
    response_model=MarkReadResponse,
    summary="Mark the thread as read",
)
async def mark_comments_read(
    question_id: int,
    user: User = Depends(get_current_user),
    session: AsyncSession = Depends(get_db),
) -> MarkReadResponse:
    """Mark comments by others on the caller's question as read."""
    marked = await CommentService.mark_read(session, user.id, question_id)
    return MarkReadResponse(marked=marked)

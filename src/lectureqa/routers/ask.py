"""AI answer endpoint."""

from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import PlainTextResponse

from lectureqa.deps import get_answer_service
from lectureqa.schemas.ask import AskRequest, AskResponse
from lectureqa.schemas.common import ErrorResponse
from lectureqa.services.answer import AnswerService

router = APIRouter(tags=["Answers"])


@router.post(
    "/ask",
    response_model=AskResponse,
    summary="Answer a question with an LLM",
    description=(
        "Render a course-professor prompt around the question and ask the "
        "selected provider (gemini or deepseek)."
    ),
    responses={
        status.HTTP_400_BAD_REQUEST: {"model": ErrorResponse},
        status.HTTP_500_INTERNAL_SERVER_ERROR: {"model": ErrorResponse},
    },
)
async def ask(
    request: AskRequest,
    service: AnswerService = Depends(get_answer_service),
) -> AskResponse:
    """Return the AI-generated answer for a question."""
    answer = await service.answer(
        question=request.question,
        model=request.model,
        course_name=request.course_name,
    )
    return AskResponse(answer=answer)


@router.api_route(
    "/ask",
    methods=["GET", "HEAD", "PUT", "PATCH", "DELETE", "OPTIONS"],
    include_in_schema=False,
)
async def ask_method_not_allowed(request: Request) -> PlainTextResponse:
    """Reject every verb except POST."""
    return PlainTextResponse(
        f"Method {request.method} Not Allowed",
        status_code=status.HTTP_405_METHOD_NOT_ALLOWED,
        headers={"Allow": "POST"},
    )

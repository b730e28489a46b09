"""Request-scoped dependencies shared by the routers."""

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from lectureqa.config import Settings, get_settings
from lectureqa.db import get_db
from lectureqa.exceptions import ForbiddenError, UnauthorizedError
from lectureqa.models.user import User, UserRole
from lectureqa.repositories.user import UserRepository
from lectureqa.services.answer import AnswerService
from lectureqa.services.providers import ProviderFactory, get_provider_factory


def get_current_user_id(
    request: Request,
    settings: Settings = Depends(get_settings),
) -> str:
    """Return the user id set by the upstream auth proxy."""
    user_id = request.headers.get(settings.user_id_header, "").strip()
    if not user_id:
        raise UnauthorizedError()
    return user_id


async def get_current_user(
    user_id: str = Depends(get_current_user_id),
    session: AsyncSession = Depends(get_db),
) -> User:
    """Return the caller's profile; it must have been created first."""
    user = await UserRepository.get_by_id(session, user_id)
    if user is None:
        raise UnauthorizedError("プロフィールが登録されていません")
    return user


async def require_teacher(user: User = Depends(get_current_user)) -> User:
    """Allow only users with the teacher role."""
    if user.role != UserRole.TEACHER:
        raise ForbiddenError("教員のみ利用できます")
    return user


def get_answer_service(
    factory: ProviderFactory = Depends(get_provider_factory),
    settings: Settings = Depends(get_settings),
) -> AnswerService:
    """Provide an AnswerService bound to the configured deadline."""
    return AnswerService(factory, timeout_seconds=settings.answer_timeout_seconds)

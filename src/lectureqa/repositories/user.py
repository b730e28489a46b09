"""Repository for user profile database operations."""

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from lectureqa.models.user import User, UserRole


class UserRepository:
    """Handle user profile persistence operations."""

    @staticmethod
    async def get_by_id(session: AsyncSession, user_id: str) -> User | None:
        """Retrieve a user profile by its ID."""
        result = await session.execute(select(User).where(User.id == user_id))
        return result.scalar_one_or_none()

    @staticmethod
    async def upsert(
        session: AsyncSession,
        user_id: str,
        faculty_id: int | None,
        display_name: str | None = None,
    ) -> User:
        """Insert or update a user's profile, keeping an existing role."""
        user = await UserRepository.get_by_id(session, user_id)
        if user is None:
            user = User(id=user_id, role=UserRole.STUDENT)
            session.add(user)
        user.faculty_id = faculty_id
        if display_name is not None:
            user.display_name = display_name
        await session.flush()
        await session.refresh(user)
        return user

"""Repository for comment database operations."""

from sqlalchemy import select, update
from sqlalchemy.ext.asyncio import AsyncSession

from lectureqa.models.comment import Comment, TeachComment

CommentRow = Comment | TeachComment


def _thread_order(row: CommentRow) -> tuple:
    return (row.created_at, isinstance(row, TeachComment), row.id)


class CommentRepository:
    """Handle comment persistence for both student and teacher tables."""

    @staticmethod
    async def create(
        session: AsyncSession,
        question_id: int,
        user_id: str,
        comment_text: str,
        by_teacher: bool = False,
    ) -> CommentRow:
        """Create a comment in the table matching the author's role."""
        model = TeachComment if by_teacher else Comment
        comment = model(
            question_id=question_id,
            user_id=user_id,
            comment_text=comment_text,
        )
        session.add(comment)
        await session.flush()
        await session.refresh(comment)
        return comment

    @staticmethod
    async def get_thread(
        session: AsyncSession,
        question_id: int,
    ) -> list[CommentRow]:
        """Retrieve every comment on a question, oldest first.

        The two tables number their rows independently, so rows sharing a
        timestamp are ordered student comments first, then by id.
        """
        rows: list[CommentRow] = []
        for model in (Comment, TeachComment):
            result = await session.execute(
                select(model).where(model.question_id == question_id)
            )
            rows.extend(result.scalars().all())
        return sorted(rows, key=_thread_order)

    @staticmethod
    async def mark_read(
        session: AsyncSession,
        question_id: int,
        reader_id: str,
    ) -> int:
        """Mark comments by other users on a question as read."""
        marked = 0
        for model in (Comment, TeachComment):
            result = await session.execute(
                update(model)
                .where(
                    model.question_id == question_id,
                    model.user_id != reader_id,
                    model.read.is_(False),
                )
                .values(read=True)
            )
            marked += result.rowcount or 0
        await session.flush()
        return marked

    @staticmethod
    async def get_question_ids_with_unread(
        session: AsyncSession,
        question_ids: list[int],
        reader_id: str,
    ) -> set[int]:
        """Return which of the given questions have unread comments."""
        if not question_ids:
            return set()
        found: set[int] = set()
        for model in (Comment, TeachComment):
            result = await session.execute(
                select(model.question_id)
                .where(
                    model.question_id.in_(question_ids),
                    model.user_id != reader_id,
                    model.read.is_(False),
                )
                .distinct()
            )
            found.update(result.scalars().all())
        return found

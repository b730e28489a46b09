"""Comment threads on questions."""

from loguru import logger
from sqlalchemy.ext.asyncio import AsyncSession

from lectureqa.exceptions import ForbiddenError
from lectureqa.models.comment import TeachComment
from lectureqa.models.question import Question
from lectureqa.models.user import User, UserRole
from lectureqa.repositories.comment import CommentRepository, CommentRow
from lectureqa.repositories.question import QuestionRepository
from lectureqa.schemas.comment import CommentResponse
from lectureqa.services.question import QuestionService


def _to_response(row: CommentRow) -> CommentResponse:
    role = UserRole.TEACHER if isinstance(row, TeachComment) else UserRole.STUDENT
    return CommentResponse(
        id=row.id,
        question_id=row.question_id,
        user_id=row.user_id,
        comment_text=row.comment_text,
        read=row.read,
        created_at=row.created_at,
        author_role=role,
    )


class CommentService:
    """Post, list and acknowledge comments on a question."""

    @staticmethod
    async def list_thread(
        session: AsyncSession,
        question_id: int,
    ) -> list[CommentResponse]:
        """Return the merged student/teacher thread of a question."""
        await QuestionService.get_question(session, question_id)
        rows = await CommentRepository.get_thread(session, question_id)
        return [_to_response(row) for row in rows]

    @staticmethod
    async def post_comment(
        session: AsyncSession,
        author: User,
        question_id: int,
        comment_text: str,
    ) -> CommentResponse:
        """Add a comment, stored by the author's role."""
        await QuestionService.get_question(session, question_id)
        row = await CommentRepository.create(
            session=session,
            question_id=question_id,
            user_id=author.id,
            comment_text=comment_text,
            by_teacher=author.role == UserRole.TEACHER,
        )
        logger.info(
            "Comment posted",
            question_id=question_id,
            author_role=author.role.value,
        )
        return _to_response(row)

    @staticmethod
    async def mark_read(
        session: AsyncSession,
        user_id: str,
        question_id: int,
    ) -> int:
        """Mark comments on the caller's own question as read."""
        question = await QuestionService.get_question(session, question_id)
        if question.user_id != user_id:
            raise ForbiddenError("自分の質問のコメントのみ既読にできます")
        return await CommentRepository.mark_read(session, question_id, user_id)

    @staticmethod
    async def notifications(
        session: AsyncSession,
        user_id: str,
    ) -> list[Question]:
        """Return the caller's unsolved questions that have unread comments."""
        questions = await QuestionRepository.get_unsolved_by_user_id(session, user_id)
        unread = await CommentRepository.get_question_ids_with_unread(
            session, [q.id for q in questions], user_id
        )
        return [q for q in questions if q.id in unread]

"""PostgreSQL implementation of CommentEdit repository."""

from typing import List

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from board.domain.model import CommentEdit
from board.domain.repository.comment_edit import CommentEditRepository
from board.domain.value import CommentId
from board.persistence.mappers import comment_edit_to_dict, row_to_comment_edit
from board.persistence.tables import comment_edits_table


class PostgresCommentEditRepository(CommentEditRepository):
    """PostgreSQL implementation of CommentEditRepository."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def find_by_comment(self, comment_id: CommentId) -> List[CommentEdit]:
        """Find the edit history of a comment, oldest first."""
        stmt = (
            select(comment_edits_table)
            .where(comment_edits_table.c.comment_id == comment_id)
            .order_by(comment_edits_table.c.created_at, comment_edits_table.c.id)
        )
        result = await self.session.execute(stmt)
        return [row_to_comment_edit(row._asdict()) for row in result.fetchall()]

    async def add(self, edit: CommentEdit) -> CommentEdit:
        """Append an edit entry."""
        stmt = comment_edits_table.insert().values(**comment_edit_to_dict(edit))
        await self.session.execute(stmt)
        await self.session.flush()
        return edit

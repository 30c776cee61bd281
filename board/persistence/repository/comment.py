"""PostgreSQL implementation of Comment repository."""

from datetime import datetime
from typing import List, Optional

import logfire
from sqlalchemy import Select, func, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from board.domain.model import Comment
from board.domain.repository.comment import CommentFilter, CommentRepository
from board.domain.value import CommentId, SortSpec
from board.persistence.mappers import comment_to_dict, row_to_comment
from board.persistence.repository.base import apply_sort
from board.persistence.tables import comments_table


class PostgresCommentRepository(CommentRepository):
    """PostgreSQL implementation of CommentRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    def _apply_filter(self, stmt: Select, filter: CommentFilter) -> Select:
        if filter.post_id is not None:
            stmt = stmt.where(comments_table.c.post_id == filter.post_id)
        if filter.parent_id is not None:
            stmt = stmt.where(comments_table.c.parent_id == filter.parent_id)
        if filter.author_id is not None:
            stmt = stmt.where(comments_table.c.author_id == filter.author_id)
        if filter.nesting_level is not None:
            stmt = stmt.where(comments_table.c.nesting_level == filter.nesting_level)
        if not filter.include_deleted:
            stmt = stmt.where(comments_table.c.deleted_at.is_(None))
        return stmt

    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID."""
        stmt = select(comments_table).where(comments_table.c.id == comment_id)
        result = await self.session.execute(stmt)
        row = result.fetchone()

        if not row:
            return None
        return row_to_comment(row._asdict())

    async def find_all(
        self,
        filter: CommentFilter,
        sort: SortSpec,
        limit: int = 20,
        offset: int = 0,
    ) -> List[Comment]:
        """Find comments with filtering, sorting and pagination."""
        with logfire.span(
            "comment_repository.find_all",
            sort=sort.field,
            direction=sort.direction,
            limit=limit,
            offset=offset,
        ):
            stmt = self._apply_filter(select(comments_table), filter)
            stmt = apply_sort(stmt, comments_table, sort).limit(limit).offset(offset)

            result = await self.session.execute(stmt)
            return [row_to_comment(row._asdict()) for row in result.fetchall()]

    async def count(self, filter: CommentFilter) -> int:
        """Count comments matching the given filters."""
        stmt = self._apply_filter(
            select(func.count()).select_from(comments_table), filter
        )
        result = await self.session.execute(stmt)
        return result.scalar() or 0

    async def save(self, comment: Comment) -> Comment:
        """Save a comment (create or update)."""
        existing = await self.find_by_id(comment.id)
        comment_dict = comment_to_dict(comment)

        if existing:
            # post, author, parent and level never change after creation
            for immutable in ("post_id", "author_id", "parent_id", "nesting_level"):
                comment_dict.pop(immutable)
            stmt = (
                comments_table.update()
                .where(comments_table.c.id == comment.id)
                .values(**comment_dict)
            )
        else:
            stmt = comments_table.insert().values(**comment_dict)
        await self.session.execute(stmt)

        await self.session.flush()
        return comment

    async def soft_delete(
        self, comment_id: CommentId, deleted_at: datetime
    ) -> Optional[Comment]:
        """Mark a comment as deleted, unless it already is."""
        stmt = (
            update(comments_table)
            .where(comments_table.c.id == comment_id)
            .where(comments_table.c.deleted_at.is_(None))
            .values(deleted_at=deleted_at, updated_at=deleted_at)
            .returning(comments_table)
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()

        if row is None:
            return None

        await self.session.flush()
        return row_to_comment(row._asdict())

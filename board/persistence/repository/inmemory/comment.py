"""In-memory comment repository for testing."""

from datetime import datetime
from typing import Optional

from board.domain.model.comment import Comment
from board.domain.repository.comment import CommentFilter, CommentRepository
from board.domain.value import CommentId, SortSpec

from .base import sort_records


class InMemoryCommentRepository(CommentRepository):
    """In-memory implementation of CommentRepository for testing."""

    def __init__(self) -> None:
        self._comments: dict[CommentId, Comment] = {}

    def _matches(self, comment: Comment, filter: CommentFilter) -> bool:
        if filter.post_id is not None and comment.post_id != filter.post_id:
            return False
        if filter.parent_id is not None and comment.parent_id != filter.parent_id:
            return False
        if filter.author_id is not None and comment.author_id != filter.author_id:
            return False
        if (
            filter.nesting_level is not None
            and comment.nesting_level != filter.nesting_level
        ):
            return False
        if not filter.include_deleted and comment.deleted_at is not None:
            return False
        return True

    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID."""
        return self._comments.get(comment_id)

    async def find_all(
        self,
        filter: CommentFilter,
        sort: SortSpec,
        limit: int = 20,
        offset: int = 0,
    ) -> list[Comment]:
        """Find comments with filtering, sorting and pagination."""
        comments = [c for c in self._comments.values() if self._matches(c, filter)]
        return sort_records(comments, sort)[offset : offset + limit]

    async def count(self, filter: CommentFilter) -> int:
        """Count comments matching the given filters."""
        return sum(1 for c in self._comments.values() if self._matches(c, filter))

    async def save(self, comment: Comment) -> Comment:
        """Save a comment."""
        self._comments[comment.id] = comment
        return comment

    async def soft_delete(
        self, comment_id: CommentId, deleted_at: datetime
    ) -> Optional[Comment]:
        """Mark a comment as deleted, unless it already is."""
        comment = self._comments.get(comment_id)
        if comment is None or comment.deleted_at is not None:
            return None
        deleted = comment.model_copy(
            update={"deleted_at": deleted_at, "updated_at": deleted_at}
        )
        self._comments[comment_id] = deleted
        return deleted

"""Comment repository interface."""

from abc import ABC, abstractmethod
from datetime import datetime
from typing import List, Optional

from board.domain.model.comment import Comment
from board.domain.value import CommentId, PostId, SortSpec, UserId
from board.domain.value.common import ValueObject


class CommentFilter(ValueObject):
    """Equality filters for comment listings.

    Every field left as None matches all comments.
    """

    post_id: Optional[PostId] = None
    parent_id: Optional[CommentId] = None
    author_id: Optional[UserId] = None
    nesting_level: Optional[int] = None
    include_deleted: bool = False


class CommentRepository(ABC):
    """Repository for Comment entity.

    Defines the contract for comment persistence operations.
    Implementations live in the infrastructure layer.
    """

    @abstractmethod
    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID, including soft-deleted comments.

        Args:
            comment_id: The comment's unique identifier

        Returns:
            The comment if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_all(
        self,
        filter: CommentFilter,
        sort: SortSpec,
        limit: int = 20,
        offset: int = 0,
    ) -> List[Comment]:
        """Find comments with filtering, sorting and pagination.

        Ties on the sort field are broken by id so that pages are stable.

        Args:
            filter: Equality filters to apply
            sort: Sort field and direction
            limit: Maximum number of comments to return
            offset: Number of comments to skip

        Returns:
            List of comments matching the criteria
        """
        pass

    @abstractmethod
    async def count(self, filter: CommentFilter) -> int:
        """Count comments matching the given filters.

        Args:
            filter: Equality filters to apply

        Returns:
            Total number of matching comments
        """
        pass

    @abstractmethod
    async def save(self, comment: Comment) -> Comment:
        """Save a comment (create or update).

        Args:
            comment: The comment to save

        Returns:
            The saved comment
        """
        pass

    @abstractmethod
    async def soft_delete(
        self, comment_id: CommentId, deleted_at: datetime
    ) -> Optional[Comment]:
        """Mark a comment as deleted, unless it already is.

        Args:
            comment_id: The comment to delete
            deleted_at: Deletion timestamp

        Returns:
            The deleted comment, or None if it does not exist or was already
            deleted
        """
        pass

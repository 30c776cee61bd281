"""Comment edit history repository interface."""

from abc import ABC, abstractmethod
from typing import List

from board.domain.model.comment_edit import CommentEdit
from board.domain.value import CommentId


class CommentEditRepository(ABC):
    """Append-only repository for CommentEdit entries."""

    @abstractmethod
    async def find_by_comment(self, comment_id: CommentId) -> List[CommentEdit]:
        """Find the edit history of a comment, oldest first.

        Args:
            comment_id: The edited comment's ID

        Returns:
            List of edits in chronological order
        """
        pass

    @abstractmethod
    async def add(self, edit: CommentEdit) -> CommentEdit:
        """Append an edit entry.

        Args:
            edit: The edit to record

        Returns:
            The stored edit
        """
        pass

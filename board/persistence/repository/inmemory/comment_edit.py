"""In-memory comment edit repository for testing."""

from board.domain.model.comment_edit import CommentEdit
from board.domain.repository.comment_edit import CommentEditRepository
from board.domain.value import CommentId


class InMemoryCommentEditRepository(CommentEditRepository):
    """In-memory implementation of CommentEditRepository for testing."""

    def __init__(self) -> None:
        self._edits: list[CommentEdit] = []

    async def find_by_comment(self, comment_id: CommentId) -> list[CommentEdit]:
        """Find the edit history of a comment, oldest first."""
        return [e for e in self._edits if e.comment_id == comment_id]

    async def add(self, edit: CommentEdit) -> CommentEdit:
        """Append an edit entry."""
        self._edits.append(edit)
        return edit

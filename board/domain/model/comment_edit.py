"""Comment edit history entry.

One row is appended for every change to a comment body. Rows are never
updated or removed.
"""

from datetime import datetime

from pydantic import Field

from board.domain.model.common import DomainModel
from board.domain.value import ActingCapacity, CommentEditId, CommentId, UserId


class CommentEdit(DomainModel):
    """A single edit of a comment body."""

    id: CommentEditId
    comment_id: CommentId
    editor_id: UserId
    editor_capacity: ActingCapacity
    previous_body: str
    new_body: str
    created_at: datetime = Field(default_factory=datetime.now)

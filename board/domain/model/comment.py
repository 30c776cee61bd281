"""Comment entity.

Comments form a tree per post through a self-referencing parent_id. The
nesting level is computed once when the comment is created and stored
alongside it, so depth checks never walk the tree.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from board.domain.model.common import DomainModel
from board.domain.value import CommentId, CommentState, PostId, UserId


class Comment(DomainModel):
    """Comment entity.

    Represents a root comment on a post or a reply to another comment.

    Threading is managed through:
    - parent_id: Direct parent comment (None for root comments)
    - nesting_level: 0 for root comments, parent's level + 1 for replies

    Comments are never hard-deleted; deleted_at marks a soft delete.
    """

    id: CommentId
    post_id: PostId
    author_id: UserId
    body: str = Field(min_length=1, max_length=10000)
    parent_id: Optional[CommentId] = None
    nesting_level: int = Field(default=0, ge=0)
    is_edited: bool = False
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)
    deleted_at: Optional[datetime] = None

    @property
    def lifecycle_state(self) -> CommentState:
        """Current lifecycle state, derived from the deletion marker."""
        if self.deleted_at is not None:
            return CommentState.SOFT_DELETED
        return CommentState.ACTIVE

    @property
    def is_active(self) -> bool:
        return self.deleted_at is None

    @property
    def is_root(self) -> bool:
        return self.parent_id is None

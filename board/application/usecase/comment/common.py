"""Response items shared by the comment use cases."""

from datetime import datetime

from pydantic import BaseModel

from board.domain.model import Comment, CommentEdit
from board.domain.value import ActingCapacity, CommentState


class CommentItem(BaseModel):
    """Comment item in responses."""

    comment_id: str
    post_id: str
    parent_id: str | None
    author_id: str
    body: str
    nesting_level: int
    lifecycle_state: CommentState
    is_edited: bool
    created_at: datetime
    updated_at: datetime
    deleted_at: datetime | None

    @classmethod
    def from_comment(cls, comment: Comment) -> "CommentItem":
        return cls(
            comment_id=str(comment.id),
            post_id=str(comment.post_id),
            parent_id=str(comment.parent_id) if comment.parent_id else None,
            author_id=str(comment.author_id),
            body=comment.body,
            nesting_level=comment.nesting_level,
            lifecycle_state=comment.lifecycle_state,
            is_edited=comment.is_edited,
            created_at=comment.created_at,
            updated_at=comment.updated_at,
            deleted_at=comment.deleted_at,
        )


class CommentEditItem(BaseModel):
    """Edit history entry in responses."""

    edit_id: str
    comment_id: str
    editor_id: str
    editor_capacity: ActingCapacity
    previous_body: str
    new_body: str
    created_at: datetime

    @classmethod
    def from_edit(cls, edit: CommentEdit) -> "CommentEditItem":
        return cls(
            edit_id=str(edit.id),
            comment_id=str(edit.comment_id),
            editor_id=str(edit.editor_id),
            editor_capacity=edit.editor_capacity,
            previous_body=edit.previous_body,
            new_body=edit.new_body,
            created_at=edit.created_at,
        )

"""Report entity.

A member's complaint about a post or a comment. Reports start out pending
and are closed by a moderator or admin as resolved or rejected.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID

from pydantic import Field, model_validator

from board.domain.model.common import DomainModel
from board.domain.value import (
    CommentId,
    ContentType,
    PostId,
    ReportId,
    ReportStatus,
    UserId,
)


class Report(DomainModel):
    """Report entity.

    Exactly one of target_post_id / target_comment_id is set, matching
    content_type. The reporter's reason is kept as written; the resolver's
    notes go to resolution_note.
    """

    id: ReportId
    reporter_id: UserId
    content_type: ContentType
    target_post_id: Optional[PostId] = None
    target_comment_id: Optional[CommentId] = None
    reason: str = Field(min_length=1, max_length=2000)
    status: ReportStatus = ReportStatus.PENDING
    resolution_note: Optional[str] = Field(default=None, max_length=2000)
    resolved_by_id: Optional[UserId] = None
    resolved_at: Optional[datetime] = None
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)

    @model_validator(mode="after")
    def validate_target(self) -> "Report":
        """Validate that exactly the target matching content_type is set."""
        if (self.target_post_id is None) == (self.target_comment_id is None):
            raise ValueError(
                "Exactly one of target_post_id or target_comment_id must be set"
            )
        if self.content_type is ContentType.POST and self.target_post_id is None:
            raise ValueError("target_post_id is required for post reports")
        if self.content_type is ContentType.COMMENT and self.target_comment_id is None:
            raise ValueError("target_comment_id is required for comment reports")
        return self

    @property
    def target_id(self) -> UUID:
        """Identifier of the reported post or comment."""
        if self.content_type is ContentType.POST:
            return self.target_post_id
        return self.target_comment_id

    @property
    def is_pending(self) -> bool:
        return self.status is ReportStatus.PENDING

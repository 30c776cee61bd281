"""Moderation action entity.

Append-only audit record of an enforcement decision. Once written, the only
change a record can receive is retirement (retired_at), which corrects the
audit log without reversing the moderation itself.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field, model_validator

from board.domain.model.common import DomainModel
from board.domain.value import (
    CommentId,
    ContentType,
    ModerationActionId,
    ModerationActionType,
    PostId,
    ReportId,
    UserId,
)


class ModerationAction(DomainModel):
    """Moderation action audit record.

    Invariants:
    - exactly one of actor_moderator_id / actor_admin_id is set
    - at most one of target_post_id / target_comment_id is set
    """

    id: ModerationActionId
    actor_moderator_id: Optional[UserId] = None
    actor_admin_id: Optional[UserId] = None
    target_post_id: Optional[PostId] = None
    target_comment_id: Optional[CommentId] = None
    report_id: Optional[ReportId] = None
    action_type: ModerationActionType
    action_details: Optional[str] = Field(default=None, max_length=2000)
    created_at: datetime = Field(default_factory=datetime.now)
    retired_at: Optional[datetime] = None

    @model_validator(mode="after")
    def validate_actor_and_target(self) -> "ModerationAction":
        """Validate actor exclusivity and target cardinality."""
        if (self.actor_moderator_id is None) == (self.actor_admin_id is None):
            raise ValueError(
                "Exactly one of actor_moderator_id or actor_admin_id must be set"
            )
        if self.target_post_id is not None and self.target_comment_id is not None:
            raise ValueError(
                "At most one of target_post_id or target_comment_id may be set"
            )
        return self

    @property
    def actor_id(self) -> UserId:
        return self.actor_moderator_id or self.actor_admin_id

    @property
    def target_type(self) -> Optional[ContentType]:
        if self.target_post_id is not None:
            return ContentType.POST
        if self.target_comment_id is not None:
            return ContentType.COMMENT
        return None

    @property
    def is_retired(self) -> bool:
        return self.retired_at is not None

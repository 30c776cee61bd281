"""Post entity.

Posts are owned by the post subsystem. This service only reads them to check
that comments and reports point at live content, and soft-deletes them when
a moderator removes one.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from board.domain.model.common import DomainModel
from board.domain.value import PostId, UserId


class Post(DomainModel):
    """Post entity (read model)."""

    id: PostId
    author_id: UserId
    title: str = Field(min_length=1, max_length=300)
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)
    deleted_at: Optional[datetime] = None

    @property
    def is_active(self) -> bool:
        return self.deleted_at is None

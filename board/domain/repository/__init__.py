"""Repository interfaces for the discussion board domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the persistence layer.
"""

from board.domain.repository.comment import CommentFilter, CommentRepository
from board.domain.repository.comment_edit import CommentEditRepository
from board.domain.repository.moderation_action import (
    ModerationActionFilter,
    ModerationActionRepository,
)
from board.domain.repository.post import PostRepository
from board.domain.repository.report import ReportFilter, ReportRepository

__all__ = [
    "PostRepository",
    "CommentRepository",
    "CommentFilter",
    "CommentEditRepository",
    "ReportRepository",
    "ReportFilter",
    "ModerationActionRepository",
    "ModerationActionFilter",
]

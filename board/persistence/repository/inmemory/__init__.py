"""In-memory repository implementations for testing."""

from .comment import InMemoryCommentRepository
from .comment_edit import InMemoryCommentEditRepository
from .moderation_action import InMemoryModerationActionRepository
from .post import InMemoryPostRepository
from .report import InMemoryReportRepository

__all__ = [
    "InMemoryCommentRepository",
    "InMemoryCommentEditRepository",
    "InMemoryModerationActionRepository",
    "InMemoryPostRepository",
    "InMemoryReportRepository",
]

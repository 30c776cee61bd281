"""PostgreSQL repository implementations."""

from board.persistence.repository.comment import PostgresCommentRepository
from board.persistence.repository.comment_edit import PostgresCommentEditRepository
from board.persistence.repository.moderation_action import (
    PostgresModerationActionRepository,
)
from board.persistence.repository.post import PostgresPostRepository
from board.persistence.repository.report import PostgresReportRepository

__all__ = [
    "PostgresPostRepository",
    "PostgresCommentRepository",
    "PostgresCommentEditRepository",
    "PostgresReportRepository",
    "PostgresModerationActionRepository",
]

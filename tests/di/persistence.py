"""Mock persistence providers for testing."""

from dishka import Scope, provide

from board.domain.repository import (
    CommentEditRepository,
    CommentRepository,
    ModerationActionRepository,
    PostRepository,
    ReportRepository,
)
from board.persistence.repository.inmemory import (
    InMemoryCommentEditRepository,
    InMemoryCommentRepository,
    InMemoryModerationActionRepository,
    InMemoryPostRepository,
    InMemoryReportRepository,
)
from board.util.di.infrastructure.persistence import PersistenceProvider


class MockPersistenceProvider(PersistenceProvider):
    """Mock persistence provider using in-memory repositories.

    Uses APP scope so state survives across requests served by one container.
    Each test builds its own container, which keeps tests isolated.
    """

    __is_mock__ = True

    @provide(scope=Scope.APP)
    def get_post_repository(self) -> PostRepository:
        """Provide in-memory post repository."""
        return InMemoryPostRepository()

    @provide(scope=Scope.APP)
    def get_comment_repository(self) -> CommentRepository:
        """Provide in-memory comment repository."""
        return InMemoryCommentRepository()

    @provide(scope=Scope.APP)
    def get_comment_edit_repository(self) -> CommentEditRepository:
        """Provide in-memory comment edit repository."""
        return InMemoryCommentEditRepository()

    @provide(scope=Scope.APP)
    def get_report_repository(self) -> ReportRepository:
        """Provide in-memory report repository."""
        return InMemoryReportRepository()

    @provide(scope=Scope.APP)
    def get_moderation_action_repository(self) -> ModerationActionRepository:
        """Provide in-memory moderation action repository."""
        return InMemoryModerationActionRepository()

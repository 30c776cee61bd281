"""Domain layer DI providers."""

from dishka import Scope, provide

from board.config import AuthSettings, ThreadSettings
from board.domain.repository import (
    CommentEditRepository,
    CommentRepository,
    ModerationActionRepository,
    PostRepository,
    ReportRepository,
)
from board.domain.service import (
    AccessPolicy,
    CommentService,
    JWTService,
    ModerationService,
    PostService,
)
from board.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped to align with repository/session lifecycle.
    Each HTTP request gets fresh service instances with their own transaction.
    """

    scope = Scope.REQUEST

    @provide
    def get_jwt_service(self, auth_settings: AuthSettings) -> JWTService:
        """Provide JWT token domain service."""
        return JWTService(auth_settings=auth_settings)

    @provide
    def get_access_policy(self) -> AccessPolicy:
        """Provide access policy."""
        return AccessPolicy()

    @provide
    def get_comment_service(
        self,
        comment_repository: CommentRepository,
        comment_edit_repository: CommentEditRepository,
        thread_settings: ThreadSettings,
    ) -> CommentService:
        """Provide comment domain service."""
        return CommentService(
            comment_repository=comment_repository,
            comment_edit_repository=comment_edit_repository,
            thread_settings=thread_settings,
        )

    @provide
    def get_post_service(self, post_repository: PostRepository) -> PostService:
        """Provide post domain service."""
        return PostService(post_repository=post_repository)

    @provide
    def get_moderation_service(
        self,
        report_repository: ReportRepository,
        moderation_action_repository: ModerationActionRepository,
    ) -> ModerationService:
        """Provide moderation domain service."""
        return ModerationService(
            report_repository=report_repository,
            moderation_action_repository=moderation_action_repository,
        )

"""Application layer DI providers."""

from dishka import Scope, provide

from board.application.usecase.comment import (
    CreateCommentUseCase,
    CreateReplyUseCase,
    DeleteCommentUseCase,
    EditCommentUseCase,
    GetCommentUseCase,
    ListCommentEditsUseCase,
    ListCommentsUseCase,
)
from board.application.usecase.moderation import (
    ApplyModerationActionUseCase,
    GetModerationActionUseCase,
    ListModerationActionsUseCase,
    RetireModerationActionUseCase,
)
from board.application.usecase.report import (
    CreateReportUseCase,
    GetReportUseCase,
    ListReportsUseCase,
    ResolveReportUseCase,
)
from board.domain.service import (
    AccessPolicy,
    CommentService,
    ModerationService,
    PostService,
)
from board.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    # Comment use cases
    @provide(scope=Scope.REQUEST)
    def get_create_comment_use_case(
        self,
        comment_service: CommentService,
        post_service: PostService,
        access_policy: AccessPolicy,
    ) -> CreateCommentUseCase:
        """Provide create comment use case."""
        return CreateCommentUseCase(
            comment_service=comment_service,
            post_service=post_service,
            access_policy=access_policy,
        )

    @provide(scope=Scope.REQUEST)
    def get_create_reply_use_case(
        self,
        comment_service: CommentService,
        post_service: PostService,
        access_policy: AccessPolicy,
    ) -> CreateReplyUseCase:
        """Provide create reply use case."""
        return CreateReplyUseCase(
            comment_service=comment_service,
            post_service=post_service,
            access_policy=access_policy,
        )

    @provide(scope=Scope.REQUEST)
    def get_get_comment_use_case(
        self, comment_service: CommentService, access_policy: AccessPolicy
    ) -> GetCommentUseCase:
        """Provide get comment use case."""
        return GetCommentUseCase(
            comment_service=comment_service, access_policy=access_policy
        )

    @provide(scope=Scope.REQUEST)
    def get_edit_comment_use_case(
        self,
        comment_service: CommentService,
        moderation_service: ModerationService,
        access_policy: AccessPolicy,
    ) -> EditCommentUseCase:
        """Provide edit comment use case."""
        return EditCommentUseCase(
            comment_service=comment_service,
            moderation_service=moderation_service,
            access_policy=access_policy,
        )

    @provide(scope=Scope.REQUEST)
    def get_delete_comment_use_case(
        self,
        comment_service: CommentService,
        moderation_service: ModerationService,
        access_policy: AccessPolicy,
    ) -> DeleteCommentUseCase:
        """Provide delete comment use case."""
        return DeleteCommentUseCase(
            comment_service=comment_service,
            moderation_service=moderation_service,
            access_policy=access_policy,
        )

    @provide(scope=Scope.REQUEST)
    def get_list_comments_use_case(
        self, comment_service: CommentService, access_policy: AccessPolicy
    ) -> ListCommentsUseCase:
        """Provide list comments use case."""
        return ListCommentsUseCase(
            comment_service=comment_service, access_policy=access_policy
        )

    @provide(scope=Scope.REQUEST)
    def get_list_comment_edits_use_case(
        self, comment_service: CommentService, access_policy: AccessPolicy
    ) -> ListCommentEditsUseCase:
        """Provide list comment edits use case."""
        return ListCommentEditsUseCase(
            comment_service=comment_service, access_policy=access_policy
        )

    # Report use cases
    @provide(scope=Scope.REQUEST)
    def get_create_report_use_case(
        self,
        comment_service: CommentService,
        post_service: PostService,
        moderation_service: ModerationService,
        access_policy: AccessPolicy,
    ) -> CreateReportUseCase:
        """Provide create report use case."""
        return CreateReportUseCase(
            comment_service=comment_service,
            post_service=post_service,
            moderation_service=moderation_service,
            access_policy=access_policy,
        )

    @provide(scope=Scope.REQUEST)
    def get_resolve_report_use_case(
        self,
        comment_service: CommentService,
        post_service: PostService,
        moderation_service: ModerationService,
        access_policy: AccessPolicy,
    ) -> ResolveReportUseCase:
        """Provide resolve report use case."""
        return ResolveReportUseCase(
            comment_service=comment_service,
            post_service=post_service,
            moderation_service=moderation_service,
            access_policy=access_policy,
        )

    @provide(scope=Scope.REQUEST)
    def get_get_report_use_case(
        self, moderation_service: ModerationService, access_policy: AccessPolicy
    ) -> GetReportUseCase:
        """Provide get report use case."""
        return GetReportUseCase(
            moderation_service=moderation_service, access_policy=access_policy
        )

    @provide(scope=Scope.REQUEST)
    def get_list_reports_use_case(
        self, moderation_service: ModerationService, access_policy: AccessPolicy
    ) -> ListReportsUseCase:
        """Provide list reports use case."""
        return ListReportsUseCase(
            moderation_service=moderation_service, access_policy=access_policy
        )

    # Moderation action use cases
    @provide(scope=Scope.REQUEST)
    def get_apply_moderation_action_use_case(
        self,
        comment_service: CommentService,
        post_service: PostService,
        moderation_service: ModerationService,
        access_policy: AccessPolicy,
    ) -> ApplyModerationActionUseCase:
        """Provide apply moderation action use case."""
        return ApplyModerationActionUseCase(
            comment_service=comment_service,
            post_service=post_service,
            moderation_service=moderation_service,
            access_policy=access_policy,
        )

    @provide(scope=Scope.REQUEST)
    def get_retire_moderation_action_use_case(
        self, moderation_service: ModerationService, access_policy: AccessPolicy
    ) -> RetireModerationActionUseCase:
        """Provide retire moderation action use case."""
        return RetireModerationActionUseCase(
            moderation_service=moderation_service, access_policy=access_policy
        )

    @provide(scope=Scope.REQUEST)
    def get_get_moderation_action_use_case(
        self, moderation_service: ModerationService, access_policy: AccessPolicy
    ) -> GetModerationActionUseCase:
        """Provide get moderation action use case."""
        return GetModerationActionUseCase(
            moderation_service=moderation_service, access_policy=access_policy
        )

    @provide(scope=Scope.REQUEST)
    def get_list_moderation_actions_use_case(
        self, moderation_service: ModerationService, access_policy: AccessPolicy
    ) -> ListModerationActionsUseCase:
        """Provide list moderation actions use case."""
        return ListModerationActionsUseCase(
            moderation_service=moderation_service, access_policy=access_policy
        )

"""Apply moderation action use case."""

from uuid import UUID

from pydantic import BaseModel

from board.domain.service import (
    AccessPolicy,
    CommentService,
    ModerationService,
    Operation,
    PostService,
)
from board.domain.value import (
    CommentId,
    ModerationActionType,
    PostId,
    Principal,
    ReportId,
)

from .common import ActionEnforcer, ModerationActionItem


class ApplyModerationActionRequest(BaseModel):
    """Apply moderation action request."""

    action_type: ModerationActionType
    target_post_id: str | None = None
    target_comment_id: str | None = None
    report_id: str | None = None
    details: str | None = None
    principal: Principal


class ApplyModerationActionUseCase:
    """Use case for a moderator or admin taking a moderation action.

    A ``delete`` action soft-deletes its target in the same transaction as
    the audit record.
    """

    def __init__(
        self,
        comment_service: CommentService,
        post_service: PostService,
        moderation_service: ModerationService,
        access_policy: AccessPolicy,
    ) -> None:
        """Initialize apply moderation action use case.

        Args:
            comment_service: Comment domain service
            post_service: Post domain service
            moderation_service: Moderation domain service
            access_policy: Access policy
        """
        self.enforcer = ActionEnforcer(comment_service, post_service, moderation_service)
        self.access_policy = access_policy

    async def execute(
        self, request: ApplyModerationActionRequest
    ) -> ModerationActionItem:
        """Execute apply moderation action flow.

        Raises:
            NotAuthorizedError: If the caller is not staff
            ValidationError: If the targets don't fit the action type
            NotFoundError: If the target or report is missing or deleted
        """
        self.access_policy.authorize(
            request.principal, Operation.CREATE_MODERATION_ACTION
        )

        action = await self.enforcer.prepare(
            request.principal,
            request.action_type,
            target_post_id=(
                PostId(UUID(request.target_post_id))
                if request.target_post_id
                else None
            ),
            target_comment_id=(
                CommentId(UUID(request.target_comment_id))
                if request.target_comment_id
                else None
            ),
            report_id=ReportId(UUID(request.report_id)) if request.report_id else None,
            details=request.details,
        )
        saved = await self.enforcer.apply(action)
        return ModerationActionItem.from_action(saved)

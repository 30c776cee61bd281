"""Resolve report use case."""

from uuid import UUID

from pydantic import BaseModel

from board.application.usecase.moderation.common import (
    ActionEnforcer,
    ModerationActionItem,
)
from board.domain.error import NotFoundError, ValidationError
from board.domain.service import (
    AccessPolicy,
    CommentService,
    ModerationService,
    Operation,
    PostService,
)
from board.domain.value import ModerationActionType, Principal, ReportId, ReportStatus

from .common import ReportItem


class ResolveReportRequest(BaseModel):
    """Resolve report request.

    An optional action_type applies a moderation action against the report's
    target, linked to the report.
    """

    report_id: str  # UUID string
    status: ReportStatus
    note: str | None = None
    action_type: ModerationActionType | None = None
    action_details: str | None = None
    principal: Principal


class ResolveReportResponse(ReportItem):
    """Closed report, plus the action taken on it if any."""

    moderation_action: ModerationActionItem | None = None


class ResolveReportUseCase:
    """Use case for a moderator or admin closing a pending report."""

    def __init__(
        self,
        comment_service: CommentService,
        post_service: PostService,
        moderation_service: ModerationService,
        access_policy: AccessPolicy,
    ) -> None:
        """Initialize resolve report use case.

        Args:
            comment_service: Comment domain service
            post_service: Post domain service
            moderation_service: Moderation domain service
            access_policy: Access policy
        """
        self.moderation_service = moderation_service
        self.enforcer = ActionEnforcer(comment_service, post_service, moderation_service)
        self.access_policy = access_policy

    async def execute(self, request: ResolveReportRequest) -> ResolveReportResponse:
        """Execute resolve report flow.

        Steps:
        1. Authorize (staff only), then load the report
        2. Check the transition and, if an action was requested, prepare it
        3. Close the report, then apply and record the action

        Raises:
            NotAuthorizedError: If the caller is not staff
            NotFoundError: If the report (or the action's target) is missing
            ValidationError: If status is pending, or an action accompanies
                a rejection
            InvalidStateTransitionError: If the report is already closed
        """
        self.access_policy.authorize(request.principal, Operation.RESOLVE_REPORT)

        report = await self.moderation_service.get_report(
            ReportId(UUID(request.report_id))
        )
        if report is None:
            raise NotFoundError("Report", request.report_id)

        self.moderation_service.check_resolution(report, request.status)

        action = None
        if request.action_type is not None:
            if request.status is not ReportStatus.RESOLVED:
                raise ValidationError("Only a resolved report can carry an action")
            action = await self.enforcer.prepare(
                request.principal,
                request.action_type,
                target_post_id=report.target_post_id,
                target_comment_id=report.target_comment_id,
                report_id=report.id,
                details=request.action_details,
            )

        closed = await self.moderation_service.resolve_report(
            report, request.principal, request.status, request.note
        )

        saved_action = None
        if action is not None:
            saved_action = await self.enforcer.apply(action)

        return ResolveReportResponse(
            **ReportItem.from_report(closed).model_dump(),
            moderation_action=(
                ModerationActionItem.from_action(saved_action) if saved_action else None
            ),
        )

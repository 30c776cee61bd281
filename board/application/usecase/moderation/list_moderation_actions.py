"""List moderation actions use case."""

from uuid import UUID

from pydantic import BaseModel

from board.application.pagination import (
    MODERATION_ACTION_SORT_FIELDS,
    build_page,
    parse_page_request,
)
from board.domain.repository import ModerationActionFilter
from board.domain.service import AccessPolicy, ModerationService, Operation
from board.domain.value import (
    CommentId,
    ModerationActionType,
    Page,
    PostId,
    Principal,
    ReportId,
    UserId,
)

from .common import ModerationActionItem


class ListModerationActionsRequest(BaseModel):
    """List moderation actions request."""

    actor_id: str | None = None
    action_type: ModerationActionType | None = None
    target_post_id: str | None = None
    target_comment_id: str | None = None
    report_id: str | None = None
    include_retired: bool = False
    page: int | None = None
    limit: int | None = None
    sort: str | None = None
    principal: Principal


ListModerationActionsResponse = Page[ModerationActionItem]


class ListModerationActionsUseCase:
    """Use case for browsing the moderation audit log (staff only)."""

    def __init__(
        self, moderation_service: ModerationService, access_policy: AccessPolicy
    ) -> None:
        self.moderation_service = moderation_service
        self.access_policy = access_policy

    async def execute(
        self, request: ListModerationActionsRequest
    ) -> ListModerationActionsResponse:
        """Execute list moderation actions flow.

        Raises:
            NotAuthorizedError: If the caller is not staff
            ValidationError: If page or limit is out of range
        """
        self.access_policy.authorize(
            request.principal, Operation.LIST_MODERATION_ACTIONS
        )
        page_request = parse_page_request(
            request.page, request.limit, request.sort, MODERATION_ACTION_SORT_FIELDS
        )

        filter = ModerationActionFilter(
            actor_id=UserId(UUID(request.actor_id)) if request.actor_id else None,
            action_type=request.action_type,
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
            include_retired=request.include_retired,
        )

        actions = await self.moderation_service.list_actions(
            filter=filter,
            sort=page_request.sort,
            limit=page_request.limit,
            offset=page_request.offset,
        )
        total = await self.moderation_service.count_actions(filter)

        return build_page(
            actions, page_request, total, ModerationActionItem.from_action
        )

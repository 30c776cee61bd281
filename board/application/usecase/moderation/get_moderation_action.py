"""Get moderation action use case."""

from uuid import UUID

from pydantic import BaseModel

from board.domain.error import NotFoundError
from board.domain.service import AccessPolicy, ModerationService, Operation
from board.domain.value import ModerationActionId, Principal

from .common import ModerationActionItem


class GetModerationActionRequest(BaseModel):
    """Get moderation action request."""

    action_id: str  # UUID string
    principal: Principal


class GetModerationActionUseCase:
    """Use case for reading one moderation action (staff only).

    Retired actions remain readable.
    """

    def __init__(
        self, moderation_service: ModerationService, access_policy: AccessPolicy
    ) -> None:
        self.moderation_service = moderation_service
        self.access_policy = access_policy

    async def execute(
        self, request: GetModerationActionRequest
    ) -> ModerationActionItem:
        self.access_policy.authorize(
            request.principal, Operation.VIEW_MODERATION_ACTION
        )

        action = await self.moderation_service.get_action(
            ModerationActionId(UUID(request.action_id))
        )
        if action is None:
            raise NotFoundError("ModerationAction", request.action_id)
        return ModerationActionItem.from_action(action)

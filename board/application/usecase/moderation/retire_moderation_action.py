"""Retire moderation action use case."""

from uuid import UUID

from pydantic import BaseModel

from board.domain.service import AccessPolicy, ModerationService, Operation
from board.domain.value import ModerationActionId, Principal

from .common import ModerationActionItem


class RetireModerationActionRequest(BaseModel):
    """Retire moderation action request."""

    action_id: str  # UUID string
    principal: Principal


class RetireModerationActionUseCase:
    """Use case for an admin retiring an action from the audit log."""

    def __init__(
        self, moderation_service: ModerationService, access_policy: AccessPolicy
    ) -> None:
        self.moderation_service = moderation_service
        self.access_policy = access_policy

    async def execute(
        self, request: RetireModerationActionRequest
    ) -> ModerationActionItem:
        """Execute retire flow.

        Raises:
            NotAuthorizedError: If the caller is not an admin
            NotFoundError: If the action doesn't exist or is already retired
        """
        self.access_policy.authorize(
            request.principal, Operation.RETIRE_MODERATION_ACTION
        )

        retired = await self.moderation_service.retire_action(
            request.principal, ModerationActionId(UUID(request.action_id))
        )
        return ModerationActionItem.from_action(retired)

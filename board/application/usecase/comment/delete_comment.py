"""Delete comment use case."""

from uuid import UUID

from pydantic import BaseModel

from board.domain.error import NotFoundError
from board.domain.service import (
    AccessPolicy,
    CommentService,
    ModerationService,
    Operation,
)
from board.domain.value import CommentId, ModerationActionType, Principal


class DeleteCommentRequest(BaseModel):
    """Delete comment request."""

    comment_id: str  # UUID string
    principal: Principal


class DeleteCommentUseCase:
    """Use case for soft-deleting a comment.

    When a moderator or admin removes someone else's comment, a ``delete``
    moderation action is recorded in the same transaction.
    """

    def __init__(
        self,
        comment_service: CommentService,
        moderation_service: ModerationService,
        access_policy: AccessPolicy,
    ) -> None:
        """Initialize delete comment use case.

        Args:
            comment_service: Comment domain service
            moderation_service: Moderation domain service
            access_policy: Access policy
        """
        self.comment_service = comment_service
        self.moderation_service = moderation_service
        self.access_policy = access_policy

    async def execute(self, request: DeleteCommentRequest) -> None:
        """Execute delete comment flow.

        Raises:
            NotFoundError: If the comment doesn't exist or is already deleted
            NotAuthorizedError: If the caller is neither author nor staff
        """
        comment_id = CommentId(UUID(request.comment_id))
        comment = await self.comment_service.get_comment_by_id(comment_id)
        if comment is None:
            raise NotFoundError("Comment", request.comment_id)

        capacity = self.access_policy.authorize(
            request.principal, Operation.DELETE_COMMENT, comment
        )

        action = None
        if capacity.is_staff:
            action = await self.moderation_service.build_action(
                request.principal,
                ModerationActionType.DELETE,
                target_comment_id=comment.id,
            )

        await self.comment_service.soft_delete_comment(comment)

        if action is not None:
            await self.moderation_service.save_action(action)

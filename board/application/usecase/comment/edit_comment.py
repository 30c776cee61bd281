"""Edit comment use case."""

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

from .common import CommentItem


class EditCommentRequest(BaseModel):
    """Edit comment request."""

    comment_id: str  # UUID string
    body: str  # New body (required, cannot be empty)
    principal: Principal


class EditCommentUseCase:
    """Use case for editing a comment's body.

    Authors edit their own comments. Moderators and admins may edit anyone's,
    in which case an ``edit`` moderation action is recorded as well.
    """

    def __init__(
        self,
        comment_service: CommentService,
        moderation_service: ModerationService,
        access_policy: AccessPolicy,
    ) -> None:
        """Initialize edit comment use case.

        Args:
            comment_service: Comment domain service
            moderation_service: Moderation domain service
            access_policy: Access policy
        """
        self.comment_service = comment_service
        self.moderation_service = moderation_service
        self.access_policy = access_policy

    async def execute(self, request: EditCommentRequest) -> CommentItem:
        """Execute edit comment flow.

        Steps:
        1. Retrieve the comment
        2. Authorize; the policy decides the editor's capacity
        3. For a staff edit, build the audit action before writing anything
        4. Update the body and append the edit history entry
        5. Store the audit action

        Args:
            request: Edit comment request

        Returns:
            The updated comment

        Raises:
            NotFoundError: If the comment doesn't exist or is deleted
            NotAuthorizedError: If the caller is neither author nor staff
            ValidationError: If the new body is empty or too long
        """
        comment_id = CommentId(UUID(request.comment_id))
        comment = await self.comment_service.get_comment_by_id(comment_id)
        if comment is None:
            raise NotFoundError("Comment", request.comment_id)

        capacity = self.access_policy.authorize(
            request.principal, Operation.EDIT_COMMENT, comment
        )

        action = None
        if capacity.is_staff:
            action = await self.moderation_service.build_action(
                request.principal,
                ModerationActionType.EDIT,
                target_comment_id=comment.id,
            )

        updated = await self.comment_service.edit_comment(
            comment,
            editor_id=request.principal.id,
            capacity=capacity,
            new_body=request.body,
        )

        if action is not None:
            await self.moderation_service.save_action(action)

        return CommentItem.from_comment(updated)

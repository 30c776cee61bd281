"""Get comment use case."""

from uuid import UUID

from pydantic import BaseModel

from board.domain.error import NotFoundError
from board.domain.service import AccessPolicy, CommentService, Operation
from board.domain.value import CommentId, Principal

from .common import CommentItem


class GetCommentRequest(BaseModel):
    """Get comment request."""

    comment_id: str  # UUID string
    principal: Principal | None = None  # None for anonymous readers


class GetCommentUseCase:
    """Use case for reading a single comment.

    Soft-deleted comments are only visible to moderators and admins.
    """

    def __init__(
        self, comment_service: CommentService, access_policy: AccessPolicy
    ) -> None:
        self.comment_service = comment_service
        self.access_policy = access_policy

    async def execute(self, request: GetCommentRequest) -> CommentItem:
        """Execute get comment flow.

        Raises:
            NotFoundError: If the comment doesn't exist, or is deleted and the
                caller is not staff
        """
        comment_id = CommentId(UUID(request.comment_id))
        comment = await self.comment_service.get_comment_by_id(comment_id)
        if comment is None:
            raise NotFoundError("Comment", request.comment_id)

        self.access_policy.authorize(request.principal, Operation.VIEW_COMMENT, comment)
        return CommentItem.from_comment(comment)

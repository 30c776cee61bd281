"""Create reply use case."""

from uuid import UUID

from pydantic import BaseModel

from board.domain.service import AccessPolicy, CommentService, Operation, PostService
from board.domain.value import CommentId, Principal

from .common import CommentItem


class CreateReplyRequest(BaseModel):
    """Create reply request."""

    parent_id: str  # UUID string of the comment being replied to
    body: str
    principal: Principal


class CreateReplyUseCase:
    """Use case for replying to an existing comment."""

    def __init__(
        self,
        comment_service: CommentService,
        post_service: PostService,
        access_policy: AccessPolicy,
    ) -> None:
        """Initialize create reply use case.

        Args:
            comment_service: Comment domain service
            post_service: Post domain service
            access_policy: Access policy
        """
        self.comment_service = comment_service
        self.post_service = post_service
        self.access_policy = access_policy

    async def execute(self, request: CreateReplyRequest) -> CommentItem:
        """Execute create reply flow.

        Steps:
        1. Check the caller may comment
        2. Load the parent (must be active) and verify its post is live
        3. Create the reply; the service enforces the depth limit

        Args:
            request: Create reply request

        Returns:
            The created reply

        Raises:
            NotFoundError: If the parent or its post is missing or deleted
            NestingLimitExceededError: If the reply would be too deep
            ValidationError: If the body is empty or too long
        """
        self.access_policy.authorize(request.principal, Operation.CREATE_COMMENT)

        parent_id = CommentId(UUID(request.parent_id))
        parent = await self.comment_service.get_active_comment(parent_id)
        await self.post_service.get_live_post(parent.post_id)

        reply = await self.comment_service.create_reply(
            parent_id=parent_id,
            author_id=request.principal.id,
            body=request.body,
        )
        return CommentItem.from_comment(reply)

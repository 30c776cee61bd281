"""Create comment use case."""

from uuid import UUID

from pydantic import BaseModel

from board.domain.service import AccessPolicy, CommentService, Operation, PostService
from board.domain.value import PostId, Principal

from .common import CommentItem


class CreateCommentRequest(BaseModel):
    """Create comment request."""

    post_id: str  # UUID string
    body: str
    principal: Principal  # Authenticated author


class CreateCommentUseCase:
    """Use case for creating a top-level comment on a post."""

    def __init__(
        self,
        comment_service: CommentService,
        post_service: PostService,
        access_policy: AccessPolicy,
    ) -> None:
        """Initialize create comment use case.

        Args:
            comment_service: Comment domain service
            post_service: Post domain service
            access_policy: Access policy
        """
        self.comment_service = comment_service
        self.post_service = post_service
        self.access_policy = access_policy

    async def execute(self, request: CreateCommentRequest) -> CommentItem:
        """Execute create comment flow.

        Steps:
        1. Check the caller may comment
        2. Verify the post exists and is not deleted
        3. Create the root comment

        Args:
            request: Create comment request

        Returns:
            The created comment

        Raises:
            NotFoundError: If the post doesn't exist or is deleted
            ValidationError: If the body is empty or too long
        """
        self.access_policy.authorize(request.principal, Operation.CREATE_COMMENT)

        post_id = PostId(UUID(request.post_id))
        await self.post_service.get_live_post(post_id)

        comment = await self.comment_service.create_root_comment(
            post_id=post_id,
            author_id=request.principal.id,
            body=request.body,
        )
        return CommentItem.from_comment(comment)

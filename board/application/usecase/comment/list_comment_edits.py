"""List comment edits use case."""

from uuid import UUID

from pydantic import BaseModel

from board.domain.error import NotFoundError
from board.domain.service import AccessPolicy, CommentService, Operation
from board.domain.value import CommentId, Principal

from .common import CommentEditItem


class ListCommentEditsRequest(BaseModel):
    """List comment edits request."""

    comment_id: str  # UUID string
    principal: Principal


class ListCommentEditsResponse(BaseModel):
    """Edit history of a comment, oldest first."""

    comment_id: str
    edits: list[CommentEditItem]


class ListCommentEditsUseCase:
    """Use case for reading a comment's edit history (author or staff)."""

    def __init__(
        self, comment_service: CommentService, access_policy: AccessPolicy
    ) -> None:
        self.comment_service = comment_service
        self.access_policy = access_policy

    async def execute(
        self, request: ListCommentEditsRequest
    ) -> ListCommentEditsResponse:
        comment_id = CommentId(UUID(request.comment_id))
        comment = await self.comment_service.get_comment_by_id(comment_id)
        if comment is None:
            raise NotFoundError("Comment", request.comment_id)

        self.access_policy.authorize(
            request.principal, Operation.VIEW_COMMENT_EDITS, comment
        )

        edits = await self.comment_service.list_edits(comment_id)
        return ListCommentEditsResponse(
            comment_id=request.comment_id,
            edits=[CommentEditItem.from_edit(edit) for edit in edits],
        )

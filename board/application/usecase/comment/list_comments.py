"""List comments use case."""

from uuid import UUID

from pydantic import BaseModel

from board.application.pagination import (
    COMMENT_SORT_FIELDS,
    build_page,
    parse_page_request,
)
from board.domain.repository import CommentFilter
from board.domain.service import AccessPolicy, CommentService, Operation
from board.domain.value import CommentId, Page, PostId, Principal, UserId

from .common import CommentItem


class ListCommentsRequest(BaseModel):
    """List comments request.

    Filters are optional; page/limit/sort are validated by the pagination
    adapter.
    """

    post_id: str | None = None
    parent_id: str | None = None
    author_id: str | None = None
    nesting_level: int | None = None
    include_deleted: bool = False
    page: int | None = None
    limit: int | None = None
    sort: str | None = None
    principal: Principal | None = None


ListCommentsResponse = Page[CommentItem]


class ListCommentsUseCase:
    """Use case for paginated comment listings."""

    def __init__(
        self, comment_service: CommentService, access_policy: AccessPolicy
    ) -> None:
        self.comment_service = comment_service
        self.access_policy = access_policy

    async def execute(self, request: ListCommentsRequest) -> ListCommentsResponse:
        """Execute list comments flow.

        Args:
            request: Filters and paging parameters

        Returns:
            One page of comments with pagination info

        Raises:
            ValidationError: If page or limit is out of range
            NotAuthorizedError: If a non-staff caller asks for deleted comments
        """
        page_request = parse_page_request(
            request.page, request.limit, request.sort, COMMENT_SORT_FIELDS
        )
        if request.include_deleted:
            self.access_policy.authorize(
                request.principal, Operation.LIST_DELETED_COMMENTS
            )

        filter = CommentFilter(
            post_id=PostId(UUID(request.post_id)) if request.post_id else None,
            parent_id=CommentId(UUID(request.parent_id)) if request.parent_id else None,
            author_id=UserId(UUID(request.author_id)) if request.author_id else None,
            nesting_level=request.nesting_level,
            include_deleted=request.include_deleted,
        )

        comments = await self.comment_service.list_comments(
            filter=filter,
            sort=page_request.sort,
            limit=page_request.limit,
            offset=page_request.offset,
        )
        total = await self.comment_service.count_comments(filter)

        return build_page(comments, page_request, total, CommentItem.from_comment)

"""Comment routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, Query, Response, status
from pydantic import BaseModel

from board.application.usecase.comment import (
    CommentItem,
    CreateCommentRequest,
    CreateCommentUseCase,
    CreateReplyRequest,
    CreateReplyUseCase,
    DeleteCommentRequest,
    DeleteCommentUseCase,
    EditCommentRequest,
    EditCommentUseCase,
    GetCommentRequest,
    GetCommentUseCase,
    ListCommentEditsRequest,
    ListCommentEditsResponse,
    ListCommentEditsUseCase,
    ListCommentsRequest,
    ListCommentsResponse,
    ListCommentsUseCase,
)
from board.domain.error import DomainError
from board.domain.service import JWTService
from board.interface.error import bad_request, require_principal, to_http_exception

router = APIRouter(prefix="/comments", tags=["comments"], route_class=DishkaRoute)


class CreateCommentAPIRequest(BaseModel):
    """API request for creating a root comment."""

    post_id: str
    body: str


class CommentBodyAPIRequest(BaseModel):
    """API request carrying a comment body (replies and edits)."""

    body: str


@router.post("", response_model=CommentItem, status_code=status.HTTP_201_CREATED)
async def create_comment(
    request: CreateCommentAPIRequest,
    create_comment_use_case: FromDishka[CreateCommentUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> CommentItem:
    """Create a top-level comment on a post.

    Requires authentication.

    Args:
        request: Comment creation data
        create_comment_use_case: Create comment use case from DI
        jwt_service: JWT service for token verification (injected)
        auth_token: JWT token from cookie

    Returns:
        Created comment

    Raises:
        HTTPException: 401 if not authenticated, 404 if the post is missing,
            400 on an empty body
    """
    principal = require_principal(jwt_service, auth_token, "create comments")

    try:
        return await create_comment_use_case.execute(
            CreateCommentRequest(
                post_id=request.post_id, body=request.body, principal=principal
            )
        )
    except DomainError as e:
        raise to_http_exception(e)
    except ValueError as e:
        raise bad_request(e)


@router.post(
    "/{parent_id}/replies",
    response_model=CommentItem,
    status_code=status.HTTP_201_CREATED,
)
async def create_reply(
    parent_id: str,
    request: CommentBodyAPIRequest,
    create_reply_use_case: FromDishka[CreateReplyUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> CommentItem:
    """Reply to a comment.

    Requires authentication.

    Raises:
        HTTPException: 401 if not authenticated, 404 if the parent is missing
            or deleted, 422 if the reply would exceed the nesting limit
    """
    principal = require_principal(jwt_service, auth_token, "reply to comments")

    try:
        return await create_reply_use_case.execute(
            CreateReplyRequest(
                parent_id=parent_id, body=request.body, principal=principal
            )
        )
    except DomainError as e:
        raise to_http_exception(e)
    except ValueError as e:
        raise bad_request(e)


@router.get("", response_model=ListCommentsResponse)
async def list_comments(
    list_comments_use_case: FromDishka[ListCommentsUseCase],
    jwt_service: FromDishka[JWTService],
    post_id: str | None = None,
    parent_id: str | None = None,
    author_id: str | None = None,
    nesting_level: int | None = Query(default=None, ge=0),
    include_deleted: bool = False,
    page: int | None = None,
    limit: int | None = None,
    sort: str | None = None,
    auth_token: str | None = Cookie(default=None),
) -> ListCommentsResponse:
    """List comments with optional filters.

    Anonymous callers may list active comments; deleted comments need staff.

    Args:
        post_id: Filter by post
        parent_id: Filter by parent comment (direct replies)
        author_id: Filter by author
        nesting_level: Filter by nesting level
        include_deleted: Include soft-deleted comments (staff only)
        page: 1-based page number (default 1)
        limit: Page size, 1..100 (default 20)
        sort: ``field[:asc|desc]`` over created_at, updated_at, nesting_level

    Returns:
        One page of comments with pagination info

    Raises:
        HTTPException: 401 if include_deleted is set without authentication,
            403 if the caller is not staff
    """
    if include_deleted:
        principal = require_principal(
            jwt_service, auth_token, "list deleted comments"
        )
    else:
        principal = jwt_service.get_principal_from_token(auth_token)

    try:
        return await list_comments_use_case.execute(
            ListCommentsRequest(
                post_id=post_id,
                parent_id=parent_id,
                author_id=author_id,
                nesting_level=nesting_level,
                include_deleted=include_deleted,
                page=page,
                limit=limit,
                sort=sort,
                principal=principal,
            )
        )
    except DomainError as e:
        raise to_http_exception(e)
    except ValueError as e:
        raise bad_request(e)


@router.get("/{comment_id}", response_model=CommentItem)
async def get_comment(
    comment_id: str,
    get_comment_use_case: FromDishka[GetCommentUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> CommentItem:
    """Get a single comment.

    Deleted comments return 404 unless the caller is a moderator or admin.
    """
    principal = jwt_service.get_principal_from_token(auth_token)

    try:
        return await get_comment_use_case.execute(
            GetCommentRequest(comment_id=comment_id, principal=principal)
        )
    except DomainError as e:
        raise to_http_exception(e)
    except ValueError as e:
        raise bad_request(e)


@router.put("/{comment_id}", response_model=CommentItem)
async def edit_comment(
    comment_id: str,
    request: CommentBodyAPIRequest,
    edit_comment_use_case: FromDishka[EditCommentUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> CommentItem:
    """Edit a comment's body.

    The author, a moderator or an admin may edit. Staff edits of other
    people's comments are recorded as moderation actions.

    Raises:
        HTTPException: 401 if not authenticated, 403 if not allowed,
            404 if the comment is missing or deleted
    """
    principal = require_principal(jwt_service, auth_token, "edit comments")

    try:
        return await edit_comment_use_case.execute(
            EditCommentRequest(
                comment_id=comment_id, body=request.body, principal=principal
            )
        )
    except DomainError as e:
        raise to_http_exception(e)
    except ValueError as e:
        raise bad_request(e)


@router.delete("/{comment_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_comment(
    comment_id: str,
    delete_comment_use_case: FromDishka[DeleteCommentUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> Response:
    """Soft-delete a comment.

    Replies to the comment are left in place.

    Raises:
        HTTPException: 401 if not authenticated, 403 if not allowed,
            404 if the comment is missing or already deleted
    """
    principal = require_principal(jwt_service, auth_token, "delete comments")

    try:
        await delete_comment_use_case.execute(
            DeleteCommentRequest(comment_id=comment_id, principal=principal)
        )
    except DomainError as e:
        raise to_http_exception(e)
    except ValueError as e:
        raise bad_request(e)

    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get("/{comment_id}/edits", response_model=ListCommentEditsResponse)
async def list_comment_edits(
    comment_id: str,
    list_comment_edits_use_case: FromDishka[ListCommentEditsUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> ListCommentEditsResponse:
    """Get a comment's edit history (author or staff)."""
    principal = require_principal(jwt_service, auth_token, "view edit history")

    try:
        return await list_comment_edits_use_case.execute(
            ListCommentEditsRequest(comment_id=comment_id, principal=principal)
        )
    except DomainError as e:
        raise to_http_exception(e)
    except ValueError as e:
        raise bad_request(e)

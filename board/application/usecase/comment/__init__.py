"""Comment use cases."""

from .common import CommentEditItem, CommentItem
from .create_comment import CreateCommentRequest, CreateCommentUseCase
from .create_reply import CreateReplyRequest, CreateReplyUseCase
from .delete_comment import DeleteCommentRequest, DeleteCommentUseCase
from .edit_comment import EditCommentRequest, EditCommentUseCase
from .get_comment import GetCommentRequest, GetCommentUseCase
from .list_comment_edits import (
    ListCommentEditsRequest,
    ListCommentEditsResponse,
    ListCommentEditsUseCase,
)
from .list_comments import (
    ListCommentsRequest,
    ListCommentsResponse,
    ListCommentsUseCase,
)

__all__ = [
    "CommentEditItem",
    "CommentItem",
    "CreateCommentRequest",
    "CreateCommentUseCase",
    "CreateReplyRequest",
    "CreateReplyUseCase",
    "DeleteCommentRequest",
    "DeleteCommentUseCase",
    "EditCommentRequest",
    "EditCommentUseCase",
    "GetCommentRequest",
    "GetCommentUseCase",
    "ListCommentEditsRequest",
    "ListCommentEditsResponse",
    "ListCommentEditsUseCase",
    "ListCommentsRequest",
    "ListCommentsResponse",
    "ListCommentsUseCase",
]

"""Domain value objects for the discussion board."""

from board.domain.value.identifiers import (
    CommentEditId,
    CommentId,
    ModerationActionId,
    PostId,
    ReportId,
    UserId,
)
from board.domain.value.pagination import (
    Page,
    PageRequest,
    PaginationInfo,
    SortDirection,
    SortSpec,
)
from board.domain.value.types import (
    ActingCapacity,
    CommentState,
    ContentType,
    ModerationActionType,
    Principal,
    ReportStatus,
    Role,
)

__all__ = [
    # Identifiers
    "UserId",
    "PostId",
    "CommentId",
    "CommentEditId",
    "ReportId",
    "ModerationActionId",
    # Types
    "ActingCapacity",
    "CommentState",
    "ContentType",
    "ModerationActionType",
    "Principal",
    "ReportStatus",
    "Role",
    # Pagination
    "Page",
    "PageRequest",
    "PaginationInfo",
    "SortDirection",
    "SortSpec",
]

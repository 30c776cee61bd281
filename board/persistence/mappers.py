"""Mappers for converting between database rows and domain models.

Since we're using Pydantic domain models (immutable), we use manual mapping
instead of SQLAlchemy's classical imperative mapping.
"""

from typing import Any, Dict
from uuid import UUID

from board.domain.model import Comment, CommentEdit, ModerationAction, Post, Report
from board.domain.value import (
    ActingCapacity,
    CommentEditId,
    CommentId,
    ContentType,
    ModerationActionId,
    ModerationActionType,
    PostId,
    ReportId,
    ReportStatus,
    UserId,
)


def _uuid(value: Any) -> UUID | None:
    if value is None:
        return None
    return UUID(value) if isinstance(value, str) else value


def row_to_post(row: Dict[str, Any]) -> Post:
    """Convert database row to Post domain model."""
    return Post(
        id=PostId(_uuid(row["id"])),
        author_id=UserId(_uuid(row["author_id"])),
        title=row["title"],
        created_at=row["created_at"],
        updated_at=row["updated_at"],
        deleted_at=row.get("deleted_at"),
    )


def post_to_dict(post: Post) -> Dict[str, Any]:
    """Convert Post domain model to dict for database insert/update."""
    return post.model_dump()


def row_to_comment(row: Dict[str, Any]) -> Comment:
    """Convert database row to Comment domain model.

    Args:
        row: Database row as dict

    Returns:
        Comment domain model
    """
    parent_id = _uuid(row.get("parent_id"))
    return Comment(
        id=CommentId(_uuid(row["id"])),
        post_id=PostId(_uuid(row["post_id"])),
        author_id=UserId(_uuid(row["author_id"])),
        body=row["body"],
        parent_id=CommentId(parent_id) if parent_id else None,
        nesting_level=row["nesting_level"],
        is_edited=row["is_edited"],
        created_at=row["created_at"],
        updated_at=row["updated_at"],
        deleted_at=row.get("deleted_at"),
    )


def comment_to_dict(comment: Comment) -> Dict[str, Any]:
    """Convert Comment domain model to dict for database insert/update."""
    return comment.model_dump()


def row_to_comment_edit(row: Dict[str, Any]) -> CommentEdit:
    """Convert database row to CommentEdit domain model."""
    return CommentEdit(
        id=CommentEditId(_uuid(row["id"])),
        comment_id=CommentId(_uuid(row["comment_id"])),
        editor_id=UserId(_uuid(row["editor_id"])),
        editor_capacity=ActingCapacity(row["editor_capacity"]),
        previous_body=row["previous_body"],
        new_body=row["new_body"],
        created_at=row["created_at"],
    )


def comment_edit_to_dict(edit: CommentEdit) -> Dict[str, Any]:
    """Convert CommentEdit domain model to dict for database insert."""
    data = edit.model_dump()
    data["editor_capacity"] = edit.editor_capacity.value
    return data


def row_to_report(row: Dict[str, Any]) -> Report:
    """Convert database row to Report domain model.

    Args:
        row: Database row as dict

    Returns:
        Report domain model
    """
    target_post_id = _uuid(row.get("target_post_id"))
    target_comment_id = _uuid(row.get("target_comment_id"))
    resolved_by_id = _uuid(row.get("resolved_by_id"))
    return Report(
        id=ReportId(_uuid(row["id"])),
        reporter_id=UserId(_uuid(row["reporter_id"])),
        content_type=ContentType(row["content_type"]),
        target_post_id=PostId(target_post_id) if target_post_id else None,
        target_comment_id=CommentId(target_comment_id) if target_comment_id else None,
        reason=row["reason"],
        status=ReportStatus(row["status"]),
        resolution_note=row.get("resolution_note"),
        resolved_by_id=UserId(resolved_by_id) if resolved_by_id else None,
        resolved_at=row.get("resolved_at"),
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def report_to_dict(report: Report) -> Dict[str, Any]:
    """Convert Report domain model to dict for database insert/update.

    Enum fields are stored by value.
    """
    data = report.model_dump()
    data["content_type"] = report.content_type.value
    data["status"] = report.status.value
    return data


def row_to_moderation_action(row: Dict[str, Any]) -> ModerationAction:
    """Convert database row to ModerationAction domain model."""
    moderator_id = _uuid(row.get("actor_moderator_id"))
    admin_id = _uuid(row.get("actor_admin_id"))
    target_post_id = _uuid(row.get("target_post_id"))
    target_comment_id = _uuid(row.get("target_comment_id"))
    report_id = _uuid(row.get("report_id"))
    return ModerationAction(
        id=ModerationActionId(_uuid(row["id"])),
        actor_moderator_id=UserId(moderator_id) if moderator_id else None,
        actor_admin_id=UserId(admin_id) if admin_id else None,
        target_post_id=PostId(target_post_id) if target_post_id else None,
        target_comment_id=CommentId(target_comment_id) if target_comment_id else None,
        report_id=ReportId(report_id) if report_id else None,
        action_type=ModerationActionType(row["action_type"]),
        action_details=row.get("action_details"),
        created_at=row["created_at"],
        retired_at=row.get("retired_at"),
    )


def moderation_action_to_dict(action: ModerationAction) -> Dict[str, Any]:
    """Convert ModerationAction domain model to dict for database insert."""
    data = action.model_dump()
    data["action_type"] = action.action_type.value
    return data

"""Domain model entities for the discussion board."""

from board.domain.model.comment import Comment
from board.domain.model.comment_edit import CommentEdit
from board.domain.model.moderation_action import ModerationAction
from board.domain.model.post import Post
from board.domain.model.report import Report

__all__ = [
    "Post",
    "Comment",
    "CommentEdit",
    "Report",
    "ModerationAction",
]

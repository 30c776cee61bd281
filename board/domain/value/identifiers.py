"""Strongly typed identifiers for discussion board entities.

Using NewType for strong typing prevents mixing up different entity IDs
and makes the code more self-documenting.
"""

from typing import NewType
from uuid import UUID

UserId = NewType("UserId", UUID)
PostId = NewType("PostId", UUID)
CommentId = NewType("CommentId", UUID)
CommentEditId = NewType("CommentEditId", UUID)
ReportId = NewType("ReportId", UUID)
ModerationActionId = NewType("ModerationActionId", UUID)

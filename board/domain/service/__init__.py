"""Domain services."""

from .access_policy import AccessDecision, AccessPolicy, DenialReason, Operation
from .base import Service
from .comment_service import CommentService
from .jwt_service import JWTService
from .moderation_service import ModerationService
from .post_service import PostService

__all__ = [
    "AccessDecision",
    "AccessPolicy",
    "CommentService",
    "DenialReason",
    "JWTService",
    "ModerationService",
    "Operation",
    "PostService",
    "Service",
]

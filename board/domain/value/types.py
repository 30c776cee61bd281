"""Domain value objects for the discussion board.

Value objects are immutable and defined by their values, not identity.
They encapsulate validation rules and business logic.
"""

from enum import Enum

from board.domain.value.common import ValueObject
from board.domain.value.identifiers import UserId


class Role(str, Enum):
    """Role carried by an authenticated principal."""

    MEMBER = "member"
    MODERATOR = "moderator"
    ADMIN = "admin"

    @property
    def is_staff(self) -> bool:
        """Moderators and admins may act on content they don't own."""
        return self in (Role.MODERATOR, Role.ADMIN)


class ActingCapacity(str, Enum):
    """The capacity in which a principal performs an operation.

    Decided by the access policy from the principal and the target entity,
    so that a moderator editing their own comment acts as its AUTHOR.
    """

    AUTHOR = "author"
    MEMBER = "member"
    MODERATOR = "moderator"
    ADMIN = "admin"

    @property
    def is_staff(self) -> bool:
        """Whether this capacity leaves a moderation audit trail."""
        return self in (ActingCapacity.MODERATOR, ActingCapacity.ADMIN)


class CommentState(str, Enum):
    """Lifecycle state of a comment."""

    ACTIVE = "active"
    SOFT_DELETED = "soft_deleted"


class ContentType(str, Enum):
    """Kind of content a report or moderation action points at."""

    POST = "post"
    COMMENT = "comment"


class ReportStatus(str, Enum):
    """Status of a user report.

    PENDING is the only state that can transition; RESOLVED and REJECTED
    are terminal.
    """

    PENDING = "pending"
    RESOLVED = "resolved"
    REJECTED = "rejected"

    @property
    def is_terminal(self) -> bool:
        return self is not ReportStatus.PENDING


class ModerationActionType(str, Enum):
    """Enforcement decision recorded by a moderation action."""

    DELETE = "delete"
    WARN = "warn"
    HIDE = "hide"
    EDIT = "edit"
    BAN = "ban"
    RESTRICT = "restrict"

    @property
    def requires_target(self) -> bool:
        """Content-level actions must name the post or comment they act on."""
        return self in (
            ModerationActionType.DELETE,
            ModerationActionType.HIDE,
            ModerationActionType.EDIT,
        )


class Principal(ValueObject):
    """The authenticated caller of an operation."""

    id: UserId
    role: Role = Role.MEMBER

    @property
    def is_staff(self) -> bool:
        return self.role.is_staff

    @property
    def is_admin(self) -> bool:
        return self.role is Role.ADMIN

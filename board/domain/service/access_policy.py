"""Access policy for comments, reports and moderation actions.

A stateless decision function over (principal, operation, entity). Use cases
ask it before touching anything, and it tells them both whether the call may
proceed and in which capacity the principal acts.
"""

from enum import Enum
from typing import Optional, Union

import logfire

from board.domain.error import NotAuthorizedError, NotFoundError
from board.domain.model.comment import Comment
from board.domain.model.moderation_action import ModerationAction
from board.domain.model.post import Post
from board.domain.model.report import Report
from board.domain.value import ActingCapacity, Principal, Role
from board.domain.value.common import ValueObject

from .base import Service

Entity = Union[Comment, Report, ModerationAction, Post, None]


class Operation(str, Enum):
    """Operations guarded by the access policy."""

    VIEW_COMMENT = "view_comment"
    CREATE_COMMENT = "create_comment"
    EDIT_COMMENT = "edit_comment"
    DELETE_COMMENT = "delete_comment"
    VIEW_COMMENT_EDITS = "view_comment_edits"
    LIST_DELETED_COMMENTS = "list_deleted_comments"
    CREATE_REPORT = "create_report"
    VIEW_REPORT = "view_report"
    LIST_REPORTS = "list_reports"
    RESOLVE_REPORT = "resolve_report"
    CREATE_MODERATION_ACTION = "create_moderation_action"
    VIEW_MODERATION_ACTION = "view_moderation_action"
    LIST_MODERATION_ACTIONS = "list_moderation_actions"
    RETIRE_MODERATION_ACTION = "retire_moderation_action"


class DenialReason(str, Enum):
    """Why an operation was refused."""

    FORBIDDEN = "forbidden"
    NOT_FOUND = "not_found"


class AccessDecision(ValueObject):
    """Outcome of an access check."""

    allowed: bool
    capacity: Optional[ActingCapacity] = None
    denial: Optional[DenialReason] = None

    @classmethod
    def allow(cls, capacity: Optional[ActingCapacity]) -> "AccessDecision":
        return cls(allowed=True, capacity=capacity)

    @classmethod
    def deny(cls, reason: DenialReason) -> "AccessDecision":
        return cls(allowed=False, denial=reason)


_STAFF_ONLY = frozenset(
    {
        Operation.LIST_DELETED_COMMENTS,
        Operation.LIST_REPORTS,
        Operation.RESOLVE_REPORT,
        Operation.CREATE_MODERATION_ACTION,
        Operation.VIEW_MODERATION_ACTION,
        Operation.LIST_MODERATION_ACTIONS,
    }
)


def _role_capacity(principal: Principal) -> ActingCapacity:
    if principal.role is Role.ADMIN:
        return ActingCapacity.ADMIN
    if principal.role is Role.MODERATOR:
        return ActingCapacity.MODERATOR
    return ActingCapacity.MEMBER


class AccessPolicy(Service):
    """Decides who may do what to which entity."""

    def can_perform(
        self,
        principal: Optional[Principal],
        operation: Operation,
        entity: Entity = None,
    ) -> AccessDecision:
        """Decide whether a principal may perform an operation.

        Args:
            principal: Caller, or None for anonymous requests
            operation: Operation being attempted
            entity: Target entity, when the operation has one

        Returns:
            The access decision with the acting capacity when allowed
        """
        if operation is Operation.VIEW_COMMENT:
            return self._view_comment(principal, entity)

        if principal is None:
            return AccessDecision.deny(DenialReason.FORBIDDEN)

        if operation in (Operation.CREATE_COMMENT, Operation.CREATE_REPORT):
            return AccessDecision.allow(_role_capacity(principal))

        if operation in (Operation.EDIT_COMMENT, Operation.DELETE_COMMENT):
            return self._modify_comment(principal, entity)

        if operation is Operation.VIEW_COMMENT_EDITS:
            if entity is not None and not entity.is_active and not principal.is_staff:
                return AccessDecision.deny(DenialReason.NOT_FOUND)
            if entity is not None and entity.author_id == principal.id:
                return AccessDecision.allow(ActingCapacity.AUTHOR)
            if principal.is_staff:
                return AccessDecision.allow(_role_capacity(principal))
            return AccessDecision.deny(DenialReason.FORBIDDEN)

        if operation is Operation.VIEW_REPORT:
            if entity is not None and entity.reporter_id == principal.id:
                return AccessDecision.allow(ActingCapacity.AUTHOR)
            if principal.is_staff:
                return AccessDecision.allow(_role_capacity(principal))
            return AccessDecision.deny(DenialReason.FORBIDDEN)

        if operation is Operation.RETIRE_MODERATION_ACTION:
            if not principal.is_admin:
                return AccessDecision.deny(DenialReason.FORBIDDEN)
            if entity is not None and entity.is_retired:
                return AccessDecision.deny(DenialReason.NOT_FOUND)
            return AccessDecision.allow(ActingCapacity.ADMIN)

        if operation in _STAFF_ONLY:
            if principal.is_staff:
                return AccessDecision.allow(_role_capacity(principal))
            return AccessDecision.deny(DenialReason.FORBIDDEN)

        return AccessDecision.deny(DenialReason.FORBIDDEN)

    def _view_comment(
        self, principal: Optional[Principal], comment: Optional[Comment]
    ) -> AccessDecision:
        capacity = None
        if principal is not None:
            if comment is not None and comment.author_id == principal.id:
                capacity = ActingCapacity.AUTHOR
            else:
                capacity = _role_capacity(principal)

        if comment is None or comment.is_active:
            return AccessDecision.allow(capacity)
        # Deleted comments stay readable to staff for review
        if principal is not None and principal.is_staff:
            return AccessDecision.allow(_role_capacity(principal))
        return AccessDecision.deny(DenialReason.NOT_FOUND)

    def _modify_comment(
        self, principal: Principal, comment: Optional[Comment]
    ) -> AccessDecision:
        if comment is not None and not comment.is_active:
            return AccessDecision.deny(DenialReason.NOT_FOUND)
        if comment is not None and comment.author_id == principal.id:
            return AccessDecision.allow(ActingCapacity.AUTHOR)
        if principal.is_staff:
            return AccessDecision.allow(_role_capacity(principal))
        return AccessDecision.deny(DenialReason.FORBIDDEN)

    def authorize(
        self,
        principal: Optional[Principal],
        operation: Operation,
        entity: Entity = None,
    ) -> Optional[ActingCapacity]:
        """Check access and raise when denied.

        Args:
            principal: Caller, or None for anonymous requests
            operation: Operation being attempted
            entity: Target entity, when the operation has one

        Returns:
            Capacity the principal acts in (None for anonymous reads)

        Raises:
            NotFoundError: If the entity must look absent to this principal
            NotAuthorizedError: If the principal may not perform the operation
        """
        decision = self.can_perform(principal, operation, entity)
        if decision.allowed:
            return decision.capacity

        resource = type(entity).__name__ if entity is not None else "resource"
        resource_id = str(entity.id) if entity is not None else ""
        user_id = str(principal.id) if principal is not None else "anonymous"
        logfire.warn(
            "Access denied",
            operation=operation,
            denial=decision.denial,
            resource=resource,
            resource_id=resource_id,
            user_id=user_id,
        )

        if decision.denial is DenialReason.NOT_FOUND:
            raise NotFoundError(resource, resource_id)
        raise NotAuthorizedError(operation.value, resource, resource_id, user_id)

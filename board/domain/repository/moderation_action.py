"""Moderation action repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from board.domain.model.moderation_action import ModerationAction
from board.domain.value import (
    CommentId,
    ModerationActionId,
    ModerationActionType,
    PostId,
    ReportId,
    SortSpec,
    UserId,
)
from board.domain.value.common import ValueObject


class ModerationActionFilter(ValueObject):
    """Equality filters for moderation action listings."""

    actor_id: Optional[UserId] = None
    action_type: Optional[ModerationActionType] = None
    target_post_id: Optional[PostId] = None
    target_comment_id: Optional[CommentId] = None
    report_id: Optional[ReportId] = None
    include_retired: bool = False


class ModerationActionRepository(ABC):
    """Repository for ModerationAction records.

    Records are inserted once and afterwards only retired; there is no
    general update operation.
    """

    @abstractmethod
    async def find_by_id(
        self, action_id: ModerationActionId
    ) -> Optional[ModerationAction]:
        """Find a moderation action by ID, including retired ones.

        Args:
            action_id: The action's unique identifier

        Returns:
            The action if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_all(
        self,
        filter: ModerationActionFilter,
        sort: SortSpec,
        limit: int = 20,
        offset: int = 0,
    ) -> List[ModerationAction]:
        """Find moderation actions with filtering, sorting and pagination."""
        pass

    @abstractmethod
    async def count(self, filter: ModerationActionFilter) -> int:
        """Count moderation actions matching the given filters."""
        pass

    @abstractmethod
    async def add(self, action: ModerationAction) -> ModerationAction:
        """Append a new moderation action.

        Args:
            action: The action to record

        Returns:
            The stored action
        """
        pass

    @abstractmethod
    async def retire(
        self, action_id: ModerationActionId
    ) -> Optional[ModerationAction]:
        """Mark an action as retired.

        Args:
            action_id: The action to retire

        Returns:
            The retired action, or None if it does not exist or was
            already retired
        """
        pass

"""In-memory moderation action repository for testing."""

from datetime import datetime
from typing import Optional

from board.domain.model.moderation_action import ModerationAction
from board.domain.repository.moderation_action import (
    ModerationActionFilter,
    ModerationActionRepository,
)
from board.domain.value import ModerationActionId, SortSpec

from .base import sort_records


class InMemoryModerationActionRepository(ModerationActionRepository):
    """In-memory implementation of ModerationActionRepository for testing."""

    def __init__(self) -> None:
        self._actions: dict[ModerationActionId, ModerationAction] = {}

    def _matches(self, action: ModerationAction, filter: ModerationActionFilter) -> bool:
        if filter.actor_id is not None and action.actor_id != filter.actor_id:
            return False
        if filter.action_type is not None and action.action_type != filter.action_type:
            return False
        if (
            filter.target_post_id is not None
            and action.target_post_id != filter.target_post_id
        ):
            return False
        if (
            filter.target_comment_id is not None
            and action.target_comment_id != filter.target_comment_id
        ):
            return False
        if filter.report_id is not None and action.report_id != filter.report_id:
            return False
        if not filter.include_retired and action.retired_at is not None:
            return False
        return True

    async def find_by_id(
        self, action_id: ModerationActionId
    ) -> Optional[ModerationAction]:
        """Find a moderation action by ID."""
        return self._actions.get(action_id)

    async def find_all(
        self,
        filter: ModerationActionFilter,
        sort: SortSpec,
        limit: int = 20,
        offset: int = 0,
    ) -> list[ModerationAction]:
        """Find moderation actions with filtering, sorting and pagination."""
        actions = [a for a in self._actions.values() if self._matches(a, filter)]
        return sort_records(actions, sort)[offset : offset + limit]

    async def count(self, filter: ModerationActionFilter) -> int:
        """Count moderation actions matching the given filters."""
        return sum(1 for a in self._actions.values() if self._matches(a, filter))

    async def add(self, action: ModerationAction) -> ModerationAction:
        """Append a new moderation action."""
        self._actions[action.id] = action
        return action

    async def retire(
        self, action_id: ModerationActionId
    ) -> Optional[ModerationAction]:
        """Mark an action as retired, unless it already is."""
        action = self._actions.get(action_id)
        if action is None or action.retired_at is not None:
            return None
        retired = action.model_copy(update={"retired_at": datetime.now()})
        self._actions[action_id] = retired
        return retired

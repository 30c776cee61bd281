"""PostgreSQL implementation of ModerationAction repository."""

from typing import List, Optional

import logfire
from sqlalchemy import Select, func, or_, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from board.domain.model import ModerationAction
from board.domain.repository.moderation_action import (
    ModerationActionFilter,
    ModerationActionRepository,
)
from board.domain.value import ModerationActionId, SortSpec
from board.persistence.mappers import (
    moderation_action_to_dict,
    row_to_moderation_action,
)
from board.persistence.repository.base import apply_sort
from board.persistence.tables import moderation_actions_table


class PostgresModerationActionRepository(ModerationActionRepository):
    """PostgreSQL implementation of ModerationActionRepository.

    Rows are inserted once; the only later write is setting retired_at.
    """

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    def _apply_filter(self, stmt: Select, filter: ModerationActionFilter) -> Select:
        table = moderation_actions_table
        if filter.actor_id is not None:
            stmt = stmt.where(
                or_(
                    table.c.actor_moderator_id == filter.actor_id,
                    table.c.actor_admin_id == filter.actor_id,
                )
            )
        if filter.action_type is not None:
            stmt = stmt.where(table.c.action_type == filter.action_type.value)
        if filter.target_post_id is not None:
            stmt = stmt.where(table.c.target_post_id == filter.target_post_id)
        if filter.target_comment_id is not None:
            stmt = stmt.where(table.c.target_comment_id == filter.target_comment_id)
        if filter.report_id is not None:
            stmt = stmt.where(table.c.report_id == filter.report_id)
        if not filter.include_retired:
            stmt = stmt.where(table.c.retired_at.is_(None))
        return stmt

    async def find_by_id(
        self, action_id: ModerationActionId
    ) -> Optional[ModerationAction]:
        """Find a moderation action by ID."""
        stmt = select(moderation_actions_table).where(
            moderation_actions_table.c.id == action_id
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()

        if not row:
            return None
        return row_to_moderation_action(row._asdict())

    async def find_all(
        self,
        filter: ModerationActionFilter,
        sort: SortSpec,
        limit: int = 20,
        offset: int = 0,
    ) -> List[ModerationAction]:
        """Find moderation actions with filtering, sorting and pagination."""
        with logfire.span(
            "moderation_action_repository.find_all",
            sort=sort.field,
            direction=sort.direction,
            limit=limit,
            offset=offset,
        ):
            stmt = self._apply_filter(select(moderation_actions_table), filter)
            stmt = (
                apply_sort(stmt, moderation_actions_table, sort)
                .limit(limit)
                .offset(offset)
            )

            result = await self.session.execute(stmt)
            return [
                row_to_moderation_action(row._asdict()) for row in result.fetchall()
            ]

    async def count(self, filter: ModerationActionFilter) -> int:
        """Count moderation actions matching the given filters."""
        stmt = self._apply_filter(
            select(func.count()).select_from(moderation_actions_table), filter
        )
        result = await self.session.execute(stmt)
        return result.scalar() or 0

    async def add(self, action: ModerationAction) -> ModerationAction:
        """Append a new moderation action."""
        stmt = moderation_actions_table.insert().values(
            **moderation_action_to_dict(action)
        )
        await self.session.execute(stmt)
        await self.session.flush()
        return action

    async def retire(
        self, action_id: ModerationActionId
    ) -> Optional[ModerationAction]:
        """Mark an action as retired, unless it already is."""
        stmt = (
            update(moderation_actions_table)
            .where(moderation_actions_table.c.id == action_id)
            .where(moderation_actions_table.c.retired_at.is_(None))
            .values(retired_at=func.now())
            .returning(moderation_actions_table)
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()

        if row is None:
            return None

        await self.session.flush()
        return row_to_moderation_action(row._asdict())

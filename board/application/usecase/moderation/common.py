"""Shared pieces of the moderation use cases."""

from datetime import datetime

from pydantic import BaseModel

from board.domain.model import ModerationAction
from board.domain.service import CommentService, ModerationService, PostService
from board.domain.value import (
    CommentId,
    ContentType,
    ModerationActionType,
    PostId,
    Principal,
    ReportId,
)


class ModerationActionItem(BaseModel):
    """Moderation action item in responses."""

    action_id: str
    action_type: ModerationActionType
    actor_moderator_id: str | None
    actor_admin_id: str | None
    target_type: ContentType | None
    target_post_id: str | None
    target_comment_id: str | None
    report_id: str | None
    action_details: str | None
    created_at: datetime
    retired_at: datetime | None

    @classmethod
    def from_action(cls, action: ModerationAction) -> "ModerationActionItem":
        return cls(
            action_id=str(action.id),
            action_type=action.action_type,
            actor_moderator_id=(
                str(action.actor_moderator_id) if action.actor_moderator_id else None
            ),
            actor_admin_id=str(action.actor_admin_id) if action.actor_admin_id else None,
            target_type=action.target_type,
            target_post_id=str(action.target_post_id) if action.target_post_id else None,
            target_comment_id=(
                str(action.target_comment_id) if action.target_comment_id else None
            ),
            report_id=str(action.report_id) if action.report_id else None,
            action_details=action.action_details,
            created_at=action.created_at,
            retired_at=action.retired_at,
        )


class ActionEnforcer:
    """Applies a moderation action to its target and records it.

    Every check (target liveness, action validity, report existence) runs
    before the first write.
    """

    def __init__(
        self,
        comment_service: CommentService,
        post_service: PostService,
        moderation_service: ModerationService,
    ) -> None:
        self.comment_service = comment_service
        self.post_service = post_service
        self.moderation_service = moderation_service

    async def prepare(
        self,
        actor: Principal,
        action_type: ModerationActionType,
        target_post_id: PostId | None = None,
        target_comment_id: CommentId | None = None,
        report_id: ReportId | None = None,
        details: str | None = None,
    ) -> ModerationAction:
        """Check the target and build the action without writing.

        Raises:
            NotFoundError: If the target or report is missing or deleted
            ValidationError: If the targets don't fit the action type
        """
        action = await self.moderation_service.build_action(
            actor,
            action_type,
            target_post_id=target_post_id,
            target_comment_id=target_comment_id,
            report_id=report_id,
            details=details,
        )
        if target_comment_id is not None:
            await self.comment_service.get_active_comment(target_comment_id)
        if target_post_id is not None:
            await self.post_service.get_live_post(target_post_id)
        return action

    async def apply(self, action: ModerationAction) -> ModerationAction:
        """Carry out a prepared action's effect and append it to the log."""
        if action.action_type is ModerationActionType.DELETE:
            if action.target_comment_id is not None:
                comment = await self.comment_service.get_active_comment(
                    action.target_comment_id
                )
                await self.comment_service.soft_delete_comment(comment)
            elif action.target_post_id is not None:
                post = await self.post_service.get_live_post(action.target_post_id)
                await self.post_service.soft_delete_post(post)

        return await self.moderation_service.save_action(action)

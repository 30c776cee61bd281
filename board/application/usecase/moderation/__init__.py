"""Moderation action use cases."""

from .apply_moderation_action import (
    ApplyModerationActionRequest,
    ApplyModerationActionUseCase,
)
from .common import ActionEnforcer, ModerationActionItem
from .get_moderation_action import (
    GetModerationActionRequest,
    GetModerationActionUseCase,
)
from .list_moderation_actions import (
    ListModerationActionsRequest,
    ListModerationActionsResponse,
    ListModerationActionsUseCase,
)
from .retire_moderation_action import (
    RetireModerationActionRequest,
    RetireModerationActionUseCase,
)

__all__ = [
    "ActionEnforcer",
    "ApplyModerationActionRequest",
    "ApplyModerationActionUseCase",
    "GetModerationActionRequest",
    "GetModerationActionUseCase",
    "ListModerationActionsRequest",
    "ListModerationActionsResponse",
    "ListModerationActionsUseCase",
    "ModerationActionItem",
    "RetireModerationActionRequest",
    "RetireModerationActionUseCase",
]

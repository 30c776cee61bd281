"""Moderation action routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, status
from pydantic import BaseModel, Field

from board.application.usecase.moderation import (
    ApplyModerationActionRequest,
    ApplyModerationActionUseCase,
    GetModerationActionRequest,
    GetModerationActionUseCase,
    ListModerationActionsRequest,
    ListModerationActionsResponse,
    ListModerationActionsUseCase,
    ModerationActionItem,
    RetireModerationActionRequest,
    RetireModerationActionUseCase,
)
from board.domain.error import DomainError
from board.domain.service import JWTService
from board.domain.value import ModerationActionType
from board.interface.error import bad_request, require_principal, to_http_exception

router = APIRouter(
    prefix="/moderationActions", tags=["moderation"], route_class=DishkaRoute
)


class ApplyModerationActionAPIRequest(BaseModel):
    """API request for taking a moderation action."""

    action_type: ModerationActionType
    target_post_id: str | None = None
    target_comment_id: str | None = None
    report_id: str | None = None
    details: str | None = Field(default=None, max_length=2000)


@router.post(
    "", response_model=ModerationActionItem, status_code=status.HTTP_201_CREATED
)
async def apply_moderation_action(
    request: ApplyModerationActionAPIRequest,
    apply_moderation_action_use_case: FromDishka[ApplyModerationActionUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> ModerationActionItem:
    """Take a moderation action (moderator or admin).

    A ``delete`` action soft-deletes its target.

    Raises:
        HTTPException: 403 if not staff, 400 on inconsistent targets,
            404 if the target or report is missing
    """
    principal = require_principal(jwt_service, auth_token, "moderate content")

    try:
        return await apply_moderation_action_use_case.execute(
            ApplyModerationActionRequest(
                action_type=request.action_type,
                target_post_id=request.target_post_id,
                target_comment_id=request.target_comment_id,
                report_id=request.report_id,
                details=request.details,
                principal=principal,
            )
        )
    except DomainError as e:
        raise to_http_exception(e)
    except ValueError as e:
        raise bad_request(e)


@router.get("", response_model=ListModerationActionsResponse)
async def list_moderation_actions(
    list_moderation_actions_use_case: FromDishka[ListModerationActionsUseCase],
    jwt_service: FromDishka[JWTService],
    actor_id: str | None = None,
    action_type: ModerationActionType | None = None,
    target_post_id: str | None = None,
    target_comment_id: str | None = None,
    report_id: str | None = None,
    include_retired: bool = False,
    page: int | None = None,
    limit: int | None = None,
    sort: str | None = None,
    auth_token: str | None = Cookie(default=None),
) -> ListModerationActionsResponse:
    """List moderation actions (moderator or admin).

    Sortable by created_at and action_type.
    """
    principal = require_principal(jwt_service, auth_token, "list moderation actions")

    try:
        return await list_moderation_actions_use_case.execute(
            ListModerationActionsRequest(
                actor_id=actor_id,
                action_type=action_type,
                target_post_id=target_post_id,
                target_comment_id=target_comment_id,
                report_id=report_id,
                include_retired=include_retired,
                page=page,
                limit=limit,
                sort=sort,
                principal=principal,
            )
        )
    except DomainError as e:
        raise to_http_exception(e)
    except ValueError as e:
        raise bad_request(e)


@router.get("/{action_id}", response_model=ModerationActionItem)
async def get_moderation_action(
    action_id: str,
    get_moderation_action_use_case: FromDishka[GetModerationActionUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> ModerationActionItem:
    """Get a moderation action (moderator or admin)."""
    principal = require_principal(jwt_service, auth_token, "view moderation actions")

    try:
        return await get_moderation_action_use_case.execute(
            GetModerationActionRequest(action_id=action_id, principal=principal)
        )
    except DomainError as e:
        raise to_http_exception(e)
    except ValueError as e:
        raise bad_request(e)


@router.delete("/{action_id}", response_model=ModerationActionItem)
async def retire_moderation_action(
    action_id: str,
    retire_moderation_action_use_case: FromDishka[RetireModerationActionUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> ModerationActionItem:
    """Retire a moderation action from the audit log (admin only).

    The moderation itself is not undone.

    Raises:
        HTTPException: 403 if not an admin, 404 if missing or already retired
    """
    principal = require_principal(jwt_service, auth_token, "retire moderation actions")

    try:
        return await retire_moderation_action_use_case.execute(
            RetireModerationActionRequest(action_id=action_id, principal=principal)
        )
    except DomainError as e:
        raise to_http_exception(e)
    except ValueError as e:
        raise bad_request(e)

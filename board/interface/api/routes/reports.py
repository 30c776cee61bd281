"""Report routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, status
from pydantic import BaseModel, Field

from board.application.usecase.report import (
    CreateReportRequest,
    CreateReportUseCase,
    GetReportRequest,
    GetReportUseCase,
    ListReportsRequest,
    ListReportsResponse,
    ListReportsUseCase,
    ReportItem,
    ResolveReportRequest,
    ResolveReportResponse,
    ResolveReportUseCase,
)
from board.domain.error import DomainError
from board.domain.service import JWTService
from board.domain.value import ContentType, ModerationActionType, ReportStatus
from board.interface.error import bad_request, require_principal, to_http_exception

router = APIRouter(prefix="/reports", tags=["reports"], route_class=DishkaRoute)


class CreateReportAPIRequest(BaseModel):
    """API request for reporting a post or comment."""

    content_type: ContentType
    target_post_id: str | None = None
    target_comment_id: str | None = None
    reason: str = Field(max_length=2000)


class ResolveReportAPIRequest(BaseModel):
    """API request for closing a report."""

    status: ReportStatus
    note: str | None = Field(default=None, max_length=2000)
    action_type: ModerationActionType | None = None
    action_details: str | None = Field(default=None, max_length=2000)


@router.post("", response_model=ReportItem, status_code=status.HTTP_201_CREATED)
async def create_report(
    request: CreateReportAPIRequest,
    create_report_use_case: FromDishka[CreateReportUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> ReportItem:
    """Report a post or comment.

    Requires authentication.

    Raises:
        HTTPException: 401 if not authenticated, 404 if the target is missing,
            409 if the caller already reported it
    """
    principal = require_principal(jwt_service, auth_token, "report content")

    try:
        return await create_report_use_case.execute(
            CreateReportRequest(
                content_type=request.content_type,
                target_post_id=request.target_post_id,
                target_comment_id=request.target_comment_id,
                reason=request.reason,
                principal=principal,
            )
        )
    except DomainError as e:
        raise to_http_exception(e)
    except ValueError as e:
        raise bad_request(e)


@router.put("/{report_id}", response_model=ResolveReportResponse)
async def resolve_report(
    report_id: str,
    request: ResolveReportAPIRequest,
    resolve_report_use_case: FromDishka[ResolveReportUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> ResolveReportResponse:
    """Resolve or reject a pending report (moderator or admin).

    Raises:
        HTTPException: 403 if not staff, 404 if missing, 409 if the report
            is no longer pending
    """
    principal = require_principal(jwt_service, auth_token, "resolve reports")

    try:
        return await resolve_report_use_case.execute(
            ResolveReportRequest(
                report_id=report_id,
                status=request.status,
                note=request.note,
                action_type=request.action_type,
                action_details=request.action_details,
                principal=principal,
            )
        )
    except DomainError as e:
        raise to_http_exception(e)
    except ValueError as e:
        raise bad_request(e)


@router.get("", response_model=ListReportsResponse)
async def list_reports(
    list_reports_use_case: FromDishka[ListReportsUseCase],
    jwt_service: FromDishka[JWTService],
    status: ReportStatus | None = None,
    content_type: ContentType | None = None,
    reporter_id: str | None = None,
    target_id: str | None = None,
    page: int | None = None,
    limit: int | None = None,
    sort: str | None = None,
    auth_token: str | None = Cookie(default=None),
) -> ListReportsResponse:
    """List reports (moderator or admin).

    Sortable by created_at, status and updated_at.
    """
    principal = require_principal(jwt_service, auth_token, "list reports")

    try:
        return await list_reports_use_case.execute(
            ListReportsRequest(
                status=status,
                content_type=content_type,
                reporter_id=reporter_id,
                target_id=target_id,
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


@router.get("/{report_id}", response_model=ReportItem)
async def get_report(
    report_id: str,
    get_report_use_case: FromDishka[GetReportUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> ReportItem:
    """Get a report (its reporter or staff)."""
    principal = require_principal(jwt_service, auth_token, "view reports")

    try:
        return await get_report_use_case.execute(
            GetReportRequest(report_id=report_id, principal=principal)
        )
    except DomainError as e:
        raise to_http_exception(e)
    except ValueError as e:
        raise bad_request(e)

"""List reports use case."""

from uuid import UUID

from pydantic import BaseModel

from board.application.pagination import (
    REPORT_SORT_FIELDS,
    build_page,
    parse_page_request,
)
from board.domain.repository import ReportFilter
from board.domain.service import AccessPolicy, ModerationService, Operation
from board.domain.value import ContentType, Page, Principal, ReportStatus, UserId

from .common import ReportItem


class ListReportsRequest(BaseModel):
    """List reports request."""

    status: ReportStatus | None = None
    content_type: ContentType | None = None
    reporter_id: str | None = None
    target_id: str | None = None
    page: int | None = None
    limit: int | None = None
    sort: str | None = None
    principal: Principal


ListReportsResponse = Page[ReportItem]


class ListReportsUseCase:
    """Use case for the moderation queue (staff only)."""

    def __init__(
        self, moderation_service: ModerationService, access_policy: AccessPolicy
    ) -> None:
        self.moderation_service = moderation_service
        self.access_policy = access_policy

    async def execute(self, request: ListReportsRequest) -> ListReportsResponse:
        """Execute list reports flow.

        Raises:
            NotAuthorizedError: If the caller is not staff
            ValidationError: If page or limit is out of range
        """
        self.access_policy.authorize(request.principal, Operation.LIST_REPORTS)
        page_request = parse_page_request(
            request.page, request.limit, request.sort, REPORT_SORT_FIELDS
        )

        filter = ReportFilter(
            status=request.status,
            content_type=request.content_type,
            reporter_id=UserId(UUID(request.reporter_id)) if request.reporter_id else None,
            target_id=UUID(request.target_id) if request.target_id else None,
        )

        reports = await self.moderation_service.list_reports(
            filter=filter,
            sort=page_request.sort,
            limit=page_request.limit,
            offset=page_request.offset,
        )
        total = await self.moderation_service.count_reports(filter)

        return build_page(reports, page_request, total, ReportItem.from_report)

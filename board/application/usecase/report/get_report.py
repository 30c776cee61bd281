"""Get report use case."""

from uuid import UUID

from pydantic import BaseModel

from board.domain.error import NotFoundError
from board.domain.service import AccessPolicy, ModerationService, Operation
from board.domain.value import Principal, ReportId

from .common import ReportItem


class GetReportRequest(BaseModel):
    """Get report request."""

    report_id: str  # UUID string
    principal: Principal


class GetReportUseCase:
    """Use case for reading one report (its reporter or staff)."""

    def __init__(
        self, moderation_service: ModerationService, access_policy: AccessPolicy
    ) -> None:
        self.moderation_service = moderation_service
        self.access_policy = access_policy

    async def execute(self, request: GetReportRequest) -> ReportItem:
        report = await self.moderation_service.get_report(
            ReportId(UUID(request.report_id))
        )
        if report is None:
            raise NotFoundError("Report", request.report_id)

        self.access_policy.authorize(request.principal, Operation.VIEW_REPORT, report)
        return ReportItem.from_report(report)

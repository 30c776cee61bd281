"""Response items shared by the report use cases."""

from datetime import datetime

from pydantic import BaseModel

from board.domain.model import Report
from board.domain.value import ContentType, ReportStatus


class ReportItem(BaseModel):
    """Report item in responses."""

    report_id: str
    reporter_id: str
    content_type: ContentType
    target_post_id: str | None
    target_comment_id: str | None
    reason: str
    status: ReportStatus
    resolution_note: str | None
    resolved_by_id: str | None
    resolved_at: datetime | None
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_report(cls, report: Report) -> "ReportItem":
        return cls(
            report_id=str(report.id),
            reporter_id=str(report.reporter_id),
            content_type=report.content_type,
            target_post_id=str(report.target_post_id) if report.target_post_id else None,
            target_comment_id=(
                str(report.target_comment_id) if report.target_comment_id else None
            ),
            reason=report.reason,
            status=report.status,
            resolution_note=report.resolution_note,
            resolved_by_id=str(report.resolved_by_id) if report.resolved_by_id else None,
            resolved_at=report.resolved_at,
            created_at=report.created_at,
            updated_at=report.updated_at,
        )

"""In-memory report repository for testing."""

from typing import Optional
from uuid import UUID

from board.domain.model.report import Report
from board.domain.repository.report import ReportFilter, ReportRepository
from board.domain.value import ContentType, ReportId, ReportStatus, SortSpec, UserId

from .base import sort_records


class InMemoryReportRepository(ReportRepository):
    """In-memory implementation of ReportRepository for testing."""

    def __init__(self) -> None:
        self._reports: dict[ReportId, Report] = {}

    def _matches(self, report: Report, filter: ReportFilter) -> bool:
        if filter.reporter_id is not None and report.reporter_id != filter.reporter_id:
            return False
        if (
            filter.content_type is not None
            and report.content_type != filter.content_type
        ):
            return False
        if filter.target_id is not None and report.target_id != filter.target_id:
            return False
        if filter.status is not None and report.status != filter.status:
            return False
        return True

    async def find_by_id(self, report_id: ReportId) -> Optional[Report]:
        """Find a report by ID."""
        return self._reports.get(report_id)

    async def find_by_reporter_and_target(
        self,
        reporter_id: UserId,
        content_type: ContentType,
        target_id: UUID,
    ) -> Optional[Report]:
        """Find an existing report by the same member on the same content."""
        for report in self._reports.values():
            if (
                report.reporter_id == reporter_id
                and report.content_type == content_type
                and report.target_id == target_id
            ):
                return report
        return None

    async def find_all(
        self,
        filter: ReportFilter,
        sort: SortSpec,
        limit: int = 20,
        offset: int = 0,
    ) -> list[Report]:
        """Find reports with filtering, sorting and pagination."""
        reports = [r for r in self._reports.values() if self._matches(r, filter)]
        return sort_records(reports, sort)[offset : offset + limit]

    async def count(self, filter: ReportFilter) -> int:
        """Count reports matching the given filters."""
        return sum(1 for r in self._reports.values() if self._matches(r, filter))

    async def save(self, report: Report) -> Report:
        """Save a report."""
        self._reports[report.id] = report
        return report

    async def close(self, report: Report) -> Optional[Report]:
        """Store a closing decision, but only if the report is still pending."""
        current = self._reports.get(report.id)
        if current is None or current.status != ReportStatus.PENDING:
            return None
        self._reports[report.id] = report
        return report

"""PostgreSQL implementation of Report repository."""

from typing import List, Optional
from uuid import UUID

import logfire
from sqlalchemy import Select, func, or_, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from board.domain.model import Report
from board.domain.repository.report import ReportFilter, ReportRepository
from board.domain.value import ContentType, ReportId, ReportStatus, SortSpec, UserId
from board.persistence.mappers import report_to_dict, row_to_report
from board.persistence.repository.base import apply_sort
from board.persistence.tables import reports_table


def _target_column(content_type: ContentType):
    if content_type is ContentType.POST:
        return reports_table.c.target_post_id
    return reports_table.c.target_comment_id


class PostgresReportRepository(ReportRepository):
    """PostgreSQL implementation of ReportRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    def _apply_filter(self, stmt: Select, filter: ReportFilter) -> Select:
        if filter.reporter_id is not None:
            stmt = stmt.where(reports_table.c.reporter_id == filter.reporter_id)
        if filter.content_type is not None:
            stmt = stmt.where(reports_table.c.content_type == filter.content_type.value)
        if filter.status is not None:
            stmt = stmt.where(reports_table.c.status == filter.status.value)
        if filter.target_id is not None:
            stmt = stmt.where(
                or_(
                    reports_table.c.target_post_id == filter.target_id,
                    reports_table.c.target_comment_id == filter.target_id,
                )
            )
        return stmt

    async def find_by_id(self, report_id: ReportId) -> Optional[Report]:
        """Find a report by ID."""
        stmt = select(reports_table).where(reports_table.c.id == report_id)
        result = await self.session.execute(stmt)
        row = result.fetchone()

        if not row:
            return None
        return row_to_report(row._asdict())

    async def find_by_reporter_and_target(
        self,
        reporter_id: UserId,
        content_type: ContentType,
        target_id: UUID,
    ) -> Optional[Report]:
        """Find an existing report by the same member on the same content."""
        stmt = select(reports_table).where(
            reports_table.c.reporter_id == reporter_id,
            _target_column(content_type) == target_id,
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()

        if not row:
            return None
        return row_to_report(row._asdict())

    async def find_all(
        self,
        filter: ReportFilter,
        sort: SortSpec,
        limit: int = 20,
        offset: int = 0,
    ) -> List[Report]:
        """Find reports with filtering, sorting and pagination."""
        with logfire.span(
            "report_repository.find_all",
            sort=sort.field,
            direction=sort.direction,
            limit=limit,
            offset=offset,
        ):
            stmt = self._apply_filter(select(reports_table), filter)
            stmt = apply_sort(stmt, reports_table, sort).limit(limit).offset(offset)

            result = await self.session.execute(stmt)
            return [row_to_report(row._asdict()) for row in result.fetchall()]

    async def count(self, filter: ReportFilter) -> int:
        """Count reports matching the given filters."""
        stmt = self._apply_filter(
            select(func.count()).select_from(reports_table), filter
        )
        result = await self.session.execute(stmt)
        return result.scalar() or 0

    async def save(self, report: Report) -> Report:
        """Save a report (create or update)."""
        existing = await self.find_by_id(report.id)
        report_dict = report_to_dict(report)

        if existing:
            stmt = (
                reports_table.update()
                .where(reports_table.c.id == report.id)
                .values(**report_dict)
            )
        else:
            stmt = reports_table.insert().values(**report_dict)
        await self.session.execute(stmt)

        await self.session.flush()
        return report

    async def close(self, report: Report) -> Optional[Report]:
        """Store a closing decision, but only if the report is still pending."""
        stmt = (
            update(reports_table)
            .where(reports_table.c.id == report.id)
            .where(reports_table.c.status == ReportStatus.PENDING.value)
            .values(
                status=report.status.value,
                resolution_note=report.resolution_note,
                resolved_by_id=report.resolved_by_id,
                resolved_at=report.resolved_at,
                updated_at=report.updated_at,
            )
            .returning(reports_table)
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()

        if row is None:
            return None

        await self.session.flush()
        return row_to_report(row._asdict())

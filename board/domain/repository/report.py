"""Report repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional
from uuid import UUID

from board.domain.model.report import Report
from board.domain.value import (
    ContentType,
    ReportId,
    ReportStatus,
    SortSpec,
    UserId,
)
from board.domain.value.common import ValueObject


class ReportFilter(ValueObject):
    """Equality filters for report listings."""

    reporter_id: Optional[UserId] = None
    content_type: Optional[ContentType] = None
    target_id: Optional[UUID] = None
    status: Optional[ReportStatus] = None


class ReportRepository(ABC):
    """Repository for Report entity."""

    @abstractmethod
    async def find_by_id(self, report_id: ReportId) -> Optional[Report]:
        """Find a report by ID.

        Args:
            report_id: The report's unique identifier

        Returns:
            The report if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_reporter_and_target(
        self,
        reporter_id: UserId,
        content_type: ContentType,
        target_id: UUID,
    ) -> Optional[Report]:
        """Find an existing report by the same member on the same content.

        Args:
            reporter_id: The reporting member
            content_type: Whether the target is a post or a comment
            target_id: The reported post or comment ID

        Returns:
            The existing report if any, None otherwise
        """
        pass

    @abstractmethod
    async def find_all(
        self,
        filter: ReportFilter,
        sort: SortSpec,
        limit: int = 20,
        offset: int = 0,
    ) -> List[Report]:
        """Find reports with filtering, sorting and pagination.

        Args:
            filter: Equality filters to apply
            sort: Sort field and direction
            limit: Maximum number of reports to return
            offset: Number of reports to skip

        Returns:
            List of reports matching the criteria
        """
        pass

    @abstractmethod
    async def count(self, filter: ReportFilter) -> int:
        """Count reports matching the given filters."""
        pass

    @abstractmethod
    async def save(self, report: Report) -> Report:
        """Save a report (create or update).

        Args:
            report: The report to save

        Returns:
            The saved report
        """
        pass

    @abstractmethod
    async def close(self, report: Report) -> Optional[Report]:
        """Store a closing decision, but only if the report is still pending.

        Args:
            report: The report carrying its new status and resolution fields

        Returns:
            The closed report, or None if it does not exist or was already
            closed
        """
        pass

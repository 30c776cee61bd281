"""Report use cases."""

from .common import ReportItem
from .create_report import CreateReportRequest, CreateReportUseCase
from .get_report import GetReportRequest, GetReportUseCase
from .list_reports import ListReportsRequest, ListReportsResponse, ListReportsUseCase
from .resolve_report import (
    ResolveReportRequest,
    ResolveReportResponse,
    ResolveReportUseCase,
)

__all__ = [
    "CreateReportRequest",
    "CreateReportUseCase",
    "GetReportRequest",
    "GetReportUseCase",
    "ListReportsRequest",
    "ListReportsResponse",
    "ListReportsUseCase",
    "ReportItem",
    "ResolveReportRequest",
    "ResolveReportResponse",
    "ResolveReportUseCase",
]

"""Paging and sorting value objects shared by all list queries."""

import math
from enum import Enum
from typing import Generic, TypeVar

from pydantic import BaseModel, Field

from board.domain.value.common import ValueObject

T = TypeVar("T")

DEFAULT_PAGE = 1
DEFAULT_LIMIT = 20
MAX_LIMIT = 100
DEFAULT_SORT_FIELD = "created_at"


class SortDirection(str, Enum):
    """Sort direction."""

    ASC = "asc"
    DESC = "desc"


class SortSpec(ValueObject):
    """A resolved sort column and direction.

    The field is always a member of the caller's allow-list by the time a
    SortSpec reaches a repository.
    """

    field: str = DEFAULT_SORT_FIELD
    direction: SortDirection = SortDirection.DESC

    @property
    def descending(self) -> bool:
        return self.direction is SortDirection.DESC


class PageRequest(ValueObject):
    """A validated page request."""

    page: int = Field(default=DEFAULT_PAGE, ge=1)
    limit: int = Field(default=DEFAULT_LIMIT, ge=1, le=MAX_LIMIT)
    sort: SortSpec = SortSpec()

    @property
    def offset(self) -> int:
        """Number of records skipped before this page."""
        return (self.page - 1) * self.limit


class PaginationInfo(ValueObject):
    """Pagination block of a list envelope."""

    current: int
    limit: int
    records: int
    pages: int

    @classmethod
    def for_total(cls, request: PageRequest, records: int) -> "PaginationInfo":
        """Build the pagination block for a request and a total record count."""
        return cls(
            current=request.page,
            limit=request.limit,
            records=records,
            pages=math.ceil(records / request.limit),
        )


class Page(BaseModel, Generic[T]):
    """Paginated list envelope."""

    data: list[T]
    pagination: PaginationInfo

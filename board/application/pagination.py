"""Query/pagination adapter shared by every list endpoint.

Turns raw ``page``/``limit``/``sort`` query parameters into a validated
PageRequest and wraps a page of results in the list envelope. Out-of-range
page or limit values are rejected, never clamped. An unknown sort field or
direction silently falls back to the default sort.
"""

from typing import Callable, Iterable, TypeVar

from board.domain.error import ValidationError
from board.domain.value import Page, PageRequest, PaginationInfo, SortDirection, SortSpec
from board.domain.value.pagination import (
    DEFAULT_LIMIT,
    DEFAULT_PAGE,
    DEFAULT_SORT_FIELD,
    MAX_LIMIT,
)

S = TypeVar("S")
T = TypeVar("T")

COMMENT_SORT_FIELDS = frozenset({"created_at", "updated_at", "nesting_level"})
REPORT_SORT_FIELDS = frozenset({"created_at", "status", "updated_at"})
MODERATION_ACTION_SORT_FIELDS = frozenset({"created_at", "action_type"})

DEFAULT_SORT = SortSpec(field=DEFAULT_SORT_FIELD, direction=SortDirection.DESC)


def parse_sort(sort: str | None, allowed: frozenset[str]) -> SortSpec:
    """Resolve a ``field[:asc|desc]`` expression against an allow-list.

    Args:
        sort: Raw sort expression, e.g. ``"created_at:asc"``
        allowed: Sortable fields for the resource

    Returns:
        The resolved sort spec, or the default when the expression is unusable
    """
    if not sort:
        return DEFAULT_SORT

    field, _, direction = sort.strip().partition(":")
    field = field.strip()
    direction = direction.strip().lower() or SortDirection.DESC.value

    if field not in allowed:
        return DEFAULT_SORT
    try:
        return SortSpec(field=field, direction=SortDirection(direction))
    except ValueError:
        return DEFAULT_SORT


def parse_page_request(
    page: int | None,
    limit: int | None,
    sort: str | None,
    allowed: frozenset[str],
) -> PageRequest:
    """Validate paging parameters and resolve the sort.

    Args:
        page: 1-based page number (None for the first page)
        limit: Page size (None for the default)
        sort: Raw sort expression
        allowed: Sortable fields for the resource

    Returns:
        A validated page request

    Raises:
        ValidationError: If page < 1 or limit is outside 1..100
    """
    page = DEFAULT_PAGE if page is None else page
    limit = DEFAULT_LIMIT if limit is None else limit

    if page < 1:
        raise ValidationError(f"page must be >= 1, got {page}")
    if not 1 <= limit <= MAX_LIMIT:
        raise ValidationError(f"limit must be between 1 and {MAX_LIMIT}, got {limit}")

    return PageRequest(page=page, limit=limit, sort=parse_sort(sort, allowed))


def build_page(
    items: Iterable[S],
    request: PageRequest,
    records: int,
    convert: Callable[[S], T],
) -> Page[T]:
    """Wrap one page of results in the list envelope.

    Args:
        items: Entities on the requested page
        request: The page request they were fetched with
        records: Total number of matching records
        convert: Maps an entity to its response item

    Returns:
        The paginated envelope
    """
    return Page(
        data=[convert(item) for item in items],
        pagination=PaginationInfo.for_total(request, records),
    )

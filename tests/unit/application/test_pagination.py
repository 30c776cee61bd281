"""Unit tests for the query/pagination adapter."""

from datetime import datetime, timedelta
from uuid import uuid4

import pytest

from board.application.pagination import (
    COMMENT_SORT_FIELDS,
    DEFAULT_SORT,
    build_page,
    parse_page_request,
    parse_sort,
)
from board.domain.error import ValidationError
from board.domain.model import Comment
from board.domain.value import CommentId, PostId, SortDirection, SortSpec, UserId
from board.persistence.repository.inmemory.base import sort_records


class TestParseSort:
    """Sort expressions resolve against an allow-list."""

    def test_missing_sort_uses_default(self):
        assert parse_sort(None, COMMENT_SORT_FIELDS) == DEFAULT_SORT

    def test_field_and_direction(self):
        spec = parse_sort("nesting_level:asc", COMMENT_SORT_FIELDS)

        assert spec == SortSpec(field="nesting_level", direction=SortDirection.ASC)

    def test_field_without_direction_sorts_descending(self):
        spec = parse_sort("updated_at", COMMENT_SORT_FIELDS)

        assert spec.field == "updated_at"
        assert spec.descending

    @pytest.mark.parametrize(
        "raw", ["body", "author_id:asc", "created_at:sideways", ":asc", "  "]
    )
    def test_unusable_sort_falls_back_silently(self, raw):
        assert parse_sort(raw, COMMENT_SORT_FIELDS) == DEFAULT_SORT


class TestParsePageRequest:
    """Page and limit are validated, never clamped."""

    def test_defaults(self):
        request = parse_page_request(None, None, None, COMMENT_SORT_FIELDS)

        assert request.page == 1
        assert request.limit == 20
        assert request.offset == 0

    def test_offset_from_page(self):
        request = parse_page_request(3, 10, None, COMMENT_SORT_FIELDS)

        assert request.offset == 20

    @pytest.mark.parametrize("page", [0, -1])
    def test_page_below_one_rejected(self, page):
        with pytest.raises(ValidationError):
            parse_page_request(page, 10, None, COMMENT_SORT_FIELDS)

    @pytest.mark.parametrize("limit", [0, 101, -5])
    def test_limit_out_of_range_rejected(self, limit):
        with pytest.raises(ValidationError):
            parse_page_request(1, limit, None, COMMENT_SORT_FIELDS)

    @pytest.mark.parametrize("limit", [1, 100])
    def test_limit_bounds_accepted(self, limit):
        assert parse_page_request(1, limit, None, COMMENT_SORT_FIELDS).limit == limit


class TestBuildPage:
    """The list envelope."""

    def test_empty_result(self):
        request = parse_page_request(1, 10, None, COMMENT_SORT_FIELDS)

        page = build_page([], request, 0, str)

        assert page.data == []
        assert page.pagination.model_dump() == {
            "current": 1,
            "limit": 10,
            "records": 0,
            "pages": 0,
        }

    def test_page_count_rounds_up(self):
        request = parse_page_request(2, 10, None, COMMENT_SORT_FIELDS)

        page = build_page(["a", "b"], request, 12, str.upper)

        assert page.data == ["A", "B"]
        assert page.pagination.pages == 2
        assert page.pagination.current == 2

    def test_page_past_end_is_empty_not_an_error(self):
        request = parse_page_request(5, 10, None, COMMENT_SORT_FIELDS)

        page = build_page([], request, 12, str)

        assert page.data == []
        assert page.pagination.current == 5
        assert page.pagination.records == 12


class TestSortRecords:
    """Ties on the sort field are broken by id so paging is stable."""

    def test_ties_ordered_by_id(self):
        created = datetime(2026, 1, 1)
        comments = [
            Comment(
                id=CommentId(uuid4()),
                post_id=PostId(uuid4()),
                author_id=UserId(uuid4()),
                body="Same time",
                created_at=created,
            )
            for _ in range(5)
        ]
        spec = SortSpec(field="created_at", direction=SortDirection.ASC)

        ordered = sort_records(comments, spec)

        assert [str(c.id) for c in ordered] == sorted(str(c.id) for c in comments)

    def test_descending(self):
        base = datetime(2026, 1, 1)
        comments = [
            Comment(
                id=CommentId(uuid4()),
                post_id=PostId(uuid4()),
                author_id=UserId(uuid4()),
                body=str(i),
                created_at=base + timedelta(minutes=i),
            )
            for i in range(3)
        ]

        ordered = sort_records(comments, DEFAULT_SORT)

        assert [c.body for c in ordered] == ["2", "1", "0"]

"""Helpers shared by the in-memory repositories."""

from enum import Enum
from typing import Any, Sequence, TypeVar

from board.domain.value import SortSpec

T = TypeVar("T")


def sort_records(records: Sequence[T], sort: SortSpec) -> list[T]:
    """Sort records like the SQL repositories do, breaking ties by id."""

    def key(record: Any) -> tuple:
        value = getattr(record, sort.field)
        if isinstance(value, Enum):
            value = value.value
        return (value, str(record.id))

    return sorted(records, key=key, reverse=sort.descending)

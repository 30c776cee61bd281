"""Helpers shared by the PostgreSQL repositories."""

from sqlalchemy import Select, Table, asc, desc

from board.domain.value import SortSpec


def apply_sort(stmt: Select, table: Table, sort: SortSpec) -> Select:
    """Order a select by the sort spec, breaking ties by id.

    Args:
        stmt: Select statement
        table: Table whose columns are sorted on
        sort: Resolved sort spec (field is already allow-listed)

    Returns:
        The ordered statement
    """
    direction = desc if sort.descending else asc
    return stmt.order_by(direction(table.c[sort.field]), direction(table.c.id))

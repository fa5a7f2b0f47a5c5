"""Helpers for the actions repository."""

from typing import Final

from sqlalchemy import ColumnElement
from sqlmodel import col, select
from sqlmodel.sql.expression import SelectOfScalar

from .models import ActionRecord
from .schemas import ActionQueryArgs

__all__ = ["build_query"]


_ORDER_COLUMNS: Final = {
    "hook": col(ActionRecord.hook),
    "group": col(ActionRecord.group_slug),
}


def build_query(
    args: ActionQueryArgs, *, default_per_page: int
) -> SelectOfScalar[ActionRecord]:
    """Build the SQL query for a store lookup.

    Args:
        args: Store query arguments.
        default_per_page: Page size used when ``args.per_page`` is missing.

    Returns:
        SQLModel *Select* over action rows, filtered, ordered and paginated.
    """
    query = select(ActionRecord).where(col(ActionRecord.status) == args.status)

    if args.group:
        query = query.where(col(ActionRecord.group_slug) == args.group)

    query = query.order_by(*_order_by(args.orderby))

    per_page = default_per_page if args.per_page is None else args.per_page
    if per_page >= 0:
        query = query.limit(per_page)

    offset = max(args.offset or 0, 0)
    if offset:
        query = query.offset(offset)

    return query


def _order_by(orderby: str) -> list[ColumnElement]:
    """Return ORDER BY columns: the requested field first, then run date and id.

    Args:
        orderby: Validated ordering field or an empty string.

    Returns:
        Ascending column expressions.
    """
    columns: list[ColumnElement] = []
    if orderby in _ORDER_COLUMNS:
        columns.append(_ORDER_COLUMNS[orderby].asc())
    columns.extend((
        col(ActionRecord.scheduled_date_gmt).asc(),
        col(ActionRecord.id).asc(),
    ))
    return columns

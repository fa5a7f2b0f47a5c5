"""Query schemas for scheduled actions."""

from enum import StrEnum
from typing import Final, Literal

from pydantic import BaseModel, Field

from scheduler_admin.common.action_status import ActionStatus

__all__ = ["ActionQueryArgs", "SortOrder", "normalize_order", "prepare_actions_query"]


OrderBy = Literal["hook", "group", ""]

_ORDERABLE_FIELDS: Final[frozenset[str]] = frozenset({"hook", "group"})


class SortOrder(StrEnum):
    """Direction of the displayed action list."""

    ASC = "ASC"
    DESC = "DESC"


class ActionQueryArgs(BaseModel):
    """Arguments passed to the action store."""

    offset: int | None = Field(None, description="Number of actions to skip")
    per_page: int | None = Field(
        None, description="Maximum number of actions to return, negative for all"
    )
    group: str | None = Field(None, description="Only return actions of this group")
    status: ActionStatus = Field(
        ActionStatus.PENDING, description="Status of the returned actions"
    )
    orderby: OrderBy = Field("", description="Primary ordering field, empty for date")


def prepare_actions_query(
    *,
    offset: int | None = None,
    page: int | None = None,
    group: str | None = None,
    orderby: str | None = None,
) -> ActionQueryArgs:
    """Map request query parameters to store query arguments.

    Only ``orderby`` is checked here; it falls back to an empty value unless it
    names a field that can be ordered by. Offsets and page sizes are passed
    through for the store to interpret.

    Args:
        offset: Number of actions to skip.
        page: Page size requested by the dashboard.
        group: Group slug to filter by.
        orderby: Requested ordering field.

    Returns:
        Arguments for a pending-action store query.
    """
    field = (orderby or "").strip().lower()
    return ActionQueryArgs(
        offset=offset,
        per_page=page,
        group=group,
        status=ActionStatus.PENDING,
        orderby=field if field in _ORDERABLE_FIELDS else "",  # type: ignore[arg-type]
    )


def normalize_order(order: str | None) -> SortOrder:
    """Return ``DESC`` for a case-insensitive ``desc``, otherwise ``ASC``."""
    if order and order.strip().upper() == SortOrder.DESC:
        return SortOrder.DESC
    return SortOrder.ASC

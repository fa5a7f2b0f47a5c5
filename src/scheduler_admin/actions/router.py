"""Actions router."""

from typing import Annotated

from fastapi import APIRouter, Depends, Query
from loguru import logger

from .actions_model import ActionDisplayModel
from .repository import ActionStore, get_action_store
from .schemas import normalize_order, prepare_actions_query
from .service import ActionReportFormatter, get_action_formatter, get_actions_svc

__all__ = ["router"]


router = APIRouter(tags=["Actions"])


@router.get(
    "",
    summary="Get pending scheduled actions",
    response_model_exclude_none=True,
)
async def get_actions(  # noqa: PLR0913, PLR0917
    store: Annotated[ActionStore, Depends(get_action_store)],
    formatter: Annotated[ActionReportFormatter, Depends(get_action_formatter)],
    offset: Annotated[int | None, Query()] = None,
    page: Annotated[int | None, Query()] = None,
    group: Annotated[str | None, Query()] = None,
    orderby: Annotated[str | None, Query()] = None,
    order: Annotated[str | None, Query()] = None,
) -> list[ActionDisplayModel]:
    """Get pending actions with their schedule rendered for display.

    Args:
        store: Action store for the request.
        formatter: Formatter created at startup.
        offset: Number of actions to skip.
        page: Number of actions per page (default 5, negative for all).
        group: Only list actions of this group.
        orderby: Sort by ``hook`` or ``group``; other values sort by date.
        order: ``ASC`` (default) or ``DESC``, case-insensitive.

    Returns:
        List of display records, sorted by the requested field and run date.
    """
    args = prepare_actions_query(offset=offset, page=page, group=group, orderby=orderby)
    sort_order = normalize_order(order)
    logger.debug("Fetching actions with parameters", args=str(args), order=sort_order)
    return await get_actions_svc(store, formatter, args, sort_order)

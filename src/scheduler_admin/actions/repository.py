"""Actions repository."""

from typing import Annotated, Any, Protocol

from fastapi import Depends
from loguru import logger
from sqlalchemy.exc import SQLAlchemyError
from sqlmodel.ext.asyncio.session import AsyncSession

from scheduler_admin.config.config import settings
from scheduler_admin.config.db import get_session

from .exceptions import ActionStoreError
from .models import ActionRecord
from .query_builder import build_query
from .schedule import ScheduledAction, resolve_schedule
from .schemas import ActionQueryArgs

__all__ = ["ActionStore", "SQLActionStore", "get_action_store", "load_action"]


class ActionStore(Protocol):
    """Read interface of the host task store."""

    async def query_scheduled_actions(
        self, args: ActionQueryArgs
    ) -> dict[int, ScheduledAction]:
        """Return matching actions keyed by action ID, in store order."""
        ...


class SQLActionStore:
    """Action store backed by the host scheduler's action table."""

    def __init__(
        self, db: AsyncSession, default_per_page: int | None = None
    ) -> None:
        """Initialize with a database session and the default page size."""
        self._db = db
        self._default_per_page = (
            settings.actions_default_per_page
            if default_per_page is None
            else default_per_page
        )

    async def query_scheduled_actions(
        self, args: ActionQueryArgs
    ) -> dict[int, ScheduledAction]:
        """Run a store query and load each row as a scheduled action.

        Args:
            args: Filter, ordering and pagination arguments.

        Returns:
            Actions keyed by ID, in the order returned by the store.

        Raises:
            ActionStoreError: If the database query fails.
        """
        stmt = build_query(args, default_per_page=self._default_per_page)
        try:
            result = await self._db.exec(stmt)
            rows = result.all()
        except SQLAlchemyError as e:
            logger.error("Action store query failed", error=str(e))
            raise ActionStoreError from e

        actions = {row.id: load_action(row) for row in rows if row.id is not None}
        logger.debug("Actions fetched from store", count=len(actions), args=str(args))
        return actions


def load_action(row: ActionRecord) -> ScheduledAction:
    """Convert a stored row into a read-only scheduled action."""
    return ScheduledAction(
        id=row.id,  # type: ignore[arg-type]
        hook=row.hook,
        group=row.group_slug,
        args=_load_args(row.args),
        schedule=resolve_schedule(
            row.schedule_type,
            row.scheduled_date_gmt,
            interval_seconds=row.interval_seconds,
            cron_expression=row.cron_expression,
        ),
    )


def _load_args(raw: list[Any] | dict[str, Any] | None) -> list[tuple[str | int, Any]]:
    # Positional arguments are keyed by their index.
    if isinstance(raw, dict):
        return list(raw.items())
    if isinstance(raw, list):
        return list(enumerate(raw))
    return []


async def get_action_store(
    db: Annotated[AsyncSession, Depends(get_session)],
) -> ActionStore:
    """Provide the action store for the current request."""
    return SQLActionStore(db)

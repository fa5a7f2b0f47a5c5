"""Actions service."""

import time
from collections.abc import Callable, Iterable
from operator import itemgetter
from typing import Final
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from fastapi import Request
from loguru import logger

from scheduler_admin.utils.interval import humanize_interval

from .actions_model import ActionDisplayModel
from .repository import ActionStore
from .schedule import CronSchedule, IntervalSchedule, ScheduledAction
from .schemas import ActionQueryArgs, SortOrder

__all__ = ["ActionReportFormatter", "get_action_formatter", "get_actions_svc"]


DATE_FORMAT: Final = "%Y-%m-%d %H:%M:%S %z"
NON_REPEATING: Final = "Non-repeating"


class ActionReportFormatter:
    """Turn scheduled actions into sorted, display-ready records.

    The formatter is built once at startup. Output depends only on the actions,
    the requested ordering and the injected clock.
    """

    def __init__(
        self,
        display_timezone: str | None = None,
        clock: Callable[[], float] = time.time,
    ) -> None:
        """Initialize with the display timezone and a clock returning epoch seconds.

        Args:
            display_timezone: IANA timezone for the ``scheduled`` string. Empty,
                invalid or unknown names disable conversion.
            clock: Source of the current time.
        """
        self.timezone = _load_timezone(display_timezone)
        self._clock = clock

    def format(
        self,
        actions: Iterable[ScheduledAction],
        orderby: str = "",
        order: SortOrder = SortOrder.ASC,
    ) -> list[ActionDisplayModel]:
        """Format and sort actions for display.

        Records are sorted by the string ``"<orderby value>_<timestamp>"``, or by
        the timestamp string alone without ``orderby``. The comparison is
        lexicographic: timestamps are not padded.

        Args:
            actions: Actions in store order.
            orderby: ``"hook"``, ``"group"`` or empty.
            order: Ascending or descending output.

        Returns:
            Display records; ``DESC`` is the reverse of the ``ASC`` list.
        """
        now = int(self._clock())
        keyed = []
        for action in actions:
            record = self.display_record(action, now)
            keyed.append((_sort_key(record, orderby), record))

        keyed.sort(key=itemgetter(0))
        records = [record for _, record in keyed]
        if order == SortOrder.DESC:
            records.reverse()
        return records

    def display_record(self, action: ScheduledAction, now: int) -> ActionDisplayModel:
        """Build the display record of a single action."""
        record = ActionDisplayModel(
            id=action.id,
            hook=action.hook,
            group=action.group,
            parameters=[f"{key} => {value}" for key, value in action.get_args()],
            recurrence=get_recurrence(action),
        )

        next_run = action.get_schedule().next()
        if next_run is None:
            return record

        timestamp = int(next_run.timestamp())
        shown = next_run.astimezone(self.timezone) if self.timezone else next_run
        record.timestamp = timestamp
        record.scheduled = shown.strftime(DATE_FORMAT)
        record.schedule_delta = schedule_delta(timestamp, now)
        return record


def schedule_delta(timestamp: int, now: int) -> str:
    """Render the distance between ``now`` and a run timestamp."""
    if now > timestamp:
        return f"({humanize_interval(now - timestamp)} ago)"
    return f"({humanize_interval(timestamp - now)})"


def get_recurrence(action: ScheduledAction) -> str:
    """Return the human readable recurrence of an action, or 'Non-repeating'."""
    schedule = action.get_schedule()
    if isinstance(schedule, IntervalSchedule):
        return f"Every {humanize_interval(schedule.interval_seconds)}"
    if isinstance(schedule, CronSchedule):
        return f"Cron {schedule.expression}"
    return NON_REPEATING


def _sort_key(record: ActionDisplayModel, orderby: str) -> str:
    stamp = "" if record.timestamp is None else str(record.timestamp)
    if orderby:
        return f"{getattr(record, orderby)}_{stamp}"
    return stamp


def _load_timezone(name: str | None) -> ZoneInfo | None:
    if not name:
        return None
    try:
        return ZoneInfo(name)
    except (ZoneInfoNotFoundError, ValueError) as e:
        logger.debug("Display timezone ignored", timezone=name, error=str(e))
        return None


def get_action_formatter(request: Request) -> ActionReportFormatter:
    """Return the formatter created at application startup."""
    return request.app.state.action_formatter


async def get_actions_svc(
    store: ActionStore,
    formatter: ActionReportFormatter,
    args: ActionQueryArgs,
    order: SortOrder,
) -> list[ActionDisplayModel]:
    """Retrieve pending actions from the store and format them for display.

    Acts as the intermediary between the API router and the action store: the
    store applies filters and pagination, the formatter renders and sorts the
    page it returns.

    Args:
        store: Action store to query.
        formatter: Formatter built at startup.
        args: Store query arguments, including the validated ``orderby``.
        order: Direction of the displayed list.

    Returns:
        Display records for the requested page.
    """
    actions = await store.query_scheduled_actions(args)
    return formatter.format(actions.values(), args.orderby, order)

"""Schedules of scheduled actions.

A schedule is resolved into exactly one variant when an action is loaded from
the store, so formatting code can branch on the variant instead of probing for
optional accessors.
"""

from datetime import UTC, datetime
from enum import StrEnum
from typing import Annotated, Any, Literal

from loguru import logger
from pydantic import BaseModel, ConfigDict, Field

__all__ = [
    "CronSchedule",
    "IntervalSchedule",
    "NullSchedule",
    "Schedule",
    "ScheduleKind",
    "ScheduledAction",
    "SingleSchedule",
    "resolve_schedule",
]


class ScheduleKind(StrEnum):
    """Schedule types stored by the host scheduler."""

    SINGLE = "single"
    INTERVAL = "interval"
    CRON = "cron"
    NULL = "null"


def _as_utc(value: datetime | None) -> datetime | None:
    # SQLite drops tzinfo; stored dates are always GMT.
    if value is None or value.tzinfo is not None:
        return value
    return value.replace(tzinfo=UTC)


class _BaseSchedule(BaseModel):
    model_config = ConfigDict(frozen=True)

    next_run: datetime | None = None

    def next(self) -> datetime | None:
        """Return the next run as an aware datetime, or None."""
        return _as_utc(self.next_run)

    def is_recurring(self) -> bool:  # noqa: PLR6301
        """Whether the schedule repeats after its next run."""
        return False


class SingleSchedule(_BaseSchedule):
    """Runs once at ``next_run``."""

    kind: Literal["single"] = "single"
    next_run: datetime


class IntervalSchedule(_BaseSchedule):
    """Repeats every ``interval_seconds`` after ``next_run``."""

    kind: Literal["interval"] = "interval"
    interval_seconds: int = Field(gt=0)

    def is_recurring(self) -> bool:  # noqa: PLR6301
        """Interval schedules always repeat."""
        return True


class CronSchedule(_BaseSchedule):
    """Repeats according to a cron expression."""

    kind: Literal["cron"] = "cron"
    expression: str = Field(min_length=1)

    def is_recurring(self) -> bool:  # noqa: PLR6301
        """Cron schedules always repeat."""
        return True


class NullSchedule(_BaseSchedule):
    """Has no next run."""

    kind: Literal["null"] = "null"
    next_run: None = None


Schedule = Annotated[
    SingleSchedule | IntervalSchedule | CronSchedule | NullSchedule,
    Field(discriminator="kind"),
]


class ScheduledAction(BaseModel):
    """Read-only view of an action loaded from the store."""

    model_config = ConfigDict(frozen=True)

    id: int
    hook: str
    group: str = ""
    args: list[tuple[str | int, Any]] = Field(default_factory=list)
    schedule: Schedule = Field(default_factory=NullSchedule)

    def get_schedule(self) -> Schedule:
        """Return the resolved schedule of the action."""
        return self.schedule

    def get_args(self) -> list[tuple[str | int, Any]]:
        """Return the arguments as ordered ``(key, value)`` pairs."""
        return list(self.args)


def resolve_schedule(
    schedule_type: str | None,
    next_run: datetime | None,
    *,
    interval_seconds: int | None = None,
    cron_expression: str | None = None,
) -> Schedule:
    """Build the schedule variant for the stored schedule columns.

    Recurring types missing their recurrence rule degrade to a single run so
    that the action is still listed, and unknown types load as a null
    schedule. Both cases are logged.

    Args:
        schedule_type: Stored schedule type.
        next_run: Stored next run date.
        interval_seconds: Recurrence interval for interval schedules.
        cron_expression: Recurrence expression for cron schedules.

    Returns:
        The resolved schedule variant.
    """
    kind = (schedule_type or ScheduleKind.NULL).lower()

    if kind == ScheduleKind.INTERVAL:
        if interval_seconds and interval_seconds > 0:
            return IntervalSchedule(
                next_run=next_run, interval_seconds=interval_seconds
            )
        logger.warning("Interval schedule without interval", next_run=str(next_run))
    elif kind == ScheduleKind.CRON:
        if cron_expression:
            return CronSchedule(next_run=next_run, expression=cron_expression)
        logger.warning("Cron schedule without expression", next_run=str(next_run))
    elif kind not in {ScheduleKind.SINGLE, ScheduleKind.NULL}:
        logger.warning("Unknown schedule type", schedule_type=kind)
        return NullSchedule()

    if kind == ScheduleKind.NULL or next_run is None:
        return NullSchedule()
    return SingleSchedule(next_run=next_run)

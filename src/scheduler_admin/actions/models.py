"""Scheduled action table of the host task store."""

from datetime import datetime
from typing import Any

from sqlalchemy import JSON
from sqlmodel import Column, DateTime, Field, SQLModel, func

from scheduler_admin.common.action_status import ActionStatus

from .schedule import ScheduleKind

__all__ = ["ActionRecord"]


class ActionRecord(SQLModel, table=True):
    """Row of the host scheduler's action table, read by the admin service."""

    __tablename__ = "scheduled_action"

    id: int | None = Field(
        default=None,
        primary_key=True,
        description="Identifier assigned by the host scheduler.",
    )

    hook: str = Field(
        index=True,
        max_length=191,
        description="Hook fired when the action runs.",
    )

    status: ActionStatus = Field(
        default=ActionStatus.PENDING,
        index=True,
        description="Lifecycle status of the action.",
    )

    group_slug: str = Field(
        default="",
        index=True,
        max_length=255,
        description="Slug of the group the action belongs to.",
    )

    args: list[Any] | dict[str, Any] | None = Field(
        default=None,
        sa_column=Column(JSON),
        description="Arguments passed to the hook, as a list or a mapping.",
    )

    schedule_type: str = Field(
        default=ScheduleKind.SINGLE,
        max_length=16,
        description="Kind of schedule: single, interval, cron or null.",
    )

    scheduled_date_gmt: datetime | None = Field(
        default=None,
        sa_column=Column(DateTime(timezone=True), index=True),
        description="Next run of the action in UTC.",
    )

    interval_seconds: int | None = Field(
        default=None, description="Recurrence interval of interval schedules."
    )

    cron_expression: str | None = Field(
        default=None,
        max_length=255,
        description="Recurrence expression of cron schedules.",
    )

    created_at: datetime | None = Field(
        default=None,
        sa_column=Column(DateTime(timezone=True), insert_default=func.now()),
        description="Timestamp when the action was stored.",
    )

"""Seed the action store with sample scheduled actions."""

from datetime import UTC, datetime, timedelta

from loguru import logger
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from scheduler_admin.actions.models import ActionRecord
from scheduler_admin.actions.schedule import ScheduleKind
from scheduler_admin.common.action_status import ActionStatus

__all__ = ["seed_db"]


ACTION_SINGLE_ID = 1
ACTION_INTERVAL_ID = 2
ACTION_CRON_ID = 3
ACTION_PAST_DUE_ID = 4
ACTION_NULL_ID = 5
ACTION_REPORT_ID = 6
ACTION_COMPLETE_ID = 7
ACTION_FAILED_ID = 8

PENDING_ACTION_COUNT = 6


async def seed_db(session: AsyncSession) -> None:
    """Seed the action table with example actions.

    Populates an empty table with pending actions covering every schedule type,
    plus finished actions that the admin listing must not show. Run dates are
    relative to the current time.

    Args:
        session: The SQLModel async database session.
    """
    result = await session.exec(select(ActionRecord).limit(1))
    if result.first() is not None:
        return

    now = datetime.now(tz=UTC).replace(microsecond=0)
    session.add_all([
        ActionRecord(
            id=ACTION_SINGLE_ID,
            hook="send_welcome_email",
            group_slug="mail",
            args={"user_id": 42, "template": "welcome"},
            schedule_type=ScheduleKind.SINGLE,
            scheduled_date_gmt=now + timedelta(hours=1, minutes=5),
        ),
        ActionRecord(
            id=ACTION_INTERVAL_ID,
            hook="sync_inventory",
            group_slug="shop",
            args=["warehouse-1"],
            schedule_type=ScheduleKind.INTERVAL,
            scheduled_date_gmt=now + timedelta(days=1, hours=2),
            interval_seconds=3600,
        ),
        ActionRecord(
            id=ACTION_CRON_ID,
            hook="cleanup_sessions",
            group_slug="maintenance",
            args=[],
            schedule_type=ScheduleKind.CRON,
            scheduled_date_gmt=now + timedelta(days=3),
            cron_expression="0 3 * * *",
        ),
        ActionRecord(
            id=ACTION_PAST_DUE_ID,
            hook="send_invoice",
            group_slug="mail",
            args={"order_id": 1001},
            schedule_type=ScheduleKind.SINGLE,
            scheduled_date_gmt=now - timedelta(hours=2, minutes=30),
        ),
        ActionRecord(
            id=ACTION_NULL_ID,
            hook="rebuild_search_index",
            group_slug="maintenance",
            schedule_type=ScheduleKind.NULL,
        ),
        ActionRecord(
            id=ACTION_REPORT_ID,
            hook="generate_weekly_report",
            group_slug="reports",
            args={"format": "pdf"},
            schedule_type=ScheduleKind.INTERVAL,
            scheduled_date_gmt=now + timedelta(weeks=1),
            interval_seconds=7 * 24 * 3600,
        ),
        ActionRecord(
            id=ACTION_COMPLETE_ID,
            hook="send_welcome_email",
            status=ActionStatus.COMPLETE,
            group_slug="mail",
            args={"user_id": 7},
            schedule_type=ScheduleKind.SINGLE,
            scheduled_date_gmt=now - timedelta(days=1),
        ),
        ActionRecord(
            id=ACTION_FAILED_ID,
            hook="sync_inventory",
            status=ActionStatus.FAILED,
            group_slug="shop",
            args=["warehouse-2"],
            schedule_type=ScheduleKind.SINGLE,
            scheduled_date_gmt=now - timedelta(hours=5),
        ),
    ])
    await session.commit()
    logger.info("Action store seeded with sample actions")

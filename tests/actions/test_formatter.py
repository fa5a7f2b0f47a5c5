# ruff: noqa: S101

"""Tests for formatting and sorting pending actions."""

from datetime import UTC, datetime

import pytest

from scheduler_admin.actions.schedule import (
    CronSchedule,
    IntervalSchedule,
    NullSchedule,
    ScheduledAction,
    SingleSchedule,
)
from scheduler_admin.actions.schemas import SortOrder
from scheduler_admin.actions.service import ActionReportFormatter

_NOW = 1_700_000_000  # 2023-11-14 22:13:20 UTC


def _at(timestamp: int) -> datetime:
    return datetime.fromtimestamp(timestamp, tz=UTC)


def _action(
    action_id: int,
    hook: str = "hook",
    group: str = "",
    offset: int = 3600,
    schedule: object | None = None,
    args: list | None = None,
) -> ScheduledAction:
    return ScheduledAction(
        id=action_id,
        hook=hook,
        group=group,
        args=args or [],
        schedule=schedule or SingleSchedule(next_run=_at(_NOW + offset)),
    )


@pytest.fixture(name="formatter")
def formatter_fixture() -> ActionReportFormatter:
    """Formatter with a frozen clock and no display timezone."""
    return ActionReportFormatter(clock=lambda: _NOW)


@pytest.mark.actions
class TestDisplayRecord:
    """Tests for the fields of a single display record."""

    @classmethod
    def test_future_delta(cls, formatter: ActionReportFormatter) -> None:
        """Test the delta of an action one hour ahead."""
        (record,) = formatter.format([_action(1, offset=3600)])
        assert record.schedule_delta == "(1 hour)"
        assert record.timestamp == _NOW + 3600

    @classmethod
    def test_past_delta(cls, formatter: ActionReportFormatter) -> None:
        """Test the delta of an action one hour overdue."""
        (record,) = formatter.format([_action(1, offset=-3600)])
        assert record.schedule_delta == "(1 hour ago)"

    @classmethod
    def test_due_now(cls, formatter: ActionReportFormatter) -> None:
        """Test the delta of an action due at the current second."""
        (record,) = formatter.format([_action(1, offset=0)])
        assert record.schedule_delta == "(Now!)"

    @classmethod
    def test_scheduled_date_in_utc(cls, formatter: ActionReportFormatter) -> None:
        """Test the date string without a display timezone."""
        (record,) = formatter.format([_action(1, offset=0)])
        assert record.scheduled == "2023-11-14 22:13:20 +0000"

    @classmethod
    def test_scheduled_date_in_display_timezone(cls) -> None:
        """Test that the display timezone changes only the date string."""
        formatter = ActionReportFormatter("Europe/Berlin", clock=lambda: _NOW)
        (record,) = formatter.format([_action(1, offset=0)])
        assert record.scheduled == "2023-11-14 23:13:20 +0100"
        assert record.timestamp == _NOW
        assert record.schedule_delta == "(Now!)"

    @classmethod
    @pytest.mark.parametrize("timezone", ["", "Mars/Olympus_Mons", "../etc/passwd"])
    def test_invalid_timezone_is_ignored(cls, timezone: str) -> None:
        """Test that unusable timezones fall back to no conversion."""
        formatter = ActionReportFormatter(timezone, clock=lambda: _NOW)
        assert formatter.timezone is None
        (record,) = formatter.format([_action(1, offset=0)])
        assert record.scheduled == "2023-11-14 22:13:20 +0000"

    @classmethod
    def test_naive_next_run_is_utc(cls, formatter: ActionReportFormatter) -> None:
        """Test that naive stored dates are read as UTC."""
        naive = datetime(2023, 11, 14, 23, 13, 20)  # noqa: DTZ001
        (record,) = formatter.format([
            _action(1, schedule=SingleSchedule(next_run=naive))
        ])
        assert record.timestamp == _NOW + 3600

    @classmethod
    def test_parameters_keep_order(cls, formatter: ActionReportFormatter) -> None:
        """Test rendering of arguments as 'key => value' strings."""
        action = _action(1, args=[("user_id", 42), ("template", "welcome"), (0, "x")])
        (record,) = formatter.format([action])
        assert record.parameters == [
            "user_id => 42",
            "template => welcome",
            "0 => x",
        ]

    @classmethod
    def test_null_schedule_omits_run_fields(
        cls, formatter: ActionReportFormatter
    ) -> None:
        """Test that actions without a next run are still listed."""
        (record,) = formatter.format([_action(1, schedule=NullSchedule())])
        assert record.timestamp is None
        assert record.scheduled is None
        assert record.schedule_delta is None
        assert record.recurrence == "Non-repeating"


@pytest.mark.actions
class TestRecurrence:
    """Tests for the recurrence string."""

    @classmethod
    @pytest.mark.parametrize(
        ("schedule", "expected"),
        [
            (SingleSchedule(next_run=_at(_NOW)), "Non-repeating"),
            (NullSchedule(), "Non-repeating"),
            (
                IntervalSchedule(next_run=_at(_NOW), interval_seconds=3600),
                "Every 1 hour",
            ),
            (
                IntervalSchedule(next_run=_at(_NOW), interval_seconds=90061),
                "Every 1 day 1 hour",
            ),
            (
                CronSchedule(next_run=_at(_NOW), expression="0 3 * * *"),
                "Cron 0 3 * * *",
            ),
        ],
    )
    def test_recurrence(
        cls, formatter: ActionReportFormatter, schedule: object, expected: str
    ) -> None:
        """Test the recurrence string of every schedule variant."""
        (record,) = formatter.format([_action(1, schedule=schedule)])
        assert record.recurrence == expected

    @classmethod
    def test_recurring_without_next_run(cls, formatter: ActionReportFormatter) -> None:
        """Test that a recurring schedule without next run keeps its recurrence."""
        schedule = IntervalSchedule(next_run=None, interval_seconds=60)
        (record,) = formatter.format([_action(1, schedule=schedule)])
        assert record.recurrence == "Every 1 minute"
        assert record.timestamp is None


@pytest.mark.actions
class TestSorting:
    """Tests for ordering of display records."""

    _ACTIONS = (
        _action(1, hook="b_hook", group="mail", offset=300),
        _action(2, hook="a_hook", group="shop", offset=100),
        _action(3, hook="b_hook", group="mail", offset=200),
        _action(4, hook="c_hook", group="admin", offset=-50),
        _action(5, hook="a_hook", group="admin", schedule=NullSchedule()),
    )

    @classmethod
    def test_default_sorts_by_timestamp(cls, formatter: ActionReportFormatter) -> None:
        """Test ordering by run date when no field is requested."""
        records = formatter.format(cls._ACTIONS)
        assert [r.id for r in records] == [5, 4, 2, 3, 1]

    @classmethod
    def test_sort_by_hook(cls, formatter: ActionReportFormatter) -> None:
        """Test ordering by hook, then run date."""
        records = formatter.format(cls._ACTIONS, "hook", SortOrder.ASC)
        assert [r.id for r in records] == [5, 2, 3, 1, 4]
        keys = [f"{r.hook}_{r.timestamp or ''}" for r in records]
        assert keys == sorted(keys)

    @classmethod
    def test_sort_by_group(cls, formatter: ActionReportFormatter) -> None:
        """Test ordering by group, then run date."""
        records = formatter.format(cls._ACTIONS, "group", SortOrder.ASC)
        assert [r.id for r in records] == [5, 4, 3, 1, 2]

    @classmethod
    @pytest.mark.parametrize("orderby", ["", "hook", "group"])
    def test_desc_reverses_asc(
        cls, formatter: ActionReportFormatter, orderby: str
    ) -> None:
        """Test that descending output is the exact reverse of ascending."""
        asc = formatter.format(cls._ACTIONS, orderby, SortOrder.ASC)
        desc = formatter.format(cls._ACTIONS, orderby, SortOrder.DESC)
        assert [r.id for r in desc] == [r.id for r in reversed(asc)]

    @classmethod
    def test_timestamps_compare_as_strings(cls) -> None:
        """Test that unpadded timestamps of different length sort as text."""
        formatter = ActionReportFormatter(clock=lambda: 0)
        nine_digits = _action(1, schedule=SingleSchedule(next_run=_at(999_999_999)))
        ten_digits = _action(2, schedule=SingleSchedule(next_run=_at(1_000_000_000)))
        records = formatter.format([nine_digits, ten_digits])
        assert [r.id for r in records] == [2, 1]

    @classmethod
    def test_same_key_keeps_store_order(cls, formatter: ActionReportFormatter) -> None:
        """Test that actions with equal sort keys are all kept in input order."""
        actions = [_action(i, hook="same", offset=60) for i in (3, 1, 2)]
        records = formatter.format(actions, "hook")
        assert [r.id for r in records] == [3, 1, 2]

    @classmethod
    def test_output_is_deterministic(cls, formatter: ActionReportFormatter) -> None:
        """Test that identical input and clock give identical output."""
        first = formatter.format(cls._ACTIONS, "group", SortOrder.DESC)
        second = formatter.format(cls._ACTIONS, "group", SortOrder.DESC)
        assert [r.model_dump() for r in first] == [r.model_dump() for r in second]

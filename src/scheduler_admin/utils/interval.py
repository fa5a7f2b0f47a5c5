"""Human friendly rendering of second intervals."""

from typing import Final, NamedTuple

__all__ = ["TIME_PERIODS", "TimePeriod", "humanize_interval"]


MINUTE_IN_SECONDS: Final = 60
HOUR_IN_SECONDS: Final = 60 * MINUTE_IN_SECONDS
DAY_IN_SECONDS: Final = 24 * HOUR_IN_SECONDS
WEEK_IN_SECONDS: Final = 7 * DAY_IN_SECONDS
MONTH_IN_SECONDS: Final = 30 * DAY_IN_SECONDS
YEAR_IN_SECONDS: Final = 365 * DAY_IN_SECONDS


class TimePeriod(NamedTuple):
    """A unit of time with its singular and plural display names."""

    seconds: int
    singular: str
    plural: str

    def label(self, count: int) -> str:
        """Return ``count`` followed by the matching unit name."""
        return f"{count} {self.singular if count == 1 else self.plural}"


# Largest unit first; the walk in humanize_interval relies on this order.
TIME_PERIODS: Final[tuple[TimePeriod, ...]] = (
    TimePeriod(YEAR_IN_SECONDS, "year", "years"),
    TimePeriod(MONTH_IN_SECONDS, "month", "months"),
    TimePeriod(WEEK_IN_SECONDS, "week", "weeks"),
    TimePeriod(DAY_IN_SECONDS, "day", "days"),
    TimePeriod(HOUR_IN_SECONDS, "hour", "hours"),
    TimePeriod(MINUTE_IN_SECONDS, "minute", "minutes"),
    TimePeriod(1, "second", "seconds"),
)

NOW_LABEL: Final = "Now!"


def humanize_interval(interval: int, periods_to_include: int = 2) -> str:
    """Convert an interval of seconds into a multi-part human friendly string.

    Units are consumed greedily from the largest down, so an interval of
    90061 seconds with the default depth renders as ``"1 day 1 hour"``; the
    remaining second is dropped because only two units are included.

    Args:
        interval: Interval in whole seconds.
        periods_to_include: Maximum number of units in the output. With an
            interval of 70 and a depth of 2 both minutes and seconds are shown,
            with a depth of 1 only minutes.

    Returns:
        The rendered interval, or ``"Now!"`` for intervals of zero or less.
    """
    if interval <= 0:
        return NOW_LABEL

    parts: list[str] = []
    remaining = interval
    for period in TIME_PERIODS:
        if remaining <= 0 or len(parts) >= periods_to_include:
            break

        count = remaining // period.seconds
        if count > 0:
            parts.append(period.label(count))
            remaining -= count * period.seconds

    return " ".join(parts)

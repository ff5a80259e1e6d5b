"""Human-friendly rendering of dates and date ranges.

Every function here is stateless. The ones that depend on the current time
read it once per call from a `Clock`, which defaults to the system clock.
"""

from __future__ import annotations

import datetime
import logging
import numbers
from collections.abc import Iterable

from datedisplay import dateutils
from datedisplay.clock import SYSTEM_CLOCK, Clock
from datedisplay.errors import InvalidArgumentError, MissingArgumentError
from datedisplay.labels import DEFAULT_LABELS, DisplayLabels
from datedisplay.models import DateInterval, DurationComponents
from datedisplay.patterns import DatePattern

logger = logging.getLogger(__name__)


def get_reset_today_and_tomorrow(
    *,
    clock: Clock = SYSTEM_CLOCK,
) -> tuple[datetime.datetime, datetime.datetime]:
    """Return midnight today and midnight tomorrow.

    Useful as the bounds of a ``between ... and ...`` query over today's data.
    """
    today = dateutils.get_first_date_of_day(clock.now())
    return today, dateutils.add_days(today, 1)


def get_reset_yesterday_and_today(
    *,
    clock: Clock = SYSTEM_CLOCK,
) -> tuple[datetime.datetime, datetime.datetime]:
    """Return midnight yesterday and midnight today."""
    today = dateutils.get_first_date_of_day(clock.now())
    return dateutils.add_days(today, -1), today


def get_interval_day_list(
    from_date: dateutils.DateLike | None,
    to_date: dateutils.DateLike | None,
) -> list[datetime.datetime]:
    """List the start of every day between two dates, inclusive.

    The dates may be given in either order. Each entry is reset to
    00:00:00.000, so ``2011-03-05 23:31:25.456`` and
    ``2011-03-10 01:30:24.895`` give six entries, from
    ``2011-03-05 00:00:00`` to ``2011-03-10 00:00:00``.

    Parameters
    ----------
    from_date
        One end of the range.
    to_date
        The other end of the range.

    Returns
    -------
    list of datetime
        Midnight of each day in the range, earliest first.
    """
    interval = DateInterval.from_instants(
        dateutils.to_instant(from_date, "from_date"),
        dateutils.to_instant(to_date, "to_date"),
    ).reset_to_days()
    span_days = interval.get_span_days()
    logger.debug(
        "Listing %d days from %s to %s",
        span_days + 1,
        interval.min,
        interval.max,
    )
    return [
        dateutils.add_days(interval.min, delta) for delta in range(span_days + 1)
    ]


def parse_interval_day_list(
    from_string: str,
    to_string: str,
    date_pattern: str,
) -> list[datetime.datetime]:
    """Parse two date strings and list the days between them.

    See `get_interval_day_list`.
    """
    dateutils.check_not_blank(from_string, "from_string")
    dateutils.check_not_blank(to_string, "to_string")
    dateutils.check_not_blank(date_pattern, "date_pattern")
    return get_interval_day_list(
        dateutils.parse_date(from_string, date_pattern),
        dateutils.parse_date(to_string, date_pattern),
    )


def get_week_date_string_list(
    weekday: int,
    date_pattern: str,
    *,
    clock: Clock = SYSTEM_CLOCK,
) -> list[str]:
    """List every occurrence of a weekday in the current year.

    Parameters
    ----------
    weekday
        Day of the week, counted from Sunday = 1 (see `Weekday`).
    date_pattern
        Pattern used to render each date.
    clock
        Source of the current year.

    Returns
    -------
    list of str
        52 or 53 rendered dates, one week apart.
    """
    dateutils.check_not_blank(date_pattern, "date_pattern")
    now = clock.now()
    current = dateutils.get_first_weekday_of_year(now, weekday)
    year_end = dateutils.get_last_date_of_year(now)

    date_strings = []
    while current < year_end:
        date_strings.append(dateutils.format_date(current, date_pattern))
        current = dateutils.add_days(current, 7)
    logger.debug(
        "Found %d occurrences of weekday %d in %d",
        len(date_strings),
        weekday,
        now.year,
    )
    return date_strings


def to_pretty_date_string(
    in_date: dateutils.DateLike | None,
    *,
    clock: Clock = SYSTEM_CLOCK,
    labels: DisplayLabels = DEFAULT_LABELS,
) -> str:
    """Describe a date relative to now, e.g. "5 minutes ago" or "Yesterday 13:02".

    Rules, where the day gap is the elapsed time in whole 24 hour days:

    * 0 days: seconds, minutes or hours ago, or "Yesterday HH:MM" if the
      hours reach back across midnight.
    * 1 day: "Yesterday HH:MM" if ``in_date`` plus one day is today's date,
      else "The day before yesterday HH:MM".
    * 2 days: "The day before yesterday HH:MM" if ``in_date`` plus two days is
      today's date, else the full date.
    * More: "MM-DD HH:MM" within the current year, otherwise
      "YYYY-MM-DD HH:MM".

    Dates after now are measured by the absolute gap.
    """
    in_date = dateutils.to_instant(in_date, "in_date")
    now = clock.now()

    is_same_year = dateutils.get_year(in_date) == dateutils.get_year(now)
    space_millis = dateutils.get_interval_millis(in_date, now)
    space_days = dateutils.millis_to_days(space_millis)
    logger.debug("%s is %d days from %s", in_date, space_days, now)

    if space_days == 0:
        return _format_same_day(in_date, now, space_millis, labels)
    if space_days == 1:
        if _is_calendar_days_before(in_date, now, 1):
            return _format_with_time(labels.yesterday, in_date)
        return _format_with_time(labels.day_before_yesterday, in_date)
    if space_days == 2 and _is_calendar_days_before(in_date, now, 2):
        return _format_with_time(labels.day_before_yesterday, in_date)
    return _format_full_date(in_date, is_same_year)


def to_string_list(
    dates: Iterable[dateutils.DateLike] | None,
    date_pattern: str,
) -> list[str]:
    """Render each date with ``date_pattern``, keeping their order.

    An empty or missing ``dates`` gives an empty list regardless of the pattern.
    """
    if dates is None:
        return []
    dates = list(dates)
    if not dates:
        return []
    dateutils.check_not_blank(date_pattern, "date_pattern")
    return [dateutils.format_date(date, date_pattern) for date in dates]


def get_interval_for_view(
    milliseconds: int,
    *,
    labels: DisplayLabels = DEFAULT_LABELS,
) -> str:
    """Describe a duration, e.g. 13516 gives "13s516ms".

    Only non-zero components are shown, largest first, each followed by its
    unit label. A duration of 0 gives "0".

    Parameters
    ----------
    milliseconds
        Non-negative duration.
    labels
        Unit wording.

    Returns
    -------
    str
        Duration description.
    """
    if milliseconds is None:
        raise MissingArgumentError("milliseconds")
    if isinstance(milliseconds, bool) or not isinstance(
        milliseconds,
        numbers.Integral,
    ):
        raise InvalidArgumentError(
            "milliseconds",
            f"must be an integer, not {type(milliseconds).__name__}",
        )
    if milliseconds < 0:
        raise InvalidArgumentError("milliseconds", "can't be negative")
    if milliseconds == 0:
        return "0"

    components = DurationComponents.from_millis(milliseconds)
    return "".join(
        f"{amount}{unit}"
        for amount, unit in [
            (components.days, labels.day),
            (components.hours, labels.hour),
            (components.minutes, labels.minute),
            (components.seconds, labels.second),
            (components.milliseconds, labels.millisecond),
        ]
        if amount
    )


def get_interval_for_view_between(
    begin_date: dateutils.DateLike | None,
    end_date: dateutils.DateLike | None,
    *,
    labels: DisplayLabels = DEFAULT_LABELS,
) -> str:
    """Describe the duration between two dates, in either order.

    Typically used to log how long a piece of work took.
    """
    return get_interval_for_view(
        dateutils.get_interval_millis(
            dateutils.to_instant(begin_date, "begin_date"),
            dateutils.to_instant(end_date, "end_date"),
        ),
        labels=labels,
    )


def _is_calendar_days_before(
    in_date: datetime.datetime,
    now: datetime.datetime,
    days: int,
) -> bool:
    # Compares calendar dates, which can disagree with the elapsed day gap.
    return dateutils.is_same_date(
        dateutils.add_days(in_date, days),
        now,
        DatePattern.COMMON_DATE,
    )


def _format_same_day(
    in_date: datetime.datetime,
    now: datetime.datetime,
    space_millis: int,
    labels: DisplayLabels,
) -> str:
    space_hours = dateutils.millis_to_hours(space_millis)
    if space_hours == 0:
        space_minutes = dateutils.millis_to_minutes(space_millis)
        if space_minutes == 0:
            return labels.seconds_ago.format(
                dateutils.millis_to_seconds(space_millis),
            )
        return labels.minutes_ago.format(space_minutes)
    if dateutils.get_day_of_month(in_date) == dateutils.get_day_of_month(now):
        return labels.hours_ago.format(space_hours)
    return _format_with_time(labels.yesterday, in_date)


def _format_with_time(label: str, in_date: datetime.datetime) -> str:
    return (
        f"{label} "
        f"{dateutils.format_date(in_date, DatePattern.COMMON_TIME_WITHOUT_SECOND)}"
    )


def _format_full_date(in_date: datetime.datetime, is_same_year: bool) -> str:
    if is_same_year:
        return dateutils.format_date(
            in_date,
            DatePattern.COMMON_DATE_AND_TIME_WITHOUT_YEAR_AND_SECOND,
        )
    return dateutils.format_date(
        in_date,
        DatePattern.COMMON_DATE_AND_TIME_WITHOUT_SECOND,
    )

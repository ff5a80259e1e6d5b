"""Utilities for handling datetimes."""

from __future__ import annotations

import datetime

import numpy as np
import pandas as pd

from datedisplay.errors import DateParseError, InvalidArgumentError, MissingArgumentError
from datedisplay.patterns import DatePattern, Weekday

MILLISECONDS_PER_SECOND = 1000
MILLISECONDS_PER_MINUTE = 60 * MILLISECONDS_PER_SECOND
MILLISECONDS_PER_HOUR = 60 * MILLISECONDS_PER_MINUTE
MILLISECONDS_PER_DAY = 24 * MILLISECONDS_PER_HOUR

DateLike = datetime.date | pd.Timestamp | np.datetime64


def check_not_blank(value: str | None, argument: str) -> str:
    """Return ``value`` if it is a non-blank string.

    Raises
    ------
    MissingArgumentError
        If ``value`` is None.
    InvalidArgumentError
        If ``value`` is empty or only whitespace.
    """
    if value is None:
        raise MissingArgumentError(argument)
    if not value.strip():
        raise InvalidArgumentError(argument, "can't be blank")
    return value


def to_instant(
    value: DateLike | None,
    argument: str = "date",
) -> datetime.datetime:
    """Coerce a date-like value to a naive local datetime.

    Dates become midnight of that day, pandas and numpy values are converted to
    python datetimes, aware datetimes are shifted to local time and the result
    is truncated to whole milliseconds.

    Parameters
    ----------
    value
        Date-like value to coerce.
    argument
        Name reported in errors.

    Returns
    -------
    datetime
        Naive local datetime with millisecond resolution.
    """
    if value is None or (not isinstance(value, str) and pd.isna(value)):
        raise MissingArgumentError(argument)
    if isinstance(value, str):
        raise InvalidArgumentError(argument, "must be a date, not a string")

    if isinstance(value, pd.Timestamp):
        instant = value.to_pydatetime(warn=False)
    elif isinstance(value, datetime.datetime):
        instant = value
    elif isinstance(value, datetime.date):
        instant = datetime.datetime.combine(value, datetime.time.min)
    elif isinstance(value, np.datetime64):
        instant = pd.Timestamp(value).to_pydatetime(warn=False)
    else:
        raise InvalidArgumentError(
            argument,
            f"must be a date, not {type(value).__name__}",
        )

    if instant.tzinfo is not None:
        local = instant.astimezone().replace(tzinfo=None)
        # Second pass through a repeated hour when DST ends
        if local.timestamp() != instant.timestamp():
            local = local.replace(fold=1)
        instant = local
    return instant.replace(microsecond=instant.microsecond // 1000 * 1000)


def parse_date(date_string: str, date_pattern: str) -> datetime.datetime:
    """Parse a string into a datetime using a strptime pattern."""
    check_not_blank(date_string, "date_string")
    check_not_blank(date_pattern, "date_pattern")
    try:
        instant = datetime.datetime.strptime(date_string, date_pattern)
    except ValueError as err:
        raise DateParseError(date_string, date_pattern) from err
    return to_instant(instant)


def format_date(
    instant: DateLike | None,
    date_pattern: str,
) -> str:
    """Render a datetime as a string using a strftime pattern."""
    check_not_blank(date_pattern, "date_pattern")
    return to_instant(instant).strftime(date_pattern)


def get_first_date_of_day(instant: datetime.datetime) -> datetime.datetime:
    """Return 00:00:00.000 of the day containing ``instant``."""
    return instant.replace(hour=0, minute=0, second=0, microsecond=0)


def get_last_date_of_day(instant: datetime.datetime) -> datetime.datetime:
    """Return 23:59:59.999 of the day containing ``instant``."""
    return instant.replace(hour=23, minute=59, second=59, microsecond=999000)


def get_first_date_of_year(instant: datetime.datetime) -> datetime.datetime:
    """Return January 1st 00:00:00.000 of the year containing ``instant``."""
    return datetime.datetime(instant.year, 1, 1)


def get_last_date_of_year(instant: datetime.datetime) -> datetime.datetime:
    """Return December 31st 23:59:59.999 of the year containing ``instant``."""
    return datetime.datetime(instant.year, 12, 31, 23, 59, 59, 999000)


def add_days(instant: datetime.datetime, days: int) -> datetime.datetime:
    """Shift ``instant`` by a (possibly negative) number of calendar days."""
    return instant + datetime.timedelta(days=days)


def get_interval_millis(
    first: datetime.datetime,
    second: datetime.datetime,
) -> int:
    """Return the absolute number of milliseconds elapsed between two datetimes.

    Naive datetimes are read as local time, so the result is the real elapsed
    time even when a DST change falls between them.
    """
    return abs(_to_epoch_millis(second) - _to_epoch_millis(first))


def _to_epoch_millis(instant: datetime.datetime) -> int:
    return round(instant.timestamp() * MILLISECONDS_PER_SECOND)


def millis_to_days(milliseconds: int) -> int:
    """Return the number of whole days in a millisecond count."""
    return milliseconds // MILLISECONDS_PER_DAY


def millis_to_hours(milliseconds: int) -> int:
    """Return the number of whole hours in a millisecond count."""
    return milliseconds // MILLISECONDS_PER_HOUR


def millis_to_minutes(milliseconds: int) -> int:
    """Return the number of whole minutes in a millisecond count."""
    return milliseconds // MILLISECONDS_PER_MINUTE


def millis_to_seconds(milliseconds: int) -> int:
    """Return the number of whole seconds in a millisecond count."""
    return milliseconds // MILLISECONDS_PER_SECOND


def get_year(instant: datetime.datetime) -> int:
    """Return the calendar year of ``instant``."""
    return instant.year


def get_day_of_month(instant: datetime.datetime) -> int:
    """Return the calendar day of the month of ``instant``."""
    return instant.day


def is_same_date(
    first: datetime.datetime,
    second: datetime.datetime,
    date_pattern: str = DatePattern.COMMON_DATE,
) -> bool:
    """Check whether two datetimes render identically under ``date_pattern``."""
    return format_date(first, date_pattern) == format_date(second, date_pattern)


def get_first_weekday_of_year(
    instant: datetime.datetime,
    weekday: int,
) -> datetime.datetime:
    """Return the first occurrence of a weekday in the year of ``instant``.

    Parameters
    ----------
    instant
        Any datetime in the year of interest.
    weekday
        Day of the week, counted from Sunday = 1 (see `Weekday`).

    Returns
    -------
    datetime
        The first such weekday on or after January 1st, at the same time of
        day as ``instant``.
    """
    try:
        iso_index = Weekday(weekday).to_iso_index()
    except ValueError as err:
        raise InvalidArgumentError("weekday", "must be between 1 and 7") from err
    first_day = instant.replace(month=1, day=1)
    return add_days(first_day, (iso_index - first_day.weekday()) % 7)

"""Tests for datedisplay.dateutils"""

import datetime

import numpy as np
import pandas as pd
import pytest

from datedisplay import dateutils
from datedisplay.errors import DateParseError, InvalidArgumentError, MissingArgumentError
from datedisplay.patterns import DatePattern, Weekday


def test_to_instant():
    """Test that date-like values are coerced to naive millisecond datetimes."""
    assert dateutils.to_instant(datetime.date(2020, 1, 1)) == datetime.datetime(
        2020,
        1,
        1,
    )
    assert dateutils.to_instant(
        pd.Timestamp("2020-01-01 10:00:00.123456"),
    ) == datetime.datetime(2020, 1, 1, 10, 0, 0, 123000)
    assert dateutils.to_instant(
        np.datetime64("2020-01-01T10:00"),
    ) == datetime.datetime(2020, 1, 1, 10, 0)

    aware = datetime.datetime(2020, 1, 1, tzinfo=datetime.timezone.utc)
    instant = dateutils.to_instant(aware)
    assert instant.tzinfo is None
    assert instant == aware.astimezone().replace(tzinfo=None)


def test_to_instant_invalid():
    """Test that missing or non-date values are rejected."""
    for missing in [None, pd.NaT, np.datetime64("NaT")]:
        with pytest.raises(MissingArgumentError):
            dateutils.to_instant(missing)
    with pytest.raises(InvalidArgumentError):
        dateutils.to_instant("2020-01-01")
    with pytest.raises(InvalidArgumentError):
        dateutils.to_instant(5)


def test_check_not_blank():
    """Test that `check_not_blank` separates missing from blank strings."""
    assert dateutils.check_not_blank("%Y", "date_pattern") == "%Y"
    with pytest.raises(MissingArgumentError) as excinfo:
        dateutils.check_not_blank(None, "date_pattern")
    assert excinfo.value.argument == "date_pattern"
    with pytest.raises(InvalidArgumentError):
        dateutils.check_not_blank(" \t", "date_pattern")


def test_parse_and_format_date():
    """Test parsing and formatting with common patterns."""
    instant = dateutils.parse_date(
        "2011-03-05 23:31:25.456",
        DatePattern.COMMON_DATE_AND_TIME_WITH_MILLISECOND,
    )
    assert instant == datetime.datetime(2011, 3, 5, 23, 31, 25, 456000)
    assert dateutils.format_date(instant, DatePattern.COMMON_DATE) == "2011-03-05"
    assert (
        dateutils.format_date(
            instant,
            DatePattern.COMMON_DATE_AND_TIME_WITHOUT_YEAR_AND_SECOND,
        )
        == "03-05 23:31"
    )


def test_parse_date_invalid():
    """Test that strings not matching the pattern are rejected."""
    with pytest.raises(DateParseError) as excinfo:
        dateutils.parse_date("2011/03/05", DatePattern.COMMON_DATE)
    assert isinstance(excinfo.value, InvalidArgumentError)
    assert excinfo.value.date_pattern == DatePattern.COMMON_DATE
    with pytest.raises(InvalidArgumentError):
        dateutils.parse_date("2011-03-05", "")
    with pytest.raises(DateParseError):
        dateutils.parse_date(" 2011-03-05", DatePattern.COMMON_DATE)
    with pytest.raises(DateParseError):
        dateutils.parse_date("2011-03-05 ", DatePattern.COMMON_DATE)


def test_day_and_year_boundaries():
    """Test the first and last moments of days and years."""
    instant = datetime.datetime(2024, 2, 29, 13, 45, 12, 500000)
    assert dateutils.get_first_date_of_day(instant) == datetime.datetime(2024, 2, 29)
    assert dateutils.get_last_date_of_day(instant) == datetime.datetime(
        2024, 2, 29, 23, 59, 59, 999000,
    )
    assert dateutils.get_first_date_of_year(instant) == datetime.datetime(2024, 1, 1)
    assert dateutils.get_last_date_of_year(instant) == datetime.datetime(
        2024, 12, 31, 23, 59, 59, 999000,
    )


def test_interval_millis():
    """Test that intervals are absolute and convert to whole units."""
    first = datetime.datetime(2020, 1, 1)
    second = datetime.datetime(2020, 1, 3, 1, 2, 3, 4000)
    millis = dateutils.get_interval_millis(first, second)
    assert millis == dateutils.get_interval_millis(second, first)
    assert millis == 2 * 86400000 + 3600000 + 2 * 60000 + 3000 + 4
    assert dateutils.millis_to_days(millis) == 2
    assert dateutils.millis_to_hours(millis) == 49
    assert dateutils.millis_to_minutes(millis) == 49 * 60 + 2
    assert dateutils.millis_to_seconds(millis) == (49 * 60 + 2) * 60 + 3


def test_calendar_fields():
    """Test year, day of month and date comparison."""
    instant = datetime.datetime(2019, 12, 31, 23, 0)
    assert dateutils.get_year(instant) == 2019
    assert dateutils.get_day_of_month(instant) == 31
    assert dateutils.add_days(instant, 1) == datetime.datetime(2020, 1, 1, 23, 0)
    assert dateutils.is_same_date(instant, datetime.datetime(2019, 12, 31, 0, 1))
    assert not dateutils.is_same_date(instant, datetime.datetime(2020, 12, 31))
    assert dateutils.is_same_date(
        instant,
        datetime.datetime(2020, 12, 31),
        "%m-%d",
    )


def test_get_first_weekday_of_year():
    """Test finding the first occurrence of a weekday in a year."""
    instant = datetime.datetime(2016, 8, 20)
    assert dateutils.get_first_weekday_of_year(
        instant,
        Weekday.THURSDAY,
    ) == datetime.datetime(2016, 1, 7)
    assert dateutils.get_first_weekday_of_year(
        instant,
        Weekday.FRIDAY,
    ) == datetime.datetime(2016, 1, 1)
    assert dateutils.get_first_weekday_of_year(
        instant,
        Weekday.SUNDAY,
    ) == datetime.datetime(2016, 1, 3)
    with pytest.raises(InvalidArgumentError):
        dateutils.get_first_weekday_of_year(instant, 9)


def test_get_first_weekday_of_year_time_of_day():
    """Test that the first weekday keeps the time of day of the instant."""
    assert dateutils.get_first_weekday_of_year(
        datetime.datetime(2016, 6, 15, 12, 34, 56, 789000),
        Weekday.THURSDAY,
    ) == datetime.datetime(2016, 1, 7, 12, 34, 56, 789000)


@pytest.mark.usefixtures("new_york_time")
def test_interval_millis_dst():
    """Test that intervals measure elapsed time when DST starts or ends."""
    assert dateutils.get_interval_millis(
        datetime.datetime(2024, 3, 10, 1, 0),
        datetime.datetime(2024, 3, 10, 4, 0),
    ) == 2 * dateutils.MILLISECONDS_PER_HOUR
    assert dateutils.get_interval_millis(
        datetime.datetime(2024, 11, 3, 0, 0),
        datetime.datetime(2024, 11, 3, 3, 0),
    ) == 4 * dateutils.MILLISECONDS_PER_HOUR


@pytest.mark.usefixtures("new_york_time")
def test_to_instant_repeated_hour():
    """Test that aware times in the repeated hour keep their order in local time."""
    first = dateutils.to_instant(
        datetime.datetime(2024, 11, 3, 5, 30, tzinfo=datetime.timezone.utc),
    )
    second = dateutils.to_instant(
        datetime.datetime(2024, 11, 3, 6, 30, tzinfo=datetime.timezone.utc),
    )
    assert first == second == datetime.datetime(2024, 11, 3, 1, 30)
    assert (first.fold, second.fold) == (0, 1)
    assert (
        dateutils.get_interval_millis(first, second)
        == dateutils.MILLISECONDS_PER_HOUR
    )

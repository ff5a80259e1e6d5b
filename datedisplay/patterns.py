"""Common date patterns."""

import enum


class DatePattern:
    """strftime/strptime patterns used throughout datedisplay."""

    # pylint: disable=too-few-public-methods
    COMMON_DATE = "%Y-%m-%d"
    COMMON_TIME = "%H:%M:%S"
    COMMON_TIME_WITHOUT_SECOND = "%H:%M"
    COMMON_DATE_AND_TIME = "%Y-%m-%d %H:%M:%S"
    COMMON_DATE_AND_TIME_WITH_MILLISECOND = "%Y-%m-%d %H:%M:%S.%f"
    COMMON_DATE_AND_TIME_WITHOUT_SECOND = "%Y-%m-%d %H:%M"
    COMMON_DATE_AND_TIME_WITHOUT_YEAR_AND_SECOND = "%m-%d %H:%M"
    TIMESTAMP = "%Y%m%d%H%M%S"


class Weekday(enum.IntEnum):
    """Day of the week, counted from Sunday = 1."""

    SUNDAY = 1
    MONDAY = 2
    TUESDAY = 3
    WEDNESDAY = 4
    THURSDAY = 5
    FRIDAY = 6
    SATURDAY = 7

    def to_iso_index(self) -> int:
        """Convert to the Monday = 0 index used by `datetime.weekday`."""
        return (self.value - 2) % 7

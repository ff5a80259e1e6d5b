"""Human-friendly display of dates, date ranges and durations."""

import logging

from datedisplay.clock import SYSTEM_CLOCK, Clock, FixedClock, SystemClock
from datedisplay.errors import (
    DateDisplayError,
    DateParseError,
    InvalidArgumentError,
    MissingArgumentError,
)
from datedisplay.formatter import (
    get_interval_day_list,
    get_interval_for_view,
    get_interval_for_view_between,
    get_reset_today_and_tomorrow,
    get_reset_yesterday_and_today,
    get_week_date_string_list,
    parse_interval_day_list,
    to_pretty_date_string,
    to_string_list,
)
from datedisplay.labels import CHINESE, DEFAULT_LABELS, ENGLISH, DisplayLabels, get_labels
from datedisplay.models import DateInterval, DurationComponents
from datedisplay.patterns import DatePattern, Weekday

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "CHINESE",
    "DEFAULT_LABELS",
    "ENGLISH",
    "SYSTEM_CLOCK",
    "Clock",
    "DateDisplayError",
    "DateInterval",
    "DateParseError",
    "DatePattern",
    "DisplayLabels",
    "DurationComponents",
    "FixedClock",
    "InvalidArgumentError",
    "MissingArgumentError",
    "SystemClock",
    "Weekday",
    "get_interval_day_list",
    "get_interval_for_view",
    "get_interval_for_view_between",
    "get_labels",
    "get_reset_today_and_tomorrow",
    "get_reset_yesterday_and_today",
    "get_week_date_string_list",
    "parse_interval_day_list",
    "to_pretty_date_string",
    "to_string_list",
]

"""Wording used in display strings."""

from __future__ import annotations

from attrs import define

from datedisplay.errors import InvalidArgumentError


@define(frozen=True)
class DisplayLabels:
    """Set of words used to build display strings.

    The ``*_ago`` fields are `str.format` templates taking the elapsed amount
    as their only positional argument. The unit fields are appended directly
    after each duration component.
    """

    # pylint: disable=too-many-instance-attributes
    day: str
    hour: str
    minute: str
    second: str
    millisecond: str
    seconds_ago: str
    minutes_ago: str
    hours_ago: str
    yesterday: str
    day_before_yesterday: str


ENGLISH = DisplayLabels(
    day="d",
    hour="h",
    minute="min",
    second="s",
    millisecond="ms",
    seconds_ago="{} seconds ago",
    minutes_ago="{} minutes ago",
    hours_ago="{} hours ago",
    yesterday="Yesterday",
    day_before_yesterday="The day before yesterday",
)

CHINESE = DisplayLabels(
    day="天",
    hour="小时",
    minute="分钟",
    second="秒",
    millisecond="毫秒",
    seconds_ago="{}秒前",
    minutes_ago="{}分钟前",
    hours_ago="{}小时前",
    yesterday="昨天",
    day_before_yesterday="前天",
)

DEFAULT_LABELS = ENGLISH

_LABELS_BY_LOCALE = {
    "en": ENGLISH,
    "zh_CN": CHINESE,
}


def get_labels(locale: str) -> DisplayLabels:
    """Look up a predefined set of labels by locale name.

    Parameters
    ----------
    locale
        Locale name, e.g. ``"en"`` or ``"zh_CN"``.

    Returns
    -------
    DisplayLabels
        Labels for that locale.
    """
    try:
        return _LABELS_BY_LOCALE[locale]
    except KeyError as err:
        raise InvalidArgumentError(
            "locale",
            f"must be one of {sorted(_LABELS_BY_LOCALE)}, not {locale!r}",
        ) from err

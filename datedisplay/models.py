"""Value types describing intervals and durations."""

from __future__ import annotations

import datetime

from attrs import Attribute, define, field
from typing_extensions import Self

from datedisplay import dateutils
from datedisplay.errors import InvalidArgumentError


def _check_order(
    instance: DateInterval,
    _: Attribute[datetime.datetime],
    value: datetime.datetime,
) -> None:
    if value < instance.min:
        raise InvalidArgumentError(
            "max",
            f"{value} is earlier than min {instance.min}",
        )


@define(frozen=True)
class DateInterval:
    """An ordered pair of datetimes."""

    min: datetime.datetime
    max: datetime.datetime = field(validator=[_check_order])

    @classmethod
    def from_instants(
        cls,
        first: dateutils.DateLike | None,
        second: dateutils.DateLike | None,
    ) -> Self:
        """Order two date-like values so that the earlier one is ``min``."""
        first_instant = dateutils.to_instant(first, "first")
        second_instant = dateutils.to_instant(second, "second")
        if second_instant < first_instant:
            return cls(second_instant, first_instant)
        return cls(first_instant, second_instant)

    def reset_to_days(self) -> Self:
        """Stretch the interval to cover its first and last days entirely."""
        return type(self)(
            dateutils.get_first_date_of_day(self.min),
            dateutils.get_last_date_of_day(self.max),
        )

    def get_span_days(self) -> int:
        """Count the calendar days from ``min`` to ``max``."""
        return (self.max.date() - self.min.date()).days


def _check_non_negative(
    _: DurationComponents,
    attribute: Attribute[int],
    value: int,
) -> None:
    if value < 0:
        raise InvalidArgumentError(attribute.name, "can't be negative")


@define(frozen=True)
class DurationComponents:
    """A duration split into days, hours, minutes, seconds and milliseconds."""

    days: int = field(default=0, validator=[_check_non_negative])
    hours: int = field(default=0, validator=[_check_non_negative])
    minutes: int = field(default=0, validator=[_check_non_negative])
    seconds: int = field(default=0, validator=[_check_non_negative])
    milliseconds: int = field(default=0, validator=[_check_non_negative])

    @classmethod
    def from_millis(cls, milliseconds: int) -> Self:
        """Decompose a non-negative millisecond count.

        Each component is what remains after removing all larger units, so
        hours < 24, minutes < 60, seconds < 60 and milliseconds < 1000.
        """
        if milliseconds < 0:
            raise InvalidArgumentError("milliseconds", "can't be negative")
        days = dateutils.millis_to_days(milliseconds)
        hours = dateutils.millis_to_hours(milliseconds) - days * 24
        minutes = dateutils.millis_to_minutes(milliseconds) - (days * 24 + hours) * 60
        seconds = (
            dateutils.millis_to_seconds(milliseconds)
            - ((days * 24 + hours) * 60 + minutes) * 60
        )
        return cls(
            days=days,
            hours=hours,
            minutes=minutes,
            seconds=seconds,
            milliseconds=milliseconds
            - (((days * 24 + hours) * 60 + minutes) * 60 + seconds) * 1000,
        )

    def total_millis(self) -> int:
        """Recompose the duration into milliseconds."""
        return (
            self.days * dateutils.MILLISECONDS_PER_DAY
            + self.hours * dateutils.MILLISECONDS_PER_HOUR
            + self.minutes * dateutils.MILLISECONDS_PER_MINUTE
            + self.seconds * dateutils.MILLISECONDS_PER_SECOND
            + self.milliseconds
        )

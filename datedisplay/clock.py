"""Sources of the current time."""

from __future__ import annotations

import datetime
from abc import ABCMeta, abstractmethod

from attrs import define, field

from datedisplay import dateutils


class Clock(metaclass=ABCMeta):
    """Something that knows what time it is."""

    # pylint: disable=too-few-public-methods
    @abstractmethod
    def now(self) -> datetime.datetime:
        """Get the current time as a naive local datetime."""


class SystemClock(Clock):
    """Clock reading the local system time."""

    # pylint: disable=too-few-public-methods
    def now(self) -> datetime.datetime:
        """Get the current system time."""
        return dateutils.to_instant(datetime.datetime.now())


@define(frozen=True)
class FixedClock(Clock):
    """Clock stopped at a given instant."""

    instant: datetime.datetime = field(
        converter=lambda value: dateutils.to_instant(value, "instant"),
    )

    def now(self) -> datetime.datetime:
        """Get the stopped time."""
        return self.instant


SYSTEM_CLOCK = SystemClock()

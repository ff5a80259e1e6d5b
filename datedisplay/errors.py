"""Exceptions raised by datedisplay."""

from __future__ import annotations


class DateDisplayError(ValueError):
    """Base class for all datedisplay errors."""


class MissingArgumentError(DateDisplayError):
    """Exception raised when a required argument is absent."""

    def __init__(self, argument: str) -> None:
        """Describe the problem."""
        self.argument = argument
        super().__init__(f"{argument} can't be None")


class InvalidArgumentError(DateDisplayError):
    """Exception raised when an argument is blank or out of range."""

    def __init__(self, argument: str, reason: str) -> None:
        """Describe the problem."""
        self.argument = argument
        super().__init__(f"{argument} {reason}")


class DateParseError(InvalidArgumentError):
    """Exception raised when a string doesn't match its date pattern."""

    def __init__(self, date_string: str, date_pattern: str) -> None:
        """Describe the problem."""
        self.date_string = date_string
        self.date_pattern = date_pattern
        super().__init__(
            "date_string",
            f"{date_string!r} doesn't match pattern {date_pattern!r}",
        )

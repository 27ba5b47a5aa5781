"""Exceptions raised when a date expression cannot be resolved."""

from typing import Optional


class ParseError(ValueError):
    """Base class for every failure to turn text into a date."""

    def __init__(self, message: str, text: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.text = text

    def __str__(self) -> str:
        if self.text is None:
            return self.message
        return f"{self.message}: {self.text!r}"


class UnrecognizedFormatError(ParseError):
    """No known pattern matches the input."""

    def __init__(self, text: Optional[str] = None):
        super().__init__("Unrecognized date format", text)


class InvalidCalendarDateError(ParseError):
    """The input looks like a date but names a day that does not exist."""

    def __init__(self, year: int, month: int, day: int, text: Optional[str] = None):
        super().__init__(f"Invalid date {year:04d}-{month:02d}-{day:02d}", text)
        self.year = year
        self.month = month
        self.day = day


class InvalidMonthNameError(ParseError):
    """Alphabetic month token is not a known month name."""

    def __init__(self, name: str, text: Optional[str] = None):
        super().__init__(f"Invalid month name {name!r}", text)
        self.name = name


class InvalidWeekdayNameError(ParseError):
    """Weekday token is not a known weekday name."""

    def __init__(self, name: str, text: Optional[str] = None):
        super().__init__(f"Invalid weekday {name!r}", text)
        self.name = name


class InvalidTimeUnitError(ParseError):
    """Relative offset carries a unit we do not know."""

    def __init__(self, unit: str, text: Optional[str] = None):
        super().__init__(f"Invalid time unit {unit!r}", text)
        self.unit = unit


class NoValidDateInRangeError(ParseError):
    """Ordinal day search ran past its forward window."""

    def __init__(self, day: int, text: Optional[str] = None):
        super().__init__(
            f"Could not find day {day} within reasonable timeframe", text
        )
        self.day = day

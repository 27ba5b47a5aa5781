"""Temporis - resolve short human date expressions to calendar dates."""

# Import modules for re-export
from . import calendar_tools, config, errors, months, offsets, parser, weekdays

# Expose the main entry points
from .parser import resolve, parse_date, classify, normalize

# Expose configuration and errors
from .config import ResolverConfig
from .errors import (
    ParseError,
    UnrecognizedFormatError,
    InvalidCalendarDateError,
    InvalidMonthNameError,
    InvalidWeekdayNameError,
    InvalidTimeUnitError,
    NoValidDateInRangeError,
)

# Expose lookup types
from .months import Month
from .weekdays import Weekday
from .offsets import TimeUnit

# Explicit re-exports
__all__ = [
    # Modules
    "calendar_tools",
    "config",
    "errors",
    "months",
    "offsets",
    "parser",
    "weekdays",
    # Entry points
    "resolve",
    "parse_date",
    "classify",
    "normalize",
    # Configuration
    "ResolverConfig",
    # Errors
    "ParseError",
    "UnrecognizedFormatError",
    "InvalidCalendarDateError",
    "InvalidMonthNameError",
    "InvalidWeekdayNameError",
    "InvalidTimeUnitError",
    "NoValidDateInRangeError",
    # Lookup types
    "Month",
    "Weekday",
    "TimeUnit",
]

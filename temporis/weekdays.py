"""Weekday names and next-occurrence arithmetic."""

from datetime import date, timedelta
from enum import IntEnum

from .errors import InvalidWeekdayNameError


class Weekday(IntEnum):
    """Days of the week, numbered like ``date.weekday()``."""

    MONDAY = 0
    TUESDAY = 1
    WEDNESDAY = 2
    THURSDAY = 3
    FRIDAY = 4
    SATURDAY = 5
    SUNDAY = 6


WEEKDAY_ALIASES: dict[str, Weekday] = {}
for _day in Weekday:
    WEEKDAY_ALIASES[_day.name.lower()] = _day
    WEEKDAY_ALIASES[_day.name.lower()[:3]] = _day

# Longest names first so the alternation never stops at an abbreviation.
WEEKDAY_PATTERN = "|".join(sorted(WEEKDAY_ALIASES, key=len, reverse=True))


def parse_weekday(name: str) -> Weekday:
    """Return the ``Weekday`` for an abbreviated or full English day name."""
    weekday = WEEKDAY_ALIASES.get(name.lower())
    if weekday is None:
        raise InvalidWeekdayNameError(name)
    return weekday


def _days_until(target: Weekday, today: date) -> int:
    return (target - today.weekday()) % 7


def find_next_weekday(target: Weekday, today: date) -> date:
    """Return the next ``target`` strictly after ``today``.

    Asking for today's own weekday gives the date one week later.
    """
    days = _days_until(target, today)
    if days <= 0:
        days += 7
    return today + timedelta(days=days)


def find_weekday_offset(target: Weekday, weeks_ahead: int, today: date) -> date:
    """Return ``target`` shifted ``weeks_ahead`` weeks.

    With ``weeks_ahead == 0`` this is ``find_next_weekday``. Otherwise the
    anchor is ``target`` within the current Monday-based week, which may be
    today or already behind us, and whole weeks are added to it.
    """
    if weeks_ahead == 0:
        return find_next_weekday(target, today)
    days = target - today.weekday()
    return today + timedelta(days=days + weeks_ahead * 7)


def find_next_week_weekday(target: Weekday, today: date) -> date:
    """Return the ``target`` one full week after its next occurrence."""
    return find_next_weekday(target, today) + timedelta(weeks=1)

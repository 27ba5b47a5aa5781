"""Calendar validation and business period boundaries."""

import calendar
import logging
from datetime import date, datetime, timedelta
from typing import Callable, Dict

from dateutil.relativedelta import relativedelta

from .errors import InvalidCalendarDateError, NoValidDateInRangeError
from .weekdays import Weekday, find_next_weekday

logger = logging.getLogger(__name__)

QUARTER_START_MONTHS = (1, 4, 7, 10)


def get_current_moment() -> datetime:
    """Return the current local time. Read once per resolution."""
    return datetime.now()


def is_leap_year(year: int) -> bool:
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def days_in_month(year: int, month: int) -> int:
    """Return the number of days in ``month`` of ``year``."""
    if not 1 <= month <= 12:
        raise InvalidCalendarDateError(year, month, 1)
    if month == 2 and is_leap_year(year):
        return 29
    return calendar.mdays[month]


def make_date(year: int, month: int, day: int) -> date:
    """Build a date, raising ``InvalidCalendarDateError`` for impossible days."""
    if not (date.min.year <= year <= date.max.year and 1 <= month <= 12):
        raise InvalidCalendarDateError(year, month, day)
    if not 1 <= day <= days_in_month(year, month):
        raise InvalidCalendarDateError(year, month, day)
    return date(year, month, day)


def _month_start(today: date) -> date:
    return today.replace(day=1)


def _quarter_start(today: date) -> date:
    month = QUARTER_START_MONTHS[(today.month - 1) // 3]
    return date(today.year, month, 1)


def _year_start(today: date) -> date:
    return date(today.year, 1, 1)


def start_of_next_month(today: date) -> date:
    return _month_start(today) + relativedelta(months=1)


def start_of_next_quarter(today: date) -> date:
    return _quarter_start(today) + relativedelta(months=3)


def start_of_next_year(today: date) -> date:
    return _year_start(today) + relativedelta(years=1)


def end_of_current_month(today: date) -> date:
    return start_of_next_month(today) - timedelta(days=1)


def end_of_current_quarter(today: date) -> date:
    return start_of_next_quarter(today) - timedelta(days=1)


def end_of_current_year(today: date) -> date:
    return start_of_next_year(today) - timedelta(days=1)


def end_of_next_month(today: date) -> date:
    return _month_start(today) + relativedelta(months=2) - timedelta(days=1)


def end_of_next_quarter(today: date) -> date:
    return _quarter_start(today) + relativedelta(months=6) - timedelta(days=1)


def end_of_next_year(today: date) -> date:
    return _year_start(today) + relativedelta(years=2) - timedelta(days=1)


def start_of_next_week(today: date) -> date:
    """Next Monday, never today."""
    return find_next_weekday(Weekday.MONDAY, today)


def end_of_current_week(today: date) -> date:
    """The Sunday closing this week; today when today is Sunday."""
    return start_of_next_week(today) - timedelta(days=1)


def end_of_next_week(today: date) -> date:
    return start_of_next_week(today) + timedelta(days=6)


def end_of_work_week(today: date) -> date:
    """Next Saturday, never today."""
    return find_next_weekday(Weekday.SATURDAY, today)


# Business period markers. Work weeks run Monday to Saturday.
PERIOD_MARKERS: Dict[str, Callable[[date], date]] = {
    "sow": start_of_next_week,
    "soww": start_of_next_week,
    "som": start_of_next_month,
    "soq": start_of_next_quarter,
    "soy": start_of_next_year,
    "eow": end_of_current_week,
    "eoww": end_of_work_week,
    "eom": end_of_current_month,
    "eoq": end_of_current_quarter,
    "eoy": end_of_current_year,
    "eonw": end_of_next_week,
    "eonm": end_of_next_month,
    "eonq": end_of_next_quarter,
    "eony": end_of_next_year,
}


def find_next_occurrence(today: date, month: int, day: int) -> date:
    """Return ``month``/``day`` on or after ``today``, this year or next."""
    try:
        candidate = make_date(today.year, month, day)
    except InvalidCalendarDateError:
        candidate = None
    if candidate is not None and candidate >= today:
        return candidate
    return make_date(today.year + 1, month, day)


def find_next_occurrence_of_day(today: date, day: int, search_years: int = 2) -> date:
    """Return the next date whose day of month is ``day``.

    The search starts next month when ``day`` is today or already past,
    then walks forward month by month, skipping months too short to hold
    ``day`` (``31`` skips April, June and so on). Gives up with
    ``NoValidDateInRangeError`` once it passes ``search_years`` years ahead.
    """
    year, month = today.year, today.month
    last_year = min(year + search_years, date.max.year)
    if today.day >= day:
        month += 1
        if month > 12:
            month = 1
            year += 1

    while year <= last_year:
        if 1 <= day <= days_in_month(year, month):
            return date(year, month, day)
        month += 1
        if month > 12:
            month = 1
            year += 1

    logger.debug("No month holds day %s within %s years of %s", day, search_years, today)
    raise NoValidDateInRangeError(day)

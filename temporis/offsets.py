"""Relative offsets such as ``5d``, ``-2w`` or ``3months``."""

from datetime import date, timedelta
from enum import Enum
from typing import Optional

from .config import ResolverConfig
from .errors import InvalidTimeUnitError


class TimeUnit(Enum):
    DAY = "day"
    WEEK = "week"
    MONTH = "month"
    YEAR = "year"


UNIT_ALIASES: dict[str, TimeUnit] = {
    "d": TimeUnit.DAY,
    "day": TimeUnit.DAY,
    "days": TimeUnit.DAY,
    "w": TimeUnit.WEEK,
    "wk": TimeUnit.WEEK,
    "wks": TimeUnit.WEEK,
    "week": TimeUnit.WEEK,
    "weeks": TimeUnit.WEEK,
    "m": TimeUnit.MONTH,
    "mth": TimeUnit.MONTH,
    "mths": TimeUnit.MONTH,
    "month": TimeUnit.MONTH,
    "months": TimeUnit.MONTH,
    "y": TimeUnit.YEAR,
    "yr": TimeUnit.YEAR,
    "yrs": TimeUnit.YEAR,
    "year": TimeUnit.YEAR,
    "years": TimeUnit.YEAR,
}


def parse_unit(token: str) -> TimeUnit:
    unit = UNIT_ALIASES.get(token.lower())
    if unit is None:
        raise InvalidTimeUnitError(token)
    return unit


def offset_to_timedelta(
    amount: int, unit: TimeUnit, config: Optional[ResolverConfig] = None
) -> timedelta:
    """Convert ``amount`` units to a ``timedelta``.

    Months and years are fixed day counts (30 and 365 by default), not
    calendar steps, so ``12m`` and ``1y`` land on different days.
    """
    config = config or ResolverConfig()
    if unit is TimeUnit.DAY:
        return timedelta(days=amount)
    if unit is TimeUnit.WEEK:
        return timedelta(weeks=amount)
    if unit is TimeUnit.MONTH:
        return timedelta(days=amount * config.month_length_days)
    return timedelta(days=amount * config.year_length_days)


def apply_offset(
    today: date, amount: int, unit: TimeUnit, config: Optional[ResolverConfig] = None
) -> date:
    """Return ``today`` moved by ``amount`` units; negative amounts go back."""
    return today + offset_to_timedelta(amount, unit, config)

"""English month names and their numbers."""

from enum import IntEnum

from .errors import InvalidMonthNameError


class Month(IntEnum):
    JANUARY = 1
    FEBRUARY = 2
    MARCH = 3
    APRIL = 4
    MAY = 5
    JUNE = 6
    JULY = 7
    AUGUST = 8
    SEPTEMBER = 9
    OCTOBER = 10
    NOVEMBER = 11
    DECEMBER = 12


MONTH_ALIASES: dict[str, Month] = {}
for _month in Month:
    MONTH_ALIASES[_month.name.lower()] = _month
    MONTH_ALIASES[_month.name.lower()[:3]] = _month


def parse_month(name: str) -> Month:
    """Return the ``Month`` for an abbreviated or full English month name.

    Matching is case-insensitive and exact: ``"sept"`` or ``"janu"`` are
    rejected with ``InvalidMonthNameError``.
    """
    month = MONTH_ALIASES.get(name.lower())
    if month is None:
        raise InvalidMonthNameError(name)
    return month

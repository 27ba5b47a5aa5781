"""Turn short date expressions like ``16/01/2024``, ``eonq`` or ``nfri`` into dates.

Patterns are tried in a fixed order and the first whose shape matches owns
the input: if its resolver rejects the payload (``2024-02-30``) the error
is raised, and no later pattern gets a chance.
"""

import logging
import re
from datetime import date, datetime, timedelta
from typing import Callable, NamedTuple, Optional, Union

from .calendar_tools import (
    PERIOD_MARKERS,
    find_next_occurrence,
    find_next_occurrence_of_day,
    get_current_moment,
    make_date,
)
from .config import ResolverConfig
from .errors import InvalidCalendarDateError, ParseError, UnrecognizedFormatError
from .months import parse_month
from .offsets import apply_offset, parse_unit
from .weekdays import (
    WEEKDAY_PATTERN,
    find_next_week_weekday,
    find_next_weekday,
    find_weekday_offset,
    parse_weekday,
)

logger = logging.getLogger(__name__)

Resolver = Callable[[re.Match, date, ResolverConfig], date]

KEYWORD_OFFSETS = {
    "today": 0,
    "tod": 0,
    "now": 0,
    "yesterday": -1,
    "yes": -1,
    "tomorrow": 1,
    "tom": 1,
}


class DatePattern(NamedTuple):
    name: str
    regex: re.Pattern
    resolver: Resolver


def _alternation(words) -> str:
    return "|".join(sorted(words, key=len, reverse=True))


def _resolve_ymd(match: re.Match, today: date, config: ResolverConfig) -> date:
    year, month, day = (int(g) for g in match.groups())
    return make_date(year, month, day)


def _resolve_dmy(match: re.Match, today: date, config: ResolverConfig) -> date:
    day, month, year = (int(g) for g in match.groups())
    return make_date(year, month, day)


def _resolve_keyword(match: re.Match, today: date, config: ResolverConfig) -> date:
    return today + timedelta(days=KEYWORD_OFFSETS[match.group(1)])


def _resolve_weekday(match: re.Match, today: date, config: ResolverConfig) -> date:
    return find_next_weekday(parse_weekday(match.group(1)), today)


def _resolve_next_weekday(match: re.Match, today: date, config: ResolverConfig) -> date:
    return find_next_week_weekday(parse_weekday(match.group(1)), today)


def _resolve_numbered_weekday(match: re.Match, today: date, config: ResolverConfig) -> date:
    weeks_ahead = int(match.group(1))
    return find_weekday_offset(parse_weekday(match.group(2)), weeks_ahead, today)


def _resolve_marker(match: re.Match, today: date, config: ResolverConfig) -> date:
    return PERIOD_MARKERS[match.group(1)](today)


def _resolve_ordinal(match: re.Match, today: date, config: ResolverConfig) -> date:
    day = int(match.group(1))
    if not 1 <= day <= 31:
        raise InvalidCalendarDateError(today.year, today.month, day)
    return find_next_occurrence_of_day(today, day, config.ordinal_search_years)


def _resolve_relative(match: re.Match, today: date, config: ResolverConfig) -> date:
    amount = int(match.group(1))
    return apply_offset(today, amount, parse_unit(match.group(2)), config)


def _resolve_day_month(match: re.Match, today: date, config: ResolverConfig) -> date:
    day = int(match.group(1))
    month = parse_month(match.group(2))
    return find_next_occurrence(today, month, day)


def _resolve_month_day(match: re.Match, today: date, config: ResolverConfig) -> date:
    month = parse_month(match.group(1))
    day = int(match.group(2))
    return find_next_occurrence(today, month, day)


def _resolve_full_dmy_alpha(match: re.Match, today: date, config: ResolverConfig) -> date:
    day = int(match.group(1))
    month = parse_month(match.group(2))
    return make_date(int(match.group(3)), month, day)


def _resolve_full_ymd_alpha(match: re.Match, today: date, config: ResolverConfig) -> date:
    year = int(match.group(1))
    month = parse_month(match.group(2))
    return make_date(year, month, int(match.group(3)))


def _resolve_short(match: re.Match, today: date, config: ResolverConfig) -> date:
    day, month = (int(g) for g in match.groups())
    return find_next_occurrence(today, month, day)


def _pattern(name: str, regex: str, resolver: Resolver) -> DatePattern:
    return DatePattern(name, re.compile(regex, re.ASCII), resolver)


# Order matters: the first shape that matches owns the input.
PATTERNS: tuple[DatePattern, ...] = (
    _pattern("ymd", r"(\d{4})[-/](\d{1,2})[-/](\d{1,2})", _resolve_ymd),
    _pattern("dmy", r"(\d{1,2})[-/](\d{1,2})[-/](\d{4})", _resolve_dmy),
    _pattern("keyword", rf"({_alternation(KEYWORD_OFFSETS)})", _resolve_keyword),
    _pattern("weekday", rf"({WEEKDAY_PATTERN})", _resolve_weekday),
    _pattern("next_weekday", rf"n({WEEKDAY_PATTERN})", _resolve_next_weekday),
    _pattern("numbered_weekday", rf"(\d+)({WEEKDAY_PATTERN})", _resolve_numbered_weekday),
    _pattern("period_marker", rf"({_alternation(PERIOD_MARKERS)})", _resolve_marker),
    _pattern("ordinal", r"(\d{1,2})(st|nd|rd|th)", _resolve_ordinal),
    _pattern("relative", r"(-?\d+)([a-z]+)", _resolve_relative),
    _pattern("day_month", r"(\d{1,2})[-/]([a-z]+)", _resolve_day_month),
    _pattern("month_day", r"([a-z]+)[-/](\d{1,2})", _resolve_month_day),
    _pattern("full_dmy_alpha", r"(\d{1,2})[-/]([a-z]+)[-/](\d{4})", _resolve_full_dmy_alpha),
    _pattern("full_ymd_alpha", r"(\d{4})[-/]([a-z]+)[-/](\d{1,2})", _resolve_full_ymd_alpha),
    _pattern("short", r"(\d{1,2})[-/](\d{1,2})", _resolve_short),
)


def normalize(text: str) -> str:
    """Strip surrounding whitespace and lowercase. Inner whitespace is kept."""
    return text.strip().lower()


def _match(normalized: str) -> Optional[tuple[DatePattern, re.Match]]:
    for pattern in PATTERNS:
        match = pattern.regex.fullmatch(normalized)
        if match:
            return pattern, match
    return None


def classify(text: str) -> Optional[str]:
    """Return the name of the pattern that would handle ``text``, if any."""
    found = _match(normalize(text))
    return found[0].name if found else None


def resolve(
    text: str,
    now: Union[datetime, date, None] = None,
    *,
    config: Optional[ResolverConfig] = None,
) -> date:
    """Resolve a date expression relative to ``now``.

    Args:
        text: Expression such as ``"2024-01-16"``, ``"tom"``, ``"2fri"``,
            ``"eoq"``, ``"15th"``, ``"-3w"`` or ``"16-jan"``
        now: Reference moment; the clock is read once when omitted
        config: Resolution constants, defaults to ``ResolverConfig()``

    Returns:
        The resolved calendar date

    Raises:
        ParseError: One of its subclasses, naming why ``text`` was rejected
    """
    normalized = normalize(text)
    if now is None:
        now = get_current_moment()
    today = now.date() if isinstance(now, datetime) else now
    config = config or ResolverConfig()

    found = _match(normalized)
    if found is None:
        logger.debug("No pattern matches %r", normalized)
        raise UnrecognizedFormatError(normalized)

    pattern, match = found
    try:
        result = pattern.resolver(match, today, config)
    except ParseError as e:
        if e.text is None:
            e.text = normalized
        logger.debug("Pattern %s rejected %r: %s", pattern.name, normalized, e.message)
        raise
    except (OverflowError, ValueError) as e:
        logger.debug("Pattern %s overflowed on %r: %s", pattern.name, normalized, e)
        raise ParseError("Date out of range", normalized) from e

    logger.debug("Pattern %s resolved %r to %s", pattern.name, normalized, result)
    return result


parse_date = resolve

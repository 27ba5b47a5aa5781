from datetime import date, datetime

import pytest


@pytest.fixture
def today():
    """Tuesday, January 16 2024 (a leap year)."""
    return date(2024, 1, 16)


@pytest.fixture
def now(today):
    """Late evening on the same Tuesday."""
    return datetime(today.year, today.month, today.day, 23, 59, 30)

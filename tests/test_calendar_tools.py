"""Comprehensive tests for calendar_tools module."""

import pytest
from datetime import date, datetime
from unittest.mock import patch

from temporis import calendar_tools
from temporis.errors import InvalidCalendarDateError, NoValidDateInRangeError


class TestGetCurrentMoment:
    """Tests for get_current_moment function."""

    def test_returns_datetime_object(self):
        assert isinstance(calendar_tools.get_current_moment(), datetime)

    @patch('temporis.calendar_tools.datetime')
    def test_calls_datetime_now(self, mock_datetime):
        """Test that function calls datetime.now()."""
        mock_datetime.now.return_value = datetime(2023, 6, 15, 12, 0)
        result = calendar_tools.get_current_moment()
        mock_datetime.now.assert_called_once()
        assert result == datetime(2023, 6, 15, 12, 0)


class TestLeapYears:
    """Tests for is_leap_year and days_in_month."""

    def test_leap_rule(self):
        assert calendar_tools.is_leap_year(2024)
        assert calendar_tools.is_leap_year(2000)
        assert calendar_tools.is_leap_year(1600)
        assert not calendar_tools.is_leap_year(2023)
        assert not calendar_tools.is_leap_year(2100)
        assert not calendar_tools.is_leap_year(1900)

    def test_days_in_month(self):
        assert calendar_tools.days_in_month(2024, 1) == 31
        assert calendar_tools.days_in_month(2024, 2) == 29
        assert calendar_tools.days_in_month(2023, 2) == 28
        assert calendar_tools.days_in_month(2100, 2) == 28
        assert calendar_tools.days_in_month(2024, 4) == 30
        assert calendar_tools.days_in_month(2024, 12) == 31

    def test_days_in_month_bad_month(self):
        with pytest.raises(InvalidCalendarDateError):
            calendar_tools.days_in_month(2024, 13)


class TestMakeDate:
    """Tests for make_date function."""

    def test_valid(self):
        assert calendar_tools.make_date(2024, 2, 29) == date(2024, 2, 29)
        assert calendar_tools.make_date(1, 1, 1) == date(1, 1, 1)

    def test_invalid(self):
        for ymd in [(2023, 2, 29), (2024, 0, 1), (2024, 13, 1), (2024, 1, 0),
                    (2024, 4, 31), (0, 1, 1), (10000, 1, 1)]:
            with pytest.raises(InvalidCalendarDateError) as exc_info:
                calendar_tools.make_date(*ymd)
            assert (exc_info.value.year, exc_info.value.month, exc_info.value.day) == ymd


class TestPeriodBoundaries:
    """Tests for month, quarter and year boundaries."""

    def test_month_boundaries(self):
        today = date(2023, 6, 15)
        assert calendar_tools.start_of_next_month(today) == date(2023, 7, 1)
        assert calendar_tools.end_of_current_month(today) == date(2023, 6, 30)
        assert calendar_tools.end_of_next_month(today) == date(2023, 7, 31)

    def test_february_ends(self):
        assert calendar_tools.end_of_current_month(date(2023, 2, 1)) == date(2023, 2, 28)
        assert calendar_tools.end_of_next_month(date(2024, 1, 31)) == date(2024, 2, 29)

    def test_last_day_is_end_of_month(self):
        assert calendar_tools.end_of_current_month(date(2023, 6, 30)) == date(2023, 6, 30)

    def test_quarter_boundaries(self):
        cases = {
            date(2023, 1, 1): (date(2023, 4, 1), date(2023, 3, 31), date(2023, 6, 30)),
            date(2023, 5, 20): (date(2023, 7, 1), date(2023, 6, 30), date(2023, 9, 30)),
            date(2023, 9, 30): (date(2023, 10, 1), date(2023, 9, 30), date(2023, 12, 31)),
            date(2023, 12, 31): (date(2024, 1, 1), date(2023, 12, 31), date(2024, 3, 31)),
        }
        for today, (start_next, end_current, end_next) in cases.items():
            assert calendar_tools.start_of_next_quarter(today) == start_next
            assert calendar_tools.end_of_current_quarter(today) == end_current
            assert calendar_tools.end_of_next_quarter(today) == end_next

    def test_year_boundaries(self):
        today = date(2023, 6, 15)
        assert calendar_tools.start_of_next_year(today) == date(2024, 1, 1)
        assert calendar_tools.end_of_current_year(today) == date(2023, 12, 31)
        assert calendar_tools.end_of_next_year(today) == date(2024, 12, 31)

    def test_week_boundaries(self):
        """June 15 2023 is a Thursday."""
        today = date(2023, 6, 15)
        assert calendar_tools.start_of_next_week(today) == date(2023, 6, 19)
        assert calendar_tools.end_of_current_week(today) == date(2023, 6, 18)
        assert calendar_tools.end_of_next_week(today) == date(2023, 6, 25)
        assert calendar_tools.end_of_work_week(today) == date(2023, 6, 17)

    def test_marker_table_is_complete(self):
        assert set(calendar_tools.PERIOD_MARKERS) == {
            "sow", "soww", "som", "soq", "soy", "eow", "eoww",
            "eom", "eoq", "eoy", "eonw", "eonm", "eonq", "eony",
        }


class TestFindNextOccurrence:
    """Tests for find_next_occurrence function."""

    def test_later_this_year(self):
        assert calendar_tools.find_next_occurrence(date(2023, 6, 15), 7, 4) == date(2023, 7, 4)

    def test_today_counts(self):
        assert calendar_tools.find_next_occurrence(date(2023, 6, 15), 6, 15) == date(2023, 6, 15)

    def test_passed_moves_to_next_year(self):
        assert calendar_tools.find_next_occurrence(date(2023, 6, 15), 6, 14) == date(2024, 6, 14)

    def test_leap_day_from_non_leap_year(self):
        assert calendar_tools.find_next_occurrence(date(2023, 6, 15), 2, 29) == date(2024, 2, 29)

    def test_impossible(self):
        with pytest.raises(InvalidCalendarDateError):
            calendar_tools.find_next_occurrence(date(2023, 6, 15), 4, 31)


class TestFindNextOccurrenceOfDay:
    """Tests for the ordinal day search."""

    def test_same_month(self):
        assert calendar_tools.find_next_occurrence_of_day(date(2023, 6, 15), 20) == date(2023, 6, 20)

    def test_today_moves_forward(self):
        assert calendar_tools.find_next_occurrence_of_day(date(2023, 6, 15), 15) == date(2023, 7, 15)

    def test_skips_short_months(self):
        assert calendar_tools.find_next_occurrence_of_day(date(2023, 5, 31), 31) == date(2023, 7, 31)
        assert calendar_tools.find_next_occurrence_of_day(date(2023, 12, 31), 31) == date(2024, 1, 31)

    def test_no_valid_day(self):
        with pytest.raises(NoValidDateInRangeError) as exc_info:
            calendar_tools.find_next_occurrence_of_day(date(2023, 6, 15), 32)
        assert exc_info.value.day == 32

    def test_stops_at_last_supported_year(self):
        with pytest.raises(NoValidDateInRangeError):
            calendar_tools.find_next_occurrence_of_day(date(9999, 12, 31), 31)
        assert calendar_tools.find_next_occurrence_of_day(date(9999, 11, 30), 31) == date(9999, 12, 31)

    def test_search_window(self):
        with pytest.raises(NoValidDateInRangeError):
            calendar_tools.find_next_occurrence_of_day(date(2023, 6, 15), 0, search_years=1)

"""Unit tests for zexasim.domain.calculator.dates."""

from datetime import date

import pytest

from zexasim.core.exceptions import InvalidParameterError
from zexasim.domain.calculator.dates import (
    add_months,
    approximate_month_date,
    format_month,
    months_elapsed,
)


class TestAddMonths:
    """Tests for calendar month addition."""

    def test_simple(self):
        """Adds whole months within a year."""
        assert add_months(date(2024, 4, 1), 4) == date(2024, 8, 1)

    def test_year_rollover(self):
        """Month addition rolls into the next year."""
        assert add_months(date(2024, 4, 1), 24) == date(2026, 4, 1)

    def test_end_of_month_clamps(self):
        """Day 31 clamps to the last day of shorter months."""
        assert add_months(date(2024, 1, 31), 1) == date(2024, 2, 29)
        assert add_months(date(2023, 1, 31), 1) == date(2023, 2, 28)


class TestMonthsElapsed:
    """Tests for months elapsed since purchase."""

    def test_fixed_30_day_units(self):
        """Fixed mode counts completed 30-day units."""
        purchase = date(2024, 4, 1)
        assert months_elapsed(purchase, date(2024, 4, 1)) == 0
        assert months_elapsed(purchase, date(2024, 5, 1)) == 1
        assert months_elapsed(purchase, date(2024, 6, 1)) == 2
        assert months_elapsed(purchase, date(2024, 8, 1)) == 4

    def test_fixed_mode_lags_behind_calendar_in_february(self):
        """59 days is one 30-day unit even though two calendar months passed."""
        purchase, current = date(2023, 2, 1), date(2023, 4, 1)
        assert months_elapsed(purchase, current, "fixed_30_day") == 1
        assert months_elapsed(purchase, current, "calendar") == 2

    def test_calendar_mode(self):
        """Calendar mode counts whole calendar months."""
        assert months_elapsed(date(2024, 4, 1), date(2025, 4, 1), "calendar") == 12
        assert months_elapsed(date(2024, 1, 31), date(2024, 2, 29), "calendar") == 0

    def test_unknown_mode(self):
        """Unknown month mode raises InvalidParameterError."""
        with pytest.raises(InvalidParameterError):
            months_elapsed(date(2024, 4, 1), date(2024, 5, 1), "weeks")


class TestLabels:
    """Tests for month labels."""

    def test_format_month(self):
        """Labels are zero-padded YYYY/MM."""
        assert format_month(date(2024, 4, 1)) == "2024/04"
        assert format_month(date(2025, 12, 31)) == "2025/12"

    def test_approximate_month_date(self):
        """History dates add 30 days per month."""
        # 4 x 30 days from April 1st lands on July 30th
        assert approximate_month_date(date(2024, 4, 1), 4) == date(2024, 7, 30)

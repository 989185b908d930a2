"""Tests for the tabular Hijri calendar adapter."""

from datetime import date

import pytest

from vakit_hesap.domain.errors import OutOfRangeError
from vakit_hesap.domain.models import HijriDate
from vakit_hesap.infrastructure.hijri_calendar import TabularHijriCalendar


class TestTabularHijriCalendar:
    """TabularHijriCalendar tests."""

    @pytest.fixture
    def calendar(self) -> TabularHijriCalendar:
        """Create calendar."""
        return TabularHijriCalendar()

    def test_to_hijri_ramadan_1445(self, calendar: TabularHijriCalendar) -> None:
        """Test 11 March 2024 is 1 Ramadan 1445."""
        assert calendar.to_hijri(date(2024, 3, 11)) == HijriDate(1445, 9, 1)

    def test_to_gregorian(self, calendar: TabularHijriCalendar) -> None:
        """Test 1 Shawwal 1445 is 10 April 2024."""
        assert calendar.to_gregorian(HijriDate(1445, 10, 1)) == date(2024, 4, 10)

    @pytest.mark.parametrize("day", [date(1901, 1, 1), date(1999, 12, 31), date(2199, 12, 31)])
    def test_conversion_consistent(self, calendar: TabularHijriCalendar, day: date) -> None:
        """Test both directions agree."""
        assert calendar.to_gregorian(calendar.to_hijri(day)) == day

    def test_ramadan_2024(self, calendar: TabularHijriCalendar) -> None:
        """Test Ramadan 1445 span."""
        assert calendar.ramadan_range(2024) == (date(2024, 3, 11), date(2024, 4, 9))

    def test_ramadan_2025(self, calendar: TabularHijriCalendar) -> None:
        """Test Ramadan 1446 starts on 1 March 2025."""
        start, end = calendar.ramadan_range(2025)
        assert start == date(2025, 3, 1)
        assert 29 <= (end - start).days + 1 <= 30

    def test_ramadan_starts_in_requested_year(self, calendar: TabularHijriCalendar) -> None:
        """Test the returned Ramadan always begins in the requested year."""
        for year in range(1990, 2040):
            start, end = calendar.ramadan_range(year)
            assert start.year == year
            assert start < end

    @pytest.mark.parametrize("year", [1900, 2200])
    def test_out_of_range(self, calendar: TabularHijriCalendar, year: int) -> None:
        """Test years outside the supported era are rejected."""
        with pytest.raises(OutOfRangeError):
            calendar.ramadan_range(year)

import pytest
from datetime import date, datetime, timedelta

from app.services.holidays import holidays_for_year, is_holiday

pytestmark = [pytest.mark.unit, pytest.mark.calendar]


class TestHolidaysForYear:

    def test_2025_calendar(self):
        holidays = holidays_for_year(2025)

        assert list(holidays) == [
            date(2025, 1, 1),
            date(2025, 4, 20),
            date(2025, 4, 21),
            date(2025, 5, 1),
            date(2025, 5, 29),
            date(2025, 6, 8),
            date(2025, 6, 9),
            date(2025, 7, 21),
            date(2025, 8, 15),
            date(2025, 11, 1),
            date(2025, 11, 11),
            date(2025, 12, 25),
        ]
        assert holidays[date(2025, 5, 29)] == "Ascension Day"
        assert holidays[date(2025, 6, 9)] == "Whit Monday"

    def test_ascension_on_labour_day_counted_once(self):
        # Easter 2008 was March 23, so Ascension fell on May 1
        holidays = holidays_for_year(2008)

        assert len(holidays) == 11
        assert holidays[date(2008, 5, 1)] == "Labour Day"

    def test_sorted_by_date(self):
        days = list(holidays_for_year(2030))
        assert days == sorted(days)


class TestIsHoliday:

    @pytest.mark.parametrize("year", [2008, 2019, 2024, 2025, 2026])
    def test_true_exactly_for_the_holiday_set(self, year):
        holidays = set(holidays_for_year(year))
        day = date(year, 1, 1)
        while day.year == year:
            assert is_holiday(day) == (day in holidays)
            day += timedelta(days=1)

    def test_ignores_time_of_day(self):
        assert is_holiday(datetime(2025, 12, 25, 0, 0))
        assert is_holiday(datetime(2025, 12, 25, 23, 59, 59))
        assert not is_holiday(datetime(2025, 12, 26, 0, 0))

    def test_uses_year_of_the_date_itself(self):
        assert is_holiday(datetime(2026, 1, 1, 0, 30))
        assert not is_holiday(datetime(2025, 12, 31, 23, 30))

    def test_easter_monday_moves_with_easter(self):
        assert is_holiday(date(2025, 4, 21))
        assert not is_holiday(date(2026, 4, 21))
        assert is_holiday(date(2026, 4, 6))

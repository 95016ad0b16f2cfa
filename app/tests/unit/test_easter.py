import pytest
from datetime import date

from app.services.easter import easter_date

pytestmark = [pytest.mark.unit, pytest.mark.calendar]


@pytest.mark.parametrize("year,expected", [
    (1818, date(1818, 3, 22)),   # earliest possible
    (1943, date(1943, 4, 25)),   # latest possible
    (1961, date(1961, 4, 2)),
    (2000, date(2000, 4, 23)),
    (2008, date(2008, 3, 23)),
    (2011, date(2011, 4, 24)),
    (2019, date(2019, 4, 21)),
    (2023, date(2023, 4, 9)),
    (2024, date(2024, 3, 31)),
    (2025, date(2025, 4, 20)),
    (2026, date(2026, 4, 5)),
    (2038, date(2038, 4, 25)),
    (2285, date(2285, 3, 22)),
])
def test_known_easter_dates(year, expected):
    assert easter_date(year) == expected


def test_always_a_sunday():
    for year in range(1900, 2100):
        assert easter_date(year).weekday() == 6


def test_falls_between_march_22_and_april_25():
    for year in range(1583, 3000):
        easter = easter_date(year)
        assert date(year, 3, 22) <= easter <= date(year, 4, 25)

"""Belgian public holidays: fixed month-day dates plus feasts moving with Easter."""
from datetime import date, datetime, timedelta
from typing import Dict, Tuple, Union

from app.services.easter import easter_date

FIXED_HOLIDAYS: Tuple[Tuple[int, int, str], ...] = (
    (1, 1, "New Year's Day"),
    (5, 1, "Labour Day"),
    (7, 21, "National Day"),
    (8, 15, "Assumption Day"),
    (11, 1, "All Saints' Day"),
    (11, 11, "Armistice Day"),
    (12, 25, "Christmas Day"),
)

# days after Easter Sunday
MOVABLE_HOLIDAYS: Tuple[Tuple[int, str], ...] = (
    (0, "Easter Sunday"),
    (1, "Easter Monday"),
    (39, "Ascension Day"),
    (49, "Whit Sunday"),
    (50, "Whit Monday"),
)


def holidays_for_year(year: int) -> Dict[date, str]:
    """Return every public holiday of ``year`` keyed by date.

    When a movable feast lands on a fixed holiday the fixed name is kept.
    """
    holidays: Dict[date, str] = {}
    for month, day, name in FIXED_HOLIDAYS:
        holidays[date(year, month, day)] = name

    easter = easter_date(year)
    for offset, name in MOVABLE_HOLIDAYS:
        holidays.setdefault(easter + timedelta(days=offset), name)

    return dict(sorted(holidays.items()))


def is_holiday(day: Union[date, datetime]) -> bool:
    """Calendar-date check; the time of a datetime is ignored.

    The year comes from the value itself, so pass local wall-clock time
    rather than a UTC-shifted instant.
    """
    if isinstance(day, datetime):
        day = day.date()
    return day in holidays_for_year(day.year)

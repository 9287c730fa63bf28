from __future__ import annotations

from datetime import MAXYEAR, MINYEAR, date, timedelta
from typing import List

from ..errors import CalendarError
from ..models import CalendarMonth


WEEKDAY_ABBREVIATIONS = ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun")


def month_days(start: date) -> CalendarMonth:
    """
    All dates of ``start``'s month, 1st through last, in order.

    ``start`` may be any day of the month.
    """
    day = start.replace(day=1)
    days: List[date] = []
    while day.month == start.month:
        days.append(day)
        try:
            day = day + timedelta(days=1)
        except OverflowError as exc:
            # only reachable for December 9999
            raise CalendarError("reached the end of dates") from exc
    return CalendarMonth(year=start.year, month=start.month, days=tuple(days))


def month_for(year: int, month: int) -> CalendarMonth:
    if not 1 <= month <= 12:
        raise CalendarError(f"month must be in 1..12, got {month}")
    if not MINYEAR <= year <= MAXYEAR:
        raise CalendarError(f"year must be in {MINYEAR}..{MAXYEAR}, got {year}")
    return month_days(date(year, month, 1))


def weekday_abbreviation(day: date) -> str:
    return WEEKDAY_ABBREVIATIONS[day.weekday()]


def row_label(day: date) -> str:
    return f"{day.isoformat()} {weekday_abbreviation(day)}"

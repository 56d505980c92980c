"""
Calendar service: Sunday-first month grids with trip indicators.
"""
from datetime import date
from typing import List, Optional, Tuple
import calendar
from travelplanner.schemas.trip import Trip

DAY_HEADERS = ["Sun", "Mon", "Tue", "Wed", "Thu", "Fri", "Sat"]


def shift_month(year: int, month: int, offset: int) -> Tuple[int, int]:
    """Move a (year, month) pair by `offset` months, wrapping the year."""
    index = year * 12 + (month - 1) + offset
    return index // 12, index % 12 + 1


def trips_on_day(trips: List[Trip], day: date) -> List[Trip]:
    """Trips whose inclusive start/end range covers the day."""
    return [trip for trip in trips if trip.start_date <= day <= trip.end_date]


def build_month(trips: List[Trip], year: int, month: int, today: Optional[date] = None) -> dict:
    """
    Build the month grid.

    Leading blank cells pad the first week up to the weekday of the 1st,
    counting from Sunday.
    """
    if not 1 <= month <= 12:
        raise ValueError("Month must be between 1 and 12")
    today = today or date.today()

    first = date(year, month, 1)
    # date.weekday() is Monday=0; the grid starts on Sunday
    leading_blanks = (first.weekday() + 1) % 7
    days_in_month = calendar.monthrange(year, month)[1]

    days = [{"other_month": True} for _ in range(leading_blanks)]
    for number in range(1, days_in_month + 1):
        current = date(year, month, number)
        days.append({
            "date": current,
            "day": number,
            "is_today": current == today,
            "other_month": False,
            "trips": [{"id": t.id, "name": t.name} for t in trips_on_day(trips, current)],
        })

    prev_year, prev_month = shift_month(year, month, -1)
    next_year, next_month = shift_month(year, month, 1)
    return {
        "year": year,
        "month": month,
        "title": f"{calendar.month_name[month]} {year}",
        "day_headers": DAY_HEADERS,
        "days": days,
        "previous": f"{prev_year:04d}-{prev_month:02d}",
        "next": f"{next_year:04d}-{next_month:02d}",
    }

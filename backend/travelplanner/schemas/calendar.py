"""
Pydantic schemas for the calendar view.
"""
from pydantic import BaseModel
from typing import List, Optional
from datetime import date

OptionalDate = Optional[date]


class CalendarTrip(BaseModel):
    """Trip indicator shown inside a day cell."""
    id: str
    name: str


class CalendarDay(BaseModel):
    """One cell of the month grid; blank cells have no date."""
    date: OptionalDate = None
    day: Optional[int] = None
    is_today: bool = False
    other_month: bool = False
    trips: List[CalendarTrip] = []


class CalendarMonth(BaseModel):
    """A Sunday-first month grid."""
    year: int
    month: int
    title: str  # "October 2026"
    day_headers: List[str]
    days: List[CalendarDay]
    previous: str  # "YYYY-MM"
    next: str

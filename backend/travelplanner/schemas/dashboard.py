"""
Pydantic schemas for the dashboard summary.
"""
from pydantic import BaseModel
from typing import List
from datetime import date
from decimal import Decimal


class RecentTrip(BaseModel):
    """Compact trip entry for the dashboard."""
    id: str
    name: str
    destination: str
    start_date: date
    formatted_start_date: str


class DashboardResponse(BaseModel):
    """Upcoming count, total budget and the latest trips."""
    upcoming_count: int
    upcoming_label: str  # "2 trips planned"
    total_budget: Decimal
    formatted_total_budget: str
    recent_trips: List[RecentTrip]

"""
Dashboard summary route.
"""
from fastapi import APIRouter, Depends
from datetime import date
from travelplanner.schemas.dashboard import DashboardResponse
from travelplanner.api.dependencies import get_planner_store
from travelplanner.core.utils import format_currency, format_date
from travelplanner.services.storage import PlannerStore
from travelplanner.services.aggregation import upcoming_trips, total_budget, recent_trips

router = APIRouter(prefix="/dashboard", tags=["dashboard"])


@router.get("", response_model=DashboardResponse)
async def get_dashboard(store: PlannerStore = Depends(get_planner_store)):
    """Upcoming trip count, total budget and the three most recently created trips."""
    trips = store.load_trips()
    currency = store.load_settings().currency.value

    upcoming = len(upcoming_trips(trips, date.today()))
    budget = total_budget(trips)
    return {
        "upcoming_count": upcoming,
        "upcoming_label": f"{upcoming} trip{'s' if upcoming != 1 else ''} planned",
        "total_budget": budget,
        "formatted_total_budget": format_currency(budget, currency),
        "recent_trips": [
            {
                "id": trip.id,
                "name": trip.name,
                "destination": trip.destination,
                "start_date": trip.start_date,
                "formatted_start_date": format_date(trip.start_date),
            }
            for trip in recent_trips(trips)
        ],
    }

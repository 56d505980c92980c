"""
Calendar routes for the month view.
"""
from fastapi import APIRouter, Depends, HTTPException, Query, status
from datetime import date
from typing import Optional
from travelplanner.schemas.calendar import CalendarMonth
from travelplanner.api.dependencies import get_planner_store
from travelplanner.services.storage import PlannerStore
from travelplanner.services.calendar_service import build_month

router = APIRouter(prefix="/calendar", tags=["calendar"])


@router.get("", response_model=CalendarMonth)
async def get_month(
    year: Optional[int] = Query(None, ge=1, le=9999),
    month: Optional[int] = Query(None),
    store: PlannerStore = Depends(get_planner_store)
):
    """Sunday-first month grid with the trips on each day. Defaults to the current month."""
    today = date.today()
    try:
        return build_month(
            store.load_trips(),
            year if year is not None else today.year,
            month if month is not None else today.month,
            today
        )
    except ValueError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e)
        )

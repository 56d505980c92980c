"""
Trip management routes.
"""
from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.responses import Response
from pydantic import ValidationError
from typing import List
from datetime import date
import logging
from travelplanner.schemas.trip import (
    Trip, TripCreate, TripUpdate, TripResponse, TripDetailResponse,
    TripDeleteResponse, Expense, ExpenseCreate
)
from travelplanner.schemas.weather import WeatherForecast
from travelplanner.api.dependencies import get_planner_store
from travelplanner.core.utils import format_currency
from travelplanner.services.storage import PlannerStore
from travelplanner.services import trip_service, export_service, weather_service
from travelplanner.services.aggregation import find_trip, trip_spent, trip_duration

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/trips", tags=["trips"])


def validation_message(error: ValidationError) -> str:
    """First readable message of a pydantic validation error."""
    message = error.errors()[0].get("msg", "Invalid input")
    return message.removeprefix("Value error, ")


def get_trip_or_404(trips: List[Trip], trip_id: str) -> Trip:
    """Find a trip in the loaded list."""
    trip = find_trip(trips, trip_id)
    if not trip:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Trip not found"
        )
    return trip


def to_response(trip: Trip) -> TripResponse:
    return TripResponse(**trip.model_dump(), duration_days=trip_duration(trip))


@router.get("", response_model=List[TripResponse])
async def list_trips(store: PlannerStore = Depends(get_planner_store)):
    """List all trips in stored order."""
    return [to_response(trip) for trip in store.load_trips()]


@router.post("", response_model=TripResponse, status_code=status.HTTP_201_CREATED)
async def create_trip(trip_data: TripCreate, store: PlannerStore = Depends(get_planner_store)):
    """Create a new trip."""
    trips = store.load_trips()
    trip = trip_service.create_trip(trips, trip_data)
    store.save_trips(trips)
    return to_response(trip)


@router.get("/{trip_id}", response_model=TripDetailResponse)
async def get_trip(trip_id: str, store: PlannerStore = Depends(get_planner_store)):
    """Get trip details with its budget summary."""
    trip = get_trip_or_404(store.load_trips(), trip_id)
    currency = store.load_settings().currency.value

    spent = trip_spent(trip)
    remaining = trip.budget - spent
    return TripDetailResponse(
        **trip.model_dump(),
        duration_days=trip_duration(trip),
        summary={
            "budget": trip.budget,
            "spent": spent,
            "remaining": remaining,
            "formatted_budget": format_currency(trip.budget, currency),
            "formatted_spent": format_currency(spent, currency),
            "formatted_remaining": format_currency(remaining, currency),
        }
    )


@router.put("/{trip_id}", response_model=TripResponse)
async def update_trip(
    trip_id: str,
    trip_data: TripUpdate,
    store: PlannerStore = Depends(get_planner_store)
):
    """Update a trip; the merged trip must pass the creation rules."""
    trips = store.load_trips()
    get_trip_or_404(trips, trip_id)
    try:
        trip = trip_service.update_trip(trips, trip_id, trip_data)
    except ValidationError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=validation_message(e)
        )
    store.save_trips(trips)
    return to_response(trip)


@router.delete("/{trip_id}", response_model=TripDeleteResponse)
async def delete_trip(
    trip_id: str,
    prune_orphans: bool = False,
    store: PlannerStore = Depends(get_planner_store)
):
    """
    Delete a trip.

    Packing lists, documents and photos linked to the trip are kept unless
    prune_orphans is set.
    """
    remaining, removed = trip_service.delete_trip(store.load_trips(), trip_id)
    if not removed:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Trip not found"
        )
    store.save_trips(remaining)

    result = {"message": "Trip deleted successfully"}
    if prune_orphans:
        packing_lists = store.load_packing_lists()
        documents = store.load_documents()
        photos = store.load_photos()
        kept_lists, kept_documents, kept_photos = trip_service.prune_trip_references(
            trip_id, packing_lists, documents, photos
        )
        store.save_packing_lists(kept_lists)
        store.save_documents(kept_documents)
        store.save_photos(kept_photos)
        result.update(
            pruned_packing_lists=len(packing_lists) - len(kept_lists),
            pruned_documents=len(documents) - len(kept_documents),
            pruned_photos=len(photos) - len(kept_photos)
        )
    return result


@router.post("/{trip_id}/expenses", response_model=Expense, status_code=status.HTTP_201_CREATED)
async def add_expense(
    trip_id: str,
    expense_data: ExpenseCreate,
    store: PlannerStore = Depends(get_planner_store)
):
    """Add an expense to a trip."""
    trips = store.load_trips()
    trip = get_trip_or_404(trips, trip_id)
    try:
        expense = trip_service.add_expense(trip, expense_data, date.today())
    except ValueError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e)
        )
    store.save_trips(trips)
    return expense


@router.delete("/{trip_id}/expenses/{expense_id}")
async def remove_expense(
    trip_id: str,
    expense_id: str,
    store: PlannerStore = Depends(get_planner_store)
):
    """Remove an expense from a trip."""
    trips = store.load_trips()
    trip = get_trip_or_404(trips, trip_id)
    if not trip_service.remove_expense(trip, expense_id):
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Expense not found"
        )
    store.save_trips(trips)
    return {"message": "Expense deleted successfully"}


@router.get("/{trip_id}/weather", response_model=WeatherForecast)
def get_weather(trip_id: str, store: PlannerStore = Depends(get_planner_store)):
    """Weather forecast for each day of the trip."""
    trip = get_trip_or_404(store.load_trips(), trip_id)
    return weather_service.get_trip_forecast(trip)


@router.get("/{trip_id}/export/pdf")
async def export_pdf(trip_id: str, store: PlannerStore = Depends(get_planner_store)):
    """Download the trip itinerary as a PDF."""
    trip = get_trip_or_404(store.load_trips(), trip_id)
    content = export_service.trip_to_pdf(trip, store.load_settings().currency.value)
    return Response(
        content=content,
        media_type="application/pdf",
        headers={"Content-Disposition": f'attachment; filename="{export_service.pdf_filename(trip)}"'}
    )


@router.get("/{trip_id}/export/csv")
async def export_csv(trip_id: str, store: PlannerStore = Depends(get_planner_store)):
    """Download the trip and its expenses as CSV."""
    trip = get_trip_or_404(store.load_trips(), trip_id)
    return Response(
        content=export_service.trip_to_csv(trip),
        media_type="text/csv",
        headers={"Content-Disposition": f'attachment; filename="{export_service.csv_filename(trip)}"'}
    )

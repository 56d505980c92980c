"""
Trip service for trip and expense business logic.

Functions work on the in-memory trip list; callers persist the list afterwards.
"""
from datetime import date, datetime
from decimal import Decimal
from typing import List, Optional, Tuple
import logging
from travelplanner.schemas.trip import Trip, TripCreate, TripUpdate, Expense, ExpenseCreate
from travelplanner.schemas.packing import PackingList
from travelplanner.schemas.document import TravelDocument
from travelplanner.schemas.photo import Photo
from travelplanner.core.utils import generate_id
from travelplanner.services.aggregation import find_trip

logger = logging.getLogger(__name__)


class TripNotFoundError(LookupError):
    """Raised when a trip id does not match any stored trip."""

    def __init__(self, trip_id: str):
        super().__init__("Trip not found")
        self.trip_id = trip_id


def create_trip(trips: List[Trip], data: TripCreate, now: Optional[datetime] = None) -> Trip:
    """Append a validated trip with a fresh id and no expenses."""
    trip = Trip(
        id=generate_id(),
        name=data.name,
        destination=data.destination,
        type=data.type,
        start_date=data.start_date,
        end_date=data.end_date,
        budget=data.budget,
        notes=data.notes,
        created_at=now or datetime.utcnow(),
        expenses=[],
        itinerary=[]
    )
    trips.append(trip)
    logger.info(f"Created trip {trip.id} to {trip.destination}")
    return trip


def update_trip(trips: List[Trip], trip_id: str, changes: TripUpdate) -> Trip:
    """
    Merge changes into a trip and re-run the creation rules on the result.

    Raises:
        TripNotFoundError: unknown id
        pydantic.ValidationError: merged values are invalid
    """
    trip = find_trip(trips, trip_id)
    if not trip:
        raise TripNotFoundError(trip_id)

    merged = {
        "name": trip.name,
        "destination": trip.destination,
        "type": trip.type,
        "start_date": trip.start_date,
        "end_date": trip.end_date,
        "budget": trip.budget,
        "notes": trip.notes,
    }
    merged.update(changes.model_dump(exclude_unset=True, exclude_none=True))
    validated = TripCreate.model_validate(merged)

    updated = trip.model_copy(update=validated.model_dump())
    trips[trips.index(trip)] = updated
    return updated


def delete_trip(trips: List[Trip], trip_id: str) -> Tuple[List[Trip], bool]:
    """Return the list without the trip and whether anything was removed."""
    remaining = [trip for trip in trips if trip.id != trip_id]
    removed = len(remaining) != len(trips)
    if not removed:
        logger.warning(f"Trip {trip_id} not found for deletion")
    return remaining, removed


def prune_trip_references(
    trip_id: str,
    packing_lists: List[PackingList],
    documents: List[TravelDocument],
    photos: List[Photo]
) -> Tuple[List[PackingList], List[TravelDocument], List[Photo]]:
    """Drop packing lists, documents and photos linked to a deleted trip."""
    return (
        [item for item in packing_lists if item.trip_id != trip_id],
        [item for item in documents if item.trip_id != trip_id],
        [item for item in photos if item.trip_id != trip_id],
    )


def add_expense(trip: Trip, data: ExpenseCreate, today: Optional[date] = None) -> Expense:
    """
    Append an expense to a trip.

    Raises:
        ValueError: empty description or non-positive amount
    """
    if not data.description or data.amount is None or data.amount <= Decimal(0):
        raise ValueError("Please enter a valid description and amount")

    expense = Expense(
        id=generate_id(),
        description=data.description,
        amount=data.amount,
        date=data.date or today or date.today(),
        category=data.category or None
    )
    trip.expenses.append(expense)
    return expense


def remove_expense(trip: Trip, expense_id: str) -> bool:
    """Remove an expense by id; returns False when the id is unknown."""
    remaining = [expense for expense in trip.expenses if expense.id != expense_id]
    removed = len(remaining) != len(trip.expenses)
    trip.expenses = remaining
    return removed

"""
Derived views over the trip list.

All functions are pure: totals are recomputed from the list they are given on
every call and nothing is cached.
"""
from datetime import date
from decimal import Decimal
from typing import Dict, Iterable, List, Optional, Tuple
from travelplanner.schemas.trip import Trip, Expense

MONTHS_SHOWN = 6


def trip_spent(trip: Trip) -> Decimal:
    """Sum of a trip's expense amounts."""
    return sum((expense.amount for expense in trip.expenses), Decimal(0))


def total_budget(trips: Iterable[Trip]) -> Decimal:
    return sum((trip.budget for trip in trips), Decimal(0))


def total_spent(trips: Iterable[Trip]) -> Decimal:
    return sum((trip_spent(trip) for trip in trips), Decimal(0))


def remaining_budget(trips: List[Trip]) -> Decimal:
    """Total budget minus total spent; negative when overspent."""
    return total_budget(trips) - total_spent(trips)


def upcoming_trips(trips: Iterable[Trip], now: date) -> List[Trip]:
    """Trips starting on or after `now`, in their stored order."""
    return [trip for trip in trips if trip.start_date >= now]


def recent_trips(trips: Iterable[Trip], limit: int = 3) -> List[Trip]:
    """Most recently created trips first."""
    return sorted(trips, key=lambda trip: trip.created_at, reverse=True)[:limit]


def trip_duration(trip: Trip) -> int:
    """Number of calendar days covered, counting both ends."""
    return abs((trip.end_date - trip.start_date).days) + 1


def find_trip(trips: Iterable[Trip], trip_id: Optional[str]) -> Optional[Trip]:
    if not trip_id:
        return None
    return next((trip for trip in trips if trip.id == trip_id), None)


def all_expenses(trips: Iterable[Trip]) -> List[Tuple[Trip, Expense]]:
    """Every expense paired with its owning trip."""
    return [(trip, expense) for trip in trips for expense in trip.expenses]


def top_expenses(trips: Iterable[Trip], limit: int = 5) -> List[Tuple[Trip, Expense]]:
    """Largest expenses across all trips."""
    pairs = all_expenses(trips)
    pairs.sort(key=lambda pair: pair[1].amount, reverse=True)
    return pairs[:limit]


def spending_trends(trips: List[Trip]) -> Dict:
    """
    Per-trip spending statistics.

    Returns:
        dict with trip_spending (name, amount, percentage of the most
        expensive trip), average_per_trip, most_expensive and total_trips
    """
    per_trip = [(trip.name, trip_spent(trip)) for trip in trips]
    total = sum((amount for _, amount in per_trip), Decimal(0))
    most_expensive = max((amount for _, amount in per_trip), default=Decimal(0))
    average = total / len(per_trip) if per_trip else Decimal(0)

    trip_spending = []
    for name, amount in per_trip:
        percentage = float(amount / most_expensive * 100) if most_expensive > 0 else 0.0
        trip_spending.append({"name": name, "amount": amount, "percentage": percentage})

    return {
        "trip_spending": trip_spending,
        "average_per_trip": average.quantize(Decimal("0.01")),
        "most_expensive": most_expensive,
        "total_trips": len(per_trip),
    }


def budget_efficiency(trips: List[Trip]) -> Dict:
    """
    Budget utilization (capped at 100%) and savings rate (floored at 0%).
    Trips that spent exactly their budget are neither over nor under.
    """
    budget = total_budget(trips)
    spent = total_spent(trips)
    over = 0
    under = 0
    for trip in trips:
        amount = trip_spent(trip)
        if amount > trip.budget:
            over += 1
        elif amount < trip.budget:
            under += 1

    utilization = float(spent / budget * 100) if budget > 0 else 0.0
    savings_rate = float((budget - spent) / budget * 100) if budget > 0 else 0.0

    return {
        "utilization": min(utilization, 100.0),
        "savings_rate": max(savings_rate, 0.0),
        "over_budget_trips": over,
        "under_budget_trips": under,
    }


def monthly_spending(trips: Iterable[Trip]) -> List[Tuple[str, Decimal]]:
    """
    Expense totals keyed by "YYYY-MM".

    Only the six most recent months that have expenses are kept, returned
    in chronological order.
    """
    totals: Dict[str, Decimal] = {}
    for _, expense in all_expenses(trips):
        key = expense.date.strftime("%Y-%m")
        totals[key] = totals.get(key, Decimal(0)) + expense.amount
    months = sorted(totals)[-MONTHS_SHOWN:]
    return [(key, totals[key]) for key in months]

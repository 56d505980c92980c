"""
Budget overview and spending analytics routes.
"""
from fastapi import APIRouter, Depends
from datetime import date
from travelplanner.schemas.budget import BudgetOverview, SpendingAnalytics
from travelplanner.api.dependencies import get_planner_store
from travelplanner.core.utils import format_currency
from travelplanner.services.storage import PlannerStore
from travelplanner.services import aggregation

router = APIRouter(prefix="/budget", tags=["budget"])


@router.get("", response_model=BudgetOverview)
async def get_budget_overview(store: PlannerStore = Depends(get_planner_store)):
    """Total budget, total spent and remaining, plus a line per trip."""
    trips = store.load_trips()
    currency = store.load_settings().currency.value

    budget = aggregation.total_budget(trips)
    spent = aggregation.total_spent(trips)
    lines = []
    for trip in trips:
        trip_spent = aggregation.trip_spent(trip)
        remaining = trip.budget - trip_spent
        lines.append({
            "trip_id": trip.id,
            "name": trip.name,
            "budget": trip.budget,
            "spent": trip_spent,
            "remaining": remaining,
            "formatted": (
                f"{format_currency(trip_spent, currency)} / {format_currency(trip.budget, currency)} "
                f"({format_currency(remaining, currency)} remaining)"
            ),
        })

    return {
        "currency": currency,
        "total_budget": budget,
        "total_spent": spent,
        "remaining": budget - spent,
        "formatted_total_budget": format_currency(budget, currency),
        "formatted_total_spent": format_currency(spent, currency),
        "formatted_remaining": format_currency(budget - spent, currency),
        "trips": lines,
    }


@router.get("/analytics", response_model=SpendingAnalytics)
async def get_spending_analytics(store: PlannerStore = Depends(get_planner_store)):
    """Spending trends, top expenses, budget efficiency and monthly spending."""
    trips = store.load_trips()
    currency = store.load_settings().currency.value

    monthly = aggregation.monthly_spending(trips)
    # Bars are scaled against the busiest month, never below 1
    peak = max([amount for _, amount in monthly] + [1])
    monthly_items = []
    for key, amount in monthly:
        month = date.fromisoformat(f"{key}-01")
        monthly_items.append({
            "key": key,
            "month": f"{month.strftime('%b')} {month.year}",
            "amount": amount,
            "percentage": float(amount / peak * 100),
        })

    return {
        "trends": aggregation.spending_trends(trips),
        "top_expenses": [
            {
                "id": expense.id,
                "description": expense.description,
                "amount": expense.amount,
                "trip_id": trip.id,
                "trip_name": trip.name,
                "formatted_amount": format_currency(expense.amount, currency),
            }
            for trip, expense in aggregation.top_expenses(trips)
        ],
        "efficiency": aggregation.budget_efficiency(trips),
        "monthly_spending": monthly_items,
    }

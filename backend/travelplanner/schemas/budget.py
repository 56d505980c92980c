"""
Pydantic schemas for budget overviews and spending analytics.
"""
from pydantic import BaseModel
from typing import List
from decimal import Decimal


class TripBudgetLine(BaseModel):
    """Spent / budget line for one trip."""
    trip_id: str
    name: str
    budget: Decimal
    spent: Decimal
    remaining: Decimal
    formatted: str  # "$150.00 / $500.00 ($350.00 remaining)"


class BudgetOverview(BaseModel):
    """Totals across every trip."""
    currency: str
    total_budget: Decimal
    total_spent: Decimal
    remaining: Decimal
    formatted_total_budget: str
    formatted_total_spent: str
    formatted_remaining: str
    trips: List[TripBudgetLine] = []


class TripSpending(BaseModel):
    """Total spent on one trip, relative to the most expensive trip."""
    name: str
    amount: Decimal
    percentage: float


class SpendingTrends(BaseModel):
    """Per-trip spending statistics."""
    trip_spending: List[TripSpending]
    average_per_trip: Decimal
    most_expensive: Decimal
    total_trips: int


class TopExpense(BaseModel):
    """An expense with the trip it belongs to."""
    id: str
    description: str
    amount: Decimal
    trip_id: str
    trip_name: str
    formatted_amount: str


class BudgetEfficiency(BaseModel):
    """How much of the planned budget has been used."""
    utilization: float
    savings_rate: float
    over_budget_trips: int
    under_budget_trips: int


class MonthlySpendingItem(BaseModel):
    """One bar of the monthly spending histogram."""
    key: str  # "YYYY-MM"
    month: str  # "Jun 2024"
    amount: Decimal
    percentage: float


class SpendingAnalytics(BaseModel):
    """Everything shown on the analytics panel."""
    trends: SpendingTrends
    top_expenses: List[TopExpense]
    efficiency: BudgetEfficiency
    monthly_spending: List[MonthlySpendingItem]

"""
Pydantic schemas for Trip and Expense entities.
"""
from pydantic import BaseModel, Field, field_validator, model_validator
from typing import Any, List, Optional
from datetime import date, datetime
from decimal import Decimal
from travelplanner.core.utils import generate_id, sanitize_input, validate_input

# Module-level alias; a field named "date" shadows the type inside a class body
OptionalDate = Optional[date]


class Expense(BaseModel):
    """A dated monetary outflow owned by a trip."""
    id: str = Field(default_factory=generate_id)
    description: str
    amount: Decimal
    date: date
    category: Optional[str] = None


class ExpenseCreate(BaseModel):
    """Schema for adding an expense to a trip."""
    description: str
    amount: Decimal
    date: OptionalDate = None  # Defaults to today
    category: Optional[str] = None

    @field_validator("description", "category", mode="before")
    @classmethod
    def clean_text(cls, v):
        if v is None:
            return v
        return sanitize_input(v)


class Trip(BaseModel):
    """A planned journey with dates, budget and its expenses."""
    id: str = Field(default_factory=generate_id)
    name: str
    destination: str
    type: str = ""
    start_date: date
    end_date: date
    budget: Decimal = Decimal(0)
    notes: str = ""
    created_at: datetime = Field(default_factory=datetime.utcnow)
    expenses: List[Expense] = []
    itinerary: List[Any] = []


class TripCreate(BaseModel):
    """
    Schema for trip creation.

    Text fields are sanitized before validation. Dates and budget are accepted
    as raw form strings so the same rules apply to browser and API input.
    """
    name: str
    destination: str
    type: str = ""
    start_date: date
    end_date: date
    budget: Decimal = Decimal(0)
    notes: str = ""

    @field_validator("name", "destination", "type", "notes", mode="before")
    @classmethod
    def clean_text(cls, v):
        return sanitize_input(v if v is not None else "")

    @field_validator("name")
    @classmethod
    def check_name(cls, v):
        if not validate_input(v, "text", 100):
            raise ValueError("Please enter a valid trip name")
        return v

    @field_validator("destination")
    @classmethod
    def check_destination(cls, v):
        if not validate_input(v, "text", 100):
            raise ValueError("Please enter a valid destination")
        return v

    @field_validator("budget", mode="before")
    @classmethod
    def check_budget(cls, v):
        raw = sanitize_input(str(v)) if v is not None else "0"
        try:
            if Decimal(raw) < 0:
                raise ValueError("Budget cannot be negative")
        except ArithmeticError:
            raise ValueError("Please enter a valid budget amount")
        if not validate_input(raw, "currency"):
            raise ValueError("Please enter a valid budget amount")
        return raw

    @model_validator(mode="after")
    def check_date_order(self):
        if self.start_date >= self.end_date:
            raise ValueError("End date must be after start date")
        return self


class TripUpdate(BaseModel):
    """Schema for trip update."""
    name: Optional[str] = None
    destination: Optional[str] = None
    type: Optional[str] = None
    start_date: Optional[date] = None
    end_date: Optional[date] = None
    budget: Optional[Decimal] = None
    notes: Optional[str] = None


class TripBudgetSummary(BaseModel):
    """Budget figures for a single trip."""
    budget: Decimal
    spent: Decimal
    remaining: Decimal
    formatted_budget: str
    formatted_spent: str
    formatted_remaining: str


class TripResponse(Trip):
    """Schema for trip response."""
    duration_days: int


class TripDetailResponse(TripResponse):
    """Schema for detailed trip response with budget figures."""
    summary: TripBudgetSummary


class TripDeleteResponse(BaseModel):
    """Result of deleting a trip."""
    message: str
    pruned_packing_lists: int = 0
    pruned_documents: int = 0
    pruned_photos: int = 0

"""
Pydantic schemas for trip templates.
"""
from pydantic import BaseModel, Field, field_validator
from typing import Dict, List, Optional
from datetime import date
from decimal import Decimal


class TripTemplate(BaseModel):
    """A preset used to pre-fill the trip creation form."""
    id: str
    name: str
    destination: str
    type: str
    duration: int = Field(gt=0)
    budget: Decimal
    description: str
    highlights: List[str] = []
    estimated_costs: Dict[str, Decimal] = {}
    custom: bool = False


class TemplateApplication(BaseModel):
    """Form values produced by applying a template."""
    template_id: str
    name: str
    destination: str
    type: str
    budget: Decimal
    start_date: date
    end_date: date
    notes: str


class TemplateGenerateRequest(BaseModel):
    """Inputs for the template generator."""
    destination: str
    duration: int = Field(gt=0)
    budget: Decimal = Field(gt=0)
    type: str = "Leisure"
    interests: List[str] = []

    @field_validator("interests", mode="before")
    @classmethod
    def split_interests(cls, v):
        if v is None:
            return []
        if isinstance(v, str):
            v = v.split(",")
        return [i.strip() for i in v if i and i.strip()]


class CustomTemplateCreate(BaseModel):
    """Schema for saving a custom (or generated) template."""
    id: Optional[str] = None
    name: str
    destination: str
    type: str = "Leisure"
    duration: int = Field(gt=0)
    budget: Decimal = Field(gt=0)
    description: str
    highlights: List[str] = []
    estimated_costs: Dict[str, Decimal] = {}

    @field_validator("highlights", mode="before")
    @classmethod
    def split_highlights(cls, v):
        if v is None:
            return []
        if isinstance(v, str):
            v = v.split("\n")
        return [h.strip() for h in v if h and h.strip()]

"""
Pydantic schemas for travel documents.
"""
from pydantic import BaseModel, Field, field_validator
from typing import Optional
from datetime import date, datetime
from travelplanner.core.utils import generate_id, sanitize_input


class TravelDocument(BaseModel):
    """A passport, booking or other record, optionally tied to a trip."""
    id: str = Field(default_factory=generate_id)
    name: str
    type: str
    trip_id: Optional[str] = None  # None means a general document
    expiry_date: Optional[date] = None
    notes: str = ""
    created_at: datetime = Field(default_factory=datetime.utcnow)


class DocumentCreate(BaseModel):
    """Schema for adding a document."""
    name: str
    type: str = "other"
    trip_id: Optional[str] = None
    expiry_date: Optional[date] = None
    notes: str = ""

    @field_validator("name", "type", "notes", mode="before")
    @classmethod
    def clean_text(cls, v):
        return sanitize_input(v if v is not None else "")

    @field_validator("name")
    @classmethod
    def check_name(cls, v):
        if not v:
            raise ValueError("Please enter a document name")
        return v

    @field_validator("trip_id", "expiry_date", mode="before")
    @classmethod
    def blank_to_none(cls, v):
        # Form selects submit "" for "no trip" / "no expiry"
        return v or None


class DocumentUpdate(BaseModel):
    """Schema for document update."""
    name: Optional[str] = None
    type: Optional[str] = None
    trip_id: Optional[str] = None
    expiry_date: Optional[date] = None
    notes: Optional[str] = None

    @field_validator("trip_id", "expiry_date", mode="before")
    @classmethod
    def blank_to_none(cls, v):
        return v or None


class DocumentResponse(TravelDocument):
    """Document with expiry status and display hints."""
    trip_name: str
    expired: bool
    expiring_soon: bool
    icon: str

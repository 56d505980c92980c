"""
Pydantic schemas for packing lists.
"""
from pydantic import BaseModel, Field, field_validator
from typing import List, Optional, Union
from datetime import datetime
from travelplanner.core.utils import generate_id, sanitize_input


def _split_categories(value: Union[str, List[str], None]) -> List[str]:
    """Accept "a, b, c" or a list; drop blanks and duplicates, keep order."""
    if value is None:
        return []
    parts = value.split(",") if isinstance(value, str) else value
    categories = []
    for part in parts:
        label = sanitize_input(part)
        if label and label not in categories:
            categories.append(label)
    return categories


class PackingItem(BaseModel):
    """A single checklist entry."""
    id: str = Field(default_factory=generate_id)
    name: str
    packed: bool = False


class PackingList(BaseModel):
    """A named checklist, optionally tied to a trip."""
    id: str = Field(default_factory=generate_id)
    name: str
    trip_id: Optional[str] = None  # May point to a deleted trip
    categories: List[str] = []
    items: List[PackingItem] = []
    created_at: datetime = Field(default_factory=datetime.utcnow)


class PackingListCreate(BaseModel):
    """Schema for packing list creation."""
    name: str
    trip_id: Optional[str] = None
    categories: List[str] = []

    @field_validator("name", mode="before")
    @classmethod
    def clean_name(cls, v):
        v = sanitize_input(v)
        if not v:
            raise ValueError("Please enter a packing list name")
        return v

    @field_validator("categories", mode="before")
    @classmethod
    def parse_categories(cls, v):
        return _split_categories(v)


class PackingListUpdate(BaseModel):
    """Schema for packing list update."""
    name: Optional[str] = None
    trip_id: Optional[str] = None
    categories: Optional[List[str]] = None

    @field_validator("categories", mode="before")
    @classmethod
    def parse_categories(cls, v):
        if v is None:
            return v
        return _split_categories(v)


class PackingItemCreate(BaseModel):
    """Schema for adding an item."""
    name: str


class PackingItemUpdate(BaseModel):
    """Schema for renaming or (un)packing an item."""
    name: Optional[str] = None
    packed: Optional[bool] = None


class PackingListResponse(PackingList):
    """Packing list with its resolved trip and progress."""
    trip_name: Optional[str] = None
    packed_count: int
    total_count: int

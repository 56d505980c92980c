"""
Pydantic schemas for per-user settings and data management.
"""
from pydantic import BaseModel
from typing import List, Optional
from datetime import datetime
from enum import Enum
from travelplanner.schemas.trip import Trip


class Currency(str, Enum):
    """Supported display currencies."""
    USD = "USD"
    EUR = "EUR"
    GBP = "GBP"
    CAD = "CAD"


class UserSettings(BaseModel):
    """Singleton settings record."""
    currency: Currency = Currency.USD
    theme: str = "light"


class SettingsUpdate(BaseModel):
    """Schema for settings update."""
    currency: Optional[Currency] = None
    theme: Optional[str] = None


class DataBackup(BaseModel):
    """Full JSON backup of trips and settings."""
    trips: List[Trip]
    settings: UserSettings
    export_date: datetime

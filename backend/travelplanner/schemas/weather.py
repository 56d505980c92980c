"""
Pydantic schemas for weather forecasts.
"""
from pydantic import BaseModel
from typing import List, Optional
from datetime import date


class WeatherDay(BaseModel):
    """Forecast for one trip day, temperatures in Fahrenheit."""
    date: date
    label: str  # "Mon, Jun 15"
    icon: str
    temp: int
    max_temp: Optional[int] = None
    min_temp: Optional[int] = None
    description: str
    humidity: Optional[int] = None


class WeatherForecast(BaseModel):
    """Forecast for a trip and where it came from."""
    city: str
    source: str  # "wttr.in", "open-meteo" or "mock"
    days: List[WeatherDay]

"""
Weather service for trip forecasts.

Providers are tried in order (wttr.in, then Open-Meteo); when both fail a
deterministic mock forecast is returned so the trip view always has data.
"""
from datetime import date, timedelta
from typing import Dict, List
import random
import httpx
import logging
from travelplanner.core.config import settings
from travelplanner.schemas.trip import Trip

logger = logging.getLogger(__name__)

DEFAULT_ICON = "🌤️"

# wttr.in weather codes
WTTR_ICONS = {
    "113": "☀️", "116": "⛅", "119": "☁️", "122": "☁️", "143": "🌫️",
    "176": "🌦️", "179": "🌧️", "182": "🌧️", "185": "🌧️", "200": "⛈️",
    "227": "❄️", "230": "❄️", "248": "🌫️", "260": "🌫️", "263": "🌦️",
    "266": "🌧️", "281": "🌧️", "284": "🌧️", "293": "🌦️", "296": "🌧️",
    "299": "🌧️", "302": "🌧️", "305": "🌧️", "308": "🌧️", "311": "🌧️",
    "314": "🌧️", "317": "🌧️", "320": "🌧️", "323": "❄️", "326": "❄️",
    "329": "❄️", "332": "❄️", "335": "❄️", "338": "❄️", "350": "🌧️",
    "353": "🌦️", "356": "🌧️", "359": "🌧️", "362": "🌧️", "365": "🌧️",
    "368": "❄️", "371": "❄️", "374": "🌧️", "377": "🌧️", "386": "⛈️",
    "389": "⛈️", "392": "⛈️", "395": "⛈️",
}

# WMO weather interpretation codes used by Open-Meteo
WMO_CODES = {
    0: ("☀️", "Clear sky"),
    1: ("☀️", "Mainly clear"),
    2: ("⛅", "Partly cloudy"),
    3: ("☁️", "Overcast"),
    45: ("🌫️", "Fog"),
    48: ("🌫️", "Rime fog"),
    51: ("🌦️", "Light drizzle"),
    53: ("🌦️", "Moderate drizzle"),
    55: ("🌧️", "Dense drizzle"),
    56: ("🌧️", "Light freezing drizzle"),
    57: ("🌧️", "Dense freezing drizzle"),
    61: ("🌧️", "Slight rain"),
    63: ("🌧️", "Moderate rain"),
    65: ("🌧️", "Heavy rain"),
    66: ("🌧️", "Light freezing rain"),
    67: ("🌧️", "Heavy freezing rain"),
    71: ("❄️", "Slight snow"),
    73: ("❄️", "Moderate snow"),
    75: ("❄️", "Heavy snow"),
    77: ("❄️", "Snow grains"),
    80: ("🌦️", "Slight rain showers"),
    81: ("🌧️", "Moderate rain showers"),
    82: ("🌧️", "Violent rain showers"),
    85: ("❄️", "Slight snow showers"),
    86: ("❄️", "Heavy snow showers"),
    95: ("⛈️", "Thunderstorm"),
    96: ("⛈️", "Thunderstorm with hail"),
    99: ("⛈️", "Thunderstorm with heavy hail"),
}

MOCK_ICONS = ["☀️", "⛅", "🌧️", "⛈️", "❄️", "🌤️"]
MOCK_DESCRIPTIONS = ["Sunny", "Partly Cloudy", "Rainy", "Stormy", "Snowy", "Cloudy"]

# Hourly slot nearest to noon in wttr.in's 3-hourly data
WTTR_NOON_SLOT = 4

# Errors raised while unpacking a provider payload of the wrong shape
MALFORMED_PAYLOAD_ERRORS = (AttributeError, KeyError, IndexError, TypeError, ValueError)


class WeatherUnavailableError(Exception):
    """Raised when a provider cannot produce a forecast."""


def city_from_destination(destination: str) -> str:
    """The part of the destination before the first comma."""
    return destination.split(",")[0].strip()


def trip_days(start: date, end: date) -> List[date]:
    """Every date from start to end inclusive."""
    return [start + timedelta(days=offset) for offset in range((end - start).days + 1)]


def day_label(day: date) -> str:
    """Format like "Mon, Jun 15"."""
    return f"{day.strftime('%a')}, {day.strftime('%b')} {day.day}"


def wttr_icon(code) -> str:
    return WTTR_ICONS.get(str(code), DEFAULT_ICON)


def wmo_icon(code) -> str:
    return WMO_CODES.get(int(code), (DEFAULT_ICON, "Unknown"))[0]


def wmo_description(code) -> str:
    return WMO_CODES.get(int(code), (DEFAULT_ICON, "Unknown"))[1]


def fetch_wttr(city: str, days: List[date]) -> List[Dict]:
    """
    Forecast from wttr.in, matched to trip days by date.

    Only the next few days are available, so days outside that window are
    left out.
    """
    try:
        response = httpx.get(
            f"{settings.WTTR_URL}/{city}",
            params={"format": "j1", "lang": "en"},
            timeout=settings.WEATHER_TIMEOUT
        )
        response.raise_for_status()
        data = response.json()
    except (httpx.HTTPError, ValueError) as e:
        logger.warning(f"wttr.in request failed for {city}: {e}")
        raise WeatherUnavailableError(str(e))

    try:
        by_date = {entry["date"]: entry for entry in data.get("weather", [])}
        forecast = []
        for day in days:
            entry = by_date.get(day.isoformat())
            if not entry:
                continue
            hourly = entry.get("hourly") or []
            if not hourly:
                continue
            noon = hourly[WTTR_NOON_SLOT] if len(hourly) > WTTR_NOON_SLOT else hourly[0]
            forecast.append({
                "date": day,
                "label": day_label(day),
                "icon": wttr_icon(noon.get("weatherCode")),
                "temp": round(float(noon["tempF"])),
                "max_temp": round(float(entry["maxtempF"])),
                "min_temp": round(float(entry["mintempF"])),
                "description": noon["weatherDesc"][0]["value"],
                "humidity": int(noon["humidity"]),
            })
    except MALFORMED_PAYLOAD_ERRORS as e:
        logger.warning(f"Unexpected wttr.in payload for {city}: {e}")
        raise WeatherUnavailableError(str(e))

    return forecast


def geocode(city: str):
    """Latitude, longitude and timezone of a city via Open-Meteo geocoding."""
    try:
        response = httpx.get(
            settings.OPEN_METEO_GEOCODING_URL,
            params={"name": city, "count": 1},
            timeout=settings.WEATHER_TIMEOUT
        )
        response.raise_for_status()
        data = response.json()
    except (httpx.HTTPError, ValueError) as e:
        logger.warning(f"Geocoding failed for {city}: {e}")
        raise WeatherUnavailableError(str(e))

    try:
        results = data.get("results")
        if not results:
            raise WeatherUnavailableError(f"City not found: {city}")
        first = results[0]
        return first["latitude"], first["longitude"], first.get("timezone", "auto")
    except MALFORMED_PAYLOAD_ERRORS as e:
        logger.warning(f"Unexpected geocoding payload for {city}: {e}")
        raise WeatherUnavailableError(str(e))


def fetch_open_meteo(city: str, days: List[date]) -> List[Dict]:
    """Daily forecast from Open-Meteo for the trip range, in Fahrenheit."""
    latitude, longitude, timezone = geocode(city)
    try:
        response = httpx.get(
            settings.OPEN_METEO_URL,
            params={
                "latitude": latitude,
                "longitude": longitude,
                "timezone": timezone,
                "daily": "temperature_2m_max,temperature_2m_min,weathercode",
                "temperature_unit": "fahrenheit",
                "start_date": days[0].isoformat(),
                "end_date": days[-1].isoformat(),
            },
            timeout=settings.WEATHER_TIMEOUT
        )
        response.raise_for_status()
        daily = response.json()["daily"]
        forecast = []
        for index, value in enumerate(daily["time"]):
            day = date.fromisoformat(value)
            high = daily["temperature_2m_max"][index]
            low = daily["temperature_2m_min"][index]
            code = daily["weathercode"][index]
            if high is None or low is None or code is None:
                continue
            forecast.append({
                "date": day,
                "label": day_label(day),
                "icon": wmo_icon(code),
                "temp": round((high + low) / 2),
                "max_temp": round(high),
                "min_temp": round(low),
                "description": wmo_description(code),
                "humidity": None,
            })
    except httpx.HTTPError as e:
        logger.warning(f"Open-Meteo request failed for {city}: {e}")
        raise WeatherUnavailableError(str(e))
    except MALFORMED_PAYLOAD_ERRORS as e:
        logger.warning(f"Unexpected Open-Meteo payload for {city}: {e}")
        raise WeatherUnavailableError(str(e))
    return forecast


def mock_forecast(city: str, days: List[date]) -> List[Dict]:
    """Pseudo-random forecast, stable for the same city and date."""
    forecast = []
    for day in days:
        rng = random.Random(f"{city.lower()}:{day.isoformat()}")
        forecast.append({
            "date": day,
            "label": day_label(day),
            "icon": rng.choice(MOCK_ICONS),
            "temp": rng.randint(60, 89),
            "max_temp": None,
            "min_temp": None,
            "description": rng.choice(MOCK_DESCRIPTIONS),
            "humidity": None,
        })
    return forecast


def get_trip_forecast(trip: Trip) -> Dict:
    """
    Forecast for every day of a trip.

    Returns:
        dict with city, source ("wttr.in", "open-meteo" or "mock") and days
    """
    city = city_from_destination(trip.destination)
    days = trip_days(trip.start_date, trip.end_date)

    providers = [("wttr.in", fetch_wttr), ("open-meteo", fetch_open_meteo)]
    for source, fetch in providers:
        try:
            forecast = fetch(city, days)
        except WeatherUnavailableError:
            continue
        if forecast:
            logger.info(f"Weather for {city} from {source}")
            return {"city": city, "source": source, "days": forecast}

    logger.info(f"All weather providers failed for {city}, using mock forecast")
    return {"city": city, "source": "mock", "days": mock_forecast(city, days)}

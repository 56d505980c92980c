"""
Utility functions for the application.
"""
from typing import Any, Union
from datetime import date, datetime
from decimal import Decimal, ROUND_HALF_UP
import re
import uuid


CURRENCY_SYMBOLS = {
    "USD": "$",
    "EUR": "€",
    "GBP": "£",
    "CAD": "C$",
}

_EMAIL_RE = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")
_CURRENCY_RE = re.compile(r"^\d+(\.\d{1,2})?$")
_HANDLER_RE = re.compile(r"on\w+=", re.IGNORECASE)
_JS_PROTOCOL_RE = re.compile(r"javascript:", re.IGNORECASE)


def generate_id() -> str:
    """Generate an opaque unique identifier for planner records."""
    return uuid.uuid4().hex


def format_currency(amount: Union[Decimal, float, int], currency: str = "USD") -> str:
    """
    Format an amount with the currency symbol and two decimals.

    No thousands separator is used, so 1234.5 in EUR renders as "€1234.50".
    Unknown currency codes fall back to the dollar sign.
    """
    symbol = CURRENCY_SYMBOLS.get((currency or "USD").upper(), "$")
    value = Decimal(str(amount)).quantize(Decimal("0.01"), rounding=ROUND_HALF_UP)
    return f"{symbol}{value}"


def format_date(value: Union[date, datetime, str]) -> str:
    """Format a date like "Jun 15, 2024"."""
    if isinstance(value, str):
        value = date.fromisoformat(value[:10])
    return f"{value.strftime('%b')} {value.day}, {value.year}"


def sanitize_input(value: Any) -> str:
    """Strip markup and script fragments from free text input."""
    if not isinstance(value, str):
        return ""
    value = value.replace("<", "").replace(">", "")
    value = _JS_PROTOCOL_RE.sub("", value)
    value = _HANDLER_RE.sub("", value)
    return value.strip()


def validate_input(value: Any, kind: str = "text", max_length: int = 255) -> bool:
    """
    Validate a raw form value.

    Args:
        value: Raw input (only strings are accepted)
        kind: One of "text", "email", "number", "date", "currency"
        max_length: Maximum length after sanitizing
    """
    if not value or not isinstance(value, str):
        return False

    sanitized = sanitize_input(value)
    if len(sanitized) == 0 or len(sanitized) > max_length:
        return False

    if kind == "email":
        return bool(_EMAIL_RE.match(sanitized))
    if kind == "number":
        try:
            number = float(sanitized)
        except ValueError:
            return False
        return number not in (float("inf"), float("-inf")) and number == number
    if kind == "date":
        try:
            date.fromisoformat(sanitized[:10])
        except ValueError:
            return False
        return True
    if kind == "currency":
        return bool(_CURRENCY_RE.match(sanitized))
    return True


def slugify_filename(name: str) -> str:
    """Replace every non-alphanumeric character with an underscore and lowercase."""
    return re.sub(r"[^a-z0-9]", "_", name, flags=re.IGNORECASE).lower()

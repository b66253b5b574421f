"""Utility functions for the booking system."""

from datetime import date, datetime
from typing import Optional

from .config import DATE_FORMAT


def parse_date(value: str) -> date:
    """
    Parse a ``YYYY-MM-DD`` departure date.

    Raises:
        ValueError: If the text is not a valid calendar date
    """
    return datetime.strptime(value.strip(), DATE_FORMAT).date()


def parse_bool(value: str) -> bool:
    """
    Parse the ``true``/``false`` text used in the data files.

    Raises:
        ValueError: For anything other than true/false (any case)
    """
    lowered = value.strip().lower()
    if lowered == "true":
        return True
    if lowered == "false":
        return False
    raise ValueError(f"Invalid boolean: {value!r}")


def format_bool(value: bool) -> str:
    return "true" if value else "false"


def format_optional(value: Optional[str]) -> str:
    return "" if value is None else value


def format_price(price: float) -> str:
    """
    Format a price with thousand separators and 2 decimal places.

    Examples:
        >>> format_price(1234.5)
        '1,234.50'
        >>> format_price(500)
        '500.00'
    """
    return f"{price:,.2f}"

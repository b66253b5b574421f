"""Flight booking registry with flat-file persistence."""

from .exceptions import FlightBookingError, FlightFullError
from .registry import FlightBookingSystem

__all__ = [
    "FlightBookingError",
    "FlightFullError",
    "FlightBookingSystem",
]

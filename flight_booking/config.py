"""Configuration module for constants, pricing factors, and settings."""

from typing import Dict
from pydantic_settings import BaseSettings


# Flat-file format
DELIMITER = "::"
DATE_FORMAT = "%Y-%m-%d"

FLIGHTS_FILE = "flights.txt"
DELETED_FLIGHTS_FILE = "deletedFlights.txt"
CUSTOMERS_FILE = "customers.txt"
BOOKINGS_FILE = "bookings.txt"

# Field counts per record type
FLIGHT_FIELD_COUNT = 10
CUSTOMER_FIELD_COUNT = 6
BOOKING_FIELD_COUNT = 7


# Dynamic pricing - urgency (days to departure) is applied before scarcity
LAST_MINUTE_DAYS = 7
LAST_MINUTE_FACTOR = 1.5
SHORT_NOTICE_DAYS = 30
SHORT_NOTICE_FACTOR = 1.2

NEARLY_FULL_RATIO = 0.2
NEARLY_FULL_FACTOR = 1.8
FILLING_UP_RATIO = 0.5
FILLING_UP_FACTOR = 1.3


# Booking quote
SEAT_CLASS_MULTIPLIERS: Dict[str, float] = {
    "Economy": 1.0,
    "Business": 2.0,
    "FirstClass": 4.0,
}
FREE_BAGS = 2
EXTRA_BAG_FEE = 20.0

# Promo code -> fraction of the total taken off
PROMO_CODES: Dict[str, float] = {
    "123456789": 0.5,
    "122222222": 1.0,
}

# Share of the current ticket price refunded on cancellation; the rest is
# kept as a compensation fee
REFUND_FRACTION = 0.9


class Config(BaseSettings):
    """Application configuration with environment variable support."""

    # Directory holding the flat files
    DATA_DIR: str = "resources/data"

    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_FILE: str = "bookingsystem.log"

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
    }

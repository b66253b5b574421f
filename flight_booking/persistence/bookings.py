"""Booking records in ``bookings.txt``."""

import logging
from pathlib import Path
from typing import List

from ..config import BOOKING_FIELD_COUNT, BOOKINGS_FILE
from ..exceptions import FlightFullError
from ..models.booking import Booking
from ..registry import FlightBookingSystem
from ..utils import format_bool, parse_bool
from .records import parse_id, parse_non_negative_int, read_records, write_records

logger = logging.getLogger(__name__)


def format_booking(booking: Booking) -> List[str]:
    return [
        str(booking.id),
        str(booking.customer_id),
        str(booking.flight_id),
        format_bool(booking.is_cancelled),
        booking.seat_class,
        booking.meal_preference,
        str(booking.number_of_bags),
    ]


def load(registry: FlightBookingSystem, data_dir: Path) -> None:
    """
    Rebuild bookings through the registry's booking path.

    Flights and customers must already be loaded. Each booking is created with
    ``registry.add_booking`` so customer and flight back-references stay in
    step, then the stored ID and cancellation flag are put back on it.

    Args:
        registry: Registry to populate
        data_dir: Directory holding the booking file
    """
    path = Path(data_dir) / BOOKINGS_FILE
    loaded = 0
    for line_number, values in read_records(path, BOOKING_FIELD_COUNT, "booking"):
        try:
            booking_id = parse_id(values[0])
            customer_id = int(values[1])
            flight_id = int(values[2])
            is_cancelled = parse_bool(values[3])
            seat_class = values[4]
            meal_preference = values[5]
            number_of_bags = parse_non_negative_int(values[6])
        except ValueError as e:
            logger.warning(f"Error parsing booking line {line_number} in {path}: {e}")
            continue

        if registry.get_booking_by_id(booking_id) is not None:
            logger.warning(f"Duplicate booking ID {booking_id} on line {line_number} in {path}, skipping")
            continue

        customer = registry.get_customer_by_id(customer_id)
        flight = registry.get_flight_by_id(flight_id)
        if customer is None or flight is None:
            logger.warning(
                f"Invalid customer or flight ID in booking line {line_number} in {path}: "
                f"customer={customer_id}, flight={flight_id}"
            )
            continue

        try:
            booking = registry.add_booking(customer, flight, seat_class, meal_preference, number_of_bags)
        except FlightFullError:
            logger.warning(f"Flight {flight_id} is full, skipping booking {booking_id} on line {line_number}")
            continue

        booking.id = booking_id
        booking.is_cancelled = is_cancelled
        if booking_id >= registry.next_booking_id:
            registry.next_booking_id = booking_id + 1
        loaded += 1

    logger.info(f"Loaded {loaded} bookings")


def store(registry: FlightBookingSystem, data_dir: Path) -> None:
    """
    Rewrite the booking file from the registry.

    Raises:
        OSError: If the file cannot be written
    """
    path = Path(data_dir) / BOOKINGS_FILE
    count = write_records(path, (format_booking(b) for b in registry.bookings))
    logger.info(f"Stored {count} bookings")

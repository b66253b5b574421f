"""Pricing module for dynamic ticket prices, booking quotes and cancellation refunds."""

import logging
from datetime import date
from typing import Optional, Tuple
from pydantic import BaseModel

from .config import (
    EXTRA_BAG_FEE,
    FILLING_UP_FACTOR,
    FILLING_UP_RATIO,
    FREE_BAGS,
    LAST_MINUTE_DAYS,
    LAST_MINUTE_FACTOR,
    NEARLY_FULL_FACTOR,
    NEARLY_FULL_RATIO,
    PROMO_CODES,
    REFUND_FRACTION,
    SEAT_CLASS_MULTIPLIERS,
    SHORT_NOTICE_DAYS,
    SHORT_NOTICE_FACTOR,
)
from .exceptions import FlightBookingError
from .models.flight import Flight
from .utils import format_price, parse_date

logger = logging.getLogger(__name__)


class PriceBreakdown(BaseModel):
    """Itemised price of a prospective booking."""

    flight_price: float
    seat_class_multiplier: float
    seat_class_surcharge: float
    meal_cost: float
    baggage_fee: float
    discount: float  # fraction, 0.5 == 50%
    total_price: float


def seat_ratio(flight: Flight) -> float:
    """
    Fraction of seats still available.

    Args:
        flight: Flight object

    Returns:
        available / capacity, or 0.0 for a zero-capacity flight
    """
    if flight.capacity == 0:
        return 0.0
    return flight.available_seats / flight.capacity


def calculate_price(flight: Flight, today: Optional[date] = None) -> float:
    """
    Calculate the current ticket price of a flight.

    The base price is raised for departures within 30 (and further within 7)
    days, then raised again when fewer than half (and further under a fifth)
    of the seats remain. The result is recomputed on every call.

    Args:
        flight: Flight object
        today: Reference date (defaults to the current date)

    Returns:
        Ticket price; the base price if the departure date cannot be parsed
    """
    today = today or date.today()
    try:
        departure = parse_date(flight.departure_date)
    except ValueError:
        logger.warning(
            f"Invalid date format for flight {flight.id}: {flight.departure_date!r}, "
            f"using base price"
        )
        return flight.base_price

    price = flight.base_price

    days_to_departure = (departure - today).days
    if days_to_departure < LAST_MINUTE_DAYS:
        price *= LAST_MINUTE_FACTOR
    elif days_to_departure < SHORT_NOTICE_DAYS:
        price *= SHORT_NOTICE_FACTOR

    ratio = seat_ratio(flight)
    if ratio < NEARLY_FULL_RATIO:
        price *= NEARLY_FULL_FACTOR
    elif ratio < FILLING_UP_RATIO:
        price *= FILLING_UP_FACTOR

    return price


def calculate_meal_cost(flight: Flight, meal_preference: str) -> float:
    """Meal cost for one passenger before any seat-class scaling."""
    if meal_preference == "Veg":
        return flight.veg_meal_cost
    if meal_preference == "Non-Veg":
        return flight.non_veg_meal_cost
    return 0.0


def calculate_baggage_fee(number_of_bags: int) -> float:
    """Fee for checked bags beyond the free allowance."""
    extra_bags = max(0, number_of_bags - FREE_BAGS)
    return extra_bags * EXTRA_BAG_FEE


def resolve_discount(promocode: Optional[str]) -> float:
    """
    Look up the discount granted by a promo code.

    Args:
        promocode: Code entered by the customer, or None

    Returns:
        Discount fraction (0.0 when no code is given)

    Raises:
        FlightBookingError: If the code is not recognised
    """
    if not promocode:
        return 0.0
    if promocode not in PROMO_CODES:
        raise FlightBookingError("Wrong promocode")
    return PROMO_CODES[promocode]


def quote_booking(
    flight: Flight,
    seat_class: str,
    meal_preference: str,
    number_of_bags: int,
    promocode: Optional[str] = None,
    today: Optional[date] = None,
) -> PriceBreakdown:
    """
    Quote the full price of a booking.

    The seat-class multiplier applies to both the ticket and the meal.

    Args:
        flight: Flight to be booked
        seat_class: Economy, Business or FirstClass
        meal_preference: Veg, Non-Veg or anything else for no meal
        number_of_bags: Checked bags
        promocode: Optional promo code
        today: Reference date for the ticket price

    Returns:
        PriceBreakdown with every component and the total
    """
    flight_price = calculate_price(flight, today)
    multiplier = SEAT_CLASS_MULTIPLIERS.get(seat_class, 1.0)
    meal_cost = calculate_meal_cost(flight, meal_preference) * multiplier
    baggage_fee = calculate_baggage_fee(number_of_bags)
    discount = resolve_discount(promocode)

    total = (flight_price * multiplier + meal_cost + baggage_fee) * (1 - discount)

    logger.debug(
        f"Quote for flight {flight.id}: {seat_class}/{meal_preference}/{number_of_bags} bags "
        f"-> {format_price(total)}"
    )

    return PriceBreakdown(
        flight_price=flight_price,
        seat_class_multiplier=multiplier,
        seat_class_surcharge=flight_price * (multiplier - 1),
        meal_cost=meal_cost,
        baggage_fee=baggage_fee,
        discount=discount,
        total_price=total,
    )


def calculate_refund(flight: Flight, today: Optional[date] = None) -> Tuple[float, float]:
    """
    Split the flight's current ticket price into refund and compensation fee.

    Args:
        flight: Flight of the booking being cancelled
        today: Reference date for the ticket price

    Returns:
        (refund_amount, compensation_fee)
    """
    price = calculate_price(flight, today)
    refund = price * REFUND_FRACTION
    return refund, price - refund

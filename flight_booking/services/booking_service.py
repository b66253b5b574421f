"""Service for booking commands: validate, apply to the registry, persist."""

import logging
from datetime import date
from typing import Optional

from ..config import DELIMITER, Config
from ..exceptions import FlightBookingError
from ..models import Booking, Customer, Flight
from ..persistence import BookingSystemData
from ..pricing import PriceBreakdown, calculate_refund, quote_booking
from ..registry import FlightBookingSystem
from ..utils import format_price, parse_date

logger = logging.getLogger(__name__)


def _require_text(value: Optional[str], field_name: str) -> str:
    if value is None or not value.strip():
        raise FlightBookingError(f"{field_name} must not be empty.")
    return _storable(value, field_name)


def _storable(value: str, field_name: str) -> str:
    if DELIMITER in value or "\n" in value or "\r" in value:
        raise FlightBookingError(f"{field_name} must not contain '{DELIMITER}' or line breaks.")
    return value


def _require_whole(value: int, field_name: str) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise FlightBookingError(f"{field_name} must be a whole number.")
    _require_non_negative(value, field_name)


def _require_non_negative(value: float, field_name: str) -> None:
    if value < 0:
        raise FlightBookingError(f"{field_name} must not be negative.")


class BookingService:
    """
    Command surface over one registry and its data files.

    Every mutating command stores a full snapshot once it succeeds. Callers
    run ``load`` once before issuing commands.
    """

    def __init__(self, config: Optional[Config] = None):
        """
        Initialize booking service.

        Args:
            config: Configuration (defaults to environment/.env settings)
        """
        self.config = config or Config()
        self.registry = FlightBookingSystem()
        self.data = BookingSystemData(self.config.DATA_DIR)

    def load(self) -> None:
        self.data.load(self.registry)

    def _commit(self) -> None:
        self.data.store(self.registry)

    # --- Lookups raising domain errors ---

    def _get_flight(self, flight_id: int) -> Flight:
        flight = self.registry.get_flight_by_id(flight_id)
        if flight is None:
            raise FlightBookingError(f"Flight with ID {flight_id} not found.")
        return flight

    def _get_customer(self, customer_id: int) -> Customer:
        customer = self.registry.get_customer_by_id(customer_id)
        if customer is None:
            raise FlightBookingError(f"Customer with ID {customer_id} not found.")
        return customer

    def _get_booking(self, booking_id: int) -> Booking:
        booking = self.registry.get_booking_by_id(booking_id)
        if booking is None:
            raise FlightBookingError(f"Booking with ID {booking_id} not found.")
        return booking

    # --- Commands ---

    def add_flight(
        self,
        flight_number: str,
        destination: str,
        origin: str,
        departure_date: str,
        capacity: int,
        base_price: float,
        duration: str,
        veg_meal_cost: float,
        non_veg_meal_cost: float,
    ) -> str:
        """
        Validate and create a flight, then store.

        Returns:
            Confirmation message

        Raises:
            FlightBookingError: On empty or malformed arguments
        """
        flight_number = _require_text(flight_number, "Flight number").strip()
        destination = _require_text(destination, "Destination").strip()
        origin = _require_text(origin, "Origin").strip()
        departure_date = _require_text(departure_date, "Departure date").strip()
        duration = _storable(duration or "", "Duration")
        try:
            parse_date(departure_date)
        except ValueError:
            raise FlightBookingError(
                f"Invalid departure date {departure_date!r}, expected YYYY-MM-DD."
            )
        _require_whole(capacity, "Capacity")
        _require_non_negative(base_price, "Price")
        _require_non_negative(veg_meal_cost, "Veg meal cost")
        _require_non_negative(non_veg_meal_cost, "Non-veg meal cost")

        flight = self.registry.create_flight(
            flight_number=flight_number,
            destination=destination,
            origin=origin,
            departure_date=departure_date,
            capacity=capacity,
            base_price=base_price,
            duration=duration,
            veg_meal_cost=veg_meal_cost,
            non_veg_meal_cost=non_veg_meal_cost,
        )
        self._commit()
        return f"Flight {flight.flight_number} added with ID {flight.id}"

    def add_customer(
        self,
        name: str,
        phone: str,
        email: str,
        special_requests: Optional[str] = None,
    ) -> str:
        """
        Validate and create a customer, then store.

        Returns:
            Confirmation message
        """
        name = _require_text(name, "Name").strip()
        phone = _require_text(phone, "Phone").strip()
        email = _require_text(email, "Email").strip()
        if special_requests is not None:
            special_requests = _storable(special_requests, "Special requests").strip() or None

        customer = self.registry.create_customer(name, phone, email, special_requests)
        self._commit()
        return f"Customer {customer.name} added with ID {customer.id}"

    def add_booking(
        self,
        customer_id: int,
        flight_id: int,
        seat_class: str,
        meal_preference: str,
        number_of_bags: int,
    ) -> str:
        """
        Book a seat by customer and flight ID, then store.

        Returns:
            Confirmation message

        Raises:
            FlightBookingError: Unknown customer/flight or bad arguments
            FlightFullError: If the flight has no available seats
        """
        seat_class = _require_text(seat_class, "Seat class")
        meal_preference = _require_text(meal_preference, "Meal preference")
        _require_whole(number_of_bags, "Number of bags")

        self.registry.issue_booking(customer_id, flight_id, seat_class, meal_preference, number_of_bags)
        self._commit()
        return f"Booking created for customer {customer_id} on flight {flight_id}."

    def cancel_booking(self, booking_id: int, today: Optional[date] = None) -> str:
        """
        Cancel a booking, then store.

        Returns:
            Confirmation message with the refund and the compensation fee,
            both taken from the flight's current price
        """
        booking = self._get_booking(booking_id)
        if booking.is_cancelled:
            raise FlightBookingError(f"Booking with ID {booking_id} is already cancelled.")
        refund, fee = calculate_refund(booking.flight, today)
        self.registry.cancel_booking(booking_id)
        self._commit()
        return (
            f"Booking {booking_id} cancelled. Refund amount: {format_price(refund)}, "
            f"compensation fee: {format_price(fee)}."
        )

    def delete_flight(self, flight_id: int) -> str:
        self._get_flight(flight_id)
        self.registry.delete_flight(flight_id)
        self._commit()
        return f"Flight {flight_id} deleted."

    def restore_flight(self, flight_id: int) -> str:
        flight = self._get_flight(flight_id)
        if not flight.is_deleted:
            raise FlightBookingError(f"Flight with ID {flight_id} is not deleted.")
        self.registry.restore_flight(flight_id)
        self._commit()
        return f"Flight {flight_id} restored."

    def delete_customer(self, customer_id: int) -> str:
        self._get_customer(customer_id)
        self.registry.delete_customer(customer_id)
        self._commit()
        return f"Customer {customer_id} deleted."

    # --- Waiting list (kept in memory only) ---

    def join_waiting_list(self, flight_id: int, customer_id: int) -> str:
        flight = self._get_flight(flight_id)
        customer = self._get_customer(customer_id)
        flight.add_to_waiting_list(customer)
        logger.info(f"Customer {customer_id} added to waiting list of flight {flight_id}")
        return f"Customer {customer_id} added to the waiting list for flight {flight_id}."

    def leave_waiting_list(self, flight_id: int, customer_id: int) -> str:
        flight = self._get_flight(flight_id)
        customer = self._get_customer(customer_id)
        if not flight.remove_from_waiting_list(customer):
            raise FlightBookingError(
                f"Customer with ID {customer_id} is not on the waiting list for flight {flight_id}."
            )
        return f"Customer {customer_id} removed from the waiting list for flight {flight_id}."

    # --- Queries ---

    def quote(
        self,
        flight_id: int,
        seat_class: str,
        meal_preference: str,
        number_of_bags: int,
        promocode: Optional[str] = None,
        today: Optional[date] = None,
    ) -> PriceBreakdown:
        """Price breakdown for a prospective booking on a flight."""
        flight = self._get_flight(flight_id)
        return quote_booking(flight, seat_class, meal_preference, number_of_bags, promocode, today)

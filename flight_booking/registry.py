"""Booking registry holding flights, customers, bookings and ID counters."""

import logging
from datetime import date
from typing import List, Optional

from .exceptions import FlightBookingError, FlightFullError
from .models import Booking, Customer, Flight
from .pricing import calculate_price

logger = logging.getLogger(__name__)


class FlightBookingSystem:
    """
    In-memory registry of flights, customers and bookings.

    Owns the per-type ID counters. Deletion is always a soft flag flip, so
    every entity ever registered stays in the full collections.

    Notes:
        - cancelled bookings keep occupying a seat;
        - deleted flights can be restored, deleted customers cannot.
    """

    def __init__(self):
        self.flights: List[Flight] = []
        self.customers: List[Customer] = []
        self.bookings: List[Booking] = []
        self.next_flight_id = 1
        self.next_customer_id = 1
        self.next_booking_id = 1

    # --- Registration ---

    def add_flight(self, flight: Flight) -> None:
        """Register a flight that already carries its ID; the counter moves past it."""
        self.flights.append(flight)
        self.next_flight_id = max(self.next_flight_id, flight.id + 1)

    def add_customer(self, customer: Customer) -> None:
        """Register a customer that already carries its ID; the counter moves past it."""
        self.customers.append(customer)
        self.next_customer_id = max(self.next_customer_id, customer.id + 1)

    def create_flight(
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
    ) -> Flight:
        """
        Create and register a flight under the next flight ID.

        Returns:
            The new Flight
        """
        flight = Flight(
            id=self.next_flight_id,
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
        self.add_flight(flight)
        logger.info(f"Flight {flight.flight_number} created with ID {flight.id}")
        return flight

    def create_customer(
        self,
        name: str,
        phone: Optional[str] = None,
        email: Optional[str] = None,
        special_requests: Optional[str] = None,
    ) -> Customer:
        """
        Create and register a customer under the next customer ID.

        Empty optional fields are stored as None, the same value they load
        back as.

        Returns:
            The new Customer
        """
        customer = Customer(
            id=self.next_customer_id,
            name=name,
            phone=phone or None,
            email=email or None,
            special_requests=special_requests or None,
        )
        self.add_customer(customer)
        logger.info(f"Customer {customer.name} created with ID {customer.id}")
        return customer

    def add_booking(
        self,
        customer: Customer,
        flight: Flight,
        seat_class: str,
        meal_preference: str,
        number_of_bags: int,
    ) -> Booking:
        """
        Book a seat for a customer on a flight.

        The booking is appended to the registry, the customer and the flight
        together; nothing changes when the flight is full.

        Args:
            customer: Booking customer
            flight: Flight to book
            seat_class: Seat class label
            meal_preference: Meal preference label
            number_of_bags: Checked bags

        Returns:
            The new Booking

        Raises:
            FlightFullError: If the flight has no available seats
        """
        if self.available_seats(flight) <= 0:
            logger.warning(f"Flight {flight.id} is full, booking refused for customer {customer.id}")
            raise FlightFullError(flight.id)

        booking = Booking(
            id=self.next_booking_id,
            customer=customer,
            flight=flight,
            seat_class=seat_class,
            meal_preference=meal_preference,
            seat_number=len(flight.bookings) + 1,
            number_of_bags=number_of_bags,
        )
        self.bookings.append(booking)
        customer.add_booking(booking)
        flight.add_booking(booking)
        self.next_booking_id += 1

        logger.debug(f"Booking {booking.id}: customer {customer.id} on flight {flight.id}")
        return booking

    def issue_booking(
        self,
        customer_id: int,
        flight_id: int,
        seat_class: str,
        meal_preference: str,
        number_of_bags: int,
    ) -> Booking:
        """
        Book by customer and flight ID.

        Raises:
            FlightBookingError: If the customer or flight does not exist
            FlightFullError: If the flight has no available seats
        """
        customer = self.get_customer_by_id(customer_id)
        if customer is None:
            raise FlightBookingError(f"Customer with ID {customer_id} not found.")
        flight = self.get_flight_by_id(flight_id)
        if flight is None:
            raise FlightBookingError(f"Flight with ID {flight_id} not found.")
        return self.add_booking(customer, flight, seat_class, meal_preference, number_of_bags)

    # --- Lookup ---

    def get_flight_by_id(self, flight_id: int) -> Optional[Flight]:
        for flight in self.flights:
            if flight.id == flight_id:
                return flight
        return None

    def get_customer_by_id(self, customer_id: int) -> Optional[Customer]:
        for customer in self.customers:
            if customer.id == customer_id:
                return customer
        return None

    def get_booking_by_id(self, booking_id: int) -> Optional[Booking]:
        for booking in self.bookings:
            if booking.id == booking_id:
                return booking
        return None

    # --- Status changes ---

    def cancel_booking(self, booking_id: int) -> None:
        """Mark a booking cancelled. The seat stays taken."""
        booking = self.get_booking_by_id(booking_id)
        if booking is not None:
            booking.is_cancelled = True
            logger.info(f"Booking {booking_id} cancelled")

    def delete_flight(self, flight_id: int) -> None:
        flight = self.get_flight_by_id(flight_id)
        if flight is not None:
            flight.is_deleted = True
            logger.info(f"Flight {flight_id} deleted")

    def restore_flight(self, flight_id: int) -> None:
        flight = self.get_flight_by_id(flight_id)
        if flight is not None:
            flight.is_deleted = False
            logger.info(f"Flight {flight_id} restored")

    def delete_customer(self, customer_id: int) -> None:
        customer = self.get_customer_by_id(customer_id)
        if customer is not None:
            customer.is_deleted = True
            logger.info(f"Customer {customer_id} deleted")

    # --- Views ---

    def available_seats(self, flight: Flight) -> int:
        return flight.available_seats

    def price(self, flight: Flight, today: Optional[date] = None) -> float:
        return calculate_price(flight, today)

    def get_active_flights(self) -> List[Flight]:
        return [f for f in self.flights if not f.is_deleted]

    def get_deleted_flights(self) -> List[Flight]:
        return [f for f in self.flights if f.is_deleted]

    def get_active_customers(self) -> List[Customer]:
        return [c for c in self.customers if not c.is_deleted]

    def get_deleted_customers(self) -> List[Customer]:
        return [c for c in self.customers if c.is_deleted]

    def get_departed_flights(self, today: Optional[date] = None) -> List[Flight]:
        """All flights that have left, deleted ones included."""
        return [f for f in self.flights if f.is_departed(today)]

    def get_future_flights(self, today: Optional[date] = None) -> List[Flight]:
        """Active flights that have not left yet."""
        return [f for f in self.flights if not f.is_departed(today) and not f.is_deleted]

    def filter_flights_by_destination(self, destination: str) -> List[Flight]:
        """Active flights whose destination matches, ignoring case."""
        wanted = destination.lower()
        return [f for f in self.get_active_flights() if f.destination.lower() == wanted]

    def filter_flights_by_airline(self, airline: str) -> List[Flight]:
        """Active flights whose flight number starts with the airline code."""
        return [f for f in self.get_active_flights() if f.flight_number.startswith(airline)]

    def filter_flights_by_price(
        self, min_price: float, max_price: float, today: Optional[date] = None
    ) -> List[Flight]:
        """Active flights whose current price lies in [min_price, max_price]."""
        results = []
        for flight in self.get_active_flights():
            current = calculate_price(flight, today)
            if min_price <= current <= max_price:
                results.append(flight)
        return results

    def sort_flights_by_price(self, today: Optional[date] = None) -> List[Flight]:
        return sorted(self.get_active_flights(), key=lambda f: calculate_price(f, today))

    def sort_customers_by_name(self) -> List[Customer]:
        return sorted(self.get_active_customers(), key=lambda c: c.name)

    # --- Display ---

    def flight_display_string(self, flight: Flight) -> str:
        return f"{flight.flight_number} - {flight.destination} ({flight.departure_date})"

    def customer_display_string(self, customer: Customer) -> str:
        return f"{customer.name} (ID: {customer.id})"

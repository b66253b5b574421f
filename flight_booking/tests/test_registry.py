"""Tests for the booking registry."""

from datetime import date, timedelta

import pytest
from flight_booking.exceptions import FlightBookingError, FlightFullError
from flight_booking.models import Customer, Flight
from flight_booking.registry import FlightBookingSystem


TODAY = date(2025, 1, 1)


def days_out(days: int) -> str:
    return (TODAY + timedelta(days=days)).isoformat()


@pytest.fixture
def registry():
    """Create empty registry for testing."""
    return FlightBookingSystem()


@pytest.fixture
def populated(registry):
    """Create registry with flights and customers."""
    registry.create_flight("BA249", "London", "New York", days_out(40), 10, 300.0, "7h", 10.0, 12.0)
    registry.create_flight("AA100", "Paris", "Boston", days_out(-3), 10, 200.0, "8h", 10.0, 12.0)
    registry.create_flight("BA117", "london", "Dubai", days_out(60), 10, 100.0, "6h", 10.0, 12.0)
    registry.create_flight("EK001", "Dubai", "London", days_out(90), 10, 400.0, "6h", 10.0, 12.0)
    registry.create_customer("Zoe", "111", "zoe@example.com")
    registry.create_customer("Adam", "222", "adam@example.com")
    registry.create_customer("Mia", "333", "mia@example.com")
    return registry


def test_ids_unique_and_increasing(registry):
    """Test every factory allocates strictly increasing IDs per type."""
    flights = [
        registry.create_flight(f"F{i}", "X", "Y", days_out(40), 5, 10.0, "1h", 0.0, 0.0)
        for i in range(3)
    ]
    customers = [registry.create_customer(f"C{i}") for i in range(3)]
    bookings = [
        registry.add_booking(customers[i], flights[i], "Economy", "Veg", 0)
        for i in range(3)
    ]

    assert [f.id for f in flights] == [1, 2, 3]
    assert [c.id for c in customers] == [1, 2, 3]
    assert [b.id for b in bookings] == [1, 2, 3]
    assert registry.next_flight_id == 4
    assert registry.next_customer_id == 4
    assert registry.next_booking_id == 4


def test_add_flight_keeps_supplied_id(registry):
    """Test registering pre-built entities keeps their IDs and moves the counters past them."""
    flight = Flight(
        id=42,
        flight_number="AA123",
        destination="New York",
        origin="London",
        departure_date=days_out(40),
        capacity=1,
        base_price=1.0,
        duration="1h",
        veg_meal_cost=0.0,
        non_veg_meal_cost=0.0,
    )
    registry.add_flight(flight)
    registry.add_customer(Customer(id=9, name="John Doe"))

    assert registry.get_flight_by_id(42) is flight
    assert registry.get_customer_by_id(9).name == "John Doe"
    assert registry.next_flight_id == 43
    assert registry.next_customer_id == 10


def test_create_after_add_never_reuses_ids(registry):
    """Test factory IDs skip past entities registered with their own ID."""
    registry.add_flight(
        Flight(
            id=2,
            flight_number="AA200",
            destination="Rome",
            origin="Madrid",
            departure_date=days_out(40),
            capacity=5,
            base_price=10.0,
            duration="2h",
            veg_meal_cost=0.0,
            non_veg_meal_cost=0.0,
        )
    )
    registry.add_customer(Customer(id=5, name="Jane Doe"))

    created = [
        registry.create_flight(f"F{i}", "X", "Y", days_out(40), 5, 10.0, "1h", 0.0, 0.0)
        for i in range(2)
    ]
    customer = registry.create_customer("John Doe")

    assert [f.id for f in registry.flights] == [2, 3, 4]
    assert created[0].id == 3
    assert customer.id == 6


def test_lower_supplied_id_keeps_counter(registry):
    """Test registering an ID below the counter leaves the counter alone."""
    registry.create_customer("A")
    registry.create_customer("B")
    registry.add_customer(Customer(id=1, name="Old"))

    assert registry.next_customer_id == 3


def test_create_customer_empty_fields_become_none(registry):
    """Test empty optional text is stored as None."""
    customer = registry.create_customer("John Doe", phone="", email="", special_requests="")

    assert customer.phone is None
    assert customer.email is None
    assert customer.special_requests is None


def test_single_seat_scenario(registry):
    """Test booking the only seat, then being refused on the full flight."""
    customer = registry.create_customer("John Doe", "1234567890", "john@example.com")
    flight = registry.create_flight("AA123", "New York", "London", days_out(45), 1, 500.00, "7h", 20.0, 25.0)

    booking = registry.issue_booking(1, 1, "Economy", "Veg", 2)

    assert booking.id == 1
    assert booking.customer is customer
    assert booking.flight is flight
    assert booking.seat_class == "Economy"
    assert booking.meal_preference == "Veg"
    assert booking.number_of_bags == 2
    assert booking.seat_number == 1
    assert registry.available_seats(flight) == 0

    with pytest.raises(FlightFullError):
        registry.issue_booking(1, 1, "Business", "Non-Veg", 1)


def test_full_flight_leaves_state_untouched(registry):
    """Test a refused booking changes no collection or counter."""
    customer = registry.create_customer("John Doe")
    flight = registry.create_flight("AA123", "X", "Y", days_out(45), 0, 10.0, "1h", 0.0, 0.0)

    with pytest.raises(FlightFullError) as exc_info:
        registry.add_booking(customer, flight, "Economy", "Veg", 1)

    assert exc_info.value.flight_id == flight.id
    assert registry.bookings == []
    assert customer.bookings == []
    assert flight.bookings == []
    assert registry.next_booking_id == 1


def test_booking_fans_out(populated):
    """Test a booking is visible from registry, customer and flight."""
    customer = populated.get_customer_by_id(2)
    flight = populated.get_flight_by_id(1)

    first = populated.add_booking(customer, flight, "Economy", "Veg", 1)
    second = populated.add_booking(customer, flight, "Business", "Non-Veg", 2)

    assert populated.bookings[0] is first
    assert populated.bookings[1] is second
    assert [b.id for b in customer.bookings] == [1, 2]
    assert [b.id for b in flight.bookings] == [1, 2]
    assert second.seat_number == 2
    assert populated.available_seats(flight) == 8


def test_issue_booking_unknown_customer(populated):
    """Test booking for a customer that does not exist."""
    with pytest.raises(FlightBookingError, match="Customer with ID 99 not found."):
        populated.issue_booking(99, 1, "Economy", "Veg", 2)


def test_issue_booking_unknown_flight(populated):
    """Test booking on a flight that does not exist."""
    with pytest.raises(FlightBookingError, match="Flight with ID 99 not found."):
        populated.issue_booking(1, 99, "Economy", "Veg", 2)


def test_lookups_return_none(populated):
    """Test lookups of unknown IDs return None."""
    assert populated.get_flight_by_id(99) is None
    assert populated.get_customer_by_id(99) is None
    assert populated.get_booking_by_id(99) is None


def test_cancel_booking_keeps_seat(populated):
    """Test a cancelled booking still occupies capacity."""
    flight = populated.get_flight_by_id(1)
    booking = populated.issue_booking(1, 1, "Economy", "Veg", 0)

    populated.cancel_booking(booking.id)

    assert booking.is_cancelled is True
    assert populated.available_seats(flight) == 9


def test_cancel_unknown_booking_is_noop(populated):
    """Test cancelling an unknown booking does nothing."""
    populated.cancel_booking(99)
    assert populated.bookings == []


def test_delete_and_restore_flight(populated):
    """Test soft deletion hides a flight from active views only."""
    populated.delete_flight(1)

    flight = populated.get_flight_by_id(1)
    assert flight.is_deleted is True
    assert 1 not in [f.id for f in populated.get_active_flights()]
    assert 1 not in [f.id for f in populated.get_future_flights(TODAY)]
    assert [f.id for f in populated.get_deleted_flights()] == [1]
    assert len(populated.flights) == 4

    populated.restore_flight(1)
    assert flight.is_deleted is False
    assert populated.get_deleted_flights() == []


def test_delete_customer(populated):
    """Test soft deletion of a customer."""
    populated.delete_customer(2)
    populated.delete_customer(99)

    assert populated.get_customer_by_id(2).is_deleted is True
    assert [c.id for c in populated.get_active_customers()] == [1, 3]
    assert [c.id for c in populated.get_deleted_customers()] == [2]


def test_departed_and_future_flights(populated):
    """Test departed view includes deleted flights while future view does not."""
    populated.delete_flight(2)
    populated.delete_flight(4)

    assert [f.id for f in populated.get_departed_flights(TODAY)] == [2]
    assert [f.id for f in populated.get_future_flights(TODAY)] == [1, 3]


def test_filter_by_destination(populated):
    """Test destination matching ignores case but not partial text."""
    assert [f.id for f in populated.filter_flights_by_destination("LONDON")] == [1, 3]
    assert populated.filter_flights_by_destination("Lon") == []

    populated.delete_flight(3)
    assert [f.id for f in populated.filter_flights_by_destination("london")] == [1]


def test_filter_by_airline(populated):
    """Test airline matching is a case-sensitive prefix."""
    assert [f.id for f in populated.filter_flights_by_airline("BA")] == [1, 3]
    assert populated.filter_flights_by_airline("ba") == []
    assert [f.id for f in populated.filter_flights_by_airline("")] == [1, 2, 3, 4]


def test_filter_by_price(populated):
    """Test inclusive price range over live prices."""
    # Flight 2 departed, so its price is 200 * 1.5
    assert [f.id for f in populated.filter_flights_by_price(300.0, 300.0, TODAY)] == [1, 2]
    assert [f.id for f in populated.filter_flights_by_price(0.0, 150.0, TODAY)] == [3]

    populated.delete_flight(3)
    assert populated.filter_flights_by_price(0.0, 150.0, TODAY) == []


def test_sort_flights_by_price(populated):
    """Test ascending price sort keeps insertion order on ties."""
    assert [f.id for f in populated.sort_flights_by_price(TODAY)] == [3, 1, 2, 4]


def test_sort_customers_by_name(populated):
    """Test active customers sorted by name."""
    assert [c.name for c in populated.sort_customers_by_name()] == ["Adam", "Mia", "Zoe"]

    populated.delete_customer(2)
    assert [c.name for c in populated.sort_customers_by_name()] == ["Mia", "Zoe"]


def test_price_uses_pricing_function(populated):
    """Test registry price matches the dynamic price."""
    assert populated.price(populated.get_flight_by_id(2), TODAY) == pytest.approx(300.0)
    assert populated.price(populated.get_flight_by_id(4), TODAY) == pytest.approx(400.0)


def test_display_strings(populated):
    """Test display helpers."""
    flight = populated.get_flight_by_id(1)
    customer = populated.get_customer_by_id(1)

    assert populated.flight_display_string(flight) == f"BA249 - London ({days_out(40)})"
    assert populated.customer_display_string(customer) == "Zoe (ID: 1)"


def test_independent_registries():
    """Test counters belong to each registry instance."""
    first = FlightBookingSystem()
    second = FlightBookingSystem()

    first.create_customer("John Doe")
    first.create_customer("Jane Doe")
    customer = second.create_customer("Solo")

    assert customer.id == 1
    assert first.next_customer_id == 3

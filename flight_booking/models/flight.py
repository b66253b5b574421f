"""Flight model."""

import logging
from datetime import date
from typing import TYPE_CHECKING, List, Optional
from pydantic import BaseModel, Field

from ..utils import parse_date

if TYPE_CHECKING:
    from .booking import Booking
    from .customer import Customer

logger = logging.getLogger(__name__)


class Flight(BaseModel):
    """Represents a scheduled flight with its bookings and waiting list."""

    id: int
    flight_number: str
    destination: str
    origin: str
    departure_date: str  # YYYY-MM-DD
    capacity: int
    base_price: float
    duration: str
    veg_meal_cost: float
    non_veg_meal_cost: float
    is_deleted: bool = False
    bookings: List["Booking"] = Field(default_factory=list, repr=False, exclude=True)
    waiting_list: List["Customer"] = Field(default_factory=list, repr=False, exclude=True)

    model_config = {
        "json_schema_extra": {
            "example": {
                "id": 1,
                "flight_number": "BA249",
                "destination": "London",
                "origin": "New York",
                "departure_date": "2025-12-01",
                "capacity": 150,
                "base_price": 500.0,
                "duration": "7h 10m",
                "veg_meal_cost": 20.0,
                "non_veg_meal_cost": 25.0,
                "is_deleted": False,
            }
        }
    }

    @property
    def available_seats(self) -> int:
        """Seats left; every booking counts, cancelled ones included."""
        return self.capacity - len(self.bookings)

    def add_booking(self, booking: "Booking") -> None:
        self.bookings.append(booking)

    def add_to_waiting_list(self, customer: "Customer") -> None:
        """Queue a customer for this flight unless already queued."""
        if not any(queued is customer for queued in self.waiting_list):
            self.waiting_list.append(customer)

    def remove_from_waiting_list(self, customer: "Customer") -> bool:
        """
        Drop a customer from the waiting list.

        Returns:
            True if the customer was queued
        """
        for index, queued in enumerate(self.waiting_list):
            if queued is customer:
                del self.waiting_list[index]
                return True
        return False

    def is_departed(self, today: Optional[date] = None) -> bool:
        """
        Check whether the departure date is strictly before today.

        An unparsable departure date counts as not departed.

        Args:
            today: Reference date (defaults to the current date)

        Returns:
            True if the flight has already left
        """
        today = today or date.today()
        try:
            departure = parse_date(self.departure_date)
        except ValueError:
            logger.warning(f"Invalid date format for flight {self.id}: {self.departure_date!r}")
            return False
        return departure < today

"""Booking model."""

from pydantic import BaseModel, Field

from .customer import Customer
from .flight import Flight


class Booking(BaseModel):
    """Represents a seat booked by a customer on a flight."""

    id: int
    customer: Customer = Field(repr=False, exclude=True)
    flight: Flight = Field(repr=False, exclude=True)
    seat_class: str
    meal_preference: str
    seat_number: int = 1  # informational only
    number_of_bags: int = 0
    is_cancelled: bool = False  # one-way, no uncancel

    @property
    def customer_id(self) -> int:
        return self.customer.id

    @property
    def flight_id(self) -> int:
        return self.flight.id

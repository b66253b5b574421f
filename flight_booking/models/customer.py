"""Customer model."""

from typing import TYPE_CHECKING, List, Optional
from pydantic import BaseModel, Field

if TYPE_CHECKING:
    from .booking import Booking


class Customer(BaseModel):
    """Represents a customer and the bookings they have made."""

    id: int
    name: str
    phone: Optional[str] = None
    email: Optional[str] = None
    special_requests: Optional[str] = None
    is_deleted: bool = False  # one-way, customers are never restored
    bookings: List["Booking"] = Field(default_factory=list, repr=False, exclude=True)

    model_config = {
        "json_schema_extra": {
            "example": {
                "id": 1,
                "name": "John Doe",
                "phone": "1234567890",
                "email": "john@example.com",
                "special_requests": "Window seat",
                "is_deleted": False,
            }
        }
    }

    def add_booking(self, booking: "Booking") -> None:
        self.bookings.append(booking)

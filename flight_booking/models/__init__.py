"""Entity models package."""

from .customer import Customer
from .flight import Flight
from .booking import Booking

# Flight, Customer and Booking reference each other
_namespace = {"Booking": Booking, "Customer": Customer, "Flight": Flight}
Flight.model_rebuild(_types_namespace=_namespace)
Customer.model_rebuild(_types_namespace=_namespace)
Booking.model_rebuild(_types_namespace=_namespace)

__all__ = [
    "Booking",
    "Customer",
    "Flight",
]

"""Services package for the booking command surface."""

from .booking_service import BookingService

__all__ = ["BookingService"]

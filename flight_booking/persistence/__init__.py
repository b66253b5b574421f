"""Flat-file persistence for the booking registry."""

import logging
from pathlib import Path
from typing import Union

from ..registry import FlightBookingSystem
from . import bookings, customers, flights

logger = logging.getLogger(__name__)


class BookingSystemData:
    """Loads and stores the whole registry, one file set per entity type."""

    def __init__(self, data_dir: Union[str, Path]):
        """
        Initialize with the directory holding the data files.

        Args:
            data_dir: Directory for flights, customers and bookings files
        """
        self.data_dir = Path(data_dir)

    def load(self, registry: FlightBookingSystem) -> None:
        """Load every entity type; bookings last since they reference the others."""
        flights.load(registry, self.data_dir)
        customers.load(registry, self.data_dir)
        bookings.load(registry, self.data_dir)
        logger.info(f"Booking system loaded from {self.data_dir}")

    def store(self, registry: FlightBookingSystem) -> None:
        """
        Write a full snapshot of the registry.

        Raises:
            OSError: If any file cannot be written
        """
        flights.store(registry, self.data_dir)
        customers.store(registry, self.data_dir)
        bookings.store(registry, self.data_dir)
        logger.info(f"Booking system stored to {self.data_dir}")


__all__ = ["BookingSystemData", "bookings", "customers", "flights"]

"""Startup wiring: logging, booking service and initial data load."""

import logging
from typing import Optional

from .config import Config
from .logger import configure_logging
from .services.booking_service import BookingService

logger = logging.getLogger(__name__)


def bootstrap(config: Optional[Config] = None) -> BookingService:
    """
    Configure logging and return a booking service loaded from disk.

    Args:
        config: Configuration (defaults to environment/.env settings)

    Returns:
        Loaded BookingService
    """
    config = config or Config()
    configure_logging(config.LOG_LEVEL, config.LOG_FILE)

    service = BookingService(config)
    service.load()

    registry = service.registry
    logger.info(
        f"Booking system ready: {len(registry.flights)} flights, "
        f"{len(registry.customers)} customers, {len(registry.bookings)} bookings"
    )
    return service

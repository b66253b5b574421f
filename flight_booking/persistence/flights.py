"""Flight records: ``flights.txt`` for live flights, ``deletedFlights.txt`` for deleted ones."""

import logging
from pathlib import Path
from typing import List

from ..config import DELETED_FLIGHTS_FILE, FLIGHT_FIELD_COUNT, FLIGHTS_FILE
from ..models.flight import Flight
from ..registry import FlightBookingSystem
from ..utils import parse_date
from .records import (
    parse_id,
    parse_non_negative_float,
    parse_non_negative_int,
    read_records,
    write_records,
)

logger = logging.getLogger(__name__)


def parse_flight(values: List[str], is_deleted: bool) -> Flight:
    """
    Build a Flight from the 10 fields of a record.

    Raises:
        ValueError: If a numeric field or the departure date does not parse
    """
    flight_id = parse_id(values[0])
    departure_date = values[4]
    parse_date(departure_date)

    return Flight(
        id=flight_id,
        flight_number=values[1],
        destination=values[2],
        origin=values[3],
        departure_date=departure_date,
        capacity=parse_non_negative_int(values[5]),
        base_price=parse_non_negative_float(values[6]),
        duration=values[7],
        veg_meal_cost=parse_non_negative_float(values[8]),
        non_veg_meal_cost=parse_non_negative_float(values[9]),
        is_deleted=is_deleted,
    )


def format_flight(flight: Flight) -> List[str]:
    return [
        str(flight.id),
        flight.flight_number,
        flight.destination,
        flight.origin,
        flight.departure_date,
        str(flight.capacity),
        repr(float(flight.base_price)),
        flight.duration,
        repr(float(flight.veg_meal_cost)),
        repr(float(flight.non_veg_meal_cost)),
    ]


def _load_file(registry: FlightBookingSystem, path: Path, is_deleted: bool) -> int:
    loaded = 0
    for line_number, values in read_records(path, FLIGHT_FIELD_COUNT, "flight"):
        try:
            flight = parse_flight(values, is_deleted)
        except ValueError as e:
            logger.warning(f"Error parsing flight line {line_number} in {path}: {e}")
            continue

        if registry.get_flight_by_id(flight.id) is not None:
            logger.warning(f"Duplicate flight ID {flight.id} on line {line_number} in {path}, skipping")
            continue

        registry.add_flight(flight)
        loaded += 1
    return loaded


def load(registry: FlightBookingSystem, data_dir: Path) -> None:
    """
    Load live and deleted flights into the registry.

    Args:
        registry: Registry to populate
        data_dir: Directory holding the flight files
    """
    data_dir = Path(data_dir)
    active = _load_file(registry, data_dir / FLIGHTS_FILE, is_deleted=False)
    deleted = _load_file(registry, data_dir / DELETED_FLIGHTS_FILE, is_deleted=True)
    logger.info(f"Loaded {active} flights and {deleted} deleted flights")


def store(registry: FlightBookingSystem, data_dir: Path) -> None:
    """
    Rewrite both flight files from the registry, split by the deleted flag.

    Raises:
        OSError: If a file cannot be written
    """
    data_dir = Path(data_dir)
    active = write_records(
        data_dir / FLIGHTS_FILE,
        (format_flight(f) for f in registry.flights if not f.is_deleted),
    )
    deleted = write_records(
        data_dir / DELETED_FLIGHTS_FILE,
        (format_flight(f) for f in registry.flights if f.is_deleted),
    )
    logger.info(f"Stored {active} flights and {deleted} deleted flights")

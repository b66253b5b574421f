"""Customer records in ``customers.txt``."""

import logging
from pathlib import Path
from typing import List

from ..config import CUSTOMER_FIELD_COUNT, CUSTOMERS_FILE
from ..models.customer import Customer
from ..registry import FlightBookingSystem
from ..utils import format_bool, format_optional, parse_bool
from .records import parse_id, read_records, write_records

logger = logging.getLogger(__name__)


def parse_customer(values: List[str]) -> Customer:
    """
    Build a Customer from the 6 fields of a record.

    Empty phone, email and special-request fields load as None.

    Raises:
        ValueError: If the ID or the deleted flag does not parse
    """
    return Customer(
        id=parse_id(values[0]),
        name=values[1],
        phone=values[2] or None,
        email=values[3] or None,
        special_requests=values[4] or None,
        is_deleted=parse_bool(values[5]),
    )


def format_customer(customer: Customer) -> List[str]:
    return [
        str(customer.id),
        customer.name,
        format_optional(customer.phone),
        format_optional(customer.email),
        format_optional(customer.special_requests),
        format_bool(customer.is_deleted),
    ]


def load(registry: FlightBookingSystem, data_dir: Path) -> None:
    """
    Load customers into the registry.

    Args:
        registry: Registry to populate
        data_dir: Directory holding the customer file
    """
    path = Path(data_dir) / CUSTOMERS_FILE
    loaded = 0
    for line_number, values in read_records(path, CUSTOMER_FIELD_COUNT, "customer"):
        try:
            customer = parse_customer(values)
        except ValueError as e:
            logger.warning(f"Error parsing customer line {line_number} in {path}: {e}")
            continue

        if registry.get_customer_by_id(customer.id) is not None:
            logger.warning(f"Duplicate customer ID {customer.id} on line {line_number} in {path}, skipping")
            continue

        registry.add_customer(customer)
        loaded += 1

    logger.info(f"Loaded {loaded} customers")


def store(registry: FlightBookingSystem, data_dir: Path) -> None:
    """
    Rewrite the customer file from the registry.

    Raises:
        OSError: If the file cannot be written
    """
    path = Path(data_dir) / CUSTOMERS_FILE
    count = write_records(path, (format_customer(c) for c in registry.customers))
    logger.info(f"Stored {count} customers")

"""Line-oriented reading and writing of ``::``-delimited record files."""

import logging
from pathlib import Path
from typing import Iterable, Iterator, List, Tuple

from ..config import DELIMITER

logger = logging.getLogger(__name__)


def read_records(path: Path, field_count: int, record_type: str) -> Iterator[Tuple[int, List[str]]]:
    """
    Yield the fields of every well-formed line in a record file.

    Lines that are not valid UTF-8 or have the wrong number of fields are
    logged and skipped. A missing file yields nothing.

    Args:
        path: File to read
        field_count: Exact number of fields a record must have
        record_type: Label used in log messages

    Yields:
        (line_number, fields) tuples
    """
    try:
        with open(path, "rb") as f:
            for line_number, raw in enumerate(f, start=1):
                try:
                    line = raw.decode("utf-8").rstrip("\r\n")
                except UnicodeDecodeError as e:
                    logger.warning(
                        f"Skipping undecodable {record_type} line {line_number} in {path}: {e}"
                    )
                    continue
                if not line.strip():
                    continue
                values = line.split(DELIMITER)
                if len(values) != field_count:
                    logger.warning(
                        f"Skipping malformed {record_type} line {line_number} in {path}: "
                        f"expected {field_count} fields, got {len(values)}"
                    )
                    continue
                yield line_number, values
    except FileNotFoundError:
        logger.info(f"{record_type.capitalize()} file not found at {path}, starting empty")


def write_records(path: Path, rows: Iterable[List[str]]) -> int:
    """
    Replace a record file with the given rows.

    Args:
        path: File to (over)write
        rows: Field lists, one per line

    Returns:
        Number of lines written

    Raises:
        OSError: If the file cannot be written
    """
    path.parent.mkdir(parents=True, exist_ok=True)
    count = 0
    with open(path, "w", encoding="utf-8") as f:
        for row in rows:
            f.write(DELIMITER.join(row))
            f.write("\n")
            count += 1
    return count


def parse_id(value: str) -> int:
    """Parse a record ID, which must be a positive integer."""
    record_id = int(value)
    if record_id <= 0:
        raise ValueError(f"ID must be positive, got {record_id}")
    return record_id


def parse_non_negative_int(value: str) -> int:
    number = int(value)
    if number < 0:
        raise ValueError(f"Expected a non-negative integer, got {number}")
    return number


def parse_non_negative_float(value: str) -> float:
    number = float(value)
    if not number >= 0:
        raise ValueError(f"Expected a non-negative number, got {value!r}")
    return number

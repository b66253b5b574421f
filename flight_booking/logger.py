"""Logging setup for the booking system."""

import logging
import logging.handlers
from pathlib import Path
from typing import List

# Handlers added to the root logger by the last configure_logging call
_installed_handlers: List[logging.Handler] = []


def configure_logging(level: str = "INFO", log_file: str = "bookingsystem.log") -> None:
    """
    Send booking-system logs to the console and a rotating log file.

    Calling it again replaces the handlers from the previous call, so a
    restarted service does not write every record twice.

    Args:
        level: Log level name (DEBUG, INFO, WARNING, ERROR); unknown names fall back to INFO
        log_file: Path to log file, parent directories are created
    """
    log_level = getattr(logging, level.upper(), logging.INFO)
    formatter = logging.Formatter(
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )

    Path(log_file).parent.mkdir(parents=True, exist_ok=True)
    handlers = [
        logging.StreamHandler(),
        logging.handlers.RotatingFileHandler(
            log_file, maxBytes=10 * 1024 * 1024, backupCount=5, encoding="utf-8"
        ),
    ]

    root_logger = logging.getLogger()
    for old in _installed_handlers:
        root_logger.removeHandler(old)
        old.close()
    _installed_handlers.clear()

    root_logger.setLevel(log_level)
    for handler in handlers:
        handler.setLevel(log_level)
        handler.setFormatter(formatter)
        root_logger.addHandler(handler)
        _installed_handlers.append(handler)

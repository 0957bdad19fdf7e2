"""Structured JSON logging setup."""

from __future__ import annotations

import logging

from pythonjsonlogger.json import JsonFormatter

logger = logging.getLogger(__name__)


def configure_logging(log_level: str = "WARNING") -> None:
    """Send every log record to stderr as one JSON object per line.

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    """
    level = getattr(logging, log_level.upper(), logging.WARNING)

    formatter = JsonFormatter(
        "%(asctime)s %(name)s %(levelname)s %(message)s",
        timestamp=True,
    )

    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    # Remove existing handlers
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    logger.debug(f"Structured JSON logging configured at {log_level.upper()} level")

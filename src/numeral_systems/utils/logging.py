"""Logging configuration for numeral_systems."""
from __future__ import annotations

import logging
import sys

ROOT_LOGGER_NAME = "numeral_systems"

# Library default: no output unless the application configures logging
logging.getLogger(ROOT_LOGGER_NAME).addHandler(logging.NullHandler())


def setup_logging(debug: bool = False) -> None:
    """Configure logging for applications that use the library directly."""
    log_level = logging.DEBUG if debug else logging.INFO

    logging.basicConfig(
        level=log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[
            logging.StreamHandler(sys.stdout)
        ]
    )

    logging.getLogger(ROOT_LOGGER_NAME).setLevel(log_level)


def get_logger(name: str) -> logging.Logger:
    """Get a logger instance for a specific module."""
    return logging.getLogger(f"{ROOT_LOGGER_NAME}.{name}")

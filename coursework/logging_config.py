"""Logging configuration helpers for the coursework simulator."""

import logging
from logging import Logger


def configure_logging(level: str = "WARNING") -> Logger:
    """Configure basic logging for the application and return the package logger."""
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.WARNING),
        format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
    )
    return logging.getLogger("coursework")

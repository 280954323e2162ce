"""Logging module.

This module provides logging configuration with optional PII redaction.
"""

from .formatters import PIIRedactingFormatter
from .logger import configure_logging, get_logger

__all__ = [
    "configure_logging",
    "get_logger",
    "PIIRedactingFormatter",
]

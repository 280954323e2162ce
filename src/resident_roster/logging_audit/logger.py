"""Logging configuration and logger factory for the resident roster.

Console output follows the configured level while the rotating log file always
records DEBUG and above. The log file location comes from the loaded
configuration, which already folds in RESIDENT_ROSTER_LOG_FILE.
"""

import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path

from .formatters import PIIRedactingFormatter

DEFAULT_LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
MAX_LOG_FILE_SIZE = 10 * 1024 * 1024  # 10MB
BACKUP_COUNT = 5

_logging_configured = False


def configure_logging(level: str, log_file: Path, redact_pii: bool = False) -> None:
    """Install console and rotating file handlers on the root logger.

    Safe to call repeatedly: handlers from an earlier call are replaced.

    Args:
        level: Console log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_file: Log file path; parent directories are created
        redact_pii: Mask resident names, dates of birth and Medicare/Medicaid
            numbers in every handler

    Raises:
        ValueError: If the level is not a logging level name
        RuntimeError: If the log directory cannot be created

    Example:
        >>> configure_logging("DEBUG", Path("logs/roster.log"), redact_pii=True)
    """
    global _logging_configured

    numeric_level = getattr(logging, level.upper(), None)
    if not isinstance(numeric_level, int):
        raise ValueError(
            f"Invalid log level: {level}. "
            f"Must be one of: DEBUG, INFO, WARNING, ERROR, CRITICAL"
        )

    try:
        log_file.parent.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise RuntimeError(
            f"Cannot create log directory {log_file.parent}: {e}"
        ) from e

    root_logger = logging.getLogger()
    if _logging_configured:
        root_logger.handlers.clear()
    root_logger.setLevel(logging.DEBUG)

    formatter = PIIRedactingFormatter(fmt=DEFAULT_LOG_FORMAT, redact_pii=redact_pii)

    console_handler = logging.StreamHandler()
    console_handler.setLevel(numeric_level)
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    try:
        file_handler = RotatingFileHandler(
            filename=str(log_file),
            maxBytes=MAX_LOG_FILE_SIZE,
            backupCount=BACKUP_COUNT,
            encoding="utf-8",
        )
    except OSError as e:
        root_logger.warning(f"Log file {log_file} unavailable ({e}); console only")
    else:
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(formatter)
        root_logger.addHandler(file_handler)

    _logging_configured = True


def get_logger(module_name: str) -> logging.Logger:
    """Return the logger for a module, typically ``get_logger(__name__)``."""
    return logging.getLogger(module_name)

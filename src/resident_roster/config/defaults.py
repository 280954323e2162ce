"""Default configuration values.

This module defines the default configuration values used when no configuration
file is provided or when configuration values are not specified.
"""

from typing import Any

# Default configuration dictionary
# This is used as a fallback when no configuration file is present
DEFAULT_CONFIG: dict[str, Any] = {
    "roster": {
        # Residents sharing a room keep their input order
        "default_secondary_sort": "none",
        # Show active and discharged residents
        "default_status_filter": "all",
    },
    "logging": {
        # Default log level: INFO (moderate verbosity)
        "level": "INFO",
        # Default log file path
        "log_file": "logs/resident-roster.log",
        # Do not redact PII by default (user must opt-in for privacy)
        "redact_pii": False,
    },
}

# Default configuration file path
DEFAULT_CONFIG_PATH = "config/config.json"

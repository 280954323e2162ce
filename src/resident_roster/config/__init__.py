"""Config module.

This module provides configuration management functionality.
"""

from resident_roster.config.manager import (
    get_logging_config,
    get_roster_config,
    load_config,
)
from resident_roster.config.schema import (
    Config,
    LoggingConfig,
    RosterConfig,
)

__all__ = [
    # Main configuration loading
    "load_config",
    # Helper functions
    "get_roster_config",
    "get_logging_config",
    # Configuration models
    "Config",
    "RosterConfig",
    "LoggingConfig",
]

"""Configuration schema models using pydantic.

This module defines the configuration structure and validation rules using pydantic.
All configuration values are validated according to the schema defined here.
"""

from pathlib import Path

from pydantic import BaseModel, Field, field_validator

VALID_LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
VALID_SECONDARY_SORTS = ["none", "name", "status"]
VALID_STATUS_FILTERS = ["all", "active", "discharged"]


class RosterConfig(BaseModel):
    """Configuration for resident listing defaults.
    
    Attributes:
        default_secondary_sort: Tie-breaker for residents in the same room
        default_status_filter: Which residents to list when no filter is given
    """
    
    default_secondary_sort: str = Field(
        default="none",
        description="Secondary sort: none, name, or status"
    )
    default_status_filter: str = Field(
        default="all",
        description="Status filter: all, active, or discharged"
    )
    
    @field_validator("default_secondary_sort")
    @classmethod
    def validate_secondary_sort(cls, v: str) -> str:
        """Validate secondary sort option.
        
        Args:
            v: Secondary sort string
            
        Returns:
            Validated option (lowercase)
            
        Raises:
            ValueError: If option is not one of: none, name, status
        """
        v_lower = v.lower()
        if v_lower not in VALID_SECONDARY_SORTS:
            raise ValueError(
                f"Invalid default_secondary_sort: {v}. "
                f"Must be one of: {', '.join(VALID_SECONDARY_SORTS)}"
            )
        return v_lower
    
    @field_validator("default_status_filter")
    @classmethod
    def validate_status_filter(cls, v: str) -> str:
        """Validate status filter option.
        
        Raises:
            ValueError: If option is not one of: all, active, discharged
        """
        v_lower = v.lower()
        if v_lower not in VALID_STATUS_FILTERS:
            raise ValueError(
                f"Invalid default_status_filter: {v}. "
                f"Must be one of: {', '.join(VALID_STATUS_FILTERS)}"
            )
        return v_lower


class LoggingConfig(BaseModel):
    """Configuration for logging.
    
    Attributes:
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_file: Path to log file
        redact_pii: Whether to redact PII from logs
    """
    
    level: str = Field(
        default="INFO",
        description="Log level: DEBUG, INFO, WARNING, ERROR, CRITICAL"
    )
    log_file: Path = Field(
        default=Path("logs/resident-roster.log"),
        description="Log file path"
    )
    redact_pii: bool = Field(
        default=False,
        description="Redact PII from logs"
    )
    
    @field_validator("level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level.
        
        Args:
            v: Log level string
            
        Returns:
            Validated log level (uppercase)
            
        Raises:
            ValueError: If log level is not valid
        """
        v_upper = v.upper()
        if v_upper not in VALID_LOG_LEVELS:
            raise ValueError(
                f"Invalid log level: {v}. Must be one of: {', '.join(VALID_LOG_LEVELS)}"
            )
        return v_upper


class Config(BaseModel):
    """Root configuration model.
    
    Attributes:
        roster: Resident listing defaults
        logging: Logging configuration
        
    Example:
        >>> config = Config(roster=RosterConfig(default_secondary_sort="name"))
        >>> config.roster.default_secondary_sort
        'name'
    """
    
    roster: RosterConfig = RosterConfig()
    logging: LoggingConfig = LoggingConfig()

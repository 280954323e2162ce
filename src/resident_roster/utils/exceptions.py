"""Custom exception classes for the resident roster.

All exceptions inherit from ResidentRosterError to allow catching all custom exceptions.
The pure date and sorting helpers never raise these; invalid input there is
reported through sentinel return values instead.
"""


class ResidentRosterError(Exception):
    """Base exception for all resident roster custom exceptions."""

    pass


class ValidationError(ResidentRosterError):
    """Raised when resident data validation fails.
    
    Examples:
        - Missing required CSV columns
        - Unknown resident status
        - Duplicate resident identifiers
    """

    pass


class ConfigurationError(ResidentRosterError):
    """Raised when configuration loading or validation fails.
    
    Examples:
        - Invalid configuration file format
        - Unknown default sort option
        - Invalid log level
    """

    pass

"""CSV parser module.

This module loads and validates resident roster CSV files.
"""

from resident_roster.csv_parser.parser import load_residents, parse_csv
from resident_roster.csv_parser.validator import (
    IssueSeverity,
    ValidationIssue,
    ValidationResult,
    validate_residents,
)

__all__ = [
    "IssueSeverity",
    "ValidationIssue",
    "ValidationResult",
    "load_residents",
    "parse_csv",
    "validate_residents",
]

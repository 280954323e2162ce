"""Models module.

This module provides data models and dataclasses for the application.
"""

from resident_roster.models.resident import (
    CodeStatus,
    Resident,
    ResidentStats,
    ResidentStatus,
)

__all__ = [
    "CodeStatus",
    "Resident",
    "ResidentStats",
    "ResidentStatus",
]

"""Roster module.

This module provides ordering, filtering and statistics over resident records.
"""

from resident_roster.roster.filtering import compute_resident_stats, filter_residents
from resident_roster.roster.sorting import (
    SecondarySort,
    compare_by_name,
    compare_by_status,
    compare_room_numbers,
    sort_residents,
)

__all__ = [
    "SecondarySort",
    "compare_by_name",
    "compare_by_status",
    "compare_room_numbers",
    "compute_resident_stats",
    "filter_residents",
    "sort_residents",
]

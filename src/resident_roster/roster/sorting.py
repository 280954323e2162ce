"""Resident ordering.

Residents are always ordered by room number first, using a numeric-aware
comparison so that "9" sorts before "10". A secondary comparator only breaks
ties between residents sharing a room.
"""

import re
from enum import Enum
from functools import cmp_to_key
from typing import Callable, Iterable, Optional, Union

from resident_roster.models.resident import Resident, ResidentStatus

_ROOM_PATTERN = re.compile(r"^([0-9]+)(.*)$", re.DOTALL)

# Active residents come before discharged ones
STATUS_ORDER = {
    ResidentStatus.ACTIVE: 0,
    ResidentStatus.DISCHARGED: 1,
}


class SecondarySort(Enum):
    """Tie-breaker applied to residents in the same room."""

    NONE = "none"
    NAME = "name"
    STATUS = "status"


def _compare_text(a: str, b: str) -> int:
    """Ordinal string comparison returning -1, 0 or 1."""
    return (a > b) - (a < b)


def compare_room_numbers(a: str, b: str) -> int:
    """Numeric-aware room number comparison.

    Handles room numbers like "101", "102A" and "12". The leading digit run is
    compared as an integer and the remainder as text. If either room has no
    leading digits, the full strings are compared as text.

    Args:
        a: First room number
        b: Second room number

    Returns:
        Negative, zero or positive, like a classic cmp function
    """
    a_match = _ROOM_PATTERN.match(a)
    b_match = _ROOM_PATTERN.match(b)

    if not a_match or not b_match:
        return _compare_text(a, b)

    a_num = int(a_match.group(1))
    b_num = int(b_match.group(1))

    if a_num != b_num:
        return a_num - b_num

    return _compare_text(a_match.group(2), b_match.group(2))


def compare_by_name(a: Resident, b: Resident) -> int:
    """Compare residents by last name, then first name."""
    last_name_cmp = _compare_text(a.last_name, b.last_name)
    if last_name_cmp != 0:
        return last_name_cmp
    return _compare_text(a.first_name, b.first_name)


def compare_by_status(a: Resident, b: Resident) -> int:
    """Compare residents by status, with name as tie-breaker."""
    a_order = STATUS_ORDER[a.status]
    b_order = STATUS_ORDER[b.status]

    if a_order != b_order:
        return a_order - b_order

    return compare_by_name(a, b)


SECONDARY_COMPARATORS: dict[SecondarySort, Optional[Callable[[Resident, Resident], int]]] = {
    SecondarySort.NONE: None,
    SecondarySort.NAME: compare_by_name,
    SecondarySort.STATUS: compare_by_status,
}


def sort_residents(
    residents: Iterable[Resident],
    secondary_sort: Union[SecondarySort, str] = SecondarySort.NONE,
) -> list[Resident]:
    """Sort residents by room number with an optional secondary sort.

    Returns a new list; the input is not modified. The sort is stable, so with
    SecondarySort.NONE residents sharing a room keep their input order.

    Args:
        residents: Residents to sort
        secondary_sort: Tie-breaker for equal room numbers, as a SecondarySort
            or its string value ("none", "name", "status")

    Returns:
        New list of residents in display order

    Raises:
        ValueError: If secondary_sort is not a known option

    Example:
        >>> ordered = sort_residents(residents, SecondarySort.STATUS)
        >>> [r.room_number for r in ordered]
        ['2', '9', '10', '10A']
    """
    secondary = SecondarySort(secondary_sort)
    tie_breaker = SECONDARY_COMPARATORS[secondary]

    def compare(a: Resident, b: Resident) -> int:
        room_cmp = compare_room_numbers(a.room_number, b.room_number)
        if room_cmp != 0 or tie_breaker is None:
            return room_cmp
        return tie_breaker(a, b)

    return sorted(residents, key=cmp_to_key(compare))

"""Roster listing examples.

This module demonstrates loading a resident roster CSV, ordering residents by
room number with each secondary sort, computing ages against a fixed reference
date, and turning unexpected failures into readable diagnostics.
"""

import logging
from pathlib import Path

from resident_roster.csv_parser.parser import load_residents
from resident_roster.roster import (
    SecondarySort,
    compute_resident_stats,
    filter_residents,
    sort_residents,
)
from resident_roster.utils.date_only import DateComponents, format_age
from resident_roster.utils.error_diagnostics import format_diagnostics, normalize_error
from resident_roster.utils.exceptions import ValidationError

logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)

logger = logging.getLogger(__name__)

SAMPLE_CSV = Path(__file__).parent / "residents_sample.csv"
REFERENCE_DATE = DateComponents(year=2024, month=6, day=15)


def example_1_secondary_sorts():
    """Example 1: Order residents by room with each secondary sort.

    Rooms order numerically ("9" before "10", "10A" after "10"); the secondary
    sort only decides the order of residents sharing a room.
    """
    print("=" * 80)
    print("EXAMPLE 1: Room Ordering With Secondary Sorts")
    print("=" * 80)
    print()

    residents = load_residents(SAMPLE_CSV)

    for option in SecondarySort:
        print(f"Secondary sort: {option.value}")
        for resident in sort_residents(residents, option):
            age = format_age(resident.age(REFERENCE_DATE))
            print(
                f"  {resident.room_number:<6} {resident.full_name:<20} "
                f"{age:>4}  {resident.status.value}"
            )
        print()


def example_2_filter_and_stats():
    """Example 2: Search and status filtering with roster statistics."""
    print("=" * 80)
    print("EXAMPLE 2: Filtering and Statistics")
    print("=" * 80)
    print()

    residents = load_residents(SAMPLE_CSV)
    stats = compute_resident_stats(residents)
    print(f"Total: {stats.total}  Active: {stats.active}  Discharged: {stats.discharged}")

    active_in_room_10 = filter_residents(residents, search="10", status="active")
    print("Active residents matching '10':")
    for resident in sort_residents(active_in_room_10, SecondarySort.NAME):
        print(f"  {resident.room_number:<6} {resident.full_name}")
    print()


def example_3_error_diagnostics():
    """Example 3: Normalize failures into displayable diagnostics."""
    print("=" * 80)
    print("EXAMPLE 3: Error Diagnostics")
    print("=" * 80)
    print()

    try:
        load_residents(Path("missing_roster.csv"))
    except (FileNotFoundError, ValidationError) as e:
        logger.error(f"Roster could not be loaded: {e}")
        print(format_diagnostics(normalize_error(e)))
    print()

    rejected = {"message": "Bed assignment rejected", "reject_code": "E042", "reject_message": "Room not found"}
    print(format_diagnostics(normalize_error(rejected)))
    print()


if __name__ == "__main__":
    example_1_secondary_sorts()
    example_2_filter_and_stats()
    example_3_error_diagnostics()

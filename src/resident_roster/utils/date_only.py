"""Date-only helpers for timezone-safe age calculation.

Dates of birth are stored as ``YYYY-MM-DD`` strings. They are split into
calendar components directly, without building a ``datetime``, so no timezone
or DST conversion can shift a birthday by a day.
"""

import re
from dataclasses import dataclass
from datetime import date
from typing import Optional

# Fixed table, index 0 = January. February allows 29 in every year.
DAYS_IN_MONTH = [31, 29, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31]

# Upper sanity bound for a computed age
MAX_PLAUSIBLE_AGE = 150

# Shown in place of an age that cannot be computed
AGE_PLACEHOLDER = "—"

_DIGITS_PATTERN = re.compile(r"[0-9]+")


@dataclass(frozen=True)
class DateComponents:
    """Calendar date without time or timezone.

    Attributes:
        year: Four-digit year
        month: Month of year (1-12)
        day: Day of month (1-31)
    """

    year: int
    month: int
    day: int


def parse_date_string(value: str) -> Optional[DateComponents]:
    """Parse a ``YYYY-MM-DD`` string into date components.

    Args:
        value: Date string to parse

    Returns:
        DateComponents, or None if the format is invalid or the day does not
        fit the month
    """
    if not value or not isinstance(value, str):
        return None

    parts = value.split("-")
    if len(parts) != 3:
        return None

    if not all(_DIGITS_PATTERN.fullmatch(part) for part in parts):
        return None

    year, month, day = (int(part, 10) for part in parts)

    if month < 1 or month > 12:
        return None

    if day < 1 or day > DAYS_IN_MONTH[month - 1]:
        return None

    return DateComponents(year=year, month=month, day=day)


def get_today_components() -> DateComponents:
    """Return today's date components in the local timezone."""
    today = date.today()
    return DateComponents(year=today.year, month=today.month, day=today.day)


def calculate_age_years(
    dob: str, today: Optional[DateComponents] = None
) -> Optional[int]:
    """Calculate age in whole years from a date of birth string.

    The birthday itself counts as passed, so a resident born on 2000-06-15
    is 24 on 2024-06-15.

    Args:
        dob: Date of birth in YYYY-MM-DD format
        today: Reference date. Defaults to the local calendar date.

    Returns:
        Age in years, or None if the DOB is unparseable or the age falls
        outside [0, MAX_PLAUSIBLE_AGE]

    Example:
        >>> calculate_age_years("2000-06-15", DateComponents(2024, 6, 14))
        23
        >>> calculate_age_years("1950/01/01") is None
        True
    """
    dob_components = parse_date_string(dob)
    if dob_components is None:
        return None

    if today is None:
        today = get_today_components()

    age = today.year - dob_components.year

    birthday_passed = today.month > dob_components.month or (
        today.month == dob_components.month and today.day >= dob_components.day
    )
    if not birthday_passed:
        age -= 1

    if age < 0 or age > MAX_PLAUSIBLE_AGE:
        return None

    return age


def format_age(age: Optional[int]) -> str:
    """Format an age for display, using AGE_PLACEHOLDER when unknown."""
    if age is None:
        return AGE_PLACEHOLDER
    return str(age)

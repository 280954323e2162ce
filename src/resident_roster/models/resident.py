"""Resident data model.

This module defines the Resident dataclass and its enumerations, used throughout
the application for representing residents of the care facility.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from resident_roster.utils.date_only import DateComponents, calculate_age_years


class ResidentStatus(Enum):
    """Residency status."""

    ACTIVE = "active"
    DISCHARGED = "discharged"


class CodeStatus(Enum):
    """Resuscitation code status."""

    DNR = "dnr"
    FULL_CODE = "fullCode"


@dataclass
class Resident:
    """Resident record as supplied by the data layer.

    Attributes:
        resident_id: Unique resident identifier (auto-generated if empty during import)
        first_name: Resident's first name
        last_name: Resident's last name
        room_number: Room identifier such as "12" or "102A"
        dob: Date of birth as a raw YYYY-MM-DD string (may be malformed)
        status: Active or discharged
        bed: Bed within the room (optional)
        room_type: Room type such as "private" (optional)
        code_status: DNR or full code (optional)
        admission_date: Admission date as YYYY-MM-DD (optional)
        medicare_number: Medicare number (optional)
        medicaid_number: Medicaid number (optional)
    """

    resident_id: str
    first_name: str
    last_name: str
    room_number: str
    dob: str
    status: ResidentStatus
    bed: str | None = None
    room_type: str | None = None
    code_status: CodeStatus | None = None
    admission_date: str | None = None
    medicare_number: str | None = None
    medicaid_number: str | None = None

    @property
    def full_name(self) -> str:
        """Name in "Last, First" form."""
        return f"{self.last_name}, {self.first_name}"

    def age(self, today: Optional[DateComponents] = None) -> Optional[int]:
        """Age in whole years, or None when the DOB is unusable."""
        return calculate_age_years(self.dob, today)


@dataclass
class ResidentStats:
    """Resident counts by status.

    Attributes:
        total: Number of residents
        active: Number of active residents
        discharged: Number of discharged residents
    """

    total: int
    active: int
    discharged: int

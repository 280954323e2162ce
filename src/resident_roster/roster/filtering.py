"""Resident search, status filtering and summary statistics."""

from typing import Iterable, Optional, Union

from resident_roster.models.resident import Resident, ResidentStats, ResidentStatus

# Status filter value meaning "no filter"
ALL_STATUSES = "all"


def _resolve_status(
    status: Union[ResidentStatus, str, None]
) -> Optional[ResidentStatus]:
    """Resolve a status filter argument to a ResidentStatus or None."""
    if status is None or status == ALL_STATUSES:
        return None
    try:
        return ResidentStatus(status)
    except ValueError:
        valid = [ALL_STATUSES] + [s.value for s in ResidentStatus]
        raise ValueError(
            f"Invalid status filter: {status}. Must be one of: {', '.join(valid)}"
        ) from None


def filter_residents(
    residents: Iterable[Resident],
    search: Optional[str] = None,
    status: Union[ResidentStatus, str, None] = None,
) -> list[Resident]:
    """Filter residents by free-text search and status.

    Names match case-insensitively; room numbers match as typed. Input order
    is preserved.

    Args:
        residents: Residents to filter
        search: Text to look for in first name, last name or room number
        status: ResidentStatus, its value, "all" or None

    Returns:
        New list of matching residents

    Raises:
        ValueError: If status is not a known filter value
    """
    wanted_status = _resolve_status(status)
    query = search or ""
    query_lower = query.lower()

    matches = []
    for resident in residents:
        matches_search = (
            query_lower in resident.first_name.lower()
            or query_lower in resident.last_name.lower()
            or query in resident.room_number
        )
        matches_status = wanted_status is None or resident.status is wanted_status
        if matches_search and matches_status:
            matches.append(resident)
    return matches


def compute_resident_stats(residents: Iterable[Resident]) -> ResidentStats:
    """Count residents in total and per status."""
    total = active = discharged = 0
    for resident in residents:
        total += 1
        if resident.status is ResidentStatus.ACTIVE:
            active += 1
        elif resident.status is ResidentStatus.DISCHARGED:
            discharged += 1
    return ResidentStats(total=total, active=active, discharged=discharged)

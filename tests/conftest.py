"""
Shared pytest configuration and fixtures.

This module provides fixtures and configuration used across all test suites
(unit and integration tests).
"""

import logging
from pathlib import Path
from typing import Generator

import pytest

from resident_roster.models.resident import Resident, ResidentStatus
from resident_roster.utils.date_only import DateComponents


@pytest.fixture(autouse=True)
def isolated_environment(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> Generator[None, None, None]:
    """
    Keep configuration, environment overrides and log files out of the repo.
    
    Runs each test from a temporary directory, points the log file there,
    and restores the root logger handlers afterwards.
    """
    for name in (
        "RESIDENT_ROSTER_DEFAULT_SORT",
        "RESIDENT_ROSTER_STATUS_FILTER",
        "RESIDENT_ROSTER_LOG_LEVEL",
        "RESIDENT_ROSTER_REDACT_PII",
    ):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv("RESIDENT_ROSTER_LOG_FILE", str(tmp_path / "logs" / "test.log"))
    monkeypatch.chdir(tmp_path)

    root_logger = logging.getLogger()
    original_handlers = list(root_logger.handlers)
    original_level = root_logger.level
    yield
    for handler in root_logger.handlers:
        if handler not in original_handlers:
            handler.close()
    root_logger.handlers[:] = original_handlers
    root_logger.setLevel(original_level)


@pytest.fixture
def project_root() -> Path:
    """
    Return the project root directory.
    
    Returns:
        Path: Absolute path to the project root directory.
    """
    return Path(__file__).parent.parent


@pytest.fixture
def src_dir(project_root: Path) -> Path:
    """
    Return the src directory path.
    
    Args:
        project_root: Project root directory fixture.
    
    Returns:
        Path: Absolute path to the src directory.
    """
    return project_root / "src"


@pytest.fixture
def fixtures_dir() -> Path:
    """
    Return the test fixtures directory path.
    
    Returns:
        Path: Absolute path to the test fixtures directory.
    """
    return Path(__file__).parent / "fixtures"


@pytest.fixture
def sample_roster_csv(fixtures_dir: Path) -> Path:
    """
    Return the sample roster CSV shipped with the tests.
    
    Rooms 10 and 10A, 9, 2 and 100 exercise numeric-aware ordering; room 10
    holds a discharged "Zane" listed before an active "Adams".
    """
    return fixtures_dir / "residents_sample.csv"


@pytest.fixture
def reference_today() -> DateComponents:
    """Fixed reference date for age assertions."""
    return DateComponents(year=2024, month=6, day=15)


def make_resident(
    room_number: str,
    last_name: str = "Doe",
    first_name: str = "Jane",
    status: ResidentStatus = ResidentStatus.ACTIVE,
    resident_id: str | None = None,
    dob: str = "1940-01-01",
) -> Resident:
    """Build a Resident with sensible defaults for tests."""
    return Resident(
        resident_id=resident_id or f"{room_number}-{last_name}-{first_name}",
        first_name=first_name,
        last_name=last_name,
        room_number=room_number,
        dob=dob,
        status=status,
    )


@pytest.fixture
def resident_factory():
    """Return the make_resident helper as a fixture."""
    return make_resident

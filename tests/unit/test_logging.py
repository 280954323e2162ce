"""Unit tests for logging_audit module."""

import logging

import pytest

from resident_roster.logging_audit import (
    PIIRedactingFormatter,
    configure_logging,
    get_logger,
)


def _console_handlers() -> list[logging.Handler]:
    return [
        h
        for h in logging.getLogger().handlers
        if type(h) is logging.StreamHandler
    ]


class TestConfigureLogging:
    """Test logging configuration."""

    def test_configure_logging_creates_file(self, tmp_path):
        """Test logging configuration creates log file."""
        # Arrange
        log_file = tmp_path / "test.log"

        # Act
        configure_logging(level="INFO", log_file=log_file, redact_pii=False)
        get_logger(__name__).info("Test message")

        # Assert
        assert log_file.exists()
        assert "Test message" in log_file.read_text()

    def test_configure_logging_sets_console_level(self, tmp_path):
        configure_logging(level="WARNING", log_file=tmp_path / "test.log")

        assert _console_handlers()[-1].level == logging.WARNING

    def test_configure_logging_file_level_debug(self, tmp_path):
        """Test file handler always uses DEBUG level."""
        log_file = tmp_path / "test.log"

        configure_logging(level="ERROR", log_file=log_file)
        get_logger(__name__).debug("Debug message")

        assert "Debug message" in log_file.read_text()

    def test_configure_logging_creates_directory(self, tmp_path):
        log_file = tmp_path / "nested" / "dir" / "test.log"

        configure_logging(level="INFO", log_file=log_file)

        assert log_file.parent.is_dir()

    def test_configure_logging_is_idempotent(self, tmp_path):
        configure_logging(level="INFO", log_file=tmp_path / "test.log")
        configure_logging(level="INFO", log_file=tmp_path / "test.log")

        assert len(_console_handlers()) == 1

    def test_configure_logging_invalid_level(self, tmp_path):
        with pytest.raises(ValueError, match="Invalid log level"):
            configure_logging(level="LOUD", log_file=tmp_path / "test.log")

    def test_configure_logging_requires_log_file(self):
        with pytest.raises(TypeError):
            configure_logging(level="INFO")


class TestPIIRedactingFormatter:
    """Test PII redaction."""

    def _format(self, message: str, redact_pii: bool = True) -> str:
        formatter = PIIRedactingFormatter(fmt="%(message)s", redact_pii=redact_pii)
        record = logging.LogRecord("test", logging.INFO, __file__, 1, message, None, None)
        return formatter.format(record)

    def test_redacts_dob(self):
        assert self._format("Loaded dob=1941-07-04 for row 2") == (
            "Loaded dob=[DOB-REDACTED] for row 2"
        )

    def test_redacts_medicare_and_medicaid(self):
        result = self._format("medicare=1EG4-TE5-MK73 medicaid=XY123")

        assert result == "medicare=[ID-REDACTED] medicaid=[ID-REDACTED]"

    def test_redacts_name_key_value(self):
        assert self._format('name="Harold Adams"') == "name=[NAME-REDACTED]"

    def test_redacts_resident_label(self):
        result = self._format("Resident: Adams, Harold moved to room 10")

        assert result == "Resident: [NAME-REDACTED] moved to room 10"

    def test_no_redaction_when_disabled(self):
        message = "Resident: Adams, Harold dob=1941-07-04"

        assert self._format(message, redact_pii=False) == message

    def test_redacts_roster_dob_warnings(self):
        malformed = self._format(
            "Row 3 [dob]: Date of birth is not a valid YYYY-MM-DD date: '01/02/1938'"
        )
        implausible = self._format("Row 4 [dob]: Date of birth 1850-01-01 gives an age outside 0-150")

        assert malformed.endswith("date: '[DOB-REDACTED]'")
        assert "1850-01-01" not in implausible
        assert "Date of birth [DOB-REDACTED] gives an age" in implausible

    def test_redacts_duplicate_name_warning(self):
        """Test the validator's duplicate-name warning, as logged by parse_csv."""
        message = "Row 2 [first_name,last_name]: Duplicate name found: Harold Adams"

        result = self._format(message)

        assert result == "Row 2 [first_name,last_name]: Duplicate name found: [NAME-REDACTED]"

"""Comprehensive validation for resident roster CSV data.

This module provides detailed validation with actionable error messages,
collecting all issues before reporting to help users fix multiple problems at once.
"""

from dataclasses import dataclass, field
from enum import Enum

import pandas as pd

from resident_roster.logging_audit import get_logger
from resident_roster.utils.date_only import (
    AGE_PLACEHOLDER,
    MAX_PLAUSIBLE_AGE,
    DateComponents,
    calculate_age_years,
    parse_date_string,
)


logger = get_logger(__name__)

# Maximum number of issues listed per section in the text report
MAX_REPORTED_ISSUES = 20


class IssueSeverity(Enum):
    """Severity level for validation issues."""

    ERROR = "error"
    WARNING = "warning"


@dataclass
class ValidationIssue:
    """Individual validation issue with context and suggested fix.

    Attributes:
        row_number: 1-indexed row number (including header) for user readability
        column_name: Name of the column with the issue
        severity: ERROR or WARNING level
        message: Description of what's wrong
        suggestion: Actionable guidance on how to fix the issue
    """

    row_number: int
    column_name: str
    severity: IssueSeverity
    message: str
    suggestion: str

    def to_dict(self) -> dict:
        return {
            "row_number": self.row_number,
            "column_name": self.column_name,
            "severity": self.severity.value,
            "message": self.message,
            "suggestion": self.suggestion,
        }


@dataclass
class ValidationResult:
    """Comprehensive validation results with statistics and issues.

    Attributes:
        total_rows: Total number of data rows processed
        valid_rows: Number of rows with no errors (warnings OK)
        error_rows: Number of rows with at least one error
        warning_rows: Number of rows with at least one warning
        duplicate_resident_ids: List of resident IDs that appear multiple times
        unknown_age_count: Rows whose age will display as the placeholder
        all_errors: List of all error-level issues
        all_warnings: List of all warning-level issues
    """

    total_rows: int
    valid_rows: int
    error_rows: int
    warning_rows: int
    duplicate_resident_ids: list[str] = field(default_factory=list)
    unknown_age_count: int = 0
    all_errors: list[ValidationIssue] = field(default_factory=list)
    all_warnings: list[ValidationIssue] = field(default_factory=list)

    @property
    def has_errors(self) -> bool:
        """Check if any error-level issues exist."""
        return len(self.all_errors) > 0

    @property
    def has_warnings(self) -> bool:
        """Check if any warning-level issues exist."""
        return len(self.all_warnings) > 0

    def format_report(self) -> str:
        """Format validation results as human-readable report.

        Returns:
            Multi-line string with validation summary and detailed issues
        """
        lines = []
        lines.append("=" * 60)
        lines.append("RESIDENT ROSTER VALIDATION REPORT")
        lines.append("=" * 60)
        lines.append("")

        lines.append("SUMMARY:")
        lines.append(f"  Total rows: {self.total_rows}")
        lines.append(f"  Valid rows: {self.valid_rows}")
        lines.append(f"  Rows with errors: {self.error_rows}")
        lines.append(f"  Rows with warnings: {self.warning_rows}")
        lines.append("")

        if self.duplicate_resident_ids or self.unknown_age_count > 0:
            lines.append("ROSTER STATISTICS:")
            if self.duplicate_resident_ids:
                lines.append(
                    f"  Duplicate resident IDs: {len(self.duplicate_resident_ids)} "
                    f"({', '.join(self.duplicate_resident_ids[:5])}"
                    f"{'...' if len(self.duplicate_resident_ids) > 5 else ''})"
                )
            if self.unknown_age_count > 0:
                lines.append(f"  Unknown ages: {self.unknown_age_count}")
            lines.append("")

        for title, issues in (("ERRORS", self.all_errors), ("WARNINGS", self.all_warnings)):
            if not issues:
                continue
            lines.append(f"{title} ({len(issues)}):")
            for issue in issues[:MAX_REPORTED_ISSUES]:
                lines.append(
                    f"  Row {issue.row_number} [{issue.column_name}]: {issue.message}"
                )
                lines.append(f"    → {issue.suggestion}")
            if len(issues) > MAX_REPORTED_ISSUES:
                lines.append(
                    f"  ... and {len(issues) - MAX_REPORTED_ISSUES} more {title.lower()}"
                )
            lines.append("")

        lines.append("=" * 60)
        if not self.has_errors and not self.has_warnings:
            lines.append("RESULT: ✓ All validations passed")
        elif not self.has_errors:
            lines.append("RESULT: ✓ Validation passed with warnings")
        else:
            lines.append("RESULT: ✗ Validation failed - please fix errors above")
        lines.append("=" * 60)

        return "\n".join(lines)

    def to_dict(self) -> dict:
        """Export validation results as structured dictionary for JSON serialization."""
        return {
            "total_rows": self.total_rows,
            "valid_rows": self.valid_rows,
            "error_rows": self.error_rows,
            "warning_rows": self.warning_rows,
            "duplicate_resident_ids": self.duplicate_resident_ids,
            "unknown_age_count": self.unknown_age_count,
            "errors": [e.to_dict() for e in self.all_errors],
            "warnings": [w.to_dict() for w in self.all_warnings],
        }


def _cell(row: pd.Series, column: str) -> str:
    """Return a stripped cell value, or "" when the column is absent or empty."""
    value = row.get(column)
    if value is None or pd.isna(value):
        return ""
    return str(value).strip()


def validate_residents(
    df: pd.DataFrame, today: DateComponents | None = None
) -> ValidationResult:
    """Perform comprehensive validation on a resident roster DataFrame.

    Checks dates of birth, duplicate names, shared beds and duplicate resident
    IDs. Collects all errors and warnings before returning (not fail-fast).
    A bad date of birth is only a warning: the roster still loads and the age
    is shown as a placeholder.

    Args:
        df: pandas DataFrame with resident rows from the CSV parser
        today: Reference date for age checks. Defaults to the local date.

    Returns:
        ValidationResult containing all errors, warnings, and statistics
    """
    logger.info("Validation started")

    errors: list[ValidationIssue] = []
    warnings: list[ValidationIssue] = []
    unknown_age_count = 0

    logger.debug("Validating field-level data quality")
    for idx, row in df.iterrows():
        row_num = idx + 2  # +2 for 1-indexed + header row

        dob_value = _cell(row, "dob")
        if parse_date_string(dob_value) is None:
            unknown_age_count += 1
            warnings.append(
                ValidationIssue(
                    row_number=row_num,
                    column_name="dob",
                    severity=IssueSeverity.WARNING,
                    message=f"Date of birth is not a valid YYYY-MM-DD date: '{dob_value}'",
                    suggestion=f"Age will display as {AGE_PLACEHOLDER}. Use format 1940-03-15",
                )
            )
        elif calculate_age_years(dob_value, today) is None:
            unknown_age_count += 1
            warnings.append(
                ValidationIssue(
                    row_number=row_num,
                    column_name="dob",
                    severity=IssueSeverity.WARNING,
                    message=f"Date of birth {dob_value} gives an age outside 0-{MAX_PLAUSIBLE_AGE}",
                    suggestion="Verify the date is not in the future and the year is correct",
                )
            )

    logger.debug("Validating roster-level data quality")

    # Duplicate resident IDs
    duplicate_ids: list[str] = []
    if "resident_id" in df.columns:
        ids = df["resident_id"].astype(str).str.strip()
        ids = ids[ids != ""]
        duplicate_ids = ids[ids.duplicated(keep=False)].unique().tolist()
        for dup_id in duplicate_ids:
            for row_idx in ids[ids == dup_id].index:
                errors.append(
                    ValidationIssue(
                        row_number=row_idx + 2,
                        column_name="resident_id",
                        severity=IssueSeverity.ERROR,
                        message=f"Duplicate resident_id found: {dup_id}",
                        suggestion="Ensure all resident IDs are unique or leave empty for auto-generation",
                    )
                )

    # Duplicate names (warning only)
    duplicate_names_mask = df[["first_name", "last_name"]].duplicated(keep=False)
    for row_idx in df[duplicate_names_mask].index:
        first_name = df.at[row_idx, "first_name"]
        last_name = df.at[row_idx, "last_name"]
        warnings.append(
            ValidationIssue(
                row_number=row_idx + 2,
                column_name="first_name,last_name",
                severity=IssueSeverity.WARNING,
                message=f"Duplicate name found: {first_name} {last_name}",
                suggestion="Verify this is intentional (residents can share a name)",
            )
        )

    # Two residents assigned to the same bed
    if "bed" in df.columns:
        beds = df[["room_number", "bed"]].astype(str).apply(lambda col: col.str.strip())
        assigned = beds[beds["bed"] != ""]
        shared_mask = assigned.duplicated(keep=False)
        for row_idx in assigned[shared_mask].index:
            warnings.append(
                ValidationIssue(
                    row_number=row_idx + 2,
                    column_name="room_number,bed",
                    severity=IssueSeverity.WARNING,
                    message=(
                        f"Bed {assigned.at[row_idx, 'bed']} in room "
                        f"{assigned.at[row_idx, 'room_number']} is assigned more than once"
                    ),
                    suggestion="Check bed assignments; discharged residents may need their bed cleared",
                )
            )

    error_rows = len(set(e.row_number for e in errors))
    warning_rows = len(set(w.row_number for w in warnings))

    result = ValidationResult(
        total_rows=len(df),
        valid_rows=len(df) - error_rows,
        error_rows=error_rows,
        warning_rows=warning_rows,
        duplicate_resident_ids=duplicate_ids,
        unknown_age_count=unknown_age_count,
        all_errors=errors,
        all_warnings=warnings,
    )

    logger.info(f"Validation errors found: {len(errors)}")
    if warnings:
        logger.info(f"Validation warnings: {len(warnings)}")

    return result

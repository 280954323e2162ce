"""CSV parser for resident roster exports.

This module provides functionality to parse and validate resident records from
CSV files and convert them into Resident objects.
"""

import logging
from pathlib import Path
from typing import Optional

import pandas as pd

from resident_roster.csv_parser.validator import ValidationResult, validate_residents
from resident_roster.models.resident import CodeStatus, Resident, ResidentStatus
from resident_roster.utils.date_only import DateComponents
from resident_roster.utils.exceptions import ValidationError


logger = logging.getLogger(__name__)

# Required CSV columns
REQUIRED_COLUMNS = ["first_name", "last_name", "room_number", "dob", "status"]

# Optional CSV columns
OPTIONAL_COLUMNS = [
    "resident_id",
    "bed",
    "room_type",
    "code_status",
    "admission_date",
    "medicare_number",
    "medicaid_number",
]

VALID_STATUSES = [status.value for status in ResidentStatus]

# Case-insensitive lookup to the canonical code status value
CODE_STATUS_LOOKUP = {status.value.lower(): status.value for status in CodeStatus}

RESIDENT_ID_PREFIX = "R-"


def parse_csv(
    file_path: Path,
    validate: bool = True,
    today: Optional[DateComponents] = None,
) -> tuple[pd.DataFrame, Optional[ValidationResult]]:
    """Parse resident records from CSV file.

    All cells are read as text so room numbers such as "010" and malformed
    dates survive unchanged. Structural problems (missing columns, empty room
    numbers or names, unknown statuses) are errors. A malformed date of birth
    is not: it is reported as a validation warning and the age displays as a
    placeholder.

    Args:
        file_path: Path to CSV file containing resident data
        validate: If True, runs comprehensive validation after basic parsing.
                  Warnings are logged but don't fail parsing. If False, skips
                  comprehensive validation.
        today: Reference date for the age plausibility check. Defaults to the
               local calendar date.

    Returns:
        Tuple of (DataFrame, ValidationResult):
        - DataFrame with normalized resident rows. Missing resident_id values
          are filled with sequential R-0001 style IDs.
        - ValidationResult with comprehensive validation details, or None if
          validate=False

    Raises:
        ValidationError: If required columns missing, data invalid, or format errors
        FileNotFoundError: If CSV file does not exist
    """
    logger.info(f"Loading CSV from {file_path}")

    if not file_path.exists():
        raise FileNotFoundError(f"CSV file not found: {file_path}")

    try:
        df = pd.read_csv(file_path, encoding="utf-8", dtype=str, keep_default_na=False)
    except Exception as e:
        raise ValidationError(
            f"Failed to read CSV file {file_path}. Ensure file is valid CSV with UTF-8 encoding. Error: {e}"
        ) from e

    df.columns = [str(col).strip() for col in df.columns]
    for col in df.columns:
        df[col] = df[col].astype(str).str.strip()

    logger.info("Validating CSV structure and data")

    missing_columns = [col for col in REQUIRED_COLUMNS if col not in df.columns]
    if missing_columns:
        raise ValidationError(
            "CSV validation failed:\n  - "
            f"Missing required columns: {', '.join(missing_columns)}. "
            f"Required columns are: {', '.join(REQUIRED_COLUMNS)}"
        )

    all_valid_columns = set(REQUIRED_COLUMNS + OPTIONAL_COLUMNS)
    unknown_columns = [col for col in df.columns if col not in all_valid_columns]
    if unknown_columns:
        logger.warning(
            f"CSV contains unknown columns that will be ignored: {', '.join(unknown_columns)}"
        )

    errors: list[str] = []
    errors.extend(_validate_required_text(df, "room_number"))
    errors.extend(_validate_required_text(df, "first_name"))
    errors.extend(_validate_required_text(df, "last_name"))
    errors.extend(_validate_status_column(df))
    errors.extend(_validate_code_status_column(df))

    if errors:
        error_message = (
            f"Found {len(errors)} validation error(s) in CSV:\n  - "
            + "\n  - ".join(errors)
        )
        raise ValidationError(error_message)

    _generate_missing_resident_ids(df)

    logger.info(f"Successfully parsed {len(df)} resident record(s)")

    validation_result = None
    if validate:
        logger.info("Running comprehensive validation")
        validation_result = validate_residents(df, today)

        for warning in validation_result.all_warnings:
            logger.warning(
                f"Row {warning.row_number} [{warning.column_name}]: {warning.message}"
            )

        logger.info(
            f"Comprehensive validation complete: {len(validation_result.all_errors)} errors, "
            f"{len(validation_result.all_warnings)} warnings"
        )

    return df, validation_result


def load_residents(
    file_path: Path, today: Optional[DateComponents] = None
) -> list[Resident]:
    """Load and validate residents from a CSV file.

    Args:
        file_path: Path to CSV file containing resident data
        today: Reference date for the age plausibility check, so warnings
               agree with the ages a caller displays

    Returns:
        Residents in file order

    Raises:
        ValidationError: If parsing fails or validation reports errors
        FileNotFoundError: If CSV file does not exist
    """
    df, result = parse_csv(file_path, validate=True, today=today)

    if result is not None and result.has_errors:
        details = "\n  - ".join(
            f"Row {e.row_number} [{e.column_name}]: {e.message}" for e in result.all_errors
        )
        raise ValidationError(
            f"Found {len(result.all_errors)} validation error(s) in CSV:\n  - {details}"
        )

    return [_row_to_resident(row) for _, row in df.iterrows()]


def _optional(row: pd.Series, column: str) -> Optional[str]:
    value = row.get(column, "")
    return value if value else None


def _row_to_resident(row: pd.Series) -> Resident:
    """Convert a normalized DataFrame row into a Resident."""
    code_status = _optional(row, "code_status")
    return Resident(
        resident_id=row["resident_id"],
        first_name=row["first_name"],
        last_name=row["last_name"],
        room_number=row["room_number"],
        dob=row["dob"],
        status=ResidentStatus(row["status"]),
        bed=_optional(row, "bed"),
        room_type=_optional(row, "room_type"),
        code_status=CodeStatus(code_status) if code_status else None,
        admission_date=_optional(row, "admission_date"),
        medicare_number=_optional(row, "medicare_number"),
        medicaid_number=_optional(row, "medicaid_number"),
    )


def _validate_required_text(df: pd.DataFrame, column: str) -> list[str]:
    """Report rows where a required text column is empty.

    Args:
        df: DataFrame to validate
        column: Column name

    Returns:
        List of error messages (empty if no errors)
    """
    errors: list[str] = []
    for idx in df.index[df[column] == ""]:
        row_num = idx + 2  # +2 because: +1 for header, +1 for 1-indexed
        errors.append(f"Row {row_num}: Missing required field '{column}'")
    return errors


def _validate_status_column(df: pd.DataFrame) -> list[str]:
    """Validate status column, normalizing values to lowercase in place.

    Args:
        df: DataFrame to validate

    Returns:
        List of error messages (empty if no errors)
    """
    errors: list[str] = []

    for idx, row in df.iterrows():
        row_num = idx + 2
        status_value = row["status"]

        if status_value == "":
            errors.append(
                f"Row {row_num}: Missing required field 'status'. "
                f"Must be one of: {', '.join(VALID_STATUSES)}"
            )
            continue

        status_lower = status_value.lower()
        if status_lower not in VALID_STATUSES:
            errors.append(
                f"Row {row_num}: Invalid status '{status_value}'. "
                f"Must be one of: {', '.join(VALID_STATUSES)} (case-insensitive)"
            )
        else:
            df.at[idx, "status"] = status_lower

    return errors


def _validate_code_status_column(df: pd.DataFrame) -> list[str]:
    """Validate optional code_status column, normalizing to canonical values.

    Args:
        df: DataFrame to validate

    Returns:
        List of error messages (empty if no errors)
    """
    errors: list[str] = []
    if "code_status" not in df.columns:
        return errors

    for idx, row in df.iterrows():
        value = row["code_status"]
        if value == "":
            continue
        canonical = CODE_STATUS_LOOKUP.get(value.lower())
        if canonical is None:
            errors.append(
                f"Row {idx + 2}: Invalid code_status '{value}'. "
                f"Must be one of: {', '.join(CODE_STATUS_LOOKUP.values())}"
            )
        else:
            df.at[idx, "code_status"] = canonical

    return errors


def _generate_missing_resident_ids(df: pd.DataFrame) -> None:
    """Fill empty resident_id values with sequential IDs in place.

    Generated IDs skip any value already used in the file.

    Args:
        df: DataFrame to process
    """
    if "resident_id" not in df.columns:
        df["resident_id"] = ""
        logger.info("resident_id column not found in CSV, creating with auto-generated IDs")

    taken = set(df["resident_id"]) - {""}
    counter = 0
    generated_count = 0

    for idx in df.index[df["resident_id"] == ""]:
        counter += 1
        candidate = f"{RESIDENT_ID_PREFIX}{counter:04d}"
        while candidate in taken:
            counter += 1
            candidate = f"{RESIDENT_ID_PREFIX}{counter:04d}"
        taken.add(candidate)
        df.at[idx, "resident_id"] = candidate
        logger.debug(f"Generated resident ID {candidate} for row {idx + 2}")
        generated_count += 1

    logger.info(
        f"ID generation summary: {generated_count} generated, "
        f"{len(df) - generated_count} provided"
    )

"""Resident-related CLI commands.

This module provides CLI commands for listing, summarizing and validating
resident roster CSV files, plus a standalone age calculator.
"""

import json as json_lib
import logging
import sys
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator, Optional

import click

from resident_roster.config.schema import VALID_SECONDARY_SORTS, VALID_STATUS_FILTERS
from resident_roster.csv_parser.parser import load_residents, parse_csv
from resident_roster.models.resident import Resident
from resident_roster.roster.filtering import compute_resident_stats, filter_residents
from resident_roster.roster.sorting import sort_residents
from resident_roster.utils.date_only import (
    DateComponents,
    calculate_age_years,
    format_age,
    parse_date_string,
)
from resident_roster.utils.error_diagnostics import format_diagnostics, normalize_error
from resident_roster.utils.exceptions import ValidationError

logger = logging.getLogger(__name__)


def _parse_today_option(
    ctx: click.Context, param: click.Parameter, value: Optional[str]
) -> Optional[DateComponents]:
    """Click callback turning --today into DateComponents."""
    if value is None:
        return None
    components = parse_date_string(value)
    if components is None:
        raise click.BadParameter(f"'{value}' is not a valid YYYY-MM-DD date")
    return components


today_option = click.option(
    "--today",
    callback=_parse_today_option,
    default=None,
    metavar="YYYY-MM-DD",
    help="Reference date for age calculation (default: local date)",
)


@contextmanager
def _console_logging_suppressed(enabled: bool) -> Iterator[None]:
    """Silence console log handlers so JSON output stays machine readable."""
    silenced: list[tuple[logging.Handler, int]] = []

    if enabled:
        for handler in logging.getLogger().handlers:
            if isinstance(handler, logging.StreamHandler) and not hasattr(handler, "baseFilename"):
                silenced.append((handler, handler.level))
                handler.setLevel(logging.CRITICAL + 1)  # Effectively disable
    try:
        yield
    finally:
        for handler, original_level in silenced:
            handler.setLevel(original_level)


def _report_unexpected(ctx: click.Context, error: Exception, action: str) -> None:
    """Print an unexpected error, with full diagnostics in verbose mode."""
    click.secho(f"Unexpected error: {error}", fg="red", err=True)
    logger.exception(f"Unexpected error during {action}")
    if (ctx.obj or {}).get("verbose"):
        click.echo(format_diagnostics(normalize_error(error)), err=True)


def _roster_default(ctx: click.Context, name: str, fallback: str) -> str:
    config = (ctx.obj or {}).get("config")
    if config is None:
        return fallback
    return getattr(config.roster, name)


def _resident_record(resident: Resident, today: Optional[DateComponents]) -> dict:
    return {
        "resident_id": resident.resident_id,
        "room_number": resident.room_number,
        "bed": resident.bed,
        "last_name": resident.last_name,
        "first_name": resident.first_name,
        "status": resident.status.value,
        "code_status": resident.code_status.value if resident.code_status else None,
        "dob": resident.dob,
        "age": resident.age(today),
    }


@click.group()
def residents() -> None:
    """Resident roster listing and validation commands."""
    pass


@residents.command("list")
@click.argument("file", type=click.Path(exists=True, path_type=Path))
@click.option(
    "--sort",
    "secondary_sort",
    type=click.Choice(VALID_SECONDARY_SORTS, case_sensitive=False),
    default=None,
    help="Tie-breaker for residents sharing a room (default from config)",
)
@click.option(
    "--status",
    "status_filter",
    type=click.Choice(VALID_STATUS_FILTERS, case_sensitive=False),
    default=None,
    help="Only list residents with this status (default from config)",
)
@click.option("--search", default=None, help="Match first name, last name or room number")
@today_option
@click.option("--json", "json_output", is_flag=True, help="Output results as JSON")
@click.pass_context
def list_command(
    ctx: click.Context,
    file: Path,
    secondary_sort: Optional[str],
    status_filter: Optional[str],
    search: Optional[str],
    today: Optional[DateComponents],
    json_output: bool,
) -> None:
    """List residents ordered by room number.

    Room numbers sort numerically ("9" before "10", "10A" after "10"). Residents
    sharing a room are ordered by the secondary sort: none keeps file order,
    name orders by last then first name, status lists active residents first.

    Examples:

        # List all residents, room order
        resident-roster residents list roster.csv

        # Active residents only, same-room ties broken by name
        resident-roster residents list roster.csv --status active --sort name

        # Machine-readable output
        resident-roster residents list roster.csv --json
    """
    secondary_sort = secondary_sort or _roster_default(ctx, "default_secondary_sort", "none")
    status_filter = status_filter or _roster_default(ctx, "default_status_filter", "all")

    with _console_logging_suppressed(json_output):
        try:
            logger.info(f"Listing residents from {file}")
            loaded = load_residents(file, today)
            matched = filter_residents(loaded, search=search, status=status_filter.lower())
            ordered = sort_residents(matched, secondary_sort.lower())
            logger.info(
                f"Listing {len(ordered)} of {len(loaded)} resident(s), "
                f"secondary sort '{secondary_sort}'"
            )

            if json_output:
                records = [_resident_record(r, today) for r in ordered]
                click.echo(json_lib.dumps(records, indent=2))
                return

            if not ordered:
                click.secho("No residents match the given filters", fg="yellow")
                return

            click.echo(f"{'Room':<8} {'Bed':<5} {'Name':<30} {'Age':>4}  Status")
            click.echo("-" * 60)
            for resident in ordered:
                age = format_age(resident.age(today))
                click.echo(
                    f"{resident.room_number:<8} {resident.bed or '':<5} "
                    f"{resident.full_name:<30} {age:>4}  {resident.status.value}"
                )

        except ValidationError as e:
            click.secho(f"Validation Error: {e}", fg="red", err=True)
            logger.error(f"Validation error: {e}")
            sys.exit(1)
        except Exception as e:
            _report_unexpected(ctx, e, "resident listing")
            sys.exit(1)


@residents.command("stats")
@click.argument("file", type=click.Path(exists=True, path_type=Path))
@click.option("--json", "json_output", is_flag=True, help="Output results as JSON")
@click.pass_context
def stats_command(ctx: click.Context, file: Path, json_output: bool) -> None:
    """Show resident counts by status.

    Example:

        resident-roster residents stats roster.csv
    """
    with _console_logging_suppressed(json_output):
        try:
            stats = compute_resident_stats(load_residents(file))

            if json_output:
                click.echo(
                    json_lib.dumps(
                        {
                            "total": stats.total,
                            "active": stats.active,
                            "discharged": stats.discharged,
                        },
                        indent=2,
                    )
                )
                return

            click.echo(f"Total residents:      {stats.total}")
            click.echo(f"  - Active:           {stats.active}")
            click.echo(f"  - Discharged:       {stats.discharged}")

        except ValidationError as e:
            click.secho(f"Validation Error: {e}", fg="red", err=True)
            logger.error(f"Validation error: {e}")
            sys.exit(1)
        except Exception as e:
            _report_unexpected(ctx, e, "resident statistics")
            sys.exit(1)


@residents.command("validate")
@click.argument("file", type=click.Path(exists=True, path_type=Path))
@today_option
@click.option("--json", "json_output", is_flag=True, help="Output results as JSON")
@click.pass_context
def validate_command(
    ctx: click.Context, file: Path, today: Optional[DateComponents], json_output: bool
) -> None:
    """Validate a resident roster CSV file.

    Reports missing columns, unknown statuses, duplicate resident IDs,
    unusable dates of birth and shared beds.

    Exits with code 0 for success (warnings are OK), code 1 for validation errors.

    Examples:

        resident-roster residents validate roster.csv

        resident-roster residents validate roster.csv --json
    """
    with _console_logging_suppressed(json_output):
        try:
            logger.info(f"Validating CSV file: {file}")
            _, result = parse_csv(file, validate=True, today=today)

            if json_output:
                click.echo(json_lib.dumps(result.to_dict(), indent=2))
            elif result.has_errors:
                click.secho(result.format_report(), fg="red", err=True)
            elif result.has_warnings:
                click.secho(result.format_report(), fg="yellow")
            else:
                click.secho(result.format_report(), fg="green")

            if result.has_errors:
                logger.error("Validation failed with errors")
                sys.exit(1)

            logger.info("Validation complete. Exit code: 0")

        except ValidationError as e:
            click.secho(f"Validation Error: {e}", fg="red", err=True)
            logger.error(f"Validation error: {e}")
            sys.exit(1)
        except Exception as e:
            _report_unexpected(ctx, e, "CSV validation")
            sys.exit(1)


@click.command("age")
@click.argument("dob")
@today_option
def age_command(dob: str, today: Optional[DateComponents]) -> None:
    """Show the age in whole years for a YYYY-MM-DD date of birth.

    Prints a dash when the date cannot be used.

    Examples:

        resident-roster age 1941-07-04

        resident-roster age 2000-06-15 --today 2024-06-15
    """
    click.echo(format_age(calculate_age_years(dob, today)))

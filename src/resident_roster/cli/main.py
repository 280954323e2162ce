"""Main CLI entry point for the resident roster.

This module provides the main Click command group for the resident-roster CLI.
"""

from pathlib import Path
from typing import Optional

import click

from resident_roster import __version__
from resident_roster.cli.resident_commands import age_command, residents
from resident_roster.config import load_config
from resident_roster.logging_audit import configure_logging
from resident_roster.utils.exceptions import ConfigurationError


@click.group()
@click.version_option(version=__version__, prog_name="resident-roster")
@click.option(
    "--config",
    type=click.Path(exists=True, path_type=Path),
    default=None,
    help="Path to configuration file (default: ./config/config.json)",
)
@click.option("--verbose", is_flag=True, help="Enable verbose logging (DEBUG level)")
@click.option(
    "--log-file",
    type=click.Path(path_type=Path),
    default=None,
    help="Path to log file (overrides config file)",
)
@click.option(
    "--redact-pii",
    is_flag=True,
    help="Redact PII (resident names, dates of birth, Medicare numbers) from logs",
)
@click.pass_context
def cli(
    ctx: click.Context,
    config: Optional[Path],
    verbose: bool,
    log_file: Optional[Path],
    redact_pii: bool,
) -> None:
    """Resident Roster - Resident listing tool for residential care facilities.
    
    Orders residents by room number, shows ages computed from dates of birth,
    and validates roster CSV exports.
    
    Common usage:
    
        # List residents by room, same-room ties broken by name
        resident-roster residents list roster.csv --sort name
        
        # Validate a roster CSV file
        resident-roster residents validate roster.csv
        
        # Age for a date of birth
        resident-roster age 1941-07-04
        
        # Enable verbose logging for debugging
        resident-roster --verbose residents list roster.csv
    
    Use --help with any command for more information.
    """
    ctx.ensure_object(dict)
    
    try:
        config_obj = load_config(config)
        ctx.obj["config"] = config_obj
    except ConfigurationError as e:
        click.echo(f"Error loading configuration: {e}", err=True)
        ctx.exit(1)
    
    ctx.obj["verbose"] = verbose
    ctx.obj["redact_pii"] = redact_pii
    ctx.obj["log_file"] = log_file
    
    # Configure logging with precedence: CLI flags > config file > defaults
    log_level = "DEBUG" if verbose else config_obj.logging.level
    log_file_path = log_file if log_file else config_obj.logging.log_file
    redact_pii_setting = redact_pii if redact_pii else config_obj.logging.redact_pii
    
    configure_logging(
        level=log_level, log_file=log_file_path, redact_pii=redact_pii_setting
    )


cli.add_command(residents)
cli.add_command(age_command)


@cli.group()
def config() -> None:
    """Configuration management commands."""
    pass


@config.command()
@click.argument("config_file", type=click.Path(exists=True, path_type=Path))
def validate(config_file: Path) -> None:
    """Validate a configuration file.
    
    Example:
        resident-roster config validate config/config.json
    """
    try:
        config_obj = load_config(config_file)
    except ConfigurationError as e:
        click.echo(click.style("✗", fg="red", bold=True) + " Configuration validation failed")
        click.echo(f"\n{e}", err=True)
        raise click.exceptions.Exit(1)
    
    click.echo(click.style("✓", fg="green", bold=True) + " Configuration is valid")
    click.echo(f"\nConfiguration file: {config_file}")
    
    click.echo("\nRoster:")
    click.echo(f"  Secondary sort: {config_obj.roster.default_secondary_sort}")
    click.echo(f"  Status filter:  {config_obj.roster.default_status_filter}")
    
    click.echo("\nLogging:")
    click.echo(f"  Level:       {config_obj.logging.level}")
    click.echo(f"  Log file:    {config_obj.logging.log_file}")
    click.echo(f"  Redact PII:  {config_obj.logging.redact_pii}")


@cli.command()
def version() -> None:
    """Display version information."""
    click.echo(f"resident-roster version {__version__}")


if __name__ == "__main__":
    cli()

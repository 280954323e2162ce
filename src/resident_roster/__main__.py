"""Entry point for running resident_roster as a module.

This allows the package to be executed as:
    python -m resident_roster
"""

from resident_roster.cli.main import cli

if __name__ == "__main__":
    cli()

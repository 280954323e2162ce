"""Command-line interface for the resident roster."""

"""Resident roster utilities for residential care facilities."""

__version__ = "0.1.0"

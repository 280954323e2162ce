"""Utility helpers shared across the resident roster package."""

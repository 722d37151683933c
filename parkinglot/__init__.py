"""Parking lot management: plate checks, hourly billing, revenue, history and a command line."""

__version__ = "0.1.0"

__all__ = ["cli", "formatting", "lot", "plates", "service", "storage"]
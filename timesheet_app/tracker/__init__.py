"""Timesheet log domain layer."""

__version__ = "1.0.0"

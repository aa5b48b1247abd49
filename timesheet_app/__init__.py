"""Timesheet Tracker: tag summaries and task inference for a timesheet log."""

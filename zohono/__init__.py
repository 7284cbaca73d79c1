"""Synthetic weekday timesheet generator."""

__version__ = "0.1.0"

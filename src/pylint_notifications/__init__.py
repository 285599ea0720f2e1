"""Pylint Notifications - notification dispatch and exception reporting."""

__version__ = "0.1.0"

"""Admission-time upgrade policy for managed cluster releases."""

__version__ = "0.1.0"

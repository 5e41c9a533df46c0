"""Normalize stacked election result sheets into one row per polling center."""

__version__ = "0.1.0"

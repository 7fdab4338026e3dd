"""Standup - daily stand-up journal."""

__version__ = "0.1.0"

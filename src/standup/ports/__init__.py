"""Ports - interfaces/protocols for external dependencies."""

from .journal_file import JournalFile

__all__ = [
    "JournalFile",
]

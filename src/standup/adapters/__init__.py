"""Adapters - I/O implementations of ports."""

from .json_file import JsonJournalFile

__all__ = [
    "JsonJournalFile",
]

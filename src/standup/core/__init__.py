"""Functional core - entries, the date-keyed store and the JSON codec."""

from .entry import Aspect, Entry
from .store import Store
from .codec import encode, decode, parse_date

__all__ = [
    # Entry
    "Aspect",
    "Entry",
    # Store
    "Store",
    # Codec
    "encode",
    "decode",
    "parse_date",
]

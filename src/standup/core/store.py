"""In-memory, date-keyed collection of stand-up entries."""

from datetime import date
from typing import Protocol

from standup.errors import DecodeError

from . import codec
from .entry import Entry


class Sink(Protocol):
    """Anything that accepts a whole serialized document."""

    def write(self, content: str) -> object:
        ...


class Store:
    """
    Date -> Entry mapping, one entry per date.

    Inserting an entry for a date that already has one replaces it entirely.
    list() always returns entries in ascending date order.
    """

    def __init__(self, entries: list[Entry] | None = None):
        self._entries: dict[date, Entry] = {}
        for entry in entries or []:
            self.insert(entry)

    @classmethod
    def load_from(cls, content: str | bytes, today: date | None = None) -> "Store":
        """Build a Store from serialized journal content. Raises DecodeError."""
        if isinstance(content, bytes):
            try:
                content = content.decode("utf-8")
            except UnicodeDecodeError as e:
                raise DecodeError(f"Journal is not valid UTF-8: {e}") from e
        return cls(codec.decode(content, today=today))

    def flush_to(self, sink: Sink) -> None:
        """Write the whole store to sink in a single write."""
        sink.write(codec.encode(self.list()))

    def get(self, target_date: date) -> Entry | None:
        return self._entries.get(target_date)

    def insert(self, entry: Entry) -> None:
        self._entries[entry.date] = entry

    def delete(self, target_date: date) -> Entry | None:
        """Remove the entry for a date, returning it if there was one."""
        return self._entries.pop(target_date, None)

    def list(self) -> list[Entry]:
        """All entries, oldest first."""
        return [self._entries[d] for d in sorted(self._entries)]

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, target_date: date) -> bool:
        return target_date in self._entries

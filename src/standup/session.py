"""Session layer between the CLI and the core.

A Session loads the whole journal, applies at most one mutation, and
writes the whole journal back after every mutation.
"""

import logging
from datetime import date

from .adapters.json_file import JsonJournalFile
from .config import PathProvider, default_path_provider
from .core import Aspect, Entry, Store, parse_date
from .errors import InvalidDateError
from .ports import JournalFile

logger = logging.getLogger(__name__)


def parse_working_date(date_override: str | None, today: date | None = None) -> date:
    """Resolve the working date from an optional YYYY-MM-DD override."""
    if date_override is None:
        return today or date.today()
    parsed = parse_date(date_override.strip())
    if parsed is None:
        raise InvalidDateError(f"Invalid date '{date_override}' (expected YYYY-MM-DD)")
    return parsed


def load_store(journal: JournalFile, today: date | None = None) -> Store:
    """Load the store, creating an empty journal if none exists."""
    content = journal.read()
    if content is None:
        logger.info("No journal file found, starting an empty one")
        store = Store()
        store.flush_to(journal)
        return store
    if not content.strip():
        return Store()
    return Store.load_from(content, today=today)


class Session:
    """One command invocation bound to a journal file and a working date."""

    def __init__(self, store: Store, journal: JournalFile, working_date: date):
        self.store = store
        self.journal = journal
        self.working_date = working_date

    @classmethod
    def open(
        cls,
        date_override: str | None = None,
        path_provider: PathProvider = default_path_provider,
        today: date | None = None,
    ) -> "Session":
        """
        Open the journal and fix the working date.

        Raises ConfigurationError if no path can be resolved, StorageError or
        DecodeError if the journal can't be loaded, and InvalidDateError if
        date_override is given but isn't YYYY-MM-DD.
        """
        working_date = parse_working_date(date_override, today)
        journal = JsonJournalFile(path_provider())
        store = load_store(journal, today=today)
        logger.debug(f"Opened {journal.path} with {len(store)} entries for {working_date}")
        return cls(store, journal, working_date)

    def _flush(self) -> None:
        self.store.flush_to(self.journal)

    def current_entry(self) -> Entry:
        """Entry for the working date, or a fresh empty one."""
        return self.store.get(self.working_date) or Entry.from_date(self.working_date)

    def record(self, aspect: Aspect, message: str) -> Entry:
        """Append a note to the working date's entry and save."""
        entry = self.current_entry().add(aspect, message)
        self.store.insert(entry)
        self._flush()
        return entry

    def delete_entry(self) -> Entry | None:
        """Remove the whole entry for the working date and save."""
        removed = self.store.delete(self.working_date)
        self._flush()
        return removed

    def delete_line(self, aspect: Aspect, index: int) -> Entry:
        """Remove one note (0-based index) from the working date's entry and save."""
        entry = self.current_entry().remove(aspect, index)
        self.store.insert(entry)
        self._flush()
        return entry

    def all_entries(self) -> list[Entry]:
        return self.store.list()

    def show(self) -> str:
        return self.current_entry().format()

    def list_report(self, newest_first: bool = False) -> str:
        """All entries formatted for display, chronological unless reversed."""
        entries = self.all_entries()
        if newest_first:
            entries.reverse()
        return "\n\n".join(e.format() for e in entries)

"""Journal file interface."""

from typing import Protocol


class JournalFile(Protocol):
    """Interface for the single persisted journal document."""

    def read(self) -> str | None:
        """Read the whole document. Returns None if it does not exist."""
        ...

    def write(self, content: str) -> None:
        """Replace the whole document with content."""
        ...

    def exists(self) -> bool:
        """Check if the document exists."""
        ...

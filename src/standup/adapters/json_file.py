"""File-based journal storage adapter."""

import logging
from pathlib import Path

from standup.errors import StorageError

logger = logging.getLogger(__name__)


class JsonJournalFile:
    """
    The journal as one JSON file on disk.

    Implements JournalFile protocol. Writes go to a sibling temp file that
    is renamed over the target, so a failed write leaves the old content.
    """

    def __init__(self, path: Path | str):
        self.path = Path(path).expanduser()

    @property
    def _tmp_path(self) -> Path:
        return self.path.with_name(f"{self.path.name}.tmp")

    def exists(self) -> bool:
        return self.path.is_file()

    def read(self) -> str | None:
        """Read journal content. Returns None if the file doesn't exist."""
        if not self.exists():
            return None
        try:
            content = self.path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise StorageError(f"Cannot read {self.path}: {e}") from e
        logger.debug(f"Read {len(content)} chars from {self.path}")
        return content

    def write(self, content: str) -> None:
        """Atomically replace the journal file with content."""
        tmp = self._tmp_path
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            tmp.write_text(content, encoding="utf-8")
            tmp.replace(self.path)
        except OSError as e:
            tmp.unlink(missing_ok=True)
            raise StorageError(f"Cannot write {self.path}: {e}") from e
        logger.debug(f"Wrote {len(content)} chars to {self.path}")

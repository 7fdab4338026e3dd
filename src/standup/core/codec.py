"""JSON codec for the journal file - no I/O dependencies.

The file is a single JSON array, one object per entry:

    [{"date":"2024-01-01","today":["..."],"yesterday":[],"blocker":[]}]
"""

import json
import logging
import re
from datetime import date

from standup.errors import DecodeError

from .entry import Aspect, Entry

logger = logging.getLogger(__name__)

_DATE_RE = re.compile(r"[0-9]{4}-[0-9]{2}-[0-9]{2}")


def parse_date(text: str) -> date | None:
    """Parse a strict YYYY-MM-DD date, or None if it doesn't match."""
    if not _DATE_RE.fullmatch(text):
        return None
    try:
        return date.fromisoformat(text)
    except ValueError:
        return None


def encode(entries: list[Entry]) -> str:
    """Serialize entries to a compact JSON array, preserving input order."""
    return json.dumps(
        [
            {
                "date": e.date.isoformat(),
                "today": list(e.today),
                "yesterday": list(e.yesterday),
                "blocker": list(e.blocker),
            }
            for e in entries
        ],
        separators=(",", ":"),
        ensure_ascii=False,
    )


def decode(text: str, today: date | None = None) -> list[Entry]:
    """
    Parse journal content into entries.

    Lenient per object: a missing or unparsable date becomes `today`,
    missing or non-array message lists become empty, and non-string
    messages are dropped. Fails only on invalid JSON or when the top
    level is not an array of objects.
    """
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise DecodeError(f"Journal is not valid JSON: {e}") from e

    if not isinstance(data, list):
        raise DecodeError(f"Journal must be a JSON array, got {type(data).__name__}")

    today = today or date.today()
    entries = []
    for position, item in enumerate(data):
        if not isinstance(item, dict):
            raise DecodeError(
                f"Journal item {position} must be an object, got {type(item).__name__}"
            )
        entries.append(_build_entry(item, today))
    return entries


def _build_entry(obj: dict, today: date) -> Entry:
    """Build one Entry from a decoded JSON object."""
    entry = Entry.from_date(_entry_date(obj, today))
    for aspect in Aspect:
        messages = obj.get(aspect.value)
        if not isinstance(messages, list):
            continue
        for message in messages:
            if isinstance(message, str):
                entry = entry.add(aspect, message)
    return entry


def _entry_date(obj: dict, today: date) -> date:
    raw = obj.get("date")
    parsed = parse_date(raw) if isinstance(raw, str) else None
    if parsed is None:
        logger.warning(f"Entry has missing or invalid date {raw!r}, using {today.isoformat()}")
        return today
    return parsed

"""Pure stand-up entry logic - no I/O dependencies."""

from dataclasses import dataclass, replace
from datetime import date
from enum import Enum

from standup.errors import InvalidInputError


class Aspect(Enum):
    """The three note lists of a stand-up entry."""

    TODAY = "today"
    YESTERDAY = "yesterday"
    BLOCKER = "blocker"

    @classmethod
    def parse(cls, token: str) -> "Aspect":
        """Parse a user-supplied aspect token."""
        value = token.strip().lower()
        if value == "blocked":
            return cls.BLOCKER
        try:
            return cls(value)
        except ValueError:
            choices = ", ".join(a.value for a in cls)
            raise InvalidInputError(f"Unknown aspect '{token}' (expected one of: {choices})") from None


@dataclass(frozen=True)
class Entry:
    """
    One day's stand-up notes.

    Entries are values: add/remove/set_date return a new Entry and leave
    the receiver untouched. Message order defines display numbering.
    """

    date: date
    today: tuple[str, ...] = ()
    yesterday: tuple[str, ...] = ()
    blocker: tuple[str, ...] = ()

    @classmethod
    def new(cls, today: date | None = None) -> "Entry":
        """Empty entry for the current day."""
        return cls(date=today or date.today())

    @classmethod
    def from_date(cls, target_date: date) -> "Entry":
        """Empty entry for a given day."""
        return cls(date=target_date)

    def is_blocked(self) -> bool:
        return bool(self.blocker)

    def messages(self, aspect: Aspect) -> tuple[str, ...]:
        """Messages recorded under an aspect."""
        return getattr(self, aspect.value)

    def add(self, aspect: Aspect, message: str) -> "Entry":
        """Return a copy with message appended to the aspect's list."""
        return replace(self, **{aspect.value: self.messages(aspect) + (message,)})

    def remove(self, aspect: Aspect, index: int) -> "Entry":
        """
        Return a copy without the message at a 0-based index.

        An out-of-range index returns an equal Entry rather than raising.
        """
        messages = self.messages(aspect)
        if index < 0 or index >= len(messages):
            return self
        return replace(self, **{aspect.value: messages[:index] + messages[index + 1:]})

    def set_date(self, target_date: date) -> "Entry":
        return replace(self, date=target_date)

    def format(self) -> str:
        """Format the entry for terminal display."""
        lines = [f"{self.date.isoformat()} - {self.date.strftime('%A')}"]
        sections = [Aspect.TODAY, Aspect.YESTERDAY]
        if self.is_blocked():
            sections.append(Aspect.BLOCKER)

        for aspect in sections:
            lines.append(f"  {aspect.value}:")
            for i, message in enumerate(self.messages(aspect), start=1):
                lines.append(f"    {i}. {message}")

        return "\n".join(lines)

    def __str__(self) -> str:
        return self.format()

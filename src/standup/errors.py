"""Error types raised by the standup core."""


class StandupError(Exception):
    """Base class for every error the core reports to its caller."""

    pass


class StorageError(StandupError):
    """Raised when the journal file cannot be read or written."""

    pass


class DecodeError(StandupError, ValueError):
    """Raised when journal content is not a JSON array of objects."""

    pass


class ConfigurationError(StandupError):
    """Raised when the journal file location cannot be determined."""

    pass


class InvalidInputError(StandupError):
    """Raised for user input the core cannot act on."""

    pass


class InvalidDateError(InvalidInputError):
    """Raised when an explicit date is not in YYYY-MM-DD form."""

    pass

"""Error types raised by the tracker."""


class TrackerError(Exception):
    """Base class for calorie tracker errors."""


class FormatError(TrackerError):
    """Raised when a persisted record cannot be parsed."""

    def __init__(self, message: str, line: str | None = None) -> None:
        super().__init__(message)
        self.line = line


class OutOfRangeError(TrackerError, IndexError):
    """Raised when a 1-based index does not refer to a stored item."""


class InvalidInputError(TrackerError, ValueError):
    """Raised for negative calories, unknown tokens or blank names."""


class StorageError(TrackerError):
    """Raised when a data file cannot be read or written."""

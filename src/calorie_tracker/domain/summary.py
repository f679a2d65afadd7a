"""Domain models for summary reports."""

from enum import Enum

from calorie_tracker.domain.errors import InvalidInputError


class ReportKind(Enum):
    """Report timeframes, valued by their command token."""

    WEEK = "week"
    MONTH = "month"

    @classmethod
    def from_command(cls, token: str) -> "ReportKind":
        """Return the report kind for a token such as ``/week``."""
        try:
            return cls(token.strip().lstrip("/").lower())
        except ValueError as exc:
            raise InvalidInputError(f"Unknown report timeframe: {token!r}") from exc

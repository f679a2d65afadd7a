"""Entry log of intake events."""

import logging
from collections.abc import Iterable
from dataclasses import dataclass, field, replace
from datetime import date

from calorie_tracker.domain.entries import Entry, MealType
from calorie_tracker.domain.errors import FormatError, OutOfRangeError
from calorie_tracker.domain.foods import Food
from calorie_tracker.services.records import decode_entry, encode_entry

EMPTY_LOG_MESSAGE = "Sorry, there is not any record stored"

_logger = logging.getLogger(__name__)


@dataclass
class EntryLog:
    """Ordered log of entries addressed by 1-based index."""

    _entries: list[Entry] = field(default_factory=list)

    @property
    def entries(self) -> list[Entry]:
        """Return a copy of the stored entries in their current order."""
        return list(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def add_entry(self, meal: MealType, food: Food, on: date | None = None) -> Entry:
        """Log a food for a meal, dated today unless a day is given."""
        entry = Entry(meal=meal, food=replace(food), day=on or date.today())
        self._entries.append(entry)
        return entry

    def get_entry(self, index: int) -> Entry:
        """Return the entry at a 1-based index."""
        return self._entries[self._position(index)]

    def remove_entry(self, index: int) -> Entry:
        """Remove and return the entry at a 1-based index."""
        return self._entries.pop(self._position(index))

    def edit_entry(self, index: int, calories: int) -> Entry:
        """Replace the calorie value of the food logged at a 1-based index."""
        position = self._position(index)
        entry = self._entries[position]
        updated = replace(entry, food=replace(entry.food, calories=calories))
        self._entries[position] = updated
        return updated

    def sort_database(self) -> None:
        """Sort entries chronologically, keeping insertion order within a day."""
        self._entries.sort(key=lambda entry: entry.day)

    def search(self, keyword: str) -> list[Entry]:
        """Return entries whose food name contains the keyword, ignoring case."""
        needle = keyword.strip().lower()
        return [entry for entry in self._entries if needle in entry.food.name.lower()]

    def entries_on(self, day: date) -> list[Entry]:
        """Return entries logged on a given day."""
        return [entry for entry in self._entries if entry.day == day]

    def total_calories_on(self, day: date) -> int:
        """Return the calories logged on a given day."""
        return sum(entry.food.calories for entry in self.entries_on(day))

    def list_entries(self) -> str:
        """Render the log as a numbered listing."""
        if not self._entries:
            return EMPTY_LOG_MESSAGE
        return "".join(
            f" {number}.{entry.describe()}\n"
            for number, entry in enumerate(self._entries, start=1)
        )

    def preload_database(self, lines: Iterable[str]) -> int:
        """Load log rows, skipping malformed lines."""
        loaded = 0
        skipped = 0
        for line in lines:
            if not line.strip():
                continue
            try:
                entry = decode_entry(line)
            except FormatError as exc:
                skipped += 1
                _logger.warning("Skipping entry record: %s", exc)
                continue
            self._entries.append(entry)
            loaded += 1
        _logger.info("Loaded entries: count=%s skipped=%s", loaded, skipped)
        return loaded

    def convert_database_to_string(self) -> str:
        """Serialize the log, one row per line."""
        return "".join(f"{encode_entry(entry)}\n" for entry in self._entries)

    def _position(self, index: int) -> int:
        if not 1 <= index <= len(self._entries):
            raise OutOfRangeError(
                f"Entry index {index} is out of range (1-{len(self._entries)})"
            )
        return index - 1

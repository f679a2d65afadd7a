"""Loading and saving the catalog and entry log."""

import logging
from dataclasses import dataclass
from typing import Protocol

from calorie_tracker.domain.errors import FormatError
from calorie_tracker.services.entries import EntryLog
from calorie_tracker.services.foods import FoodCatalog

_logger = logging.getLogger(__name__)


class RecordStorage(Protocol):
    """Persistence interface for named text data files."""

    def read_lines(self, name: str) -> list[str] | None:
        """Return the lines of a data file, or None when it does not exist."""

    def write_text(self, name: str, content: str) -> None:
        """Replace the contents of a data file."""


@dataclass
class PersistenceService:
    """Moves the catalog and entry log in and out of storage."""

    storage: RecordStorage
    food_file: str
    entry_file: str

    def load_food_catalog(self, catalog: FoodCatalog) -> bool:
        """Preload the catalog, returning False when no preset data was loaded."""
        lines = self.storage.read_lines(self.food_file)
        if lines is None:
            _logger.info("No food database found: file=%s", self.food_file)
            return False
        try:
            catalog.preload_database(lines)
        except FormatError as exc:
            _logger.warning(
                "Food database rejected: file=%s error=%s", self.food_file, exc
            )
            return False
        return True

    def load_entry_log(self, entry_log: EntryLog) -> int:
        """Preload the entry log and return the number of entries loaded."""
        lines = self.storage.read_lines(self.entry_file)
        if lines is None:
            _logger.info("No entry database found: file=%s", self.entry_file)
            return 0
        return entry_log.preload_database(lines)

    def save_food_catalog(self, catalog: FoodCatalog) -> None:
        """Write the catalog to storage."""
        self.storage.write_text(self.food_file, catalog.convert_database_to_string())
        _logger.info("Saved foods: file=%s count=%s", self.food_file, len(catalog))

    def save_entry_log(self, entry_log: EntryLog) -> None:
        """Write the entry log to storage."""
        self.storage.write_text(
            self.entry_file, entry_log.convert_database_to_string()
        )
        _logger.info(
            "Saved entries: file=%s count=%s", self.entry_file, len(entry_log)
        )

    def save_all(self, catalog: FoodCatalog, entry_log: EntryLog) -> None:
        """Write both the catalog and the entry log."""
        self.save_food_catalog(catalog)
        self.save_entry_log(entry_log)

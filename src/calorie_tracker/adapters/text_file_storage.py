"""Text file storage for data files."""

from dataclasses import dataclass
from pathlib import Path

from calorie_tracker.domain.errors import StorageError
from calorie_tracker.services.persistence import RecordStorage


@dataclass
class TextFileStorage(RecordStorage):
    """UTF-8 text file implementation rooted at a data directory."""

    data_dir: Path

    def read_lines(self, name: str) -> list[str] | None:
        """Return the lines of a data file, or None when it is missing."""
        path = self.data_dir / name
        if not path.exists():
            return None
        try:
            return path.read_text(encoding="utf-8").splitlines()
        except OSError as exc:
            raise StorageError(f"Failed to read {path}") from exc

    def write_text(self, name: str, content: str) -> None:
        """Write a data file, creating the data directory if needed."""
        path = self.data_dir / name
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(content, encoding="utf-8")
        except OSError as exc:
            raise StorageError(f"Failed to write {path}") from exc

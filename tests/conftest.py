"""Shared test fixtures."""

import logging
from collections.abc import Iterator
from dataclasses import dataclass, field
from datetime import date
from pathlib import Path

import pytest

from calorie_tracker.config import Settings
from calorie_tracker.domain.entries import MealType
from calorie_tracker.domain.foods import Food, FoodType
from calorie_tracker.services.entries import EntryLog
from calorie_tracker.services.foods import FoodCatalog
from calorie_tracker.services.persistence import PersistenceService, RecordStorage

TODAY = date(2021, 10, 25)


@pytest.fixture(autouse=True)
def app_logger() -> Iterator[logging.Logger]:
    logger = logging.getLogger("calorie_tracker")
    handlers, propagate, level = list(logger.handlers), logger.propagate, logger.level
    logger.handlers.clear()
    logger.propagate = True
    yield logger
    logger.handlers[:] = handlers
    logger.propagate = propagate
    logger.setLevel(level)


@dataclass
class InMemoryRecordStorage(RecordStorage):
    """In-memory record storage for tests."""

    files: dict[str, str] = field(default_factory=dict)
    writes: list[str] = field(default_factory=list)

    def read_lines(self, name: str) -> list[str] | None:
        content = self.files.get(name)
        if content is None:
            return None
        return content.splitlines()

    def write_text(self, name: str, content: str) -> None:
        self.files[name] = content
        self.writes.append(name)


def make_food(name: str, calories: int, food_type: FoodType = FoodType.MEAL) -> Food:
    return Food(name=name, calories=calories, food_type=food_type)


@pytest.fixture
def settings(tmp_path: Path) -> Settings:
    return Settings(data_dir=tmp_path / "data")


@pytest.fixture
def storage() -> InMemoryRecordStorage:
    return InMemoryRecordStorage()


@pytest.fixture
def persistence_service(storage: InMemoryRecordStorage) -> PersistenceService:
    return PersistenceService(
        storage=storage,
        food_file="FoodDatabase.txt",
        entry_file="EntryDatabase.txt",
    )


@pytest.fixture
def food_catalog() -> FoodCatalog:
    catalog = FoodCatalog()
    catalog.add_food("ramen", 600, FoodType.MEAL)
    catalog.add_food("rice", 800, FoodType.MEAL)
    catalog.add_food("Iced Milo", 150, FoodType.DRINK)
    return catalog


@pytest.fixture
def entry_log() -> EntryLog:
    log = EntryLog()
    log.add_entry(MealType.LUNCH, make_food("ramen", 600), on=TODAY)
    log.add_entry(MealType.DINNER, make_food("rice", 800), on=TODAY)
    return log

"""Food catalog of reusable food definitions."""

import logging
from collections.abc import Iterable
from dataclasses import dataclass, field, replace

from calorie_tracker.domain.errors import InvalidInputError, OutOfRangeError
from calorie_tracker.domain.foods import Food, FoodType
from calorie_tracker.services.records import DELIMITER, decode_food, encode_food

EMPTY_CATALOG_MESSAGE = "Sorry, there is not any food stored"

_logger = logging.getLogger(__name__)


@dataclass
class FoodCatalog:
    """Ordered catalog of foods addressed by 1-based index."""

    _foods: list[Food] = field(default_factory=list)

    @property
    def foods(self) -> list[Food]:
        """Return a copy of the stored foods in insertion order."""
        return list(self._foods)

    def __len__(self) -> int:
        return len(self._foods)

    def add_food(self, name: str, calories: int, food_type: FoodType) -> Food:
        """Add a food to the catalog and return it."""
        food = Food(
            name=validate_food_name(name), calories=calories, food_type=food_type
        )
        self._foods.append(food)
        return food

    def get_food(self, index: int) -> Food:
        """Return the food at a 1-based index."""
        return self._foods[self._position(index)]

    def find_food(self, name: str) -> Food | None:
        """Return the first food whose name matches, ignoring case."""
        wanted = name.strip().lower()
        for food in self._foods:
            if food.name.lower() == wanted:
                return food
        return None

    def remove_food(self, index: int) -> Food:
        """Remove and return the food at a 1-based index."""
        return self._foods.pop(self._position(index))

    def edit_food(self, index: int, calories: int) -> Food:
        """Replace the calorie value of the food at a 1-based index."""
        position = self._position(index)
        updated = replace(self._foods[position], calories=calories)
        self._foods[position] = updated
        return updated

    def search(self, keyword: str) -> list[Food]:
        """Return foods whose name contains the keyword, ignoring case."""
        needle = keyword.strip().lower()
        return [food for food in self._foods if needle in food.name.lower()]

    def list_foods(self) -> str:
        """Render the catalog as a numbered listing."""
        if not self._foods:
            return EMPTY_CATALOG_MESSAGE
        return "".join(
            f" {number}.{food.describe()}\n"
            for number, food in enumerate(self._foods, start=1)
        )

    def preload_database(self, lines: Iterable[str]) -> int:
        """Load catalog rows, aborting on the first malformed line.

        Nothing is added unless every non-blank line parses, so a rejected
        file leaves the catalog exactly as it was.
        """
        loaded: list[Food] = []
        for line in lines:
            if not line.strip():
                continue
            loaded.append(decode_food(line))
        self._foods.extend(loaded)
        _logger.info("Loaded foods: count=%s", len(loaded))
        return len(loaded)

    def convert_database_to_string(self) -> str:
        """Serialize the catalog, one row per line."""
        return "".join(f"{encode_food(food)}\n" for food in self._foods)

    def _position(self, index: int) -> int:
        if not 1 <= index <= len(self._foods):
            raise OutOfRangeError(
                f"Food index {index} is out of range (1-{len(self._foods)})"
            )
        return index - 1


def validate_food_name(name: str) -> str:
    """Return a trimmed food name that can be stored as a record field."""
    cleaned = name.strip()
    if not cleaned:
        raise InvalidInputError("Food name must not be blank")
    if DELIMITER in cleaned:
        raise InvalidInputError(f"Food name must not contain {DELIMITER!r}")
    return cleaned

"""Domain models for reusable food definitions."""

from dataclasses import dataclass
from enum import Enum

from calorie_tracker.domain.errors import InvalidInputError


class FoodType(Enum):
    """Closed set of food categories."""

    MEAL = "MEAL"
    SNACK = "SNACK"
    DRINK = "DRINK"

    @classmethod
    def parse(cls, token: str) -> "FoodType":
        """Return the category for an uppercase token."""
        try:
            return cls(token.strip())
        except ValueError as exc:
            raise InvalidInputError(f"Unknown food type: {token!r}") from exc


@dataclass(frozen=True)
class Food:
    """A food with its calorie value and category."""

    name: str
    calories: int
    food_type: FoodType

    def __post_init__(self) -> None:
        if self.calories < 0:
            raise InvalidInputError(
                f"Calories must be non-negative, got {self.calories}"
            )

    def describe(self) -> str:
        """Return the user-facing description of the food."""
        return f"{self.name} ({self.calories} Kcal) Type: {self.food_type.value}"

"""Domain models for logged intake events."""

from dataclasses import dataclass
from datetime import date
from enum import Enum

from calorie_tracker.domain.errors import InvalidInputError
from calorie_tracker.domain.foods import Food


class MealType(Enum):
    """Meal classification of an entry, valued by its display label."""

    BREAKFAST = "Breakfast"
    LUNCH = "Lunch"
    DINNER = "Dinner"
    SNACK = "Snack"

    @property
    def label(self) -> str:
        return self.value

    @classmethod
    def parse(cls, label: str) -> "MealType":
        """Return the meal type for a capitalized label such as ``Dinner``."""
        try:
            return cls(label.strip())
        except ValueError as exc:
            raise InvalidInputError(f"Unknown meal type: {label!r}") from exc


@dataclass(frozen=True)
class Entry:
    """One logged intake event holding its own food snapshot."""

    meal: MealType
    food: Food
    day: date

    def describe(self) -> str:
        """Return the user-facing description of the entry."""
        return f"[{self.day.isoformat()}] {self.meal.label}: {self.food.describe()}"

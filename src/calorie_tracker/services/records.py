"""Pipe-delimited record codec for persisted foods and entries."""

import re
from datetime import date

from pydantic import BaseModel, Field, ValidationError, field_validator

from calorie_tracker.domain.entries import Entry, MealType
from calorie_tracker.domain.errors import FormatError
from calorie_tracker.domain.foods import Food, FoodType

DELIMITER = "|"
FOOD_FIELD_COUNT = 3
ENTRY_FIELD_COUNT = 5

_CALORIES_PATTERN = re.compile(r"^\d+$", re.ASCII)
_ISO_DATE_PATTERN = re.compile(r"^\d{4}-\d{2}-\d{2}$", re.ASCII)


class FoodRecord(BaseModel):
    """Validated catalog row: ``name | calories | type``."""

    name: str = Field(min_length=1)
    calories: int = Field(ge=0)
    food_type: FoodType

    @field_validator("calories", mode="before")
    @classmethod
    def parse_calories(cls, value: object) -> object:
        return _calories_from_text(value)

    @field_validator("food_type", mode="before")
    @classmethod
    def parse_food_type(cls, value: object) -> object:
        return FoodType.parse(value) if isinstance(value, str) else value

    def to_food(self) -> Food:
        return Food(name=self.name, calories=self.calories, food_type=self.food_type)


class EntryRecord(FoodRecord):
    """Validated log row: ``meal | name | calories | date | type``."""

    meal: MealType
    day: date

    @field_validator("meal", mode="before")
    @classmethod
    def parse_meal(cls, value: object) -> object:
        return MealType.parse(value) if isinstance(value, str) else value

    @field_validator("day", mode="before")
    @classmethod
    def parse_day(cls, value: object) -> object:
        if isinstance(value, str):
            if not _ISO_DATE_PATTERN.match(value):
                raise ValueError(f"Expected a YYYY-MM-DD date, got {value!r}")
            return date.fromisoformat(value)
        return value

    def to_entry(self) -> Entry:
        return Entry(meal=self.meal, food=self.to_food(), day=self.day)


def _calories_from_text(value: object) -> object:
    """Return a calorie string as an int, accepting plain digits only."""
    if isinstance(value, str):
        if not _CALORIES_PATTERN.match(value):
            raise ValueError(f"Calories must be a whole number, got {value!r}")
        return int(value)
    return value


def encode_food(food: Food) -> str:
    """Serialize a food as a catalog row."""
    return _join(food.name, str(food.calories), food.food_type.value)


def encode_entry(entry: Entry) -> str:
    """Serialize an entry as a log row."""
    return _join(
        entry.meal.label,
        entry.food.name,
        str(entry.food.calories),
        entry.day.isoformat(),
        entry.food.food_type.value,
    )


def decode_food(line: str) -> Food:
    """Parse a catalog row, raising FormatError when it is malformed."""
    fields = _split(line, FOOD_FIELD_COUNT)
    try:
        record = FoodRecord(name=fields[0], calories=fields[1], food_type=fields[2])
    except ValidationError as exc:
        raise FormatError(f"Invalid food record: {line!r}", line=line) from exc
    return record.to_food()


def decode_entry(line: str) -> Entry:
    """Parse a log row, raising FormatError when it is malformed."""
    fields = _split(line, ENTRY_FIELD_COUNT)
    try:
        record = EntryRecord(
            meal=fields[0],
            name=fields[1],
            calories=fields[2],
            day=fields[3],
            food_type=fields[4],
        )
    except ValidationError as exc:
        raise FormatError(f"Invalid entry record: {line!r}", line=line) from exc
    return record.to_entry()


def _join(*fields: str) -> str:
    return f" {DELIMITER} ".join(fields)


def _split(line: str, expected: int) -> list[str]:
    fields = [field.strip() for field in line.strip().split(DELIMITER)]
    if len(fields) != expected:
        raise FormatError(
            f"Expected {expected} fields, got {len(fields)}: {line!r}", line=line
        )
    return fields

"""Tests for the pipe-delimited record codec."""

from datetime import date

import pytest

from calorie_tracker.domain.entries import Entry, MealType
from calorie_tracker.domain.errors import FormatError, InvalidInputError
from calorie_tracker.domain.foods import Food, FoodType
from calorie_tracker.services.records import (
    decode_entry,
    decode_food,
    encode_entry,
    encode_food,
)


def test_encode_food_uses_pipe_delimiter() -> None:
    food = Food(name="ramen", calories=400, food_type=FoodType.MEAL)

    assert encode_food(food) == "ramen | 400 | MEAL"


def test_encode_entry_writes_meal_label_and_iso_date() -> None:
    entry = Entry(
        meal=MealType.DINNER,
        food=Food(name="Chicken Rice", calories=325, food_type=FoodType.SNACK),
        day=date(2021, 10, 5),
    )

    assert encode_entry(entry) == "Dinner | Chicken Rice | 325 | 2021-10-05 | SNACK"


def test_decode_food_trims_fields() -> None:
    food = decode_food("  Iced Milo |150|  DRINK ")

    assert food == Food(name="Iced Milo", calories=150, food_type=FoodType.DRINK)


def test_decode_entry_parses_all_fields() -> None:
    entry = decode_entry("Breakfast | prata | 100 | 2021-10-25 | MEAL")

    assert entry.meal is MealType.BREAKFAST
    assert entry.food == Food(name="prata", calories=100, food_type=FoodType.MEAL)
    assert entry.day == date(2021, 10, 25)


@pytest.mark.parametrize(
    "line",
    [
        "ramen | 400",
        "ramen | 400 | MEAL | extra",
        "ramen | -5 | MEAL",
        "ramen | lots | MEAL",
        "ramen | 400 | DESSERT",
        " | 400 | MEAL",
        "ramen | 600.0 | MEAL",
        "ramen | 1_000 | MEAL",
        "ramen |   +5 | MEAL",
        "ramen | 400 | meal",
    ],
)
def test_decode_food_rejects_malformed_lines(line: str) -> None:
    with pytest.raises(FormatError) as exc_info:
        decode_food(line)

    assert exc_info.value.line == line


@pytest.mark.parametrize(
    "line",
    [
        "Dinner | rice | 800 | 2021-10-25",
        "Supper | rice | 800 | 2021-10-25 | MEAL",
        "Dinner | rice | 800 | 25/10/2021 | MEAL",
        "Dinner | rice | 800 | 2021-02-30 | MEAL",
        "Dinner | rice | -1 | 2021-10-25 | MEAL",
        "Dinner | rice | 800 | 0 | MEAL",
        "Dinner | rice | 800 | 1634169600 | MEAL",
        "Dinner | rice | 800 | 2021-10-25T00:00:00 | MEAL",
        "Dinner | rice | 800 | 2021-1-5 | MEAL",
        "Dinner | rice | 600.0 | 2021-10-25 | MEAL",
        "dinner | rice | 800 | 2021-10-25 | MEAL",
    ],
)
def test_decode_entry_rejects_malformed_lines(line: str) -> None:
    with pytest.raises(FormatError):
        decode_entry(line)


def test_iso_dates_sort_in_date_order() -> None:
    days = [date(2021, 12, 1), date(2021, 9, 30), date(2021, 10, 2)]

    assert sorted(day.isoformat() for day in days) == [
        day.isoformat() for day in sorted(days)
    ]


def test_food_rejects_negative_calories() -> None:
    with pytest.raises(InvalidInputError):
        Food(name="ramen", calories=-1, food_type=FoodType.MEAL)


def test_food_type_parse_rejects_unknown_token() -> None:
    with pytest.raises(InvalidInputError):
        FoodType.parse("dessert")


def test_meal_type_parse_uses_capitalized_labels() -> None:
    assert MealType.parse("Dinner") is MealType.DINNER
    with pytest.raises(InvalidInputError):
        MealType.parse("supper")

"""Domain models for the food database."""

from dataclasses import dataclass


@dataclass(frozen=True)
class BasicFood:
    """Leaf food with a fixed calorie value per serving."""

    id: str
    keywords: tuple[str, ...]
    calories: float


@dataclass(frozen=True)
class CompositeFood:
    """Food made of servings of other foods, referenced by id."""

    id: str
    keywords: tuple[str, ...]
    components: tuple[tuple[str, float], ...]


Food = BasicFood | CompositeFood


def describe_food(food: Food) -> str:
    """Return a short label such as ``basic food 'egg'``."""
    if isinstance(food, CompositeFood):
        return f"composite food '{food.id}'"
    return f"basic food '{food.id}'"


@dataclass(frozen=True)
class FoodListing:
    """Food with its resolved calories; None when its components form a cycle."""

    food: Food
    calories: float | None

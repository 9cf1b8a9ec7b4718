"""Food database store."""

from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import Protocol

from diet_manager.domain.foods import Food


class FoodRepository(Protocol):
    """Persistence interface for the food database."""

    def load(self) -> list[Food]:
        """Return all stored foods, or an empty list when nothing is stored."""

    def save(self, foods: list[Food]) -> None:
        """Replace the stored foods."""


@dataclass
class FoodStore:
    """In-memory food collection keyed by food id."""

    _foods: dict[str, Food] = field(default_factory=dict)

    @classmethod
    def from_foods(cls, foods: Iterable[Food]) -> "FoodStore":
        """Build a store, later duplicates replacing earlier ones."""
        store = cls()
        for food in foods:
            store.insert(food)
        return store

    def insert(self, food: Food) -> Food | None:
        """Upsert a food and return the entry it replaced, if any."""
        previous = self._foods.get(food.id)
        self._foods[food.id] = food
        return previous

    def remove(self, food_id: str) -> bool:
        """Remove a food by id; return True when it existed."""
        return self._foods.pop(food_id, None) is not None

    def lookup(self, food_id: str) -> Food | None:
        """Return a food by id, if present."""
        return self._foods.get(food_id)

    def search(self, keyword: str) -> list[Food]:
        """Return foods having any keyword that contains ``keyword``."""
        return [
            food
            for food in self._foods.values()
            if any(keyword in candidate for candidate in food.keywords)
        ]

    def foods(self) -> list[Food]:
        """Return all foods in insertion order."""
        return list(self._foods.values())

    def __contains__(self, food_id: object) -> bool:
        return food_id in self._foods

    def __len__(self) -> int:
        return len(self._foods)

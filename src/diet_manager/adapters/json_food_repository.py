"""JSON file repository for the food database."""

from dataclasses import dataclass
from pathlib import Path

from diet_manager.adapters.json_documents import (
    FOOD_COLLECTION,
    BasicFoodData,
    BasicFoodDocument,
    CompositeFoodData,
    CompositeFoodDocument,
    read_document,
    write_document,
)
from diet_manager.domain.foods import BasicFood, CompositeFood, Food
from diet_manager.services.foods import FoodRepository


@dataclass
class JsonFoodRepository(FoodRepository):
    """Stores foods as a JSON array of tagged records."""

    path: Path

    def load(self) -> list[Food]:
        """Return stored foods; a missing or corrupt file yields none."""
        documents = read_document(self.path, FOOD_COLLECTION)
        if documents is None:
            return []
        return [_parse_food(document) for document in documents]

    def save(self, foods: list[Food]) -> None:
        """Write all foods to the JSON file."""
        write_document(
            self.path, FOOD_COLLECTION, [_food_document(food) for food in foods]
        )


def _parse_food(document: BasicFoodDocument | CompositeFoodDocument) -> Food:
    if isinstance(document, CompositeFoodDocument):
        return CompositeFood(
            id=document.data.id,
            keywords=tuple(document.data.keywords),
            components=tuple(
                (component_id, servings)
                for component_id, servings in document.data.components
            ),
        )
    return BasicFood(
        id=document.data.id,
        keywords=tuple(document.data.keywords),
        calories=document.data.calories,
    )


def _food_document(food: Food) -> BasicFoodDocument | CompositeFoodDocument:
    if isinstance(food, CompositeFood):
        return CompositeFoodDocument(
            data=CompositeFoodData(
                id=food.id,
                keywords=list(food.keywords),
                components=list(food.components),
            )
        )
    return BasicFoodDocument(
        data=BasicFoodData(
            id=food.id, keywords=list(food.keywords), calories=food.calories
        )
    )

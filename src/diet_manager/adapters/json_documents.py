"""Pydantic models for the persisted JSON documents."""

import logging
from pathlib import Path
from typing import Annotated, Literal, TypeVar

from pydantic import BaseModel, Field, TypeAdapter, ValidationError

from diet_manager.domain.profile import ActivityLevel, Gender, TargetFormula

_logger = logging.getLogger(__name__)

T = TypeVar("T")


class BasicFoodData(BaseModel):
    """Basic food payload."""

    id: str
    keywords: list[str]
    calories: float


class CompositeFoodData(BaseModel):
    """Composite food payload with ``[component_id, servings]`` pairs."""

    id: str
    keywords: list[str]
    components: list[tuple[str, float]]


class BasicFoodDocument(BaseModel):
    """Tagged basic food record."""

    type: Literal["Basic"] = "Basic"
    data: BasicFoodData


class CompositeFoodDocument(BaseModel):
    """Tagged composite food record."""

    type: Literal["Composite"] = "Composite"
    data: CompositeFoodData


FoodDocument = Annotated[
    BasicFoodDocument | CompositeFoodDocument, Field(discriminator="type")
]


class LogEntryDocument(BaseModel):
    """Log entry record."""

    food_id: str
    servings: float


class ProfileDocument(BaseModel):
    """Profile record; enums are stored by variant name."""

    gender: Gender = Gender.MALE
    age: int = 30
    height_cm: float = 170.0
    weight_kg: float = 70.0
    activity_level: ActivityLevel = ActivityLevel.MODERATELY_ACTIVE
    target_formula: TargetFormula = TargetFormula.MIFFLIN_ST_JEOR
    daily_overrides: dict[str, float] = Field(default_factory=dict)


FOOD_COLLECTION: TypeAdapter[list[FoodDocument]] = TypeAdapter(list[FoodDocument])
LOG_DOCUMENT: TypeAdapter[dict[str, list[LogEntryDocument]]] = TypeAdapter(
    dict[str, list[LogEntryDocument]]
)
PROFILE_DOCUMENT: TypeAdapter[ProfileDocument] = TypeAdapter(ProfileDocument)


def read_document(path: Path, adapter: TypeAdapter[T]) -> T | None:
    """Parse a JSON document, returning None when missing or unreadable."""
    try:
        raw = path.read_bytes()
    except FileNotFoundError:
        return None
    except OSError:
        _logger.warning("Could not read %s, starting empty", path, exc_info=True)
        return None
    try:
        return adapter.validate_json(raw)
    except ValidationError as exc:
        _logger.warning(
            "Ignoring corrupt document %s (%s errors)", path, exc.error_count()
        )
        return None


def write_document(path: Path, adapter: TypeAdapter[T], value: T) -> None:
    """Serialize a document as indented JSON, creating parent directories."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(adapter.dump_json(value, indent=2))

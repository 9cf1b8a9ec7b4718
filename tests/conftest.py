"""Shared test fixtures."""

from dataclasses import dataclass, field
from pathlib import Path

import pytest

from diet_manager.config import Settings
from diet_manager.domain.foods import BasicFood, CompositeFood, Food
from diet_manager.domain.log import LogEntry
from diet_manager.domain.profile import Profile
from diet_manager.services.commands import Stores
from diet_manager.services.foods import FoodRepository, FoodStore
from diet_manager.services.log import LogRepository, LogStore
from diet_manager.services.profile import ProfileRepository
from diet_manager.services.session import DietSession

TODAY = "2024-03-01"


@dataclass
class InMemoryFoodRepository(FoodRepository):
    """In-memory food repository for tests."""

    foods: list[Food] = field(default_factory=list)
    saves: int = 0

    def load(self) -> list[Food]:
        return list(self.foods)

    def save(self, foods: list[Food]) -> None:
        self.foods = list(foods)
        self.saves += 1


@dataclass
class InMemoryLogRepository(LogRepository):
    """In-memory log repository for tests."""

    entries: dict[str, list[LogEntry]] = field(default_factory=dict)

    def load(self) -> dict[str, list[LogEntry]]:
        return {date: list(rows) for date, rows in self.entries.items()}

    def save(self, entries: dict[str, list[LogEntry]]) -> None:
        self.entries = {date: list(rows) for date, rows in entries.items()}


@dataclass
class InMemoryProfileRepository(ProfileRepository):
    """In-memory profile repository for tests."""

    profile: Profile = field(default_factory=Profile)

    def load(self) -> Profile:
        return self.profile

    def save(self, profile: Profile) -> None:
        self.profile = profile


def egg() -> BasicFood:
    return BasicFood(id="egg", keywords=("egg", "protein"), calories=70)


def omelet() -> CompositeFood:
    return CompositeFood(
        id="omelet", keywords=("omelet", "breakfast"), components=(("egg", 2),)
    )


@pytest.fixture
def settings(tmp_path: Path) -> Settings:
    return Settings(
        food_db_path=tmp_path / "food_db.json",
        log_path=tmp_path / "daily_log.json",
        profile_path=tmp_path / "profile.json",
    )


@pytest.fixture
def food_store() -> FoodStore:
    return FoodStore.from_foods([egg(), omelet()])


@pytest.fixture
def stores(food_store: FoodStore) -> Stores:
    return Stores(foods=food_store, log=LogStore())


@pytest.fixture
def food_repository() -> InMemoryFoodRepository:
    return InMemoryFoodRepository(foods=[egg(), omelet()])


@pytest.fixture
def log_repository() -> InMemoryLogRepository:
    return InMemoryLogRepository()


@pytest.fixture
def profile_repository() -> InMemoryProfileRepository:
    return InMemoryProfileRepository()


@pytest.fixture
def session(
    food_repository: InMemoryFoodRepository,
    log_repository: InMemoryLogRepository,
    profile_repository: InMemoryProfileRepository,
) -> DietSession:
    return DietSession.open(
        food_repository=food_repository,
        log_repository=log_repository,
        profile_repository=profile_repository,
        current_date=TODAY,
    )

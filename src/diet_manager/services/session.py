"""Session state and caller-side operations for the diet manager."""

import logging
import math
from dataclasses import dataclass, field, replace
from datetime import date as date_type

from diet_manager.domain.errors import CycleDetectedError
from diet_manager.domain.foods import BasicFood, CompositeFood, Food, FoodListing
from diet_manager.domain.log import DailySummary, LoggedItem
from diet_manager.domain.profile import Profile
from diet_manager.services.calories import resolve_calories
from diet_manager.services.commands import (
    AddFoodCommand,
    CommandManager,
    LogFoodCommand,
    RemoveLogEntryCommand,
    Stores,
)
from diet_manager.services.foods import FoodRepository, FoodStore
from diet_manager.services.log import LogRepository, LogStore
from diet_manager.services.profile import ProfileRepository, ProfileService

_logger = logging.getLogger(__name__)


@dataclass
class DietSession:
    """Owns the stores and the undo stack for one user session.

    All mutations of the food database and the log go through ``commands`` so
    that undo stays consistent; profile changes are not undoable.
    """

    food_repository: FoodRepository
    log_repository: LogRepository
    profile_repository: ProfileRepository
    current_date: str
    food_store: FoodStore = field(default_factory=FoodStore)
    log_store: LogStore = field(default_factory=LogStore)
    profile: Profile = field(default_factory=Profile)
    commands: CommandManager = field(default_factory=CommandManager)
    profile_service: ProfileService = field(default_factory=ProfileService)

    @classmethod
    def open(
        cls,
        food_repository: FoodRepository,
        log_repository: LogRepository,
        profile_repository: ProfileRepository,
        current_date: str | None = None,
    ) -> "DietSession":
        """Load all stores and start a session on ``current_date`` or today."""
        session = cls(
            food_repository=food_repository,
            log_repository=log_repository,
            profile_repository=profile_repository,
            current_date=_normalize_date(current_date),
            food_store=FoodStore.from_foods(food_repository.load()),
            log_store=LogStore.from_mapping(log_repository.load()),
            profile=profile_repository.load(),
        )
        _logger.info(
            "Session opened: foods=%s dates=%s",
            len(session.food_store),
            len(session.log_store.dates()),
        )
        return session

    @property
    def stores(self) -> Stores:
        return Stores(foods=self.food_store, log=self.log_store)

    def set_date(self, value: str) -> None:
        """Switch the current date; ``value`` must be ``YYYY-MM-DD``."""
        self.current_date = _normalize_date(value)

    def add_basic_food(
        self, food_id: str, keywords: list[str], calories: float
    ) -> bool:
        """Add a basic food; the id is always searchable as a keyword."""
        if not math.isfinite(calories) or calories < 0:
            _logger.info("Refusing calories %s for '%s'", calories, food_id)
            return False
        food = BasicFood(
            id=food_id, keywords=_with_id(food_id, keywords), calories=calories
        )
        return self.commands.execute(AddFoodCommand(food), self.stores)

    def add_composite_food(
        self,
        food_id: str,
        keywords: list[str],
        components: list[tuple[str, float]],
    ) -> bool:
        """Add a composite food made of servings of other foods."""
        if not all(math.isfinite(servings) for _, servings in components):
            _logger.info("Refusing non-finite servings for '%s'", food_id)
            return False
        food = CompositeFood(
            id=food_id,
            keywords=_with_id(food_id, keywords),
            components=tuple(components),
        )
        return self.commands.execute(AddFoodCommand(food), self.stores)

    def log_food(self, food_id: str, servings: float, date: str | None = None) -> bool:
        """Log servings of a known food on ``date`` or the current date."""
        if not math.isfinite(servings) or servings <= 0:
            _logger.info("Refusing %s serving(s) of '%s'", servings, food_id)
            return False
        if food_id not in self.food_store:
            _logger.info("Refusing to log unknown food '%s'", food_id)
            return False
        command = LogFoodCommand(
            date=date or self.current_date, food_id=food_id, servings=servings
        )
        return self.commands.execute(command, self.stores)

    def remove_log_entry(self, index: int, date: str | None = None) -> bool:
        """Remove the entry at a zero-based position from the log."""
        command = RemoveLogEntryCommand(date=date or self.current_date, index=index)
        return self.commands.execute(command, self.stores)

    def undo(self) -> str | None:
        """Undo the last command and return its description."""
        return self.commands.undo(self.stores)

    def history(self) -> list[str]:
        """Return executed command descriptions, oldest first."""
        return self.commands.history()

    def list_foods(self) -> list[FoodListing]:
        """Return every food with its resolved calories."""
        return [self._listing(food) for food in self.food_store.foods()]

    def search(self, keyword: str) -> list[FoodListing]:
        """Return foods matching ``keyword`` with their resolved calories."""
        return [self._listing(food) for food in self.food_store.search(keyword)]

    def entries(self, date: str | None = None) -> list[LoggedItem]:
        """Return the log for ``date`` with calories per entry."""
        day = date or self.current_date
        items: list[LoggedItem] = []
        for index, entry in enumerate(self.log_store.entries_for(day)):
            food = self.food_store.lookup(entry.food_id)
            calories = self._calories_or_none(food) if food is not None else 0.0
            items.append(
                LoggedItem(
                    index=index,
                    food_id=entry.food_id,
                    servings=entry.servings,
                    calories=(calories or 0.0) * entry.servings,
                )
            )
        return items

    def daily_summary(self, date: str | None = None) -> DailySummary:
        """Return consumed and target calories for ``date``."""
        day = date or self.current_date
        try:
            consumed = self.log_store.total_calories(day, self.food_store)
        except CycleDetectedError as exc:
            _logger.warning("Counting cyclic foods as zero on %s: %s", day, exc)
            consumed = sum(item.calories for item in self.entries(day))
        target = self.profile_service.daily_target(self.profile, day)
        return DailySummary(date=day, consumed=consumed, target=target)

    def update_profile(self, **changes: object) -> Profile:
        """Replace profile fields and return the updated profile."""
        self.profile = replace(self.profile, **changes)
        return self.profile

    def set_daily_override(self, target: float, date: str | None = None) -> None:
        """Override the calorie target for ``date``."""
        self.profile = self.profile_service.set_daily_override(
            self.profile, date or self.current_date, target
        )

    def remove_daily_override(self, date: str | None = None) -> None:
        """Drop the calorie target override for ``date``."""
        self.profile = self.profile_service.remove_daily_override(
            self.profile, date or self.current_date
        )

    def save(self) -> None:
        """Persist the food database, the log and the profile."""
        self.food_repository.save(self.food_store.foods())
        self.log_repository.save(self.log_store.as_dict())
        self.profile_repository.save(self.profile)
        _logger.info("Session saved: foods=%s", len(self.food_store))

    def _listing(self, food: Food) -> FoodListing:
        return FoodListing(food=food, calories=self._calories_or_none(food))

    def _calories_or_none(self, food: Food) -> float | None:
        try:
            return resolve_calories(food, self.food_store)
        except CycleDetectedError as exc:
            _logger.warning("%s", exc)
            return None


def _normalize_date(value: str | None) -> str:
    if value is None:
        return date_type.today().isoformat()
    return date_type.fromisoformat(value).isoformat()


def _with_id(food_id: str, keywords: list[str]) -> tuple[str, ...]:
    cleaned = [keyword for keyword in keywords if keyword]
    if food_id not in cleaned:
        cleaned.append(food_id)
    return tuple(cleaned)

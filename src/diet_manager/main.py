"""Interactive text menu for the diet manager."""

import logging
import math
from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum
from typing import TypeVar

from diet_manager.app_logging import configure_logging
from diet_manager.config import Settings, parse_keywords
from diet_manager.containers import build_container
from diet_manager.domain.foods import CompositeFood, FoodListing
from diet_manager.domain.profile import ActivityLevel, Gender, TargetFormula
from diet_manager.menu_commands import MenuCommand, menu_prompt, parse_menu_choice
from diet_manager.services.session import DietSession

BANNER = "-------------- Diet Manager --------------"
SEPARATOR = "-" * 60

_logger = logging.getLogger(__name__)

E = TypeVar("E", bound=Enum)


@dataclass
class Menu:
    """Reads menu choices and drives a diet session."""

    session: DietSession
    read: Callable[[str], str] = input
    write: Callable[[str], None] = print

    def run(self) -> None:
        """Loop until the user exits or input ends; always saves on exit."""
        self.write(BANNER)
        while True:
            self.write(SEPARATOR)
            self.write(f"Current date: {self.session.current_date}")
            try:
                command = parse_menu_choice(self.read(menu_prompt()))
                if command is None:
                    self.write("Unknown command.")
                    continue
                if command is MenuCommand.EXIT:
                    break
                self._handlers()[command]()
            except EOFError:
                break
        self.session.save()
        self.write("Data saved. Exiting.")

    def _handlers(self) -> dict[MenuCommand, Callable[[], None]]:
        return {
            MenuCommand.ADD_BASIC: self.add_basic,
            MenuCommand.ADD_COMPOSITE: self.add_composite,
            MenuCommand.LIST: self.list_foods,
            MenuCommand.SEARCH: self.search,
            MenuCommand.LOG_FOOD: self.log_food,
            MenuCommand.VIEW_LOG: self.view_log,
            MenuCommand.REMOVE_ENTRY: self.remove_entry,
            MenuCommand.UNDO: self.undo,
            MenuCommand.HISTORY: self.history,
            MenuCommand.CHANGE_DATE: self.change_date,
            MenuCommand.PROFILE: self.profile,
            MenuCommand.SAVE: self.save,
        }

    def add_basic(self) -> None:
        food_id = self._ask("Enter basic food identifier: ")
        if not food_id:
            self.write("Food identifier is required.")
            return
        keywords = parse_keywords(self._ask("Enter keywords (comma separated): "))
        calories = _to_float(self._ask("Enter calories per serving: "), 0.0)
        if calories is None or calories < 0:
            self.write("Calories must be a non-negative number.")
            return
        if self.session.add_basic_food(food_id, keywords, calories):
            self.write("Basic food added!")
        else:
            self.write(f"Food '{food_id}' already exists.")

    def add_composite(self) -> None:
        food_id = self._ask("Enter composite food identifier: ")
        if not food_id:
            self.write("Food identifier is required.")
            return
        keywords = parse_keywords(self._ask("Enter keywords (comma separated): "))
        count = _to_int(self._ask("Enter number of components: "), 0)
        components: list[tuple[str, float]] = []
        for _ in range(count):
            component_id = self._ask("Enter component food id: ")
            servings = _to_float(self._ask("Enter number of servings: "), 1.0)
            if self.session.food_store.lookup(component_id) is None:
                self.write(f"Component with id '{component_id}' not found. Skipping.")
                continue
            if servings is None or servings <= 0:
                self.write(f"Invalid servings for '{component_id}'. Skipping.")
                continue
            components.append((component_id, servings))
        if self.session.add_composite_food(food_id, keywords, components):
            self.write("Composite food added!")
        else:
            self.write(f"Food '{food_id}' already exists.")

    def list_foods(self) -> None:
        listings = self.session.list_foods()
        if not listings:
            self.write("The food database is empty.")
        for listing in listings:
            self.write(_format_listing(listing))

    def search(self) -> None:
        keyword = self._ask("Enter keyword to search: ")
        results = self.session.search(keyword)
        if not results:
            self.write("No food found with the provided keyword.")
        for listing in results:
            self.write(_format_listing(listing))

    def log_food(self) -> None:
        food_id = self._ask("Enter food identifier: ")
        servings = _to_float(self._ask("Enter number of servings: "), 1.0)
        if servings is None or servings <= 0:
            self.write("Servings must be positive.")
            return
        if self.session.log_food(food_id, servings):
            self.write(f"Logged {servings:.1f} serving(s) of '{food_id}'.")
        else:
            self.write(f"Food '{food_id}' not found.")

    def view_log(self) -> None:
        items = self.session.entries()
        if not items:
            self.write(f"No entries logged on {self.session.current_date}.")
        for item in items:
            self.write(
                f"#{item.index + 1} {item.food_id} x {item.servings:.1f} "
                f"= {item.calories:.1f} kcal"
            )
        summary = self.session.daily_summary()
        self.write(
            f"Consumed: {summary.consumed:.1f} kcal | Target: {summary.target:.1f} kcal"
            f" | Remaining: {summary.remaining:.1f} kcal"
        )

    def remove_entry(self) -> None:
        position = _to_int(self._ask("Enter entry number to remove: "), 0)
        if self.session.remove_log_entry(position - 1):
            self.write(f"Removed entry #{position}.")
        else:
            self.write(f"No entry #{position} on {self.session.current_date}.")

    def undo(self) -> None:
        description = self.session.undo()
        if description is None:
            self.write("Nothing to undo.")
        else:
            self.write(f"Undone: {description}")

    def history(self) -> None:
        descriptions = self.session.history()
        if not descriptions:
            self.write("No commands in history.")
        for number, description in enumerate(descriptions, start=1):
            self.write(f"{number}. {description}")

    def change_date(self) -> None:
        value = self._ask("Enter date (YYYY-MM-DD): ")
        try:
            self.session.set_date(value)
        except ValueError:
            self.write(f"Invalid date '{value}'.")
            return
        self.write(f"Current date set to {self.session.current_date}.")

    def profile(self) -> None:
        profile = self.session.profile
        self.write(
            f"Profile: {profile.gender.value}, {profile.age} years, "
            f"{profile.height_cm:.1f} cm, {profile.weight_kg:.1f} kg, "
            f"{profile.activity_level.value}, {profile.target_formula.value}"
        )
        if self._ask("Edit profile fields? (y/N): ").lower() == "y":
            self.edit_profile()
        summary = self.session.daily_summary()
        self.write(f"Target on {summary.date}: {summary.target:.1f} kcal")
        raw = self._ask("Enter target override (blank to keep, 'clear' to reset): ")
        if not raw:
            return
        if raw.lower() == "clear":
            self.session.remove_daily_override()
            self.write("Target override removed.")
            return
        target = _to_float(raw, -1.0)
        if target is None or target <= 0:
            self.write("Target must be a positive number.")
            return
        self.session.set_daily_override(target)
        self.write(f"Target on {self.session.current_date} set to {target:.1f} kcal.")

    def edit_profile(self) -> None:
        """Prompt for each profile field; blank or invalid input keeps it."""
        profile = self.session.profile
        changes: dict[str, object] = {
            "gender": self._ask_choice("Gender", Gender, profile.gender),
            "activity_level": self._ask_choice(
                "Activity level", ActivityLevel, profile.activity_level
            ),
            "target_formula": self._ask_choice(
                "Formula", TargetFormula, profile.target_formula
            ),
        }
        raw_age = self._ask(f"Age [{profile.age}]: ")
        age = _to_int(raw_age, profile.age) if raw_age else profile.age
        if age <= 0:
            self.write(f"Invalid age, keeping {profile.age}.")
            age = profile.age
        changes["age"] = age
        for name, label in (("height_cm", "Height (cm)"), ("weight_kg", "Weight (kg)")):
            current = getattr(profile, name)
            value = _to_float(self._ask(f"{label} [{current:g}]: "), current)
            if value is None or value <= 0:
                self.write(f"Invalid {label.lower()}, keeping {current:g}.")
                value = current
            changes[name] = value
        self.session.update_profile(**changes)
        self.write("Profile updated.")

    def save(self) -> None:
        self.session.save()
        self.write("Data saved.")

    def _ask_choice(self, label: str, options: type[E], current: E) -> E:
        names = "/".join(option.value for option in options)
        raw = self._ask(f"{label} ({names}) [{current.value}]: ")
        if not raw:
            return current
        for option in options:
            if option.value.lower() == raw.lower():
                return option
        self.write(f"Invalid {label.lower()}, keeping {current.value}.")
        return current

    def _ask(self, prompt: str) -> str:
        return self.read(prompt).strip()


def _format_listing(listing: FoodListing) -> str:
    food = listing.food
    if listing.calories is None:
        return f"Composite Food: {food.id} | Calories: cyclic components"
    if isinstance(food, CompositeFood):
        return f"Composite Food: {food.id} | Calories (computed): {listing.calories:g}"
    return f"Basic Food: {food.id} | Calories: {listing.calories:g}"


def _to_float(value: str, default: float) -> float | None:
    """Return ``default`` for blank input and None for anything non-finite."""
    if not value:
        return default
    try:
        number = float(value)
    except ValueError:
        return None
    return number if math.isfinite(number) else None


def _to_int(value: str, default: int) -> int:
    try:
        return int(value)
    except ValueError:
        return default


def main(
    settings: Settings | None = None,
    read: Callable[[str], str] = input,
    write: Callable[[str], None] = print,
) -> None:
    """Run the interactive diet manager."""
    resolved_settings = settings or Settings()
    configure_logging(resolved_settings.log_level)
    container = build_container(resolved_settings)
    _logger.debug("Environment: %s", resolved_settings.environment)
    Menu(container.session, read=read, write=write).run()


if __name__ == "__main__":
    main()

"""Interactive menu command configuration."""

from dataclasses import dataclass
from enum import Enum


@dataclass(frozen=True)
class MenuOption:
    """Declarative menu entry definition."""

    key: str
    name: str


class MenuCommand(Enum):
    """Enum of menu commands (single source of truth)."""

    ADD_BASIC = MenuOption("1", "add_basic")
    ADD_COMPOSITE = MenuOption("2", "add_composite")
    LIST = MenuOption("3", "list")
    SEARCH = MenuOption("4", "search")
    LOG_FOOD = MenuOption("5", "log_food")
    VIEW_LOG = MenuOption("6", "view_log")
    REMOVE_ENTRY = MenuOption("7", "remove_entry")
    UNDO = MenuOption("8", "undo")
    HISTORY = MenuOption("9", "history")
    CHANGE_DATE = MenuOption("10", "change_date")
    PROFILE = MenuOption("11", "profile")
    SAVE = MenuOption("12", "save")
    EXIT = MenuOption("13", "exit")


def menu_prompt() -> str:
    """Return the command prompt listing every menu entry."""
    options = ", ".join(
        f"{entry.value.key} {entry.value.name}" for entry in MenuCommand
    )
    return f"Enter command ({options}): "


def parse_menu_choice(raw: str) -> MenuCommand | None:
    """Return the command selected by number or name, if any."""
    choice = raw.strip()
    for entry in MenuCommand:
        if choice in {entry.value.key, entry.value.name}:
            return entry
    return None

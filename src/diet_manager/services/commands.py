"""Undoable commands over the food database and the daily log."""

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import Enum

from diet_manager.domain.errors import (
    CommandError,
    CommandStateError,
    DuplicateFoodError,
    NotFoundError,
    OutOfRangeError,
)
from diet_manager.domain.foods import Food, describe_food
from diet_manager.domain.log import LogEntry
from diet_manager.services.foods import FoodStore
from diet_manager.services.log import LogStore

_logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Stores:
    """The stores a command operates on, supplied at call time."""

    foods: FoodStore
    log: LogStore


class CommandState(Enum):
    """Lifecycle of a command."""

    CONSTRUCTED = "constructed"
    EXECUTED = "executed"
    UNDONE = "undone"


@dataclass
class Command(ABC):
    """A change that can be applied once and inverted once."""

    state: CommandState = field(default=CommandState.CONSTRUCTED, init=False)

    @property
    @abstractmethod
    def description(self) -> str:
        """Human-readable summary shown in the undo history."""

    @abstractmethod
    def _apply(self, stores: Stores) -> None:
        """Apply the change, raising CommandError when it cannot be applied."""

    @abstractmethod
    def _revert(self, stores: Stores) -> None:
        """Invert a previously applied change."""

    def execute(self, stores: Stores) -> None:
        """Apply the command; a rejected command stays constructed."""
        if self.state is not CommandState.CONSTRUCTED:
            raise CommandStateError(f"{self.description}: already {self.state.value}")
        self._apply(stores)
        self.state = CommandState.EXECUTED

    def undo(self, stores: Stores) -> None:
        """Invert the command; it counts as undone even if inversion fails."""
        if self.state is not CommandState.EXECUTED:
            raise CommandStateError(
                f"{self.description}: cannot undo, {self.state.value}"
            )
        try:
            self._revert(stores)
        finally:
            self.state = CommandState.UNDONE


@dataclass
class AddFoodCommand(Command):
    """Add a new food to the database."""

    food: Food

    @property
    def description(self) -> str:
        return f"Add {describe_food(self.food)}"

    def _apply(self, stores: Stores) -> None:
        if self.food.id in stores.foods:
            raise DuplicateFoodError(self.food.id)
        stores.foods.insert(self.food)

    def _revert(self, stores: Stores) -> None:
        if not stores.foods.remove(self.food.id):
            raise NotFoundError(f"Food '{self.food.id}' is no longer in the database")


@dataclass
class LogFoodCommand(Command):
    """Append servings of a food to a date's log."""

    date: str
    food_id: str
    servings: float
    _position: int | None = field(default=None, init=False, repr=False)

    @property
    def description(self) -> str:
        return (
            f"Log {self.servings:.1f} serving(s) of '{self.food_id}' on {self.date}"
        )

    def _apply(self, stores: Stores) -> None:
        self._position = len(stores.log.entries_for(self.date))
        stores.log.append(self.date, LogEntry(self.food_id, self.servings))

    def _revert(self, stores: Stores) -> None:
        entries = stores.log.entries_for(self.date)
        position = self._position
        if (
            position is None
            or position >= len(entries)
            or entries[position] != LogEntry(self.food_id, self.servings)
        ):
            raise NotFoundError(
                f"Logged entry for '{self.food_id}' on {self.date} has moved"
            )
        stores.log.remove_at(self.date, position)


@dataclass
class RemoveLogEntryCommand(Command):
    """Remove the entry at a position from a date's log.

    Undo appends the removed entry at the end of the date's entries rather
    than at its original position.
    """

    date: str
    index: int
    _removed: LogEntry | None = field(default=None, init=False, repr=False)

    @property
    def description(self) -> str:
        if self._removed is None:
            return f"Remove entry #{self.index + 1} from {self.date}"
        return (
            f"Remove entry #{self.index + 1} (food: '{self._removed.food_id}') "
            f"from {self.date}"
        )

    def _apply(self, stores: Stores) -> None:
        removed = stores.log.remove_at(self.date, self.index)
        if removed is None:
            size = len(stores.log.entries_for(self.date))
            raise OutOfRangeError(self.date, self.index, size)
        self._removed = removed

    def _revert(self, stores: Stores) -> None:
        if self._removed is None:
            raise NotFoundError(f"Nothing was removed from {self.date}")
        stores.log.append(self.date, self._removed)


@dataclass
class CommandManager:
    """Runs commands and keeps the executed ones on an undo stack."""

    _undo_stack: list[Command] = field(default_factory=list)

    def execute(self, command: Command, stores: Stores) -> bool:
        """Execute a command and push it on success."""
        try:
            command.execute(stores)
        except CommandError as exc:
            _logger.info("Command rejected: %s: %s", command.description, exc)
            return False
        self._undo_stack.append(command)
        _logger.debug("Command executed: %s", command.description)
        return True

    def undo(self, stores: Stores) -> str | None:
        """Undo the most recent command and return its description.

        Returns None only when there is nothing to undo. A command whose
        inversion fails is still dropped from the stack.
        """
        if not self._undo_stack:
            return None
        command = self._undo_stack.pop()
        description = command.description
        try:
            command.undo(stores)
        except CommandError as exc:
            _logger.warning("Undo failed: %s: %s", description, exc)
        else:
            _logger.debug("Command undone: %s", description)
        return description

    def history(self) -> list[str]:
        """Return command descriptions, oldest first."""
        return [command.description for command in self._undo_stack]

    def has_commands(self) -> bool:
        """Return True when there is something to undo."""
        return bool(self._undo_stack)

    def __len__(self) -> int:
        return len(self._undo_stack)

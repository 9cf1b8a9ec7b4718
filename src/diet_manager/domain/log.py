"""Domain models for the daily consumption log."""

from dataclasses import dataclass


@dataclass(frozen=True)
class LogEntry:
    """A number of servings of a food consumed on some date."""

    food_id: str
    servings: float


@dataclass(frozen=True)
class LoggedItem:
    """Log entry with its position and resolved calories."""

    index: int
    food_id: str
    servings: float
    calories: float


@dataclass(frozen=True)
class DailySummary:
    """Consumed versus target calories for a date."""

    date: str
    consumed: float
    target: float

    @property
    def remaining(self) -> float:
        return self.target - self.consumed

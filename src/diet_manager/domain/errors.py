"""Errors raised by the diet manager core."""


class DietManagerError(Exception):
    """Base class for diet manager errors."""


class CycleDetectedError(DietManagerError):
    """A composite food refers back to itself through its components."""

    def __init__(self, path: list[str]) -> None:
        self.path = path
        super().__init__(f"Composite food cycle detected: {' -> '.join(path)}")


class CommandError(DietManagerError):
    """A command could not be applied or inverted."""


class NotFoundError(CommandError):
    """The food or log entry a command targets no longer exists."""


class OutOfRangeError(CommandError):
    """A positional removal is past the bounds of the date's entries."""

    def __init__(self, date: str, index: int, size: int) -> None:
        self.date = date
        self.index = index
        self.size = size
        super().__init__(
            f"No log entry #{index + 1} on {date} ({size} entries logged)"
        )


class DuplicateFoodError(CommandError):
    """A food with the same id already exists."""

    def __init__(self, food_id: str) -> None:
        self.food_id = food_id
        super().__init__(f"Food '{food_id}' already exists")


class CommandStateError(DietManagerError):
    """A command was executed twice or undone before being executed."""

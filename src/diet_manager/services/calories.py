"""Calorie resolution for basic and composite foods."""

from dataclasses import dataclass

from diet_manager.domain.errors import CycleDetectedError
from diet_manager.domain.foods import BasicFood, CompositeFood, Food
from diet_manager.services.foods import FoodStore


@dataclass
class _Frame:
    food: CompositeFood
    index: int = 0
    total: float = 0.0


def resolve_calories(food: Food, store: FoodStore) -> float:
    """Return calories per serving of ``food``.

    Composite foods are resolved depth-first against ``store``. Components
    missing from the store contribute nothing. A component that is already
    being resolved further up the current path raises ``CycleDetectedError``.

    The traversal keeps an explicit stack instead of recursing, and memoizes
    each composite it finishes, so it visits every food at most once.
    """
    if isinstance(food, BasicFood):
        return food.calories

    resolved: dict[str, float] = {}
    stack = [_Frame(food)]
    on_path = {food.id}

    while stack:
        frame = stack[-1]
        if frame.index == len(frame.food.components):
            stack.pop()
            on_path.discard(frame.food.id)
            resolved[frame.food.id] = frame.total
            continue

        component_id, servings = frame.food.components[frame.index]
        if component_id in on_path:
            path = [entry.food.id for entry in stack]
            raise CycleDetectedError([*path, component_id])

        if component_id in resolved:
            frame.total += resolved[component_id] * servings
            frame.index += 1
            continue

        component = store.lookup(component_id)
        if component is None:
            frame.index += 1
        elif isinstance(component, BasicFood):
            frame.total += component.calories * servings
            frame.index += 1
        else:
            # Re-visit this component once the child frame has been resolved.
            stack.append(_Frame(component))
            on_path.add(component.id)

    return resolved[food.id]

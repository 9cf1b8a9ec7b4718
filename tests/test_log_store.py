"""Tests for the daily log store."""

import pytest

from diet_manager.domain.errors import CycleDetectedError
from diet_manager.domain.foods import CompositeFood
from diet_manager.domain.log import LogEntry
from diet_manager.services.foods import FoodStore
from diet_manager.services.log import LogStore

DAY = "2024-03-01"


def test_append_returns_position_and_remove_at_restores() -> None:
    store = LogStore()
    store.append(DAY, LogEntry("egg", 1))
    before = store.entries_for(DAY)

    position = store.append(DAY, LogEntry("omelet", 2))

    assert position == 1
    assert store.remove_at(DAY, position) == LogEntry("omelet", 2)
    assert store.entries_for(DAY) == before


def test_remove_at_shifts_later_entries() -> None:
    store = LogStore()
    for food_id in ("a", "b", "c"):
        store.append(DAY, LogEntry(food_id, 1))

    store.remove_at(DAY, 0)

    assert [entry.food_id for entry in store.entries_for(DAY)] == ["b", "c"]


def test_remove_at_out_of_range_is_noop() -> None:
    store = LogStore()
    store.append(DAY, LogEntry("egg", 1))

    assert store.remove_at(DAY, 1) is None
    assert store.remove_at(DAY, -1) is None
    assert store.remove_at("2024-03-02", 0) is None
    assert store.entries_for(DAY) == (LogEntry("egg", 1),)


def test_emptied_date_behaves_like_absent_date() -> None:
    store = LogStore()
    store.append(DAY, LogEntry("egg", 1))
    store.remove_at(DAY, 0)

    assert store.has_entries(DAY) is False
    assert store.entries_for(DAY) == ()
    assert store.dates() == []
    assert store.as_dict() == {}


def test_total_calories_skips_unknown_foods(food_store: FoodStore) -> None:
    store = LogStore()
    store.append(DAY, LogEntry("egg", 1.5))
    store.append(DAY, LogEntry("omelet", 1))
    store.append(DAY, LogEntry("ghost", 4))

    assert store.total_calories(DAY, food_store) == pytest.approx(245)
    assert store.total_calories("2024-03-02", food_store) == 0


def test_total_calories_propagates_cycles() -> None:
    loop = CompositeFood(id="loop", keywords=(), components=(("loop", 1),))
    store = LogStore()
    store.append(DAY, LogEntry("loop", 1))

    with pytest.raises(CycleDetectedError):
        store.total_calories(DAY, FoodStore.from_foods([loop]))


def test_from_mapping_drops_empty_dates() -> None:
    store = LogStore.from_mapping({DAY: [LogEntry("egg", 1)], "2024-03-02": []})

    assert store.dates() == [DAY]
    assert store.has_entries("2024-03-02") is False

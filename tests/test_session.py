"""Tests for the diet session."""

import pytest

from diet_manager.domain.foods import CompositeFood
from diet_manager.domain.log import LogEntry
from diet_manager.services.session import DietSession
from tests.conftest import (
    TODAY,
    InMemoryFoodRepository,
    InMemoryLogRepository,
    InMemoryProfileRepository,
)


def test_session_opens_stores_from_repositories(session: DietSession) -> None:
    assert session.current_date == TODAY
    assert session.food_store.lookup("omelet") is not None
    assert session.log_store.dates() == []


def test_add_basic_food_adds_id_as_keyword(session: DietSession) -> None:
    assert session.add_basic_food("toast", ["bread", ""], 80)

    toast = session.food_store.lookup("toast")
    assert toast is not None
    assert toast.keywords == ("bread", "toast")
    assert session.history() == ["Add basic food 'toast'"]


def test_add_composite_food_and_list_resolved_calories(session: DietSession) -> None:
    assert session.add_composite_food("double", [], [("omelet", 2), ("egg", 1)])

    listings = {listing.food.id: listing.calories for listing in session.list_foods()}
    assert listings == {"egg": 70, "omelet": 140, "double": 350}


def test_log_food_rejects_unknown_food(session: DietSession) -> None:
    assert session.log_food("ghost", 1) is False
    assert session.history() == []


def test_daily_summary_uses_profile_target(session: DietSession) -> None:
    session.log_food("egg", 2)
    session.log_food("omelet", 1)
    session.set_daily_override(2000)

    summary = session.daily_summary()

    assert summary.consumed == 280
    assert summary.target == 2000
    assert summary.remaining == 1720


def test_entries_and_remove_then_undo(session: DietSession) -> None:
    session.log_food("egg", 2)
    session.log_food("omelet", 1)

    assert session.remove_log_entry(0)
    assert [item.food_id for item in session.entries()] == ["omelet"]
    assert session.undo() == "Remove entry #1 (food: 'egg') from 2024-03-01"

    items = session.entries()
    assert [(item.index, item.food_id, item.calories) for item in items] == [
        (0, "omelet", 140),
        (1, "egg", 140),
    ]


def test_remove_out_of_range_fails(session: DietSession) -> None:
    assert session.remove_log_entry(3) is False
    assert session.history() == []


def test_cyclic_foods_count_as_zero(session: DietSession) -> None:
    session.add_composite_food("a", [], [("egg", 1), ("b", 1)])
    session.add_composite_food("b", [], [("a", 1)])
    session.log_food("a", 1)
    session.log_food("egg", 1)

    listings = {listing.food.id: listing.calories for listing in session.search("a")}
    assert listings["a"] is None
    assert session.daily_summary().consumed == 70


def test_set_date_validates_format(session: DietSession) -> None:
    session.set_date("2024-03-05")
    assert session.current_date == "2024-03-05"

    with pytest.raises(ValueError):
        session.set_date("03/05/2024")
    assert session.current_date == "2024-03-05"


def test_save_writes_all_repositories(
    session: DietSession,
    food_repository: InMemoryFoodRepository,
    log_repository: InMemoryLogRepository,
    profile_repository: InMemoryProfileRepository,
) -> None:
    session.add_composite_food("brunch", ["meal"], [("omelet", 1)])
    session.log_food("brunch", 1)
    session.update_profile(age=45)

    session.save()

    assert food_repository.foods[-1] == CompositeFood(
        id="brunch", keywords=("meal", "brunch"), components=(("omelet", 1),)
    )
    assert log_repository.entries == {TODAY: [LogEntry("brunch", 1)]}
    assert profile_repository.profile.age == 45


def test_non_finite_numbers_are_rejected(session: DietSession) -> None:
    assert session.add_basic_food("cake", [], float("inf")) is False
    assert session.add_basic_food("air", [], -1) is False
    assert session.add_composite_food("soup", [], [("egg", float("nan"))]) is False
    assert session.log_food("egg", float("nan")) is False
    assert session.log_food("egg", 0) is False

    assert session.history() == []
    assert session.food_store.lookup("cake") is None


def test_open_normalizes_and_validates_current_date(
    food_repository: InMemoryFoodRepository,
    log_repository: InMemoryLogRepository,
    profile_repository: InMemoryProfileRepository,
) -> None:
    opened = DietSession.open(
        food_repository, log_repository, profile_repository, current_date="20240301"
    )
    assert opened.current_date == "2024-03-01"

    with pytest.raises(ValueError):
        DietSession.open(
            food_repository, log_repository, profile_repository, current_date="bad"
        )

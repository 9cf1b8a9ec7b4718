"""Tests for menu command definitions."""

from diet_manager.menu_commands import MenuCommand, menu_prompt, parse_menu_choice


def test_menu_prompt_lists_every_command() -> None:
    prompt = menu_prompt()

    assert "1 add_basic" in prompt
    assert "13 exit" in prompt
    assert prompt.count(",") == len(list(MenuCommand)) - 1


def test_parse_menu_choice_accepts_number_or_name() -> None:
    assert parse_menu_choice(" 8 ") is MenuCommand.UNDO
    assert parse_menu_choice("search") is MenuCommand.SEARCH
    assert parse_menu_choice("99") is None

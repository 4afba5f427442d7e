from __future__ import annotations

from slate_ecosystem.core.keys import normalize_key, read_by_normalized_key, to_string_value


def test_normalize_key_collapses_spelling_variants() -> None:
    assert normalize_key("playerName") == "playername"
    assert normalize_key("player_name") == "playername"
    assert normalize_key("Player Name") == "playername"


def test_read_by_normalized_key_tries_keys_in_order() -> None:
    entry = {"Injury_Status": "Out", "PlayerName": "Jalen Brunson"}

    assert read_by_normalized_key(entry, ["status", "injurystatus"]) == "Out"
    assert read_by_normalized_key(entry, ["name", "player_name"]) == "Jalen Brunson"
    assert read_by_normalized_key(entry, ["team"]) is None


def test_read_by_normalized_key_returns_falsy_values() -> None:
    assert read_by_normalized_key({"questionable": False}, ["isQuestionable", "questionable"]) is False


def test_read_by_normalized_key_ignores_non_mappings() -> None:
    assert read_by_normalized_key(None, ["name"]) is None
    assert read_by_normalized_key(["name"], ["name"]) is None


def test_to_string_value_unwraps_nested_labels() -> None:
    assert to_string_value({"status": {"label": " Questionable "}}) == "Questionable"
    assert to_string_value(7) == "7"
    assert to_string_value(None) == ""
    assert to_string_value([1, 2]) == ""

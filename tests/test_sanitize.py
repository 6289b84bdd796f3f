"""Tests for parameter sanitizing."""

from spotify_web.request.sanitize import is_blank, sanitize_parameters


def test_blank_strings_removed() -> None:
    """Empty and whitespace-only strings are dropped."""
    result = sanitize_parameters({"market": "", "locale": "   ", "q": "\t\n", "limit": 20})
    assert result == {"limit": 20}


def test_non_string_values_kept() -> None:
    """None, numbers, booleans, lists and dicts pass through unchanged."""
    params = {"a": None, "b": 0, "c": False, "d": [], "e": {}, "f": 1.5, "g": ["x", ""]}
    assert sanitize_parameters(params) == params


def test_non_blank_strings_kept_verbatim() -> None:
    """Strings with content are not stripped."""
    assert sanitize_parameters({"q": "  abba  "}) == {"q": "  abba  "}


def test_key_order_preserved() -> None:
    """Surviving keys keep their original order."""
    result = sanitize_parameters({"z": 1, "market": "", "a": 2, "m": "x"})
    assert list(result) == ["z", "a", "m"]


def test_idempotent() -> None:
    """Sanitizing twice equals sanitizing once."""
    params = {"market": "", "limit": 20, "offset": None, "q": " "}
    once = sanitize_parameters(params)
    assert sanitize_parameters(once) == once


def test_input_not_mutated() -> None:
    """A new mapping is returned; the input is left alone."""
    params = {"market": "", "limit": 20}
    sanitize_parameters(params)
    assert params == {"market": "", "limit": 20}


def test_is_blank() -> None:
    assert is_blank("")
    assert is_blank("  ")
    assert not is_blank("x")
    assert not is_blank(None)
    assert not is_blank(0)

"""Removal of semantically-empty parameter values before encoding."""

from collections.abc import Mapping
from typing import Any


def is_blank(value: object) -> bool:
    """Return True for strings that are empty or whitespace only."""
    return isinstance(value, str) and not value.strip()


def sanitize_parameters(parameters: Mapping[str, Any]) -> dict[str, Any]:
    """Return a copy of *parameters* without blank string values.

    Optional arguments are passed around as ``""`` or ``None``; blank strings
    must never reach the wire as ``key=``. Only strings are inspected:
    ``None``, numbers, booleans, lists and dicts are kept as they are.
    """
    return {key: value for key, value in parameters.items() if not is_blank(value)}

"""Boundary between raw inputs and the JSON value model.

Text (or UTF-8 bytes) is parsed with the standard ``json`` module; any other
input is taken as an already-parsed tree and checked node by node.
"""

from __future__ import annotations

import json
from typing import Any

from json_pattern_match.exceptions import JsonParseError
from json_pattern_match.tree.nodes import validate_tree

__all__ = ["load_document"]


def load_document(value: Any, side: str) -> Any:
    """Return the parsed JSON tree for one side of a match.

    Args:
        value: JSON text, UTF-8 bytes, or a pre-parsed tree.
        side:  ``"pattern"`` or ``"actual"``, used in error messages.

    Raises:
        JsonParseError: If text input is not valid JSON.
        TypeError: If a pre-parsed tree contains non-JSON values.
    """
    if isinstance(value, (bytes, bytearray)):
        try:
            value = value.decode("utf-8")
        except UnicodeDecodeError as exc:
            raise JsonParseError(side, repr(value[:200]), exc) from exc

    if isinstance(value, str):
        try:
            return json.loads(value)
        except json.JSONDecodeError as exc:
            raise JsonParseError(side, value, exc) from exc

    validate_tree(value)
    return value

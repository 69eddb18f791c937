"""ValueKind and PatternToken StrEnums for the JSON value model.

JSON documents are handled as the native Python values a JSON parser
produces (dict, list, str, int, float, bool, None).  This module provides
the kind classification used for type-mismatch detection and the one-time
classification of the reserved ``"..."`` pattern token by position.
"""

from __future__ import annotations

import math
from enum import StrEnum, auto
from typing import Any

__all__ = [
    "WILDCARD",
    "JsonValue",
    "NodePosition",
    "PatternToken",
    "ValueKind",
    "classify_pattern",
    "kind_of",
    "scalar_equals",
    "validate_tree",
]

# Reserved literal; its meaning depends on where it appears in a pattern.
WILDCARD = "..."

# Type alias for valid JSON values
JsonValue = dict[str, Any] | list[Any] | str | int | float | bool | None


class ValueKind(StrEnum):
    """The six kinds of JSON value.

    StrEnum values are the lowercased member names:
    - NULL    -> "null"
    - BOOLEAN -> "boolean"
    - NUMBER  -> "number"
    - STRING  -> "string"
    - ARRAY   -> "array"
    - OBJECT  -> "object"
    """

    NULL = auto()
    BOOLEAN = auto()
    NUMBER = auto()
    STRING = auto()
    ARRAY = auto()
    OBJECT = auto()

    @property
    def is_container(self) -> bool:
        return self in (ValueKind.ARRAY, ValueKind.OBJECT)


class NodePosition(StrEnum):
    """Syntactic position of a pattern node within its parent."""

    VALUE = auto()
    ARRAY_ELEMENT = auto()
    OBJECT_KEY = auto()


class PatternToken(StrEnum):
    """Meaning of a pattern node after reserved-token classification.

    - LITERAL:         ordinary JSON content, compared as-is.
    - VALUE_WILDCARD:  ``"..."`` as a whole value; matches anything.
    - ARRAY_WILDCARD:  ``"..."`` as the final array element; allows extra elements.
    - OBJECT_WILDCARD: ``"...": "..."`` entry; allows extra properties.
    """

    LITERAL = auto()
    VALUE_WILDCARD = auto()
    ARRAY_WILDCARD = auto()
    OBJECT_WILDCARD = auto()


def kind_of(value: Any) -> ValueKind:
    """Return the ValueKind of a JSON value.

    Raises:
        TypeError: If value is not a valid JSON type.
    """
    # bool MUST be checked before int, bool subclasses int in Python
    if value is None:
        return ValueKind.NULL
    if isinstance(value, bool):
        return ValueKind.BOOLEAN
    if isinstance(value, (int, float)):
        return ValueKind.NUMBER
    if isinstance(value, str):
        return ValueKind.STRING
    if isinstance(value, list):
        return ValueKind.ARRAY
    if isinstance(value, dict):
        return ValueKind.OBJECT
    raise TypeError(f"Unsupported JSON value type: {type(value)!r}")


def classify_pattern(
    value: Any, position: NodePosition = NodePosition.VALUE
) -> PatternToken:
    """Classify a pattern node once, before generic comparison dispatch.

    Args:
        value:    The pattern node.  For ``OBJECT_KEY`` this is the
                  ``(key, value)`` pair of the entry.
        position: Where the node sits in its parent.

    Returns:
        The PatternToken for the node.  Non-wildcard content is LITERAL.
    """
    if position == NodePosition.OBJECT_KEY:
        key, entry_value = value
        if key == WILDCARD and entry_value == WILDCARD:
            return PatternToken.OBJECT_WILDCARD
        return PatternToken.LITERAL

    if not (isinstance(value, str) and value == WILDCARD):
        return PatternToken.LITERAL
    if position == NodePosition.ARRAY_ELEMENT:
        return PatternToken.ARRAY_WILDCARD
    return PatternToken.VALUE_WILDCARD


def scalar_equals(left: Any, right: Any) -> bool:
    """Compare two scalars of the same kind.

    Numbers compare by numeric value (``1 == 1.0``); everything else by
    equality.  Callers check kinds first, so ``True`` never meets ``1`` here.
    NaN (accepted by the stdlib parser) equals NaN so that a document
    always matches itself.
    """
    if isinstance(left, float) and isinstance(right, float):
        if math.isnan(left) and math.isnan(right):
            return True
    return bool(left == right)


def validate_tree(value: Any) -> None:
    """Check that every node of a pre-built tree is a JSON value.

    Containers may be shared between branches, but a container must not
    contain itself.

    Raises:
        TypeError: On the first non-JSON node, a non-string object key, or a
            reference cycle.
    """
    # Entries are (node, leaving); ``leaving`` pops a container off the descent
    on_descent: set[int] = set()
    stack: list[tuple[Any, bool]] = [(value, False)]
    while stack:
        node, leaving = stack.pop()
        if leaving:
            on_descent.discard(id(node))
            continue
        kind = kind_of(node)
        if not kind.is_container:
            continue
        if id(node) in on_descent:
            raise TypeError("JSON trees must be acyclic")
        on_descent.add(id(node))
        stack.append((node, True))
        if kind == ValueKind.ARRAY:
            stack.extend((child, False) for child in node)
        else:
            for key, child in node.items():
                if not isinstance(key, str):
                    raise TypeError(f"JSON object keys must be strings, got {key!r}")
                stack.append((child, False))

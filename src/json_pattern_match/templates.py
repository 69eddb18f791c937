"""Template resolution for pattern documents.

Pattern strings may contain ``{{name}}`` placeholders that are filled from a
caller-supplied scope before matching::

    resolve_templates({"url": "{{base}}/users"}, {"base": "https://x.io"})
    # {"url": "https://x.io/users"}

Resolution is lenient: a name missing from the scope becomes the empty
string, and the difference surfaces later as an ordinary value mismatch.
Without a scope (``None``) placeholders are left untouched.
"""

from __future__ import annotations

import dataclasses
import inspect
import json
import re
from collections.abc import Mapping
from typing import Any

__all__ = ["PLACEHOLDER", "flatten_scope", "resolve_string", "resolve_templates"]

PLACEHOLDER = re.compile(r"\{\{\s*([^{}\s]+)\s*\}\}")


def _potentially_template(text: str) -> bool:
    return "{{" in text and "}}" in text


def _expand(text: str, scope: Mapping[str, str], active: frozenset[str]) -> str:
    def replace(match: re.Match[str]) -> str:
        name = match.group(1)
        if name in active:
            return ""
        value = scope.get(name, "")
        if not _potentially_template(value):
            return value
        return _expand(value, scope, active | {name})

    return PLACEHOLDER.sub(replace, text)


def resolve_string(text: str, scope: Mapping[str, str]) -> str:
    """Replace every placeholder in ``text``.

    Placeholders inside inserted values are expanded too.  A name that is
    already being expanded resolves to the empty string, so
    ``{"x": "{{x}}"}`` terminates.  The result never contains a placeholder,
    which makes resolution idempotent.
    """
    if not _potentially_template(text):
        return text
    resolved = _expand(text, scope, frozenset())
    # Adjacent values can form a new placeholder, e.g. "{" + "{x}}"
    while PLACEHOLDER.search(resolved):
        resolved = PLACEHOLDER.sub("", resolved)
    return resolved


def resolve_templates(pattern: Any, scope: Mapping[str, str] | None) -> Any:
    """Return a copy of ``pattern`` with placeholders in string values resolved.

    Object keys are never rewritten.  The input tree is not mutated.

    Args:
        pattern: Parsed pattern document.
        scope:   Placeholder values, or None to skip resolution entirely.

    Returns:
        The resolved pattern (the same object when ``scope`` is None).
    """
    if scope is None:
        return pattern
    return _resolve(pattern, scope)


def _resolve(node: Any, scope: Mapping[str, str]) -> Any:
    if isinstance(node, str):
        return resolve_string(node, scope)
    if isinstance(node, dict):
        return {key: _resolve(value, scope) for key, value in node.items()}
    if isinstance(node, list):
        return [_resolve(item, scope) for item in node]
    return node


# ----------------------------------------------------------------------
# Scope flattening
# ----------------------------------------------------------------------


def _stringify(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return json.dumps(value)
    return str(value)


def flatten_scope(scope: Any) -> dict[str, str] | None:
    """Flatten a scope object into a ``name -> string`` mapping.

    Accepts None, any Mapping, a dataclass instance, or an arbitrary object
    whose public attributes and properties become the entries.

    Returns:
        The flattened mapping, or None when ``scope`` is None.
    """
    if scope is None:
        return None
    if isinstance(scope, Mapping):
        return {str(key): _stringify(value) for key, value in scope.items()}
    if dataclasses.is_dataclass(scope) and not isinstance(scope, type):
        return {
            f.name: _stringify(getattr(scope, f.name))
            for f in dataclasses.fields(scope)
        }

    flattened: dict[str, str] = {}
    for name, value in inspect.getmembers(scope):
        if name.startswith("_") or callable(value):
            continue
        flattened[name] = _stringify(value)
    return flattened

"""JsonPattern: an equality matcher for plain ``assert`` statements.

``JsonPattern`` compares equal to any document that matches its pattern, so
it can be used directly or nested inside larger expected values::

    assert response.json() == JsonPattern({"id": "...", "name": "Alice"})
    assert calls == [JsonPattern('{"op": "create", "...": "..."}'), "done"]

When used under pytest, the plugin's ``pytest_assertrepr_compare`` hook
prints the mismatch report for a failed comparison.
"""

from __future__ import annotations

from typing import Any

from json_pattern_match.algorithm.config import MatchConfig
from json_pattern_match.api import compare_json
from json_pattern_match.exceptions import JsonParseError
from json_pattern_match.parsing import load_document

__all__ = ["JsonPattern", "matches_json"]


class JsonPattern:
    """Equality matcher wrapping a pattern, a template scope and a config.

    The pattern is parsed eagerly so that invalid pattern text fails at
    construction time, not at comparison time.
    """

    __hash__ = None  # type: ignore[assignment]

    def __init__(
        self,
        pattern: Any,
        scope: Any = None,
        config: MatchConfig | None = None,
    ) -> None:
        load_document(pattern, "pattern")
        self.pattern = pattern
        self.scope = scope
        self.config = config

    def __eq__(self, other: object) -> bool:
        try:
            return compare_json(
                self.pattern, other, scope=self.scope, config=self.config
            ).matched
        except (TypeError, JsonParseError):
            # ``other`` is not a JSON document
            return False

    def __repr__(self) -> str:
        return f"JsonPattern({self.pattern!r})"

    def describe_mismatch(self, actual: Any) -> str | None:
        """Return the mismatch report for ``actual``, or None if it matches."""
        result = compare_json(self.pattern, actual, scope=self.scope, config=self.config)
        return result.report()


def matches_json(pattern: Any, scope: Any = None) -> JsonPattern:
    """Shorthand for ``JsonPattern(pattern, scope)``."""
    return JsonPattern(pattern, scope=scope)

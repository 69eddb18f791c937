"""pytest plugin for json-pattern-match.

Auto-discovered by pytest via the pytest11 entry point declared in pyproject.toml.
When the package is installed (even in editable mode), pytest discovers this plugin
automatically -- no conftest.py changes are needed.

Provides:
- ``assert_json_matches`` fixture returning the assertion function.
- ``pytest_assertrepr_compare`` hook that explains failed ``== JsonPattern(...)``
  comparisons with the full mismatch report.

Source: https://docs.pytest.org/en/stable/how-to/writing_plugins.html
"""

from __future__ import annotations

from typing import Any

import pytest

from json_pattern_match.api import assert_json_matches as _assert_json_matches
from json_pattern_match.integrations._pattern import JsonPattern


@pytest.fixture(scope="session")
def assert_json_matches() -> Any:
    """Fixture that returns the JSON pattern asserter.

    The fixture is session-scoped because the returned callable is stateless
    (every call parses, resolves and matches from scratch).

    Usage in tests::

        def test_user(assert_json_matches):
            assert_json_matches('{"id": "...", "name": "Alice"}', response_text)

        def test_extra_field(assert_json_matches):
            with pytest.raises(AssertionError, match=r"Unexpected properties"):
                assert_json_matches({"a": 1}, {"a": 1, "b": 2})

    Returns:
        ``assert_json_matches(pattern, actual, scope=None, reason=None,
        array_mode=None, config=None) -> None``.
    """
    return _assert_json_matches


def pytest_assertrepr_compare(config: Any, op: str, left: Any, right: Any) -> list[str] | None:
    """Explain a failed ``actual == JsonPattern(...)`` comparison."""
    if op != "==":
        return None
    if isinstance(right, JsonPattern):
        pattern, actual = right, left
    elif isinstance(left, JsonPattern):
        pattern, actual = left, right
    else:
        return None

    try:
        report = pattern.describe_mismatch(actual)
    except (TypeError, ValueError) as exc:
        return [f"{pattern!r} cannot match {type(actual).__name__}:", f"  {exc}"]
    if report is None:
        return None
    return [f"document does not match {pattern!r}", *report.splitlines()]

"""Public API functions for json-pattern-match.

This module provides the user-facing functions: assert_json_matches,
assert_json_matches_any_order, compare_json and is_matching_json.  Each call
parses its inputs, resolves templates and runs a fresh PatternMatcher, so no
state is shared between calls.
"""

from __future__ import annotations

import dataclasses
import logging
import time
from typing import Any

from json_pattern_match.algorithm.config import ArrayMode, MatchConfig
from json_pattern_match.algorithm.engine import find_mismatches
from json_pattern_match.exceptions import JsonMatchError
from json_pattern_match.parsing import load_document
from json_pattern_match.result import MatchResult
from json_pattern_match.templates import flatten_scope, resolve_templates

__all__ = [
    "assert_json_matches",
    "assert_json_matches_any_order",
    "compare_json",
    "is_matching_json",
]

logger = logging.getLogger(__name__)


def _effective_config(
    config: MatchConfig | None, array_mode: ArrayMode | None
) -> MatchConfig:
    config = config if config is not None else MatchConfig()
    if array_mode is not None and array_mode != config.array_mode:
        config = dataclasses.replace(config, array_mode=array_mode)
    return config


def compare_json(
    pattern: Any,
    actual: Any,
    scope: Any = None,
    config: MatchConfig | None = None,
) -> MatchResult:
    """Match a document against a pattern and return every mismatch.

    Args:
        pattern: Pattern as JSON text or a parsed tree.
        actual:  Actual document as JSON text or a parsed tree.
        scope:   Template scope: None (no substitution), a mapping, or an
                 object whose public attributes are used.
        config:  Matching parameters.  Defaults to ``MatchConfig()``.

    Returns:
        A ``MatchResult``; ``result.matched`` is True when nothing differs.

    Raises:
        JsonParseError: If pattern or actual text is not valid JSON.
    """
    config = config if config is not None else MatchConfig()
    t0 = time.perf_counter()

    pattern_tree = load_document(pattern, "pattern")
    actual_tree = load_document(actual, "actual")
    resolved = resolve_templates(pattern_tree, flatten_scope(scope))

    mismatches = find_mismatches(resolved, actual_tree, config)

    elapsed_ms = (time.perf_counter() - t0) * 1000.0
    return MatchResult(
        mismatches=mismatches,
        pattern=resolved,
        actual=actual_tree,
        computation_time_ms=elapsed_ms,
    )


def is_matching_json(
    pattern: Any,
    actual: Any,
    scope: Any = None,
    config: MatchConfig | None = None,
) -> bool:
    """Return True if ``actual`` matches ``pattern``."""
    return compare_json(pattern, actual, scope=scope, config=config).matched


def assert_json_matches(
    pattern: Any,
    actual: Any,
    scope: Any = None,
    reason: str | None = None,
    array_mode: ArrayMode | None = None,
    config: MatchConfig | None = None,
) -> None:
    """Assert that ``actual`` matches ``pattern``.

    Args:
        pattern:    Pattern as JSON text or a parsed tree.
        actual:     Actual document as JSON text or a parsed tree.
        scope:      Template scope (see ``compare_json``).
        reason:     Custom message placed before the generated report.
        array_mode: Overrides ``config.array_mode`` when given.
        config:     Matching parameters.  Defaults to ``MatchConfig()``.

    Raises:
        JsonMatchError: An ``AssertionError`` whose message is the mismatch
            report, when at least one mismatch was found.
        JsonParseError: If pattern or actual text is not valid JSON.
    """
    config = _effective_config(config, array_mode)
    result = compare_json(pattern, actual, scope=scope, config=config)
    if result.matched:
        return

    logger.debug(
        "Pattern match failed with %d mismatches in %.2f ms",
        len(result.mismatches),
        result.computation_time_ms,
    )
    message = result.report(
        reason,
        include_documents=config.include_documents,
        max_document_chars=config.max_document_chars,
    )
    raise JsonMatchError(message or "", result.mismatches)


def assert_json_matches_any_order(
    pattern: Any,
    actual: Any,
    scope: Any = None,
    reason: str | None = None,
    config: MatchConfig | None = None,
) -> None:
    """Like ``assert_json_matches`` but compares every array in any order."""
    assert_json_matches(
        pattern,
        actual,
        scope=scope,
        reason=reason,
        array_mode=ArrayMode.ANY_ORDER,
        config=config,
    )

"""PatternMatcher: recursive structural matching of a JSON pattern.

Traverses a (template-resolved) pattern and an actual document
simultaneously and records every discrepancy into a sink instead of
failing fast.

Architecture:
- Value wildcard: ``"..."`` as a whole value matches anything; recursion stops.
- Scalars:  Same ValueKind and equal value, else TYPE_MISMATCH / VALUE_MISMATCH.
- Objects:  Required keys recurse, missing keys are MISSING_PROPERTY, extra
            keys are UNEXPECTED_PROPERTY unless the ``"...": "..."`` entry is present.
- Arrays:   POSITIONAL pairs by index with an optional trailing ``"..."``;
            ANY_ORDER pairs by maximum bipartite assignment (see ``matcher``).

Pattern nodes are classified once per node via ``classify_pattern`` before
dispatch, so the reserved token is never re-detected inside the branches.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from json_pattern_match.algorithm.config import ArrayMode, MatchConfig
from json_pattern_match.algorithm.matcher import assign
from json_pattern_match.paths import JsonPath
from json_pattern_match.reporting import (
    MismatchCollector,
    MismatchCounter,
    MismatchKind,
    describe_value,
)
from json_pattern_match.tree.nodes import (
    NodePosition,
    PatternToken,
    ValueKind,
    classify_pattern,
    kind_of,
    scalar_equals,
)

if TYPE_CHECKING:
    from json_pattern_match.reporting import MismatchRecord, MismatchSink

__all__ = ["PatternMatcher", "find_mismatches"]

logger = logging.getLogger(__name__)


def _split_array_wildcard(pattern: list[Any]) -> tuple[list[Any], bool]:
    """Return ``(fixed_elements, has_wildcard)`` for a pattern array."""
    if pattern and classify_pattern(pattern[-1], NodePosition.ARRAY_ELEMENT) == (
        PatternToken.ARRAY_WILDCARD
    ):
        return pattern[:-1], True
    return pattern, False


def _split_object_wildcard(pattern: dict[str, Any]) -> tuple[dict[str, Any], bool]:
    """Return ``(required_entries, has_wildcard)`` for a pattern object."""
    required: dict[str, Any] = {}
    wildcard = False
    for key, value in pattern.items():
        token = classify_pattern((key, value), NodePosition.OBJECT_KEY)
        if token == PatternToken.OBJECT_WILDCARD:
            wildcard = True
        else:
            required[key] = value
    return required, wildcard


class PatternMatcher:
    """Recursive matcher for JSON patterns with wildcards.

    The matcher holds configuration only; all per-call state (path, sink)
    is passed down the recursion, so one instance can serve concurrent calls.

    Example::

        from json_pattern_match.algorithm.engine import PatternMatcher

        matcher = PatternMatcher()
        sink = matcher.match({"a": 1, "...": "..."}, {"a": 2, "b": 3})
        [str(r) for r in sink.records]
        # ['$.a: expected 1 but was 2']
    """

    def __init__(self, config: MatchConfig | None = None) -> None:
        """Initialise the matcher.

        Args:
            config: Matching parameters.  Defaults to ``MatchConfig()``
                (POSITIONAL arrays).
        """
        self._config = config if config is not None else MatchConfig()

    @property
    def config(self) -> MatchConfig:
        return self._config

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def match(
        self,
        pattern: Any,
        actual: Any,
        path: JsonPath | None = None,
        sink: MismatchSink | None = None,
    ) -> MismatchSink:
        """Match ``actual`` against ``pattern`` and record every discrepancy.

        Args:
            pattern: Resolved pattern document.
            actual:  Actual document.
            path:    Location of this pair.  Defaults to the root ``$``.
            sink:    Destination for records.  Defaults to a new
                ``MismatchCollector``.

        Returns:
            The sink that received the records.
        """
        if path is None:
            path = JsonPath.root()
        if sink is None:
            sink = MismatchCollector()
        self._match_node(pattern, actual, path, sink)
        return sink

    def is_compatible(self, pattern: Any, actual: Any) -> bool:
        """Dry run: True when ``actual`` matches ``pattern`` with zero mismatches."""
        counter = MismatchCounter(stop_on_first=True)
        self._match_node(pattern, actual, JsonPath.root(), counter)
        return not counter.any_mismatch

    # ------------------------------------------------------------------
    # Dispatch
    # ------------------------------------------------------------------

    def _match_node(
        self, pattern: Any, actual: Any, path: JsonPath, sink: MismatchSink
    ) -> None:
        if classify_pattern(pattern) == PatternToken.VALUE_WILDCARD:
            return

        pattern_kind = kind_of(pattern)
        actual_kind = kind_of(actual)

        if pattern_kind == ValueKind.OBJECT:
            if actual_kind != ValueKind.OBJECT:
                self._type_mismatch(pattern_kind, actual_kind, actual, path, sink)
                return
            self._match_object(pattern, actual, path, sink)
            return

        if pattern_kind == ValueKind.ARRAY:
            if actual_kind != ValueKind.ARRAY:
                self._type_mismatch(pattern_kind, actual_kind, actual, path, sink)
                return
            if self._config.array_mode == ArrayMode.ANY_ORDER:
                self._match_array_any_order(pattern, actual, path, sink)
            else:
                self._match_array_positional(pattern, actual, path, sink)
            return

        # Scalar pattern (null, boolean, number, string)
        if pattern_kind != actual_kind:
            self._type_mismatch(pattern_kind, actual_kind, actual, path, sink)
        elif not scalar_equals(pattern, actual):
            sink.record(
                MismatchKind.VALUE_MISMATCH,
                path,
                f"expected {describe_value(pattern)} but was {describe_value(actual)}",
            )

    def _type_mismatch(
        self,
        expected: ValueKind,
        found: ValueKind,
        actual: Any,
        path: JsonPath,
        sink: MismatchSink,
    ) -> None:
        sink.record(
            MismatchKind.TYPE_MISMATCH,
            path,
            f"expected {expected} but was {found} ({describe_value(actual)})",
        )

    # ------------------------------------------------------------------
    # Objects
    # ------------------------------------------------------------------

    def _match_object(
        self,
        pattern: dict[str, Any],
        actual: dict[str, Any],
        path: JsonPath,
        sink: MismatchSink,
    ) -> None:
        required, wildcard = _split_object_wildcard(pattern)

        for key, pattern_value in required.items():
            if sink.stopped:
                return
            key_path = path.child_field(key)
            if key not in actual:
                sink.record(
                    MismatchKind.MISSING_PROPERTY,
                    key_path,
                    f"expected property is missing (pattern: {describe_value(pattern_value)})",
                )
                continue
            self._match_node(pattern_value, actual[key], key_path, sink)

        if wildcard:
            return

        for key, actual_value in actual.items():
            if sink.stopped:
                return
            if key not in required:
                sink.record(
                    MismatchKind.UNEXPECTED_PROPERTY,
                    path.child_field(key),
                    f"unexpected property (actual: {describe_value(actual_value)})",
                )

    # ------------------------------------------------------------------
    # Arrays
    # ------------------------------------------------------------------

    def _match_array_positional(
        self,
        pattern: list[Any],
        actual: list[Any],
        path: JsonPath,
        sink: MismatchSink,
    ) -> None:
        fixed, wildcard = _split_array_wildcard(pattern)

        if len(actual) < len(fixed):
            qualifier = "at least " if wildcard else ""
            sink.record(
                MismatchKind.MISSING_PROPERTY,
                path,
                f"array too short: expected {qualifier}{len(fixed)} elements "
                f"but was {len(actual)}",
            )
            return

        for index, pattern_elem in enumerate(fixed):
            if sink.stopped:
                return
            self._match_node(pattern_elem, actual[index], path.child_index(index), sink)

        if wildcard:
            return

        # One record per extra trailing element
        for index in range(len(fixed), len(actual)):
            if sink.stopped:
                return
            sink.record(
                MismatchKind.UNEXPECTED_PROPERTY,
                path.child_index(index),
                f"unexpected array element (actual: {describe_value(actual[index])})",
            )

    def _match_array_any_order(
        self,
        pattern: list[Any],
        actual: list[Any],
        path: JsonPath,
        sink: MismatchSink,
    ) -> None:
        fixed, wildcard = _split_array_wildcard(pattern)

        assignment = assign(fixed, actual, self.is_compatible)

        # Paths follow the pattern's authored position
        for pattern_index, actual_index in assignment.pairs:
            if sink.stopped:
                return
            self._match_node(
                fixed[pattern_index],
                actual[actual_index],
                path.child_index(pattern_index),
                sink,
            )

        for pattern_index in assignment.unmatched_pattern:
            if sink.stopped:
                return
            sink.record(
                MismatchKind.MISSING_PROPERTY,
                path.child_index(pattern_index),
                "no matching array element for pattern "
                f"{describe_value(fixed[pattern_index])}",
            )

        if wildcard:
            return

        for actual_index in assignment.unmatched_actual:
            if sink.stopped:
                return
            sink.record(
                MismatchKind.UNEXPECTED_PROPERTY,
                path.child_index(actual_index),
                f"unexpected array element (actual: {describe_value(actual[actual_index])})",
            )


def find_mismatches(
    pattern: Any,
    actual: Any,
    config: MatchConfig | None = None,
) -> list[MismatchRecord]:
    """Match two parsed documents from the root and return every record."""
    matcher = PatternMatcher(config=config)
    collector = MismatchCollector()
    matcher.match(pattern, actual, JsonPath.root(), collector)
    logger.debug(
        "Matched document (array_mode=%s): %d mismatches",
        matcher.config.array_mode,
        len(collector),
    )
    return collector.records

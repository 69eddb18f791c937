"""algorithm subpackage: public API for the matching engine.

Provides the recursive pattern matcher, its configuration, array-mode
control and the any-order assignment solver.  Import from this module (not
from sub-modules directly) to stay on the stable public interface.

Example::

    from json_pattern_match.algorithm import ArrayMode, MatchConfig, PatternMatcher

    matcher = PatternMatcher(MatchConfig(array_mode=ArrayMode.ANY_ORDER))
    sink = matcher.match(["x", "y"], ["y", "x"])
    # sink.records == []
"""

from __future__ import annotations

from json_pattern_match.algorithm.config import ArrayMode, MatchConfig
from json_pattern_match.algorithm.engine import PatternMatcher, find_mismatches
from json_pattern_match.algorithm.matcher import Assignment, assign

__all__ = [
    "ArrayMode",
    "Assignment",
    "MatchConfig",
    "PatternMatcher",
    "assign",
    "find_mismatches",
]

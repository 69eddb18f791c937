"""JSON pattern match - structural JSON assertions with wildcards and templates."""

from __future__ import annotations

from json_pattern_match.algorithm.config import ArrayMode, MatchConfig
from json_pattern_match.api import (
    assert_json_matches,
    assert_json_matches_any_order,
    compare_json,
    is_matching_json,
)
from json_pattern_match.exceptions import JsonMatchError, JsonParseError
from json_pattern_match.integrations import JsonPattern, matches_json
from json_pattern_match.reporting import MismatchKind, MismatchRecord
from json_pattern_match.result import MatchResult

__version__: str = "0.1.0"
__all__: list[str] = [
    "ArrayMode",
    "JsonMatchError",
    "JsonParseError",
    "JsonPattern",
    "MatchConfig",
    "MatchResult",
    "MismatchKind",
    "MismatchRecord",
    "assert_json_matches",
    "assert_json_matches_any_order",
    "compare_json",
    "is_matching_json",
    "matches_json",
]

"""Tree subpackage for the JSON value model.

Re-exports the public API for the tree module:
- ValueKind: StrEnum of the six JSON value kinds
- PatternToken: StrEnum of reserved-token meanings in a pattern
- NodePosition: StrEnum of syntactic positions used for classification
- kind_of / classify_pattern: the classification functions
"""

from json_pattern_match.tree.nodes import (
    WILDCARD,
    JsonValue,
    NodePosition,
    PatternToken,
    ValueKind,
    classify_pattern,
    kind_of,
    scalar_equals,
    validate_tree,
)

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

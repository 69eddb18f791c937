"""MatchConfig and ArrayMode for pattern matching configuration.

MatchConfig is a frozen (immutable) dataclass holding the matcher
parameters.  ArrayMode selects how arrays are compared: positional
(element by element) or any-order (multiset via bipartite assignment).
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum, auto


class ArrayMode(StrEnum):
    """How to compare JSON arrays during matching.

    - POSITIONAL: ``pattern[i]`` is compared with ``actual[i]``.
    - ANY_ORDER:  Elements are paired by maximum bipartite matching.

    The mode applies to every array in the document.
    """

    POSITIONAL = auto()
    ANY_ORDER = auto()


@dataclass(frozen=True, slots=True)
class MatchConfig:
    """Immutable configuration for the pattern matcher.

    Attributes:
        array_mode: How arrays are compared.  Default POSITIONAL.
        include_documents: When True, failure reports end with the actual
            document and the resolved pattern, pretty-printed.  Default True.
        max_document_chars: Documents rendered into a report are truncated
            beyond this many characters.  Must be > 0.
    """

    array_mode: ArrayMode = ArrayMode.POSITIONAL
    include_documents: bool = True
    max_document_chars: int = 10_000

    def __post_init__(self) -> None:
        if not isinstance(self.array_mode, ArrayMode):
            msg = f"array_mode must be an ArrayMode, got {self.array_mode!r}"
            raise ValueError(msg)
        if self.max_document_chars <= 0:
            msg = f"max_document_chars must be > 0, got {self.max_document_chars}"
            raise ValueError(msg)

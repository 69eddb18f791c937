"""Error types raised by the public matching API.

The two categories never overlap: ``JsonParseError`` means an input could not
be read as JSON and matching never started; ``JsonMatchError`` means matching
ran and found at least one mismatch.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from json_pattern_match.reporting import MismatchRecord

__all__ = ["JsonMatchError", "JsonParseError"]


class JsonMatchError(AssertionError):
    """The actual document does not match the pattern.

    The message is exactly the rendered mismatch report.
    """

    def __init__(self, message: str, mismatches: list[MismatchRecord]) -> None:
        super().__init__(message)
        self.mismatches = mismatches


class JsonParseError(ValueError):
    """The pattern or the actual text is not valid JSON."""

    def __init__(self, side: str, text: str, cause: Exception) -> None:
        super().__init__(f"Failed to parse {side} as JSON: {cause}\n{text}")
        self.side = side
        self.text = text

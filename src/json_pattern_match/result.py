"""MatchResult dataclass for non-raising match output.

This module provides the result type returned by compare_json() calls.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from json_pattern_match.reporting import MismatchKind, MismatchRecord, render_report

__all__ = ["MatchResult"]


@dataclass(frozen=True, slots=True)
class MatchResult:
    """Outcome of a compare_json() call.

    Attributes:
        mismatches: Every recorded discrepancy, in traversal order.  Empty
            when the actual document matches.
        pattern: The template-resolved pattern that was matched.
        actual: The parsed actual document.
        computation_time_ms: Wall-clock duration of the match in milliseconds.
    """

    mismatches: list[MismatchRecord]
    pattern: Any
    actual: Any
    computation_time_ms: float

    @property
    def matched(self) -> bool:
        return not self.mismatches

    def __bool__(self) -> bool:
        return self.matched

    def of_kind(self, kind: MismatchKind) -> list[MismatchRecord]:
        return [m for m in self.mismatches if m.kind == kind]

    @property
    def paths(self) -> list[str]:
        """Rendered paths of all mismatches, in traversal order."""
        return [m.path.render() for m in self.mismatches]

    def report(
        self,
        reason: str | None = None,
        include_documents: bool = False,
        max_document_chars: int = 10_000,
    ) -> str | None:
        """Render the mismatch report, or None when matched."""
        return render_report(
            self.mismatches,
            reason,
            pattern=self.pattern,
            actual=self.actual,
            include_documents=include_documents,
            max_document_chars=max_document_chars,
        )

"""Mismatch records, collectors and the failure report renderer.

The matcher never raises for content differences.  Instead it appends
``MismatchRecord`` objects to a sink passed down the recursion, so one call
surfaces every discrepancy.  ``render_report`` turns the collected records
into the single message carried by the raised assertion error.

Report layout::

    <reason>
    JSON does not match pattern (2 mismatches)

    Missing properties:
      $.a: expected property is missing (pattern: 1)

    Value mismatches:
      $.v: expected "a/y" but was "b/y"
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from enum import StrEnum, auto
from typing import TYPE_CHECKING, Any, Protocol

if TYPE_CHECKING:
    from collections.abc import Iterable

    from json_pattern_match.paths import JsonPath

__all__ = [
    "MismatchCollector",
    "MismatchCounter",
    "MismatchKind",
    "MismatchRecord",
    "MismatchSink",
    "describe_value",
    "render_report",
]

_SEPARATOR = "-" * 92


class MismatchKind(StrEnum):
    """Category of a single discrepancy."""

    MISSING_PROPERTY = auto()
    UNEXPECTED_PROPERTY = auto()
    VALUE_MISMATCH = auto()
    TYPE_MISMATCH = auto()

    @property
    def heading(self) -> str:
        return _HEADINGS[self]


_HEADINGS = {
    MismatchKind.MISSING_PROPERTY: "Missing properties",
    MismatchKind.UNEXPECTED_PROPERTY: "Unexpected properties",
    MismatchKind.VALUE_MISMATCH: "Value mismatches",
    MismatchKind.TYPE_MISMATCH: "Type mismatches",
}


@dataclass(frozen=True, slots=True)
class MismatchRecord:
    """One reported discrepancy.

    Attributes:
        kind:   Which category the discrepancy belongs to.
        path:   Location in the document tree.
        detail: Human-readable explanation (expected vs. actual).
    """

    kind: MismatchKind
    path: JsonPath
    detail: str

    def __str__(self) -> str:
        return f"{self.path}: {self.detail}"


class MismatchSink(Protocol):
    """Append-only destination for mismatch records."""

    def record(self, kind: MismatchKind, path: JsonPath, detail: str) -> None: ...

    @property
    def stopped(self) -> bool:
        """True when the sink wants the walk to end early."""
        ...


@dataclass(slots=True)
class MismatchCollector:
    """Keeps every record in traversal order."""

    records: list[MismatchRecord] = field(default_factory=list)

    def record(self, kind: MismatchKind, path: JsonPath, detail: str) -> None:
        self.records.append(MismatchRecord(kind=kind, path=path, detail=detail))

    @property
    def stopped(self) -> bool:
        return False

    def __len__(self) -> int:
        return len(self.records)


@dataclass(slots=True)
class MismatchCounter:
    """Dry-run sink: counts records instead of keeping them.

    With ``stop_on_first`` set, ``stopped`` turns True after the first
    record so the matcher can abandon the rest of the walk.
    """

    stop_on_first: bool = True
    count: int = 0

    def record(self, kind: MismatchKind, path: JsonPath, detail: str) -> None:
        self.count += 1

    @property
    def stopped(self) -> bool:
        return self.stop_on_first and self.count > 0

    @property
    def any_mismatch(self) -> bool:
        return self.count > 0


def describe_value(value: Any, limit: int = 80) -> str:
    """Compact JSON rendering of a value for record details."""
    text = json.dumps(value, ensure_ascii=False, sort_keys=False)
    if len(text) > limit:
        text = text[: limit - 3] + "..."
    return text


def _plural(count: int) -> str:
    return "mismatch" if count == 1 else "mismatches"


def _dump_document(value: Any, max_chars: int) -> str:
    text = json.dumps(value, indent=2, ensure_ascii=False)
    if len(text) > max_chars:
        text = text[:max_chars] + "\n... (truncated)"
    return text


def render_report(
    records: Iterable[MismatchRecord],
    reason: str | None = None,
    *,
    pattern: Any = None,
    actual: Any = None,
    include_documents: bool = False,
    max_document_chars: int = 10_000,
) -> str | None:
    """Render collected records into one failure message.

    Args:
        records: Mismatch records in traversal order.
        reason:  Optional custom message placed on the first line.
        pattern: Resolved pattern document, shown when include_documents.
        actual:  Actual document, shown when include_documents.
        include_documents: Append pretty-printed actual and pattern sections.
        max_document_chars: Truncation limit for each document section.

    Returns:
        The message, or None when there are no records (success).
    """
    records = list(records)
    if not records:
        return None

    lines: list[str] = []
    if reason:
        lines.append(reason)
    lines.append(f"JSON does not match pattern ({len(records)} {_plural(len(records))})")

    for kind in MismatchKind:
        group = [r for r in records if r.kind == kind]
        if not group:
            continue
        lines.append("")
        lines.append(f"{kind.heading}:")
        lines.extend(f"  {r}" for r in group)

    if include_documents:
        for title, document in (("Actual JSON", actual), ("Pattern", pattern)):
            lines.extend(["", _SEPARATOR, title, _SEPARATOR])
            lines.append(_dump_document(document, max_document_chars))

    return "\n".join(lines)

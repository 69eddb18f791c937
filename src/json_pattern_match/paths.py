"""JsonPath: immutable location of a node inside a JSON document.

A path is an ordered tuple of steps, each a field name or an array index.
Extending a path always returns a new instance, so sibling branches of a
recursive walk can share their parent path safely.

Rendering follows the JSONPath-like form used in mismatch reports::

    $.obj1.array1[1].array2[0][0].expected
    $.headers['content-type']
"""

from __future__ import annotations

import re
from dataclasses import dataclass

__all__ = ["FieldStep", "IndexStep", "JsonPath", "PathStep"]


_PLAIN_NAME = re.compile(r"[A-Za-z_][A-Za-z0-9_]*")


@dataclass(frozen=True, slots=True)
class FieldStep:
    """Descent into an object property.

    Identifier-like names render as ``.name``; any other name (empty, or
    holding dots, brackets, spaces or quotes) renders as ``['name']`` with
    backslashes and single quotes escaped.
    """

    name: str

    def render(self) -> str:
        if _PLAIN_NAME.fullmatch(self.name):
            return f".{self.name}"
        escaped = self.name.replace("\\", "\\\\").replace("'", "\\'")
        return f"['{escaped}']"


@dataclass(frozen=True, slots=True)
class IndexStep:
    """Descent into an array element."""

    index: int

    def render(self) -> str:
        return f"[{self.index}]"


PathStep = FieldStep | IndexStep


@dataclass(frozen=True, slots=True)
class JsonPath:
    """Append-only path from the document root.

    Attributes:
        steps: Steps from the root, in descent order.  Empty for the root.
    """

    steps: tuple[PathStep, ...] = ()

    @classmethod
    def root(cls) -> JsonPath:
        return cls()

    def child(self, step: PathStep) -> JsonPath:
        """Return a new path extended by ``step``; ``self`` is untouched."""
        return JsonPath(self.steps + (step,))

    def child_field(self, name: str) -> JsonPath:
        return self.child(FieldStep(name))

    def child_index(self, index: int) -> JsonPath:
        return self.child(IndexStep(index))

    @property
    def depth(self) -> int:
        return len(self.steps)

    def render(self) -> str:
        return "$" + "".join(step.render() for step in self.steps)

    def __str__(self) -> str:
        return self.render()

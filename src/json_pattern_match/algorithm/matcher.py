"""Assignment solver for any-order array matching.

``assign`` pairs pattern elements with actual elements so that the number
of compatible pairs is maximal.  Greedy first-fit is not enough: with
pattern ``["...", "x"]`` and actual ``["x", "y"]`` the value wildcard may
claim ``"x"`` and strand the literal.  A maximum-cardinality bipartite
matching avoids that.

The matching is computed as an optimal assignment over a 0/1 cost matrix
(0 = compatible, 1 = incompatible).  ``linear_sum_assignment`` assigns
``min(m, n)`` pairs at minimum total cost, i.e. with as few incompatible
pairs as possible; dropping those leaves a maximum matching.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

import numpy as np
from scipy.optimize import linear_sum_assignment  # type: ignore[import-untyped]

if TYPE_CHECKING:
    from collections.abc import Callable, Sequence

__all__ = ["Assignment", "assign", "compatibility_matrix", "maximum_matching"]

logger = logging.getLogger(__name__)


def compatibility_matrix(
    pattern_elems: Sequence[Any],
    actual_elems: Sequence[Any],
    compatible: Callable[[Any, Any], bool],
) -> np.ndarray:
    """Boolean ``(m, n)`` matrix; cell ``[i, j]`` is ``compatible(p[i], a[j])``."""
    matrix = np.zeros((len(pattern_elems), len(actual_elems)), dtype=bool)
    for i, pattern_elem in enumerate(pattern_elems):
        for j, actual_elem in enumerate(actual_elems):
            matrix[i, j] = compatible(pattern_elem, actual_elem)
    return matrix


def maximum_matching(compat: np.ndarray) -> list[tuple[int, int]]:
    """Maximum set of compatible ``(row, col)`` pairs, sorted by row.

    Args:
        compat: Boolean compatibility matrix of shape ``(m, n)``.
    """
    if not compat.any():
        return []
    cost = np.where(compat, 0, 1)
    row_ind, col_ind = linear_sum_assignment(cost)
    keep = compat[row_ind, col_ind]
    return sorted(zip(row_ind[keep].tolist(), col_ind[keep].tolist(), strict=True))


@dataclass(frozen=True, slots=True)
class Assignment:
    """Result of pairing pattern elements with actual elements.

    Attributes:
        pairs: ``(pattern_index, actual_index)`` tuples, sorted by pattern index.
        unmatched_pattern: Pattern indices without a partner, ascending.
        unmatched_actual: Actual indices without a partner, ascending.
    """

    pairs: list[tuple[int, int]]
    unmatched_pattern: list[int]
    unmatched_actual: list[int]

    @property
    def is_complete(self) -> bool:
        """True when every pattern element found a partner."""
        return not self.unmatched_pattern


def assign(
    pattern_elems: Sequence[Any],
    actual_elems: Sequence[Any],
    compatible: Callable[[Any, Any], bool],
) -> Assignment:
    """Maximum-cardinality assignment of pattern elements to actual elements.

    Args:
        pattern_elems: Pattern array elements (array wildcard already removed).
        actual_elems:  Actual array elements.
        compatible:    Edge predicate; True when the pattern element matches the
            actual element with zero mismatches.

    Returns:
        An ``Assignment``.  Which of several interchangeable actual elements a
        pattern element receives is unspecified; the number of pairs is not.
    """
    m = len(pattern_elems)
    n = len(actual_elems)

    pairs = maximum_matching(
        compatibility_matrix(pattern_elems, actual_elems, compatible)
    )

    matched_pattern = {i for i, _ in pairs}
    matched_actual = {j for _, j in pairs}
    assignment = Assignment(
        pairs=pairs,
        unmatched_pattern=[i for i in range(m) if i not in matched_pattern],
        unmatched_actual=[j for j in range(n) if j not in matched_actual],
    )
    logger.debug(
        "Assigned %d of %d pattern elements to %d actual elements",
        len(pairs),
        m,
        n,
    )
    return assignment

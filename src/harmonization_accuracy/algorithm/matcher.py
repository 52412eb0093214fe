"""One-to-one pairing of field names by optimal bipartite assignment.

Used to report which harmonized field most plausibly took over each original
field of the same synonym category.  The assignment is solved with scipy's
``linear_sum_assignment`` on a ``1 - similarity`` cost matrix.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence

import numpy as np
from scipy.optimize import linear_sum_assignment  # type: ignore[import-untyped]

__all__ = ["hungarian_match", "pair_by_similarity"]


def hungarian_match(cost_matrix: np.ndarray) -> tuple[np.ndarray, np.ndarray]:
    """Minimum-cost assignment of rows to columns.

    Args:
        cost_matrix: 2-D array of shape ``(m, n)``; rectangular is fine, the
            smaller side is fully assigned.

    Returns:
        ``(row_ind, col_ind)`` integer arrays.  Both are empty when either
        dimension is zero.
    """
    cost = np.asarray(cost_matrix, dtype=float)
    if cost.ndim != 2:
        msg = f"cost_matrix must be 2-D, got shape {cost.shape}"
        raise ValueError(msg)
    if cost.size == 0:
        return np.array([], dtype=int), np.array([], dtype=int)
    row_ind, col_ind = linear_sum_assignment(cost)
    return row_ind, col_ind


def pair_by_similarity(
    left: Sequence[str],
    right: Sequence[str],
    similarity: Callable[[str, str], float],
    min_similarity: float = 0.0,
) -> list[tuple[int, int]]:
    """Pair items of ``left`` with items of ``right`` maximizing total similarity.

    Args:
        left, right:    Names to pair.
        similarity:     Scoring function returning a value in [0, 1].
        min_similarity: Pairs scoring below this are dropped after assignment.

    Returns:
        ``(left_index, right_index)`` pairs sorted by left index.
    """
    if not left or not right:
        return []

    cost = np.empty((len(left), len(right)), dtype=float)
    for i, a in enumerate(left):
        for j, b in enumerate(right):
            cost[i, j] = 1.0 - similarity(a, b)

    row_ind, col_ind = hungarian_match(cost)
    pairs = [
        (int(r), int(c))
        for r, c in zip(row_ind.tolist(), col_ind.tolist(), strict=True)
        if 1.0 - cost[r, c] >= min_similarity
    ]
    return sorted(pairs)

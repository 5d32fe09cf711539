"""Bipartite assignment used by the OPTIMAL exhaustive array fallback."""

from __future__ import annotations

import numpy as np
from scipy.optimize import linear_sum_assignment  # type: ignore[import-untyped]

__all__ = ["compatible_assignment"]


def compatible_assignment(compatible: np.ndarray) -> dict[int, int]:
    """Pair as many rows as possible with compatible columns.

    Args:
        compatible: Boolean matrix of shape ``(m, n)``; ``compatible[i, j]``
            is True when expected element ``i`` may be paired with actual
            element ``j``.

    Returns:
        Mapping ``row -> column`` of a maximum matching.  Rows with no
        partner are absent.
    """
    mask = np.asarray(compatible, dtype=bool)
    if not mask.any():
        return {}

    # The solver always assigns min(m, n) pairs, so charging 1 per
    # incompatible pair makes the cheapest assignment a maximum matching.
    row_ind, col_ind = linear_sum_assignment(np.where(mask, 0.0, 1.0))
    keep = mask[row_ind, col_ind]
    return dict(zip(row_ind[keep].tolist(), col_ind[keep].tolist(), strict=True))

"""Feasibility predicates for placing a new queen.

All predicates work on a partial placement encoded as ``placement[col] = row``
(0-based), where columns ``0..len(placement)-1`` are already filled and the
candidate goes into column ``col_new == len(placement)``. None of them mutate
the placement.

Two independent tests decide whether a candidate is legal:

- attack: the candidate shares a row or a diagonal with a placed queen.
  Columns are unique by construction, so vertical attacks are never checked.
- collinearity: the candidate lies on a common line with two placed queens.

Collinearity modes
------------------
- "slope": the reference test. Slopes ``(col_prev - col_new) / (row_prev -
  row_new)`` are computed as floats; two equal slopes from the candidate mean
  the candidate and those two queens are collinear. Float rounding makes this
  an approximation in principle, although for board sizes that can actually be
  searched every distinct rational slope maps to a distinct float.
- "exact": integer cross products, no rounding at all.

Use ``get_collinearity_test`` to pick a mode by name.
"""

from __future__ import annotations

import math
from typing import Callable, Sequence

CollinearityTest = Callable[[Sequence[int], int, int], bool]


def is_attacked_horizontally(row_new: int, row_prev: int) -> bool:
    return row_new == row_prev


def is_attacked_diagonally(row_new: int, col_new: int, row_prev: int, col_prev: int) -> bool:
    delta_row = row_new - row_prev
    delta_col = col_new - col_prev
    return delta_row == delta_col or delta_row == -delta_col


def is_attacked(placement: Sequence[int], row_new: int, col_new: int) -> bool:
    """Return True if any queen in ``placement`` attacks ``(row_new, col_new)``."""
    for col_prev, row_prev in enumerate(placement):
        if is_attacked_horizontally(row_new, row_prev) or is_attacked_diagonally(
            row_new, col_new, row_prev, col_prev
        ):
            return True
    return False


def _slope(row_prev: int, col_prev: int, row_new: int, col_new: int) -> float:
    delta_col = col_prev - col_new
    delta_row = row_prev - row_new
    if delta_row == 0:
        # Same row: vertical in (row, col) space. Keep IEEE semantics.
        return math.copysign(math.inf, delta_col)
    return delta_col / delta_row


def is_any3_collinear(placement: Sequence[int], row_new: int, col_new: int) -> bool:
    """Slope-equality collinearity test (reference behaviour).

    Parameters
    ----------
    placement : Sequence[int]
        Rows of the queens already placed, indexed by column.
    row_new, col_new : int
        Candidate square.

    Returns
    -------
    bool
        True if two placed queens yield the same slope relative to the
        candidate. With fewer than two placed queens this is always False.
    """
    if len(placement) < 2:
        return False
    slopes = set()
    for col_prev, row_prev in enumerate(placement):
        slope = _slope(row_prev, col_prev, row_new, col_new)
        if slope in slopes:
            return True
        slopes.add(slope)
    return False


def is_any3_collinear_exact(placement: Sequence[int], row_new: int, col_new: int) -> bool:
    """Cross-product collinearity test using integer arithmetic only.

    Three points are collinear when the signed area of their triangle is zero,
    i.e. ``dr1 * dc2 == dr2 * dc1`` for the offsets of two placed queens from
    the candidate.
    """
    count = len(placement)
    if count < 2:
        return False
    for col_a in range(count):
        dr_a = placement[col_a] - row_new
        dc_a = col_a - col_new
        for col_b in range(col_a + 1, count):
            dr_b = placement[col_b] - row_new
            dc_b = col_b - col_new
            if dr_a * dc_b == dr_b * dc_a:
                return True
    return False


def is_feasible(
    placement: Sequence[int],
    row_new: int,
    col_new: int,
    collinearity_test: CollinearityTest = is_any3_collinear,
) -> bool:
    """Return True if ``(row_new, col_new)`` passes both the attack and collinearity tests."""
    return not is_attacked(placement, row_new, col_new) and not collinearity_test(
        placement, row_new, col_new
    )


def get_collinearity_test(mode: str) -> CollinearityTest:
    """Return a collinearity predicate by label.

    Parameters
    ----------
    mode : str
        One of "slope" (default behaviour) or "exact".

    Returns
    -------
    CollinearityTest
        The corresponding predicate.
    """
    mapping = {
        "slope": is_any3_collinear,
        "exact": is_any3_collinear_exact,
    }
    try:
        return mapping[mode.lower()]
    except (KeyError, AttributeError) as exc:
        raise ValueError(f"Unknown collinearity mode: {mode}") from exc


COLLINEARITY_MODES = ("slope", "exact")

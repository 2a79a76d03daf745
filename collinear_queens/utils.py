"""Verification helpers for complete placements.

These helpers check boards independently of the incremental search so tests
and the CLI can validate what the search reports.

Representation
--------------
Boards are encoded as a 1D array/list where ``board[col] = row``.
"""

from __future__ import annotations

from collections import Counter
from itertools import combinations, permutations
from typing import Iterator, List, Sequence, Tuple

import numpy as np

from .feasibility import get_collinearity_test


def conflicts(board: Sequence[int]) -> int:
    """Count attacking queen pairs (shared row or diagonal) in O(N)."""
    row_count: Counter[int] = Counter()
    diag1: Counter[int] = Counter()
    diag2: Counter[int] = Counter()

    for column, row in enumerate(board):
        row_count[row] += 1
        diag1[row - column] += 1
        diag2[row + column] += 1

    def _pairs(counter: Counter[int]) -> int:
        return sum(count * (count - 1) // 2 for count in counter.values() if count > 1)

    return _pairs(row_count) + _pairs(diag1) + _pairs(diag2)


def collinear_triples(board: Sequence[int]) -> List[Tuple[int, int, int]]:
    """Return every triple of columns whose queens lie on a common line.

    Uses exact integer cross products, vectorized with numpy over all
    ``C(N, 3)`` triples.
    """
    n = len(board)
    if n < 3:
        return []
    rows = np.asarray(board, dtype=np.int64)
    triples = np.array(list(combinations(range(n), 3)), dtype=np.int64)
    a, b, c = triples[:, 0], triples[:, 1], triples[:, 2]
    cross = (b - a) * (rows[c] - rows[a]) - (c - a) * (rows[b] - rows[a])
    hits = triples[cross == 0]
    return [tuple(int(v) for v in triple) for triple in hits]


def is_valid_solution(board: Sequence[int]) -> bool:
    """Return True if the board is a complete solution.

    Contract
    - Input: sequence of length N where board[col] = row (0-based indices)
    - Valid if: all 0 <= row < N, no pair of queens attacks each other and no
      three queens are collinear
    """
    n = len(board)
    if n == 0:
        return False
    for row in board:
        if not isinstance(row, (int, np.integer)) or isinstance(row, bool):
            return False
        if row < 0 or row >= n:
            return False
    return conflicts(board) == 0 and not collinear_triples(board)


def brute_force_solutions(n: int, collinearity: str = "slope") -> Iterator[Tuple[int, ...]]:
    """Enumerate solutions by filtering all row permutations.

    Reference enumeration for small N only (N! candidates). Permutations are
    produced in lexicographic order, so the output order matches the search.
    Each full board is checked by replaying the chosen collinearity predicate
    column by column, together with a pairwise diagonal test.
    """
    collinear = get_collinearity_test(collinearity)
    for board in permutations(range(n)):
        if any(abs(board[i] - board[j]) == j - i for i, j in combinations(range(n), 2)):
            continue
        if any(collinear(board[:col], board[col], col) for col in range(2, n)):
            continue
        yield board

"""Tests for the board verification helpers."""

from pathlib import Path
import sys
import unittest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from collinear_queens.utils import (
    brute_force_solutions,
    collinear_triples,
    conflicts,
    is_valid_solution,
)


class ConflictTests(unittest.TestCase):
    def test_no_conflicts(self):
        self.assertEqual(conflicts([1, 3, 0, 2]), 0)

    def test_counts_rows_and_diagonals(self):
        # Same row once, and all four on the main diagonal: C(4, 2) pairs.
        self.assertEqual(conflicts([0, 0]), 1)
        self.assertEqual(conflicts([0, 1, 2, 3]), 6)


class CollinearTripleTests(unittest.TestCase):
    def test_small_boards_have_no_triples(self):
        self.assertEqual(collinear_triples([0, 1]), [])

    def test_reports_column_triples(self):
        # Rows 0, 2, 4 in columns 0, 1, 2 lie on one line.
        triples = collinear_triples([0, 2, 4, 1, 3])
        self.assertIn((0, 1, 2), triples)

    def test_near_collinear_board_is_clean(self):
        self.assertEqual(collinear_triples([2, 4, 7, 3, 0, 6, 1, 5]), [])


class ValidSolutionTests(unittest.TestCase):
    def test_valid(self):
        self.assertTrue(is_valid_solution([1, 3, 0, 2]))
        self.assertTrue(is_valid_solution([2, 4, 7, 3, 0, 6, 1, 5]))

    def test_attacking_board(self):
        self.assertFalse(is_valid_solution([0, 1]))

    def test_collinear_board(self):
        # Standard 5-queens solution with three queens on one line.
        self.assertFalse(is_valid_solution([0, 2, 4, 1, 3]))

    def test_out_of_range_and_empty(self):
        self.assertFalse(is_valid_solution([]))
        self.assertFalse(is_valid_solution([0, 4, 1, 3]))
        self.assertFalse(is_valid_solution([True]))


class BruteForceTests(unittest.TestCase):
    def test_four_queens(self):
        self.assertEqual(list(brute_force_solutions(4)), [(1, 3, 0, 2), (2, 0, 3, 1)])

    def test_no_solutions(self):
        for n in (2, 3, 5, 6):
            with self.subTest(n=n):
                self.assertEqual(list(brute_force_solutions(n, collinearity="exact")), [])

    def test_every_reference_solution_is_valid(self):
        for board in brute_force_solutions(7):
            self.assertTrue(is_valid_solution(board))


if __name__ == "__main__":
    unittest.main()

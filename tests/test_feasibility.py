"""Tests for the attack and collinearity predicates."""

from pathlib import Path
import sys
import unittest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from collinear_queens.feasibility import (
    get_collinearity_test,
    is_any3_collinear,
    is_any3_collinear_exact,
    is_attacked,
    is_attacked_diagonally,
    is_feasible,
)


class AttackTests(unittest.TestCase):
    def test_same_row_is_attacked(self):
        self.assertTrue(is_attacked([2], 2, 1))

    def test_both_diagonals_are_attacked(self):
        self.assertTrue(is_attacked([0], 1, 1))
        self.assertTrue(is_attacked([3, 0], 1, 2))
        self.assertTrue(is_attacked_diagonally(4, 2, 2, 0))

    def test_knight_move_is_safe(self):
        self.assertFalse(is_attacked([0], 2, 1))

    def test_empty_placement_is_safe(self):
        self.assertFalse(is_attacked([], 0, 0))


class CollinearityTests(unittest.TestCase):
    predicates = (is_any3_collinear, is_any3_collinear_exact)

    def test_fewer_than_two_queens_never_collinear(self):
        for predicate in self.predicates:
            with self.subTest(predicate=predicate.__name__):
                self.assertFalse(predicate([], 0, 0))
                self.assertFalse(predicate([0], 5, 1))

    def test_collinear_triple_detected(self):
        # (row, col) = (0, 0), (2, 1), (4, 2) share slope 1/2.
        for predicate in self.predicates:
            with self.subTest(predicate=predicate.__name__):
                self.assertTrue(predicate([0, 2], 4, 2))

    def test_collinear_with_non_adjacent_queens(self):
        # (0, 0) and (1, 2) line up with (2, 4); column 1 is unrelated.
        for predicate in self.predicates:
            with self.subTest(predicate=predicate.__name__):
                self.assertTrue(predicate([0, 5, 1, 7], 2, 4))

    def test_non_collinear_triple(self):
        for predicate in self.predicates:
            with self.subTest(predicate=predicate.__name__):
                self.assertFalse(predicate([1, 3], 0, 2))

    def test_same_row_candidate_does_not_raise(self):
        self.assertFalse(is_any3_collinear([3, 0], 3, 2))

    def test_two_same_row_queens_are_collinear(self):
        self.assertTrue(is_any3_collinear([3, 3], 3, 2))
        self.assertTrue(is_any3_collinear_exact([3, 3], 3, 2))

    def test_slope_rounding_differs_from_exact_test(self):
        # Slopes -1/(2**60 + 1) and -1/2**60 round to the same float.
        placement = [2 ** 61 + 2, 2 ** 60]
        self.assertTrue(is_any3_collinear(placement, 0, 2))
        self.assertFalse(is_any3_collinear_exact(placement, 0, 2))


class FeasibilityTests(unittest.TestCase):
    def test_feasible_candidate(self):
        self.assertTrue(is_feasible([1, 3], 0, 2))

    def test_attacked_candidate(self):
        self.assertFalse(is_feasible([1, 3], 1, 2))

    def test_collinear_candidate(self):
        self.assertFalse(is_feasible([0, 2], 4, 2))

    def test_feasible_does_not_mutate_placement(self):
        placement = [1, 3]
        is_feasible(placement, 0, 2)
        self.assertEqual(placement, [1, 3])

    def test_custom_predicate(self):
        self.assertFalse(is_feasible([1, 3], 0, 2, lambda placement, row, col: True))


class RegistryTests(unittest.TestCase):
    def test_lookup_by_label(self):
        self.assertIs(get_collinearity_test("slope"), is_any3_collinear)
        self.assertIs(get_collinearity_test("EXACT"), is_any3_collinear_exact)

    def test_unknown_label(self):
        with self.assertRaises(ValueError):
            get_collinearity_test("area")
        with self.assertRaises(ValueError):
            get_collinearity_test(None)


if __name__ == "__main__":
    unittest.main()

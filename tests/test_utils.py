"""Tests for the level arithmetic helpers."""

import math
import unittest

from merkle_trees.builder import build_from_data
from merkle_trees.traversal import depth, leaf_values
from merkle_trees.utils import level_sizes, padded_leaf_count, pairing_rounds


class TestLevelArithmetic(unittest.TestCase):

    def test_level_sizes(self):
        expected = {
            0: [],
            1: [1],
            2: [2, 1],
            3: [3, 2, 1],
            5: [5, 3, 2, 1],
            6: [6, 3, 2, 1],
            7: [7, 4, 2, 1],
            9: [9, 5, 3, 2, 1],
        }
        for n, sizes in expected.items():
            with self.subTest(n=n):
                self.assertEqual(level_sizes(n), sizes)

    def test_pairing_rounds_is_ceil_log2(self):
        self.assertEqual(pairing_rounds(0), 0)
        for n in range(1, 130):
            with self.subTest(n=n):
                self.assertEqual(pairing_rounds(n), math.ceil(math.log2(n)))
                self.assertEqual(pairing_rounds(n), len(level_sizes(n)) - 1)

    def test_matches_built_trees(self):
        for n in [1, 3, 5, 6, 7, 8, 33]:
            root = build_from_data(range(n))
            with self.subTest(n=n):
                self.assertEqual(depth(root), pairing_rounds(n))
                self.assertEqual(len(leaf_values(root)), padded_leaf_count(n))

    def test_padded_leaf_count(self):
        self.assertEqual([padded_leaf_count(n) for n in range(0, 10)], [0, 1, 2, 4, 4, 8, 8, 8, 8, 16])

    def test_invalid_counts(self):
        for bad in [-1, 2.0, "3"]:
            for fn in (level_sizes, pairing_rounds, padded_leaf_count):
                with self.subTest(fn=fn.__name__, n=bad), self.assertRaises(ValueError):
                    fn(bad)

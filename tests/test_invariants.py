"""Tests for invariant checks."""

import unittest

from merkle_trees.base import BranchNode, LeafNode, make_branch, make_leaf
from merkle_trees.builder import build_from_data
from merkle_trees.invariants import InvariantError, assert_tree_invariants_raise, check_leaf_values
from merkle_trees.tree_stats import Stats, tree_stats_
from tests.test_base import BLOCKS


class TestAssertTreeInvariantsRaise(unittest.TestCase):

    def test_valid_trees_pass(self):
        for n in range(0, 12):
            root = build_from_data(range(n))
            with self.subTest(n=n):
                assert_tree_invariants_raise(root, tree_stats_(root))

    def test_bad_leaf_digest(self):
        root = make_branch(make_leaf("a"), LeafNode("b", "bogus"))
        with self.assertRaisesRegex(InvariantError, "leaf_digests_ok"):
            assert_tree_invariants_raise(root, tree_stats_(root))

    def test_bad_branch_digest(self):
        root = BranchNode(make_leaf("a"), make_leaf("b"), "bogus")
        with self.assertRaisesRegex(InvariantError, "branch_digests_ok"):
            assert_tree_invariants_raise(root, tree_stats_(root))

    def test_missing_child(self):
        root = BranchNode(make_leaf("a"), None, "bogus")
        with self.assertRaises(InvariantError):
            assert_tree_invariants_raise(root, tree_stats_(root))

    def test_inconsistent_counts(self):
        root = build_from_data(BLOCKS)
        stats = tree_stats_(root)
        stats.leaf_count = 5
        with self.assertRaisesRegex(InvariantError, "node_count"):
            assert_tree_invariants_raise(root, stats)

    def test_empty_tree_with_nodes(self):
        stats = Stats(0, 1, 1, 0, 0, True, True, True)
        with self.assertRaises(InvariantError):
            assert_tree_invariants_raise(None, stats)


class TestCheckLeafValues(unittest.TestCase):

    def test_matching_values(self):
        values, presence_ok, order_ok = check_leaf_values(build_from_data(BLOCKS), BLOCKS)
        self.assertEqual(values, BLOCKS)
        self.assertTrue(presence_ok)
        self.assertTrue(order_ok)

    def test_padding_ignored(self):
        values, presence_ok, order_ok = check_leaf_values(build_from_data("abcde"), list("abcde"))
        self.assertEqual(values, list("abcdeeee"))
        self.assertTrue(presence_ok)
        self.assertTrue(order_ok)

    def test_wrong_order(self):
        _, presence_ok, order_ok = check_leaf_values(build_from_data("abc"), list("bac"))
        self.assertTrue(presence_ok)
        self.assertFalse(order_ok)

    def test_missing_value(self):
        _, presence_ok, _ = check_leaf_values(build_from_data("abc"), list("abcd"))
        self.assertFalse(presence_ok)

    def test_no_expectation(self):
        values, presence_ok, order_ok = check_leaf_values(None)
        self.assertEqual(values, [])
        self.assertTrue(presence_ok)
        self.assertTrue(order_ok)

"""Tests for depth, leaf iteration and membership checks."""

import unittest

from merkle_trees.base import make_branch, make_leaf
from merkle_trees.builder import build_from_data
from merkle_trees.traversal import contains, depth, iter_leaves, iter_nodes, leaf_values
from tests.test_base import BLOCKS, MerkleTreeTestCase


class TestDepth(MerkleTreeTestCase):

    def test_empty_tree(self):
        self.assertEqual(depth(None), 0)

    def test_leaf(self):
        self.assertEqual(depth(make_leaf("x")), 0)

    def test_reference_example(self):
        self.root = build_from_data(BLOCKS)
        self.assertEqual(depth(self.root), 2)

    def test_depth_by_leaf_count(self):
        """Depth equals the number of pairing rounds, i.e. ceil(log2(n))."""
        expected = {1: 0, 2: 1, 3: 2, 4: 2, 5: 3, 6: 3, 7: 3, 8: 3, 9: 4, 16: 4, 17: 5}
        for n, d in expected.items():
            with self.subTest(n=n):
                self.assertEqual(depth(build_from_data(range(n))), d)

    def test_unbalanced_hand_built_tree(self):
        a, b, c, d = (make_leaf(v) for v in "abcd")
        root = make_branch(make_branch(make_branch(a, b), c), d)
        self.assertEqual(depth(root), 3)
        self.assertEqual(depth(root.right), 0)
        self.assertEqual(depth(root.left), 2)

    def test_very_deep_chain(self):
        """Arbitrarily deep trees are walked without hitting the recursion limit."""
        root = make_leaf(0)
        for i in range(1, 3000):
            root = make_branch(root, make_leaf(i))
        self.assertEqual(depth(root), 2999)
        self.assertTrue(contains(root, 0))
        self.assertEqual(len(leaf_values(root)), 3000)


class TestIteration(unittest.TestCase):

    def test_iter_leaves_left_to_right(self):
        root = build_from_data(BLOCKS)
        self.assertEqual([leaf.data for leaf in iter_leaves(root)], BLOCKS)

    def test_leaf_values_include_padding(self):
        self.assertEqual(leaf_values(build_from_data("abcde")), list("abcdeeee"))
        self.assertEqual(leaf_values(build_from_data("abcdef")), list("abcdefef"))

    def test_iter_nodes_preorder(self):
        root = build_from_data(BLOCKS)
        kinds = [n.KIND for n in iter_nodes(root)]
        self.assertEqual(kinds, ["branch", "branch", "leaf", "leaf", "branch", "leaf", "leaf"])

    def test_empty(self):
        self.assertEqual(list(iter_nodes(None)), [])
        self.assertEqual(list(iter_leaves(None)), [])
        self.assertEqual(leaf_values(None), [])


class TestContains(MerkleTreeTestCase):

    def test_reference_example(self):
        self.root = build_from_data(BLOCKS)
        self.assertTrue(contains(self.root, "Block2"))
        self.assertFalse(contains(self.root, "Block5"))

    def test_absent_tree(self):
        self.assertFalse(contains(None, "anything"))
        self.assertFalse(contains(None, None))

    def test_every_value_found(self):
        for n in [1, 2, 3, 5, 8, 13]:
            values = [f"v{i}" for i in range(n)]
            root = build_from_data(values)
            for v in values:
                with self.subTest(n=n, value=v):
                    self.assertTrue(contains(root, v))
            self.assertFalse(contains(root, f"v{n}"))

    def test_compares_data_not_digest(self):
        self.root = build_from_data(BLOCKS)
        self.assertFalse(contains(self.root, self.root.left.left.digest))
        self.assertFalse(contains(self.root, self.root.digest))

    def test_equality_on_original_value(self):
        self.root = build_from_data([1, 2, 3])
        self.assertTrue(contains(self.root, 3))
        self.assertTrue(contains(self.root, 3.0))
        self.assertFalse(contains(self.root, "3"))

    def test_python_equality_semantics(self):
        """Membership uses ==, so True matches 1 and 1 matches 1.0."""
        root = build_from_data([1, 2])
        self.assertTrue(contains(root, True))
        self.assertTrue(contains(root, 1.0))
        self.assertFalse(contains(build_from_data([0]), None))

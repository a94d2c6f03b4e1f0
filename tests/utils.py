"""Utility functions for testing Merkle tree invariants."""

from typing import Optional

from merkle_trees.base import MerkleNode
from merkle_trees.invariants import TREE_FLAGS
from merkle_trees.tree_stats import Stats


def assert_tree_invariants_tc(tc, root: Optional[MerkleNode], stats: Stats, err_msg: Optional[str] = "") -> None:
    """TestCase version: use inside unittest.TestCase methods."""
    for flag in TREE_FLAGS:
        tc.assertTrue(
            getattr(stats, flag),
            f"Invariant failed: {flag} is False \n\n{err_msg}"
        )

    if root is None:
        tc.assertEqual(stats.node_count, 0, f"Empty tree has node_count={stats.node_count}\n\n{err_msg}")
        return

    tc.assertGreater(
        stats.leaf_count, 0,
        f"Invariant failed: leaf_count={stats.leaf_count} ≤ 0 for non-empty tree\n\n{err_msg}"
    )
    tc.assertEqual(
        stats.node_count, stats.leaf_count + stats.branch_count,
        f"Invariant failed: node_count={stats.node_count} ≠ leaves + branches\n\n{err_msg}"
    )
    tc.assertEqual(
        stats.leaf_count, stats.branch_count + 1,
        f"Invariant failed: leaf_count={stats.leaf_count} ≠ branch_count + 1\n\n{err_msg}"
    )
    # the padded fold always yields a perfect tree
    tc.assertEqual(
        stats.leaf_count, 2 ** stats.height,
        f"Invariant failed: leaf_count={stats.leaf_count} ≠ 2**height={2 ** stats.height}\n\n{err_msg}"
    )

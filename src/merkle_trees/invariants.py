"""Shared invariant-checking utilities.

Used by the stats scripts and the test suite alike.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Sequence

from merkle_trees.logging_config import get_logger
from merkle_trees.traversal import leaf_values

logger = get_logger(__name__)

if TYPE_CHECKING:
    from merkle_trees.base import MerkleNode
    from merkle_trees.tree_stats import Stats

TREE_FLAGS = (
    "leaf_digests_ok",
    "branch_digests_ok",
    "is_full_binary",
)


class InvariantError(Exception):
    """Raised when a Merkle tree invariant is violated."""


def assert_tree_invariants_raise(node: MerkleNode | None, stats: Stats) -> None:
    """Check all invariants, raising :class:`InvariantError` on the first failure."""
    for flag in TREE_FLAGS:
        if not getattr(stats, flag):
            logger.debug(f"Invariant failed: {flag} is False")
            raise InvariantError(f"Invariant failed: {flag} is False")

    if node is None:
        if stats.node_count != 0:
            raise InvariantError(f"Invariant failed: node_count={stats.node_count} ≠ 0 for empty tree")
        return

    if stats.leaf_count <= 0:
        raise InvariantError(f"Invariant failed: leaf_count={stats.leaf_count} ≤ 0 for non-empty tree")
    if stats.node_count != stats.leaf_count + stats.branch_count:
        raise InvariantError(
            f"Invariant failed: node_count={stats.node_count} ≠ "
            f"leaf_count={stats.leaf_count} + branch_count={stats.branch_count}"
        )
    if stats.leaf_count != stats.branch_count + 1:
        raise InvariantError(
            f"Invariant failed: leaf_count={stats.leaf_count} ≠ branch_count={stats.branch_count} + 1"
        )
    if stats.padding_count > stats.branch_count:
        raise InvariantError(
            f"Invariant failed: padding_count={stats.padding_count} > branch_count={stats.branch_count}"
        )


def check_leaf_values(
    node: MerkleNode | None,
    expected: Sequence[Any] | None = None,
) -> tuple[list[Any], bool, bool]:
    """Collect leaf data left to right and compare with *expected*.

    Padding copies trail the original values, so order is checked on the
    first ``len(expected)`` leaves only.

    Returns
    -------
    (values, presence_ok, order_ok)
    """
    values = leaf_values(node)
    if expected is None:
        return values, True, True

    expected = list(expected)
    presence_ok = (
        all(v in values for v in expected)
        and all(v in expected for v in values)
    )
    order_ok = values[:len(expected)] == expected
    return values, presence_ok, order_ok

"""Statistics and consistency checks for Merkle tree structures."""

from __future__ import annotations

from dataclasses import dataclass

from merkle_trees.base import LeafNode, MerkleNode
from merkle_trees.hashing import DEFAULT_HASHER, Hasher
from merkle_trees.logging_config import get_logger

logger = get_logger(__name__)


@dataclass
class Stats:
    """Aggregated statistics for a Merkle tree."""

    height: int
    node_count: int
    leaf_count: int
    branch_count: int
    padding_count: int
    leaf_digests_ok: bool
    branch_digests_ok: bool
    is_full_binary: bool


def _empty_stats() -> Stats:
    return Stats(
        height=0,
        node_count=0,
        leaf_count=0,
        branch_count=0,
        padding_count=0,
        leaf_digests_ok=True,
        branch_digests_ok=True,
        is_full_binary=True,
    )


def tree_stats_(node: MerkleNode | None, hasher: Hasher | None = None) -> Stats:
    """
    Returns aggregated statistics for a Merkle tree in **O(n)** time.

    Every digest is recomputed with *hasher* (default configuration if not
    given) and compared with the stored one.  A branch whose two children
    carry the same digest is counted as padding.
    """
    hasher = hasher or DEFAULT_HASHER
    stats = _empty_stats()

    if node is None:
        return stats

    if not isinstance(node, MerkleNode):
        raise TypeError(f"tree_stats_() expects MerkleNode or None, got {type(node).__name__}")

    # Explicit stack of (node, depth) so hand-built trees of any depth are accepted
    stack = [(node, 0)]
    while stack:
        current, d = stack.pop()
        stats.node_count += 1

        if isinstance(current, LeafNode):
            stats.leaf_count += 1
            stats.height = max(stats.height, d)
            if hasher(current.data) != current.digest:
                stats.leaf_digests_ok = False
                logger.debug(f"Leaf digest mismatch for data={current.data!r}: stored {current.digest}")
            continue

        stats.branch_count += 1
        stats.height = max(stats.height, d + 1)

        children = (current.left, current.right)
        if not all(isinstance(c, MerkleNode) for c in children):
            stats.is_full_binary = False
            stats.branch_digests_ok = False
            logger.debug(f"Branch {current.digest} does not have two node children")
        else:
            left, right = children
            if hasher.combine(left.digest, right.digest) != current.digest:
                stats.branch_digests_ok = False
                logger.debug(f"Branch digest mismatch: stored {current.digest}")
            if left.digest == right.digest:
                stats.padding_count += 1

        for child in children:
            if isinstance(child, MerkleNode):
                stack.append((child, d + 1))

    return stats

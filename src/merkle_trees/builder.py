"""Bottom-up construction of a Merkle tree from an ordered sequence of leaves."""

from __future__ import annotations

from typing import Any, Iterable, Sequence

from merkle_trees.base import MerkleNode, make_branch, make_leaf
from merkle_trees.hashing import DEFAULT_HASHER, Hasher
from merkle_trees.logging_config import get_logger

logger = get_logger(__name__)


def pad_level(nodes: Sequence[MerkleNode]) -> list[MerkleNode]:
    """Return *nodes* as a list, with a copy of the last node appended if the count is odd."""
    level = list(nodes)
    if len(level) % 2 == 1:
        level.append(level[-1].clone())
    return level


def pair_level(nodes: Sequence[MerkleNode], hasher: Hasher | None = None) -> list[MerkleNode]:
    """Combine one level into the next: pairs (0, 1), (2, 3), ... become branches."""
    hasher = hasher or DEFAULT_HASHER
    level = pad_level(nodes)
    return [make_branch(level[i], level[i + 1], hasher) for i in range(0, len(level), 2)]


def build_tree(nodes: Sequence[MerkleNode], hasher: Hasher | None = None) -> MerkleNode | None:
    """
    Fold a sequence of nodes into a single root.

    An empty sequence yields ``None``; a single node is returned as the root
    unchanged.  Otherwise every level is padded (if odd) and paired left to
    right until one node remains.

    Parameters:
        nodes: The bottom level, usually leaves from :func:`make_leaf`.
        hasher: Digest function for the branches (default: sha256, 16 hex chars).

    Returns:
        MerkleNode | None: The root, or None for an empty input.
    """
    level = list(nodes)
    if not level:
        logger.debug("build_tree(): empty input, no tree")
        return None

    for node in level:
        if not isinstance(node, MerkleNode):
            raise TypeError(f"build_tree(): expected MerkleNode, got {type(node).__name__}")

    round_no = 0
    while len(level) > 1:
        round_no += 1
        next_level = pair_level(level, hasher)
        logger.debug(f"Round {round_no}: {len(level)} nodes -> {len(next_level)} branches")
        level = next_level

    return level[0]


def build_from_data(values: Iterable[Any], hasher: Hasher | None = None) -> MerkleNode | None:
    """Wrap each raw value in a leaf and build the tree over them."""
    hasher = hasher or DEFAULT_HASHER
    return build_tree([make_leaf(v, hasher) for v in values], hasher)

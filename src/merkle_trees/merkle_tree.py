"""Merkle tree wrapper around an optional root node."""

from __future__ import annotations

from typing import Any, Iterable, Iterator

from merkle_trees.base import MerkleNode
from merkle_trees.builder import build_from_data, build_tree
from merkle_trees.display import format_report, render_diagram
from merkle_trees.hashing import DEFAULT_HASHER, Hasher
from merkle_trees.logging_config import get_logger
from merkle_trees.traversal import contains, depth, iter_leaves, leaf_values
from merkle_trees.tree_stats import Stats, tree_stats_

logger = get_logger(__name__)


class MerkleTree:
    """
    A built, read-only Merkle tree.

    ``root`` is None for a tree built from no data; every accessor returns
    its natural empty value in that case instead of raising.

    Attributes:
        root (MerkleNode | None): The root node.
        hasher (Hasher): Digest function the tree was built with.
    """
    __slots__ = ("root", "hasher")

    def __init__(self, root: MerkleNode | None = None, hasher: Hasher | None = None):
        self.root = root
        self.hasher = hasher or DEFAULT_HASHER

    @classmethod
    def from_data(cls, values: Iterable[Any], hasher: Hasher | None = None) -> MerkleTree:
        hasher = hasher or DEFAULT_HASHER
        return cls(build_from_data(values, hasher), hasher)

    @classmethod
    def from_nodes(cls, nodes: Iterable[MerkleNode], hasher: Hasher | None = None) -> MerkleTree:
        hasher = hasher or DEFAULT_HASHER
        return cls(build_tree(list(nodes), hasher), hasher)

    def is_empty(self) -> bool:
        return self.root is None

    def get_root_hash(self) -> str | None:
        """Get the Merkle root hash of the tree."""
        if self.is_empty():
            return None
        return self.root.digest

    def depth(self) -> int:
        return depth(self.root)

    def contains(self, value: Any) -> bool:
        return contains(self.root, value)

    def leaf_values(self) -> list[Any]:
        return leaf_values(self.root)

    def render(self, color: bool = False) -> str:
        return render_diagram(self.root, color=color)

    def report(self, title: str | None = None, color: bool = False) -> str:
        if title is None:
            title = f"MERKLE TREE DIAGRAM (using {self.hasher.config.algorithm} hashing)"
        return format_report(self.root, title=title, color=color)

    def stats(self) -> Stats:
        return tree_stats_(self.root, self.hasher)

    def verify_integrity(self) -> bool:
        """Verify the integrity of the entire tree by recomputing every digest."""
        if self.is_empty():
            return True
        stats = self.stats()
        ok = stats.leaf_digests_ok and stats.branch_digests_ok and stats.is_full_binary
        if not ok:
            logger.debug(f"Integrity check failed for root {self.root.digest}")
        return ok

    def __len__(self) -> int:
        return sum(1 for _ in iter_leaves(self.root))

    def __contains__(self, value: Any) -> bool:
        return self.contains(value)

    def __iter__(self) -> Iterator[Any]:
        for leaf in iter_leaves(self.root):
            yield leaf.data

    def __str__(self):
        return "Empty MerkleTree" if self.is_empty() else f"MerkleTree(root={self.root.digest})"

    __repr__ = __str__

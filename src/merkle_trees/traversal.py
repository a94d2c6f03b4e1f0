"""
Read-only walks over a built Merkle tree.

All functions accept ``None`` (the empty tree) and return the natural empty
value for it.  They use an explicit stack rather than recursion so that
hand-built, arbitrarily deep trees can be walked too.
"""

from __future__ import annotations

from typing import Any, Iterator

from merkle_trees.base import BranchNode, LeafNode, MerkleNode


def iter_nodes(node: MerkleNode | None) -> Iterator[MerkleNode]:
    """Yield every node in pre-order, left subtree before right."""
    if node is None:
        return
    stack = [node]
    while stack:
        current = stack.pop()
        yield current
        if isinstance(current, BranchNode):
            stack.extend(c for c in (current.right, current.left) if c is not None)


def iter_leaves(node: MerkleNode | None) -> Iterator[LeafNode]:
    """Yield the leaves left to right, padding copies included."""
    for current in iter_nodes(node):
        if isinstance(current, LeafNode):
            yield current


def leaf_values(node: MerkleNode | None) -> list[Any]:
    return [leaf.data for leaf in iter_leaves(node)]


def depth(node: MerkleNode | None) -> int:
    """
    Number of branch levels above the deepest leaf.

    0 for a leaf or an empty tree; ``1 + max(depth(left), depth(right))``
    for a branch.
    """
    if node is None:
        return 0
    deepest = 0
    stack = [(node, 0)]
    while stack:
        current, d = stack.pop()
        if isinstance(current, BranchNode):
            stack.append((current.left, d + 1))
            stack.append((current.right, d + 1))
        elif d > deepest:
            deepest = d
    return deepest


def contains(node: MerkleNode | None, target: Any) -> bool:
    """
    True iff some leaf under *node* holds data equal to *target*.

    This is a full search over the leaf data, not a digest-guided proof.
    Matching uses Python equality (``==``), not identity or type-strict
    comparison: ``1``, ``1.0`` and ``True`` all match each other.
    """
    for leaf in iter_leaves(node):
        if leaf.data == target:
            return True
    return False

from abc import ABC, abstractmethod
from typing import Any, Optional

from merkle_trees.hashing import DEFAULT_HASHER, Hasher


class MerkleNode(ABC):
    """
    Abstract base class for the two node kinds of a Merkle tree.

    Nodes are immutable once built: every attribute is exposed through a
    read-only property.
    """
    __slots__ = ("_digest",)

    KIND = "node"

    @property
    def digest(self) -> str:
        return self._digest

    @abstractmethod
    def is_leaf(self) -> bool:
        """True for :class:`LeafNode`, False for :class:`BranchNode`."""

    @abstractmethod
    def clone(self) -> "MerkleNode":
        """Return a distinct node equal in data and digest, without re-hashing."""


class LeafNode(MerkleNode):
    """Wraps one original data value and its digest."""
    __slots__ = ("_data",)

    KIND = "leaf"

    def __init__(self, data: Any, digest: str):
        self._data = data
        self._digest = digest

    @property
    def data(self) -> Any:
        return self._data

    def is_leaf(self) -> bool:
        return True

    def clone(self) -> "LeafNode":
        return LeafNode(self._data, self._digest)

    def __repr__(self) -> str:
        return f"LeafNode(data={self._data!r}, digest={self._digest!r})"


class BranchNode(MerkleNode):
    """Owns exactly two children; its digest commits to both child digests."""
    __slots__ = ("_left", "_right")

    KIND = "branch"

    def __init__(self, left: MerkleNode, right: MerkleNode, digest: str):
        self._left = left
        self._right = right
        self._digest = digest

    @property
    def left(self) -> MerkleNode:
        return self._left

    @property
    def right(self) -> MerkleNode:
        return self._right

    def is_leaf(self) -> bool:
        return False

    def clone(self) -> "BranchNode":
        return BranchNode(self._left.clone(), self._right.clone(), self._digest)

    def __repr__(self) -> str:
        return f"BranchNode(digest={self._digest!r})"


def make_leaf(data: Any, hasher: Optional[Hasher] = None) -> LeafNode:
    """Wrap *data* in a leaf, computing ``digest = hash(data)``."""
    hasher = hasher or DEFAULT_HASHER
    return LeafNode(data, hasher(data))


def make_branch(left: MerkleNode, right: MerkleNode, hasher: Optional[Hasher] = None) -> BranchNode:
    """
    Combine two nodes into a branch with ``digest = hash(left.digest + right.digest)``.

    Raises:
        TypeError: If either child is not a MerkleNode.
    """
    if not isinstance(left, MerkleNode):
        raise TypeError(f"make_branch(): expected MerkleNode for left, got {type(left).__name__}")
    if not isinstance(right, MerkleNode):
        raise TypeError(f"make_branch(): expected MerkleNode for right, got {type(right).__name__}")
    hasher = hasher or DEFAULT_HASHER
    return BranchNode(left, right, hasher.combine(left.digest, right.digest))

"""
merkle_trees — Binary Merkle trees over ordered data blocks.

Quick-start imports::

    from merkle_trees import MerkleTree, build_from_data, render_diagram

    tree = MerkleTree.from_data(["Block1", "Block2", "Block3", "Block4"])
    print(tree.report())
"""

# Hashing
from merkle_trees.config import HashConfig
from merkle_trees.hashing import Hasher, canonical_text, hash_value

# Nodes & construction
from merkle_trees.base import BranchNode, LeafNode, MerkleNode, make_branch, make_leaf
from merkle_trees.builder import build_from_data, build_tree

# Traversal & display
from merkle_trees.display import format_report, render_diagram
from merkle_trees.traversal import contains, depth, iter_leaves, iter_nodes, leaf_values

# Tree wrapper
from merkle_trees.merkle_tree import MerkleTree

# Stats & invariants
from merkle_trees.invariants import (
    InvariantError,
    assert_tree_invariants_raise,
    check_leaf_values,
)
from merkle_trees.tree_stats import Stats, tree_stats_
from merkle_trees.utils import level_sizes, padded_leaf_count, pairing_rounds

__all__ = [
    # Nodes
    "BranchNode",
    # Hashing
    "HashConfig",
    "Hasher",
    # Stats & invariants
    "InvariantError",
    "LeafNode",
    "MerkleNode",
    # Tree wrapper
    "MerkleTree",
    "Stats",
    "assert_tree_invariants_raise",
    # Construction
    "build_from_data",
    "build_tree",
    "canonical_text",
    "check_leaf_values",
    # Traversal & display
    "contains",
    "depth",
    "format_report",
    "hash_value",
    "iter_leaves",
    "iter_nodes",
    "leaf_values",
    "level_sizes",
    "make_branch",
    "make_leaf",
    "padded_leaf_count",
    "pairing_rounds",
    "render_diagram",
    "tree_stats_",
]

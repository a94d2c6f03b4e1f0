"""Pretty-printing and display utilities for Merkle trees."""

from __future__ import annotations

from merkle_trees.base import BranchNode, MerkleNode
from merkle_trees.hashing import canonical_text
from merkle_trees.traversal import depth

# ANSI colour codes
PRIMARY = '\033[32m'    # green
SECONDARY = '\033[33m'  # yellow
RESET = '\033[0m'

# Connectors
MID = "├── "
LAST = "└── "
PIPE = "│   "
BLANK = "    "

RULE = "═" * 60


def render_diagram(node: MerkleNode | None, color: bool = False) -> str:
    """
    Render the tree one node per line, depth first, left before right::

        [BRANCH] 31a4d67600544a97
        ├── [BRANCH] a7fcf418642952ed
        │   ├── [LEAF] 40e9b17a3391b5f4 (Block1)
        │   └── [LEAF] 61edd5d6b03c20f7 (Block2)
        └── [BRANCH] 442a211b1b103629
            ...

    The root has no connector.  Returns ``""`` for an empty tree.
    """
    if node is None:
        return ""

    lines = []
    # (node, prefix, is_left); is_left is None for the root
    stack = [(node, "", None)]
    while stack:
        current, prefix, is_left = stack.pop()
        if current is None:
            continue
        symbol = "" if is_left is None else (MID if is_left else LAST)
        digest = f"{PRIMARY}{current.digest}{RESET}" if color else current.digest
        info = f"{symbol}[{current.KIND.upper()}] {digest}"

        if not isinstance(current, BranchNode):
            data = canonical_text(current.data)
            if color:
                data = f"{SECONDARY}{data}{RESET}"
            lines.append(f"{prefix}{info} ({data})\n")
            continue

        lines.append(f"{prefix}{info}\n")
        child_prefix = prefix + ("" if is_left is None else (PIPE if is_left else BLANK))
        stack.append((current.right, child_prefix, False))
        stack.append((current.left, child_prefix, True))

    return "".join(lines)


def format_report(node: MerkleNode | None, title: str = "MERKLE TREE DIAGRAM", color: bool = False) -> str:
    """Framed diagram followed by the root hash and depth; ``"Tree is empty"`` for no tree."""
    if node is None:
        return "Tree is empty"

    lines = [
        RULE,
        title,
        RULE,
        render_diagram(node, color=color).rstrip("\n"),
        RULE,
        f"Root Hash: {node.digest}",
        f"Tree Depth: {depth(node)}",
        RULE,
    ]
    return "\n".join(lines) + "\n"

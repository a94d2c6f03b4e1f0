"""
Level arithmetic for the padded pairwise fold used by the tree builder.
"""


def _check_count(n: int) -> None:
    if not isinstance(n, int) or n < 0:
        raise ValueError(f"leaf count must be a non-negative int, got {n!r}")


def level_sizes(n: int) -> list[int]:
    """
    Node count of every level, bottom to top, for *n* leaves.

    Each odd level is padded to even before pairing, so the next level has
    ``ceil(size / 2)`` nodes.

    Raises:
        ValueError: If n is negative.
    """
    _check_count(n)
    if n == 0:
        return []
    sizes = [n]
    while sizes[-1] > 1:
        sizes.append((sizes[-1] + 1) // 2)
    return sizes


def pairing_rounds(n: int) -> int:
    """Rounds needed to reduce n leaves to one root; this is the depth of the built tree."""
    _check_count(n)
    if n <= 1:
        return 0
    return (n - 1).bit_length()


def padded_leaf_count(n: int) -> int:
    """Leaf nodes reachable from the root after padding (the tree is perfect)."""
    _check_count(n)
    if n == 0:
        return 0
    return 1 << pairing_rounds(n)

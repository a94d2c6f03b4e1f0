"""
Digest function used for Merkle leaves and branches.

Values are converted to text, UTF-8 encoded and hashed; the lowercase hex
digest is truncated according to the active :class:`HashConfig`.  A branch
digest is the hash of its two child digests concatenated with no separator,
so ``combine("ab", "c") == combine("a", "bc")``.  Changing that framing would
change every root digest, so it is kept as is.
"""

import hashlib
from typing import Any, Optional

from merkle_trees.config import HashConfig


def canonical_text(value: Any) -> str:
    """Return the textual form of *value*.

    Bytes are decoded as UTF-8 with invalid sequences replaced; this form is
    for display only, the hasher consumes bytes as they are.
    """
    if isinstance(value, str):
        return value
    if isinstance(value, (bytes, bytearray, memoryview)):
        return bytes(value).decode("utf-8", errors="replace")
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


class Hasher:
    """Deterministic, fixed-width digest function configured by a :class:`HashConfig`."""

    __slots__ = ("config",)

    def __init__(self, config: Optional[HashConfig] = None):
        self.config = config if config is not None else HashConfig()

    def __call__(self, value: Any) -> str:
        h = hashlib.new(self.config.algorithm)
        if isinstance(value, (bytes, bytearray, memoryview)):
            h.update(bytes(value))
        else:
            h.update(canonical_text(value).encode("utf-8"))
        digest = h.hexdigest()
        if self.config.digest_chars is not None:
            return digest[:self.config.digest_chars]
        return digest

    def combine(self, left_digest: str, right_digest: str) -> str:
        """Digest of a branch: hash of the two child digests, concatenated."""
        return self(left_digest + right_digest)

    def __eq__(self, other):
        if not isinstance(other, Hasher):
            return NotImplemented
        return self.config == other.config

    def __hash__(self):
        return hash(self.config)

    def __repr__(self) -> str:
        return f"Hasher(algorithm={self.config.algorithm!r}, digest_chars={self.config.digest_chars!r})"


DEFAULT_HASHER = Hasher()


def hash_value(value: Any) -> str:
    """Hash *value* with the default configuration (sha256, 16 hex chars)."""
    return DEFAULT_HASHER(value)

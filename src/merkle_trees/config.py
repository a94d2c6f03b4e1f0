"""Hash configuration for Merkle tree construction."""

import hashlib
import os
from dataclasses import dataclass
from typing import Optional

DEFAULT_ALGORITHM = "sha256"
DEFAULT_DIGEST_CHARS = 16


@dataclass(frozen=True)
class HashConfig:
    """Which digest function to use and how much of its hex output to keep.

    The defaults (sha256 truncated to 16 hex characters) are short enough to
    read in a diagram but far below full cryptographic strength.  Set
    ``digest_chars=None`` to keep the whole digest.
    """

    algorithm: str = DEFAULT_ALGORITHM
    digest_chars: Optional[int] = DEFAULT_DIGEST_CHARS

    def __post_init__(self):
        try:
            full_chars = hashlib.new(self.algorithm).digest_size * 2
        except (ValueError, TypeError) as e:
            raise ValueError(f"Unknown hash algorithm: {self.algorithm!r}") from e

        if full_chars == 0:
            # variable-length digests (shake_*) need an explicit length
            raise ValueError(f"Hash algorithm {self.algorithm!r} has no fixed digest size")

        if self.digest_chars is not None:
            if not isinstance(self.digest_chars, int) or isinstance(self.digest_chars, bool):
                raise ValueError(f"digest_chars must be an int or None, got {type(self.digest_chars).__name__}")
            if self.digest_chars <= 0 or self.digest_chars % 2 != 0:
                raise ValueError(f"digest_chars must be a positive even number, got {self.digest_chars}")
            if self.digest_chars > full_chars:
                raise ValueError(
                    f"digest_chars={self.digest_chars} exceeds the {full_chars} hex characters "
                    f"produced by {self.algorithm}"
                )

    @property
    def full_digest_chars(self) -> int:
        return hashlib.new(self.algorithm).digest_size * 2

    @property
    def output_chars(self) -> int:
        """Length of every digest produced under this configuration."""
        return self.digest_chars if self.digest_chars is not None else self.full_digest_chars

    @classmethod
    def from_env(cls) -> "HashConfig":
        """Create config from environment variables."""
        algorithm = os.environ.get("MERKLE_HASH_ALGORITHM", DEFAULT_ALGORITHM)
        raw_chars = os.environ.get("MERKLE_DIGEST_CHARS", str(DEFAULT_DIGEST_CHARS)).strip()
        if raw_chars.lower() in ("full", "none", ""):
            digest_chars = None
        else:
            try:
                digest_chars = int(raw_chars)
            except ValueError as e:
                raise ValueError(f"MERKLE_DIGEST_CHARS must be an int or 'full', got {raw_chars!r}") from e
        return cls(algorithm=algorithm, digest_chars=digest_chars)

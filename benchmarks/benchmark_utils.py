"""
Benchmarking utilities for Merkle trees.

This module provides common utilities and base classes for ASV benchmarking
that work with ASV's built-in timing and stabilization mechanisms.

Reproducibility:
    All random data generation uses deterministic seeds by default.
    The default seed can be overridden via the BENCHMARK_SEED environment variable,
    and the measured tree sizes via BENCHMARK_SIZES.

Logging:
    BENCHMARK_LOG_LEVEL (default INFO) is applied to the library logger before
    each benchmark. It must be INFO or higher to avoid
    performance contamination from verbose debug output.
"""

import gc
import logging
import random
from typing import List

import numpy as np

from benchmarks.config import BenchmarkConfig

BENCHMARK_CONFIG = BenchmarkConfig.from_env()
DEFAULT_BENCHMARK_SEED = BENCHMARK_CONFIG.seed

_logger = logging.getLogger(__name__)


class BenchmarkUtils:
    """Deterministic test data for Merkle tree benchmarks."""

    @staticmethod
    def check_logging_level():
        """
        Raise if DEBUG logging is enabled for the library.

        The builder logs every level reduction at DEBUG, which would dominate
        the measured time.
        """
        merkle_logger = logging.getLogger("merkle_trees")
        effective_level = merkle_logger.getEffectiveLevel()
        if effective_level <= logging.DEBUG:
            raise ValueError(
                f"Logging level is set to {logging.getLevelName(effective_level)}. "
                "Benchmarks require logging to be at INFO level or higher to avoid "
                "performance contamination from verbose debug output."
            )

    @staticmethod
    def generate_blocks(size: int, seed: int = None, block_bytes: int = 32) -> List[str]:
        """
        Generate *size* distinct text blocks.

        Args:
            size: Number of blocks to generate
            seed: Random seed for reproducibility. If None, uses DEFAULT_BENCHMARK_SEED.
            block_bytes: Random payload bytes per block (hex encoded)

        Returns:
            List of block strings, same output for the same inputs
        """
        if seed is None:
            seed = DEFAULT_BENCHMARK_SEED

        rng = np.random.default_rng(seed)
        payload = rng.integers(0, 256, size=(size, block_bytes), dtype=np.uint8)
        # index prefix keeps blocks distinct even if payloads collide
        return [f"Block{i}:{row.tobytes().hex()}" for i, row in enumerate(payload)]

    @staticmethod
    def create_lookup_values(blocks: List[str],
                             hit_ratio: float = 0.8,
                             seed: int = None,
                             num_lookups: int = 1000) -> List[str]:
        """
        Create values for membership checks with the given hit ratio.

        Args:
            blocks: Values stored in the tree (for hits)
            hit_ratio: Ratio of lookups that should be hits (0.0 to 1.0)
            seed: Random seed for reproducibility. If None, uses DEFAULT_BENCHMARK_SEED.
            num_lookups: Number of lookup values to generate

        Returns:
            Shuffled list of lookup values
        """
        if seed is None:
            seed = DEFAULT_BENCHMARK_SEED

        rnd = random.Random(seed)
        num_hits = int(num_lookups * hit_ratio) if blocks else 0
        num_misses = num_lookups - num_hits

        hit_values = rnd.choices(blocks, k=num_hits) if num_hits > 0 else []
        miss_values = [f"Missing{i}" for i in range(num_misses)]

        lookup_values = hit_values + miss_values
        rnd.shuffle(lookup_values)
        return lookup_values


class BaseBenchmark:
    """Base class for ASV benchmarks.

    Subclasses prepare their data in ``setup`` after calling
    ``super().setup(*params)``, then disable garbage collection.
    """

    params = []
    param_names = []

    warmup_time = 0.1
    sample_time = 0.4

    def setup(self, *params):
        logging.getLogger("merkle_trees").setLevel(BENCHMARK_CONFIG.log_level)
        BenchmarkUtils.check_logging_level()

    def teardown(self, *params):
        if not gc.isenabled():
            gc.enable()

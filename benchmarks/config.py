"""Benchmark configuration read from the environment."""

import os
from dataclasses import dataclass


@dataclass
class BenchmarkConfig:
    """Configuration for benchmark runs."""

    # Reproducibility
    seed: int = 42

    # Tree sizes; the defaults straddle powers of two
    sizes: list[int] = None

    # Logging
    log_level: str = "INFO"

    def __post_init__(self):
        if self.sizes is None:
            self.sizes = [1, 7, 64, 1000, 4097]

    @classmethod
    def from_env(cls) -> "BenchmarkConfig":
        """Create config from environment variables.

        ``BENCHMARK_SIZES`` is a comma-separated list of tree sizes.
        """
        raw_sizes = os.environ.get("BENCHMARK_SIZES")
        sizes = [int(s) for s in raw_sizes.split(",") if s.strip()] if raw_sizes else None
        return cls(
            seed=int(os.environ.get("BENCHMARK_SEED", "42")),
            sizes=sizes,
            log_level=os.environ.get("BENCHMARK_LOG_LEVEL", "INFO").upper(),
        )

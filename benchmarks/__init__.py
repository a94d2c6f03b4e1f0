"""
Benchmarks package for Merkle trees.

This package contains ASV benchmarks for:
- Tree construction from raw blocks and from pre-built leaves
- Depth computation and diagram rendering
- Membership checks with varying hit ratios

Data is generated from fixed seeds so results are comparable across runs.
"""

from .benchmark_utils import BaseBenchmark, BenchmarkUtils

__all__ = ["BaseBenchmark", "BenchmarkUtils"]

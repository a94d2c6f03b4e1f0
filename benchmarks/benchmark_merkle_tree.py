"""
ASV benchmarks for Merkle tree construction, traversal and membership checks.
"""

import gc

from benchmarks.benchmark_utils import BENCHMARK_CONFIG, BaseBenchmark, BenchmarkUtils
from merkle_trees.base import make_leaf
from merkle_trees.builder import build_from_data, build_tree
from merkle_trees.display import render_diagram
from merkle_trees.traversal import contains, depth


class MerkleBuildBenchmarks(BaseBenchmark):
    """Benchmarks for building a tree from raw blocks."""

    params = [
        BENCHMARK_CONFIG.sizes,
    ]
    param_names = ['size']

    min_run_count = 5

    def setup(self, size):
        super().setup(size)
        self.blocks = BenchmarkUtils.generate_blocks(size)
        self.leaves = [make_leaf(b) for b in self.blocks]
        gc.collect()
        gc.disable()

    def time_build_from_data(self, size):
        build_from_data(self.blocks)

    def time_build_from_leaves(self, size):
        build_tree(self.leaves)


class MerkleTraversalBenchmarks(BaseBenchmark):
    """Benchmarks for depth, diagram rendering and membership on a built tree."""

    params = [
        [s for s in BENCHMARK_CONFIG.sizes if s > 1] or BENCHMARK_CONFIG.sizes,
        [0.0, 1.0],   # hit ratios
    ]
    param_names = ['size', 'hit_ratio']

    min_run_count = 5

    _tree_cache = {}

    def setup(self, size, hit_ratio):
        super().setup(size, hit_ratio)
        if size not in self._tree_cache:
            blocks = BenchmarkUtils.generate_blocks(size)
            self._tree_cache[size] = (blocks, build_from_data(blocks))
        blocks, self.root = self._tree_cache[size]
        self.lookups = BenchmarkUtils.create_lookup_values(blocks, hit_ratio=hit_ratio, num_lookups=100)
        gc.collect()
        gc.disable()

    def time_depth(self, size, hit_ratio):
        depth(self.root)

    def time_render_diagram(self, size, hit_ratio):
        render_diagram(self.root)

    def time_contains(self, size, hit_ratio):
        for value in self.lookups:
            contains(self.root, value)

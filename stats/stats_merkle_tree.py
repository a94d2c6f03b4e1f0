"""Statistics for Merkle trees."""

import argparse
import logging
import os
import random
import time
from datetime import datetime
from statistics import mean

import numpy as np
from tqdm import trange

from merkle_trees.builder import build_from_data
from merkle_trees.invariants import InvariantError, assert_tree_invariants_raise
from merkle_trees.traversal import contains, depth
from merkle_trees.tree_stats import tree_stats_
from merkle_trees.utils import padded_leaf_count, pairing_rounds

logger = logging.getLogger(__name__)


def random_blocks(n: int, block_bytes: int = 16) -> list[str]:
    """n distinct random text blocks."""
    payload = np.random.randint(0, 256, size=(n, block_bytes), dtype=np.uint8)
    return [f"Block{i}:{row.tobytes().hex()}" for i, row in enumerate(payload)]


def repeated_experiment(size: int, repetitions: int, lookups: int = 100) -> None:
    """
    Repeatedly builds Merkle trees over `size` random blocks and checks the
    structure against the padded-fold arithmetic. Aggregates statistics and
    timings over all repetitions.
    """
    t_all_0 = time.perf_counter()

    results = []
    times_build = []
    times_stats = []
    times_contains = []

    expected_height = pairing_rounds(size)
    expected_leaves = padded_leaf_count(size)

    for _ in trange(repetitions, desc=f"n={size}", leave=False):
        blocks = random_blocks(size)

        t0 = time.perf_counter()
        root = build_from_data(blocks)
        times_build.append(time.perf_counter() - t0)

        t0 = time.perf_counter()
        stats = tree_stats_(root)
        times_stats.append(time.perf_counter() - t0)

        probes = random.choices(blocks, k=lookups // 2) + [f"Missing{i}" for i in range(lookups - lookups // 2)]
        t0 = time.perf_counter()
        hits = sum(1 for p in probes if contains(root, p))
        times_contains.append(time.perf_counter() - t0)

        assert_tree_invariants_raise(root, stats)
        if depth(root) != expected_height:
            raise InvariantError(f"depth={depth(root)} ≠ expected {expected_height} for n={size}")
        if stats.leaf_count != expected_leaves:
            raise InvariantError(f"leaf_count={stats.leaf_count} ≠ expected {expected_leaves} for n={size}")
        if hits != lookups // 2:
            raise InvariantError(f"membership hits={hits} ≠ expected {lookups // 2}")

        results.append(stats)

    avg_leaf_count = mean(s.leaf_count for s in results)
    avg_node_count = mean(s.node_count for s in results)
    avg_padding = mean(s.padding_count for s in results)
    avg_height = mean(s.height for s in results)

    rows = [
        ("Data blocks", size),
        ("Leaf count", avg_leaf_count),
        ("Node count", avg_node_count),
        ("Padding branches", avg_padding),
        ("Leaf amplification", avg_leaf_count / size if size else 0),
        ("Height", avg_height),
        ("Expected height", expected_height),
    ]

    header = f"{'Metric':<20} {'Avg':>15}"
    sep_line = "-" * len(header)
    logger.info(header)
    logger.info(sep_line)
    for name, avg in rows:
        logger.info(f"{name:<20} {avg:15.2f}")

    perf = [
        ("Build time (s)", times_build),
        ("Stats time (s)", times_stats),
        ("Contains time (s)", times_contains),
    ]
    total_sum = sum(sum(ts) for _, ts in perf)

    header = f"{'Metric':<20}{'Avg(s)':>13}{'Var(s)':>13}{'Total(s)':>13}{'%Total':>10}"
    sep = "-" * len(header)

    logger.info("")
    logger.info("Performance summary:")
    logger.info(header)
    logger.info(sep)
    for name, ts in perf:
        avg = mean(ts)
        var = mean((t - avg) ** 2 for t in ts)
        total = sum(ts)
        pct = (total / total_sum * 100) if total_sum else 0
        logger.info(f"{name:<20}{avg:13.6f}{var:13.6f}{total:13.6f}{pct:10.2f}%")

    logger.info(sep)
    logger.info("Execution time: %.3f seconds", time.perf_counter() - t_all_0)


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Run statistics experiments for Merkle trees.")
    parser.add_argument(
        "--sizes", type=int, nargs="+", default=[1, 3, 5, 6, 7, 100, 1000, 10_000], help="List of tree sizes to test."
    )
    parser.add_argument("--repetitions", type=int, default=10, help="Number of repetitions for each experiment.")
    parser.add_argument("--seed", type=int, default=None, help="Random seed for reproducibility.")
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        default="INFO",
        help="Set the logging level (default: INFO)",
    )

    args = parser.parse_args()

    if args.seed is not None:
        random.seed(args.seed)
        np.random.seed(args.seed)

    log_dir = os.path.join(os.getcwd(), "stats/logs/merkle_tree_logs")
    os.makedirs(log_dir, exist_ok=True)

    ts = datetime.now().strftime("%Y%m%d_%H%M%S")
    log_path = os.path.join(log_dir, f"run_{ts}.log")

    log_level = getattr(logging, args.log_level)
    logging.basicConfig(
        level=log_level,
        format="%(asctime)s [%(levelname)s] %(message)s",
        handlers=[
            logging.FileHandler(log_path, mode="w"),
            logging.StreamHandler(),
        ],
        force=True,
    )
    logging.getLogger("merkle_trees").setLevel(log_level)

    for n in args.sizes:
        logger.info("")
        logger.info(f"---------------- NOW RUNNING EXPERIMENT: n = {n}, repetitions = {args.repetitions} ----------------")
        t0 = time.perf_counter()
        repeated_experiment(size=n, repetitions=args.repetitions)
        logger.info(f"Total experiment time: {time.perf_counter() - t0:.3f} seconds")

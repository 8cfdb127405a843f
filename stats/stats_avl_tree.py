"""Statistics for AVL trees."""

import argparse
import logging
import os
import random
import time
from datetime import datetime
from statistics import mean

import numpy as np

from avl_trees.avl import AVLTree
from avl_trees.logging_config import add_file_handler, get_logger
from avl_trees.invariants import assert_tree_invariants_raise, avl_height_bound
from avl_trees.tree_stats import avl_tree_stats_
from avl_trees.utils import random_distinct_keys

logger = get_logger("Stats")


def random_avl_tree_of_size(n: int, seed=None):
    """Build an AVL tree from n distinct random keys with random values.

    Returns the tree and the rebalancing units reported by every insertion.
    """
    keys = random_distinct_keys(n, seed=seed)
    rng = random.Random(seed)
    tree = AVLTree()
    tree_insert = tree.insert
    units = [tree_insert(key, rng.random() < 0.5) for key in keys]
    return tree, keys, units


def repeated_experiment(size: int, repetitions: int, seed=None) -> None:
    """
    Repeatedly builds random AVL trees with ``size`` items, then deletes all
    items again in random order. Aggregates structure statistics, rebalancing
    work and timings over all repetitions.
    """
    t_all_0 = time.perf_counter()

    results = []  # List of tuples: (stats, avg insert units, avg delete units)
    times_build = []
    times_stats = []
    times_delete = []

    for rep in range(repetitions):
        t0 = time.perf_counter()
        tree, keys, insert_units = random_avl_tree_of_size(
            size, seed=None if seed is None else seed + rep
        )
        times_build.append(time.perf_counter() - t0)

        t0 = time.perf_counter()
        stats = avl_tree_stats_(tree)
        times_stats.append(time.perf_counter() - t0)

        assert_tree_invariants_raise(tree, stats)

        random.shuffle(keys)
        t0 = time.perf_counter()
        delete_units = [tree.delete(key) for key in keys]
        times_delete.append(time.perf_counter() - t0)

        assert_tree_invariants_raise(tree, avl_tree_stats_(tree))
        results.append((stats, mean(insert_units), mean(delete_units) if delete_units else 0))

    bound = avl_height_bound(size)

    avg_height = mean(s.height for s, _, _ in results)
    avg_true = mean(s.true_count for s, _, _ in results)
    avg_ins = mean(i for _, i, _ in results)
    avg_del = mean(d for _, _, d in results)
    var_height = mean((s.height - avg_height) ** 2 for s, _, _ in results)
    var_true = mean((s.true_count - avg_true) ** 2 for s, _, _ in results)
    var_ins = mean((i - avg_ins) ** 2 for _, i, _ in results)
    var_del = mean((d - avg_del) ** 2 for _, _, d in results)

    rows = [
        ("Node count", size, None),
        ("True values", avg_true, var_true),
        ("Height", avg_height, var_height),
        ("AVL height bound", bound, None),
        ("Insert rebalancing", avg_ins, var_ins),
        ("Delete rebalancing", avg_del, var_del),
    ]

    header = f"{'Metric':<20} {'Avg':>15} {'(Var)':>15}"
    sep_line = "-" * len(header)

    logger.info(header)
    logger.info(sep_line)
    for name, avg, var in rows:
        if var is None:
            logger.info(f"{name:<20} {avg:>15.2f}")
        else:
            var_str = f"({var:.2f})"
            logger.info(f"{name:<20} {avg:15.2f} {var_str:>15}")

    perf_rows = [
        ("Build time (s)", times_build),
        ("Stats time (s)", times_stats),
        ("Delete time (s)", times_delete),
    ]
    total_sum = sum(sum(times) for _, times in perf_rows)

    header = f"{'Metric':<20}{'Avg(s)':>13}{'Total(s)':>13}{'%Total':>10}"
    sep = "-" * len(header)

    logger.info("")
    logger.info("Performance summary:")
    logger.info(header)
    logger.info(sep)
    for name, times in perf_rows:
        total = sum(times)
        pct = (total / total_sum * 100) if total_sum else 0
        logger.info(f"{name:<20}{mean(times):13.6f}{total:13.6f}{pct:10.2f}%")

    logger.info(sep)
    logger.info("Execution time: %.3f seconds", time.perf_counter() - t_all_0)


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Run statistics experiments for AVL trees.")
    parser.add_argument(
        "--sizes", type=int, nargs="+", default=[10, 100, 1000, 10_000], help="List of tree sizes to test."
    )
    parser.add_argument("--repetitions", type=int, default=5, help="Number of repetitions for each experiment.")
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

    log_dir = os.path.join(os.getcwd(), "stats/logs/avl_tree_logs")
    os.makedirs(log_dir, exist_ok=True)

    ts = datetime.now().strftime("%Y%m%d_%H%M%S")
    log_path = os.path.join(log_dir, f"run_{ts}.log")

    add_file_handler(log_path, getattr(logging, args.log_level))

    for n in args.sizes:
        logger.info("")
        logger.info(
            f"---------------- NOW RUNNING EXPERIMENT: n = {n}, repetitions = {args.repetitions} ----------------"
        )
        t0 = time.perf_counter()
        repeated_experiment(size=n, repetitions=args.repetitions, seed=args.seed)
        logger.info(f"Total experiment time: {time.perf_counter() - t0:.3f} seconds")

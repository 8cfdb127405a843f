"""Console timing experiments for AVL trees.

Two experiments are provided:

1. ``prefix_experiment``: for random trees of size ``prefix_step * i``,
   time ``prefix_aggregate`` and ``slow_prefix_aggregate`` for every key in
   ascending order. Averages are reported over all keys and over the first
   ``head_count`` keys only, where the order-list walk is shortest.
2. ``insert_experiment``: for sequences of length ``insert_step * i``, time
   each single ``insert`` into an AVL tree and into the unbalanced BST for
   ascending, balanced-order and random keys.

All times are in nanoseconds. Results are returned as dataclass rows and
rendered by the ``format_*`` helpers.
"""

import time
from dataclasses import dataclass, field
from statistics import mean
from typing import Callable, Dict, List, Tuple

from tqdm import tqdm

from benchmarks.benchmark_utils import DISTRIBUTIONS, TREE_CLASSES, BenchmarkUtils
from benchmarks.config import BenchmarkConfig

from avl_trees.logging_config import get_logger

logger = get_logger("Experiments")


@dataclass
class PrefixRow:
    """Averages of one round of the prefix experiment (ns per query)."""
    round: int
    size: int
    avg_fast: float
    avg_slow: float
    avg_fast_head: float
    avg_slow_head: float


@dataclass
class InsertRow:
    """Averages of one round of the insert experiment (ns per insert)."""
    round: int
    size: int
    averages: Dict[Tuple[str, str], float] = field(default_factory=dict)


def _time_call(fn: Callable, arg) -> int:
    start = time.perf_counter_ns()
    fn(arg)
    return time.perf_counter_ns() - start


def prefix_experiment(config: BenchmarkConfig) -> List[PrefixRow]:
    rows = []
    for i in tqdm(range(1, config.rounds + 1), desc="Prefix rounds", disable=not config.show_progress):
        size = config.prefix_step * i
        seed = config.seed + i
        keys = BenchmarkUtils.generate_deterministic_keys(size, seed=seed)
        values = BenchmarkUtils.generate_values(size, seed=seed)
        tree = BenchmarkUtils.build_tree('avl', keys, values)

        fast = []
        slow = []
        for key in tree.keys_in_order():
            fast.append(_time_call(tree.prefix_aggregate, key))
            slow.append(_time_call(tree.slow_prefix_aggregate, key))

        head = min(config.head_count, size)
        rows.append(PrefixRow(
            round=i,
            size=size,
            avg_fast=mean(fast),
            avg_slow=mean(slow),
            avg_fast_head=mean(fast[:head]),
            avg_slow_head=mean(slow[:head]),
        ))
        logger.debug("Prefix round %d done (n=%d)", i, size)
    return rows


def insert_experiment(config: BenchmarkConfig) -> List[InsertRow]:
    rows = []
    for i in tqdm(range(1, config.rounds + 1), desc="Insert rounds", disable=not config.show_progress):
        size = config.insert_step * i
        row = InsertRow(round=i, size=size)
        for distribution in DISTRIBUTIONS:
            keys = BenchmarkUtils.generate_deterministic_keys(
                size, seed=config.seed + i, distribution=distribution
            )
            for tree_type, tree_cls in TREE_CLASSES.items():
                tree = tree_cls()
                insert = tree.insert
                times = []
                for key in keys:
                    start = time.perf_counter_ns()
                    insert(key, True)
                    times.append(time.perf_counter_ns() - start)
                row.averages[(distribution, tree_type)] = mean(times)
        rows.append(row)
        logger.debug("Insert round %d done (n=%d)", i, size)
    return rows


def format_prefix_table(rows: List[PrefixRow], head_count: int = 100) -> str:
    header = (f"{'i':>3} | {'n':>6} | {'fast avg':>12} | {'slow avg':>12} | "
              f"{f'fast avg@{head_count}':>14} | {f'slow avg@{head_count}':>14}")
    lines = [header, "-" * len(header)]
    for r in rows:
        lines.append(
            f"{r.round:>3} | {r.size:>6} | {r.avg_fast:12.1f} | {r.avg_slow:12.1f} | "
            f"{r.avg_fast_head:14.1f} | {r.avg_slow_head:14.1f}"
        )
    return "\n".join(lines)


def format_insert_table(rows: List[InsertRow]) -> str:
    columns = [(d, t) for d in DISTRIBUTIONS for t in TREE_CLASSES]
    header = f"{'i':>3} | {'n':>6} | " + " | ".join(f"{d[:4] + '/' + t:>10}" for d, t in columns)
    lines = [header, "-" * len(header)]
    for r in rows:
        cells = " | ".join(f"{r.averages[c]:10.1f}" for c in columns)
        lines.append(f"{r.round:>3} | {r.size:>6} | {cells}")
    return "\n".join(lines)

"""
Benchmarking utilities for AVL trees and the BST baseline.

This module provides common utilities and base classes for ASV benchmarking
and for the console experiments in :mod:`benchmarks.experiments`.

Reproducibility:
    All random data generation uses deterministic seeds by default.
    The default seed can be overridden via the BENCHMARK_SEED environment variable.

Logging:
    Benchmarks should be run with logging at INFO level or higher to avoid
    performance contamination from verbose debug output.
"""

import gc
import logging
import os
from typing import List

import numpy as np

from avl_trees.avl import AVLTree
from avl_trees.bst_tree import BSTree
from avl_trees.utils import optimal_sequence, random_distinct_keys

# Default seed for deterministic benchmarking - can be overridden via environment variable
DEFAULT_BENCHMARK_SEED = int(os.environ.get('BENCHMARK_SEED', '42'))

DISTRIBUTIONS = ('sequential', 'optimal', 'uniform')

TREE_CLASSES = {
    'avl': AVLTree,
    'bst': BSTree,
}


class BenchmarkUtils:
    """Utility class for benchmarking operations."""

    @staticmethod
    def check_logging_level():
        """
        Check if logging level is appropriate for benchmarking.

        Raises if DEBUG or lower (more verbose) logging is enabled, as this can
        significantly contaminate benchmark results with I/O overhead.
        """
        effective_level = logging.getLogger("avl_trees").getEffectiveLevel()
        if effective_level <= logging.DEBUG:
            raise ValueError(
                f"Logging level is set to {logging.getLevelName(effective_level)}. "
                "Benchmarks require logging to be at INFO level or higher to avoid "
                "performance contamination from verbose debug output."
            )

    @staticmethod
    def generate_deterministic_keys(size: int,
                                    seed: int = None,
                                    distribution: str = 'uniform') -> List[int]:
        """
        Generate deterministic, distinct keys for benchmarking.

        Args:
            size: Number of keys to generate
            seed: Random seed for reproducibility. If None, uses DEFAULT_BENCHMARK_SEED.
            distribution: 'sequential' (0, 1, 2, ...), 'optimal' (balanced
                insertion order of 1..size) or 'uniform' (random 31-bit keys)

        Returns:
            List of deterministic keys
        """
        if seed is None:
            seed = DEFAULT_BENCHMARK_SEED

        if distribution == 'sequential':
            return list(range(size))
        elif distribution == 'optimal':
            return list(optimal_sequence(size))
        elif distribution == 'uniform':
            return random_distinct_keys(size, seed=seed)
        else:
            raise ValueError(f"Unknown distribution: {distribution}")

    @staticmethod
    def generate_values(size: int, seed: int = None, true_ratio: float = 0.5) -> List[bool]:
        """Generate deterministic boolean payloads."""
        if seed is None:
            seed = DEFAULT_BENCHMARK_SEED
        rng = np.random.default_rng(seed)
        return [bool(v) for v in rng.random(size) < true_ratio]

    @staticmethod
    def build_tree(tree_type: str, keys: List[int], values: List[bool] = None):
        """Build a tree of the given type ('avl' or 'bst') from the keys."""
        tree = TREE_CLASSES[tree_type]()
        tree_insert = tree.insert
        if values is None:
            for key in keys:
                tree_insert(key, True)
        else:
            for key, value in zip(keys, values):
                tree_insert(key, value)
        return tree


class BaseBenchmark:
    """Base class for ASV benchmarks optimized for ASV's built-in timing.

    This class provides a standard setup/teardown pattern that ensures:
    - Garbage collection is disabled during timed sections
    - Logging level is appropriate for benchmarking
    """

    params = []
    param_names = []

    warmup_time = 0.1
    sample_time = 0.4

    def setup(self, *params):
        """Subclasses call this first, prepare data, then ``_freeze_gc()``."""
        BenchmarkUtils.check_logging_level()

    def _freeze_gc(self):
        gc.collect()
        gc.disable()

    def teardown(self, *params):
        """Re-enable garbage collection after measurement completes."""
        if not gc.isenabled():
            gc.enable()

"""
Benchmarks package for threaded AVL trees.

This package contains ASV benchmarks and console experiments for:
- prefix aggregate queries (O(log n) descent vs. O(n) order-list walk)
- insertion into AVL trees vs. the unbalanced BST baseline, for ascending,
  balanced-order and random key sequences

All key sequences are generated deterministically from a seed so that runs
can be compared with each other.
"""

from .benchmark_utils import BaseBenchmark, BenchmarkUtils

__all__ = ["BaseBenchmark", "BenchmarkUtils"]

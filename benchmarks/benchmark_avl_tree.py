"""
ASV benchmarks for AVLTree and BSTree operations.

Covers tree construction for the three key distributions, deletion of all
keys, and fast vs. slow prefix aggregate queries.
"""

from benchmarks.benchmark_utils import BaseBenchmark, BenchmarkUtils


class TreeInsertBenchmarks(BaseBenchmark):
    """Benchmarks for building a tree via sequential inserts."""

    params = [
        ['avl', 'bst'],
        [1000, 2000, 5000],
        ['sequential', 'optimal', 'uniform'],
    ]
    param_names = ['tree_type', 'size', 'distribution']

    min_run_count = 5

    def setup(self, tree_type, size, distribution):
        super().setup(tree_type, size, distribution)
        self.keys = BenchmarkUtils.generate_deterministic_keys(
            size=size,
            seed=42 + size,
            distribution=distribution,
        )
        self._freeze_gc()

    def time_insert_batch_construction(self, tree_type, size, distribution):
        BenchmarkUtils.build_tree(tree_type, self.keys)


class AVLDeleteBenchmarks(BaseBenchmark):
    """Benchmarks for deleting every key of a random AVL tree."""

    params = [[1000, 10_000]]
    param_names = ['size']

    def setup(self, size):
        super().setup(size)
        self.keys = BenchmarkUtils.generate_deterministic_keys(size, seed=42 + size)
        self.tree = BenchmarkUtils.build_tree('avl', self.keys)
        self._freeze_gc()

    def time_delete_all(self, size):
        tree_delete = self.tree.delete
        for key in self.keys:
            tree_delete(key)


class PrefixAggregateBenchmarks(BaseBenchmark):
    """Benchmarks for ``prefix_aggregate`` against its order-list reference."""

    params = [[500, 1000, 1500, 2000, 2500]]
    param_names = ['size']

    _tree_cache = {}

    def setup(self, size):
        super().setup(size)
        if size not in self._tree_cache:
            keys = BenchmarkUtils.generate_deterministic_keys(size, seed=42 + size)
            values = BenchmarkUtils.generate_values(size, seed=42 + size)
            self._tree_cache[size] = BenchmarkUtils.build_tree('avl', keys, values)
        self.tree = self._tree_cache[size]
        self.query_keys = self.tree.keys_in_order()
        self._freeze_gc()

    def time_prefix_aggregate(self, size):
        query = self.tree.prefix_aggregate
        for key in self.query_keys:
            query(key)

    def time_slow_prefix_aggregate(self, size):
        query = self.tree.slow_prefix_aggregate
        for key in self.query_keys:
            query(key)

"""Unified test base classes for all tree types."""

from typing import Dict, Iterable, Optional
import unittest
import logging

from avl_trees.avl import AVLTree
from avl_trees.display import print_structure
from avl_trees.invariants import check_keys_and_values
from avl_trees.tree_stats import avl_tree_stats_
from tests.utils import CountingAVLTree, assert_tree_invariants_tc

from avl_trees.logging_config import get_test_logger

logger = get_test_logger("TestBase")


class BaseTestCase(unittest.TestCase):
    """Base class for all tests with common functionality."""

    def validate_tree(self, tree: AVLTree, expected: Optional[Dict[int, bool]] = None,
                      err_msg: Optional[str] = ""):
        """Validate all tree invariants and, optionally, the stored items."""
        stats = avl_tree_stats_(tree)
        if not err_msg and not tree.is_empty():
            err_msg = f"Tree structure:\n{print_structure(tree)}"
        assert_tree_invariants_tc(self, tree, stats, err_msg)

        keys, presence_ok, order_ok = check_keys_and_values(tree, expected)
        self.assertTrue(order_ok, f"Keys must be strictly ascending: {keys}\n{err_msg}")
        self.assertEqual(len(keys), tree.size())
        if expected is not None:
            self.assertTrue(
                presence_ok,
                f"Keys {keys} do not match expected {sorted(expected)}\n{err_msg}"
            )
            for key, value in expected.items():
                self.assertIs(tree.search(key), value, f"search({key}) mismatch\n{err_msg}")
        return stats


class AVLTreeTestCase(BaseTestCase):
    """Test case for AVL trees; tearDown re-checks every invariant."""

    def setUp(self):
        self.tree = CountingAVLTree()
        # key -> value of everything that should be in the tree
        self.expected: Dict[int, bool] = {}
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug(f"Created AVLTree test {self.id()}")

    def insert(self, key: int, value: bool = True) -> int:
        units = self.tree.insert(key, value)
        self.expected[key] = value
        return units

    def delete(self, key: int) -> int:
        units = self.tree.delete(key)
        del self.expected[key]
        return units

    def insert_all(self, keys: Iterable[int], value: bool = True):
        return [self.insert(key, value) for key in keys]

    def tearDown(self):
        """Common tearDown logic for tree tests."""
        if getattr(self, 'tree', None) is None:
            return
        self.validate_tree(self.tree, self.expected)

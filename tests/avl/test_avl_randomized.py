"""Randomized insert/delete sequences with full invariant checks after every step."""

import random
import unittest

from tqdm import tqdm

from avl_trees.avl import AVLTree
from avl_trees.base import DuplicateKeyError, KeyNotFoundError
from avl_trees.invariants import assert_tree_invariants_raise, avl_height_bound
from avl_trees.tree_stats import avl_tree_stats_

from tests.test_base import AVLTreeTestCase
from tests.logconfig import logger


class TestRandomizedSequences(AVLTreeTestCase):

    def test_insert_then_delete_all_in_random_order(self):
        rng = random.Random(1234)
        keys = rng.sample(range(1_000_000), 1000)
        for key in keys:
            self.insert(key, rng.random() < 0.5)
        self.validate_tree(self.tree, self.expected)

        rng.shuffle(keys)
        for key in keys:
            self.delete(key)
        self.assertTrue(self.tree.is_empty())
        self.assertIsNone(self.tree.min())
        self.assertIsNone(self.tree.max())
        self.assertEqual(self.tree.keys_in_order(), [])

    def test_mixed_operations_check_every_step(self):
        rng = random.Random(99)
        repetitions = 1500
        for step in tqdm(range(repetitions), desc="Mixed operations", unit="op", leave=False):
            key = rng.randrange(300)
            if key in self.expected and rng.random() < 0.6:
                self.delete(key)
            elif key not in self.expected:
                self.insert(key, rng.random() < 0.5)
            else:
                with self.assertRaises(DuplicateKeyError):
                    self.tree.insert(key, True)
            if step % 10 == 0:
                self.validate_tree(self.tree, self.expected, f"step {step}, key {key}")
        logger.debug("Final size after mixed operations: %d", self.tree.size())

    def test_failed_operations_are_idempotent(self):
        rng = random.Random(5)
        keys = rng.sample(range(500), 100)
        self.insert_all(keys)
        snapshot = [(n.key, n.value, n.height, n.true_count) for n in self.tree.iter_nodes()]
        root, min_node, max_node = self.tree.root, self.tree.min_node, self.tree.max_node
        for key in keys[:20]:
            with self.assertRaises(DuplicateKeyError):
                self.tree.insert(key, False)
        for key in range(500, 520):
            with self.assertRaises(KeyNotFoundError):
                self.tree.delete(key)
        self.assertEqual(
            [(n.key, n.value, n.height, n.true_count) for n in self.tree.iter_nodes()], snapshot
        )
        self.assertIs(self.tree.root, root)
        self.assertIs(self.tree.min_node, min_node)
        self.assertIs(self.tree.max_node, max_node)
        self.assertEqual(self.tree.size(), 100)


class TestRoundTripAndBounds(unittest.TestCase):

    def test_round_trip(self):
        rng = random.Random(42)
        tree = AVLTree()
        for key in rng.sample(range(100_000), 500):
            value = rng.random() < 0.5
            tree.insert(key, value)
            self.assertIs(tree.search(key), value)
            if rng.random() < 0.3:
                tree.delete(key)
                self.assertIsNone(tree.search(key))

    def test_height_bound_for_adversarial_orders(self):
        for keys in (range(2000), range(2000, 0, -1), [i ^ 0x155 for i in range(2000)]):
            tree = AVLTree()
            for key in keys:
                tree.insert(key, True)
            stats = avl_tree_stats_(tree)
            assert_tree_invariants_raise(tree, stats)
            self.assertLessEqual(tree.physical_height(), avl_height_bound(tree.size()))

    def test_delete_from_one_side_keeps_balance(self):
        tree = AVLTree()
        for key in range(1, 1024):
            tree.insert(key, key % 2 == 0)
        for key in range(1, 700):
            tree.delete(key)
            if key % 50 == 0:
                assert_tree_invariants_raise(tree, avl_tree_stats_(tree))
        self.assertEqual(tree.keys_in_order(), list(range(700, 1024)))
        self.assertLessEqual(tree.physical_height(), avl_height_bound(tree.size()))


if __name__ == "__main__":
    unittest.main()

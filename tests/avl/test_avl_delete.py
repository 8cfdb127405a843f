"""Tests for AVLTree.delete: structural cases, cascading rotations and failures."""

import unittest

from avl_trees.avl import AVLTree
from avl_trees.base import KeyNotFoundError
from avl_trees.display import print_structure

from tests.test_base import AVLTreeTestCase

# Level order of a minimal AVL tree of height 4:
# 8(5(3(2(1),4),7(6)),11(10(9),12))
FIBONACCI_TREE_KEYS = [8, 5, 11, 3, 7, 10, 12, 2, 4, 6, 9, 1]


class TestDeleteSimpleCases(AVLTreeTestCase):

    def test_delete_only_node(self):
        self.insert(5)
        units = self.delete(5)
        self.assertEqual(units, 0)
        self.assertTrue(self.tree.is_empty())
        self.assertIsNone(self.tree.root)
        self.assertIsNone(self.tree.min())
        self.assertIsNone(self.tree.max())

    def test_delete_leaf_demotes_parent(self):
        self.insert_all([5, 3])
        units = self.delete(3)
        self.assertEqual(units, 1)
        self.assertEqual(self.tree.root.height, 0)
        self.assertIs(self.tree.min_node, self.tree.root)

    def test_delete_root_with_single_child(self):
        self.insert_all([5, 8])
        units = self.delete(5)
        self.assertEqual(units, 0)
        self.assertEqual(self.tree.root.key, 8)
        self.assertIsNone(self.tree.root.parent)
        self.assertIs(self.tree.min_node, self.tree.root)

    def test_delete_inner_node_with_single_child(self):
        self.insert_all([5, 3, 8, 9])
        units = self.delete(8)
        self.assertEqual(units, 1)
        self.assertEqual(self.tree.root.right.key, 9)
        self.assertIs(self.tree.root.right.parent, self.tree.root)

    def test_delete_sibling_leaf_keeps_heights(self):
        self.insert_all([5, 3, 8])
        units = self.delete(8)
        self.assertEqual(units, 0)
        self.assertEqual(self.tree.root.height, 1)

    def test_delete_updates_min_and_max(self):
        self.insert(5, True)
        self.insert(3, False)
        self.insert(8, False)
        self.delete(3)
        self.assertEqual(self.tree.min_node.key, 5)
        self.assertIs(self.tree.min(), True)
        self.delete(8)
        self.assertEqual(self.tree.max_node.key, 5)
        self.assertIsNone(self.tree.min_node.prev)
        self.assertIsNone(self.tree.max_node.next)

    def test_deleted_key_is_gone(self):
        self.insert_all([5, 3, 8])
        self.delete(3)
        self.assertIsNone(self.tree.search(3))
        self.assertNotIn(3, self.tree)


class TestDeleteTwoChildren(AVLTreeTestCase):

    def test_delete_root_of_balanced_tree(self):
        self.insert_all([4, 2, 6, 1, 3, 5, 7])
        min_before, max_before = self.tree.min(), self.tree.max()
        units = self.delete(4)
        self.assertEqual(units, 0)
        root = self.tree.root
        self.assertEqual(root.key, 5)
        self.assertEqual(root.left.key, 2)
        self.assertEqual(root.right.key, 6)
        self.assertEqual(root.height, 2)
        self.assertFalse(root.right.left.is_real())
        self.assertEqual(self.tree.min(), min_before)
        self.assertEqual(self.tree.max(), max_before)
        self.assertEqual(self.tree.min_node.key, 1)
        self.assertEqual(self.tree.max_node.key, 7)

    def test_successor_is_immediate_right_child(self):
        self.insert_all([4, 2, 6, 1, 3, 7])
        units = self.delete(4)
        root = self.tree.root
        self.assertEqual(root.key, 6)
        self.assertEqual(root.left.key, 2)
        self.assertEqual(root.right.key, 7)
        self.assertEqual(root.height, 2)
        self.assertEqual(units, 0)

    def test_successor_takes_over_aggregate(self):
        self.insert(4, True)
        self.insert(2, False)
        self.insert(6, True)
        self.insert(5, False)
        self.delete(4)
        self.assertEqual(self.tree.root.key, 5)
        self.assertEqual(self.tree.root.true_count, 1)
        self.assertEqual(self.tree.root.height, 1)

    def test_delete_inner_node_with_two_children(self):
        self.insert_all([8, 4, 12, 2, 6, 10, 14, 5, 7])
        self.delete(4)
        self.assertEqual(self.tree.root.left.key, 5)
        self.assertEqual(self.tree.keys_in_order(), [2, 5, 6, 7, 8, 10, 12, 14])


class TestDeleteRotations(AVLTreeTestCase):

    def test_delete_triggers_single_rotation_at_root(self):
        self.insert_all([2, 1, 3, 4])
        units = self.delete(1)
        self.assertEqual(units, 1)
        self.assertEqual(self.tree.rotation_steps, 1)
        self.assertEqual(self.tree.root.key, 3)
        self.assertEqual(self.tree.root.height, 1)

    def test_delete_triggers_double_rotation(self):
        self.insert_all([2, 1, 4, 3])
        units = self.delete(1)
        self.assertEqual(units, 1)
        self.assertEqual(self.tree.root.key, 3)
        self.assertEqual(self.tree.root.left.key, 2)
        self.assertEqual(self.tree.root.right.key, 4)

    def test_delete_cascades_rotations_to_root(self):
        self.insert_all(FIBONACCI_TREE_KEYS)
        self.assertEqual(self.tree.rotation_steps, 0)
        self.assertEqual(self.tree.physical_height(), 4)

        units = self.delete(12)
        self.assertEqual(units, 2)
        self.assertEqual(self.tree.rotation_steps, 2)
        root = self.tree.root
        self.assertEqual(root.key, 5)
        self.assertEqual(root.right.key, 8)
        self.assertEqual(root.right.right.key, 10)
        self.assertEqual(self.tree.physical_height(), 3)


class TestDeleteFailures(unittest.TestCase):

    def test_delete_from_empty_tree(self):
        tree = AVLTree()
        with self.assertRaises(KeyNotFoundError) as ctx:
            tree.delete(99)
        self.assertEqual(ctx.exception.key, 99)
        self.assertEqual(tree.size(), 0)
        self.assertTrue(tree.is_empty())
        self.assertIsNone(tree.min())
        self.assertIsNone(tree.max())

    def test_delete_absent_key_leaves_tree_untouched(self):
        tree = AVLTree()
        for key in [8, 4, 12, 2, 6]:
            tree.insert(key, key % 4 == 0)
        before = print_structure(tree)
        with self.assertRaises(KeyNotFoundError):
            tree.delete(5)
        with self.assertRaises(KeyError):
            tree.delete(100)
        self.assertEqual(print_structure(tree), before)
        self.assertEqual(tree.size(), 5)

    def test_delete_twice(self):
        tree = AVLTree()
        tree.insert(1, True)
        tree.delete(1)
        with self.assertRaises(KeyNotFoundError):
            tree.delete(1)


if __name__ == "__main__":
    unittest.main()

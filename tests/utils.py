"""Utility functions for testing AVL tree invariants."""

from typing import Optional

from avl_trees.avl import AVLTree
from avl_trees.invariants import TREE_FLAGS, avl_height_bound
from avl_trees.tree_stats import Stats


def assert_tree_invariants_tc(tc, t: AVLTree, stats: Stats, err_msg: Optional[str] = "") -> None:
    """TestCase version: use inside unittest.TestCase methods."""
    for flag in TREE_FLAGS:
        tc.assertTrue(
            getattr(stats, flag),
            f"Invariant failed: {flag} is False \n\n{err_msg}"
        )

    if t.is_empty():
        tc.assertIsNone(t.root, f"Empty tree must not have a root\n\n{err_msg}")
        tc.assertIsNone(t.min(), f"Empty tree must report no min\n\n{err_msg}")
        tc.assertIsNone(t.max(), f"Empty tree must report no max\n\n{err_msg}")
        tc.assertEqual(t.size(), 0)
        return

    tc.assertGreater(
        stats.node_count, 0,
        f"Invariant failed: node_count={stats.node_count} ≤ 0 for non-empty tree\n\n{err_msg}"
    )
    tc.assertLessEqual(
        stats.height, avl_height_bound(stats.node_count),
        f"Invariant failed: height={stats.height} above AVL bound for n={stats.node_count}\n\n{err_msg}"
    )
    tc.assertEqual(
        t.physical_height(), stats.height,
        f"Invariant failed: physical_height()={t.physical_height()} ≠ {stats.height}\n\n{err_msg}"
    )
    tc.assertEqual(t.min_node.key, stats.least_key)
    tc.assertEqual(t.max_node.key, stats.greatest_key)


class CountingAVLTree(AVLTree):
    """AVLTree that records how many rotation steps were dispatched."""

    def __init__(self):
        super().__init__()
        self.rotation_steps = 0

    def _dispatch_rotation(self, node):
        self.rotation_steps += 1
        return super()._dispatch_rotation(node)

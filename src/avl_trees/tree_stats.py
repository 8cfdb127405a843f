"""Statistics and invariant checking for AVL tree structures."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Optional

from avl_trees.logging_config import get_logger

if TYPE_CHECKING:
    from avl_trees.avl.avl_tree_base import AVLTree
    from avl_trees.node import AVLNode

logger = get_logger(__name__)


@dataclass
class Stats:
    """Aggregated statistics for an AVL tree."""

    node_count: int
    height: int
    true_count: int
    least_key: Optional[int]
    greatest_key: Optional[int]
    is_search_tree: bool
    is_balanced: bool
    heights_correct: bool
    aggregates_correct: bool
    parents_consistent: bool
    linked_order_list: bool
    min_max_correct: bool
    size_correct: bool


def avl_tree_stats_(t: AVLTree) -> Stats:
    """
    Returns aggregated statistics for an AVL tree in **O(n)** time.

    Every cached field (height, true count, parent link, order-list link,
    min/max and size) is recomputed from scratch and compared with the
    stored value, so a ``True`` flag certifies the corresponding invariant.
    """
    stats = Stats(
        node_count=0,
        height=-1,
        true_count=0,
        least_key=None,
        greatest_key=None,
        is_search_tree=True,
        is_balanced=True,
        heights_correct=True,
        aggregates_correct=True,
        parents_consistent=True,
        linked_order_list=True,
        min_max_correct=True,
        size_correct=True,
    )

    # ---------- empty tree return ---------------------------------
    if t is None or t.root is None:
        if t is not None:
            stats.min_max_correct = t.min_node is None and t.max_node is None
            stats.size_correct = t.size() == 0
        return stats

    root = t.root
    if root.parent is not None:
        stats.parents_consistent = False

    in_order: list[AVLNode] = []
    stats.height, stats.node_count, stats.true_count = _subtree_stats(
        root, None, None, stats, in_order
    )
    stats.least_key = in_order[0].key
    stats.greatest_key = in_order[-1].key

    stats.size_correct = t.size() == stats.node_count
    stats.min_max_correct = t.min_node is in_order[0] and t.max_node is in_order[-1]
    stats.linked_order_list = _check_order_list(t, in_order)

    if not all((stats.is_search_tree, stats.is_balanced, stats.heights_correct,
                stats.aggregates_correct, stats.parents_consistent,
                stats.linked_order_list, stats.min_max_correct, stats.size_correct)):
        logger.debug("Tree statistics report a violated invariant: %s", stats)
    return stats


def _subtree_stats(
    node: AVLNode,
    lower: Optional[int],
    upper: Optional[int],
    stats: Stats,
    in_order: list,
) -> tuple[int, int, int]:
    """Return (height, node count, true count) of the subtree, recording violations in ``stats``."""
    if not node.is_real():
        return -1, 0, 0

    key = node.key
    if (lower is not None and key <= lower) or (upper is not None and key >= upper):
        stats.is_search_tree = False

    for child in (node.left, node.right):
        if child.is_real() and child.parent is not node:
            stats.parents_consistent = False

    left_height, left_count, left_true = _subtree_stats(node.left, lower, key, stats, in_order)
    in_order.append(node)
    right_height, right_count, right_true = _subtree_stats(node.right, key, upper, stats, in_order)

    height = 1 + max(left_height, right_height)
    true_count = left_true + (1 if node.value else 0) + right_true

    if abs(left_height - right_height) > 1:
        stats.is_balanced = False
    if node.height != height:
        stats.heights_correct = False
    if node.true_count != true_count:
        stats.aggregates_correct = False

    return height, left_count + 1 + right_count, true_count


def _check_order_list(t: AVLTree, in_order: list) -> bool:
    """Walk the order list both ways and compare it with the in-order traversal."""
    n = len(in_order)
    if t.min_node is None or t.max_node is None:
        return False

    node = t.min_node
    for expected in in_order:
        if node is not expected:
            return False
        node = node.next
    if node is not None:
        return False

    node = t.max_node
    for i in range(n - 1, -1, -1):
        if node is not in_order[i]:
            return False
        node = node.prev
    return node is None

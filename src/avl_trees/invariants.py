"""Shared invariant-checking utilities.

This module provides tree invariant validation that can be used by the
stats script, the benchmarks and the test suite alike.
"""

from __future__ import annotations

import math
from typing import TYPE_CHECKING

from avl_trees.logging_config import get_logger

logger = get_logger(__name__)

if TYPE_CHECKING:
    from avl_trees.avl.avl_tree_base import AVLTree
    from avl_trees.tree_stats import Stats

TREE_FLAGS = (
    "is_search_tree",
    "is_balanced",
    "heights_correct",
    "aggregates_correct",
    "parents_consistent",
    "linked_order_list",
    "min_max_correct",
    "size_correct",
)

# Height of an AVL tree with n nodes is below 1.4405 * log2(n + 2) - 0.3277
AVL_HEIGHT_FACTOR = 1.4405


class InvariantError(Exception):
    """Raised when an AVL tree invariant is violated."""


def avl_height_bound(size: int) -> float:
    """Upper bound on the height of any AVL tree holding ``size`` nodes."""
    return AVL_HEIGHT_FACTOR * math.log2(size + 2)


def assert_tree_invariants_raise(
    t: AVLTree,
    stats: Stats,
) -> None:
    """Check all invariants, raising :class:`InvariantError` on the first failure."""
    for flag in TREE_FLAGS:
        if not getattr(stats, flag):
            raise InvariantError(f"Invariant failed: {flag} is False")

    if t.is_empty():
        if t.min() is not None or t.max() is not None:
            raise InvariantError("Invariant failed: empty tree reports a min or max value")
        return

    if stats.node_count <= 0:
        raise InvariantError(f"Invariant failed: node_count={stats.node_count} ≤ 0 for non-empty tree")
    if stats.height > avl_height_bound(stats.node_count):
        raise InvariantError(
            f"Invariant failed: height={stats.height} exceeds AVL bound "
            f"{avl_height_bound(stats.node_count):.2f} for {stats.node_count} nodes"
        )
    if t.root.true_count != stats.true_count:
        raise InvariantError(
            f"Invariant failed: root true_count={t.root.true_count} ≠ stats.true_count={stats.true_count}"
        )


def check_keys_and_values(
    tree: AVLTree,
    expected: dict[int, bool] | None = None,
) -> tuple[list[int], bool, bool]:
    """Export keys via the order list and validate them.

    Returns
    -------
    (keys, presence_ok, order_ok)
        ``presence_ok`` compares keys and values against ``expected`` when it
        is given; ``order_ok`` states that the keys are strictly ascending.
    """
    keys = tree.keys_in_order()
    values = tree.values_in_order()

    order_ok = all(a < b for a, b in zip(keys, keys[1:]))

    presence_ok = True
    if expected is not None:
        presence_ok = (
            len(keys) == len(expected)
            and keys == sorted(expected)
            and values == [expected[k] for k in keys]
        )

    return keys, presence_ok, order_ok

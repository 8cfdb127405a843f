"""Prefix aggregate queries for AVL trees.

Provides :class:`AVLPrefixMixin`. The fast queries descend once from the
root and subtract the cached aggregates of every subtree that lies to the
right of the searched key, which is O(h). The ``slow_`` variants walk the
order list from the minimum and serve as reference implementations for
cross-validation and benchmarking, O(n).
"""

from __future__ import annotations

from avl_trees.base import PreconditionViolation


class AVLPrefixMixin:
    """Mixin that contributes prefix aggregate queries to *AVLTree*."""

    def prefix_aggregate(self, key: int) -> int:
        """
        Return the number of true values stored under keys <= ``key``.

        Precondition: ``key`` is present in the tree.
        Time complexity: O(log n)

        Raises:
            PreconditionViolation: If ``key`` is not present.
        """
        node = self.root
        if node is None:
            raise PreconditionViolation(key, "prefix_aggregate")
        count = node.true_count
        while node.is_real():
            if node.key == key:
                return count - node.right.true_count
            if node.key < key:
                node = node.right
            else:
                # node and its right subtree lie beyond key
                count -= (1 if node.value else 0) + node.right.true_count
                node = node.left
        raise PreconditionViolation(key, "prefix_aggregate")

    def prefix_xor(self, key: int) -> bool:
        """
        Return the XOR of the values stored under keys <= ``key``.

        Precondition: ``key`` is present in the tree.
        Time complexity: O(log n)
        """
        return bool(self.prefix_aggregate(key) & 1)

    def slow_prefix_aggregate(self, key: int) -> int:
        """
        Same result as :meth:`prefix_aggregate`, computed by starting at the
        minimum and following successors until ``key`` is passed.

        Time complexity: O(n)
        """
        if self.search(key) is None:
            raise PreconditionViolation(key, "slow_prefix_aggregate")
        count = 0
        node = self.min_node
        while node is not None and node.key <= key:
            if node.value:
                count += 1
            node = self.successor(node)
        return count

    def slow_prefix_xor(self, key: int) -> bool:
        """Same result as :meth:`prefix_xor`, via the order list. O(n)."""
        return bool(self.slow_prefix_aggregate(key) & 1)

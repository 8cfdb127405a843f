"""Balance engine for AVL trees.

Provides :class:`AVLBalanceMixin`, a mixin class that adds height and
aggregate maintenance plus single/double rotations to :class:`AVLTree`.

+--------------------------+------------------------------------------+
| Operation                | Time                                     |
+==========================+==========================================+
| ``_update_height``       | O(1)                                     |
| ``_update_aggregate``    | O(1)                                     |
| ``_update_aggregates_up``| O(h)  (node to root)                     |
| ``_rotate``              | O(1)                                     |
| ``_dispatch_rotation``   | O(1)  (one or two elementary rotations)  |
+--------------------------+------------------------------------------+

Every method keeps the invariants local to the nodes it touches: after
``_rotate`` returns, heights and aggregates of the two pivoted nodes are
correct again, while ancestors above the rotation site still have to be
refreshed by the caller.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional

from avl_trees.base import Direction, debug_log

if TYPE_CHECKING:
    from avl_trees.node import AVLNode


class AVLBalanceMixin:
    """Mixin that contributes rebalancing methods to *AVLTree*."""

    @staticmethod
    def _update_height(node: AVLNode) -> bool:
        """Recompute ``node.height`` from its children. Returns whether it changed."""
        new_height = 1 + max(node.left.height, node.right.height)
        changed = node.height != new_height
        node.height = new_height
        return changed

    @staticmethod
    def _update_aggregate(node: AVLNode) -> None:
        node.true_count = (
            node.left.true_count + (1 if node.value else 0) + node.right.true_count
        )

    def _update_aggregates_up(self, node: Optional[AVLNode]) -> None:
        """Refresh the aggregate of ``node`` and of every ancestor up to the root."""
        update = self._update_aggregate
        while node is not None:
            update(node)
            node = node.parent

    def _rotate(self, direction: Direction, node: AVLNode) -> AVLNode:
        """
        Rotate ``node`` in the given direction.

        The child on the opposite side (the pivot) takes ``node``'s place,
        ``node`` becomes the pivot's ``direction`` child and the pivot's
        former ``direction`` child moves over to ``node``.

        Returns:
            AVLNode: The pivot, i.e. the new root of the rotated subtree.
        """
        opposite = direction.opposite()
        parent = node.parent
        side = node.kind_of_child()
        pivot = node.get_child(opposite)
        inner = pivot.get_child(direction)

        node.set_child(opposite, inner)
        if inner.is_real():
            inner.parent = node

        pivot.set_child(direction, node)
        node.parent = pivot

        pivot.parent = parent
        if parent is None:
            self.root = pivot
        else:
            parent.set_child(side, pivot)

        # node is now below pivot, so it is refreshed first
        self._update_height(node)
        self._update_aggregate(node)
        self._update_height(pivot)
        self._update_aggregate(pivot)

        debug_log("Rotated %s at key %s, new subtree root %s",
                  direction.name, node.key, pivot.key)
        return pivot

    def _dispatch_rotation(self, node: AVLNode) -> AVLNode:
        """
        Perform the single or double rotation that rebalances ``node``.

        ``node`` must have a balance factor of +2 or -2. Left-heavy nodes whose
        left child leans right get a double rotation (child LEFT, node RIGHT);
        the right-heavy case is symmetric.

        Returns:
            AVLNode: The new root of the rebalanced subtree.
        """
        if node.balance_factor() > 0:
            if node.left.balance_factor() < 0:
                self._rotate(Direction.LEFT, node.left)
            return self._rotate(Direction.RIGHT, node)
        if node.right.balance_factor() > 0:
            self._rotate(Direction.RIGHT, node.right)
        return self._rotate(Direction.LEFT, node)

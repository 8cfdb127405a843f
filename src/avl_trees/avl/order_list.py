"""Order-list maintenance for AVL trees.

Provides :class:`AVLOrderListMixin`, which keeps the doubly linked list of
real nodes (``next``/``prev``) in ascending key order, together with the
cached ``min_node``/``max_node`` of the tree, and offers O(1)
successor/predecessor lookups and O(n) in-order export on top of it.

A newly inserted node has no list entry yet, so its neighbours are found
once by climbing the tree (``_find_adjacent``, O(h)). From then on every
neighbour lookup is a single attribute read. Deletion splices the list in
O(1) before the tree structure is touched.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Iterator, List, Optional, Tuple

from avl_trees.base import Direction

if TYPE_CHECKING:
    from avl_trees.node import AVLNode


class AVLOrderListMixin:
    """Mixin that contributes order-list methods to *AVLTree*."""

    # ------------------------------------------------------------------
    # Maintenance during insert / delete
    # ------------------------------------------------------------------

    @staticmethod
    def _find_adjacent(direction: Direction, node: AVLNode) -> Optional[AVLNode]:
        """
        Find the in-order neighbour of ``node`` by walking the tree.

        ``Direction.RIGHT`` yields the successor, ``Direction.LEFT`` the
        predecessor. Used only while the order list is being established for
        a freshly attached node.
        """
        opposite = direction.opposite()
        child = node.get_child(direction)
        if child.is_real():
            while child.get_child(opposite).is_real():
                child = child.get_child(opposite)
            return child
        while node.parent is not None and node.kind_of_child() is direction:
            node = node.parent
        return node.parent

    def _link_inserted(self, node: AVLNode) -> None:
        """Splice a freshly attached node into the order list."""
        nxt = self._find_adjacent(Direction.RIGHT, node)
        node.next = nxt
        if nxt is not None:
            nxt.prev = node
        prev = self._find_adjacent(Direction.LEFT, node)
        node.prev = prev
        if prev is not None:
            prev.next = node

    def _update_min_max_insert(self, node: AVLNode) -> None:
        if node.key > self.max_node.key:
            self.max_node = node
        if node.key < self.min_node.key:
            self.min_node = node

    def _unlink_deleted(self, node: AVLNode) -> None:
        """Remove ``node`` from the order list and move min/max off it."""
        nxt = node.next
        prev = node.prev
        if nxt is not None:
            nxt.prev = prev
        if prev is not None:
            prev.next = nxt
        if self.max_node is node:
            self.max_node = prev
        if self.min_node is node:
            self.min_node = nxt

    # ------------------------------------------------------------------
    # Public queries
    # ------------------------------------------------------------------

    def successor(self, node: AVLNode) -> Optional[AVLNode]:
        """
        Return the node following ``node`` in key order, or None for the maximum.

        ``node`` must belong to this tree. Time complexity: O(1).
        """
        return node.next

    def predecessor(self, node: AVLNode) -> Optional[AVLNode]:
        """Return the node preceding ``node`` in key order, or None for the minimum."""
        return node.prev

    def iter_nodes(self) -> Iterator[AVLNode]:
        """Yield the real nodes in ascending key order by following ``next``."""
        node = self.min_node
        for _ in range(self._size):
            yield node
            node = node.next

    def keys_in_order(self) -> List[int]:
        """
        Return a sorted list of all keys in the tree, or an empty list.

        Time complexity: O(n)
        """
        return [node.key for node in self.iter_nodes()]

    def values_in_order(self) -> List[bool]:
        """
        Return all values in the tree, sorted by their respective keys.

        Time complexity: O(n)
        """
        return [node.value for node in self.iter_nodes()]

    def items(self) -> Iterator[Tuple[int, bool]]:
        for node in self.iter_nodes():
            yield node.key, node.value

    def __iter__(self) -> Iterator[int]:
        for node in self.iter_nodes():
            yield node.key

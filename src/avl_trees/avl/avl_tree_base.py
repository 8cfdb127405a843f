"""Threaded AVL tree with subtree aggregates."""

from __future__ import annotations

from typing import Optional

from avl_trees.base import (
    AbstractOrderedMap,
    DuplicateKeyError,
    KeyNotFoundError,
    check_key,
    debug_log,
)
from avl_trees.node import AVLNode, Child
from avl_trees.avl.balance import AVLBalanceMixin
from avl_trees.avl.order_list import AVLOrderListMixin
from avl_trees.avl.prefix import AVLPrefixMixin


class AVLTree(AVLBalanceMixin, AVLOrderListMixin, AVLPrefixMixin, AbstractOrderedMap):
    """
    An AVL tree with integer keys and boolean values.

    Besides the usual search tree links every node is threaded into a doubly
    linked list in key order, and caches the number of true values in its
    subtree. The tree caches its minimum, maximum and size.

    Attributes:
        root (Optional[AVLNode]): The root node, None if the tree is empty.
        min_node (Optional[AVLNode]): The node with the smallest key.
        max_node (Optional[AVLNode]): The node with the largest key.
    """
    __slots__ = ("root", "min_node", "max_node", "_size")

    def __init__(self) -> None:
        self.root: Optional[AVLNode] = None
        self.min_node: Optional[AVLNode] = None
        self.max_node: Optional[AVLNode] = None
        self._size = 0

    def is_empty(self) -> bool:
        return self._size == 0

    def size(self) -> int:
        """Return the number of nodes in the tree. O(1)."""
        return self._size

    def __len__(self) -> int:
        return self._size

    def __contains__(self, key) -> bool:
        return self.search(key) is not None

    def __str__(self):
        return "Empty AVLTree" if self.is_empty() else f"AVLTree(root={self.root!r}, size={self._size})"

    __repr__ = __str__

    def get_root(self) -> Optional[AVLNode]:
        return self.root

    def physical_height(self) -> int:
        """Height of the root, -1 for an empty tree."""
        return -1 if self.root is None else self.root.height

    # Public API
    def search(self, key: int) -> Optional[bool]:
        """
        Return the value of the item with the given key, or None if the key
        is not in the tree.

        Time complexity: O(log n)
        """
        node = self.get_node(key)
        return None if node is None else node.value

    def get_node(self, key: int) -> Optional[AVLNode]:
        """Return the node holding ``key``, or None."""
        if isinstance(key, bool) or not isinstance(key, int):
            raise TypeError(f"search(): key must be an int, got {type(key).__name__}")
        node = self.root
        while node is not None and node.is_real():
            node_key = node.key
            if node_key == key:
                return node
            node = node.left if node_key > key else node.right
        return None

    def min(self) -> Optional[bool]:
        """Return the value at the smallest key, or None if the tree is empty. O(1)."""
        return None if self.min_node is None else self.min_node.value

    def max(self) -> Optional[bool]:
        """Return the value at the largest key, or None if the tree is empty. O(1)."""
        return None if self.max_node is None else self.max_node.value

    def insert(self, key: int, value: bool) -> int:
        """
        Insert an item with the given key and value.

        Returns the number of rebalancing units: the new node itself plus every
        ancestor whose height changed. The ancestor at which a rotation is
        performed counts once. At most one rotation step is needed.
        Promotions without a rotation are counted too, so this is not the
        rotation-only count of the classic exercise: inserting 10, 20, 30
        reports 1, 2 and 3.

        Time complexity: O(log n)

        Raises:
            TypeError: If the key is not an int or the value is not a bool.
            ValueError: If the key is negative.
            DuplicateKeyError: If the key is already present.
        """
        check_key(key, "insert")
        if not isinstance(value, bool):
            raise TypeError(f"insert(): value must be a bool, got {type(value).__name__}")

        if self.root is None:
            node = AVLNode(key, value)
            self.root = self.min_node = self.max_node = node
            self._size = 1
            return 1

        parent = None
        cur: Child = self.root
        while cur.is_real():
            if cur.key == key:
                raise DuplicateKeyError(key)
            parent = cur
            cur = cur.right if cur.key < key else cur.left

        node = AVLNode(key, value)
        node.parent = parent
        if parent.key < key:
            parent.right = node
        else:
            parent.left = node

        self._link_inserted(node)
        self._update_min_max_insert(node)
        self._size += 1

        units = self._rebalance_after_insert(parent)
        debug_log("Inserted key %s (%d rebalancing units)", key, units)
        return units

    def _rebalance_after_insert(self, parent: Optional[AVLNode]) -> int:
        units = 1
        while parent is not None:
            if not self._update_height(parent):
                # heights above are unaffected, aggregates are not
                self._update_aggregates_up(parent)
                return units
            units += 1
            self._update_aggregate(parent)
            if abs(parent.balance_factor()) == 2:
                subtree_root = self._dispatch_rotation(parent)
                self._update_aggregates_up(subtree_root.parent)
                return units
            parent = parent.parent
        return units

    def delete(self, key: int) -> int:
        """
        Delete the item with the given key.

        Returns the number of rebalancing units: every ancestor whose height
        changed or at which a rotation was performed, each counted once.
        Rotations may be needed at every level up to the root.

        Time complexity: O(log n)

        Raises:
            KeyNotFoundError: If the key is not present.
        """
        node = self.get_node(key)
        if node is None:
            raise KeyNotFoundError(key)

        self._unlink_deleted(node)
        self._size -= 1
        start = self._remove_node(node)
        node.left = node.right = node.parent = node.next = node.prev = None

        units = self._rebalance_after_delete(start)
        debug_log("Deleted key %s (%d rebalancing units)", key, units)
        return units

    def _remove_node(self, node: AVLNode) -> Optional[AVLNode]:
        """
        Unhook ``node`` from the tree structure as in a plain binary search tree.

        Returns:
            Optional[AVLNode]: The lowest node whose height may have changed,
            where the rebalancing walk has to start.
        """
        if node.left.is_real() and node.right.is_real():
            return self._remove_with_two_children(node)
        parent = node.parent
        child = node.right if node.right.is_real() else node.left
        self._replace_in_parent(node, child)
        return parent

    def _remove_with_two_children(self, node: AVLNode) -> AVLNode:
        """Move the successor of ``node`` into its place."""
        succ = node.next
        succ_parent = succ.parent
        if succ_parent is not node:
            # succ is the leftmost node of node.right, it has no left child
            succ_parent.left = succ.right
            if succ.right.is_real():
                succ.right.parent = succ_parent
            succ.right = node.right
            node.right.parent = succ

        succ.left = node.left
        node.left.parent = succ
        succ.height = node.height
        self._replace_in_parent(node, succ)

        debug_log("Replaced key %s by its successor %s", node.key, succ.key)
        return succ if succ_parent is node else succ_parent

    def _replace_in_parent(self, node: AVLNode, replacement: Child) -> None:
        parent = node.parent
        if replacement.is_real():
            replacement.parent = parent
        if parent is None:
            self.root = replacement if replacement.is_real() else None
        else:
            parent.set_child(node.kind_of_child(), replacement)

    def _rebalance_after_delete(self, parent: Optional[AVLNode]) -> int:
        units = 0
        while parent is not None:
            height_changed = self._update_height(parent)
            balance = parent.balance_factor()
            if not height_changed and abs(balance) < 2:
                self._update_aggregates_up(parent)
                return units
            units += 1
            self._update_aggregate(parent)
            if abs(balance) == 2:
                parent = self._dispatch_rotation(parent)
            parent = parent.parent
        return units

"""Unbalanced binary search tree, used as a baseline for the AVL tree."""

from __future__ import annotations

from typing import List, Optional

from avl_trees.base import (
    AbstractOrderedMap,
    DuplicateKeyError,
    KeyNotFoundError,
    check_key,
)
from avl_trees.node import VIRTUAL_NODE, Child


class BSTNode:
    """A node of the unbalanced tree. Absent children are ``VIRTUAL_NODE``."""
    __slots__ = ("key", "value", "left", "right", "parent")

    def __init__(self, key: int, value: bool) -> None:
        self.key = key
        self.value = value
        self.left: Child = VIRTUAL_NODE
        self.right: Child = VIRTUAL_NODE
        self.parent: Optional[BSTNode] = None

    def is_real(self) -> bool:
        return True

    def __repr__(self) -> str:
        return f"BSTNode(key={self.key!r}, value={self.value!r})"

    def __str__(self) -> str:
        return f"({self.key})"


class BSTree(AbstractOrderedMap):
    """
    A plain binary search tree with the same contract as :class:`AVLTree`'s
    core operations but without balancing, threading or aggregates.

    ``insert`` and ``delete`` always report 0 rebalancing units.
    """
    __slots__ = ("root", "_size")

    def __init__(self) -> None:
        self.root: Optional[BSTNode] = None
        self._size = 0

    def is_empty(self) -> bool:
        return self.root is None

    def size(self) -> int:
        return self._size

    def __len__(self) -> int:
        return self._size

    def __str__(self):
        return "Empty BSTree" if self.is_empty() else f"BSTree(root={self.root!r}, size={self._size})"

    __repr__ = __str__

    def get_root(self) -> Optional[BSTNode]:
        return self.root

    def _find_node(self, key: int) -> Optional[BSTNode]:
        if isinstance(key, bool) or not isinstance(key, int):
            raise TypeError(f"search(): key must be an int, got {type(key).__name__}")
        node = self.root
        while node is not None and node.is_real():
            if node.key == key:
                return node
            node = node.left if node.key > key else node.right
        return None

    def search(self, key: int) -> Optional[bool]:
        node = self._find_node(key)
        return None if node is None else node.value

    def insert(self, key: int, value: bool) -> int:
        check_key(key, "insert")
        if not isinstance(value, bool):
            raise TypeError(f"insert(): value must be a bool, got {type(value).__name__}")
        if self.root is None:
            self.root = BSTNode(key, value)
            self._size = 1
            return 0

        parent = None
        cur: Child = self.root
        while cur.is_real():
            if cur.key == key:
                raise DuplicateKeyError(key)
            parent = cur
            cur = cur.right if cur.key < key else cur.left

        node = BSTNode(key, value)
        node.parent = parent
        if parent.key < key:
            parent.right = node
        else:
            parent.left = node
        self._size += 1
        return 0

    def delete(self, key: int) -> int:
        node = self._find_node(key)
        if node is None:
            raise KeyNotFoundError(key)

        if node.left.is_real() and node.right.is_real():
            succ = node.right
            while succ.left.is_real():
                succ = succ.left
            if succ.parent is not node:
                succ.parent.left = succ.right
                if succ.right.is_real():
                    succ.right.parent = succ.parent
                succ.right = node.right
                node.right.parent = succ
            succ.left = node.left
            node.left.parent = succ
            self._replace_in_parent(node, succ)
        else:
            child = node.right if node.right.is_real() else node.left
            self._replace_in_parent(node, child)

        self._size -= 1
        return 0

    def _replace_in_parent(self, node: BSTNode, replacement: Child) -> None:
        parent = node.parent
        if replacement.is_real():
            replacement.parent = parent
        if parent is None:
            self.root = replacement if replacement.is_real() else None
        elif parent.left is node:
            parent.left = replacement
        else:
            parent.right = replacement

    def keys_in_order(self) -> List[int]:
        """Return the keys in ascending order, walking the tree with an explicit stack."""
        keys = []
        stack = []
        node = self.root if self.root is not None else VIRTUAL_NODE
        while stack or node.is_real():
            while node.is_real():
                stack.append(node)
                node = node.left
            node = stack.pop()
            keys.append(node.key)
            node = node.right
        return keys

    def physical_height(self) -> int:
        """Height of the tree computed level by level, -1 for an empty tree."""
        if self.root is None:
            return -1
        height = -1
        level = [self.root]
        while level:
            height += 1
            level = [c for n in level for c in (n.left, n.right) if c.is_real()]
        return height

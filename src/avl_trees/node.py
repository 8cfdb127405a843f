"""Node types for the threaded AVL tree."""

from __future__ import annotations

from typing import Optional, Union

from avl_trees.base import Direction

# Constants
VIRTUAL_KEY = -1
VIRTUAL_HEIGHT = -1


class VirtualNode:
    """
    Placeholder for an absent child.

    A single shared instance, ``VIRTUAL_NODE``, stands in for every absent
    child of every tree. It carries height -1 and an empty aggregate so that
    height and aggregate reads at the fringe need no special casing. It is
    never written to; in particular it has no parent.
    """
    __slots__ = ()

    key = VIRTUAL_KEY
    value = None
    height = VIRTUAL_HEIGHT
    true_count = 0
    parent = None
    left = None
    right = None

    def is_real(self) -> bool:
        return False

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "VIRTUAL_NODE"


VIRTUAL_NODE = VirtualNode()

Child = Union["AVLNode", VirtualNode]


class AVLNode:
    """
    A real node of the AVL tree.

    Attributes:
        key (int): The key, immutable once the node exists.
        value (bool): The payload.
        height (int): 0 for a leaf, ``1 + max(child heights)`` otherwise.
        true_count (int): Number of true values in the subtree rooted here.
        left, right: Owned children, each a real node or ``VIRTUAL_NODE``.
        parent: Back reference to the owning node, None for the root.
        next, prev: Order-list neighbours, None past either end.
    """
    __slots__ = ("key", "value", "height", "true_count",
                 "left", "right", "parent", "next", "prev")

    def __init__(self, key: int, value: bool) -> None:
        self.key = key
        self.value = value
        self.height = 0
        self.true_count = 1 if value else 0
        self.left: Child = VIRTUAL_NODE
        self.right: Child = VIRTUAL_NODE
        self.parent: Optional[AVLNode] = None
        self.next: Optional[AVLNode] = None
        self.prev: Optional[AVLNode] = None

    def is_real(self) -> bool:
        return True

    @property
    def aggregate_xor(self) -> bool:
        """XOR of the values in this subtree."""
        return bool(self.true_count & 1)

    def balance_factor(self) -> int:
        return self.left.height - self.right.height

    def get_child(self, direction: Direction) -> Child:
        if direction is Direction.LEFT:
            return self.left
        return self.right

    def set_child(self, direction: Direction, node: Child) -> None:
        if direction is Direction.LEFT:
            self.left = node
        else:
            self.right = node

    def kind_of_child(self) -> Optional[Direction]:
        """Side on which this node hangs off its parent, None for the root."""
        parent = self.parent
        if parent is None:
            return None
        if parent.left is self:
            return Direction.LEFT
        return Direction.RIGHT

    def __repr__(self) -> str:
        return f"AVLNode(key={self.key!r}, value={self.value!r}, height={self.height})"

    def __str__(self) -> str:
        return f"({self.key})"

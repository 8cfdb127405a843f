"""Pretty-printing and display utilities for AVL and BST structures."""

from __future__ import annotations

from typing import List, Union

from avl_trees.avl.avl_tree_base import AVLTree
from avl_trees.bst_tree import BSTree

EMPTY_CHILD = "┴"


def print_pretty(tree: Union[AVLTree, BSTree, None]) -> str:
    """
    Render a tree level by level, each parent above its two children::

          (2)
         /   \\
        ┴     ┴

    Absent children are drawn as ``┴``.
    """
    if tree is None:
        return f"{type(tree).__name__}: None"

    if not isinstance(tree, (AVLTree, BSTree)):
        raise TypeError(f"print_pretty() expects AVLTree or BSTree, got {type(tree).__name__}")

    if tree.is_empty():
        return f"{type(tree).__name__}: Empty"

    lines = _render(tree.get_root())
    return type(tree).__name__ + "\n" + "\n".join(line.rstrip() for line in lines) + "\n"


def _render(node) -> List[str]:
    """Return the rows of text representing the subtree rooted at ``node``."""
    left = _render(node.left) if node.left.is_real() else [EMPTY_CHILD]
    right = _render(node.right) if node.right.is_real() else [EMPTY_CHILD]
    return _concat(left, str(node), right)


def _concat(left: List[str], root: str, right: List[str]) -> List[str]:
    lwid = len(left[-1])
    rwid = len(right[-1])
    rootwid = len(root)

    result = [" " * (lwid + 1) + root + " " * (rwid + 1)]

    ls = _leftspace(left[0])
    rs = _rightspace(right[0])
    result.append(
        " " * ls + "_" * (lwid - ls) + "/" + " " * rootwid + "\\" + "_" * rs + " " * (rwid - rs)
    )

    for i in range(max(len(left), len(right))):
        row = left[i] if i < len(left) else " " * lwid
        row += " " * (rootwid + 2)
        row += right[i] if i < len(right) else " " * rwid
        result.append(row)
    return result


def _leftspace(row: str) -> int:
    """Index just past the last non-blank character."""
    i = len(row) - 1
    while row[i] == " ":
        i -= 1
    return i + 1


def _rightspace(row: str) -> int:
    """Index of the first non-blank character."""
    i = 0
    while row[i] == " ":
        i += 1
    return i


def print_structure(tree: AVLTree, indent: int = 0, max_depth: int = 64) -> str:
    """Return a debugging-oriented structural dump of an AVL tree.

    Each node is listed with its value, height, cached true count, balance
    factor and order-list neighbours, children indented below it.
    """
    prefix = ' ' * indent
    if tree is None or tree.is_empty():
        return f"{prefix}Empty {tree.__class__.__name__}"

    result = [
        f"{prefix}{tree.__class__.__name__}(size={tree.size()}, "
        f"min={tree.min_node.key}, max={tree.max_node.key})"
    ]
    stack = [(tree.root, "Root", 0)]
    while stack:
        node, label, depth = stack.pop()
        pad = prefix + "    " * depth
        if not node.is_real():
            result.append(f"{pad}{label}: Empty")
            continue
        if depth > max_depth:
            result.append(f"{pad}... (max depth reached)")
            continue
        prev_key = node.prev.key if node.prev is not None else None
        next_key = node.next.key if node.next is not None else None
        result.append(
            f"{pad}{label}: AVLNode(key={node.key}, value={node.value}, "
            f"height={node.height}, true_count={node.true_count}, "
            f"bf={node.balance_factor()}, prev={prev_key}, next={next_key})"
        )
        stack.append((node.right, "Right", depth + 1))
        stack.append((node.left, "Left", depth + 1))
    return "\n".join(result)

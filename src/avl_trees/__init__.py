"""
avl_trees: AVL trees threaded with an in-order list and subtree aggregates.

Quick-start imports::

    from avl_trees import AVLTree, BSTree

See subpackage ``__init__`` files for the full public surface.
"""

# Shared primitives
from avl_trees.base import (
    AVLTreeError,
    Direction,
    DuplicateKeyError,
    KeyNotFoundError,
    PreconditionViolation,
)
from avl_trees.node import VIRTUAL_KEY, VIRTUAL_NODE, AVLNode

# Trees
from avl_trees.avl import AVLTree
from avl_trees.bst_tree import BSTNode, BSTree

# Stats, invariants & display
from avl_trees.display import print_pretty, print_structure
from avl_trees.invariants import InvariantError, assert_tree_invariants_raise, check_keys_and_values
from avl_trees.tree_stats import Stats, avl_tree_stats_

__all__ = [
    # Primitives
    "AVLNode",
    "AVLTreeError",
    "Direction",
    "DuplicateKeyError",
    "KeyNotFoundError",
    "PreconditionViolation",
    "VIRTUAL_KEY",
    "VIRTUAL_NODE",
    # Trees
    "AVLTree",
    "BSTNode",
    "BSTree",
    # Stats & invariants
    "InvariantError",
    "Stats",
    "assert_tree_invariants_raise",
    "avl_tree_stats_",
    "check_keys_and_values",
    "print_pretty",
    "print_structure",
]

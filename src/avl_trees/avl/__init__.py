"""
AVL tree module - threaded AVL trees with subtree aggregates.

The tree class is assembled from mixins that each own one concern:
rebalancing, order-list maintenance and prefix aggregate queries.
"""

from avl_trees.avl.avl_tree_base import AVLTree
from avl_trees.avl.balance import AVLBalanceMixin
from avl_trees.avl.order_list import AVLOrderListMixin
from avl_trees.avl.prefix import AVLPrefixMixin

__all__ = [
    "AVLBalanceMixin",
    "AVLOrderListMixin",
    "AVLPrefixMixin",
    "AVLTree",
]

"""Data structure implementations."""

from .binary_tree import (
    BinaryTree,
    TreeValueError,
    build_tree_from_level_order,
    level_order_traversal,
    render_tree,
)

__all__ = [
    "BinaryTree",
    "TreeValueError",
    "build_tree_from_level_order",
    "level_order_traversal",
    "render_tree",
]

"""Generic binary tree with height, balance, search and traversal helpers.

The module offers a small mutable tree type together with the level-order
utilities used by the demonstration CLI and the regression suite:

* ``BinaryTree`` – a generic node owning at most two child subtrees and exactly
  one non-``None`` value.
* ``build_tree_from_level_order`` – construct a tree from a level-order sequence
  containing ``None`` sentinels.
* ``level_order_traversal`` – the inverse of the builder.
* ``render_tree`` – a deterministic ASCII representation that highlights
  missing children with centred dots.

Each child subtree is exclusively owned by its parent; there are no parent
back-references and assigning a new child discards the previous subtree
wholesale.  Search helpers return ``None`` when nothing matches, which is
unambiguous because a node value can never be ``None``.
"""

from __future__ import annotations

from collections import deque
import logging
from typing import (
    Callable,
    Deque,
    Generic,
    Iterable,
    Iterator,
    List,
    Optional,
    Sequence,
    Tuple,
    TypeVar,
    Union,
)

logger = logging.getLogger(__name__)

T = TypeVar("T")

Predicate = Callable[[T], bool]

_EXHAUSTED = object()


class TreeValueError(ValueError):
    """Raised when a tree node would be left without a value."""


class BinaryTree(Generic[T]):
    """Binary tree node holding a value and two optional subtrees."""

    __slots__ = ("_value", "_left", "_right")

    def __init__(
        self,
        value: T,
        left: Optional["BinaryTree[T]"] = None,
        right: Optional["BinaryTree[T]"] = None,
    ) -> None:
        self._value: T = _require_value(value)
        self._left = _require_subtree(left)
        self._right = _require_subtree(right)

    @classmethod
    def leaf(cls, value: T) -> "BinaryTree[T]":
        """Create a node without children."""

        return cls(value)

    @classmethod
    def node(
        cls,
        left: Optional["BinaryTree[T]"],
        value: T,
        right: Optional["BinaryTree[T]"],
    ) -> "BinaryTree[T]":
        """Create a node from a ``(left, value, right)`` triple."""

        return cls(value, left, right)

    # ------------------------------------------------------------------
    # Accessors
    # ------------------------------------------------------------------
    @property
    def value(self) -> T:
        return self._value

    @value.setter
    def value(self, value: T) -> None:
        self._value = _require_value(value)

    @property
    def left(self) -> Optional["BinaryTree[T]"]:
        return self._left

    @left.setter
    def left(self, child: Union["BinaryTree[T]", T]) -> None:
        self._left = self._coerce_child(child)

    @property
    def right(self) -> Optional["BinaryTree[T]"]:
        return self._right

    @right.setter
    def right(self, child: Union["BinaryTree[T]", T]) -> None:
        self._right = self._coerce_child(child)

    def set_value(self, value: T) -> "BinaryTree[T]":
        """Replace the node value and return ``self``."""

        self.value = value
        return self

    def set_left(self, child: Union["BinaryTree[T]", T]) -> "BinaryTree[T]":
        """Replace the left subtree and return the newly attached child.

        A bare value is wrapped in a fresh leaf; a ``BinaryTree`` replaces the
        previous subtree wholesale.
        """

        subtree = self._coerce_child(child)
        self._left = subtree
        return subtree

    def set_right(self, child: Union["BinaryTree[T]", T]) -> "BinaryTree[T]":
        """Replace the right subtree and return the newly attached child."""

        subtree = self._coerce_child(child)
        self._right = subtree
        return subtree

    def children(self) -> Tuple["BinaryTree[T]", ...]:
        """Return the present children, left before right."""

        return tuple(child for child in (self._left, self._right) if child is not None)

    # ------------------------------------------------------------------
    # Structural queries
    # ------------------------------------------------------------------
    def height(self) -> int:
        """Return the number of nodes on the longest root-to-leaf path."""

        return 1 + max((child.height() for child in self.children()), default=0)

    def is_balanced(self) -> bool:
        """Return ``True`` when every node's subtrees differ in height by <= 1."""

        return self._balanced_height() is not None

    def _balanced_height(self) -> Optional[int]:
        # Height of this subtree, or None as soon as any node is unbalanced.
        heights: List[int] = []
        for child in (self._left, self._right):
            if child is None:
                heights.append(0)
                continue
            child_height = child._balanced_height()
            if child_height is None:
                return None
            heights.append(child_height)
        left_height, right_height = heights
        if abs(left_height - right_height) > 1:
            return None
        return 1 + max(left_height, right_height)

    # ------------------------------------------------------------------
    # Searches
    # ------------------------------------------------------------------
    def breadth_first_search(self, predicate: Predicate[T]) -> Optional[T]:
        """Return the first value in level order satisfying *predicate*.

        Every candidate of a level is checked before any node of the next level
        is examined, so a shallow match always wins over a deeper one.
        """

        for depth, level in enumerate(self._levels()):
            for node in level:
                if predicate(node._value):
                    logger.debug("Breadth-first match at depth %d", depth)
                    return node._value
        return None

    def depth_first_search(self, predicate: Predicate[T]) -> Optional[T]:
        """Return the first value in pre-order satisfying *predicate*."""

        if predicate(self._value):
            return self._value
        for child in self.children():
            found = child.depth_first_search(predicate)
            if found is not None:
                return found
        return None

    def _levels(self) -> Iterator[List["BinaryTree[T]"]]:
        level: List[BinaryTree[T]] = [self]
        while level:
            yield level
            level = [child for node in level for child in node.children()]

    # ------------------------------------------------------------------
    # Traversals
    # ------------------------------------------------------------------
    def traverse_inorder(self) -> List[T]:
        """Return the values visiting left subtree, node, right subtree.

        A binary search tree yields its values in ascending order::

                (4)
                / \\
              (2) (6)
              / \\
            (1) (3)      ->  [1, 2, 3, 4, 6]
        """

        result: List[T] = []
        _collect_inorder(self, result)
        return result

    def traverse_preorder(self) -> List[T]:
        """Return the values visiting node, left subtree, right subtree."""

        result: List[T] = []
        _collect_preorder(self, result)
        return result

    def _coerce_child(self, child: Union["BinaryTree[T]", T]) -> "BinaryTree[T]":
        if child is self:
            raise TreeValueError("A node cannot be attached as its own child")
        if isinstance(child, BinaryTree):
            return child
        return BinaryTree(child)

    def __repr__(self) -> str:
        return f"BinaryTree({self._value!r}, left={self._left!r}, right={self._right!r})"


def _require_value(value: T) -> T:
    if value is None:
        raise TreeValueError("BinaryTree value must not be None")
    return value


def _require_subtree(subtree: object) -> Optional[BinaryTree]:
    if subtree is not None and not isinstance(subtree, BinaryTree):
        raise TypeError("BinaryTree children must be BinaryTree instances or None")
    return subtree


def _collect_inorder(tree: BinaryTree[T], aggregator: List[T]) -> None:
    if tree.left is not None:
        _collect_inorder(tree.left, aggregator)
    aggregator.append(tree.value)
    if tree.right is not None:
        _collect_inorder(tree.right, aggregator)


def _collect_preorder(tree: BinaryTree[T], aggregator: List[T]) -> None:
    aggregator.append(tree.value)
    if tree.left is not None:
        _collect_preorder(tree.left, aggregator)
    if tree.right is not None:
        _collect_preorder(tree.right, aggregator)


def _child_slots(
    level: Sequence[Optional[BinaryTree[T]]],
) -> List[Optional[BinaryTree[T]]]:
    # A missing node still occupies two (empty) slots on the next level.
    slots: List[Optional[BinaryTree[T]]] = []
    for node in level:
        if node is None:
            slots.extend((None, None))
        else:
            slots.extend((node.left, node.right))
    return slots


def render_tree(root: Optional[BinaryTree]) -> str:
    """Render *root* level-by-level, marking missing nodes with ``·``.

    Rendering stops at the first level holding no real node, so the output
    never ends with a placeholder-only row.
    """

    if root is None:
        return "<empty>"

    lines: List[str] = []
    level: List[Optional[BinaryTree]] = [root]
    while any(node is not None for node in level):
        lines.append(" ".join("·" if node is None else str(node.value) for node in level))
        level = _child_slots(level)
    return "\n".join(lines)


def build_tree_from_level_order(values: Iterable[Optional[T]]) -> Optional[BinaryTree[T]]:
    """Construct a binary tree from a level-order sequence.

    The *values* iterable may contain ``None`` sentinels to represent missing
    children. ``None`` is returned when the sequence is empty or the root is
    ``None``.
    """

    iterator = iter(values)
    first = next(iterator, None)
    if first is None:
        return None

    root: BinaryTree[T] = BinaryTree(first)
    pending: Deque[BinaryTree[T]] = deque([root])
    while pending:
        node = pending.popleft()
        for attach in (node.set_left, node.set_right):
            value = next(iterator, _EXHAUSTED)
            if value is _EXHAUSTED:
                return root
            if value is not None:
                pending.append(attach(value))
    return root


def level_order_traversal(root: Optional[BinaryTree[T]]) -> List[Optional[T]]:
    """Return the tree's level-order traversal including ``None`` sentinels.

    Only the child slots of real nodes are listed, matching the input format of
    :func:`build_tree_from_level_order`.
    """

    if root is None:
        return []
    result: List[Optional[T]] = [root.value]
    for level in root._levels():
        for node in level:
            result.extend(
                None if child is None else child.value
                for child in (node.left, node.right)
            )
    while result and result[-1] is None:
        result.pop()
    return result


__all__ = [
    "BinaryTree",
    "TreeValueError",
    "build_tree_from_level_order",
    "level_order_traversal",
    "render_tree",
]

"""Command line demonstration for the generic binary tree.

Running the module prints balance checks and heights for a perfectly balanced
tree of letters and an intentionally skewed one, together with their
level-order ASCII renderings, followed by breadth-first/depth-first searches
and traversals of a small integer tree.  Balance flags, heights, search hits
and traversals are checked against built-in expectations and a mismatch raises
``RuntimeError``.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Iterator, List, Optional, Sequence, TypeVar

from exercises.datastructures.binary_tree import (
    BinaryTree,
    build_tree_from_level_order,
    render_tree,
)

R = TypeVar("R")


@dataclass(frozen=True)
class ShapeCase:
    """Level-order layout of a tree with its expected height and balance."""

    name: str
    layout: Sequence[Optional[str]]
    expected_height: int
    expected_balance: bool

    def build(self) -> Optional[BinaryTree[str]]:
        return build_tree_from_level_order(self.layout)


def _iter_shape_cases() -> Iterator[ShapeCase]:
    yield ShapeCase(
        name="Balanced",
        layout=list("abcdefg"),
        expected_height=3,
        expected_balance=True,
    )
    yield ShapeCase(
        name="Skewed",
        layout=["root", "left", None, "deeper", None, "deepest"],
        expected_height=4,
        expected_balance=False,
    )


def _expect(label: str, actual: R, expected: R) -> R:
    if actual != expected:
        raise RuntimeError(
            f"Demo expectation mismatch: {label} expected {expected!r}"
            f" but received {actual!r}"
        )
    return actual


def _describe_shape(case: ShapeCase) -> List[str]:
    tree = case.build()
    if tree is None:
        return [f"{case.name} tree: <empty>"]

    balanced = _expect(f"{case.name} balance", tree.is_balanced(), case.expected_balance)
    height = _expect(f"{case.name} height", tree.height(), case.expected_height)
    status = "Yes" if balanced else "No"
    expected = "Yes" if case.expected_balance else "No"
    return [
        f"{case.name} tree balanced? {status} (expected: {expected})",
        f"Height: {height}",
        render_tree(tree),
    ]


def _search_tree() -> BinaryTree[int]:
    #       (1)
    #     /    \
    #   (3)     (2)
    #   / \     /
    # (4) (5) (6)
    tree = BinaryTree(1)
    tree.set_right(2).set_left(6)
    left = tree.set_left(3)
    left.set_left(4)
    left.set_right(5)
    return tree


def _describe_searches(tree: BinaryTree[int]) -> List[str]:
    is_even: Callable[[int], bool] = lambda value: value % 2 == 0
    checks = [
        ("Breadth-first even", tree.breadth_first_search(is_even), 2),
        ("Depth-first even", tree.depth_first_search(is_even), 4),
        ("In-order", tree.traverse_inorder(), [4, 3, 5, 1, 6, 2]),
        ("Pre-order", tree.traverse_preorder(), [1, 3, 4, 5, 2, 6]),
    ]
    return [f"{label}: {_expect(label, actual, expected)}" for label, actual, expected in checks]


def main() -> None:
    """Execute the demonstration flow for all configured cases."""

    for case in _iter_shape_cases():
        for line in _describe_shape(case):
            print(line)
        print()  # Spacer between cases

    for line in _describe_searches(_search_tree()):
        print(line)


if __name__ == "__main__":
    main()

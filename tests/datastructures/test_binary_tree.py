from __future__ import annotations

import random

import pytest

from exercises.datastructures.binary_tree import (
    BinaryTree,
    TreeValueError,
    build_tree_from_level_order,
    level_order_traversal,
    render_tree,
)


def _search_tree() -> BinaryTree[int]:
    #      (1)
    #     /   \
    #   (3)    (2)
    #   /
    # (4)
    tree = BinaryTree(1)
    tree.right = 2
    tree.left = 3
    tree.left.left = 4
    return tree


def _traversal_tree() -> BinaryTree[int]:
    #       (1)
    #     /    \
    #   (3)     (2)
    #   / \     /
    # (4) (5) (6)
    return BinaryTree.node(
        BinaryTree.node(BinaryTree.leaf(4), 3, BinaryTree.leaf(5)),
        1,
        BinaryTree.node(BinaryTree.leaf(6), 2, None),
    )


def test_height_grows_with_deepest_branch() -> None:
    tree = BinaryTree(1)
    assert tree.height() == 1

    left = tree.set_left(2)
    assert left is tree.left and left.value == 2
    assert tree.height() == 2

    tree.set_right(3)
    assert tree.height() == 2

    left.set_left(4)
    assert tree.height() == 3


def test_is_balanced_tracks_mutations() -> None:
    tree = BinaryTree(1)
    assert tree.is_balanced()

    tree.set_left(2)
    assert tree.is_balanced()

    tree.left.set_left(3)
    assert not tree.is_balanced()

    tree.set_right(4)
    assert tree.is_balanced()

    #       (1)
    #       /  \
    #     (2)  (4)
    #     / \    \
    #   (3) (5)  (6)
    #   /          \
    # (7)          (8)
    tree.left.set_right(5)
    tree.right.set_right(6)
    tree.left.left.set_left(7)
    tree.right.right.set_right(8)
    assert tree.height() == 4
    assert not tree.is_balanced()


def test_is_balanced_detects_left_chain_against_single_right_child() -> None:
    chain = BinaryTree.node(BinaryTree.node(BinaryTree.leaf(4), 3, None), 2, None)
    tree = BinaryTree.node(chain, 1, BinaryTree.leaf(5))
    assert not tree.is_balanced()


def test_is_balanced_detects_full_tree() -> None:
    root = build_tree_from_level_order([1, 2, 3, 4, 5, 6, 7])
    assert root is not None
    assert root.is_balanced()


def test_breadth_first_search_prefers_shallow_match() -> None:
    tree = _search_tree()
    assert tree.breadth_first_search(lambda value: value == 5) is None
    assert tree.breadth_first_search(lambda value: value % 2 == 0) == 2


def test_breadth_first_search_checks_root_first() -> None:
    tree = _search_tree()
    assert tree.breadth_first_search(lambda value: value > 0) == 1


def test_breadth_first_search_scans_level_left_to_right() -> None:
    root = build_tree_from_level_order([1, 3, 5, 7, 8, 10, 12])
    assert root is not None
    assert root.breadth_first_search(lambda value: value % 2 == 0) == 8


def test_depth_first_search_follows_preorder() -> None:
    tree = _search_tree()
    assert tree.depth_first_search(lambda value: value == 5) is None
    assert tree.depth_first_search(lambda value: value % 2 == 0) == 4


def test_traverse_inorder_matches_expected_order() -> None:
    assert _traversal_tree().traverse_inorder() == [4, 3, 5, 1, 6, 2]


def test_traverse_inorder_sorts_search_tree() -> None:
    root = build_tree_from_level_order([8, 4, 12, 2, 6, 10, 14, 1, None, 5])
    assert root is not None
    values = root.traverse_inorder()
    assert values == sorted(values)


def test_traverse_preorder_visits_root_before_subtrees() -> None:
    assert _traversal_tree().traverse_preorder() == [1, 3, 4, 5, 2, 6]


def test_traversals_return_fresh_lists() -> None:
    tree = _traversal_tree()
    first = tree.traverse_inorder()
    first.append(99)
    assert tree.traverse_inorder() == [4, 3, 5, 1, 6, 2]
    assert tree.traverse_preorder() is not tree.traverse_preorder()


def test_replacing_child_discards_previous_subtree() -> None:
    tree = _traversal_tree()
    tree.left = BinaryTree(7)
    assert tree.traverse_inorder() == [7, 1, 6, 2]
    tree.set_right(9)
    assert tree.traverse_preorder() == [1, 7, 9]
    assert tree.right is not None and tree.right.left is None


def test_set_value_replaces_payload() -> None:
    tree = BinaryTree(1)
    assert tree.set_value(5) is tree
    tree.value = 6
    assert tree.value == 6


@pytest.mark.parametrize(
    "factory",
    [
        lambda: BinaryTree(None),
        lambda: BinaryTree.leaf(None),
        lambda: BinaryTree.node(None, None, None),
    ],
)
def test_construction_rejects_missing_value(factory) -> None:
    with pytest.raises(TreeValueError):
        factory()


def test_mutation_rejects_missing_value() -> None:
    tree = BinaryTree(1, BinaryTree(2))
    with pytest.raises(TreeValueError):
        tree.value = None
    with pytest.raises(TreeValueError):
        tree.set_value(None)
    with pytest.raises(TreeValueError):
        tree.set_left(None)
    assert tree.value == 1
    assert tree.left is not None and tree.left.value == 2


def test_construction_rejects_non_tree_children() -> None:
    with pytest.raises(TypeError):
        BinaryTree(1, left=2)  # type: ignore[arg-type]


def test_render_tree_renders_structure_with_placeholders() -> None:
    root = BinaryTree(1, BinaryTree(2, right=BinaryTree(4)), BinaryTree(3))
    expected = "\n".join(["1", "2 3", "· 4 · ·"])
    assert render_tree(root) == expected


def test_render_tree_empty_tree() -> None:
    assert render_tree(None) == "<empty>"


def test_build_tree_from_level_order_roundtrip() -> None:
    balanced_values = [1, 2, 3, None, 5, None, 7]
    balanced_root = build_tree_from_level_order(balanced_values)
    assert level_order_traversal(balanced_root) == balanced_values
    assert balanced_root is not None and balanced_root.is_balanced() is True

    unbalanced_values = [1, 2, None, 3, None, 4]
    unbalanced_root = build_tree_from_level_order(unbalanced_values)
    assert level_order_traversal(unbalanced_root) == unbalanced_values
    assert unbalanced_root is not None and unbalanced_root.is_balanced() is False


def test_build_tree_from_level_order_empty_inputs() -> None:
    assert build_tree_from_level_order([]) is None
    assert build_tree_from_level_order([None, 1]) is None
    assert level_order_traversal(None) == []


def test_level_order_helpers_accept_generic_payloads() -> None:
    root = build_tree_from_level_order(["m", "f", "t", None, "h"])
    assert root is not None
    assert root.traverse_inorder() == ["f", "h", "m", "t"]
    assert level_order_traversal(root) == ["m", "f", "t", None, "h"]
    assert render_tree(root) == "\n".join(["m", "f t", "· h · ·"])


def _naive_height(node: BinaryTree[int] | None) -> int:
    if node is None:
        return 0
    return 1 + max(_naive_height(node.left), _naive_height(node.right))


def _naive_is_balanced(node: BinaryTree[int] | None) -> bool:
    if node is None:
        return True
    return (
        abs(_naive_height(node.left) - _naive_height(node.right)) <= 1
        and _naive_is_balanced(node.left)
        and _naive_is_balanced(node.right)
    )


@pytest.mark.parametrize("seed", range(60))
def test_is_balanced_matches_per_node_recomputation(seed: int) -> None:
    rng = random.Random(seed)
    size = rng.randint(1, 25)
    values = [0] + [None if rng.random() < 0.35 else index for index in range(1, size)]
    root = build_tree_from_level_order(values)
    assert root is not None
    assert root.is_balanced() == _naive_is_balanced(root)
    assert root.height() == _naive_height(root)


def test_node_cannot_be_its_own_child() -> None:
    tree = BinaryTree(1, BinaryTree(2))
    with pytest.raises(TreeValueError):
        tree.left = tree
    with pytest.raises(TreeValueError):
        tree.set_right(tree)
    assert tree.left is not None and tree.left.value == 2
    assert tree.right is None
    assert tree.height() == 2

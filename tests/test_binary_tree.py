import pytest

from algostudy.binary_tree import (
    TreeNode,
    build_tree,
    in_order,
    swap_at_multiples,
    swap_nodes,
    tree_depth,
)

SAMPLE = [(2, 3), (-1, -1), (-1, -1)]
LARGER = [(2, 3), (4, -1), (5, -1), (6, -1), (7, 8), (-1, 9), (-1, -1), (10, 11),
          (-1, -1), (-1, -1), (-1, -1)]


def _all_nodes(root):
    stack = [root]
    while stack:
        node = stack.pop()
        yield node
        stack.extend(c for c in (node.left, node.right) if c is not None)


def test_sample_queries():
    assert swap_nodes(SAMPLE, [1, 1]) == [[3, 1, 2], [2, 1, 3]]


def test_sample_tree_shape():
    root = build_tree(SAMPLE)
    assert in_order(root) == [2, 1, 3]
    assert tree_depth(root) == 2


def test_depths_increase_by_one():
    root = build_tree(LARGER)
    for node in _all_nodes(root):
        for child in (node.left, node.right):
            if child is not None:
                assert child.depth == node.depth + 1


def test_traversal_holds_every_value_once():
    root = build_tree(LARGER)
    assert sorted(in_order(root)) == list(range(1, len(LARGER) + 1))


def test_swapping_twice_restores_order():
    root = build_tree(LARGER)
    before = in_order(root)
    swap_at_multiples(root, 2)
    swap_at_multiples(root, 2)
    assert in_order(root) == before


def test_swap_beyond_depth_changes_nothing():
    root = build_tree(LARGER)
    before = in_order(root)
    swap_at_multiples(root, tree_depth(root) + 1)
    assert in_order(root) == before


def test_swap_at_root_mirrors_children():
    root = build_tree(SAMPLE)
    left, right = root.left, root.right
    swap_at_multiples(root, 1)
    assert root.left is right and root.right is left


def test_swap_requires_positive_k():
    with pytest.raises(ValueError):
        swap_at_multiples(TreeNode(1), 0)


def test_missing_children_rejected():
    with pytest.raises(ValueError):
        build_tree([(2, 3), (-1, -1)])


def test_extra_children_rejected():
    with pytest.raises(ValueError):
        build_tree(SAMPLE + [(-1, -1)])


def test_empty_input_gives_no_tree():
    root = build_tree([])
    assert root is None
    assert in_order(root) == []
    assert tree_depth(root) == 0
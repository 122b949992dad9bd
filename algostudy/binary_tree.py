"""Binary trees given level by level, with in-order traversal and child swaps."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass, field
from typing import Iterable, Optional, Sequence

NO_CHILD = -1


@dataclass(eq=False)
class TreeNode:
    """A tree node holding its value and its depth, the root being at depth 1."""

    value: int
    depth: int = 1
    left: Optional["TreeNode"] = field(default=None, repr=False)
    right: Optional["TreeNode"] = field(default=None, repr=False)


def build_tree(children: Iterable[tuple[int, int]]) -> Optional[TreeNode]:
    """Build a tree rooted at 1 from ``(left, right)`` pairs in breadth-first order.

    ``-1`` stands for a missing child. An empty input gives no tree.
    """
    entries = list(children)
    if not entries:
        return None
    pairs = iter(entries)
    root = TreeNode(1, 1)
    pending = deque([root])
    while pending:
        node = pending.popleft()
        try:
            left, right = next(pairs)
        except StopIteration:
            raise ValueError(f"no children given for node {node.value}") from None
        if left != NO_CHILD:
            node.left = TreeNode(left, node.depth + 1)
            pending.append(node.left)
        if right != NO_CHILD:
            node.right = TreeNode(right, node.depth + 1)
            pending.append(node.right)
    if next(pairs, None) is not None:
        raise ValueError("more child entries than nodes")
    return root


def _nodes(root: Optional[TreeNode]) -> Iterable[TreeNode]:
    stack = [root] if root is not None else []
    while stack:
        node = stack.pop()
        yield node
        stack.extend(child for child in (node.left, node.right) if child is not None)


def tree_depth(root: Optional[TreeNode]) -> int:
    """Number of levels in the tree."""
    return max((node.depth for node in _nodes(root)), default=0)


def in_order(root: Optional[TreeNode]) -> list[int]:
    """Values in in-order: left subtree, node, right subtree."""
    values: list[int] = []
    stack: list[TreeNode] = []
    node = root
    while stack or node is not None:
        while node is not None:
            stack.append(node)
            node = node.left
        node = stack.pop()
        values.append(node.value)
        node = node.right
    return values


def swap_at_multiples(root: Optional[TreeNode], k: int) -> None:
    """Swap the children of every node whose depth is a multiple of ``k``."""
    if k < 1:
        raise ValueError("k must be positive")
    for node in _nodes(root):
        if node.depth % k == 0:
            node.left, node.right = node.right, node.left


def swap_nodes(children: Iterable[tuple[int, int]], queries: Sequence[int]) -> list[list[int]]:
    """Apply each swap query in turn and report the in-order values after each."""
    root = build_tree(children)
    results: list[list[int]] = []
    for k in queries:
        swap_at_multiples(root, k)
        results.append(in_order(root))
    return results
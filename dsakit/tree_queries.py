"""Queries on binary trees: levels, ancestors, paths, distances and sum trees."""

from __future__ import annotations

from typing import Optional

from dsakit.binary_tree import TreeNode


def kth_level(root: Optional[TreeNode], level: int) -> list[int]:
    """Values at the given level, counting the root as level 1, left to right."""
    if root is None:
        return []
    if level == 1:
        return [root.data]
    return kth_level(root.left, level - 1) + kth_level(root.right, level - 1)


def kth_ancestor(root: Optional[TreeNode], value: int, k: int) -> Optional[int]:
    """Value of the k-th ancestor of the node holding value, or None if there is none."""
    found: list[int] = []

    def distance(node: Optional[TreeNode]) -> int:
        if node is None:
            return -1
        if node.data == value:
            return 0
        left = distance(node.left)
        right = distance(node.right)
        if left == -1 and right == -1:
            return -1
        below = right if left == -1 else left
        if below + 1 == k:
            found.append(node.data)
        return below + 1

    distance(root)
    return found[0] if found else None


def node_path(root: Optional[TreeNode], value: int) -> Optional[list[int]]:
    """Values from the root down to the node holding value, or None if absent."""
    if root is None:
        return None
    if root.data == value:
        return [root.data]
    rest = node_path(root.left, value) or node_path(root.right, value)
    return [root.data, *rest] if rest else None


def _lca(root: Optional[TreeNode], first: int, second: int) -> Optional[TreeNode]:
    if root is None:
        return None
    if root.data in (first, second):
        return root
    left = _lca(root.left, first, second)
    right = _lca(root.right, first, second)
    if left is not None and right is not None:
        return root
    return left if left is not None else right


def lowest_common_ancestor(
    root: Optional[TreeNode], first: int, second: int
) -> TreeNode:
    """Deepest node that has both values in its subtree."""
    for value in (first, second):
        if node_path(root, value) is None:
            raise ValueError(f"value {value} is not in the tree")
    node = _lca(root, first, second)
    assert node is not None
    return node


def _depth_of(root: Optional[TreeNode], value: int) -> int:
    if root is None:
        return -1
    if root.data == value:
        return 0
    for child in (root.left, root.right):
        below = _depth_of(child, value)
        if below != -1:
            return below + 1
    return -1


def min_distance(root: Optional[TreeNode], first: int, second: int) -> int:
    """Number of edges on the path between the nodes holding the two values."""
    ancestor = lowest_common_ancestor(root, first, second)
    return _depth_of(ancestor, first) + _depth_of(ancestor, second)


def to_sum_tree(root: Optional[TreeNode]) -> None:
    """Replace each node's value, in place, with the sum of its descendants' values."""

    def transform(node: Optional[TreeNode]) -> int:
        if node is None:
            return 0
        total = transform(node.left) + transform(node.right)
        original = node.data
        node.data = total
        return total + original

    transform(root)
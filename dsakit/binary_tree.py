"""Binary trees built from preorder sequences, with traversals and measurements."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable
from dataclasses import dataclass
from typing import Optional

NULL_MARKER = -1


@dataclass
class TreeNode:
    """A node of a binary tree holding an integer."""

    data: int
    left: Optional["TreeNode"] = None
    right: Optional["TreeNode"] = None


def build_tree(values: Iterable[int]) -> Optional[TreeNode]:
    """Build a tree from a preorder sequence where -1 marks a missing child."""
    items = iter(values)

    def build() -> Optional[TreeNode]:
        try:
            value = next(items)
        except StopIteration:
            raise ValueError("preorder sequence ended before the tree was complete") from None
        if value == NULL_MARKER:
            return None
        node = TreeNode(value)
        node.left = build()
        node.right = build()
        return node

    return build()


def preorder(root: Optional[TreeNode]) -> list[int]:
    """Values in root, left, right order."""
    if root is None:
        return []
    return [root.data, *preorder(root.left), *preorder(root.right)]


def inorder(root: Optional[TreeNode]) -> list[int]:
    """Values in left, root, right order."""
    if root is None:
        return []
    return [*inorder(root.left), root.data, *inorder(root.right)]


def postorder(root: Optional[TreeNode]) -> list[int]:
    """Values in left, right, root order."""
    if root is None:
        return []
    return [*postorder(root.left), *postorder(root.right), root.data]


def level_order(root: Optional[TreeNode]) -> list[list[int]]:
    """Values grouped by level, top level first, each level left to right."""
    levels: list[list[int]] = []
    current = [root] if root is not None else []
    while current:
        levels.append([node.data for node in current])
        current = [
            child
            for node in current
            for child in (node.left, node.right)
            if child is not None
        ]
    return levels


def count_nodes(root: Optional[TreeNode]) -> int:
    """Number of nodes in the tree."""
    if root is None:
        return 0
    return count_nodes(root.left) + count_nodes(root.right) + 1


def sum_nodes(root: Optional[TreeNode]) -> int:
    """Sum of every node's value."""
    if root is None:
        return 0
    return sum_nodes(root.left) + sum_nodes(root.right) + root.data


def height(root: Optional[TreeNode]) -> int:
    """Number of nodes on the longest root-to-leaf path."""
    if root is None:
        return 0
    return max(height(root.left), height(root.right)) + 1


def leaf_depths(root: Optional[TreeNode]) -> list[int]:
    """Depth reached at every missing child pointer, in preorder."""
    depths: list[int] = []

    def walk(node: Optional[TreeNode], depth: int) -> None:
        if node is None:
            depths.append(depth)
            return
        walk(node.left, depth + 1)
        walk(node.right, depth + 1)

    walk(root, 0)
    return depths


def diameter(root: Optional[TreeNode]) -> int:
    """Nodes on the longest path between any two nodes, in linear time."""

    def info(node: Optional[TreeNode]) -> tuple[int, int]:
        if node is None:
            return 0, 0
        left_dia, left_height = info(node.left)
        right_dia, right_height = info(node.right)
        through = left_height + right_height + 1
        return max(through, left_dia, right_dia), max(left_height, right_height) + 1

    return info(root)[0]


def diameter_naive(root: Optional[TreeNode]) -> int:
    """Nodes on the longest path, recomputing heights at every node."""
    if root is None:
        return 0
    through = height(root.left) + height(root.right) + 1
    return max(through, diameter_naive(root.left), diameter_naive(root.right))


def is_identical(first: Optional[TreeNode], second: Optional[TreeNode]) -> bool:
    """True when both trees have the same shape and values."""
    if first is None and second is None:
        return True
    if first is None or second is None:
        return False
    return (
        first.data == second.data
        and is_identical(first.left, second.left)
        and is_identical(first.right, second.right)
    )


def is_subtree(root: Optional[TreeNode], subroot: Optional[TreeNode]) -> bool:
    """True when some node of root starts a tree identical to subroot."""
    if root is None and subroot is None:
        return True
    if root is None or subroot is None:
        return False
    if root.data == subroot.data and is_identical(root, subroot):
        return True
    return is_subtree(root.left, subroot) or is_subtree(root.right, subroot)


def top_view(root: Optional[TreeNode]) -> list[int]:
    """First value seen at each horizontal distance, from leftmost to rightmost."""
    if root is None:
        return []
    seen: dict[int, int] = {}
    pending: deque[tuple[TreeNode, int]] = deque([(root, 0)])
    while pending:
        node, distance = pending.popleft()
        seen.setdefault(distance, node.data)
        if node.left is not None:
            pending.append((node.left, distance - 1))
        if node.right is not None:
            pending.append((node.right, distance + 1))
    return [seen[distance] for distance in sorted(seen)]
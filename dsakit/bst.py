"""Binary search trees: building, searching, deleting, validating and balancing."""

from __future__ import annotations

import heapq
import math
from collections.abc import Iterable
from typing import Optional

from dsakit.binary_tree import TreeNode, inorder


def bst_insert(root: Optional[TreeNode], value: int) -> TreeNode:
    """Insert value and return the root; equal values go to the right."""
    if root is None:
        return TreeNode(value)
    if value < root.data:
        root.left = bst_insert(root.left, value)
    else:
        root.right = bst_insert(root.right, value)
    return root


def build_bst(values: Iterable[int]) -> Optional[TreeNode]:
    """Build a search tree by inserting the values in order."""
    root: Optional[TreeNode] = None
    for value in values:
        root = bst_insert(root, value)
    return root


def bst_search(root: Optional[TreeNode], key: int) -> bool:
    """True when key is stored in the tree."""
    node = root
    while node is not None:
        if node.data == key:
            return True
        node = node.left if key < node.data else node.right
    return False


def delete_node(root: Optional[TreeNode], key: int) -> Optional[TreeNode]:
    """Remove one node holding key and return the new root."""
    if root is None:
        return None
    if key < root.data:
        root.left = delete_node(root.left, key)
    elif key > root.data:
        root.right = delete_node(root.right, key)
    else:
        if root.left is None:
            return root.right
        if root.right is None:
            return root.left
        successor = root.right
        while successor.left is not None:
            successor = successor.left
        root.data = successor.data
        root.right = delete_node(root.right, successor.data)
    return root


def values_in_range(root: Optional[TreeNode], start: int, end: int) -> list[int]:
    """Values strictly between start and end, in ascending order."""
    found: list[int] = []

    def walk(node: Optional[TreeNode]) -> None:
        if node is None:
            return
        if node.data > start:
            walk(node.left)
        if start < node.data < end:
            found.append(node.data)
        if node.data < end:
            walk(node.right)

    walk(root)
    return found


def root_to_leaf_paths(root: Optional[TreeNode]) -> list[list[int]]:
    """Every path from the root to a leaf, right subtrees explored first."""
    paths: list[list[int]] = []

    def walk(node: Optional[TreeNode], path: list[int]) -> None:
        if node is None:
            return
        path = [*path, node.data]
        if node.left is None and node.right is None:
            paths.append(path)
            return
        walk(node.right, path)
        walk(node.left, path)

    walk(root, [])
    return paths


def is_valid_bst(root: Optional[TreeNode]) -> bool:
    """True when every node lies within the bounds set by its ancestors."""

    def check(node: Optional[TreeNode], low: Optional[int], high: Optional[int]) -> bool:
        if node is None:
            return True
        if low is not None and node.data < low:
            return False
        if high is not None and node.data > high:
            return False
        return check(node.left, low, node.data) and check(node.right, node.data, high)

    return check(root, None, None)


def build_balanced_bst(values: Iterable[int]) -> Optional[TreeNode]:
    """Build a height-balanced search tree from values already in ascending order."""
    items = list(values)

    def build(low: int, high: int) -> Optional[TreeNode]:
        if low > high:
            return None
        mid = low + (high - low) // 2
        return TreeNode(items[mid], build(low, mid - 1), build(mid + 1, high))

    return build(0, len(items) - 1)


def balance(root: Optional[TreeNode]) -> Optional[TreeNode]:
    """A height-balanced search tree holding the same values as root."""
    return build_balanced_bst(inorder(root))


def largest_bst_size(root: Optional[TreeNode]) -> int:
    """Number of nodes in the largest subtree that is a search tree."""
    best = 0

    def info(node: Optional[TreeNode]) -> tuple[int, float, float, bool]:
        nonlocal best
        if node is None:
            return 0, math.inf, -math.inf, True
        left_size, left_min, left_max, left_ok = info(node.left)
        right_size, right_min, right_max, right_ok = info(node.right)
        size = left_size + right_size + 1
        low = min(node.data, left_min, right_min)
        high = max(node.data, left_max, right_max)
        ok = left_ok and right_ok and left_max < node.data < right_min
        if ok:
            best = max(best, size)
        return size, low, high, ok

    info(root)
    return best


def merge_bsts(
    first: Optional[TreeNode], second: Optional[TreeNode]
) -> Optional[TreeNode]:
    """A balanced search tree holding the values of both trees."""
    return build_balanced_bst(heapq.merge(inorder(first), inorder(second)))
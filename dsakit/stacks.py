"""A stack on a linked list and problems solved with stacks."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Sequence
from typing import Optional

_PAIRS = {")": "(", "}": "{", "]": "["}
_OPENING = frozenset(_PAIRS.values())


class LinkedStack:
    """A last-in first-out stack kept in a linked sequence."""

    def __init__(self) -> None:
        self._items: deque[int] = deque()

    def push(self, value: int) -> None:
        """Add value on top."""
        self._items.append(value)

    def pop(self) -> int:
        """Remove and return the top value."""
        if not self._items:
            raise IndexError("stack is empty")
        return self._items.pop()

    def top(self) -> int:
        """The top value, left in place."""
        if not self._items:
            raise IndexError("stack is empty")
        return self._items[-1]

    def __len__(self) -> int:
        return len(self._items)


def has_duplicate_parentheses(expression: str) -> bool:
    """True when some pair of parentheses encloses nothing but another group."""
    stack: list[str] = []
    for char in expression:
        if char != ")":
            stack.append(char)
            continue
        if not stack:
            raise ValueError("unbalanced closing parenthesis")
        if stack[-1] == "(":
            return True
        while stack and stack[-1] != "(":
            stack.pop()
        if not stack:
            raise ValueError("unbalanced closing parenthesis")
        stack.pop()
    return False


def is_valid_parentheses(text: str) -> bool:
    """True when every bracket is closed by its match in the right order."""
    stack: list[str] = []
    for char in text:
        if char in _OPENING:
            stack.append(char)
        elif not stack or stack.pop() != _PAIRS.get(char):
            return False
    return not stack


def max_histogram_area(heights: Sequence[int]) -> int:
    """Largest rectangle that fits under the histogram."""
    n = len(heights)
    left_smaller = [-1] * n
    right_smaller = [n] * n
    stack: list[int] = []
    for index, height in enumerate(heights):
        while stack and height <= heights[stack[-1]]:
            stack.pop()
        if stack:
            left_smaller[index] = stack[-1]
        stack.append(index)
    stack.clear()
    for index in range(n - 1, -1, -1):
        while stack and heights[index] <= heights[stack[-1]]:
            stack.pop()
        if stack:
            right_smaller[index] = stack[-1]
        stack.append(index)
    return max(
        (
            height * (right - left - 1)
            for height, left, right in zip(heights, left_smaller, right_smaller)
        ),
        default=0,
    )


def next_greater(values: Sequence[int]) -> list[Optional[int]]:
    """For each value, the first strictly greater value to its right, or None."""
    result: list[Optional[int]] = [None] * len(values)
    stack: list[int] = []
    for index in range(len(values) - 1, -1, -1):
        while stack and values[index] >= stack[-1]:
            stack.pop()
        if stack:
            result[index] = stack[-1]
        stack.append(values[index])
    return result


def stock_span(prices: Sequence[int]) -> list[int]:
    """For each day, the run of consecutive days ending there with no higher price."""
    spans: list[int] = []
    stack: list[int] = []
    for index, price in enumerate(prices):
        while stack and price >= prices[stack[-1]]:
            stack.pop()
        spans.append(index - stack[-1] if stack else index + 1)
        stack.append(index)
    return spans


def push_at_bottom(stack: Iterable[int], value: int) -> list[int]:
    """A stack, listed bottom to top, with value placed under everything else."""
    return [value, *stack]


def reverse_stack(stack: Iterable[int]) -> list[int]:
    """A stack, listed bottom to top, holding the same values in reverse order."""
    return list(reversed(list(stack)))
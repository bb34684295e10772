"""Queues and stacks built from fixed arrays, deques and each other."""

from __future__ import annotations

from collections import Counter, deque
from collections.abc import Iterable
from typing import Optional


class CircularQueue:
    """A first-in first-out queue stored in a fixed-size ring."""

    def __init__(self, capacity: int) -> None:
        if capacity < 1:
            raise ValueError("capacity must be at least 1")
        self._slots: list[Optional[int]] = [None] * capacity
        self._front = 0
        self._size = 0

    @property
    def capacity(self) -> int:
        """Most values the queue can hold at once."""
        return len(self._slots)

    def push(self, value: int) -> None:
        """Add value at the rear."""
        if self._size == self.capacity:
            raise OverflowError("queue is full")
        rear = (self._front + self._size) % self.capacity
        self._slots[rear] = value
        self._size += 1

    def pop(self) -> int:
        """Remove and return the value at the front."""
        value = self.front()
        self._slots[self._front] = None
        self._front = (self._front + 1) % self.capacity
        self._size -= 1
        return value

    def front(self) -> int:
        """The value at the front, left in place."""
        if not self._size:
            raise IndexError("queue is empty")
        value = self._slots[self._front]
        assert value is not None
        return value

    def rear(self) -> int:
        """The value at the rear, left in place."""
        if not self._size:
            raise IndexError("queue is empty")
        value = self._slots[(self._front + self._size - 1) % self.capacity]
        assert value is not None
        return value

    def __len__(self) -> int:
        return self._size


class DequeQueue:
    """A first-in first-out queue backed by a deque."""

    def __init__(self) -> None:
        self._items: deque[int] = deque()

    def push(self, value: int) -> None:
        """Add value at the back."""
        self._items.append(value)

    def pop(self) -> int:
        """Remove and return the value at the front."""
        if not self._items:
            raise IndexError("queue is empty")
        return self._items.popleft()

    def front(self) -> int:
        """The value at the front, left in place."""
        if not self._items:
            raise IndexError("queue is empty")
        return self._items[0]

    def __len__(self) -> int:
        return len(self._items)


class DequeStack:
    """A last-in first-out stack backed by a deque."""

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


class StackFromQueues:
    """A stack made of two queues, keeping the newest value at the queue's front."""

    def __init__(self) -> None:
        self._main: deque[int] = deque()
        self._spare: deque[int] = deque()

    def push(self, value: int) -> None:
        """Add value on top by moving the older values behind it."""
        while self._main:
            self._spare.append(self._main.popleft())
        self._main.append(value)
        while self._spare:
            self._main.append(self._spare.popleft())

    def pop(self) -> int:
        """Remove and return the top value."""
        if not self._main:
            raise IndexError("stack is empty")
        return self._main.popleft()

    def top(self) -> int:
        """The top value, left in place."""
        if not self._main:
            raise IndexError("stack is empty")
        return self._main[0]

    def __len__(self) -> int:
        return len(self._main)


class QueueFromStacks:
    """A queue made of two stacks, keeping the oldest value on the main stack's top."""

    def __init__(self) -> None:
        self._main: list[int] = []
        self._spare: list[int] = []

    def push(self, value: int) -> None:
        """Add value at the back by slipping it under the values already held."""
        while self._main:
            self._spare.append(self._main.pop())
        self._main.append(value)
        while self._spare:
            self._main.append(self._spare.pop())

    def pop(self) -> int:
        """Remove and return the value at the front."""
        if not self._main:
            raise IndexError("queue is empty")
        return self._main.pop()

    def front(self) -> int:
        """The value at the front, left in place."""
        if not self._main:
            raise IndexError("queue is empty")
        return self._main[-1]

    def __len__(self) -> int:
        return len(self._main)


def first_non_repeating(text: str) -> list[Optional[str]]:
    """For each prefix of text, its first character seen only once, or None."""
    counts: Counter[str] = Counter()
    candidates: deque[str] = deque()
    result: list[Optional[str]] = []
    for char in text:
        counts[char] += 1
        candidates.append(char)
        while candidates and counts[candidates[0]] > 1:
            candidates.popleft()
        result.append(candidates[0] if candidates else None)
    return result


def interleave(queue: Iterable[int]) -> list[int]:
    """Alternate the first half with the second half, first half leading."""
    pending = deque(queue)
    half = deque(pending.popleft() for _ in range(len(pending) // 2))
    while half:
        pending.append(half.popleft())
        pending.append(pending.popleft())
    return list(pending)


def reverse_queue(queue: Iterable[int]) -> list[int]:
    """The values of queue in reverse order."""
    stack = list(queue)
    return [stack.pop() for _ in range(len(stack))]
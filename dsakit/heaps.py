"""A max-heap and problems solved with priority queues."""

from __future__ import annotations

import heapq
from collections.abc import Iterable, Sequence
from itertools import takewhile


class MaxHeap:
    """A binary heap whose top is always its largest value."""

    def __init__(self) -> None:
        self._items: list[int] = []

    def push(self, value: int) -> None:
        """Add value, moving it up until its parent is no smaller."""
        items = self._items
        items.append(value)
        index = len(items) - 1
        while index > 0:
            parent = (index - 1) // 2
            if items[parent] >= items[index]:
                break
            items[parent], items[index] = items[index], items[parent]
            index = parent

    def _sift_down(self, index: int) -> None:
        items = self._items
        size = len(items)
        while True:
            largest = index
            for child in (2 * index + 1, 2 * index + 2):
                if child < size and items[child] > items[largest]:
                    largest = child
            if largest == index:
                return
            items[index], items[largest] = items[largest], items[index]
            index = largest

    def pop(self) -> int:
        """Remove and return the largest value."""
        items = self._items
        if not items:
            raise IndexError("pop from an empty heap")
        items[0], items[-1] = items[-1], items[0]
        largest = items.pop()
        self._sift_down(0)
        return largest

    def top(self) -> int:
        """The largest value, left in place."""
        if not self._items:
            raise IndexError("top of an empty heap")
        return self._items[0]

    def __len__(self) -> int:
        return len(self._items)


def connect_ropes(lengths: Iterable[int]) -> int:
    """Least total cost of joining all ropes, each join costing the joined length."""
    heap = list(lengths)
    heapq.heapify(heap)
    cost = 0
    while len(heap) > 1:
        joined = heapq.heappop(heap) + heapq.heappop(heap)
        cost += joined
        heapq.heappush(heap, joined)
    return cost


def nearest_cars(positions: Sequence[tuple[int, int]], k: int) -> list[int]:
    """Indices of the k cars closest to the origin, nearest first."""
    if not 0 <= k <= len(positions):
        raise ValueError(f"k must be between 0 and {len(positions)}")
    ranked = heapq.nsmallest(
        k, ((x * x + y * y, index) for index, (x, y) in enumerate(positions))
    )
    return [index for _, index in ranked]


def sliding_window_max(values: Sequence[int], k: int) -> list[int]:
    """Largest value of every window of k consecutive values."""
    if not 1 <= k <= len(values):
        raise ValueError(f"window size must be between 1 and {len(values)}")
    heap = [(-value, index) for index, value in enumerate(values[:k])]
    heapq.heapify(heap)
    maxima = [-heap[0][0]]
    for index in range(k, len(values)):
        heapq.heappush(heap, (-values[index], index))
        while heap[0][1] <= index - k:
            heapq.heappop(heap)
        maxima.append(-heap[0][0])
    return maxima


def weakest_rows(matrix: Sequence[Sequence[int]], k: int) -> list[int]:
    """Indices of the k rows with the fewest leading ones, ties by lower index."""
    if not 0 <= k <= len(matrix):
        raise ValueError(f"k must be between 0 and {len(matrix)}")
    strengths = (
        (sum(1 for _ in takewhile(lambda cell: cell == 1, row)), index)
        for index, row in enumerate(matrix)
    )
    return [index for _, index in heapq.nsmallest(k, strengths)]
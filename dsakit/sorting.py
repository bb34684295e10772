"""Comparison sorts and search in a rotated sorted sequence."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import Optional


def _merge(left: list[int], right: list[int]) -> list[int]:
    merged: list[int] = []
    i = j = 0
    while i < len(left) and j < len(right):
        if left[i] <= right[j]:
            merged.append(left[i])
            i += 1
        else:
            merged.append(right[j])
            j += 1
    merged.extend(left[i:])
    merged.extend(right[j:])
    return merged


def merge_sort(values: Iterable[int]) -> list[int]:
    """A new ascending list, sorted stably by splitting and merging."""
    items = list(values)
    if len(items) <= 1:
        return items
    mid = (len(items) + 1) // 2
    return _merge(merge_sort(items[:mid]), merge_sort(items[mid:]))


def _partition(items: list[int], low: int, high: int) -> int:
    pivot = items[high]
    boundary = low
    for index in range(low, high):
        if items[index] <= pivot:
            items[boundary], items[index] = items[index], items[boundary]
            boundary += 1
    items[boundary], items[high] = items[high], items[boundary]
    return boundary


def quick_sort(values: Iterable[int]) -> list[int]:
    """A new ascending list, sorted by partitioning around the last element."""
    items = list(values)
    pending = [(0, len(items) - 1)]
    while pending:
        low, high = pending.pop()
        if low >= high:
            continue
        pivot = _partition(items, low, high)
        pending.append((low, pivot - 1))
        pending.append((pivot + 1, high))
    return items


def _sift_down(items: list[int], index: int, size: int) -> None:
    while True:
        largest = index
        for child in (2 * index + 1, 2 * index + 2):
            if child < size and items[child] > items[largest]:
                largest = child
        if largest == index:
            return
        items[index], items[largest] = items[largest], items[index]
        index = largest


def heap_sort(values: Iterable[int]) -> list[int]:
    """A new ascending list, sorted with a max-heap."""
    items = list(values)
    size = len(items)
    for index in range(size // 2 - 1, -1, -1):
        _sift_down(items, index, size)
    for end in range(size - 1, 0, -1):
        items[0], items[end] = items[end], items[0]
        _sift_down(items, 0, end)
    return items


def search_rotated(values: Sequence[int], target: int) -> Optional[int]:
    """Index of target in a rotated ascending sequence of distinct values, or None."""
    low, high = 0, len(values) - 1
    while low <= high:
        mid = low + (high - low) // 2
        if values[mid] == target:
            return mid
        if values[low] <= values[mid]:
            if values[low] <= target < values[mid]:
                high = mid - 1
            else:
                low = mid + 1
        elif values[mid] < target <= values[high]:
            low = mid + 1
        else:
            high = mid - 1
    return None
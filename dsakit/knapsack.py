"""The 0/1 knapsack problem solved by recursion, memoization and tabulation."""

from __future__ import annotations

from collections.abc import Iterable
from functools import lru_cache


def _validate(
    weights: Iterable[int], values: Iterable[int], capacity: int
) -> tuple[list[int], list[int]]:
    weight_list = list(weights)
    value_list = list(values)
    if len(weight_list) != len(value_list):
        raise ValueError("weights and values must have the same length")
    if capacity < 0:
        raise ValueError("capacity must not be negative")
    if any(weight <= 0 for weight in weight_list):
        raise ValueError("weights must be positive")
    return weight_list, value_list


def knapsack_recursive(weights: Iterable[int], values: Iterable[int], capacity: int) -> int:
    """Best total value of items fitting in capacity, by plain recursion."""
    weight_list, value_list = _validate(weights, values, capacity)

    def best(count: int, room: int) -> int:
        if count == 0 or room == 0:
            return 0
        skip = best(count - 1, room)
        weight = weight_list[count - 1]
        if weight <= room:
            return max(skip, best(count - 1, room - weight) + value_list[count - 1])
        return skip

    return best(len(weight_list), capacity)


def knapsack_memoized(weights: Iterable[int], values: Iterable[int], capacity: int) -> int:
    """Best total value of items fitting in capacity, caching subproblems."""
    weight_list, value_list = _validate(weights, values, capacity)

    @lru_cache(maxsize=None)
    def best(count: int, room: int) -> int:
        if count == 0 or room == 0:
            return 0
        skip = best(count - 1, room)
        weight = weight_list[count - 1]
        if weight <= room:
            return max(skip, best(count - 1, room - weight) + value_list[count - 1])
        return skip

    return best(len(weight_list), capacity)


def knapsack_tabulated(weights: Iterable[int], values: Iterable[int], capacity: int) -> int:
    """Best total value of items fitting in capacity, filling a table bottom up."""
    weight_list, value_list = _validate(weights, values, capacity)
    table = [0] * (capacity + 1)
    for weight, value in zip(weight_list, value_list):
        for room in range(capacity, weight - 1, -1):
            table[room] = max(table[room], table[room - weight] + value)
    return table[capacity]
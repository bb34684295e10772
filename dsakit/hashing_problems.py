"""Problems solved with hash maps and hash sets."""

from __future__ import annotations

from collections import Counter
from collections.abc import Hashable, Iterable, Mapping, Sequence
from typing import TypeVar

T = TypeVar("T", bound=Hashable)


def count_distinct(values: Iterable[Hashable]) -> int:
    """Number of different values."""
    return len(set(values))


def itinerary(tickets: Mapping[str, str]) -> list[str]:
    """Cities in travel order, given tickets mapping each departure to its arrival."""
    if not tickets:
        return []
    arrivals = set(tickets.values())
    starts = [city for city in tickets if city not in arrivals]
    if not starts:
        raise ValueError("the tickets form a loop with no starting city")
    route = [starts[-1]]
    visited = {starts[-1]}
    while route[-1] in tickets:
        city = tickets[route[-1]]
        if city in visited:
            raise ValueError("the tickets form a loop")
        visited.add(city)
        route.append(city)
    return route


def count_subarrays_with_sum(values: Iterable[int], target: int) -> int:
    """Number of contiguous runs of values whose sum equals target."""
    seen: Counter[int] = Counter({0: 1})
    total = 0
    count = 0
    for value in values:
        total += value
        count += seen[total - target]
        seen[total] += 1
    return count


def longest_zero_sum_subarray(values: Iterable[int]) -> int:
    """Length of the longest contiguous run of values summing to zero."""
    first_seen: dict[int, int] = {0: -1}
    total = 0
    best = 0
    for index, value in enumerate(values):
        total += value
        if total in first_seen:
            best = max(best, index - first_seen[total])
        else:
            first_seen[total] = index
    return best


def majority_elements(values: Sequence[T]) -> list[T]:
    """Values occurring more than a third of the time, in order of first appearance."""
    limit = len(values) // 3
    return [value for value, count in Counter(values).items() if count > limit]


def union(first: Iterable[T], second: Iterable[T]) -> list[T]:
    """Distinct values of both inputs, in order of first appearance."""
    return list(dict.fromkeys([*first, *second]))


def intersection(first: Iterable[T], second: Iterable[T]) -> list[T]:
    """Values of second that also occur in first, in the order of second."""
    present = set(first)
    return [value for value in second if value in present]


def is_anagram(first: str, second: str) -> bool:
    """True when both strings hold the same characters the same number of times."""
    return len(first) == len(second) and Counter(first) == Counter(second)
"""Greedy algorithms: activities, knapsack, coins, jobs, chains and pairings."""

from __future__ import annotations

import math
from collections.abc import Iterable, Sequence
from dataclasses import dataclass

INDIAN_COINS: tuple[int, ...] = (1, 2, 5, 10, 20, 50, 100, 500, 2000)


def max_activities(starts: Sequence[int], ends: Sequence[int]) -> int:
    """Most activities that can be done one after another without overlapping."""
    if len(starts) != len(ends):
        raise ValueError("starts and ends must have the same length")
    count = 0
    free_from = -math.inf
    for start, end in sorted(zip(starts, ends), key=lambda pair: pair[1]):
        if start >= free_from:
            free_from = end
            count += 1
    return count


def fractional_knapsack(
    weights: Sequence[int], values: Sequence[int], capacity: float
) -> float:
    """Best value when items may be taken in part, filling by value per weight."""
    if len(weights) != len(values):
        raise ValueError("weights and values must have the same length")
    if capacity < 0:
        raise ValueError("capacity must not be negative")
    if any(weight <= 0 for weight in weights):
        raise ValueError("weights must be positive")
    items = sorted(zip(weights, values), key=lambda item: item[1] / item[0], reverse=True)
    total = 0.0
    room = capacity
    for weight, value in items:
        if weight <= room:
            total += value
            room -= weight
        else:
            total += room * value / weight
            break
    return total


def coin_change(amount: int, coins: Iterable[int] = INDIAN_COINS) -> dict[int, int]:
    """Coins used when always taking the largest that fits, smallest coin first."""
    if amount < 0:
        raise ValueError("amount must not be negative")
    denominations = sorted(set(coins), reverse=True)
    if any(coin <= 0 for coin in denominations):
        raise ValueError("coins must be positive")
    used: dict[int, int] = {}
    remaining = amount
    for coin in denominations:
        count, remaining = divmod(remaining, coin)
        if count:
            used[coin] = count
    if remaining:
        raise ValueError(f"{amount} cannot be made from the given coins")
    return dict(sorted(used.items()))


@dataclass(frozen=True)
class Job:
    """A job by its position in the input, with a deadline and a profit."""

    index: int
    deadline: int
    profit: int

    @property
    def name(self) -> str:
        """Letter naming the job by position: A for the first."""
        return chr(ord("A") + self.index)


def job_sequence(jobs: Iterable[tuple[int, int]]) -> list[Job]:
    """Jobs chosen by profit, each with a later deadline than the one before it."""
    ranked = sorted(
        (Job(index, deadline, profit) for index, (deadline, profit) in enumerate(jobs)),
        key=lambda job: job.profit,
        reverse=True,
    )
    chosen: list[Job] = []
    for job in ranked:
        if not chosen or job.deadline > chosen[-1].deadline:
            chosen.append(job)
    return chosen


def max_chain_length(pairs: Iterable[tuple[int, int]]) -> int:
    """Longest chain of pairs where each starts after the previous one ends."""
    count = 0
    current_end = -math.inf
    for first, second in sorted(pairs, key=lambda pair: pair[1]):
        if first > current_end:
            count += 1
            current_end = second
    return count


def min_absolute_difference(first: Iterable[int], second: Iterable[int]) -> int:
    """Smallest total of absolute differences when pairing the two sequences."""
    a = sorted(first)
    b = sorted(second)
    if len(a) != len(b):
        raise ValueError("both sequences must have the same length")
    return sum(abs(x - y) for x, y in zip(a, b))
"""Counting and generation problems solved by recursion."""

from __future__ import annotations


def friend_pairings(n: int) -> int:
    """Ways for n people to each stay single or pair up with one other."""
    if n < 1:
        raise ValueError("the number of people must be at least 1")
    if n <= 2:
        return n
    before, current = 1, 2
    for people in range(3, n + 1):
        before, current = current, current + (people - 1) * before
    return current


def tiling_ways(n: int) -> int:
    """Ways to tile a 2 x n floor with 2 x 1 tiles."""
    if n < 0:
        raise ValueError("the floor length must not be negative")
    before, current = 1, 1
    for _ in range(n - 1):
        before, current = current, current + before
    return current


def remove_duplicates(text: str) -> str:
    """Keep only the first occurrence of every character."""
    return "".join(dict.fromkeys(text))


def binary_strings(n: int) -> list[str]:
    """Binary strings of length n without two consecutive ones, in ascending order."""
    if n < 0:
        raise ValueError("the length must not be negative")

    def extend(prefix: str, remaining: int) -> list[str]:
        if remaining == 0:
            return [prefix]
        result = extend(prefix + "0", remaining - 1)
        if not prefix.endswith("1"):
            result += extend(prefix + "1", remaining - 1)
        return result

    return extend("", n)
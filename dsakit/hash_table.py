"""A separately chained hash table that doubles its bucket array when crowded."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any, Optional

MAX_LOAD_FACTOR = 1.0


class HashTable:
    """Maps string keys to integer values, with one chain of entries per bucket."""

    def __init__(self, size: int) -> None:
        if size < 1:
            raise ValueError("a hash table needs at least one bucket")
        self._buckets: list[list[tuple[str, int]]] = [[] for _ in range(size)]
        self._count = 0

    @property
    def capacity(self) -> int:
        """Number of buckets."""
        return len(self._buckets)

    def bucket_index(self, key: str) -> int:
        """Bucket that key belongs to: squared character codes reduced by the key length."""
        length = len(key)
        total = sum(ord(char) * ord(char) % length for char in key)
        return total % self.capacity

    def _find(self, key: str) -> tuple[list[tuple[str, int]], Optional[int]]:
        chain = self._buckets[self.bucket_index(key)]
        for position, (stored, _) in enumerate(chain):
            if stored == key:
                return chain, position
        return chain, None

    def insert(self, key: str, value: int) -> None:
        """Store value under key, replacing any earlier value, and grow when crowded."""
        chain, position = self._find(key)
        if position is not None:
            chain[position] = (key, value)
            return
        chain.insert(0, (key, value))
        self._count += 1
        if self._count / self.capacity > MAX_LOAD_FACTOR:
            self.rehash()

    def rehash(self) -> None:
        """Double the number of buckets and redistribute every entry."""
        old = self._buckets
        self._buckets = [[] for _ in range(2 * len(old))]
        for chain in old:
            for key, value in chain:
                self._buckets[self.bucket_index(key)].insert(0, (key, value))

    def remove(self, key: str) -> None:
        """Delete the entry for key."""
        chain, position = self._find(key)
        if position is None:
            raise KeyError(key)
        del chain[position]
        self._count -= 1

    def get(self, key: str, default: Any = None) -> Any:
        """Value stored under key, or default when the key is absent."""
        chain, position = self._find(key)
        return default if position is None else chain[position][1]

    def __getitem__(self, key: str) -> int:
        chain, position = self._find(key)
        if position is None:
            raise KeyError(key)
        return chain[position][1]

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and self._find(key)[1] is not None

    def __len__(self) -> int:
        return self._count

    def items(self) -> Iterator[tuple[str, int]]:
        """Key and value pairs, bucket by bucket, each chain from its head."""
        for chain in self._buckets:
            yield from chain

    def format_table(self) -> str:
        """Every entry under a heading line, as 'value - > key'."""
        lines: list[str] = []
        for key, value in self.items():
            lines.append("Value      Key")
            lines.append(f"{value} - > {key}")
        return "\n".join(lines)
"""A prefix tree of words, with prefix, substring and word-break queries."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from functools import lru_cache


@dataclass
class _TrieNode:
    children: dict[str, "_TrieNode"] = field(default_factory=dict)
    end_of_word: bool = False
    passing: int = 0


class Trie:
    """Stores words character by character, sharing common prefixes."""

    def __init__(self, words: Iterable[str] = ()) -> None:
        self._root = _TrieNode()
        self._nodes = 0
        for word in words:
            self.insert(word)

    def insert(self, word: str) -> None:
        """Add word, counting how many insertions pass through each node."""
        node = self._root
        for char in word:
            child = node.children.get(char)
            if child is None:
                child = node.children[char] = _TrieNode()
                self._nodes += 1
            child.passing += 1
            node = child
        node.end_of_word = True

    def _walk(self, text: str) -> _TrieNode | None:
        node = self._root
        for char in text:
            next_node = node.children.get(char)
            if next_node is None:
                return None
            node = next_node
        return node

    def search(self, word: str) -> bool:
        """True when word itself was inserted."""
        node = self._walk(word)
        return node is not None and node.end_of_word

    def __contains__(self, word: object) -> bool:
        return isinstance(word, str) and self.search(word)

    def shortest_unique_prefix(self, word: str) -> str:
        """Shortest prefix of word that no other stored word shares."""
        node = self._root
        for length, char in enumerate(word, start=1):
            child = node.children.get(char)
            if child is None or child.passing == 1:
                return word[:length]
            node = child
        return word

    def longest_complete_word(self) -> str:
        """Longest word whose every prefix is also a word; ties go to the smallest."""
        best = ""

        def walk(node: _TrieNode, prefix: str) -> None:
            nonlocal best
            for char, child in node.children.items():
                if not child.end_of_word:
                    continue
                word = prefix + char
                if len(word) > len(best) or (len(word) == len(best) and word < best):
                    best = word
                walk(child, word)

        walk(self._root, "")
        return best

    def node_count(self) -> int:
        """Number of nodes below the root."""
        return self._nodes

    def prefixes(self) -> Iterator[str]:
        """Every path from the root to a node, in depth-first insertion order."""

        def walk(node: _TrieNode, prefix: str) -> Iterator[str]:
            for char, child in node.children.items():
                text = prefix + char
                yield text
                yield from walk(child, text)

        return walk(self._root, "")


def longest_word_with_all_prefixes(words: Iterable[str]) -> str:
    """Longest word whose every prefix is also among words."""
    return Trie(words).longest_complete_word()


def distinct_substrings(texts: Iterable[str]) -> list[str]:
    """Every different non-empty substring of the texts, found through their suffixes."""
    trie = Trie()
    for text in texts:
        for start in range(len(text)):
            trie.insert(text[start:])
    return list(trie.prefixes())


def word_break(text: str, words: Iterable[str]) -> bool:
    """True when text can be split into a sequence of the given words."""
    trie = Trie(words)

    @lru_cache(maxsize=None)
    def breakable(start: int) -> bool:
        if start == len(text):
            return True
        return any(
            trie.search(text[start:end]) and breakable(end)
            for end in range(start + 1, len(text) + 1)
        )

    return breakable(0)
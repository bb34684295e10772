import pytest

from dsakit.trie import (
    Trie,
    distinct_substrings,
    longest_word_with_all_prefixes,
    word_break,
)

WORDS = ["apple", "le", "cherry"]


def test_search_finds_whole_words_only():
    trie = Trie(WORDS)
    assert trie.search("le") is True
    assert trie.search("apple") is True
    assert trie.search("app") is False
    assert trie.search("banana") is False


def test_contains():
    trie = Trie(WORDS)
    assert "cherry" in trie
    assert "cher" not in trie
    assert 5 not in trie


def test_insert_then_search():
    trie = Trie()
    assert not trie.search("word")
    trie.insert("word")
    assert trie.search("word")


def test_shortest_unique_prefix_example():
    assert Trie(WORDS).shortest_unique_prefix("cherry") == "c"


@pytest.mark.parametrize("word", ["zebra", "dog", "duck", "dove"])
def test_shortest_unique_prefix_is_minimal(word):
    words = ["zebra", "dog", "duck", "dove"]
    prefix = Trie(words).shortest_unique_prefix(word)
    others = [w for w in words if w != word]
    assert word.startswith(prefix)
    assert not any(other.startswith(prefix) for other in others)
    if len(prefix) > 1:
        assert any(other.startswith(prefix[:-1]) for other in others)


def test_longest_word_with_all_prefixes_example():
    words = ["a", "abc", "ab", "apple", "ap", "app", "appl", "appl"]
    assert longest_word_with_all_prefixes(words) == "apple"


def test_longest_word_ties_go_to_smallest():
    assert longest_word_with_all_prefixes(["b", "a"]) == "a"
    assert longest_word_with_all_prefixes(["xyz"]) == ""


def test_node_count_shares_prefixes():
    assert Trie(["a", "ab"]).node_count() == len("ab")
    assert Trie(["ab", "ab"]).node_count() == len("ab")


def test_distinct_substrings_are_unique_substrings():
    result = distinct_substrings(["apple"])
    assert len(result) == len(set(result))
    assert all(item in "apple" for item in result)
    assert "app" in result
    assert "ppl" in result
    assert "" not in result


def test_distinct_substrings_ignores_repeats():
    assert sorted(distinct_substrings(["apple", "le"])) == sorted(
        distinct_substrings(["apple"])
    )
    assert len(distinct_substrings(WORDS)) == Trie(
        text[start:] for text in WORDS for start in range(len(text))
    ).node_count()


def test_word_break():
    assert word_break("appleherry", WORDS) is False
    assert word_break("applele", WORDS) is True
    assert word_break("cherryapple", WORDS) is True
    assert word_break("", WORDS) is True
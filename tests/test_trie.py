import pytest

from contestlib.trie import Trie


def test_count_inserted_words():
    trie = Trie()
    for word in ["apple", "app", "apple", "banana"]:
        trie.insert(word)
    assert trie.count("apple") == 2
    assert trie.count("app") == 1
    assert trie.count("banana") == 1


def test_prefix_is_not_a_word():
    trie = Trie()
    trie.insert("hello")
    assert trie.count("hell") == 0
    assert trie.count("helloo") == 0
    assert trie.count("world") == 0


def test_empty_word():
    trie = Trie()
    assert trie.count("") == 0
    trie.insert("")
    assert trie.count("") == 1


def test_counts_match_list_count():
    words = ["a", "ab", "abc", "ab", "b", "a", "a"]
    trie = Trie()
    for w in words:
        trie.insert(w)
    for w in set(words):
        assert trie.count(w) == words.count(w)
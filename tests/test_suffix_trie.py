import itertools

import pytest

from contestlib.suffix_trie import SuffixTrie


@pytest.mark.parametrize("pattern", ["nan", "ana", "banana", "a", ""])
def test_contains_substrings(pattern):
    assert SuffixTrie("banana").contains(pattern) is True


@pytest.mark.parametrize("pattern", ["nab", "bananas", "x", "aa"])
def test_rejects_non_substrings(pattern):
    assert SuffixTrie("banana").contains(pattern) is False


def test_every_substring_found():
    text = "mississippi"
    trie = SuffixTrie(text)
    for i in range(len(text)):
        for j in range(i + 1, len(text) + 1):
            assert trie.contains(text[i:j])


def test_agrees_with_python_substring_search():
    text = "abracadabra"
    trie = SuffixTrie(text)
    for length in range(1, 4):
        for chars in itertools.product("abcdr", repeat=length):
            pattern = "".join(chars)
            assert (pattern in trie) == (pattern in text)


def test_empty_text():
    trie = SuffixTrie("")
    assert trie.contains("")
    assert not trie.contains("a")
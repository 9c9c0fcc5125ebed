"""Uncompressed suffix trie answering substring queries."""

from __future__ import annotations


class _Node:
    __slots__ = ("children", "is_end")

    def __init__(self) -> None:
        self.children: dict[str, _Node] = {}
        self.is_end = False


class SuffixTrie:
    """Trie of every suffix of a text; quadratic in size, linear per query."""

    def __init__(self, text: str) -> None:
        self._root = _Node()
        for start in range(len(text)):
            node = self._root
            for ch in text[start:]:
                node = node.children.setdefault(ch, _Node())
            node.is_end = True

    def contains(self, pattern: str) -> bool:
        """True if pattern occurs in the text."""
        node = self._root
        for ch in pattern:
            child = node.children.get(ch)
            if child is None:
                return False
            node = child
        return True

    __contains__ = contains
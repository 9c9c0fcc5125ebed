"""Trie over lowercase words with occurrence counts."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class _Node:
    children: dict[str, _Node] = field(default_factory=dict)
    prefix: int = 0
    end: int = 0
    shortest: int = 0


def _check_char(ch: str) -> None:
    if not "a" <= ch <= "z":
        raise ValueError(f"unsupported character {ch!r}: only 'a'..'z' allowed")


class Trie:
    """Stores lowercase words and counts how often each was inserted."""

    def __init__(self) -> None:
        self._root = _Node()

    def insert(self, word: str) -> None:
        for ch in word:
            _check_char(ch)
        node = self._root
        for ch in word:
            node = node.children.setdefault(ch, _Node())
            node.prefix += 1
            if node.shortest == 0 or len(word) < node.shortest:
                node.shortest = len(word)
        node.end += 1

    def count(self, word: str) -> int:
        """Number of times word has been inserted."""
        node = self._root
        for ch in word:
            _check_char(ch)
            child = node.children.get(ch)
            if child is None:
                return 0
            node = child
        return node.end
"""Probabilistic skip list holding a sorted set of values."""

from __future__ import annotations

import random
from typing import Optional

MAX_LEVEL = 16


class _Node:
    __slots__ = ("value", "forward")

    def __init__(self, value: Optional[int], level: int) -> None:
        self.value = value
        self.forward: list[Optional[_Node]] = [None] * (level + 1)


class SkipList:
    """Sorted set with expected logarithmic insert, search and remove."""

    def __init__(self, seed: Optional[int] = None) -> None:
        self._rng = random.Random(seed)
        self._header = _Node(None, MAX_LEVEL)
        self._level = 0

    def _random_level(self) -> int:
        level = 0
        while self._rng.getrandbits(1) and level < MAX_LEVEL:
            level += 1
        return level

    def _predecessors(self, value: int) -> list[_Node]:
        update = [self._header] * (MAX_LEVEL + 1)
        current = self._header
        for i in range(self._level, -1, -1):
            nxt = current.forward[i]
            while nxt is not None and nxt.value < value:
                current = nxt
                nxt = current.forward[i]
            update[i] = current
        return update

    def insert(self, value: int) -> None:
        """Add value; a value already present is left as it is."""
        update = self._predecessors(value)
        candidate = update[0].forward[0]
        if candidate is not None and candidate.value == value:
            return
        new_level = self._random_level()
        if new_level > self._level:
            for i in range(self._level + 1, new_level + 1):
                update[i] = self._header
            self._level = new_level
        node = _Node(value, new_level)
        for i in range(new_level + 1):
            node.forward[i] = update[i].forward[i]
            update[i].forward[i] = node

    def search(self, value: int) -> bool:
        candidate = self._predecessors(value)[0].forward[0]
        return candidate is not None and candidate.value == value

    __contains__ = search

    def remove(self, value: int) -> None:
        """Remove value if present."""
        update = self._predecessors(value)
        target = update[0].forward[0]
        if target is None or target.value != value:
            return
        for i in range(self._level + 1):
            if update[i].forward[i] is not target:
                break
            update[i].forward[i] = target.forward[i]
        while self._level > 0 and self._header.forward[self._level] is None:
            self._level -= 1

    def levels(self) -> list[list[int]]:
        """Values linked on each level, from the highest level down to level 0."""
        result = []
        for i in range(self._level, -1, -1):
            row = []
            node = self._header.forward[i]
            while node is not None:
                row.append(node.value)
                node = node.forward[i]
            result.append(row)
        return result

    def display(self) -> None:
        """Print every level, highest first."""
        top = self._level
        for offset, row in enumerate(self.levels()):
            print(f"Level {top - offset}: " + " ".join(str(v) for v in row))
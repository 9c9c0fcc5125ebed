"""B-tree of minimum degree t supporting insertion and search."""

from __future__ import annotations

from bisect import bisect_left, bisect_right, insort_right
from collections.abc import Iterator


class _Node:
    __slots__ = ("keys", "children", "leaf")

    def __init__(self, leaf: bool) -> None:
        self.keys: list[int] = []
        self.children: list[_Node] = []
        self.leaf = leaf


class BTree:
    """B-tree whose nodes hold between t-1 and 2t-1 keys; duplicates are kept."""

    def __init__(self, t: int = 3) -> None:
        if t < 2:
            raise ValueError("minimum degree must be at least 2")
        self.t = t
        self._root = _Node(leaf=True)

    def _split_child(self, parent: _Node, index: int) -> None:
        t = self.t
        full = parent.children[index]
        sibling = _Node(full.leaf)
        median = full.keys[t - 1]
        sibling.keys = full.keys[t:]
        full.keys = full.keys[: t - 1]
        if not full.leaf:
            sibling.children = full.children[t:]
            full.children = full.children[:t]
        parent.children.insert(index + 1, sibling)
        parent.keys.insert(index, median)

    def _insert_non_full(self, node: _Node, key: int) -> None:
        while not node.leaf:
            i = bisect_right(node.keys, key)
            if len(node.children[i].keys) == 2 * self.t - 1:
                self._split_child(node, i)
                if node.keys[i] < key:
                    i += 1
            node = node.children[i]
        insort_right(node.keys, key)

    def insert(self, key: int) -> None:
        if len(self._root.keys) == 2 * self.t - 1:
            new_root = _Node(leaf=False)
            new_root.children.append(self._root)
            self._split_child(new_root, 0)
            self._root = new_root
        self._insert_non_full(self._root, key)

    def search(self, key: int) -> bool:
        node = self._root
        while True:
            i = bisect_left(node.keys, key)
            if i < len(node.keys) and node.keys[i] == key:
                return True
            if node.leaf:
                return False
            node = node.children[i]

    def _walk(self, node: _Node) -> Iterator[int]:
        for i, key in enumerate(node.keys):
            if not node.leaf:
                yield from self._walk(node.children[i])
            yield key
        if not node.leaf:
            yield from self._walk(node.children[len(node.keys)])

    def inorder(self) -> list[int]:
        """All keys in ascending order."""
        return list(self._walk(self._root))
"""Persistent segment tree keeping every version of a sum array."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class _Node:
    total: int
    left: Optional[_Node] = None
    right: Optional[_Node] = None


class PersistentSegmentTree:
    """Range sums over an array whose every past version stays queryable."""

    def __init__(self, values: Iterable[int]) -> None:
        items = list(values)
        if not items:
            raise ValueError("segment tree needs at least one value")
        self.n = len(items)
        self._roots: list[_Node] = [self._build(items, 0, self.n - 1)]

    def _build(self, items: list[int], start: int, end: int) -> _Node:
        if start == end:
            return _Node(items[start])
        mid = (start + end) // 2
        left = self._build(items, start, mid)
        right = self._build(items, mid + 1, end)
        return _Node(left.total + right.total, left, right)

    def _update(self, node: _Node, start: int, end: int, idx: int, value: int) -> _Node:
        if start == end:
            return _Node(value)
        mid = (start + end) // 2
        assert node.left is not None and node.right is not None
        if idx <= mid:
            new_left = self._update(node.left, start, mid, idx, value)
            return _Node(new_left.total + node.right.total, new_left, node.right)
        new_right = self._update(node.right, mid + 1, end, idx, value)
        return _Node(node.left.total + new_right.total, node.left, new_right)

    def _query(self, node: _Node, start: int, end: int, left: int, right: int) -> int:
        if right < start or end < left:
            return 0
        if left <= start and end <= right:
            return node.total
        mid = (start + end) // 2
        assert node.left is not None and node.right is not None
        return self._query(node.left, start, mid, left, right) + self._query(
            node.right, mid + 1, end, left, right
        )

    def _root(self, version: int) -> _Node:
        if not 0 <= version < len(self._roots):
            raise IndexError(f"version {version} does not exist")
        return self._roots[version]

    def _check_range(self, left: int, right: int) -> None:
        if not 0 <= left <= right < self.n:
            raise IndexError(f"range [{left}, {right}] invalid")

    def update(self, version: int, idx: int, value: int) -> int:
        """Derive a new version from version with idx set to value; return its number."""
        root = self._root(version)
        if not 0 <= idx < self.n:
            raise IndexError(f"index {idx} out of range")
        self._roots.append(self._update(root, 0, self.n - 1, idx, value))
        return len(self._roots) - 1

    def query(self, version: int, left: int, right: int) -> int:
        """Sum of elements left .. right inclusive in the given version."""
        root = self._root(version)
        self._check_range(left, right)
        return self._query(root, 0, self.n - 1, left, right)

    def version_count(self) -> int:
        return len(self._roots)

    def kth_smallest(
        self, version1: int, version2: int, left: int, right: int, k: int
    ) -> int:
        """Position holding the k-th unit (1-based) of version2 minus version1.

        Elements are read as counts per position; the search spans every
        position, and left and right are only checked for validity.
        """
        node1 = self._root(version1)
        node2 = self._root(version2)
        self._check_range(left, right)
        start, end = 0, self.n - 1
        while start != end:
            mid = (start + end) // 2
            assert node1.left and node1.right and node2.left and node2.right
            left_count = node2.left.total - node1.left.total
            if k <= left_count:
                node1, node2 = node1.left, node2.left
                end = mid
            else:
                k -= left_count
                node1, node2 = node1.right, node2.right
                start = mid + 1
        return start
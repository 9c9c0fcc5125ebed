"""Merge sort trees and a wavelet tree for order statistics over array ranges."""

from __future__ import annotations

import heapq
from bisect import bisect_left, bisect_right
from collections.abc import Callable, Iterable
from dataclasses import dataclass, field
from typing import Optional


def _non_empty(values: Iterable[int]) -> list[int]:
    items = list(values)
    if not items:
        raise ValueError("tree needs at least one value")
    return items


def _check_range(left: int, right: int, n: int) -> None:
    if not 0 <= left <= right < n:
        raise IndexError(f"range [{left}, {right}] invalid")


def _check_k(k: int, left: int, right: int) -> None:
    if not 1 <= k <= right - left + 1:
        raise IndexError(f"k={k} out of range for {right - left + 1} elements")


class MergeSortTree:
    """Each node keeps the sorted values of its segment."""

    def __init__(self, values: Iterable[int]) -> None:
        items = _non_empty(values)
        self.n = len(items)
        self.tree: list[list[int]] = [[] for _ in range(4 * self.n)]
        self._build(items, 1, 0, self.n - 1)

    def _build(self, items: list[int], node: int, start: int, end: int) -> None:
        if start == end:
            self.tree[node] = [items[start]]
            return
        mid = (start + end) // 2
        self._build(items, 2 * node, start, mid)
        self._build(items, 2 * node + 1, mid + 1, end)
        self.tree[node] = list(heapq.merge(self.tree[2 * node], self.tree[2 * node + 1]))

    def _count(
        self,
        node: int,
        start: int,
        end: int,
        left: int,
        right: int,
        counter: Callable[[list[int]], int],
    ) -> int:
        if right < start or end < left:
            return 0
        if left <= start and end <= right:
            return counter(self.tree[node])
        mid = (start + end) // 2
        return self._count(2 * node, start, mid, left, right, counter) + self._count(
            2 * node + 1, mid + 1, end, left, right, counter
        )

    def count_less_equal(self, left: int, right: int, x: int) -> int:
        """Number of elements <= x among positions left .. right."""
        _check_range(left, right, self.n)
        return self._count(1, 0, self.n - 1, left, right, lambda s: bisect_right(s, x))

    def count_in_range(self, left: int, right: int, low: int, high: int) -> int:
        """Number of elements with low <= value <= high among positions left .. right."""
        _check_range(left, right, self.n)
        if low > high:
            return 0
        return self._count(
            1,
            0,
            self.n - 1,
            left,
            right,
            lambda s: bisect_right(s, high) - bisect_left(s, low),
        )

    def kth_smallest(self, left: int, right: int, k: int) -> int:
        """The k-th smallest value (1-based) among positions left .. right."""
        _check_range(left, right, self.n)
        _check_k(k, left, right)
        candidates = self.tree[1]
        lo, hi = 0, len(candidates) - 1
        while lo < hi:
            mid = (lo + hi) // 2
            if self.count_less_equal(left, right, candidates[mid]) >= k:
                hi = mid
            else:
                lo = mid + 1
        return candidates[lo]

    def count_greater(self, left: int, right: int, x: int) -> int:
        """Number of elements > x among positions left .. right."""
        return (right - left + 1) - self.count_less_equal(left, right, x)

    def count_less(self, left: int, right: int, x: int) -> int:
        """Number of elements < x among positions left .. right."""
        _check_range(left, right, self.n)
        return self._count(1, 0, self.n - 1, left, right, lambda s: bisect_left(s, x))


@dataclass
class _MergeNode:
    values: list[int] = field(default_factory=list)
    left: Optional[_MergeNode] = None
    right: Optional[_MergeNode] = None


class PersistentMergeSortTree:
    """Merge sort tree built from linked nodes."""

    def __init__(self, values: Iterable[int]) -> None:
        items = _non_empty(values)
        self.n = len(items)
        self._root = self._build(items, 0, self.n - 1)

    def _build(self, items: list[int], start: int, end: int) -> _MergeNode:
        if start == end:
            return _MergeNode([items[start]])
        mid = (start + end) // 2
        left = self._build(items, start, mid)
        right = self._build(items, mid + 1, end)
        return _MergeNode(list(heapq.merge(left.values, right.values)), left, right)

    def _query(
        self,
        node: Optional[_MergeNode],
        start: int,
        end: int,
        left: int,
        right: int,
        x: int,
    ) -> int:
        if node is None or right < start or end < left:
            return 0
        if left <= start and end <= right:
            return bisect_right(node.values, x)
        mid = (start + end) // 2
        return self._query(node.left, start, mid, left, right, x) + self._query(
            node.right, mid + 1, end, left, right, x
        )

    def count_less_equal(self, left: int, right: int, x: int) -> int:
        """Number of elements <= x among positions left .. right."""
        _check_range(left, right, self.n)
        return self._query(self._root, 0, self.n - 1, left, right, x)


class _WaveletNode:
    __slots__ = ("low", "high", "prefix", "left", "right")

    def __init__(self, low: int, high: int) -> None:
        self.low = low
        self.high = high
        self.prefix: list[int] = [0]
        self.left: Optional[_WaveletNode] = None
        self.right: Optional[_WaveletNode] = None


class WaveletTree:
    """K-th smallest queries over ranges of a static array."""

    def __init__(self, values: Iterable[int]) -> None:
        items = _non_empty(values)
        self.n = len(items)
        self._values = sorted(set(items))
        compressed = [bisect_left(self._values, v) for v in items]
        root = self._build(compressed, 0, len(self._values) - 1)
        assert root is not None
        self._root = root

    def _build(self, items: list[int], low: int, high: int) -> Optional[_WaveletNode]:
        if not items:
            return None
        node = _WaveletNode(low, high)
        if low == high:
            return node
        mid = (low + high) // 2
        left_items: list[int] = []
        right_items: list[int] = []
        prefix = node.prefix
        for value in items:
            if value <= mid:
                left_items.append(value)
                prefix.append(prefix[-1] + 1)
            else:
                right_items.append(value)
                prefix.append(prefix[-1])
        node.left = self._build(left_items, low, mid)
        node.right = self._build(right_items, mid + 1, high)
        return node

    def kth_smallest(self, left: int, right: int, k: int) -> int:
        """The k-th smallest value (1-based) among positions left .. right."""
        _check_range(left, right, self.n)
        _check_k(k, left, right)
        node = self._root
        while node.low != node.high:
            prefix = node.prefix
            left_count = prefix[right + 1] - prefix[left]
            if k <= left_count:
                left, right = prefix[left], prefix[right + 1] - 1
                child = node.left
            else:
                left, right = left - prefix[left], right - prefix[right + 1]
                k -= left_count
                child = node.right
            assert child is not None
            node = child
        return self._values[node.low]
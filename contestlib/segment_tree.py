"""Segment trees for range sums: point updates, and range additions with lazy propagation."""

from __future__ import annotations

from collections.abc import Iterable


def _check_index(idx: int, n: int) -> None:
    if not 0 <= idx < n:
        raise IndexError(f"index {idx} out of range")


def _check_range(left: int, right: int, n: int) -> None:
    if not 0 <= left <= right < n:
        raise IndexError(f"range [{left}, {right}] invalid")


class SegmentTree:
    """Range sum queries with point assignment."""

    def __init__(self, values: Iterable[int]) -> None:
        items = list(values)
        if not items:
            raise ValueError("segment tree needs at least one value")
        self.n = len(items)
        self.tree = [0] * (4 * self.n)
        self._build(items, 1, 0, self.n - 1)

    def _build(self, items: list[int], node: int, start: int, end: int) -> None:
        if start == end:
            self.tree[node] = items[start]
            return
        mid = (start + end) // 2
        self._build(items, 2 * node, start, mid)
        self._build(items, 2 * node + 1, mid + 1, end)
        self.tree[node] = self.tree[2 * node] + self.tree[2 * node + 1]

    def _update(self, node: int, start: int, end: int, idx: int, value: int) -> None:
        if start == end:
            self.tree[node] = value
            return
        mid = (start + end) // 2
        if idx <= mid:
            self._update(2 * node, start, mid, idx, value)
        else:
            self._update(2 * node + 1, mid + 1, end, idx, value)
        self.tree[node] = self.tree[2 * node] + self.tree[2 * node + 1]

    def _query(self, node: int, start: int, end: int, left: int, right: int) -> int:
        if right < start or end < left:
            return 0
        if left <= start and end <= right:
            return self.tree[node]
        mid = (start + end) // 2
        return self._query(2 * node, start, mid, left, right) + self._query(
            2 * node + 1, mid + 1, end, left, right
        )

    def update(self, idx: int, value: int) -> None:
        """Set the element at idx to value."""
        _check_index(idx, self.n)
        self._update(1, 0, self.n - 1, idx, value)

    def query(self, left: int, right: int) -> int:
        """Sum of elements left .. right inclusive."""
        _check_range(left, right, self.n)
        return self._query(1, 0, self.n - 1, left, right)


class LazySegmentTree:
    """Range sum queries with range additions."""

    def __init__(self, values: Iterable[int]) -> None:
        items = list(values)
        if not items:
            raise ValueError("segment tree needs at least one value")
        self.n = len(items)
        self.tree = [0] * (4 * self.n)
        self.lazy = [0] * (4 * self.n)
        self._build(items, 1, 0, self.n - 1)

    def _build(self, items: list[int], node: int, start: int, end: int) -> None:
        if start == end:
            self.tree[node] = items[start]
            return
        mid = (start + end) // 2
        self._build(items, 2 * node, start, mid)
        self._build(items, 2 * node + 1, mid + 1, end)
        self.tree[node] = self.tree[2 * node] + self.tree[2 * node + 1]

    def _push(self, node: int, start: int, end: int) -> None:
        pending = self.lazy[node]
        if pending:
            self.tree[node] += pending * (end - start + 1)
            if start != end:
                self.lazy[2 * node] += pending
                self.lazy[2 * node + 1] += pending
            self.lazy[node] = 0

    def _update_range(
        self, node: int, start: int, end: int, left: int, right: int, value: int
    ) -> None:
        self._push(node, start, end)
        if start > right or end < left:
            return
        if left <= start and end <= right:
            self.lazy[node] += value
            self._push(node, start, end)
            return
        mid = (start + end) // 2
        self._update_range(2 * node, start, mid, left, right, value)
        self._update_range(2 * node + 1, mid + 1, end, left, right, value)
        self._push(2 * node, start, mid)
        self._push(2 * node + 1, mid + 1, end)
        self.tree[node] = self.tree[2 * node] + self.tree[2 * node + 1]

    def _query_range(self, node: int, start: int, end: int, left: int, right: int) -> int:
        if start > right or end < left:
            return 0
        self._push(node, start, end)
        if left <= start and end <= right:
            return self.tree[node]
        mid = (start + end) // 2
        return self._query_range(2 * node, start, mid, left, right) + self._query_range(
            2 * node + 1, mid + 1, end, left, right
        )

    def update_range(self, left: int, right: int, value: int) -> None:
        """Add value to every element left .. right inclusive."""
        _check_range(left, right, self.n)
        self._update_range(1, 0, self.n - 1, left, right, value)

    def query_range(self, left: int, right: int) -> int:
        """Sum of elements left .. right inclusive."""
        _check_range(left, right, self.n)
        return self._query_range(1, 0, self.n - 1, left, right)
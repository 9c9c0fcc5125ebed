"""Segment tree variants: range max, range gcd, 2D sums, range assignment and range xor."""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from collections.abc import Iterable, Sequence
from typing import Any, Callable, Optional


def _check_index(idx: int, n: int) -> None:
    if not 0 <= idx < n:
        raise IndexError(f"index {idx} out of range")


def _check_range(left: int, right: int, n: int) -> None:
    if not 0 <= left <= right < n:
        raise IndexError(f"range [{left}, {right}] invalid")


def _non_empty(values: Iterable[int]) -> list[int]:
    items = list(values)
    if not items:
        raise ValueError("segment tree needs at least one value")
    return items


class _CombiningTree:
    """Point assignment and range queries under an associative combine."""

    def __init__(
        self,
        values: Iterable[int],
        combine: Callable[[Any, Any], Any],
        identity: Any,
    ) -> None:
        items = _non_empty(values)
        self._combine = combine
        self._identity = identity
        self.n = len(items)
        self.tree: list = [identity] * (4 * self.n)
        self._build(items, 1, 0, self.n - 1)

    def _build(self, items: list[int], node: int, start: int, end: int) -> None:
        if start == end:
            self.tree[node] = items[start]
            return
        mid = (start + end) // 2
        self._build(items, 2 * node, start, mid)
        self._build(items, 2 * node + 1, mid + 1, end)
        self.tree[node] = self._combine(self.tree[2 * node], self.tree[2 * node + 1])

    def _update(self, node: int, start: int, end: int, idx: int, value: int) -> None:
        if start == end:
            self.tree[node] = value
            return
        mid = (start + end) // 2
        if idx <= mid:
            self._update(2 * node, start, mid, idx, value)
        else:
            self._update(2 * node + 1, mid + 1, end, idx, value)
        self.tree[node] = self._combine(self.tree[2 * node], self.tree[2 * node + 1])

    def _query(self, node: int, start: int, end: int, left: int, right: int):
        if right < start or end < left:
            return self._identity
        if left <= start and end <= right:
            return self.tree[node]
        mid = (start + end) // 2
        return self._combine(
            self._query(2 * node, start, mid, left, right),
            self._query(2 * node + 1, mid + 1, end, left, right),
        )

    def _point_update(self, idx: int, value: int) -> None:
        _check_index(idx, self.n)
        self._update(1, 0, self.n - 1, idx, value)

    def _range_query(self, left: int, right: int):
        _check_range(left, right, self.n)
        return self._query(1, 0, self.n - 1, left, right)


class MaxSegmentTree(_CombiningTree):
    """Range maximum with point assignment."""

    def __init__(self, values: Iterable[int]) -> None:
        super().__init__(values, max, -math.inf)

    def update(self, idx: int, value: int) -> None:
        """Set the element at idx to value."""
        self._point_update(idx, value)

    def query(self, left: int, right: int) -> int:
        """Maximum over left .. right inclusive."""
        return self._range_query(left, right)


class GCDSegmentTree(_CombiningTree):
    """Range greatest common divisor with point assignment."""

    def __init__(self, values: Iterable[int]) -> None:
        super().__init__(values, math.gcd, 0)

    def update(self, idx: int, value: int) -> None:
        """Set the element at idx to value."""
        self._point_update(idx, value)

    def query(self, left: int, right: int) -> int:
        """Greatest common divisor over left .. right inclusive."""
        return self._range_query(left, right)


class SegmentTree2D:
    """Rectangle sums with point assignment over a matrix."""

    def __init__(self, matrix: Sequence[Sequence[int]]) -> None:
        self.arr = [list(row) for row in matrix]
        if not self.arr or not self.arr[0]:
            raise ValueError("matrix must be non-empty")
        self.m = len(self.arr[0])
        if any(len(row) != self.m for row in self.arr):
            raise ValueError("matrix rows must have equal length")
        self.n = len(self.arr)
        self.tree = [[0] * (4 * self.m) for _ in range(4 * self.n)]
        self._build_x(1, 0, self.n - 1)

    def _build_y(self, vx: int, lx: int, rx: int, vy: int, ly: int, ry: int) -> None:
        if ly == ry:
            if lx == rx:
                self.tree[vx][vy] = self.arr[lx][ly]
            else:
                self.tree[vx][vy] = self.tree[2 * vx][vy] + self.tree[2 * vx + 1][vy]
            return
        my = (ly + ry) // 2
        self._build_y(vx, lx, rx, 2 * vy, ly, my)
        self._build_y(vx, lx, rx, 2 * vy + 1, my + 1, ry)
        self.tree[vx][vy] = self.tree[vx][2 * vy] + self.tree[vx][2 * vy + 1]

    def _build_x(self, vx: int, lx: int, rx: int) -> None:
        if lx != rx:
            mx = (lx + rx) // 2
            self._build_x(2 * vx, lx, mx)
            self._build_x(2 * vx + 1, mx + 1, rx)
        self._build_y(vx, lx, rx, 1, 0, self.m - 1)

    def _update_y(
        self, vx: int, lx: int, rx: int, vy: int, ly: int, ry: int, y: int, value: int
    ) -> None:
        if ly == ry:
            if lx == rx:
                self.tree[vx][vy] = value
            else:
                self.tree[vx][vy] = self.tree[2 * vx][vy] + self.tree[2 * vx + 1][vy]
            return
        my = (ly + ry) // 2
        if y <= my:
            self._update_y(vx, lx, rx, 2 * vy, ly, my, y, value)
        else:
            self._update_y(vx, lx, rx, 2 * vy + 1, my + 1, ry, y, value)
        self.tree[vx][vy] = self.tree[vx][2 * vy] + self.tree[vx][2 * vy + 1]

    def _update_x(self, vx: int, lx: int, rx: int, x: int, y: int, value: int) -> None:
        if lx != rx:
            mx = (lx + rx) // 2
            if x <= mx:
                self._update_x(2 * vx, lx, mx, x, y, value)
            else:
                self._update_x(2 * vx + 1, mx + 1, rx, x, y, value)
        self._update_y(vx, lx, rx, 1, 0, self.m - 1, y, value)

    def _query_y(self, vx: int, vy: int, ly: int, ry: int, y1: int, y2: int) -> int:
        if y1 > y2:
            return 0
        if y1 == ly and y2 == ry:
            return self.tree[vx][vy]
        my = (ly + ry) // 2
        return self._query_y(vx, 2 * vy, ly, my, y1, min(y2, my)) + self._query_y(
            vx, 2 * vy + 1, my + 1, ry, max(y1, my + 1), y2
        )

    def _query_x(
        self, vx: int, lx: int, rx: int, x1: int, x2: int, y1: int, y2: int
    ) -> int:
        if x1 > x2:
            return 0
        if x1 == lx and x2 == rx:
            return self._query_y(vx, 1, 0, self.m - 1, y1, y2)
        mx = (lx + rx) // 2
        return self._query_x(2 * vx, lx, mx, x1, min(x2, mx), y1, y2) + self._query_x(
            2 * vx + 1, mx + 1, rx, max(x1, mx + 1), x2, y1, y2
        )

    def update(self, x: int, y: int, value: int) -> None:
        """Set cell (x, y) to value."""
        _check_index(x, self.n)
        _check_index(y, self.m)
        self.arr[x][y] = value
        self._update_x(1, 0, self.n - 1, x, y, value)

    def query(self, x1: int, y1: int, x2: int, y2: int) -> int:
        """Sum over rows x1 .. x2 and columns y1 .. y2 inclusive."""
        _check_range(x1, x2, self.n)
        _check_range(y1, y2, self.m)
        return self._query_x(1, 0, self.n - 1, x1, x2, y1, y2)


class _LazyRangeTree(ABC):
    """Shared build, update and query walk for lazily updated range trees."""

    def __init__(
        self,
        values: Iterable[int],
        merge: Callable[[int, int], int],
        no_pending: Optional[int],
    ) -> None:
        items = _non_empty(values)
        self._merge = merge
        self.n = len(items)
        self.tree = [0] * (4 * self.n)
        self.lazy: list = [no_pending] * (4 * self.n)
        self._build(items, 1, 0, self.n - 1)

    def _build(self, items: list[int], node: int, start: int, end: int) -> None:
        if start == end:
            self.tree[node] = items[start]
            return
        mid = (start + end) // 2
        self._build(items, 2 * node, start, mid)
        self._build(items, 2 * node + 1, mid + 1, end)
        self.tree[node] = self._merge(self.tree[2 * node], self.tree[2 * node + 1])

    @abstractmethod
    def _push(self, node: int, start: int, end: int) -> None:
        """Apply the pending tag of node and hand it to its children."""

    @abstractmethod
    def _tag(self, node: int, value: int) -> None:
        """Record an update on node as pending."""

    def _update_range(
        self, node: int, start: int, end: int, left: int, right: int, value: int
    ) -> None:
        self._push(node, start, end)
        if start > right or end < left:
            return
        if left <= start and end <= right:
            self._tag(node, value)
            self._push(node, start, end)
            return
        mid = (start + end) // 2
        self._update_range(2 * node, start, mid, left, right, value)
        self._update_range(2 * node + 1, mid + 1, end, left, right, value)
        self._push(2 * node, start, mid)
        self._push(2 * node + 1, mid + 1, end)
        self.tree[node] = self._merge(self.tree[2 * node], self.tree[2 * node + 1])

    def _query_range(self, node: int, start: int, end: int, left: int, right: int) -> int:
        if start > right or end < left:
            return 0
        self._push(node, start, end)
        if left <= start and end <= right:
            return self.tree[node]
        mid = (start + end) // 2
        return self._merge(
            self._query_range(2 * node, start, mid, left, right),
            self._query_range(2 * node + 1, mid + 1, end, left, right),
        )

    def update_range(self, left: int, right: int, value: int) -> None:
        _check_range(left, right, self.n)
        self._update_range(1, 0, self.n - 1, left, right, value)

    def query_range(self, left: int, right: int) -> int:
        _check_range(left, right, self.n)
        return self._query_range(1, 0, self.n - 1, left, right)


class RangeAssignmentTree(_LazyRangeTree):
    """Range sums with assignment of one value to a whole range."""

    def __init__(self, values: Iterable[int]) -> None:
        super().__init__(values, lambda a, b: a + b, None)

    def _tag(self, node: int, value: int) -> None:
        self.lazy[node] = value

    def _push(self, node: int, start: int, end: int) -> None:
        pending = self.lazy[node]
        if pending is None:
            return
        self.tree[node] = pending * (end - start + 1)
        if start != end:
            self.lazy[2 * node] = pending
            self.lazy[2 * node + 1] = pending
        self.lazy[node] = None

    def update_range(self, left: int, right: int, value: int) -> None:
        """Set every element left .. right inclusive to value."""
        super().update_range(left, right, value)

    def query_range(self, left: int, right: int) -> int:
        """Sum of elements left .. right inclusive."""
        return super().query_range(left, right)


class XORSegmentTree(_LazyRangeTree):
    """Range xor-aggregates with xor of one value into a whole range."""

    def __init__(self, values: Iterable[int]) -> None:
        super().__init__(values, lambda a, b: a ^ b, 0)

    def _tag(self, node: int, value: int) -> None:
        self.lazy[node] ^= value

    def _push(self, node: int, start: int, end: int) -> None:
        pending = self.lazy[node]
        if not pending:
            return
        # xor-ing the same value into an even number of elements cancels out
        if (end - start + 1) % 2:
            self.tree[node] ^= pending
        if start != end:
            self.lazy[2 * node] ^= pending
            self.lazy[2 * node + 1] ^= pending
        self.lazy[node] = 0

    def update_range(self, left: int, right: int, value: int) -> None:
        """Xor value into every element left .. right inclusive."""
        super().update_range(left, right, value)

    def query_range(self, left: int, right: int) -> int:
        """Xor of elements left .. right inclusive."""
        return super().query_range(left, right)
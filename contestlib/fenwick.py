"""Fenwick (binary indexed) trees for prefix sums in one and two dimensions."""

from __future__ import annotations

from collections.abc import Iterable


class FenwickTree:
    """Point updates and prefix sums over indices 0 .. size-1."""

    def __init__(self, size: int) -> None:
        if size < 0:
            raise ValueError("size must be non-negative")
        self.n = size
        self.tree = [0] * (size + 1)

    @classmethod
    def from_values(cls, values: Iterable[int]) -> FenwickTree:
        items = list(values)
        fenwick = cls(len(items))
        for idx, value in enumerate(items):
            fenwick.update(idx, value)
        return fenwick

    def update(self, idx: int, delta: int) -> None:
        """Add delta to the element at idx."""
        if not 0 <= idx < self.n:
            raise IndexError(f"index {idx} out of range")
        i = idx + 1
        while i <= self.n:
            self.tree[i] += delta
            i += i & -i

    def prefix_sum(self, idx: int) -> int:
        """Sum of elements 0 .. idx; idx may be -1 for an empty prefix."""
        if not -1 <= idx < self.n:
            raise IndexError(f"index {idx} out of range")
        total = 0
        i = idx + 1
        while i > 0:
            total += self.tree[i]
            i -= i & -i
        return total

    def range_sum(self, left: int, right: int) -> int:
        """Sum of elements left .. right inclusive."""
        return self.prefix_sum(right) - (self.prefix_sum(left - 1) if left > 0 else 0)

    def lower_bound(self, k: int) -> int:
        """Largest count c of leading elements whose sum is <= k (non-negative values)."""
        if self.n == 0:
            return 0
        idx = 0
        for bit in range(self.n.bit_length() - 1, -1, -1):
            nxt = idx + (1 << bit)
            if nxt <= self.n and self.tree[nxt] <= k:
                k -= self.tree[nxt]
                idx = nxt
        return idx


class FenwickTree2D:
    """Point updates and rectangle sums over a rows x cols grid."""

    def __init__(self, rows: int, cols: int) -> None:
        if rows < 0 or cols < 0:
            raise ValueError("dimensions must be non-negative")
        self.n = rows
        self.m = cols
        self.tree = [[0] * (cols + 1) for _ in range(rows + 1)]

    def update(self, x: int, y: int, delta: int) -> None:
        if not (0 <= x < self.n and 0 <= y < self.m):
            raise IndexError(f"cell ({x}, {y}) out of range")
        i = x + 1
        while i <= self.n:
            row = self.tree[i]
            j = y + 1
            while j <= self.m:
                row[j] += delta
                j += j & -j
            i += i & -i

    def prefix_sum(self, x: int, y: int) -> int:
        """Sum over the rectangle (0, 0) .. (x, y); -1 gives an empty range."""
        if not (-1 <= x < self.n and -1 <= y < self.m):
            raise IndexError(f"cell ({x}, {y}) out of range")
        total = 0
        i = x + 1
        while i > 0:
            row = self.tree[i]
            j = y + 1
            while j > 0:
                total += row[j]
                j -= j & -j
            i -= i & -i
        return total

    def range_sum(self, x1: int, y1: int, x2: int, y2: int) -> int:
        """Sum over the rectangle (x1, y1) .. (x2, y2) inclusive."""
        return (
            self.prefix_sum(x2, y2)
            - self.prefix_sum(x1 - 1, y2)
            - self.prefix_sum(x2, y1 - 1)
            + self.prefix_sum(x1 - 1, y1 - 1)
        )
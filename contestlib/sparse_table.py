"""Sparse table for idempotent range queries in constant time."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from typing import Generic, TypeVar

T = TypeVar("T")


class SparseTable(Generic[T]):
    """Static range queries for an idempotent merge such as min, max or gcd."""

    def __init__(self, values: Sequence[T], merge: Callable[[T, T], T]) -> None:
        if not values:
            raise ValueError("sparse table needs at least one value")
        self.n = len(values)
        self.merge = merge
        self.table: list[list[T]] = [list(values)]
        for lg in range(1, self.n.bit_length()):
            prev = self.table[-1]
            half = 1 << (lg - 1)
            self.table.append(
                [merge(prev[i], prev[i + half]) for i in range(self.n - (1 << lg) + 1)]
            )

    def query(self, left: int, right: int) -> T:
        """Merged value over left .. right inclusive."""
        if not 0 <= left <= right < self.n:
            raise IndexError(f"range [{left}, {right}] invalid")
        lg = (right - left + 1).bit_length() - 1
        row = self.table[lg]
        return self.merge(row[left], row[right - (1 << lg) + 1])
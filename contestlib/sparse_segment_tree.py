"""Dynamically allocated segment tree with range addition over huge index ranges."""

from __future__ import annotations

import math
from typing import Optional


class _Node:
    __slots__ = ("mn", "mx", "lazy", "left", "right")

    def __init__(self) -> None:
        self.mn = 0
        self.mx = 0
        self.lazy = 0
        self.left: Optional[_Node] = None
        self.right: Optional[_Node] = None


def _apply(node: _Node, value: int) -> None:
    node.lazy += value
    node.mn += value
    node.mx += value


def _push(node: _Node) -> tuple[_Node, _Node]:
    if node.left is None:
        node.left = _Node()
    if node.right is None:
        node.right = _Node()
    if node.lazy:
        _apply(node.left, node.lazy)
        _apply(node.right, node.lazy)
        node.lazy = 0
    return node.left, node.right


class LazySparseSegmentTree:
    """Range add and range min/max over indices 0 .. n-1, all starting at zero.

    Nodes are created only where needed, so n may be as large as 10**18.
    """

    def __init__(self, n: int) -> None:
        if n <= 0:
            raise ValueError("size must be positive")
        self.n = n
        self._root = _Node()

    def _check_range(self, left: int, right: int) -> None:
        if not 0 <= left <= right < self.n:
            raise IndexError(f"range [{left}, {right}] invalid")

    def _add(
        self, node: _Node, lo: int, hi: int, left: int, right: int, value: int
    ) -> None:
        if right < lo or left > hi:
            return
        if left <= lo and hi <= right:
            _apply(node, value)
            return
        lchild, rchild = _push(node)
        mid = (lo + hi) // 2
        self._add(lchild, lo, mid, left, right, value)
        self._add(rchild, mid + 1, hi, left, right, value)
        node.mn = min(lchild.mn, rchild.mn)
        node.mx = max(lchild.mx, rchild.mx)

    def _query(
        self, node: _Node, lo: int, hi: int, left: int, right: int
    ) -> tuple[float, float]:
        if right < lo or left > hi:
            return math.inf, -math.inf
        if left <= lo and hi <= right:
            return node.mn, node.mx
        lchild, rchild = _push(node)
        mid = (lo + hi) // 2
        lmin, lmax = self._query(lchild, lo, mid, left, right)
        rmin, rmax = self._query(rchild, mid + 1, hi, left, right)
        return min(lmin, rmin), max(lmax, rmax)

    def range_add(self, left: int, right: int, value: int) -> None:
        """Add value to every index left .. right inclusive."""
        self._check_range(left, right)
        self._add(self._root, 0, self.n - 1, left, right, value)

    def query(self, left: int, right: int) -> tuple[int, int]:
        """(minimum, maximum) over indices left .. right inclusive."""
        self._check_range(left, right)
        lo, hi = self._query(self._root, 0, self.n - 1, left, right)
        return int(lo), int(hi)
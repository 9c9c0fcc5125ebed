"""Disjoint set union with path compression and union by rank."""

from __future__ import annotations


class DisjointSet:
    """Union-find over the elements 0 .. n-1."""

    def __init__(self, n: int) -> None:
        if n < 0:
            raise ValueError("size must be non-negative")
        self.parent = list(range(n))
        self.rank = [0] * n
        self.size = [1] * n
        self._components = n

    def _check(self, x: int) -> None:
        if not 0 <= x < len(self.parent):
            raise IndexError(f"element {x} out of range")

    def find(self, x: int) -> int:
        """Representative of x's set."""
        self._check(x)
        root = x
        while self.parent[root] != root:
            root = self.parent[root]
        while self.parent[x] != root:
            self.parent[x], x = root, self.parent[x]
        return root

    def unite(self, x: int, y: int) -> bool:
        """Merge the sets of x and y; False if they were already one set."""
        px, py = self.find(x), self.find(y)
        if px == py:
            return False
        if self.rank[px] < self.rank[py]:
            px, py = py, px
        self.parent[py] = px
        self.size[px] += self.size[py]
        if self.rank[px] == self.rank[py]:
            self.rank[px] += 1
        self._components -= 1
        return True

    def connected(self, x: int, y: int) -> bool:
        return self.find(x) == self.find(y)

    def size_of(self, x: int) -> int:
        """Number of elements in x's set."""
        return self.size[self.find(x)]

    def components(self) -> int:
        """Number of disjoint sets."""
        return self._components
"""Heavy-light decomposition for path sums on a tree."""

from __future__ import annotations

from contestlib.fenwick import FenwickTree


class HeavyLightDecomposition:
    """Point assignment and path-sum queries on a tree rooted at vertex 0."""

    def __init__(self, n: int) -> None:
        if n <= 0:
            raise ValueError("tree needs at least one vertex")
        self.n = n
        self.adj: list[list[int]] = [[] for _ in range(n)]
        self.parent = [-1] * n
        self.depth = [0] * n
        self.heavy = [-1] * n
        self.head = [0] * n
        self.pos = [0] * n
        self.size = [1] * n
        self._values = [0] * n
        self._sums = FenwickTree(n)
        self._built = False

    def _check(self, v: int) -> None:
        if not 0 <= v < self.n:
            raise IndexError(f"vertex {v} out of range")

    def add_edge(self, u: int, v: int) -> None:
        self._check(u)
        self._check(v)
        self.adj[u].append(v)
        self.adj[v].append(u)
        self._built = False

    def build(self) -> None:
        """Root the tree at 0 and split it into heavy paths."""
        n = self.n
        self.parent = [-1] * n
        self.depth = [0] * n
        self.heavy = [-1] * n
        self.size = [1] * n

        seen = [False] * n
        seen[0] = True
        order: list[int] = []
        stack = [0]
        while stack:
            v = stack.pop()
            order.append(v)
            for u in self.adj[v]:
                if u == self.parent[v]:
                    continue
                if seen[u]:
                    raise ValueError("graph contains a cycle")
                seen[u] = True
                self.parent[u] = v
                self.depth[u] = self.depth[v] + 1
                stack.append(u)
        if not all(seen):
            raise ValueError("graph is not connected")

        for v in reversed(order):
            largest = 0
            for u in self.adj[v]:
                if u == self.parent[v]:
                    continue
                self.size[v] += self.size[u]
                if self.size[u] > largest:
                    largest = self.size[u]
                    self.heavy[v] = u

        timer = 0
        stack = [(0, 0)]
        while stack:
            v, h = stack.pop()
            self.head[v] = h
            self.pos[v] = timer
            timer += 1
            light = [
                u for u in self.adj[v] if u != self.parent[v] and u != self.heavy[v]
            ]
            stack.extend((u, u) for u in reversed(light))
            if self.heavy[v] != -1:
                stack.append((self.heavy[v], h))

        self._sums = FenwickTree(n)
        for v, value in enumerate(self._values):
            if value:
                self._sums.update(self.pos[v], value)
        self._built = True

    def _require_built(self) -> None:
        if not self._built:
            raise RuntimeError("call build() before updating or querying")

    def update(self, v: int, value: int) -> None:
        """Set the value stored at vertex v."""
        self._require_built()
        self._check(v)
        self._sums.update(self.pos[v], value - self._values[v])
        self._values[v] = value

    def query(self, u: int, v: int) -> int:
        """Sum of the values on the path between u and v, both included."""
        self._require_built()
        self._check(u)
        self._check(v)
        total = 0
        while self.head[u] != self.head[v]:
            if self.depth[self.head[u]] > self.depth[self.head[v]]:
                u, v = v, u
            total += self._sums.range_sum(self.pos[self.head[v]], self.pos[v])
            v = self.parent[self.head[v]]
        if self.depth[u] > self.depth[v]:
            u, v = v, u
        return total + self._sums.range_sum(self.pos[u], self.pos[v])
"""Centroid decomposition of a tree."""

from __future__ import annotations


class CentroidDecomposition:
    """Tree on vertices 0 .. n-1 split recursively at centroids."""

    def __init__(self, n: int) -> None:
        self.n = n
        self.adj: list[list[int]] = [[] for _ in range(n)]
        self.removed = [False] * n
        self.subtree_size = [0] * n

    def add_edge(self, u: int, v: int) -> None:
        self.adj[u].append(v)
        self.adj[v].append(u)

    def compute_subtree_sizes(self, v: int, parent: int = -1) -> int:
        """Fill subtree sizes of the live part rooted at v; return v's size."""
        order: list[tuple[int, int]] = []
        stack = [(v, parent)]
        while stack:
            node, par = stack.pop()
            order.append((node, par))
            stack.extend(
                (u, node) for u in self.adj[node] if u != par and not self.removed[u]
            )
        for node, par in reversed(order):
            self.subtree_size[node] = 1 + sum(
                self.subtree_size[u]
                for u in self.adj[node]
                if u != par and not self.removed[u]
            )
        return self.subtree_size[v]

    def find_centroid(self, v: int, tree_size: int, parent: int = -1) -> int:
        """Walk from v towards heavy subtrees until none exceeds half the tree."""
        while True:
            for u in self.adj[v]:
                if (
                    u != parent
                    and not self.removed[u]
                    and self.subtree_size[u] > tree_size // 2
                ):
                    parent, v = v, u
                    break
            else:
                return v

    def decompose(self, v: int = 0) -> list[int]:
        """Remove centroids recursively from v's component; return them in order."""
        order: list[int] = []
        pending = [v]
        while pending:
            start = pending.pop()
            size = self.compute_subtree_sizes(start)
            centroid = self.find_centroid(start, size)
            self.removed[centroid] = True
            order.append(centroid)
            pending.extend(u for u in reversed(self.adj[centroid]) if not self.removed[u])
        return order
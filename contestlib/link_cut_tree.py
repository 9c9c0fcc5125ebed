"""Link-cut tree for dynamic forests with path sums."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Optional


class _Node:
    __slots__ = ("left", "right", "parent", "value", "total", "reversed")

    def __init__(self, value: int) -> None:
        self.left: Optional[_Node] = None
        self.right: Optional[_Node] = None
        self.parent: Optional[_Node] = None
        self.value = value
        self.total = value
        self.reversed = False


def _is_root(x: _Node) -> bool:
    p = x.parent
    return p is None or (p.left is not x and p.right is not x)


def _push(x: _Node) -> None:
    if x.reversed:
        x.left, x.right = x.right, x.left
        if x.left is not None:
            x.left.reversed ^= True
        if x.right is not None:
            x.right.reversed ^= True
        x.reversed = False


def _pull(x: _Node) -> None:
    x.total = x.value
    if x.left is not None:
        x.total += x.left.total
    if x.right is not None:
        x.total += x.right.total


def _rotate(x: _Node) -> None:
    p = x.parent
    assert p is not None
    g = p.parent
    if p.left is x:
        p.left = x.right
        if x.right is not None:
            x.right.parent = p
        x.right = p
    else:
        p.right = x.left
        if x.left is not None:
            x.left.parent = p
        x.left = p
    p.parent = x
    x.parent = g
    if g is not None:
        if g.left is p:
            g.left = x
        elif g.right is p:
            g.right = x
    _pull(p)
    _pull(x)


def _splay(x: _Node) -> None:
    path = [x]
    y = x
    while not _is_root(y):
        y = y.parent  # type: ignore[assignment]
        path.append(y)
    for node in reversed(path):
        _push(node)
    while not _is_root(x):
        p = x.parent
        assert p is not None
        if not _is_root(p):
            g = p.parent
            assert g is not None
            if (g.left is p) == (p.left is x):
                _rotate(p)
            else:
                _rotate(x)
        _rotate(x)


def _access(x: _Node) -> None:
    last: Optional[_Node] = None
    y: Optional[_Node] = x
    while y is not None:
        _splay(y)
        y.right = last
        _pull(y)
        last = y
        y = y.parent


def _make_root(x: _Node) -> None:
    _access(x)
    _splay(x)
    x.reversed ^= True


class LinkCutTree:
    """Forest on vertices 0 .. n-1 supporting link, cut and path sums."""

    def __init__(self, n: int, values: Optional[Sequence[int]] = None) -> None:
        if n < 0:
            raise ValueError("size must be non-negative")
        if values is None:
            values = [0] * n
        elif len(values) != n:
            raise ValueError("need exactly one value per vertex")
        self._nodes = [_Node(value) for value in values]

    def _node(self, v: int) -> _Node:
        if not 0 <= v < len(self._nodes):
            raise IndexError(f"vertex {v} out of range")
        return self._nodes[v]

    def _expose(self, u: int, v: int) -> tuple[_Node, _Node]:
        nu, nv = self._node(u), self._node(v)
        _make_root(nu)
        _access(nv)
        _splay(nv)
        return nu, nv

    def connected(self, u: int, v: int) -> bool:
        """True if u and v lie in the same tree."""
        if u == v:
            self._node(u)
            return True
        nu, _ = self._expose(u, v)
        return nu.parent is not None

    def link(self, u: int, v: int) -> None:
        """Add the edge u-v joining two different trees."""
        if self.connected(u, v):
            raise ValueError(f"vertices {u} and {v} are already connected")
        nu = self._nodes[u]
        _make_root(nu)
        nu.parent = self._nodes[v]

    def cut(self, u: int, v: int) -> bool:
        """Remove the edge u-v; False if there is no such edge."""
        if u == v:
            self._node(u)
            return False
        nu, nv = self._expose(u, v)
        if nv.left is nu:
            _push(nu)
            if nu.right is None:
                nv.left = None
                nu.parent = None
                _pull(nv)
                return True
        return False

    def path_sum(self, u: int, v: int) -> int:
        """Sum of the values on the path from u to v, both included."""
        if not self.connected(u, v):
            raise ValueError(f"vertices {u} and {v} are not connected")
        if u == v:
            return self._nodes[u].value
        return self._nodes[v].total
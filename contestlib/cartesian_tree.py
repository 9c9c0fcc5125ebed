"""Cartesian tree: a min-heap by value that is a search tree by position."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Optional


class _Node:
    __slots__ = ("value", "index", "left", "right")

    def __init__(self, value: int, index: int) -> None:
        self.value = value
        self.index = index
        self.left: Optional[_Node] = None
        self.right: Optional[_Node] = None


class CartesianTree:
    """Tree whose root holds the leftmost minimum of the array."""

    def __init__(self, values: Iterable[int]) -> None:
        stack: list[_Node] = []
        for index, value in enumerate(values):
            node = _Node(value, index)
            last: Optional[_Node] = None
            while stack and stack[-1].value > value:
                last = stack.pop()
            node.left = last
            if stack:
                stack[-1].right = node
            stack.append(node)
        self._root: Optional[_Node] = stack[0] if stack else None

    def _walk_inorder(self) -> Iterator[tuple[int, int]]:
        stack: list[_Node] = []
        node = self._root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            yield node.value, node.index
            node = node.right

    def _walk_preorder(self) -> Iterator[tuple[int, int]]:
        stack = [self._root] if self._root is not None else []
        while stack:
            node = stack.pop()
            yield node.value, node.index
            if node.right is not None:
                stack.append(node.right)
            if node.left is not None:
                stack.append(node.left)

    def inorder(self) -> list[tuple[int, int]]:
        """(value, index) pairs in in-order, which is array order."""
        return list(self._walk_inorder())

    def preorder(self) -> list[tuple[int, int]]:
        """(value, index) pairs in pre-order, root first."""
        return list(self._walk_preorder())
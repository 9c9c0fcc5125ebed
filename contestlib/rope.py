"""Rope: a binary tree of string pieces for cheap inserts and removals."""

from __future__ import annotations

from typing import Optional


class _Node:
    __slots__ = ("text", "left", "right", "length")

    def __init__(
        self,
        text: str = "",
        left: Optional[_Node] = None,
        right: Optional[_Node] = None,
    ) -> None:
        self.text = text
        self.left = left
        self.right = right
        self.length = len(text) + (left.length if left else 0) + (right.length if right else 0)

    @property
    def is_leaf(self) -> bool:
        return self.left is None and self.right is None


def _concat(left: Optional[_Node], right: Optional[_Node]) -> Optional[_Node]:
    if left is None:
        return right
    if right is None:
        return left
    return _Node(left=left, right=right)


def _leaf(text: str) -> Optional[_Node]:
    return _Node(text) if text else None


def _split(node: Optional[_Node], index: int) -> tuple[Optional[_Node], Optional[_Node]]:
    if node is None:
        return None, None
    if index <= 0:
        return None, node
    if index >= node.length:
        return node, None
    if node.is_leaf:
        return _leaf(node.text[:index]), _leaf(node.text[index:])
    assert node.left is not None
    left_len = node.left.length
    if index <= left_len:
        a, b = _split(node.left, index)
        return a, _concat(b, node.right)
    a, b = _split(node.right, index - left_len)
    return _concat(node.left, a), b


def _to_string(node: Optional[_Node]) -> str:
    parts: list[str] = []
    stack = [node] if node is not None else []
    while stack:
        current = stack.pop()
        if current.is_leaf:
            parts.append(current.text)
            continue
        if current.right is not None:
            stack.append(current.right)
        if current.left is not None:
            stack.append(current.left)
    return "".join(parts)


class Rope:
    """Mutable string held as a tree of pieces."""

    def __init__(self, text: str = "") -> None:
        self._root = _leaf(text)

    def __len__(self) -> int:
        return self._root.length if self._root is not None else 0

    def __str__(self) -> str:
        return _to_string(self._root)

    def char_at(self, index: int) -> str:
        """Character at index, counting from 0."""
        if not 0 <= index < len(self):
            raise IndexError(f"index {index} out of range")
        node = self._root
        while node is not None and not node.is_leaf:
            assert node.left is not None
            if index < node.left.length:
                node = node.left
            else:
                index -= node.left.length
                node = node.right
        assert node is not None
        return node.text[index]

    def _check_start(self, start: int) -> None:
        if not 0 <= start <= len(self):
            raise IndexError(f"position {start} out of range")

    def insert(self, index: int, text: str) -> None:
        """Insert text before position index."""
        self._check_start(index)
        left, right = _split(self._root, index)
        self._root = _concat(_concat(left, _leaf(text)), right)

    def remove(self, start: int, length: int) -> None:
        """Delete up to length characters starting at start."""
        self._check_start(start)
        if length < 0:
            raise ValueError("length must be non-negative")
        left, rest = _split(self._root, start)
        _, right = _split(rest, length)
        self._root = _concat(left, right)

    def substring(self, start: int, length: int) -> str:
        """Up to length characters starting at start."""
        self._check_start(start)
        if length < 0:
            raise ValueError("length must be non-negative")
        _, rest = _split(self._root, start)
        middle, _ = _split(rest, length)
        return _to_string(middle)